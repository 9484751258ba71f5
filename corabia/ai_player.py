"""A computer-controlled player that guesses at random."""

from __future__ import annotations

import random

from .card import Suit
from .player import Player


class AIPlayer(Player):
    """A player whose answers for each level are chosen at random."""

    def __init__(self, name: str = "", rng: random.Random | None = None) -> None:
        super().__init__(name=name)
        self._rng = rng if rng is not None else random.Random()

    def decide_color(self) -> str:
        """Answer for level 1."""
        return self._rng.choice(("red", "black"))

    def decide_comparison(self) -> str:
        """Answer for level 2."""
        return self._rng.choice(("mare", "mic"))

    def decide_range(self) -> str:
        """Answer for level 3."""
        return self._rng.choice(("intre", "in afara"))

    def decide_suit(self) -> str:
        """Answer for level 4."""
        return self._rng.choice([suit.value for suit in Suit])