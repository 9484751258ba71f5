"""A deck of 52 playing cards."""

from __future__ import annotations

import random
import sys
from typing import TextIO

from .card import Card, Suit


class Deck:
    """A shuffled deck from which cards are drawn at random positions."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._cards: list[Card] = []
        self.reset()

    def reset(self) -> None:
        """Restore all 52 cards and shuffle them."""
        self._cards = [Card(value, suit) for value in range(2, 15) for suit in Suit]
        self.shuffle()

    def show_cards(self, out: TextIO | None = None) -> None:
        """Write every remaining card, one per line."""
        stream = out if out is not None else sys.stdout
        for card in self._cards:
            print(card, file=stream)

    def shuffle(self) -> None:
        """Shuffle the remaining cards."""
        self._rng.shuffle(self._cards)

    def draw(self) -> Card:
        """Remove and return a card from a random position."""
        if not self._cards:
            raise IndexError("cannot draw from an empty deck")
        return self._cards.pop(self._rng.randrange(len(self._cards)))

    def __len__(self) -> int:
        return len(self._cards)