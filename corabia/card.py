"""Playing cards used by the game."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Suit(str, Enum):
    """The four card suits."""

    HEARTS = "Hearts"
    DIAMONDS = "Diamonds"
    CLUBS = "Clubs"
    SPADES = "Spades"

    @property
    def color(self) -> str:
        """Return ``"red"`` for hearts and diamonds, ``"black"`` otherwise."""
        return "red" if self in (Suit.HEARTS, Suit.DIAMONDS) else "black"


_FACE_NAMES = {11: "J", 12: "Q", 13: "K", 14: "A"}


@dataclass(frozen=True)
class Card:
    """A card with a value from 2 to 14 (11 = J, 12 = Q, 13 = K, 14 = A)."""

    value: int
    suit: Suit

    def __post_init__(self) -> None:
        object.__setattr__(self, "suit", Suit(self.suit))

    @property
    def color(self) -> str:
        """The colour of the card's suit."""
        return self.suit.color

    def __str__(self) -> str:
        rank = _FACE_NAMES.get(self.value, str(self.value))
        return f"{rank} [{self.suit.value}]"