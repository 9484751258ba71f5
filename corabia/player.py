"""Player state during a game."""

from __future__ import annotations

from dataclasses import dataclass, field

from .card import Card


@dataclass
class Player:
    """A player with a hand of cards, a current level and a failure count."""

    name: str = ""
    level: int = 1
    fails: int = 0
    cards: list[Card] = field(default_factory=list)

    @property
    def attempts(self) -> int:
        """The number of the attempt in progress (failures plus one)."""
        return self.fails + 1

    def reset(self) -> None:
        """Drop all cards and go back to the first level."""
        self.cards.clear()
        self.level = 1

    def advance_level(self) -> None:
        self.level += 1

    def add_card(self, card: Card) -> None:
        self.cards.append(card)

    def increment_fails(self) -> None:
        self.fails += 1

    def reset_fails(self) -> None:
        self.fails = 0

    def delete_cards(self) -> None:
        self.cards.clear()