"""The game rules: choosing who enters the ship and playing its four levels."""

from __future__ import annotations

from typing import Callable

from .deck import Deck
from .player import Player

_CONTINUE_ANSWERS = ("da", "DA", "Da")


class Game:
    """A game session that reads answers with ``read`` and reports with ``write``."""

    def __init__(
        self,
        deck: Deck | None = None,
        read: Callable[[str], str] | None = None,
        write: Callable[[str], object] | None = None,
    ) -> None:
        self.deck = deck if deck is not None else Deck()
        self._read = read if read is not None else input
        self._write = write if write is not None else print
        self.players: list[Player] = []
        self.current_player: Player | None = None
        self.reset_game()

    def reset_game(self) -> None:
        """Refill the deck and send the current player back to level 1."""
        self.deck.reset()
        if self.current_player is not None:
            self.current_player.increment_fails()
            self.current_player.reset()

    def start(self) -> None:
        """Register the players and play rounds until they choose to stop."""
        self.players = []
        count = int(self._read("Introdu numarul de jucatori: ").strip())
        if count < 2:
            self._write("Jocul trebuie sa contina minim 2 jucatori")
        if count < 1:
            return
        for number in range(1, count + 1):
            name = self._read(f"Nume jucatorul {number}: ").strip()
            self.players.append(Player(name))

        while True:
            self._write(
                "\nFiecare jucator trage cate o carte. "
                "Cel cu cartea ce mai mica va intra in corabie"
            )
            lowest = 15
            for player in self.players:
                card = self.deck.draw()
                player.add_card(card)
                self._write(f"{player.name} a extras cartea: {card}")
                if card.value <= lowest:
                    lowest = card.value
                    self.current_player = player
                    player.delete_cards()

            player = self.current_player
            self._write(f"{player.name} a intrat in corabie!")

            while not self._play_levels():
                self.reset_game()

            self._write(
                f"{player.name} a iesit din corabie dupa {player.attempts} incercari."
            )
            answer = self._read("\nVreti sa continuati jocul? (da/nu): ").strip()
            if answer not in _CONTINUE_ANSWERS:
                break

    def _play_levels(self) -> bool:
        return all(level() for level in (self.level1, self.level2, self.level3, self.level4))

    def _ask(self, prompt: str) -> str:
        return self._read(prompt).strip()

    def _passed(self) -> bool:
        self.current_player.advance_level()
        return True

    def _failed(self) -> bool:
        self._write(
            f"Ai gresit! - Esti in corabie de: {self.current_player.attempts} runde."
        )
        return False

    def level1(self) -> bool:
        """Guess the colour of the next card."""
        choice = self._ask("\nNivelul 1: Ghiceste culoarea cartii: ")
        card = self.deck.draw()
        self.current_player.add_card(card)
        self._write(f"Ai extras: {card} - {card.color}")
        return self._passed() if choice == card.color else self._failed()

    def level2(self) -> bool:
        """Guess whether the next card is higher or lower than the previous one."""
        choice = self._ask(
            "\nNivelul 2: Mai mare sau mai mica decat cartea anterioara (mare/mic): "
        )
        previous = self.current_player.cards[-1]
        card = self.deck.draw()
        self.current_player.add_card(card)
        self._write(f"Ai extras: {card}")
        correct = (choice == "mare" and card.value >= previous.value) or (
            choice == "mic" and card.value <= previous.value
        )
        return self._passed() if correct else self._failed()

    def level3(self) -> bool:
        """Guess whether the next card lies between the last two drawn."""
        choice = self._ask(
            "\nNivelul 3: Intre sau in afara cartilor extrase (intre/in afara): "
        )
        first, second = self.current_player.cards[-2:]
        card = self.deck.draw()
        low = min(first.value, second.value)
        high = max(first.value, second.value)
        self._write(f"{low} {high}")
        self._write(f"Ai extras: {card}")
        value = card.value
        correct = (choice == "intre" and low <= value <= high) or (
            choice == "in afara" and (value <= low or value >= high)
        )
        return self._passed() if correct else self._failed()

    def level4(self) -> bool:
        """Guess the suit of the next card."""
        choice = self._ask(
            "\nNivelul 4: Ghiceste simbolul (Hearts, Diamonds, Clubs, Spade): "
        )
        card = self.deck.draw()
        self._write(f"Ai extras: {card}")
        return self._passed() if card.suit.value == choice else self._failed()