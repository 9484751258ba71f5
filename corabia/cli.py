"""Command-line menu for the game."""

from __future__ import annotations

from .game import Game


def main(argv: list[str] | None = None) -> int:
    """Show the main menu until the player chooses to leave."""
    game = Game()
    while True:
        print("\n=== Meniu Principal ===")
        print("1. Start joc")
        print("2. Iesire")
        try:
            raw = input("Alege optiunea: ")
        except EOFError:
            return 0
        try:
            option = int(raw.strip())
        except ValueError:
            option = 0

        if option == 1:
            try:
                game.start()
            except EOFError:
                return 0
        elif option == 2:
            print("La revedere!")
            return 0
        else:
            print("Optiune invalida! Incearca din nou.")


if __name__ == "__main__":
    raise SystemExit(main())