# corabia

A card game for the terminal. Several people play it at one keyboard.

At the start of each round every player draws one card. The player with the
lowest card gets on "the ship". If two cards tie for lowest, the player who
drew later gets on. That player has to get off again by making four correct
guesses in a row:

1. **Colour**: is the next card `red` or `black`?
2. **Higher or lower**: is the next card `mare` (higher) or `mic` (lower)
   than the previous one? An equal value counts as correct for both.
3. **Inside or outside**: does the next card fall `intre` (between) the last
   two cards or `in afara` (outside) them? A card equal to either bound counts
   as correct for both.
4. **Suit**: `Hearts`, `Diamonds`, `Clubs` or `Spades`. Answers must match
   exactly.

After a wrong guess the deck is rebuilt and the player starts again from
level 1. The game counts the tries. When the player gets off, the game says
how many tries it took and asks whether to play another round.

## Installation

```
pip install .
```

## Playing

```
corabia
```

The command shows a menu:

```
=== Meniu Principal ===
1. Start joc
2. Iesire
```

Choose `1` to start a game. Enter the number of players and their names.
With fewer than two players the game prints a warning. Then answer the prompt
for each level. Answer `da`, `Da` or `DA` to play another round, or anything
else to go back to the menu. Choose `2`, or end the input, to quit.

## Using it as a library

```python
import random

from corabia.deck import Deck
from corabia.player import Player

deck = Deck(random.Random(7))
player = Player("Ana")
player.add_card(deck.draw())
print(player.cards[-1], len(deck))  # a card such as "Q [Hearts]", then 51
```

- `corabia.card`: `Suit` (each suit has a `color`) and the frozen `Card`
  dataclass. A card has a `value` from 2 to 14, where 11 to 14 print as
  J, Q, K and A, and a `suit`.
- `corabia.deck.Deck`: the 52 cards, shuffled. It has `reset()`,
  `shuffle()`, `draw()` and `show_cards()`. `draw()` removes a card from a
  random position and raises `IndexError` when the deck is empty. You can
  pass a `random.Random` so that games can be repeated.
- `corabia.player.Player`: a name, a hand (`cards`), a `level` and a
  `fails` count. `attempts` is `fails + 1`.
- `corabia.game.Game`: runs the whole game through `start()`, or a single
  level through `level1()` to `level4()`. It takes a deck, a `read(prompt)`
  function and a `write(text)` function, so something other than a terminal
  can drive it.
- `corabia.ai_player.AIPlayer`: a `Player` that picks a random answer for
  each level with `decide_color()`, `decide_comparison()`, `decide_range()`
  and `decide_suit()`.

## Limitations

The game only asks people for answers. `AIPlayer` is not wired into `Game`
or the menu, so a computer opponent cannot join a game. The game keeps no
scores between sessions.

## Running the tests

```
pip install ".[test]"
pytest
```