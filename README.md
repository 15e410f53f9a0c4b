# memorycards

A small memory (concentration) game. Forty face-down cards are laid out in an
8 × 5 grid, made up of pairs of four character types: Andoris, Belka, Klukai
and Mechty. Click a card to turn it over, then click another:

- if the two cards show the same character, both are taken off the board;
- if they differ, both are turned face down again after a short pause
  (half a second);
- clicking the same card a second time turns it back and clears the selection.

Every click that lands on a card adds one to the click counter in the top-right
corner of the window. The game is won once the board is empty.

## Installing

```
pip install .
```

This pulls in `pygame`, which draws the window.

## Playing

```
memorycards
```

The game opens a 1500 × 850 window titled "Solitaire". Close the window to
quit.

Card faces and the card back are read from image files in one directory:
`404Andoris.png`, `404Belka.png`, `404Klukai.png`, `404Mechty.png` and
`404back.png`. Each image is scaled to 150 × 150 pixels.

Options:

- `--assets DIR` – the directory holding the card images (default: the
  current directory);
- `--seed N` – a seed for shuffling the cards, so the same layout can be dealt
  again.

All five images must be present. If one is missing or cannot be loaded, the
command prints an error to standard error and exits with status 1 without
opening a window.

## Using the game logic on its own

The rules are kept apart from the window, so they can be driven directly:

```python
import random

from memorycards.game import GameLogic, build_types

logic = GameLogic(random.Random(1))
card = logic.card_at(20, 20)      # the card under a point, or None
result = logic.on_click(20, 20)   # a ClickResult describing what happened
print(result, logic.flip_count, logic.is_finished())

print(build_types(8))             # pairs of card types before shuffling
```

`ClickResult` is one of `MISSED`, `SELECTED`, `DESELECTED`, `MATCHED` or
`MISMATCHED`. `GameLogic.reset()` deals a new shuffled board and clears the
count and the selection. `build_types` raises `ValueError` for a negative
count.

`memorycards.card.Card` holds one card's type, place and face-up state, and
`memorycards.card.CardType` lists the four characters together with the image
file each one shows.

`memorycards.app.GameWindow` draws a `GameLogic` onto a pygame surface and
passes clicks to it; `memorycards.app.load_images` loads the card images from
a directory.

## Running the tests

```
pip install .[test]
pytest
```