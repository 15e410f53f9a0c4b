"""Rules of the memory game: dealing, selecting, matching and counting clicks."""

from __future__ import annotations

import random
from enum import Enum, auto
from typing import Callable, Optional

from memorycards.card import CARD_HEIGHT, CARD_WIDTH, Card, CardType

BOARD_ROWS = 8
BOARD_COLS = 5
ORIGIN_X = 15
ORIGIN_Y = 10
CARD_GAP = 10
COUNT_RECT = (1250, 60, 120, 122)
COUNT_LABEL_POS = (1300, 20)

_PAIR_ORDER = (CardType.ANDORIS, CardType.BELKA, CardType.KLUKAI, CardType.MECHTY)


class ClickResult(Enum):
    """What a click on the board did."""

    MISSED = auto()
    SELECTED = auto()
    DESELECTED = auto()
    MATCHED = auto()
    MISMATCHED = auto()


def build_types(count: int) -> list[CardType]:
    """Card kinds in pairs, cycling through the kinds, until ``count`` is reached."""
    if count < 0:
        raise ValueError(f"card count must not be negative: {count}")
    types: list[CardType] = []
    while len(types) < count:
        kind = _PAIR_ORDER[(len(types) % 8) // 2]
        types.extend((kind, kind))
    return types


class GameLogic:
    """State of one game: the cards left, the selection and the click count."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.deck: list[Card] = []
        self.flip_count = 0
        self.selected: Optional[Card] = None
        self.on_mismatch: Optional[Callable[[Card, Card], None]] = None
        self.reset()

    def reset(self) -> None:
        """Deal a freshly shuffled board and clear the count and selection."""
        types = build_types(BOARD_ROWS * BOARD_COLS)
        self.rng.shuffle(types)
        positions = (
            (ORIGIN_X + col * (CARD_WIDTH + CARD_GAP), ORIGIN_Y + row * (CARD_HEIGHT + CARD_GAP))
            for col in range(BOARD_ROWS)
            for row in range(BOARD_COLS)
        )
        self.deck = [
            Card(index, kind, x, y)
            for index, (kind, (x, y)) in enumerate(zip(types, positions))
        ]
        self.flip_count = 0
        self.selected = None

    def card_at(self, x: int, y: int) -> Optional[Card]:
        """The card under the point, if any, without turning it."""
        return next((card for card in self.deck if card.contains(x, y)), None)

    def on_click(self, x: int, y: int) -> ClickResult:
        """Apply a click at the point and report its outcome."""
        card = next((c for c in self.deck if c.is_clicked(x, y)), None)
        if card is None:
            return ClickResult.MISSED

        self.flip_count += 1
        selected = self.selected
        if selected is None:
            self.selected = card
            return ClickResult.SELECTED
        if selected is card:
            self.selected = None
            return ClickResult.DESELECTED

        self.selected = None
        if card.card_type == selected.card_type:
            self.deck = [c for c in self.deck if c is not card and c is not selected]
            return ClickResult.MATCHED

        if self.on_mismatch is not None:
            self.on_mismatch(selected, card)
        card.flip(False)
        selected.flip(False)
        return ClickResult.MISMATCHED

    def is_finished(self) -> bool:
        """Whether every pair has been found."""
        return not self.deck