"""Playing cards for the memory game: their kinds, placement and face state."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

BACK_IMAGE = "404back.png"
CARD_WIDTH = 150
CARD_HEIGHT = 150


class CardType(Enum):
    """The kinds of card; two cards of the same kind form a pair."""

    BELKA = "404Belka.png"
    KLUKAI = "404Klukai.png"
    MECHTY = "404Mechty.png"
    ANDORIS = "404Andoris.png"

    @property
    def filename(self) -> str:
        """Name of the image shown on this kind's face."""
        return self.value


@dataclass(eq=False)
class Card:
    """A card on the board, identified by its index in the dealt layout."""

    index: int
    card_type: CardType
    x: int
    y: int
    width: int = CARD_WIDTH
    height: int = CARD_HEIGHT
    front: bool = False

    def contains(self, x: int, y: int) -> bool:
        """Whether the point lies inside the card (right and bottom edges excluded)."""
        return self.x <= x < self.x + self.width and self.y <= y < self.y + self.height

    def is_clicked(self, x: int, y: int) -> bool:
        """Turn the card over if the point hits it; report whether it did."""
        if not self.contains(x, y):
            return False
        self.flip(not self.front)
        return True

    def flip(self, front: bool) -> None:
        """Show the face when ``front`` is true, the back otherwise."""
        self.front = front

    def image_name(self) -> str:
        """Name of the image currently showing on the card."""
        return self.card_type.filename if self.front else BACK_IMAGE