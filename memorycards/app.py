"""The game window: drawing the board, handling clicks and the command line."""

from __future__ import annotations

import argparse
import random
import sys
from pathlib import Path
from typing import Optional

import pygame

from memorycards.card import BACK_IMAGE, CARD_HEIGHT, CARD_WIDTH, Card, CardType
from memorycards.game import COUNT_LABEL_POS, COUNT_RECT, ClickResult, GameLogic

WINDOW_SIZE = (1500, 850)
TITLE = "Solitaire"
BACKGROUND = (255, 255, 255)
TEXT_COLOR = (255, 79, 64)
FONT_SIZE = 32
MISMATCH_DELAY_MS = 500


def load_images(directory, size=None) -> dict[str, pygame.Surface]:
    """Load the card back and every face from ``directory``, scaled to ``size``."""
    directory = Path(directory)
    names = [BACK_IMAGE, *(kind.filename for kind in CardType)]
    images: dict[str, pygame.Surface] = {}
    for name in names:
        path = directory / name
        if not path.is_file():
            raise FileNotFoundError(f"missing card image: {path}")
        image = pygame.image.load(str(path))
        if size is not None:
            image = pygame.transform.scale(image, tuple(size))
        images[name] = image
    return images


def parse_args(argv=None) -> argparse.Namespace:
    """Read the command-line options."""
    parser = argparse.ArgumentParser(prog="memorycards", description="Find the matching pairs of cards.")
    parser.add_argument("--assets", default=".", help="directory holding the card images")
    parser.add_argument("--seed", type=int, default=None, help="seed for shuffling the cards")
    return parser.parse_args(argv)


class GameWindow:
    """Draws a game and feeds mouse clicks to it."""

    def __init__(self, logic: GameLogic, images: dict[str, pygame.Surface]) -> None:
        self.logic = logic
        self.images = images
        self._font: Optional[pygame.font.Font] = None
        logic.on_mismatch = self._show_mismatch

    def _get_font(self) -> pygame.font.Font:
        if self._font is None or not pygame.font.get_init():
            pygame.font.init()
            self._font = pygame.font.Font(None, FONT_SIZE)
        return self._font

    def draw(self, surface: pygame.Surface) -> None:
        """Paint the cards and the click counter onto ``surface``."""
        surface.fill(BACKGROUND)
        for card in self.logic.deck:
            surface.blit(self.images[card.image_name()], (card.x, card.y))

        font = self._get_font()
        surface.blit(font.render("# of Clicks: ", True, TEXT_COLOR), COUNT_LABEL_POS)
        count = font.render(str(self.logic.flip_count), True, TEXT_COLOR)
        left, top, width, _ = COUNT_RECT
        surface.blit(count, (left + (width - count.get_width()) // 2, top))

    def handle_click(self, x: int, y: int) -> ClickResult:
        """Pass a left click at the point to the game."""
        return self.logic.on_click(x, y)

    def _show_mismatch(self, first: Card, second: Card) -> None:
        if not pygame.display.get_init():
            return
        surface = pygame.display.get_surface()
        if surface is None:
            return
        self.draw(surface)
        pygame.display.flip()
        pygame.time.wait(MISMATCH_DELAY_MS)

    def run(self) -> int:
        """Open the window and play until it is closed."""
        pygame.init()
        try:
            surface = pygame.display.set_mode(WINDOW_SIZE)
            pygame.display.set_caption(TITLE)
            clock = pygame.time.Clock()
            running = True
            while running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                    elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                        self.handle_click(*event.pos)
                self.draw(surface)
                pygame.display.flip()
                clock.tick(30)
        finally:
            self._font = None
            pygame.quit()
        return 0


def main(argv=None) -> int:
    """Start the game from the command line."""
    args = parse_args(argv)
    try:
        images = load_images(args.assets, (CARD_WIDTH, CARD_HEIGHT))
    except (FileNotFoundError, pygame.error) as exc:
        print(f"memorycards: {exc}", file=sys.stderr)
        return 1
    logic = GameLogic(random.Random(args.seed))
    return GameWindow(logic, images).run()


if __name__ == "__main__":
    sys.exit(main())