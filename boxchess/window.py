"""The game window: event handling, drawing and the command that starts it."""

from __future__ import annotations

import argparse
import sys
from typing import Dict, Optional, Sequence, Tuple

import pygame

from .board import Board
from .color import PlayerColor
from .piece import Piece
from .pieces import Bishop, King, Knight, Pawn, Queen, Rook

TITLE = "Chess"
DEFAULT_SIZE = 300
TEXTURE_DIR = "texture"

_LETTERS = {Bishop: "B", King: "K", Knight: "N", Pawn: "P", Queen: "Q", Rook: "R"}


def initial_square(display_width: int, display_height: int) -> int:
    """Side of a square window taking 80% of the display's smaller dimension."""
    if display_width <= 0 or display_height <= 0:
        raise ValueError("display dimensions must be positive")
    return min(display_width, display_height) * 4 // 5


def _texture_name(piece: Piece) -> str:
    side = "B" if piece.color is PlayerColor.BLACK else "W"
    return f"{side}{_LETTERS[type(piece)]}"


class Window:
    """A resizable window showing a board and feeding it mouse clicks."""

    MIN_SIZE = 400

    def __init__(self, width: int, height: int) -> None:
        self.width = max(width, self.MIN_SIZE)
        self.height = max(height, self.MIN_SIZE)
        pygame.display.init()
        pygame.display.set_caption(TITLE)
        self.surface = pygame.display.set_mode((self.width, self.height), pygame.RESIZABLE)
        self.board = Board(self.width, self.height)
        self._images: Dict[Tuple[str, int], Optional[pygame.Surface]] = {}
        self._font: Optional[pygame.font.Font] = None
        self._font_size = 0

    @property
    def square_size(self) -> int:
        """Side of the square area the board is drawn in."""
        return self.board.square_size

    def process_events(self) -> bool:
        """Handle pending events; False once the window has been asked to close."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.VIDEORESIZE:
                self.resize(event.w, event.h)
            elif event.type == pygame.MOUSEBUTTONDOWN:
                self.board.outcome = None
                self.board.select(*event.pos)
                if self.board.outcome:
                    print(self.board.outcome)
            elif event.type == pygame.MOUSEBUTTONUP:
                self.board.release(*event.pos)
        return True

    def render(self) -> None:
        """Draw every square and piece, then show the frame."""
        surface = pygame.display.get_surface() or self.surface
        self.surface = surface
        surface.fill((0, 0, 0))
        for box in self.board.grid:
            pygame.draw.rect(surface, box.color[:3], pygame.Rect(box.rect))
        for piece in self.board.drawable_pieces:
            self._draw_piece(surface, piece)
        pygame.display.flip()

    def resize(self, width: int, height: int) -> None:
        """Fit the board to a new window size."""
        self.width = max(width, self.MIN_SIZE)
        self.height = max(height, self.MIN_SIZE)
        self.board.resize(self.width, self.height)

    def run(self) -> None:
        """Draw and handle events until the window is closed."""
        clock = pygame.time.Clock()
        try:
            running = True
            while running:
                self.render()
                running = self.process_events()
                clock.tick(60)
        finally:
            pygame.quit()

    def _image(self, piece: Piece, size: int) -> Optional[pygame.Surface]:
        name = _texture_name(piece)
        key = (name, size)
        if key not in self._images:
            try:
                loaded = pygame.image.load(f"{TEXTURE_DIR}/{name}.svg")
            except (pygame.error, FileNotFoundError, OSError):
                self._images[key] = None
            else:
                self._images[key] = pygame.transform.smoothscale(loaded, (size, size))
        return self._images[key]

    def _letter_font(self, size: int) -> Optional[pygame.font.Font]:
        if self._font is None or self._font_size != size:
            try:
                pygame.font.init()
                self._font = pygame.font.Font(None, size)
                self._font_size = size
            except (pygame.error, OSError):
                self._font = None
        return self._font

    def _draw_piece(self, surface: pygame.Surface, piece: Piece) -> None:
        box = piece.location
        size = max(box.size, 1)
        image = self._image(piece, size)
        if image is not None:
            surface.blit(image, (box.x, box.y))
            return
        black = piece.color is PlayerColor.BLACK
        fill, ink = ((30, 30, 30), (230, 230, 230)) if black else ((240, 240, 240), (20, 20, 20))
        centre = (box.x + size // 2, box.y + size // 2)
        radius = max(size // 3, 1)
        pygame.draw.circle(surface, fill, centre, radius)
        pygame.draw.circle(surface, ink, centre, radius, 1)
        font = self._letter_font(max(size // 2, 1))
        if font is not None:
            glyph = font.render(_LETTERS[type(piece)], True, ink)
            surface.blit(glyph, glyph.get_rect(center=centre))


def _display_square() -> int:
    pygame.display.init()
    info = pygame.display.Info()
    if info.current_w > 0 and info.current_h > 0:
        return initial_square(info.current_w, info.current_h)
    return DEFAULT_SIZE


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the chess window and play until it is closed."""
    parser = argparse.ArgumentParser(prog="boxchess", description="Two-player chess on one screen.")
    parser.parse_args(argv)
    try:
        square = _display_square()
        window = Window(square, square)
    except pygame.error as exc:
        print(f"Failed to initialize display: {exc}", file=sys.stderr)
        return 1
    window.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())