"""Board squares and the 8x8 grid that holds them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterator, Optional, Tuple

if TYPE_CHECKING:
    from .piece import Piece

RGBA = Tuple[int, int, int, int]

SIZE = 8

LIGHT: RGBA = (255, 255, 255, 255)
DARK: RGBA = (118, 150, 86, 255)
HIGHLIGHT: RGBA = (64, 191, 255, 255)
CHECK: RGBA = (255, 0, 0, 0)
PROMOTION: RGBA = (160, 32, 240, 255)


@dataclass(eq=False)
class Box:
    """One square: its pixel rectangle, colours and the piece standing on it."""

    x: int
    y: int
    size: int
    original_color: RGBA
    color: RGBA = field(init=False)
    piece: Optional[Piece] = field(default=None, init=False)

    def __post_init__(self) -> None:
        self.color = self.original_color

    @property
    def rect(self) -> Tuple[int, int, int, int]:
        """The square as (x, y, width, height) in pixels."""
        return (self.x, self.y, self.size, self.size)

    def resize(self, x: int, y: int, size: int) -> None:
        """Move the square and change its side length."""
        self.x = x
        self.y = y
        self.size = size

    def restore_color(self) -> None:
        """Drop any highlight and show the square's own colour."""
        self.color = self.original_color


class Grid:
    """The 8x8 squares of a board, indexed by (column, row)."""

    def __init__(self, box_size: int) -> None:
        self.box_size = box_size
        self._columns = [
            [
                Box(i * box_size, j * box_size, box_size, LIGHT if (i + j) % 2 == 0 else DARK)
                for j in range(SIZE)
            ]
            for i in range(SIZE)
        ]
        self._positions = {
            box: (i, j)
            for i, column in enumerate(self._columns)
            for j, box in enumerate(column)
        }

    @staticmethod
    def in_bounds(x: int, y: int) -> bool:
        """Whether (x, y) names a square on the board."""
        return 0 <= x < SIZE and 0 <= y < SIZE

    def box(self, x: int, y: int) -> Box:
        """The square at column x, row y."""
        if not self.in_bounds(x, y):
            raise IndexError(f"square ({x}, {y}) is off the board")
        return self._columns[x][y]

    def coords(self, box: Box) -> Tuple[int, int]:
        """The (column, row) of a square of this grid."""
        try:
            return self._positions[box]
        except KeyError:
            raise ValueError("square does not belong to this grid") from None

    def resize(self, box_size: int) -> None:
        """Give every square a new side length and position."""
        self.box_size = box_size
        for box, (i, j) in self._positions.items():
            box.resize(i * box_size, j * box_size, box_size)

    def __iter__(self) -> Iterator[Box]:
        for column in self._columns:
            yield from column