"""One side of the game: its pieces, its promotion menu and its threats."""

from __future__ import annotations

from functools import reduce
from operator import or_
from typing import List, Optional, Set, Type

from .box import SIZE, Box, Grid
from .color import PlayerColor
from .piece import Piece, Threats
from .pieces import Bishop, King, Knight, Pawn, Queen, Rook

_BACK_RANK = (
    (Bishop, 2),
    (Bishop, 5),
    (Knight, 1),
    (Knight, 6),
    (Rook, 0),
    (Rook, 7),
    (Queen, 3),
    (King, 4),
)

_PROMOTION_MENU = ((Queen, 2), (Knight, 3), (Rook, 4), (Bishop, 5))
PROMOTION_ROW = 4

_PROMOTABLE = (Queen, Bishop, Rook, Knight)


class Player:
    """The pieces of one colour and what the opposing side attacks."""

    def __init__(self, grid: Grid, color: PlayerColor) -> None:
        self.grid = grid
        self.color = color
        self.opponent_threats: Set[Box] = set()
        self._pieces: List[Piece] = []
        self._options: List[Piece] = []

    @property
    def pieces(self) -> List[Piece]:
        """The pieces this side still has on the board."""
        return list(self._pieces)

    @property
    def promotion_options(self) -> List[Piece]:
        """The pieces shown while a pawn is being promoted."""
        return list(self._options)

    def _place(self, kind: Type[Piece], x: int, y: int, into: List[Piece]) -> Piece:
        box = self.grid.box(x, y)
        piece = kind(self.grid, box, self.color)
        box.piece = piece
        into.append(piece)
        return piece

    def setup(self) -> None:
        """Put this side's sixteen pieces on their starting squares."""
        black = self.color is PlayerColor.BLACK
        pawn_row = 1 if black else 6
        back_row = 0 if black else 7
        for x in range(SIZE):
            self._place(Pawn, x, pawn_row, self._pieces)
        for kind, x in _BACK_RANK:
            self._place(kind, x, back_row, self._pieces)

    def play(self, piece: Piece, in_check: bool) -> Set[Box]:
        """The squares the given piece may move to in the current position."""
        moves = piece.legal_moves()
        if isinstance(piece, King):
            return moves - self.opponent_threats
        if in_check:
            king = self.king()
            if king is not None:
                return moves & king.cover_path()
        return moves

    def threat_map(self) -> Threats:
        """Every square this side attacks, and whether it gives check."""
        return reduce(or_, (piece.threat_map() for piece in self._pieces), Threats())

    def remove_piece(self, piece: Optional[Piece]) -> None:
        """Forget a piece that has left the board."""
        self._pieces = [p for p in self._pieces if p is not piece]

    def show_promotion_options(self) -> None:
        """Lay out the pieces a pawn may be promoted to."""
        for kind, x in _PROMOTION_MENU:
            self._place(kind, x, PROMOTION_ROW, self._options)

    def clear_promotion_options(self) -> None:
        """Drop the promotion menu."""
        self._options.clear()

    def promote(self, selected: Piece, x: int, y: int) -> Optional[Piece]:
        """Put a new piece of the selected kind on (x, y); None if it cannot be promoted to."""
        for kind in _PROMOTABLE:
            if isinstance(selected, kind):
                piece = self._place(kind, x, y, self._pieces)
                self.clear_promotion_options()
                return piece
        return None

    def king(self) -> Optional[King]:
        """This side's king, if it is still on the board."""
        return next((p for p in self._pieces if isinstance(p, King)), None)