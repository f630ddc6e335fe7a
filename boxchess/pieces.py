"""The six kinds of chess piece and how each of them moves and attacks."""

from __future__ import annotations

from functools import reduce
from operator import or_
from typing import Iterable, Iterator, Optional, Set, Tuple

from .box import Box, Grid
from .color import PlayerColor
from .piece import Piece, Threats

Direction = Tuple[int, int]

_DIAGONALS: Tuple[Direction, ...] = ((1, 1), (-1, -1), (-1, 1), (1, -1))
_LINES: Tuple[Direction, ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))
_KNIGHT_OFFSETS: Tuple[Direction, ...] = (
    (-1, -2), (1, -2), (-1, 2), (1, 2),
    (-2, -1), (-2, 1), (2, -1), (2, 1),
)


class _Slider(Piece):
    """A piece that moves along whole lines of squares."""

    def _line(self, forward: Direction, backward: Direction) -> Tuple[Set[Box], bool]:
        """Squares along a line through the piece, and whether it is pinned on it."""
        first, second = self._scan(*forward), self._scan(*backward)
        pinned = (first.threat or second.threat) and (first.king or second.king)
        return first.squares | second.squares, pinned

    def _line_moves(self, lines: Iterable[Tuple[Direction, Direction]]) -> Set[Box]:
        moves: Set[Box] = set()
        for forward, backward in lines:
            squares, pinned = self._line(forward, backward)
            if pinned:
                return squares
            moves |= squares
        return self._restrict_if_pinned(moves)

    def _threats_along(self, directions: Iterable[Direction]) -> Threats:
        return reduce(or_, (self._threat_scan(dx, dy) for dx, dy in directions), Threats())


class Bishop(_Slider):
    """Moves any distance along the diagonals."""

    slides_diagonal = True

    def legal_moves(self) -> Set[Box]:
        moves: Set[Box] = set().union(*(self._scan(dx, dy).squares for dx, dy in _DIAGONALS))
        right, left = self._scan(1, 0), self._scan(-1, 0)
        down, up = self._scan(0, 1), self._scan(0, -1)
        pinned_on_row = (right.threat and left.king) or (left.threat and right.king)
        pinned_on_column = (down.threat and up.king) or (up.threat and down.king)
        if pinned_on_row or pinned_on_column:
            return set()
        return moves

    def threat_map(self) -> Threats:
        return self._threats_along(_DIAGONALS)


class Rook(_Slider):
    """Moves any distance along its row or column."""

    slides_straight = True

    def legal_moves(self) -> Set[Box]:
        return self._line_moves((((1, 0), (-1, 0)), ((0, 1), (0, -1))))

    def threat_map(self) -> Threats:
        return self._threats_along(_LINES)


class Queen(_Slider):
    """Moves any distance along rows, columns and diagonals."""

    slides_straight = True
    slides_diagonal = True

    def legal_moves(self) -> Set[Box]:
        return self._line_moves(
            (
                ((1, 1), (-1, -1)),
                ((-1, 1), (1, -1)),
                ((1, 0), (-1, 0)),
                ((0, 1), (0, -1)),
            )
        )

    def threat_map(self) -> Threats:
        return self._threats_along(_DIAGONALS + _LINES)


class Knight(Piece):
    """Jumps two squares one way and one square the other."""

    def _targets(self) -> Iterator[Box]:
        x, y = self.coords
        for dx, dy in _KNIGHT_OFFSETS:
            if self.grid.in_bounds(x + dx, y + dy):
                yield self.grid.box(x + dx, y + dy)

    def legal_moves(self) -> Set[Box]:
        moves = {
            box for box in self._targets()
            if box.piece is None or box.piece.color != self.color
        }
        return self._restrict_if_pinned(moves)

    def threat_map(self) -> Threats:
        squares = frozenset(self._targets())
        return Threats(squares, any(self._gives_check(box) for box in squares))


class King(Piece):
    """Moves one square in any direction, and castles."""

    is_king = True

    def _around(self) -> Iterator[Box]:
        x, y = self.coords
        for i in range(x - 1, x + 2):
            for j in range(y - 1, y + 2):
                if self.grid.in_bounds(i, j):
                    yield self.grid.box(i, j)

    def legal_moves(self) -> Set[Box]:
        moves = {self.location}
        moves.update(
            box for box in self._around()
            if box.piece is None or box.piece.color != self.color
        )
        return moves | self._castle_moves()

    def threat_map(self) -> Threats:
        return Threats(frozenset(self._around()))

    def cover_path(self) -> Set[Box]:
        """Squares on which a check against this king can be blocked or captured."""
        for dx, dy in _DIAGONALS + _LINES:
            ray = self._scan(dx, dy)
            if ray.threat:
                return ray.squares
        knight = self._checking_knight()
        return {knight} if knight is not None else set()

    def _checking_knight(self) -> Optional[Box]:
        x, y = self.coords
        for dx, dy in _KNIGHT_OFFSETS:
            if self.grid.in_bounds(x + dx, y + dy):
                box = self.grid.box(x + dx, y + dy)
                other = box.piece
                if isinstance(other, Knight) and other.color != self.color:
                    return box
        return None

    def _castle_moves(self) -> Set[Box]:
        if not self.first_move:
            return set()
        y = self.y
        moves: Set[Box] = set()
        for rook_x, between, target in ((0, (1, 2, 3), 2), (7, (5, 6), 6)):
            rook = self.grid.box(rook_x, y).piece
            if (
                isinstance(rook, Rook)
                and rook.color == self.color
                and rook.first_move
                and all(self.grid.box(i, y).piece is None for i in between)
            ):
                moves.add(self.grid.box(target, y))
        return moves


class Pawn(Piece):
    """Moves forward one square, two on its first move, and captures diagonally."""

    def __init__(self, grid: Grid, location: Box, color: PlayerColor) -> None:
        super().__init__(grid, location, color)
        self.possible_en_passant = False

    @property
    def direction(self) -> int:
        return -1 if self.color is PlayerColor.WHITE else 1

    def legal_moves(self) -> Set[Box]:
        x, y = self.coords
        step = self.direction
        grid = self.grid
        moves: Set[Box] = set()

        if grid.in_bounds(x, y + step) and grid.box(x, y + step).piece is None:
            moves.add(grid.box(x, y + step))
            if (
                self.first_move
                and grid.in_bounds(x, y + 2 * step)
                and grid.box(x, y + 2 * step).piece is None
            ):
                moves.add(grid.box(x, y + 2 * step))

        for dx in (-1, 1):
            if grid.in_bounds(x + dx, y + step):
                target = grid.box(x + dx, y + step).piece
                if target is not None and target.color != self.color:
                    moves.add(grid.box(x + dx, y + step))

        en_passant = self._en_passant_square()
        if en_passant is not None:
            moves.add(en_passant)

        return self._restrict_if_pinned(moves)

    def _en_passant_square(self) -> Optional[Box]:
        x, y = self.coords
        step = self.direction
        for dx in (-1, 1):
            nx, ny = x + dx, y + step
            if self.grid.in_bounds(nx, ny) and self.grid.box(nx, ny).piece is None:
                beside = self.grid.box(nx, y).piece
                if (
                    isinstance(beside, Pawn)
                    and beside.color != self.color
                    and beside.possible_en_passant
                ):
                    return self.grid.box(nx, ny)
        return None

    def threat_map(self) -> Threats:
        x, y = self.coords
        step = self.direction
        squares = frozenset(
            self.grid.box(x + dx, y + step)
            for dx in (-1, 1)
            if self.grid.in_bounds(x + dx, y + step)
        )
        return Threats(squares, any(self._gives_check(box) for box in squares))