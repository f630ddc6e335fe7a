"""The common behaviour of every chess piece."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import AbstractSet, FrozenSet, NamedTuple, Set, Tuple

from .box import Box, Grid
from .color import PlayerColor


@dataclass(frozen=True)
class Threats:
    """Squares a side attacks, and whether the enemy king stands on one."""

    squares: FrozenSet[Box] = frozenset()
    check: bool = False

    def __or__(self, other: Threats) -> Threats:
        return Threats(self.squares | other.squares, self.check or other.check)


class _Ray(NamedTuple):
    squares: Set[Box]
    threat: bool
    king: bool


class Piece(ABC):
    """A piece standing on a square of a grid."""

    slides_straight = False
    slides_diagonal = False
    is_king = False

    def __init__(self, grid: Grid, location: Box, color: PlayerColor) -> None:
        self.grid = grid
        self.location = location
        self.color = color
        self.first_move = True

    @property
    def coords(self) -> Tuple[int, int]:
        return self.grid.coords(self.location)

    @property
    def x(self) -> int:
        return self.coords[0]

    @property
    def y(self) -> int:
        return self.coords[1]

    def move_to(self, location: Box) -> None:
        """Record that the piece now stands on another square."""
        self.location = location
        self.first_move = False

    @abstractmethod
    def legal_moves(self) -> Set[Box]:
        """Squares the piece may move to."""

    @abstractmethod
    def threat_map(self) -> Threats:
        """Squares the piece attacks."""

    def _walk(self, dx: int, dy: int):
        x, y = self.coords
        while self.grid.in_bounds(x, y):
            yield self.grid.box(x, y)
            x += dx
            y += dy

    def _scan(self, dx: int, dy: int) -> _Ray:
        """Walk a line from the piece, noting an enemy slider and the own king."""
        straight = dx == 0 or dy == 0
        squares: Set[Box] = set()
        threat = king = False
        for box in self._walk(dx, dy):
            other = box.piece
            if other is None:
                squares.add(box)
            elif other.color != self.color:
                if other.slides_straight if straight else other.slides_diagonal:
                    threat = True
                squares.add(box)
                break
            elif other is not self:
                if other.is_king:
                    king = True
                break
        return _Ray(squares, threat, king)

    def _gives_check(self, box: Box) -> bool:
        other = box.piece
        return other is not None and other.is_king and other.color != self.color

    def _threat_scan(self, dx: int, dy: int) -> Threats:
        """Walk a line of attacked squares; kings do not block it."""
        squares: Set[Box] = set()
        check = False
        for box in self._walk(dx, dy):
            other = box.piece
            if other is None:
                squares.add(box)
            elif other.is_king:
                check = check or other.color != self.color
                squares.add(box)
            elif other is not self:
                squares.add(box)
                break
        return Threats(frozenset(squares), check)

    def _restrict_if_pinned(self, moves: AbstractSet[Box]) -> Set[Box]:
        """Keep only the moves along the line of a pin, if one is found."""
        moves = set(moves)

        first, second = self._scan(1, 1), self._scan(-1, -1)
        if (first.threat and first.king) or (second.threat and second.king):
            common = moves & (first.squares | second.squares)
            if common:
                return common

        pos, neg = self._scan(1, 0), self._scan(-1, 0)
        if (neg.threat and pos.king) or (pos.threat and neg.king):
            common = moves & (pos.squares | neg.squares)
            if common:
                return common

        pos, neg = self._scan(0, 1), self._scan(0, -1)
        if neg.threat and (pos.king or neg.king):
            common = moves & (pos.squares | neg.squares)
            if common:
                return common

        return moves