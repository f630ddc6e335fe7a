"""The game: turns, clicks, special moves and highlighting."""

from __future__ import annotations

from typing import List, Optional, Set, Tuple

from .box import CHECK, HIGHLIGHT, PROMOTION, SIZE, Box, Grid
from .color import PlayerColor
from .piece import Piece
from .pieces import King, Pawn
from .player import PROMOTION_ROW, Player

_MENU_COLUMNS = range(2, 6)


class Board:
    """Two players on an 8x8 grid, driven by mouse presses and releases."""

    def __init__(self, width: int, height: int) -> None:
        self.square_size = self._square(width, height)
        self.grid = Grid(self.square_size // SIZE)
        self.white = Player(self.grid, PlayerColor.WHITE)
        self.white.setup()
        self.black = Player(self.grid, PlayerColor.BLACK)
        self.black.setup()
        self.white_to_move = True
        self.targets: Set[Box] = set()
        self.selected: Optional[Box] = None
        self.in_check = False
        self.promotion = False
        self.promotion_box: Optional[Box] = None
        self.outcome: Optional[str] = None
        self._en_passant_pawn: Optional[Pawn] = None
        self._saved: List[Optional[Piece]] = []

    @staticmethod
    def _square(width: int, height: int) -> int:
        square = min(width, height)
        if square < SIZE:
            raise ValueError(f"a {width}x{height} area is too small for the board")
        return square

    @property
    def box_size(self) -> int:
        return self.grid.box_size

    @property
    def to_move(self) -> Player:
        """The player whose turn it is."""
        return self.white if self.white_to_move else self.black

    @property
    def drawable_pieces(self) -> List[Piece]:
        """Every piece to draw, promotion menu last."""
        return self.black.pieces + self.white.pieces + self.to_move.promotion_options

    def _cell(self, px: int, py: int) -> Optional[Tuple[int, int]]:
        if px > self.square_size or py > self.square_size:
            return None
        cell = self.square_size // SIZE
        x, y = px // cell, py // cell
        if not self.grid.in_bounds(x, y):
            return None
        return x, y

    def select(self, px: int, py: int) -> None:
        """Pick up the piece under the pointer and light up where it may go."""
        cell = self._cell(px, py)
        if cell is None:
            return
        self.selected = self.grid.box(*cell)
        piece = self.selected.piece
        if piece is None or self.promotion:
            return
        player = self.to_move
        if piece.color is player.color:
            self.targets = player.play(piece, self.in_check)
        self._check_result()
        self.highlight(True)

    def release(self, px: int, py: int) -> None:
        """Drop the selected piece on the square under the pointer."""
        cell = self._cell(px, py)
        if cell is None:
            return
        if not self.targets:
            self._handle_promotion(*cell)
            return
        target = self.grid.box(*cell)
        if target is self.selected:
            self.highlight(False)
            self.targets.clear()
            return
        if target in self.targets and self.selected is not None:
            if target.piece is not None:
                self._delete_piece(target)
            self._en_passant(*cell)
            self._relocate(self.selected, target)
            self._castle(*cell)
            self._handle_promotion(*cell)
            self.white_to_move = not self.white_to_move
            self._update_threats()
            self._highlight_king()
        self.highlight(False)
        self.targets.clear()

    def highlight(self, on: bool) -> None:
        """Switch the highlight of the target squares on or off."""
        for box in self.targets:
            box.color = HIGHLIGHT if on else box.original_color

    def resize(self, width: int, height: int) -> None:
        """Fit the board to a new drawing area."""
        self.square_size = self._square(width, height)
        self.grid.resize(self.square_size // SIZE)

    def _check_result(self) -> None:
        if self.selected is not None and self.targets == {self.selected}:
            self.outcome = "Stalemate: no one wins."
        elif not self.targets and self.in_check:
            winner = "BLACK" if self.white_to_move else "WHITE"
            self.outcome = f"{winner} is the winner."

    def _update_threats(self) -> None:
        if self.white_to_move:
            attacker, defender = self.black, self.white
        else:
            attacker, defender = self.white, self.black
        threats = attacker.threat_map()
        defender.opponent_threats = set(threats.squares)
        self.in_check = threats.check

    def _highlight_king(self) -> None:
        king = self.to_move.king()
        if king is None:
            return
        box = king.location
        box.color = CHECK if self.in_check else box.original_color

    def _relocate(self, source: Box, target: Box) -> None:
        piece = source.piece
        if piece is None:
            return
        piece.move_to(target)
        target.piece = piece
        source.piece = None

    def _delete_piece(self, box: Box) -> None:
        piece = box.piece
        box.piece = None
        self.black.remove_piece(piece)
        self.white.remove_piece(piece)

    def _en_passant(self, new_x: int, new_y: int) -> None:
        if self.selected is None:
            return
        pawn = self.selected.piece
        if not isinstance(pawn, Pawn):
            return
        direction = 1 if pawn.color is PlayerColor.WHITE else -1
        if pawn.first_move:
            if self._en_passant_pawn is not None:
                self._en_passant_pawn.possible_en_passant = False
            pawn.possible_en_passant = True
            self._en_passant_pawn = pawn
            return
        old_x, old_y = self.grid.coords(self.selected)
        for side in (old_x - 1, old_x + 1):
            self._capture_en_passant(side, old_y, new_x, new_y, direction)
        if self._en_passant_pawn is not None:
            self._en_passant_pawn.possible_en_passant = False

    def _capture_en_passant(self, x: int, y: int, new_x: int, new_y: int, direction: int) -> None:
        if not 0 <= x < SIZE:
            return
        box = self.grid.box(x, y)
        pawn = box.piece
        if (
            isinstance(pawn, Pawn)
            and pawn.possible_en_passant
            and x == new_x
            and new_y == y - direction
        ):
            self._delete_piece(box)

    def _castle(self, new_x: int, new_y: int) -> None:
        if self.selected is None or not isinstance(self.grid.box(new_x, new_y).piece, King):
            return
        old_x, old_y = self.grid.coords(self.selected)
        if old_y != new_y:
            return
        if new_x - 2 == old_x:
            self._relocate(self.grid.box(7, new_y), self.grid.box(5, new_y))
        elif new_x + 2 == old_x:
            self._relocate(self.grid.box(0, new_y), self.grid.box(3, new_y))

    def _handle_promotion(self, x: int, y: int) -> None:
        target = self.grid.box(x, y)
        menu = [self.grid.box(i, PROMOTION_ROW) for i in _MENU_COLUMNS]
        if y in (0, SIZE - 1) and not self.promotion and isinstance(target.piece, Pawn):
            self._saved = [box.piece for box in menu]
            for box in menu:
                box.color = PROMOTION
            self.to_move.show_promotion_options()
            self.promotion = True
            self.promotion_box = target
            self.white_to_move = not self.white_to_move
        elif self.promotion:
            chosen = self.selected.piece if self.selected is not None else None
            if chosen is None or self.promotion_box is None:
                return
            px, py = self.grid.coords(self.promotion_box)
            self._delete_piece(self.promotion_box)
            self.to_move.promote(chosen, px, py)
            self.promotion = False
            for box, piece in zip(menu, self._saved):
                box.restore_color()
                box.piece = piece
            self._saved.clear()
            self.white_to_move = not self.white_to_move