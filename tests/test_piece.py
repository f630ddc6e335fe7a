import pytest

from boxchess.box import Grid
from boxchess.color import PlayerColor
from boxchess.piece import Piece, Threats

WHITE = PlayerColor.WHITE
BLACK = PlayerColor.BLACK
STRAIGHT = ((1, 0), (-1, 0), (0, 1), (0, -1))


class Slider(Piece):
    slides_straight = True

    def legal_moves(self):
        moves = set()
        for dx, dy in STRAIGHT:
            moves |= self._scan(dx, dy).squares
        return self._restrict_if_pinned(moves)

    def threat_map(self):
        result = Threats()
        for dx, dy in STRAIGHT:
            result = result | self._threat_scan(dx, dy)
        return result


class DiagonalSlider(Slider):
    slides_straight = False
    slides_diagonal = True


class Monarch(Piece):
    is_king = True

    def legal_moves(self):
        return set()

    def threat_map(self):
        return Threats()


def place(grid, cls, x, y, color):
    box = grid.box(x, y)
    piece = cls(grid, box, color)
    box.piece = piece
    return piece


@pytest.fixture
def grid():
    return Grid(10)


def test_piece_is_abstract(grid):
    with pytest.raises(TypeError):
        Piece(grid, grid.box(0, 0), WHITE)


def test_coords_and_move_to(grid):
    piece = place(grid, Slider, 2, 3, WHITE)
    assert (piece.x, piece.y) == (2, 3)
    assert piece.first_move
    piece.move_to(grid.box(5, 6))
    assert (piece.x, piece.y) == (5, 6)
    assert not piece.first_move


def test_open_board_lines(grid):
    piece = place(grid, Slider, 3, 3, WHITE)
    moves = piece.legal_moves()
    expected = {b for b in grid if (grid.coords(b)[0] == 3) != (grid.coords(b)[1] == 3)}
    assert moves == expected
    assert piece.location not in moves


def test_friendly_piece_blocks(grid):
    piece = place(grid, Slider, 0, 0, WHITE)
    place(grid, Slider, 0, 3, WHITE)
    ray = piece._scan(0, 1)
    assert ray.squares == {grid.box(0, 1), grid.box(0, 2)}
    assert not ray.threat and not ray.king


def test_enemy_piece_is_taken_and_stops(grid):
    piece = place(grid, Slider, 0, 0, WHITE)
    place(grid, Monarch, 4, 0, BLACK)
    ray = piece._scan(1, 0)
    assert grid.box(4, 0) in ray.squares
    assert grid.box(5, 0) not in ray.squares
    assert not ray.threat


def test_enemy_slider_is_a_threat_on_its_lines(grid):
    piece = place(grid, Slider, 0, 0, WHITE)
    place(grid, Slider, 5, 0, BLACK)
    place(grid, Slider, 3, 3, BLACK)
    assert piece._scan(1, 0).threat
    assert not piece._scan(1, 1).threat


def test_enemy_diagonal_slider_threat(grid):
    piece = place(grid, Slider, 0, 0, WHITE)
    place(grid, DiagonalSlider, 3, 3, BLACK)
    assert piece._scan(1, 1).threat


def test_own_king_noted(grid):
    piece = place(grid, Slider, 0, 0, WHITE)
    place(grid, Monarch, 0, 6, WHITE)
    ray = piece._scan(0, 1)
    assert ray.king
    assert grid.box(0, 6) not in ray.squares


def test_threat_scan_passes_through_enemy_king(grid):
    piece = place(grid, Slider, 0, 0, WHITE)
    place(grid, Monarch, 3, 0, BLACK)
    threats = piece._threat_scan(1, 0)
    assert threats.check
    assert grid.box(3, 0) in threats.squares
    assert grid.box(7, 0) in threats.squares


def test_threat_scan_own_king_no_check(grid):
    piece = place(grid, Slider, 0, 0, WHITE)
    place(grid, Monarch, 3, 0, WHITE)
    threats = piece._threat_scan(1, 0)
    assert not threats.check
    assert grid.box(7, 0) in threats.squares


def test_threat_scan_covers_friendly_blocker(grid):
    piece = place(grid, Slider, 0, 0, WHITE)
    place(grid, Slider, 0, 2, WHITE)
    threats = piece._threat_scan(0, 1)
    assert threats.squares == {grid.box(0, 1), grid.box(0, 2)}
    assert not threats.check


def test_threat_map_combines_lines(grid):
    piece = place(grid, Slider, 0, 0, WHITE)
    place(grid, Monarch, 0, 5, BLACK)
    threats = piece.threat_map()
    assert threats.check
    assert grid.box(7, 0) in threats.squares
    assert grid.box(0, 7) in threats.squares


def test_threats_union():
    grid = Grid(10)
    a = Threats(frozenset({grid.box(0, 0)}), False)
    b = Threats(frozenset({grid.box(1, 1)}), True)
    combined = a | b
    assert combined.squares == {grid.box(0, 0), grid.box(1, 1)}
    assert combined.check


def test_row_pin_keeps_row_moves(grid):
    place(grid, Monarch, 0, 4, WHITE)
    piece = place(grid, Slider, 3, 4, WHITE)
    place(grid, Slider, 7, 4, BLACK)
    moves = piece.legal_moves()
    assert moves
    assert all(grid.coords(b)[1] == 4 for b in moves)
    assert grid.box(7, 4) in moves


def test_column_pin_keeps_column_moves(grid):
    place(grid, Slider, 4, 0, BLACK)
    piece = place(grid, Slider, 4, 3, WHITE)
    place(grid, Monarch, 4, 7, WHITE)
    moves = piece.legal_moves()
    assert moves
    assert all(grid.coords(b)[0] == 4 for b in moves)
    assert grid.box(4, 0) in moves


def test_no_pin_keeps_all_moves(grid):
    place(grid, Monarch, 0, 4, WHITE)
    piece = place(grid, Slider, 3, 4, WHITE)
    moves = piece.legal_moves()
    assert piece._restrict_if_pinned(moves) == moves
    assert grid.box(3, 0) in moves