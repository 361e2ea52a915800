import pytest
import numpy as np

from hex_engine.board import HexBoard, Position
from hex_engine.config import INVALID_CELL
from hex_engine.enums import Color


@pytest.fixture
def board():
    return HexBoard(3)


def test_initial_board_is_empty(board):
    assert board.size == 3
    assert board.num_cells == 9
    assert all(board.get(i) is Color.EMPTY for i in range(9))
    assert list(board.empty_cells()) == list(range(9))


@pytest.mark.parametrize("size", [1, 0, -3])
def test_too_small_board_rejected(size):
    with pytest.raises(ValueError):
        HexBoard(size)


def test_get_and_set_by_index_and_position(board):
    board.set(4, Color.BLUE)
    board.set(Position(2, 0), Color.RED)
    board.set((0, 2), Color.BLUE)
    assert board.get(Position(1, 1)) is Color.BLUE
    assert board.get(2) is Color.RED
    assert board.get(6) is Color.BLUE
    assert list(board.empty_cells()) == [0, 1, 3, 5, 7, 8]


@pytest.mark.parametrize("cell", [-1, 9, Position(3, 0), Position(0, -1), (5, 5)])
def test_out_of_bounds_access_raises(board, cell):
    with pytest.raises(IndexError):
        board.get(cell)
    with pytest.raises(IndexError):
        board.set(cell, Color.RED)


def test_set_requires_color(board):
    with pytest.raises(TypeError):
        board.set(0, 1)


def test_is_valid_position(board):
    assert board.is_valid_position(0, 0)
    assert board.is_valid_position(2, 2)
    assert not board.is_valid_position(3, 0)
    assert not board.is_valid_position(0, -1)


def test_to_cell_index_off_board_is_sentinel(board):
    assert board.to_cell_index(1, 2) == 7
    assert board.to_cell_index(-1, 0) == INVALID_CELL
    assert board.to_cell_index(0, 3) == INVALID_CELL


@pytest.mark.parametrize("size", [2, 3, 5, 11])
def test_index_position_round_trip(size):
    board = HexBoard(size)
    for cell_index in range(board.num_cells):
        column, row = board.to_position(cell_index)
        assert board.to_cell_index(column, row) == cell_index


def test_neighbors_of_corners_and_center():
    board = HexBoard(4)
    top_left = board.neighbors(0)
    assert len(top_left) == 6
    assert {n for n in top_left if n != INVALID_CELL} == {1, 4}
    # top-right corner touches three cells
    assert {n for n in board.neighbors(3) if n != INVALID_CELL} == {2, 6, 7}
    center = board.to_cell_index(1, 1)
    assert set(board.neighbors(center)) == {1, 2, 4, 6, 8, 9}


@pytest.mark.parametrize("size", [2, 3, 4, 7])
def test_neighbor_symmetry(size):
    board = HexBoard(size)
    for cell in range(board.num_cells):
        for neighbor in board.neighbors(cell):
            if neighbor == INVALID_CELL:
                continue
            assert 0 <= neighbor < board.num_cells
            assert cell in board.neighbors(neighbor)


def test_clone_does_not_alias(board):
    board.set(0, Color.BLUE)
    copy = board.clone()
    assert copy == board
    copy.set(1, Color.RED)
    assert board.get(1) is Color.EMPTY
    board.set(2, Color.RED)
    assert copy.get(2) is Color.EMPTY


def test_assign_copies_contents(board):
    board.set(3, Color.RED)
    scratch = HexBoard(3)
    scratch.set(8, Color.BLUE)
    scratch.assign(board)
    assert scratch == board
    scratch.set(0, Color.BLUE)
    assert board.get(0) is Color.EMPTY


def test_mark_cells(board):
    board.mark_cells(np.array([0, 4, 8]), Color.RED)
    assert [board.get(i) for i in (0, 4, 8)] == [Color.RED] * 3
    with pytest.raises(IndexError):
        board.mark_cells([9], Color.RED)


def test_cells_view_is_read_only(board):
    with pytest.raises(ValueError):
        board.cells[0] = Color.BLUE.value


def test_board_string():
    board = HexBoard(2)
    board.set(Position(0, 0), Color.BLUE)
    board.set(Position(1, 1), Color.RED)
    assert str(board).splitlines() == ["B .", " . R"]


def test_get_and_set_by_column_and_row(board):
    board.set(0, 1, Color.BLUE)
    board.set(2, 2, Color.RED)
    assert board.get(0, 1) is Color.BLUE
    assert board.get(3) is Color.BLUE
    assert board.get(2, 2) is Color.RED
    for cell in range(board.num_cells):
        column, row = board.to_position(cell)
        assert board.get(column, row) is board.get(cell)
    with pytest.raises(IndexError):
        board.get(3, 0)
    with pytest.raises(IndexError):
        board.set(0, 3, Color.RED)


def test_set_rejects_wrong_argument_count(board):
    with pytest.raises(TypeError):
        board.set(0)
    with pytest.raises(TypeError):
        board.set(0, 1, 2, Color.BLUE)


@pytest.mark.parametrize("cell", [-1, 9, 100])
def test_out_of_range_index_in_conversion_and_neighbors(board, cell):
    with pytest.raises(IndexError):
        board.to_position(cell)
    with pytest.raises(IndexError):
        board.neighbors(cell)
