"""
Game rules for Hex: winner detection and winning-path extraction.

BLUE wins by connecting column 0 to column N-1, RED by connecting row 0 to
row N-1. A color wins when any of its cells on one side is connected to any
of its cells on the opposite side through same-colored neighbours.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Sequence

from hex_engine.board import HexBoard, Position
from hex_engine.enums import Color
from hex_engine.path_finder import find_path, reconstruct_path

logger = logging.getLogger(__name__)


@dataclass
class HexPlayer:
    """
    A participant in a game: its color and the cells it has captured, in order.

    Subclasses provide make_move(board) -> Position.
    """
    color: Color
    captured_cells: List[int] = field(default_factory=list)

    def __post_init__(self):
        if not isinstance(self.color, Color):
            raise TypeError(f"color must be Color, got {type(self.color)}")
        if self.color is Color.EMPTY:
            raise ValueError("A player cannot play Color.EMPTY")

    def capture_cell(self, cell_index: int) -> None:
        self.captured_cells.append(cell_index)

    def make_move(self, board: HexBoard) -> Position:
        raise NotImplementedError


@dataclass
class WinResult:
    """
    Winner of a board (Color.EMPTY if none) and, when requested, the winning chain.

    path runs from a cell on one target side to a cell on the other.
    """
    winner: Color
    path: List[int] = field(default_factory=list)

    @property
    def has_winner(self) -> bool:
        return self.winner is not Color.EMPTY

    def __bool__(self) -> bool:
        return self.has_winner


def _is_win(board: HexBoard, one_side_cells: Sequence[int], another_side_cells: Sequence[int],
            want_path: bool = False) -> WinResult:
    """Try every pair of side cells until one pair is connected."""
    for side_cell in one_side_cells:
        for another_side_cell in another_side_cells:
            result = find_path(board, side_cell, another_side_cell, want_path)
            if result.found:
                path = reconstruct_path(another_side_cell, result.predecessors) if want_path else []
                return WinResult(board.get(side_cell), path)
    return WinResult(Color.EMPTY)


def check_winner(board: HexBoard, want_path: bool = False) -> WinResult:
    """
    Determine which color, if any, has connected its two sides.

    Args:
        board: Board to inspect
        want_path: Also return the winning chain of cell indices

    Returns:
        WinResult with winner Color.EMPTY when nobody has won
    """
    size = board.size
    last = size - 1

    blue_left = [board.to_cell_index(0, row) for row in range(size)
                 if board.get(Position(0, row)) is Color.BLUE]
    blue_right = [board.to_cell_index(last, row) for row in range(size)
                  if board.get(Position(last, row)) is Color.BLUE]
    result = _is_win(board, blue_left, blue_right, want_path)
    if result.has_winner:
        logger.debug("Blue connects left and right edges")
        return result

    red_top = [board.to_cell_index(column, 0) for column in range(size)
               if board.get(Position(column, 0)) is Color.RED]
    red_bottom = [board.to_cell_index(column, last) for column in range(size)
                  if board.get(Position(column, last)) is Color.RED]
    result = _is_win(board, red_top, red_bottom, want_path)
    if result.has_winner:
        logger.debug("Red connects top and bottom edges")
    return result


def is_winner(board: HexBoard, player: HexPlayer, want_path: bool = False) -> WinResult:
    """
    Check whether player has won, looking only at the cells it has captured.

    Equivalent to check_winner(board).winner == player.color, but only the
    player's captured cells are scanned to build the side groups, which makes
    it cheap to call after every move.

    Returns:
        WinResult with winner player.color on a win, Color.EMPTY otherwise
    """
    last = board.size - 1
    one_side_cells = []
    another_side_cells = []
    for cell_index in player.captured_cells:
        column, row = board.to_position(cell_index)
        coordinate = column if player.color is Color.BLUE else row
        if coordinate == 0:
            one_side_cells.append(cell_index)
        elif coordinate == last:
            another_side_cells.append(cell_index)

    result = _is_win(board, one_side_cells, another_side_cells, want_path)
    if result.has_winner:
        logger.debug(f"{result.winner.name} wins with {len(player.captured_cells)} captured cells")
    return result
