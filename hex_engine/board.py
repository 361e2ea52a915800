"""
Board representation for Hex.

The board is an N×N rhombus of hexagonal cells stored as a flat, row-major
numpy array. A cell is addressed either by its index (row * N + column) or by
its (column, row) Position.
"""

from typing import Iterable, NamedTuple, Optional, Tuple, Union

import numpy as np

from hex_engine.config import DEFAULT_BOARD_SIZE, INVALID_CELL, MIN_BOARD_SIZE
from hex_engine.enums import Color, get_color_display_symbol, int_to_color


class Position(NamedTuple):
    column: int
    row: int


CellRef = Union[int, Position, Tuple[int, int]]

# Offsets (d_column, d_row) in neighbour order:
# top-left, top-right, left, right, bottom-left, bottom-right
HEX_NEIGHBOR_OFFSETS = [(0, -1), (1, -1), (-1, 0), (1, 0), (-1, 1), (0, 1)]


class HexBoard:
    """
    Cell occupancy for an N×N Hex board.

    Cells hold Color values. Reads and writes are bounds-checked and raise
    IndexError for cells outside the board; index conversion and neighbour
    queries return INVALID_CELL instead.
    """

    def __init__(self, size: int = DEFAULT_BOARD_SIZE):
        """
        Args:
            size: Side length N of the board, must be at least 2

        Raises:
            ValueError: If size is too small
        """
        if size < MIN_BOARD_SIZE:
            raise ValueError(f"Board size must be at least {MIN_BOARD_SIZE}, got {size}")
        self._size = size
        self._cells = np.full(size * size, Color.EMPTY.value, dtype=np.int8)

    @property
    def size(self) -> int:
        return self._size

    @property
    def num_cells(self) -> int:
        return self._size * self._size

    @property
    def cells(self) -> np.ndarray:
        """Read-only view of the raw cell values (Color.value per index)."""
        view = self._cells.view()
        view.flags.writeable = False
        return view

    def is_valid_position(self, column: int, row: int) -> bool:
        return 0 <= column < self._size and 0 <= row < self._size

    def is_valid_index(self, cell_index: int) -> bool:
        return 0 <= cell_index < self.num_cells

    def to_cell_index(self, column: int, row: int) -> int:
        """Convert (column, row) to a cell index, or INVALID_CELL if off the board."""
        if not self.is_valid_position(column, row):
            return INVALID_CELL
        return row * self._size + column

    def to_position(self, cell_index: int) -> Position:
        """
        Convert a cell index to its (column, row) position.

        Raises:
            IndexError: If the index is outside the board
        """
        if not self.is_valid_index(cell_index):
            raise IndexError(f"Cell index {cell_index} is out of bounds for size {self._size}")
        row, column = divmod(cell_index, self._size)
        return Position(column, row)

    def _resolve(self, cell: CellRef) -> int:
        if isinstance(cell, tuple):
            column, row = cell
            if not self.is_valid_position(column, row):
                raise IndexError(f"Position ({column}, {row}) is out of bounds for size {self._size}")
            return row * self._size + column
        if not self.is_valid_index(cell):
            raise IndexError(f"Cell index {cell} is out of bounds for size {self._size}")
        return int(cell)

    def get(self, cell: CellRef, row: Optional[int] = None) -> Color:
        """
        Get the color of a cell.

        Called as get(cell) or get(column, row).

        Args:
            cell: Cell index or (column, row) position, or the column when row is given
            row: Row of the cell when addressing by column and row

        Returns:
            Color enum at the cell

        Raises:
            IndexError: If the cell is outside the board
        """
        if row is not None:
            cell = Position(cell, row)
        return int_to_color(int(self._cells[self._resolve(cell)]))

    def set(self, cell: CellRef, *args) -> None:
        """
        Set the color of a cell.

        Called as set(cell, color) or set(column, row, color).

        Raises:
            IndexError: If the cell is outside the board
            TypeError: If color is not a Color, or on a wrong argument count
        """
        if len(args) == 1:
            color = args[0]
        elif len(args) == 2:
            cell = Position(cell, args[0])
            color = args[1]
        else:
            raise TypeError(f"set() takes (cell, color) or (column, row, color), got {len(args) + 1} arguments")
        if not isinstance(color, Color):
            raise TypeError(f"color must be Color, got {type(color)}")
        self._cells[self._resolve(cell)] = color.value

    def mark_cells(self, cell_indices: Iterable[int], color: Color) -> None:
        """Set many cells (by index) to the same color in one write."""
        if not isinstance(color, Color):
            raise TypeError(f"color must be Color, got {type(color)}")
        indices = np.asarray(cell_indices, dtype=np.intp)
        if indices.size and (indices.min() < 0 or indices.max() >= self.num_cells):
            raise IndexError(f"Cell indices out of bounds for size {self._size}")
        self._cells[indices] = color.value

    def neighbors(self, cell_index: int) -> Tuple[int, ...]:
        """
        Get the six hex neighbours of a cell.

        Returns:
            Tuple of 6 cell indices, INVALID_CELL where the neighbour is off the board

        Raises:
            IndexError: If cell_index itself is outside the board
        """
        column, row = self.to_position(cell_index)
        return tuple(
            self.to_cell_index(column + d_column, row + d_row)
            for d_column, d_row in HEX_NEIGHBOR_OFFSETS
        )

    def empty_cells(self) -> np.ndarray:
        """Indices of empty cells in ascending order."""
        return np.flatnonzero(self._cells == Color.EMPTY.value)

    def clone(self) -> 'HexBoard':
        """Create an independent copy of this board."""
        new_board = HexBoard.__new__(HexBoard)
        new_board._size = self._size
        new_board._cells = self._cells.copy()
        return new_board

    def assign(self, other: 'HexBoard') -> None:
        """Overwrite this board in place with the contents of another board."""
        if other._size != self._size:
            self._size = other._size
            self._cells = other._cells.copy()
        else:
            np.copyto(self._cells, other._cells)

    def __eq__(self, other) -> bool:
        if not isinstance(other, HexBoard):
            return NotImplemented
        return self._size == other._size and np.array_equal(self._cells, other._cells)

    __hash__ = None

    def __str__(self) -> str:
        lines = []
        for row in range(self._size):
            line = " " * row  # Indent for hex shape
            for column in range(self._size):
                line += get_color_display_symbol(self.get(Position(column, row))) + " "
            lines.append(line.rstrip())
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"HexBoard(size={self._size})\n{self}"
