"""
Connectivity search over same-colored cells.

The search expands cells in order of path length from the anchor cell using a
binary heap. Every step costs 1, so the expansion order is breadth-first;
the order among cells of equal cost is unspecified.
"""

import heapq
from dataclasses import dataclass
from typing import Dict, List, Optional, Set, Tuple

from hex_engine.board import HexBoard
from hex_engine.config import INVALID_CELL


@dataclass
class PathSearchResult:
    """
    Outcome of a connectivity search.

    predecessors is only populated when the caller asked for a path:
    predecessors[b] = a records that a discovered b first.
    """
    found: bool
    predecessors: Optional[Dict[int, int]] = None

    def __bool__(self) -> bool:
        return self.found


def find_path(board: HexBoard, from_cell: int, to_cell: int,
              want_path: bool = False) -> PathSearchResult:
    """
    Search for a chain of cells colored like from_cell that reaches to_cell.

    Only neighbours with the same color as from_cell are entered. A cell is
    closed when it is popped from the frontier and never expanded again.

    Args:
        board: Board to search
        from_cell: Anchor cell index; its color restricts the search
        to_cell: Destination cell index
        want_path: Record predecessors so the chain can be reconstructed

    Returns:
        PathSearchResult, found=True as soon as to_cell is popped

    Raises:
        IndexError: If either cell is outside the board
    """
    if not board.is_valid_index(from_cell) or not board.is_valid_index(to_cell):
        raise IndexError(f"Search cells ({from_cell}, {to_cell}) out of bounds for size {board.size}")

    cells = board.cells
    anchor_value = cells[from_cell]
    predecessors: Optional[Dict[int, int]] = {} if want_path else None

    open_set: List[Tuple[int, int]] = [(0, from_cell)]
    closed_set: Set[int] = set()

    while open_set:
        cost, cell = heapq.heappop(open_set)
        if cell in closed_set:
            continue
        closed_set.add(cell)
        if cell == to_cell:
            return PathSearchResult(True, predecessors)

        for neighbor in board.neighbors(cell):
            if neighbor == INVALID_CELL:
                continue
            if cells[neighbor] != anchor_value:
                continue
            if neighbor in closed_set:
                continue
            # first discoverer wins
            if predecessors is not None and neighbor not in predecessors:
                predecessors[neighbor] = cell
            heapq.heappush(open_set, (cost + 1, neighbor))

    return PathSearchResult(False, predecessors)


def reconstruct_path(destination_cell: int, predecessors: Dict[int, int]) -> List[int]:
    """
    Walk predecessor links back from destination_cell to the search anchor.

    Returns:
        Cell indices ordered from destination to anchor
    """
    path = [destination_cell]
    cell = destination_cell
    while cell in predecessors:
        cell = predecessors[cell]
        path.append(cell)
    return path
