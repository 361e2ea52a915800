"""
Hex game engine.

Board model, connectivity-based winner detection and a Monte Carlo move
selector for an automated player. Rendering, input handling and the turn
loop live with the caller.
"""

__version__ = "2025.1.0"

from hex_engine.board import HexBoard, Position
from hex_engine.config import INVALID_CELL, MonteCarloConfig
from hex_engine.enums import Color
from hex_engine.monte_carlo import MonteCarloPlayer, choose_move, score_moves
from hex_engine.path_finder import PathSearchResult, find_path, reconstruct_path
from hex_engine.rules import HexPlayer, WinResult, check_winner, is_winner

__all__ = [
    "Color",
    "HexBoard",
    "Position",
    "INVALID_CELL",
    "MonteCarloConfig",
    "PathSearchResult",
    "find_path",
    "reconstruct_path",
    "HexPlayer",
    "WinResult",
    "check_winner",
    "is_winner",
    "MonteCarloPlayer",
    "choose_move",
    "score_moves",
]
