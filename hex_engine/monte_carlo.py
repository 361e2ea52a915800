"""
Monte Carlo move selection for an automated Hex player.

For every empty cell the selector estimates how strongly owning that cell
correlates with winning a uniformly random completion of the current
position. Each trial fills the empty cells at random, alternating colors
starting with the player to move, and checks who won. Every originally empty
cell that ended up in the player's color gets +1 for a win and -1 for a loss.
The cell with the highest total is played.

Trials are independent: each one works on its own board copy with its own
random stream, so they can be spread over worker processes and the partial
score tables summed. Scores do not depend on the number of workers.
"""

import logging
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass, field
from typing import List, Optional

import numpy as np

from hex_engine.board import HexBoard, Position
from hex_engine.config import DEFAULT_MONTE_CARLO_TRIALS, MonteCarloConfig
from hex_engine.enums import Color, opponent_of
from hex_engine.rules import HexPlayer, check_winner
from hex_engine.utils.random_utils import SeedLike, as_seed_sequence, make_generator, spawn_trial_seeds

logger = logging.getLogger(__name__)


def run_trial(board: HexBoard, empty_cells: np.ndarray, own_color: Color,
              rng: np.random.Generator, scores: np.ndarray) -> bool:
    """
    Play one random completion of board and fold the outcome into scores.

    The empty cells are drawn without replacement in a random order; cells at
    even draws get own_color, cells at odd draws get the opponent's color.

    Args:
        board: Original position (not modified)
        empty_cells: Indices of the empty cells of board
        own_color: Color that moves first in the completion
        rng: Random stream owned by this trial
        scores: Per-cell score table, updated in place

    Returns:
        True if own_color won the completion
    """
    trial_board = board.clone()
    draw_order = rng.permutation(empty_cells)
    own_cells = draw_order[0::2]
    trial_board.mark_cells(own_cells, own_color)
    trial_board.mark_cells(draw_order[1::2], opponent_of(own_color))

    won = check_winner(trial_board).winner is own_color
    scores[own_cells] += 1 if won else -1
    return won


def run_trial_block(board: HexBoard, own_color: Color,
                    trial_seeds: List[np.random.SeedSequence]) -> np.ndarray:
    """
    Run a block of trials and return their partial score table.

    Module-level so it can be pickled for worker processes.
    """
    scores = np.zeros(board.num_cells, dtype=np.int64)
    empty_cells = board.empty_cells()
    wins = 0
    for trial_seed in trial_seeds:
        wins += run_trial(board, empty_cells, own_color, make_generator(trial_seed), scores)
    logger.debug(f"Trial block done: {len(trial_seeds)} trials, {wins} wins for {own_color.name}")
    return scores


def score_moves(board: HexBoard, own_color: Color, trials: int = DEFAULT_MONTE_CARLO_TRIALS,
                max_workers: int = 1, seed: SeedLike = None,
                config: Optional[MonteCarloConfig] = None) -> np.ndarray:
    """
    Compute Monte Carlo scores for every cell of board.

    Args:
        board: Current position, read only
        own_color: Color of the player to move
        trials: Number of random completions, at least 1
        max_workers: Worker processes; 1 runs every trial in this process
        seed: Root seed for the per-trial random streams. A SeedSequence
            is not consumed: passing the same one twice gives the same scores
        config: If given, its trials, max_workers and seed replace the
            individual arguments

    Returns:
        int64 array of length N*N; entries for occupied cells stay 0

    Raises:
        ValueError: On a non-positive trial or worker count, an empty
            own_color, or a board without empty cells
    """
    if config is not None:
        trials, max_workers, seed = config.trials, config.max_workers, config.seed
    MonteCarloConfig(trials=trials, max_workers=max_workers).validate()
    if not isinstance(own_color, Color) or own_color is Color.EMPTY:
        raise ValueError(f"own_color must be BLUE or RED, got {own_color}")
    if board.empty_cells().size == 0:
        raise ValueError("No empty cells to score")

    trial_seeds = spawn_trial_seeds(seed, trials)
    workers = min(max_workers, trials)
    if workers == 1:
        return run_trial_block(board, own_color, trial_seeds)

    blocks = [trial_seeds[block[0]:block[-1] + 1] for block in np.array_split(np.arange(trials), workers)]
    scores = np.zeros(board.num_cells, dtype=np.int64)
    with ProcessPoolExecutor(max_workers=workers) as executor:
        futures = [executor.submit(run_trial_block, board, own_color, block) for block in blocks]
        for future in futures:
            scores += future.result()
    return scores


def choose_move(board: HexBoard, own_color: Color, trials: int = DEFAULT_MONTE_CARLO_TRIALS,
                max_workers: int = 1, seed: SeedLike = None,
                config: Optional[MonteCarloConfig] = None) -> Position:
    """
    Pick the empty cell with the best Monte Carlo score.

    Ties go to the lowest cell index. Arguments are as for score_moves.

    Returns:
        Position (column, row) of the chosen cell
    """
    if config is not None:
        trials, max_workers, seed = config.trials, config.max_workers, config.seed
    scores = score_moves(board, own_color, trials, max_workers, seed)
    empty_cells = board.empty_cells()
    best = int(empty_cells[int(np.argmax(scores[empty_cells]))])
    logger.debug(
        f"Monte Carlo choice for {own_color.name}: cell {best} score {scores[best]} "
        f"({trials} trials, {max_workers} workers, {len(empty_cells)} candidates)"
    )
    return board.to_position(best)


@dataclass
class MonteCarloPlayer(HexPlayer):
    """
    Automated player backed by choose_move.

    Every move draws a fresh child of the player's root seed, so a seeded
    player is reproducible over a whole game without repeating itself.
    """
    config: MonteCarloConfig = field(default_factory=MonteCarloConfig)
    _seed_sequence: Optional[np.random.SeedSequence] = field(default=None, init=False, repr=False)

    def __post_init__(self):
        super().__post_init__()
        self.config.validate()
        self._seed_sequence = as_seed_sequence(self.config.seed)

    def make_move(self, board: HexBoard) -> Position:
        move_seed = self._seed_sequence.spawn(1)[0]
        return choose_move(board, self.color, self.config.trials, self.config.max_workers, move_seed)
