"""
Configuration constants and settings for the Hex engine.

Module-level constants hold the game defaults; MonteCarloConfig groups the
knobs of the automated player so callers can tune strength vs. latency
without editing the selector.
"""

from dataclasses import dataclass
from typing import Optional

# Board defaults
DEFAULT_BOARD_SIZE = 11
MIN_BOARD_SIZE = 2

# Sentinel for "no such cell" in index conversion and neighbour lookups
INVALID_CELL = -1

# Monte Carlo defaults
DEFAULT_MONTE_CARLO_TRIALS = 2600
DEFAULT_MAX_WORKERS = 1


@dataclass
class MonteCarloConfig:
    """
    Monte Carlo move selection parameters.

    - trials: number of random board completions per move decision
    - max_workers: worker processes used to run trials (1 = run in-process)
    - seed: root seed for the per-trial random streams (None = fresh entropy)
    """

    trials: int = DEFAULT_MONTE_CARLO_TRIALS
    max_workers: int = DEFAULT_MAX_WORKERS
    seed: Optional[int] = None

    def validate(self) -> None:
        """Raise ValueError if any knob is out of range."""
        if self.trials < 1:
            raise ValueError(f"trials must be >= 1, got {self.trials}")
        if self.max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {self.max_workers}")
