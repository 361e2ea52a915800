"""
Random stream utilities for reproducible, independent simulations.
"""

from typing import List, Optional, Union

import numpy as np

SeedLike = Union[None, int, np.random.SeedSequence]


def as_seed_sequence(seed: SeedLike) -> np.random.SeedSequence:
    """Wrap an int (or None for fresh entropy) in a SeedSequence; pass SeedSequences through."""
    if isinstance(seed, np.random.SeedSequence):
        return seed
    return np.random.SeedSequence(seed)


def spawn_trial_seeds(seed: SeedLike, count: int) -> List[np.random.SeedSequence]:
    """
    Spawn one independent child seed per trial.

    Child k depends only on the root seed and k, so a trial draws the same
    numbers no matter which worker runs it. A SeedSequence root is copied
    before spawning and left unchanged.

    Args:
        seed: Root seed
        count: Number of trials

    Returns:
        List of count child SeedSequences
    """
    root = as_seed_sequence(seed)
    fresh_root = np.random.SeedSequence(root.entropy, spawn_key=root.spawn_key, pool_size=root.pool_size)
    return fresh_root.spawn(count)


def make_generator(seed: Optional[np.random.SeedSequence]) -> np.random.Generator:
    return np.random.default_rng(seed)
