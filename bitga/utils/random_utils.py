"""
Random utilities for reproducibility

Each random operator owns its own numpy Generator. These helpers build
them from a seed.
"""

import numpy as np
from typing import List, Optional


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Create a Generator, seeded when a seed is given"""
    return np.random.default_rng(seed)


def spawn_rngs(seed: Optional[int], count: int) -> List[np.random.Generator]:
    """
    Derive independent Generators from one seed

    Use one per operator instance or per worker; a Generator must not be
    shared between threads.

    Args:
        seed: Root seed (None for OS entropy)
        count: Number of Generators to create

    Returns:
        List of independent Generators
    """
    if count < 0:
        raise ValueError("Generator count must be non-negative")
    return [np.random.default_rng(child) for child in np.random.SeedSequence(seed).spawn(count)]
