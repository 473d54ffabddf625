"""
Index pickers for crossover cut points

This module contains the strategies crossover operators use to choose
segment boundaries inside a chromosome.
"""

import logging
import numpy as np
from abc import ABC, abstractmethod
from typing import List, Optional

from .errors import InvalidInput


class IndexPicker(ABC):
    """Chooses indices inside a chromosome of a given length"""

    @abstractmethod
    def pick(self, length: int) -> int:
        """Return one index in [0, length)"""

    @abstractmethod
    def pick_n(self, length: int, n: int) -> List[int]:
        """Return n distinct indices in [0, length), sorted ascending"""

    @abstractmethod
    def pick_some(self, length: int) -> List[int]:
        """Return a subset of [0, length) of any size, sorted ascending"""

    @staticmethod
    def _check_length(length: int) -> None:
        if length <= 0:
            raise InvalidInput(f"Cannot pick an index from length {length}")

    @staticmethod
    def _check_count(length: int, n: int) -> None:
        if n < 0:
            raise InvalidInput(f"Number of indices must be non-negative, got {n}")
        if n > length:
            raise InvalidInput(f"Cannot pick {n} distinct indices from length {length}")


class SequentialIndexPicker(IndexPicker):
    """Deterministic picker for reproducible runs and tests"""

    def pick(self, length: int) -> int:
        self._check_length(length)
        return 0

    def pick_n(self, length: int, n: int) -> List[int]:
        self._check_count(length, n)
        return list(range(n))

    def pick_some(self, length: int) -> List[int]:
        # First half of the chromosome
        self._check_length(length)
        return list(range(length // 2))


class RandomIndexPicker(IndexPicker):
    """Uniform random picker backed by a numpy Generator"""

    def __init__(self, rng: Optional[np.random.Generator] = None, inclusion_probability: float = 0.5):
        """
        Initialize random picker

        Args:
            rng: Random number generator owned by this picker. If None, a fresh one is created
            inclusion_probability: Per-index probability used by pick_some
        """
        if not 0 <= inclusion_probability <= 1:
            raise InvalidInput("Inclusion probability must be between 0 and 1")
        self.rng = rng if rng is not None else np.random.default_rng()
        self.inclusion_probability = inclusion_probability
        self.logger = logging.getLogger(__name__)

    def pick(self, length: int) -> int:
        self._check_length(length)
        return int(self.rng.integers(length))

    def pick_n(self, length: int, n: int) -> List[int]:
        self._check_count(length, n)
        indices = self.rng.choice(length, size=n, replace=False)
        return sorted(int(i) for i in indices)

    def pick_some(self, length: int) -> List[int]:
        self._check_length(length)
        # Independent Bernoulli trial per position
        mask = self.rng.random(length) < self.inclusion_probability
        indices = [int(i) for i in np.flatnonzero(mask)]
        self.logger.debug(f"pick_some({length}) selected {len(indices)} indices")
        return indices
