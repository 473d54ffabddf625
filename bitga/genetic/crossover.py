"""
Crossover operators for binary chromosomes

All variants cut both parents at the same boundaries and build offspring from
alternating segments. Segment 0 keeps each parent's own genes, and every cut
point swaps the source parent for the rest of the chromosome.
"""

import logging
import numpy as np
from abc import ABC, abstractmethod
from typing import List, Sequence, Tuple

from .chromosome import as_chromosome
from .errors import InvalidInput, LengthMismatch
from .picker import IndexPicker


class Crossover(ABC):
    """Recombines two equal-length parents into two offspring"""

    def __init__(self, picker: IndexPicker):
        self.picker = picker
        self.logger = logging.getLogger(__name__)

    @abstractmethod
    def cut_points(self, length: int) -> List[int]:
        """Segment boundaries to use for chromosomes of the given length"""

    def crossover(self, parent_a: Sequence[bool], parent_b: Sequence[bool]) -> Tuple[np.ndarray, np.ndarray]:
        """
        Perform crossover between two parents

        Args:
            parent_a: First parent chromosome
            parent_b: Second parent chromosome

        Returns:
            Tuple of two new offspring chromosomes
        """
        a = as_chromosome(parent_a)
        b = as_chromosome(parent_b)
        if len(a) != len(b):
            raise LengthMismatch(len(a), len(b))

        length = len(a)
        cuts = self._validate_cut_points(self.cut_points(length), length)
        self.logger.debug(f"{type(self).__name__}: cutting length {length} at {cuts}")

        # Number of cut points at or before each position decides the source
        crossings = np.searchsorted(np.asarray(cuts, dtype=int), np.arange(length), side='right')
        swapped = crossings % 2 == 1

        child_a = np.where(swapped, b, a)
        child_b = np.where(swapped, a, b)
        return child_a, child_b

    @staticmethod
    def _validate_cut_points(cuts: Sequence[int], length: int) -> List[int]:
        cuts = [int(c) for c in cuts]
        if any(c < 0 or c >= length for c in cuts):
            raise InvalidInput(f"Cut points {cuts} out of range for length {length}")
        if any(later <= earlier for earlier, later in zip(cuts, cuts[1:])):
            raise InvalidInput(f"Cut points {cuts} are not strictly increasing")
        return cuts


class OnePointCrossover(Crossover):
    """Single cut point: A[:i] + B[i:] and B[:i] + A[i:]"""

    def cut_points(self, length: int) -> List[int]:
        return [self.picker.pick(length)]


class KPointCrossover(Crossover):
    """k distinct cut points, k + 1 alternating segments"""

    def __init__(self, picker: IndexPicker, k: int):
        super().__init__(picker)
        if k < 1:
            raise InvalidInput(f"Number of cut points must be at least 1, got {k}")
        self.k = k

    def cut_points(self, length: int) -> List[int]:
        if self.k > length:
            raise InvalidInput(f"Cannot place {self.k} cut points in length {length}")
        return self.picker.pick_n(length, self.k)


class UniformCrossover(Crossover):
    """Variable number of cut points chosen by the picker's pick_some"""

    def cut_points(self, length: int) -> List[int]:
        return self.picker.pick_some(length)
