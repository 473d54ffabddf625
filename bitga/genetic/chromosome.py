"""
Chromosome helpers

A chromosome is a 1-D numpy array of booleans. Operators accept any sequence
and normalise it here.
"""

import numpy as np
from typing import Sequence

from .errors import InvalidInput


def as_chromosome(values: Sequence[bool]) -> np.ndarray:
    """
    Copy values into a new boolean chromosome

    Args:
        values: Sequence of gene values (anything truthy/falsy)

    Returns:
        New 1-D array of dtype bool
    """
    chromosome = np.array(values, dtype=bool)
    if chromosome.ndim != 1:
        raise InvalidInput(f"Chromosome must be one-dimensional, got shape {chromosome.shape}")
    return chromosome


def chromosome_to_string(chromosome: Sequence[bool]) -> str:
    """Render a chromosome as a string of 0s and 1s"""
    return ''.join('1' if gene else '0' for gene in as_chromosome(chromosome))


def count_set_genes(chromosome: Sequence[bool]) -> int:
    """Number of genes set to True"""
    return int(np.count_nonzero(as_chromosome(chromosome)))
