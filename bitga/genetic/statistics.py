"""
Population and selection statistics

Helpers a driver can use to monitor a generation: fitness summary, genetic
diversity and how often each individual was picked as a parent.
"""

import numpy as np
import pandas as pd
from typing import Any, Dict, Sequence, Tuple

from .chromosome import as_chromosome
from .errors import InvalidInput, LengthMismatch


def population_statistics(scores: Sequence[float]) -> Dict[str, Any]:
    """
    Calculate fitness statistics

    Args:
        scores: Fitness value per individual

    Returns:
        Dictionary with population statistics (higher fitness is better)
    """
    if len(scores) == 0:
        return {
            'best_fitness': None,
            'worst_fitness': None,
            'avg_fitness': None,
            'std_fitness': None,
            'evaluated_count': 0
        }

    fitness_values = np.asarray(scores, dtype=float)
    return {
        'best_fitness': float(np.max(fitness_values)),
        'worst_fitness': float(np.min(fitness_values)),
        'avg_fitness': float(np.mean(fitness_values)),
        'std_fitness': float(np.std(fitness_values)),
        'evaluated_count': len(fitness_values)
    }


def population_diversity(population: Sequence[Sequence[bool]]) -> float:
    """Average normalised Hamming distance between all pairs of chromosomes"""
    if len(population) < 2:
        return 0.0

    chromosomes = [as_chromosome(individual) for individual in population]
    length = len(chromosomes[0])
    for chromosome in chromosomes[1:]:
        if len(chromosome) != length:
            raise LengthMismatch(length, len(chromosome))
    if length == 0:
        return 0.0

    total_distance = 0.0
    comparisons = 0
    for i in range(len(chromosomes)):
        for j in range(i + 1, len(chromosomes)):
            distance = np.count_nonzero(chromosomes[i] != chromosomes[j])
            total_distance += distance / length
            comparisons += 1

    return total_distance / comparisons


def selection_summary(weights: Sequence[float], pairs: Sequence[Tuple[int, int]]) -> pd.DataFrame:
    """
    Compare expected and observed selection frequencies

    Args:
        weights: Selection weight per individual
        pairs: Parent pairs drawn by a selection

    Returns:
        DataFrame indexed by individual with weight, expected_share,
        times_selected and observed_share columns
    """
    weights = np.asarray(weights, dtype=float)
    if weights.size == 0 or not np.all(np.isfinite(weights)) or np.any(weights < 0) or weights.max() <= 0:
        raise InvalidInput("Weights must be finite, non-negative and contain a positive entry")

    picks = np.asarray(pairs, dtype=int).reshape(-1)
    if picks.size and (picks.min() < 0 or picks.max() >= weights.size):
        raise InvalidInput("Selected index out of range for the given weights")
    counts = np.bincount(picks, minlength=weights.size)
    scaled = weights / weights.max()

    summary = pd.DataFrame({
        'weight': weights,
        'expected_share': scaled / scaled.sum(),
        'times_selected': counts,
        'observed_share': counts / picks.size if picks.size else np.zeros(weights.size),
    })
    summary.index.name = 'individual'
    return summary
