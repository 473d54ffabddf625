"""
Genetic Operator Configuration

This module contains the configuration parameters used to choose and wire
the genetic operators.
"""

import logging
from dataclasses import dataclass
from typing import Optional

PICKERS = ('random', 'sequential')
CROSSOVERS = ('one_point', 'k_point', 'uniform')
FITNESSES = ('count',)
SELECTIONS = ('roulette', 'rank')
RANK_PROBABILITIES = ('linear', 'reciprocal', 'exponential')


@dataclass
class OperatorConfig:
    """Configuration parameters for the genetic operators"""

    # Cut point picking
    picker: str = 'random'
    inclusion_probability: float = 0.5  # Per-index probability for uniform crossover

    # Crossover
    crossover: str = 'one_point'
    k_points: int = 2

    # Fitness
    fitness: str = 'count'
    use_fitness_cache: bool = True

    # Selection
    selection: str = 'roulette'
    rank_probability: str = 'linear'
    rank_base: float = 1.5  # Only used by exponential rank probability

    # Reproducibility
    random_seed: Optional[int] = 42

    # Logging (handlers are attached only when log_file is set)
    log_level: int = logging.INFO
    log_file: Optional[str] = None

    def validate(self) -> None:
        """Validate configuration parameters"""
        # Cut point picking
        if self.picker not in PICKERS:
            raise ValueError(f"Picker must be one of: {', '.join(PICKERS)}")
        if not 0 <= self.inclusion_probability <= 1:
            raise ValueError("Inclusion probability must be between 0 and 1")

        # Crossover
        if self.crossover not in CROSSOVERS:
            raise ValueError(f"Crossover must be one of: {', '.join(CROSSOVERS)}")
        if not isinstance(self.k_points, int) or self.k_points < 1:
            raise ValueError("Number of cut points must be a positive integer")

        # Fitness
        if self.fitness not in FITNESSES:
            raise ValueError(f"Fitness must be one of: {', '.join(FITNESSES)}")

        # Selection
        if self.selection not in SELECTIONS:
            raise ValueError(f"Selection must be one of: {', '.join(SELECTIONS)}")
        if self.rank_probability not in RANK_PROBABILITIES:
            raise ValueError(f"Rank probability must be one of: {', '.join(RANK_PROBABILITIES)}")
        if self.rank_base <= 0:
            raise ValueError("Rank base must be positive")

        # Reproducibility parameters
        if self.random_seed is not None and not isinstance(self.random_seed, int):
            raise ValueError("Random seed must be an integer or None")

    def to_dict(self) -> dict:
        """Convert configuration to dictionary"""
        return {
            'picker': self.picker,
            'inclusion_probability': self.inclusion_probability,
            'crossover': self.crossover,
            'k_points': self.k_points,
            'fitness': self.fitness,
            'use_fitness_cache': self.use_fitness_cache,
            'selection': self.selection,
            'rank_probability': self.rank_probability,
            'rank_base': self.rank_base,
            'random_seed': self.random_seed,
            'log_level': self.log_level,
            'log_file': self.log_file
        }
