"""
Fitness functions for binary chromosomes

This module contains the fitness strategies and a caching evaluator that
scores whole populations.
"""

import logging
import math
import numpy as np
from abc import ABC, abstractmethod
from typing import Dict, Sequence

from .chromosome import chromosome_to_string, count_set_genes
from .errors import InvalidInput


class Fitness(ABC):
    """Maps one chromosome to a non-negative score"""

    @abstractmethod
    def calculate(self, individual: Sequence[bool]) -> float:
        """Score an individual (higher is better)"""


class CountFitness(Fitness):
    """Number of genes set to True"""

    def calculate(self, individual: Sequence[bool]) -> float:
        return float(count_set_genes(individual))


class FitnessEvaluator(Fitness):
    """
    Evaluates a wrapped fitness function over individuals and populations
    """

    def __init__(self, fitness: Fitness, use_cache: bool = True):
        """
        Initialize fitness evaluator

        Args:
            fitness: Fitness strategy to evaluate
            use_cache: Reuse scores of chromosomes seen before
        """
        self.fitness = fitness
        self.use_cache = use_cache

        # Fitness caching
        self.fitness_cache: Dict[str, float] = {}
        self.cache_hits = 0
        self.cache_misses = 0

        self.logger = logging.getLogger(__name__)

    def calculate(self, individual: Sequence[bool]) -> float:
        """
        Evaluate fitness of an individual

        Args:
            individual: Chromosome to evaluate

        Returns:
            Fitness value
        """
        if not self.use_cache:
            return self._score(individual)

        chromosome_key = chromosome_to_string(individual)
        if chromosome_key in self.fitness_cache:
            self.cache_hits += 1
            return self.fitness_cache[chromosome_key]

        self.cache_misses += 1
        fitness = self._score(individual)
        self.fitness_cache[chromosome_key] = fitness
        return fitness

    def evaluate_population(self, population: Sequence[Sequence[bool]]) -> np.ndarray:
        """
        Evaluate every individual of a population

        Args:
            population: Ordered sequence of chromosomes

        Returns:
            Array of fitness values, one per individual, in population order
        """
        if len(population) == 0:
            raise InvalidInput("Cannot evaluate an empty population")
        scores = np.array([self.calculate(individual) for individual in population], dtype=float)
        self.logger.debug(f"Evaluated {len(scores)} individuals (cache size: {len(self.fitness_cache)})")
        return scores

    def _score(self, individual: Sequence[bool]) -> float:
        fitness = float(self.fitness.calculate(individual))
        if not math.isfinite(fitness) or fitness < 0:
            raise InvalidInput(f"Fitness must be a non-negative finite number, got {fitness}")
        return fitness

    def get_cache_size(self) -> int:
        """Get the current size of the fitness cache"""
        return len(self.fitness_cache)

    def get_cache_stats(self) -> Dict[str, int]:
        """Get cache statistics"""
        return {
            'cache_size': len(self.fitness_cache),
            'cache_hits': self.cache_hits,
            'cache_misses': self.cache_misses
        }

    def get_fitness_distribution(self) -> Dict[str, float]:
        """Get fitness distribution statistics of cached scores"""
        if not self.fitness_cache:
            return {
                'min_fitness': 0.0,
                'max_fitness': 0.0,
                'mean_fitness': 0.0,
                'std_fitness': 0.0
            }

        fitness_values = list(self.fitness_cache.values())
        return {
            'min_fitness': float(np.min(fitness_values)),
            'max_fitness': float(np.max(fitness_values)),
            'mean_fitness': float(np.mean(fitness_values)),
            'std_fitness': float(np.std(fitness_values))
        }

    def clear_cache(self) -> None:
        """Clear the fitness cache"""
        self.fitness_cache.clear()
        self.cache_hits = 0
        self.cache_misses = 0
        self.logger.info("Fitness cache cleared")
