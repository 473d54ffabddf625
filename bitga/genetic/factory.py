"""
Operator wiring

Builds a matching set of picker, crossover, fitness and selection from an
OperatorConfig.
"""

import logging
from dataclasses import dataclass

from ..config import OperatorConfig
from ..utils import setup_logger, spawn_rngs
from .crossover import Crossover, KPointCrossover, OnePointCrossover, UniformCrossover
from .fitness import CountFitness, Fitness, FitnessEvaluator
from .picker import IndexPicker, RandomIndexPicker, SequentialIndexPicker
from .selection import (
    ExponentialRankProbability,
    LinearRankProbability,
    RankProbability,
    RankSelection,
    ReciprocalRankProbability,
    RouletteWheelSelection,
    Selection,
)


@dataclass
class OperatorSet:
    """Operators a driver calls each generation"""
    picker: IndexPicker
    crossover: Crossover
    fitness: Fitness
    selection: Selection


def build_operators(config: OperatorConfig) -> OperatorSet:
    """
    Build operators described by a configuration

    Args:
        config: Operator configuration

    Returns:
        OperatorSet whose random components each own a separate Generator
    """
    config.validate()
    if config.log_file:
        logger = setup_logger('bitga', log_file=config.log_file, level=config.log_level)
    else:
        logger = logging.getLogger('bitga')

    picker_rng, selection_rng = spawn_rngs(config.random_seed, 2)

    if config.picker == 'sequential':
        picker = SequentialIndexPicker()
    else:
        picker = RandomIndexPicker(picker_rng, config.inclusion_probability)

    if config.crossover == 'k_point':
        crossover = KPointCrossover(picker, config.k_points)
    elif config.crossover == 'uniform':
        crossover = UniformCrossover(picker)
    else:
        crossover = OnePointCrossover(picker)

    fitness: Fitness = CountFitness()
    if config.use_fitness_cache:
        fitness = FitnessEvaluator(fitness)

    if config.selection == 'rank':
        selection = RankSelection(fitness, _rank_probability(config), selection_rng)
    else:
        selection = RouletteWheelSelection(fitness, selection_rng)

    logger.info(f"Built operators: picker={config.picker}, crossover={config.crossover}, "
                f"selection={config.selection}, seed={config.random_seed}")
    return OperatorSet(picker=picker, crossover=crossover, fitness=fitness, selection=selection)


def _rank_probability(config: OperatorConfig) -> RankProbability:
    if config.rank_probability == 'reciprocal':
        return ReciprocalRankProbability()
    if config.rank_probability == 'exponential':
        return ExponentialRankProbability(config.rank_base)
    return LinearRankProbability()
