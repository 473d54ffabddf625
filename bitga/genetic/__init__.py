"""Genetic algorithm operators module"""

from .errors import GAError, LengthMismatch, InvalidInput
from .chromosome import as_chromosome, chromosome_to_string, count_set_genes
from .picker import IndexPicker, SequentialIndexPicker, RandomIndexPicker
from .crossover import Crossover, OnePointCrossover, KPointCrossover, UniformCrossover
from .fitness import Fitness, CountFitness, FitnessEvaluator
from .selection import (
    RankProbability,
    LinearRankProbability,
    ReciprocalRankProbability,
    ExponentialRankProbability,
    Selection,
    RouletteWheelSelection,
    RankSelection,
)
from .statistics import population_statistics, population_diversity, selection_summary
from .factory import OperatorSet, build_operators

__all__ = [
    'GAError',
    'LengthMismatch',
    'InvalidInput',
    'as_chromosome',
    'chromosome_to_string',
    'count_set_genes',
    'IndexPicker',
    'SequentialIndexPicker',
    'RandomIndexPicker',
    'Crossover',
    'OnePointCrossover',
    'KPointCrossover',
    'UniformCrossover',
    'Fitness',
    'CountFitness',
    'FitnessEvaluator',
    'RankProbability',
    'LinearRankProbability',
    'ReciprocalRankProbability',
    'ExponentialRankProbability',
    'Selection',
    'RouletteWheelSelection',
    'RankSelection',
    'population_statistics',
    'population_diversity',
    'selection_summary',
    'OperatorSet',
    'build_operators'
]
