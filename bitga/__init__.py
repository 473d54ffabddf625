"""Composable operators for binary-encoded genetic algorithms"""

from .config import OperatorConfig
from .genetic import (
    GAError, LengthMismatch, InvalidInput,
    SequentialIndexPicker, RandomIndexPicker,
    OnePointCrossover, KPointCrossover, UniformCrossover,
    CountFitness, FitnessEvaluator,
    LinearRankProbability, ReciprocalRankProbability, ExponentialRankProbability,
    RouletteWheelSelection, RankSelection,
    build_operators,
)

__version__ = '0.1.0'

__all__ = [
    'OperatorConfig',
    'GAError',
    'LengthMismatch',
    'InvalidInput',
    'SequentialIndexPicker',
    'RandomIndexPicker',
    'OnePointCrossover',
    'KPointCrossover',
    'UniformCrossover',
    'CountFitness',
    'FitnessEvaluator',
    'LinearRankProbability',
    'ReciprocalRankProbability',
    'ExponentialRankProbability',
    'RouletteWheelSelection',
    'RankSelection',
    'build_operators'
]
