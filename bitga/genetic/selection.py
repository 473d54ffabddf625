"""
Parent selection strategies

Selections score a population, turn the scores into a weight per individual
and draw pairs of parent indices with replacement from the resulting
categorical distribution.
"""

import logging
import numpy as np
from abc import ABC, abstractmethod
from typing import Iterator, List, Optional, Sequence, Tuple

from .errors import InvalidInput
from .fitness import Fitness

Pair = Tuple[int, int]


class RankProbability(ABC):
    """Maps a rank (0 = worst individual) to a selection weight"""

    @abstractmethod
    def weight(self, rank: int) -> float:
        """Weight for the given rank"""

    def weights(self, ranks: Sequence[int]) -> np.ndarray:
        """
        Weights for a whole ranking

        Only the ratios between weights matter for selection, so subclasses
        may return any positive multiple of the per-rank weights.
        """
        return np.array([self.weight(int(rank)) for rank in ranks], dtype=float)


class LinearRankProbability(RankProbability):
    """Weight rank + 1, favouring fitter individuals"""

    def weight(self, rank: int) -> float:
        return float(rank + 1)


class ReciprocalRankProbability(RankProbability):
    """Weight 1 / (rank + 1)"""

    def weight(self, rank: int) -> float:
        return 1.0 / (rank + 1)


class ExponentialRankProbability(RankProbability):
    """Weight base ** rank"""

    def __init__(self, base: float = 1.5):
        if base <= 0:
            raise InvalidInput(f"Exponential rank base must be positive, got {base}")
        self.base = base

    def weight(self, rank: int) -> float:
        try:
            return float(self.base ** rank)
        except OverflowError:
            raise InvalidInput(f"Weight {self.base} ** {rank} is out of float range") from None

    def weights(self, ranks: Sequence[int]) -> np.ndarray:
        # Relative to the largest weight, computed in log space
        log_weights = np.asarray(ranks, dtype=float) * np.log(self.base)
        if log_weights.size == 0:
            return log_weights
        return np.exp(log_weights - log_weights.max())


class Selection(ABC):
    """Draws pairs of parent indices from a population"""

    def __init__(self, fitness: Fitness, rng: Optional[np.random.Generator] = None):
        """
        Initialize selection

        Args:
            fitness: Fitness strategy used to score individuals
            rng: Random number generator owned by this selection. If None, a fresh one is created
        """
        self.fitness = fitness
        self.rng = rng if rng is not None else np.random.default_rng()
        self.logger = logging.getLogger(__name__)

    @abstractmethod
    def weights_from_scores(self, scores: Sequence[float]) -> np.ndarray:
        """Selection weight per individual given its fitness score"""

    def weights(self, population: Sequence[Sequence[bool]]) -> np.ndarray:
        """Validated selection weights for a population"""
        if len(population) == 0:
            raise InvalidInput("Cannot select from an empty population")
        scores = [self.fitness.calculate(individual) for individual in population]
        return self._validated(self.weights_from_scores(scores))

    def select(self, population: Sequence[Sequence[bool]], samples: int) -> List[Pair]:
        """
        Draw parent pairs from a population

        Args:
            population: Ordered sequence of chromosomes
            samples: Number of pairs to draw

        Returns:
            List of (parent index, parent index) tuples
        """
        self._check_samples(samples)
        return self._draw(self.weights(population), samples)

    def select_from_scores(self, scores: Sequence[float], samples: int) -> List[Pair]:
        """Draw parent pairs given precomputed fitness scores"""
        self._check_samples(samples)
        if len(scores) == 0:
            raise InvalidInput("Cannot select from an empty fitness vector")
        return self._draw(self._validated(self.weights_from_scores(scores)), samples)

    def iter_pairs(self, population: Sequence[Sequence[bool]]) -> Iterator[Pair]:
        """
        Endless stream of parent pairs

        Weights are computed once when the generator is created; stop
        consuming it to end the stream.
        """
        return self._stream(self._probabilities(self.weights(population)))

    def _stream(self, probabilities: np.ndarray) -> Iterator[Pair]:
        while True:
            first, second = self.rng.choice(len(probabilities), size=2, p=probabilities)
            yield int(first), int(second)

    def _draw(self, weights: np.ndarray, samples: int) -> List[Pair]:
        draws = self.rng.choice(len(weights), size=2 * samples, p=self._probabilities(weights))
        pairs = [(int(draws[i]), int(draws[i + 1])) for i in range(0, len(draws), 2)]
        self.logger.debug(f"{type(self).__name__}: drew {samples} pairs from {len(weights)} individuals")
        return pairs

    @staticmethod
    def _probabilities(weights: np.ndarray) -> np.ndarray:
        # Scale by the maximum first so the total cannot overflow
        scaled = weights / weights.max()
        return scaled / scaled.sum()

    @staticmethod
    def _check_samples(samples: int) -> None:
        if isinstance(samples, bool) or not isinstance(samples, (int, np.integer)) or samples < 0:
            raise InvalidInput(f"Number of samples must be a non-negative integer, got {samples!r}")

    @staticmethod
    def _validated(weights: np.ndarray) -> np.ndarray:
        weights = np.asarray(weights, dtype=float)
        if weights.size == 0:
            raise InvalidInput("Cannot select from an empty population")
        if not np.all(np.isfinite(weights)):
            raise InvalidInput("Selection weights must be finite")
        if np.any(weights < 0):
            raise InvalidInput("Selection weights must be non-negative")
        if weights.max() <= 0:
            raise InvalidInput("At least one selection weight must be positive")
        return weights


class RouletteWheelSelection(Selection):
    """Selection proportional to raw fitness"""

    def weights_from_scores(self, scores: Sequence[float]) -> np.ndarray:
        return np.asarray(scores, dtype=float)


class RankSelection(Selection):
    """Selection proportional to a function of each individual's fitness rank"""

    def __init__(self,
                 fitness: Fitness,
                 probability: RankProbability,
                 rng: Optional[np.random.Generator] = None):
        """
        Initialize rank selection

        Args:
            fitness: Fitness strategy used to score individuals
            probability: Maps rank (0 = worst) to a weight
            rng: Random number generator owned by this selection
        """
        super().__init__(fitness, rng)
        self.probability = probability

    def ranks(self, scores: Sequence[float]) -> np.ndarray:
        """Rank of each individual in original order, ties broken by index"""
        scores = np.asarray(scores, dtype=float)
        if np.any(np.isnan(scores)):
            raise InvalidInput("Fitness scores must not be NaN")
        order = np.argsort(scores, kind='stable')
        ranks = np.empty(len(scores), dtype=int)
        ranks[order] = np.arange(len(scores))
        return ranks

    def weights_from_scores(self, scores: Sequence[float]) -> np.ndarray:
        return self.probability.weights(self.ranks(scores))
