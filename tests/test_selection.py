"""
Tests for selection strategies.
"""

import itertools
import unittest
import numpy as np

from bitga.genetic import (
    CountFitness,
    ExponentialRankProbability,
    Fitness,
    InvalidInput,
    LinearRankProbability,
    RankSelection,
    ReciprocalRankProbability,
    RouletteWheelSelection,
)

T, F = True, False


class HugeFitness(Fitness):
    """Scores near the largest representable float."""

    def calculate(self, individual):
        return 1e308 if individual[0] else 0.0


class TestRouletteWheelSelection(unittest.TestCase):

    def setUp(self):
        self.selection = RouletteWheelSelection(CountFitness(), np.random.default_rng(42))

    def test_select_returns_pairs_in_range(self):
        population = [[T, F, F], [T, T, F], [T, T, T]]
        pairs = self.selection.select(population, 25)

        self.assertEqual(len(pairs), 25)
        for first, second in pairs:
            self.assertIsInstance(first, int)
            self.assertTrue(0 <= first < 3)
            self.assertTrue(0 <= second < 3)

    def test_single_individual(self):
        self.assertEqual(self.selection.select([[T]], 3), [(0, 0)] * 3)

    def test_zero_fitness_never_selected(self):
        population = [[F, F], [T, F], [F, F], [T, T]]
        pairs = self.selection.select(population, 200)

        picked = set(itertools.chain.from_iterable(pairs))
        self.assertNotIn(0, picked)
        self.assertNotIn(2, picked)

    def test_all_zero_fitness_rejected(self):
        with self.assertRaises(InvalidInput):
            self.selection.select([[F, F, F]] * 3, 5)

    def test_empty_population_rejected(self):
        with self.assertRaises(InvalidInput):
            self.selection.select([], 5)

    def test_invalid_samples(self):
        with self.assertRaises(InvalidInput):
            self.selection.select([[T]], -1)
        with self.assertRaises(InvalidInput):
            self.selection.select([[T]], 1.5)

    def test_zero_samples(self):
        self.assertEqual(self.selection.select([[T]], 0), [])

    def test_select_from_scores(self):
        self.assertEqual(len(self.selection.select_from_scores([1.0, 2.0, 3.0], 4)), 4)
        self.assertEqual(self.selection.select_from_scores([1.0], 2), [(0, 0), (0, 0)])
        with self.assertRaises(InvalidInput):
            self.selection.select_from_scores([0.0, 0.0, 0.0], 1)
        with self.assertRaises(InvalidInput):
            self.selection.select_from_scores([], 1)
        with self.assertRaises(InvalidInput):
            self.selection.select_from_scores([1.0, -1.0], 1)

    def test_weights_are_fitness(self):
        np.testing.assert_array_equal(self.selection.weights([[T, F], [T, T]]), [1.0, 2.0])

    def test_population_not_mutated(self):
        population = [[T, F], [F, T], [T, T]]
        snapshot = [list(individual) for individual in population]
        self.selection.select(population, 10)
        self.assertEqual(population, snapshot)

    def test_iter_pairs(self):
        stream = self.selection.iter_pairs([[T, F], [T, T]])
        pairs = list(itertools.islice(stream, 10))

        self.assertEqual(len(pairs), 10)
        self.assertTrue(all(0 <= i < 2 for pair in pairs for i in pair))

    def test_iter_pairs_validates_eagerly(self):
        with self.assertRaises(InvalidInput):
            self.selection.iter_pairs([[F]])

    def test_weights_with_overflowing_total(self):
        selection = RouletteWheelSelection(HugeFitness(), np.random.default_rng(1))
        population = [[T], [T], [F], [T]]
        pairs = selection.select(population, 50)

        self.assertEqual(len(pairs), 50)
        self.assertNotIn(2, set(itertools.chain.from_iterable(pairs)))
        self.assertEqual(len(list(itertools.islice(selection.iter_pairs(population), 5))), 5)
        self.assertEqual(len(selection.select_from_scores([1e308, 1e308, 1e308], 3)), 3)


class TestRankSelection(unittest.TestCase):

    def setUp(self):
        self.selection = RankSelection(
            CountFitness(), ReciprocalRankProbability(), np.random.default_rng(42)
        )

    def test_select(self):
        pairs = self.selection.select([[T, F, F], [T, T, F], [T, T, T]], 10)
        self.assertEqual(len(pairs), 10)
        self.assertTrue(all(0 <= i < 3 for pair in pairs for i in pair))

    def test_all_zero_fitness_accepted(self):
        """Rank weights stay positive where roulette wheel fails."""
        population = [[F, F, F]] * 3
        roulette = RouletteWheelSelection(CountFitness(), np.random.default_rng(0))

        with self.assertRaises(InvalidInput):
            roulette.select(population, 5)
        self.assertEqual(len(self.selection.select(population, 5)), 5)

    def test_empty_population_rejected(self):
        with self.assertRaises(InvalidInput):
            self.selection.select([], 1)
        with self.assertRaises(InvalidInput):
            self.selection.select_from_scores([], 1)

    def test_ranks_keep_original_order(self):
        ranks = self.selection.ranks([3.0, 1.0, 2.0, 1.0])
        self.assertEqual(ranks.tolist(), [3, 0, 2, 1])

    def test_weights_follow_rank(self):
        selection = RankSelection(CountFitness(), LinearRankProbability())
        weights = selection.weights([[T, T, T], [F, F, F], [T, F, F]])
        self.assertEqual(weights.tolist(), [3.0, 1.0, 2.0])

    def test_exponential_probability(self):
        probability = ExponentialRankProbability(2.0)
        self.assertEqual([probability.weight(r) for r in range(4)], [1.0, 2.0, 4.0, 8.0])
        with self.assertRaises(InvalidInput):
            ExponentialRankProbability(0.0)

    def test_exponential_weight_out_of_range(self):
        with self.assertRaises(InvalidInput):
            ExponentialRankProbability(1.5).weight(2000)

    def test_exponential_large_population(self):
        """Relative weights keep thousands of ranks representable."""
        selection = RankSelection(CountFitness(), ExponentialRankProbability(), np.random.default_rng(3))
        population = [[T, F]] * 1000 + [[T, T]] * 1000

        weights = selection.weights(population)
        self.assertTrue(np.all(np.isfinite(weights)))
        self.assertEqual(weights.max(), 1.0)

        pairs = selection.select(population, 20)
        self.assertEqual(len(pairs), 20)
        self.assertTrue(all(0 <= i < 2000 for pair in pairs for i in pair))
        self.assertEqual(len(selection.select([[T]] * 1749, 1)), 1)

    def test_exponential_small_base_large_population(self):
        selection = RankSelection(CountFitness(), ExponentialRankProbability(0.5), np.random.default_rng(4))
        pairs = selection.select([[T]] * 2500, 10)
        self.assertTrue(all(0 <= i < 2500 for pair in pairs for i in pair))

    def test_favours_best_rank(self):
        selection = RankSelection(CountFitness(), ExponentialRankProbability(10.0), np.random.default_rng(5))
        pairs = selection.select([[F, F], [T, T], [T, F]], 500)
        counts = np.bincount(np.array(pairs).reshape(-1), minlength=3)
        self.assertEqual(int(np.argmax(counts)), 1)


if __name__ == '__main__':
    unittest.main()
