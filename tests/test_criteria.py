from __future__ import annotations

import unittest

import numpy as np

from tests import test_support  # noqa: F401

from matrixgames import criteria
from matrixgames.errors import InvalidInput
from matrixgames.matrix import CriterionResult
from matrixgames.problems import guides_example, production_example


class TestProductionProblem(unittest.TestCase):
    def setUp(self) -> None:
        self.payoff = production_example().matrix()

    def test_laplace_picks_first_of_tied_rows(self) -> None:
        # rows 1 and 2 both average 7500
        self.assertEqual(criteria.laplace(self.payoff), (1, 7500.0))

    def test_wald(self) -> None:
        self.assertEqual(criteria.wald(self.payoff), (0, 5000.0))

    def test_savage(self) -> None:
        self.assertEqual(criteria.savage(self.payoff), (1, 10000.0))

    def test_hurwicz_all_rows_tied(self) -> None:
        self.assertEqual(criteria.hurwicz(self.payoff, 0.5), (0, 5000.0))

    def test_maximax(self) -> None:
        self.assertEqual(criteria.maximax(self.payoff), (3, 20000.0))

    def test_bayes(self) -> None:
        index, value = criteria.bayes(self.payoff, [0.1, 0.2, 0.3, 0.4])
        self.assertEqual(index, 2)
        self.assertAlmostEqual(value, 11000.0, places=6)


class TestGuidesProblem(unittest.TestCase):
    def setUp(self) -> None:
        self.payoff = guides_example().matrix()

    def test_all_criteria(self) -> None:
        self.assertEqual(criteria.laplace(self.payoff), (2, 150.0))
        self.assertEqual(criteria.wald(self.payoff), (0, -20.0))
        self.assertEqual(criteria.savage(self.payoff), (2, 80.0))
        self.assertEqual(criteria.hurwicz(self.payoff, 0.5), (2, 150.0))

    def test_regret_matrix(self) -> None:
        regret = criteria.regret_matrix(self.payoff)
        np.testing.assert_array_equal(regret[2], [80.0, 80.0, 40.0, 40.0, 0.0, 0.0])
        np.testing.assert_array_equal(regret[3], [120.0, 120.0, 80.0, 80.0, 40.0, 40.0])
        np.testing.assert_array_equal(regret[0], [0.0, 0.0, 60.0, 160.0, 220.0, 320.0])


class TestCriteriaProperties(unittest.TestCase):
    def _random_matrices(self):
        rng = np.random.default_rng(11)
        for _ in range(20):
            shape = (int(rng.integers(1, 6)), int(rng.integers(1, 6)))
            yield rng.integers(-50, 50, size=shape).astype(np.float64)

    def test_hurwicz_extremes_match_wald_and_maximax(self) -> None:
        for payoff in self._random_matrices():
            with self.subTest(payoff=payoff.tolist()):
                self.assertEqual(criteria.hurwicz(payoff, 0.0), criteria.wald(payoff))
                self.assertEqual(criteria.hurwicz(payoff, 1.0), criteria.maximax(payoff))

    def test_every_regret_column_has_a_zero(self) -> None:
        for payoff in self._random_matrices():
            regret = criteria.regret_matrix(payoff)
            self.assertTrue(bool(np.all(np.any(regret == 0.0, axis=0))))
            self.assertTrue(bool(np.all(regret >= 0.0)))

    def test_indices_are_valid_rows(self) -> None:
        for payoff in self._random_matrices():
            numRows = payoff.shape[0]
            for name, result in criteria.evaluate(payoff, alpha=0.3).items():
                with self.subTest(criterion=name):
                    self.assertIsInstance(result, CriterionResult)
                    self.assertIsInstance(result.index, int)
                    self.assertTrue(0 <= result.index < numRows)

    def test_ties_resolve_to_first_row(self) -> None:
        payoff = [[1.0, 1.0], [1.0, 1.0], [1.0, 1.0]]
        for name, result in criteria.evaluate(payoff, probabilities=[0.5, 0.5]).items():
            with self.subTest(criterion=name):
                self.assertEqual(result.index, 0)


class TestCriteriaValidation(unittest.TestCase):
    payoff = [[1.0, 2.0], [3.0, 0.0]]

    def test_alpha_out_of_range(self) -> None:
        for alpha in (-0.1, 1.5, float("nan"), float("inf"), "x", None):
            with self.subTest(alpha=alpha):
                with self.assertRaises(InvalidInput):
                    criteria.hurwicz(self.payoff, alpha)

    def test_bad_probabilities(self) -> None:
        for probs in ([1.0], [0.5, 0.6], [1.5, -0.5], ["x", "y"]):
            with self.subTest(probs=probs):
                with self.assertRaises(InvalidInput):
                    criteria.bayes(self.payoff, probs)

    def test_malformed_matrix(self) -> None:
        for fn in (criteria.laplace, criteria.wald, criteria.savage, criteria.maximax):
            with self.subTest(criterion=fn.__name__):
                with self.assertRaises(InvalidInput):
                    fn([[1.0, 2.0], [3.0]])

    def test_evaluate_order(self) -> None:
        self.assertEqual(list(criteria.evaluate(self.payoff)), ["laplace", "wald", "savage", "hurwicz"])
        results = criteria.evaluate(self.payoff, probabilities=[0.25, 0.75])
        self.assertEqual(list(results), ["laplace", "wald", "savage", "hurwicz", "bayes"])
        self.assertEqual(results["bayes"], (0, 1.75))


if __name__ == "__main__":
    unittest.main()
