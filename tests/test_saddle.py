from __future__ import annotations

import unittest

import numpy as np

from tests import test_support  # noqa: F401

from matrixgames.errors import InvalidInput
from matrixgames.matrix import as_payoff_matrix
from matrixgames.problems import EXAMPLE_GAMES
from matrixgames.saddle import find_saddle, has_saddle, pure_solution, saddle_points


class TestFindSaddle(unittest.TestCase):
    def test_game_without_saddle(self) -> None:
        payoff = EXAMPLE_GAMES["mixed"]
        maximin, minimax = find_saddle(payoff)
        self.assertEqual(maximin, 2.0)  # row 1 = [2, 8, 4, 3]
        self.assertEqual(minimax, 6.0)  # column 2 = [6, 4, 1]
        self.assertFalse(has_saddle(payoff))
        self.assertEqual(saddle_points(payoff), [])
        self.assertIsNone(pure_solution(payoff))

    def test_game_with_saddle(self) -> None:
        payoff = EXAMPLE_GAMES["saddle"]
        self.assertEqual(find_saddle(payoff), (0.0, 0.0))
        self.assertTrue(has_saddle(payoff))
        self.assertEqual(saddle_points(payoff), [(2, 2)])

        solution = pure_solution(payoff)
        self.assertIsNotNone(solution)
        assert solution is not None
        self.assertTrue(solution.pure)
        self.assertEqual(solution.value, 0.0)
        self.assertEqual(solution.primal_value, solution.dual_value)
        np.testing.assert_array_equal(solution.strategy_a, [0.0, 0.0, 1.0])
        np.testing.assert_array_equal(solution.strategy_b, [0.0, 0.0, 1.0])

    def test_several_saddle_points_pick_first(self) -> None:
        payoff = [[1.0, 1.0], [0.0, 0.0]]
        self.assertEqual(saddle_points(payoff), [(0, 0), (0, 1)])
        solution = pure_solution(payoff)
        assert solution is not None
        np.testing.assert_array_equal(solution.strategy_a, [1.0, 0.0])
        np.testing.assert_array_equal(solution.strategy_b, [1.0, 0.0])
        self.assertEqual(solution.value, 1.0)

    def test_maximin_never_exceeds_minimax(self) -> None:
        rng = np.random.default_rng(0)
        for _ in range(25):
            payoff = rng.normal(size=(rng.integers(1, 5), rng.integers(1, 5)))
            maximin, minimax = find_saddle(payoff)
            self.assertLessEqual(maximin, minimax)
            if has_saddle(payoff):
                self.assertTrue(saddle_points(payoff))

    def test_single_row(self) -> None:
        self.assertEqual(find_saddle([[2.0, -3.0, 1.0]]), (-3.0, -3.0))
        self.assertEqual(saddle_points([[2.0, -3.0, 1.0]]), [(0, 1)])


class TestPayoffMatrixValidation(unittest.TestCase):
    def test_accepts_integer_rows(self) -> None:
        matrix = as_payoff_matrix([[1, 2], [3, 4]])
        self.assertEqual(matrix.dtype, np.float64)
        self.assertEqual(matrix.shape, (2, 2))

    def test_rejects_malformed_matrices(self) -> None:
        cases = {
            "empty": [],
            "empty row": [[]],
            "ragged": [[1, 2], [3]],
            "one-dimensional": [1, 2, 3],
            "three-dimensional": [[[1]]],
            "non-numeric": [["a", "b"]],
            "nan": [[1.0, float("nan")]],
            "inf": [[float("-inf"), 1.0]],
        }
        for name, data in cases.items():
            with self.subTest(case=name):
                with self.assertRaises(InvalidInput):
                    find_saddle(data)

    def test_invalid_input_is_a_value_error(self) -> None:
        with self.assertRaises(ValueError):
            as_payoff_matrix([])


if __name__ == "__main__":
    unittest.main()
