"""Saddle point detection for zero-sum matrix games"""

from __future__ import annotations

from typing import Optional

import numpy as np

from matrixgames import config
from matrixgames.matrix import GameSolution, as_payoff_matrix


def find_saddle(payoffMatrix) -> tuple[float, float]:
    """
    Lower and upper value of the game in pure strategies.

    Returns:
        (maximin, minimax): best row minimum and smallest column maximum
    """
    matrix = as_payoff_matrix(payoffMatrix)
    row_mins = np.min(matrix, axis=1)
    col_maxs = np.max(matrix, axis=0)
    return float(np.max(row_mins)), float(np.min(col_maxs))


def has_saddle(payoffMatrix) -> bool:
    maximin, minimax = find_saddle(payoffMatrix)
    return abs(maximin - minimax) <= config.SADDLE_TOLERANCE


def saddle_points(payoffMatrix) -> list[tuple[int, int]]:
    """Cells that are both the minimum of their row and the maximum of their column."""
    matrix = as_payoff_matrix(payoffMatrix)
    row_mins = np.min(matrix, axis=1, keepdims=True)
    col_maxs = np.max(matrix, axis=0, keepdims=True)
    rows, cols = np.nonzero((matrix == row_mins) & (matrix == col_maxs))
    return [(int(i), int(j)) for i, j in zip(rows, cols)]


def pure_solution(payoffMatrix) -> Optional[GameSolution]:
    """
    Pure-strategy equilibrium of a game with a saddle point.

    A plays the first row attaining maximin, B the first column attaining minimax.
    Returns None when the game has no saddle point.
    """
    matrix = as_payoff_matrix(payoffMatrix)
    row_mins = np.min(matrix, axis=1)
    col_maxs = np.max(matrix, axis=0)
    maximin = float(np.max(row_mins))
    minimax = float(np.min(col_maxs))
    if abs(maximin - minimax) > config.SADDLE_TOLERANCE:
        return None

    numRows, numCols = matrix.shape
    strategy_a = np.zeros(numRows, dtype=np.float64)
    strategy_b = np.zeros(numCols, dtype=np.float64)
    strategy_a[int(np.argmax(row_mins))] = 1.0
    strategy_b[int(np.argmin(col_maxs))] = 1.0
    return GameSolution(
        value=maximin,
        strategy_a=strategy_a,
        strategy_b=strategy_b,
        primal_value=maximin,
        dual_value=minimax,
        pure=True,
    )
