"""Payoff matrix validation and result types"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

import numpy as np

from matrixgames.errors import InvalidInput


def as_payoff_matrix(data) -> np.ndarray:
    """
    Convert nested rows (or an array) into a validated float payoff matrix.

    Args:
        data: rows = strategies of player A, columns = strategies of player B
            (or states of nature)

    Returns:
        2-D float64 numpy array with at least one row and one column

    Raises:
        InvalidInput: ragged rows, non-numeric or non-finite entries, wrong shape
    """
    try:
        matrix = np.array(data, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise InvalidInput(f"payoff matrix must be a rectangular grid of numbers: {exc}") from exc

    if matrix.size == 0:
        raise InvalidInput("payoff matrix is empty")
    if matrix.ndim != 2:
        raise InvalidInput(f"payoff matrix must be two-dimensional, got shape {matrix.shape}")
    if not np.all(np.isfinite(matrix)):
        raise InvalidInput("payoff matrix contains non-finite entries")
    return matrix


@dataclass(frozen=True)
class GameSolution:
    """Equilibrium of a two-player zero-sum game.

    value is player A's expected payoff. primal_value and dual_value are the
    game values recovered from each LP; for a saddle point all three match.
    """

    value: float
    strategy_a: np.ndarray
    strategy_b: np.ndarray
    primal_value: float
    dual_value: float
    pure: bool = False

    @property
    def duality_gap(self) -> float:
        return abs(self.primal_value - self.dual_value)


class CriterionResult(NamedTuple):
    index: int
    value: float
