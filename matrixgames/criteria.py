"""Decision criteria for choosing a strategy against nature.

Rows of the payoff matrix are the decision maker's strategies, columns are
states of nature. Every criterion returns CriterionResult(index, value) and
picks the first row attaining the optimum.
"""

from __future__ import annotations

import math
from typing import Optional

import numpy as np

from matrixgames import config
from matrixgames.errors import InvalidInput
from matrixgames.matrix import CriterionResult, as_payoff_matrix


def _pick_max(scores: np.ndarray) -> CriterionResult:
    index = int(np.argmax(scores))
    return CriterionResult(index, float(scores[index]))


def _pick_min(scores: np.ndarray) -> CriterionResult:
    index = int(np.argmin(scores))
    return CriterionResult(index, float(scores[index]))


def laplace(payoffMatrix) -> CriterionResult:
    """Best average payoff, every state equally likely."""
    matrix = as_payoff_matrix(payoffMatrix)
    return _pick_max(np.mean(matrix, axis=1))


def wald(payoffMatrix) -> CriterionResult:
    """Best worst case (maximin). Nature is assumed hostile."""
    matrix = as_payoff_matrix(payoffMatrix)
    return _pick_max(np.min(matrix, axis=1))


def maximax(payoffMatrix) -> CriterionResult:
    """Best best case. Optimistic counterpart of wald."""
    matrix = as_payoff_matrix(payoffMatrix)
    return _pick_max(np.max(matrix, axis=1))


def regret_matrix(payoffMatrix) -> np.ndarray:
    """regret[i][j] = best payoff in state j minus payoff of strategy i in state j."""
    matrix = as_payoff_matrix(payoffMatrix)
    return np.max(matrix, axis=0) - matrix


def savage(payoffMatrix) -> CriterionResult:
    """Smallest maximum regret (minimax regret)."""
    return _pick_min(np.max(regret_matrix(payoffMatrix), axis=1))


def hurwicz(payoffMatrix, alpha: float) -> CriterionResult:
    """
    Weighted mix of best and worst case.

    Args:
        payoffMatrix: payoff matrix
        alpha: optimism coefficient in [0, 1]; 0 reduces to wald, 1 to maximax

    Raises:
        InvalidInput: alpha not a finite number in [0, 1]
    """
    try:
        alpha = float(alpha)
    except (TypeError, ValueError) as exc:
        raise InvalidInput(f"alpha must be a number in [0, 1], got {alpha!r}") from exc
    if not math.isfinite(alpha) or not 0.0 <= alpha <= 1.0:
        raise InvalidInput(f"alpha must be in [0, 1], got {alpha}")
    matrix = as_payoff_matrix(payoffMatrix)
    scores = alpha * np.max(matrix, axis=1) + (1 - alpha) * np.min(matrix, axis=1)
    return _pick_max(scores)


def bayes(payoffMatrix, probabilities) -> CriterionResult:
    """Best expected payoff under known state probabilities."""
    matrix = as_payoff_matrix(payoffMatrix)
    probs = _check_probabilities(probabilities, matrix.shape[1])
    return _pick_max(matrix @ probs)


def _check_probabilities(probabilities, numStates: int) -> np.ndarray:
    try:
        probs = np.array(probabilities, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise InvalidInput(f"state probabilities must be numbers: {exc}") from exc
    if probs.shape != (numStates,):
        raise InvalidInput(f"expected {numStates} state probabilities, got shape {probs.shape}")
    if not np.all(np.isfinite(probs)) or np.any(probs < 0):
        raise InvalidInput("state probabilities must be finite and non-negative")
    if abs(float(np.sum(probs)) - 1.0) > config.TOLERANCE:
        raise InvalidInput(f"state probabilities must sum to 1, got {float(np.sum(probs))}")
    return probs


def evaluate(payoffMatrix, alpha: float = config.DEFAULT_ALPHA,
             probabilities: Optional[list[float]] = None) -> dict[str, CriterionResult]:
    """All criteria in report order; bayes only when probabilities are given."""
    matrix = as_payoff_matrix(payoffMatrix)
    results = {
        "laplace": laplace(matrix),
        "wald": wald(matrix),
        "savage": savage(matrix),
        "hurwicz": hurwicz(matrix, alpha),
    }
    if probabilities is not None:
        results["bayes"] = bayes(matrix, probabilities)
    return results
