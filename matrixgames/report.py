"""Text rendering of game solutions and criteria results"""

from __future__ import annotations

from typing import Mapping, Optional, Sequence

import numpy as np
import pandas as pd

from matrixgames.matrix import CriterionResult, GameSolution, as_payoff_matrix
from matrixgames.problems import ProblemData
from matrixgames.saddle import find_saddle

CRITERION_TITLES = {
    "laplace": "Laplace",
    "wald": "Wald",
    "savage": "Savage",
    "hurwicz": "Hurwicz",
    "bayes": "Bayes",
}


def format_number(value: float, precision: int = 4, decimal: str = ".") -> str:
    if abs(value) < 0.5 * 10 ** -precision:
        value = 0.0  # no "-0.0000"
    return f"{value:.{precision}f}".replace(".", decimal)


def format_probs(probs: np.ndarray, precision: int = 3, decimal: str = ".") -> str:
    parts = []
    for index, p in enumerate(probs):
        if p > 1e-6:
            parts.append(f"{index}:{format_number(p, precision, decimal)}")
    return "{" + ", ".join(parts) + "}"


def render_matrix(payoffMatrix,
                  row_labels: Optional[Sequence] = None,
                  col_labels: Optional[Sequence] = None,
                  precision: int = 2,
                  decimal: str = ".") -> str:
    matrix = as_payoff_matrix(payoffMatrix)
    frame = pd.DataFrame(matrix, index=row_labels, columns=col_labels)
    return frame.to_string(float_format=lambda x: format_number(x, precision, decimal))


def game_report(payoffMatrix, solution: GameSolution, precision: int = 4, decimal: str = ".") -> str:
    matrix = as_payoff_matrix(payoffMatrix)
    maximin, minimax = find_saddle(matrix)

    def num(x: float) -> str:
        return format_number(x, precision, decimal)

    lines = [
        "Payoff matrix:",
        render_matrix(matrix, decimal=decimal),
        f"Maximin: {num(maximin)}",
        f"Minimax: {num(minimax)}",
    ]
    if solution.pure:
        row = int(np.argmax(solution.strategy_a))
        col = int(np.argmax(solution.strategy_b))
        lines.append(f"Saddle point at row {row}, column {col} with value {num(solution.value)}")
    else:
        lines.append("No saddle point, solved in mixed strategies")
        lines.append(f"Game value for player A (primal LP): {num(solution.primal_value)}")
        lines.append(f"Game value for player B (dual LP): {num(solution.dual_value)}")
    lines.append(f"Optimal strategy of player A: {format_probs(solution.strategy_a, decimal=decimal)}")
    lines.append(f"Optimal strategy of player B: {format_probs(solution.strategy_b, decimal=decimal)}")
    return "\n".join(lines)


def criteria_report(problem: ProblemData, results: Mapping[str, CriterionResult],
                    alpha: Optional[float] = None, precision: int = 2, decimal: str = ".") -> str:
    lines = [
        "Payoff matrix:",
        render_matrix(problem.matrix(), problem.strategies, problem.states, precision, decimal),
    ]
    for name, (index, value) in results.items():
        title = CRITERION_TITLES.get(name, name)
        if name == "hurwicz" and alpha is not None:
            title = f"{title} (alpha = {alpha})"
        lines.append("")
        lines.append(f"{title} criterion:")
        lines.append(f"  Optimal strategy: {problem.strategy_label(index)}")
        lines.append(f"  Criterion value: {format_number(value, precision, decimal)}")
    return "\n".join(lines)
