"""Zero-sum matrix games and decision criteria under uncertainty"""

from matrixgames.criteria import bayes, evaluate, hurwicz, laplace, maximax, regret_matrix, savage, wald
from matrixgames.errors import InvalidInput, SolverError
from matrixgames.linprog import best_counterplay, expected_payoff, solve_game, solve_mixed
from matrixgames.matrix import CriterionResult, GameSolution, as_payoff_matrix
from matrixgames.saddle import find_saddle, has_saddle, pure_solution, saddle_points

__all__ = [
    "CriterionResult",
    "GameSolution",
    "InvalidInput",
    "SolverError",
    "as_payoff_matrix",
    "bayes",
    "best_counterplay",
    "evaluate",
    "expected_payoff",
    "find_saddle",
    "has_saddle",
    "hurwicz",
    "laplace",
    "maximax",
    "pure_solution",
    "regret_matrix",
    "saddle_points",
    "savage",
    "solve_game",
    "solve_mixed",
    "wald",
]
