"""Linear programming solver for mixed strategies of zero-sum games"""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np
from ortools.linear_solver import pywraplp
from scipy.optimize import linprog

from matrixgames import config
from matrixgames.errors import InvalidInput, SolverError
from matrixgames.matrix import GameSolution, as_payoff_matrix
from matrixgames.saddle import pure_solution

logger = logging.getLogger(__name__)

_GLOP_STATUS = {
    pywraplp.Solver.OPTIMAL: "OPTIMAL",
    pywraplp.Solver.FEASIBLE: "FEASIBLE",
    pywraplp.Solver.INFEASIBLE: "INFEASIBLE",
    pywraplp.Solver.UNBOUNDED: "UNBOUNDED",
    pywraplp.Solver.ABNORMAL: "ABNORMAL",
    pywraplp.Solver.NOT_SOLVED: "NOT_SOLVED",
}

# scipy.optimize.linprog result.status codes
_HIGHS_STATUS = {
    0: "OPTIMAL",
    1: "ITERATION_LIMIT",
    2: "INFEASIBLE",
    3: "UNBOUNDED",
    4: "NUMERICAL_DIFFICULTIES",
}

LPResult = tuple[Optional[np.ndarray], Optional[float], str]


def _solve_glop(coefficients: np.ndarray, minimize: bool, max_iterations: int) -> LPResult:
    """
    Reciprocal LP on OR-Tools GLOP.

    Variables u_0..u_{n-1} >= 0 and v >= 0 with sum_i u_i = v.
    minimize: min v  s.t. coefficients @ u >= 1
    otherwise: max v  s.t. coefficients @ u <= 1
    """
    numConstraints, numVars = coefficients.shape

    solver = pywraplp.Solver.CreateSolver('GLOP')
    if not solver:
        return None, None, "NOT_AVAILABLE"
    solver.SetSolverSpecificParametersAsString(f"max_number_of_iterations: {max_iterations}")

    u = [solver.NumVar(0, solver.infinity(), f'u_{i}') for i in range(numVars)]
    v = solver.NumVar(0, solver.infinity(), 'v')

    for k in range(numConstraints):
        if minimize:
            constraint = solver.Constraint(1, solver.infinity())
        else:
            constraint = solver.Constraint(-solver.infinity(), 1)
        for i in range(numVars):
            constraint.SetCoefficient(u[i], float(coefficients[k, i]))

    # v is the total weight; its reciprocal is the game value
    link = solver.Constraint(0, 0)
    for i in range(numVars):
        link.SetCoefficient(u[i], 1)
    link.SetCoefficient(v, -1)

    objective = solver.Objective()
    objective.SetCoefficient(v, 1)
    if minimize:
        objective.SetMinimization()
    else:
        objective.SetMaximization()

    status = solver.Solve()
    status_name = _GLOP_STATUS.get(status, str(status))
    logger.debug(f"GLOP {numConstraints}x{numVars} {'min' if minimize else 'max'}: {status_name}")

    if status == pywraplp.Solver.OPTIMAL:
        weights = np.array([u[i].solution_value() for i in range(numVars)])
        return weights, v.solution_value(), status_name
    return None, None, status_name


def _solve_highs(coefficients: np.ndarray, minimize: bool, max_iterations: int) -> LPResult:
    """Same LP as _solve_glop on SciPy's HiGHS."""
    numConstraints, numVars = coefficients.shape
    c = np.zeros(numVars + 1)
    c[-1] = 1 if minimize else -1  # linprog always minimizes

    slack = np.zeros((numConstraints, 1))
    if minimize:
        # coefficients @ u >= 1  ->  -coefficients @ u <= -1
        A_ub = np.hstack([-coefficients, slack])
        b_ub = -np.ones(numConstraints)
    else:
        A_ub = np.hstack([coefficients, slack])
        b_ub = np.ones(numConstraints)

    A_eq = [[1] * numVars + [-1]]
    b_eq = [0]
    bounds = [(0, None)] * (numVars + 1)

    res = linprog(c, A_ub=A_ub, b_ub=b_ub, A_eq=A_eq, b_eq=b_eq,
                  bounds=bounds, method='highs', options={"maxiter": max_iterations})
    status_name = _HIGHS_STATUS.get(res.status, str(res.status))
    logger.debug(f"HiGHS {numConstraints}x{numVars} {'min' if minimize else 'max'}: {status_name}")

    if res.success:
        return res.x[:-1], float(res.x[-1]), status_name
    return None, None, status_name


def _solve_reciprocal(coefficients: np.ndarray, minimize: bool, backend: str,
                      max_iterations: int, label: str) -> tuple[np.ndarray, float]:
    if backend == "glop":
        weights, total, status = _solve_glop(coefficients, minimize, max_iterations)
        if weights is None:
            logger.warning(f"GLOP returned {status} for the {label} LP, retrying with HiGHS")
            weights, total, status = _solve_highs(coefficients, minimize, max_iterations)
    else:
        weights, total, status = _solve_highs(coefficients, minimize, max_iterations)

    if weights is None:
        raise SolverError(f"{label} LP not solved to optimality: {status}", status=status)
    if not total > 0:
        raise SolverError(f"{label} LP returned non-positive total weight {total}", status=status)
    return weights, total


def _to_strategy(weights: np.ndarray, total: float) -> np.ndarray:
    probs = np.maximum(np.asarray(weights, dtype=np.float64) / total, 0.0)
    return probs / probs.sum()


def positive_shift(payoffMatrix: np.ndarray) -> float:
    """Constant that lifts every payoff to at least 1 (0 when all payoffs are already positive)."""
    lowest = float(np.min(payoffMatrix))
    return 1.0 - lowest if lowest <= 0 else 0.0


def solve_mixed(payoffMatrix, *, backend: Optional[str] = None,
                max_iterations: Optional[int] = None,
                tolerance: float = config.TOLERANCE) -> GameSolution:
    """
    Optimal mixed strategies of both players via the primal/dual LP pair.

    Args:
        payoffMatrix: payoffs to player A (rows) against player B (columns)
        backend: "glop" (OR-Tools, falls back to HiGHS) or "highs" (SciPy)
        max_iterations: simplex iteration cap per LP
        tolerance: largest accepted absolute gap between primal and dual game values

    Returns:
        GameSolution with value, both strategies and both LP values

    Raises:
        InvalidInput: malformed matrix, unknown backend, bad iteration cap
        SolverError: an LP is infeasible, unbounded, hits the iteration cap,
            or the two game values disagree
    """
    matrix = as_payoff_matrix(payoffMatrix)
    backend = backend or config.DEFAULT_BACKEND
    if backend not in config.BACKENDS:
        raise InvalidInput(f"unknown LP backend {backend!r}, expected one of {config.BACKENDS}")
    if max_iterations is None:
        max_iterations = config.MAX_ITERATIONS
    if max_iterations < 1:
        raise InvalidInput(f"max_iterations must be >= 1, got {max_iterations}")

    shift = positive_shift(matrix)
    shifted = matrix + shift
    logger.debug(f"solving {matrix.shape[0]}x{matrix.shape[1]} game with shift {shift}")

    # Player A: one constraint per column of the matrix
    u, v = _solve_reciprocal(shifted.T, True, backend, max_iterations, "primal")
    # Player B: one constraint per row
    w, t = _solve_reciprocal(shifted, False, backend, max_iterations, "dual")

    primal_value = 1.0 / v - shift
    dual_value = 1.0 / t - shift
    gap = abs(primal_value - dual_value)
    if gap > tolerance:
        raise SolverError(
            f"primal value {primal_value} and dual value {dual_value} differ by {gap}",
            status="DUALITY_GAP",
        )

    return GameSolution(
        value=primal_value,
        strategy_a=_to_strategy(u, v),
        strategy_b=_to_strategy(w, t),
        primal_value=primal_value,
        dual_value=dual_value,
    )


def solve_game(payoffMatrix, **kwargs) -> GameSolution:
    """Pure equilibrium when the game has a saddle point, otherwise solve_mixed."""
    matrix = as_payoff_matrix(payoffMatrix)
    solution = pure_solution(matrix)
    if solution is not None:
        logger.debug(f"saddle point with value {solution.value}, skipping LP")
        return solution
    return solve_mixed(matrix, **kwargs)


def expected_payoff(payoffMatrix, p, q) -> float:
    """Player A's expected payoff when A mixes with p and B with q."""
    matrix = as_payoff_matrix(payoffMatrix)
    p = _check_strategy(p, matrix.shape[0], "row")
    q = _check_strategy(q, matrix.shape[1], "column")
    return float(p @ matrix @ q)


def best_counterplay(payoffMatrix, p) -> tuple[int, float]:
    """
    Player B's best pure reply to player A's mixed strategy.

    Args:
        payoffMatrix: The game's payoff matrix
        p: Probability distribution for row player's strategy

    Returns:
        (column index, A's expected payoff against that column); first column on ties
    """
    matrix = as_payoff_matrix(payoffMatrix)
    p = _check_strategy(p, matrix.shape[0], "row")
    ev_cols = p @ matrix
    worst_col = int(np.argmin(ev_cols))
    return worst_col, float(ev_cols[worst_col])


def _check_strategy(probs, size: int, side: str) -> np.ndarray:
    probs = np.asarray(probs, dtype=np.float64)
    if probs.shape != (size,):
        raise InvalidInput(f"{side} strategy must have {size} entries, got shape {probs.shape}")
    return probs
