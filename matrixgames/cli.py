"""Command line front end: solve zero-sum games and evaluate decision criteria"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from matrixgames import config
from matrixgames.criteria import evaluate
from matrixgames.errors import InvalidInput, SolverError
from matrixgames.linprog import solve_game
from matrixgames.matrix import as_payoff_matrix
from matrixgames.problems import EXAMPLE_GAMES, EXAMPLE_PROBLEMS, ProblemData
from matrixgames.report import criteria_report, game_report

logger = logging.getLogger(__name__)


def parse_matrix(text: str) -> list[list[float]]:
    """Rows separated by ';', entries by ',' (e.g. "3,4;2,8")."""
    rows = []
    for row in text.split(";"):
        if not row.strip():
            continue
        try:
            rows.append([float(x) for x in row.split(",")])
        except ValueError as exc:
            raise InvalidInput(f"bad matrix row {row!r}: {exc}") from exc
    return rows


def parse_probabilities(text: str) -> list[float]:
    try:
        return [float(x) for x in text.split(",")]
    except ValueError as exc:
        raise InvalidInput(f"bad probabilities {text!r}: {exc}") from exc


def run_game(args: argparse.Namespace) -> None:
    data = parse_matrix(args.matrix) if args.matrix is not None else EXAMPLE_GAMES[args.example]
    matrix = as_payoff_matrix(data)
    solution = solve_game(matrix, backend=args.backend, max_iterations=args.max_iterations)
    print(game_report(matrix, solution, decimal=args.decimal))


def run_criteria(args: argparse.Namespace) -> None:
    if args.matrix is not None:
        matrix = as_payoff_matrix(parse_matrix(args.matrix))
        numRows, numCols = matrix.shape
        problem = ProblemData(list(range(numRows)), list(range(numCols)), payoffs=matrix.tolist())
    else:
        problem = EXAMPLE_PROBLEMS[args.example]()
    if args.probabilities is not None:
        probabilities = parse_probabilities(args.probabilities)
    else:
        probabilities = problem.probabilities
    results = evaluate(problem.matrix(), alpha=args.alpha, probabilities=probabilities)
    print(criteria_report(problem, results, alpha=args.alpha, decimal=args.decimal))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Zero-sum matrix games and decision criteria under uncertainty.")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log solver details")
    parser.add_argument("--decimal", default=".", help="Decimal separator for printed numbers")
    sub = parser.add_subparsers(dest="command", required=True)

    game = sub.add_parser("game", help="Solve a two-player zero-sum game")
    source = game.add_mutually_exclusive_group()
    source.add_argument("--example", choices=sorted(EXAMPLE_GAMES), default="mixed", help="Built-in game")
    source.add_argument("--matrix", help='Payoff matrix, rows separated by ";" (e.g. "3,4;2,8")')
    game.add_argument("--backend", choices=config.BACKENDS, default=config.DEFAULT_BACKEND, help="LP solver")
    game.add_argument("--max-iterations", type=int, default=config.MAX_ITERATIONS, help="Iteration cap per LP")
    game.set_defaults(func=run_game)

    crit = sub.add_parser("criteria", help="Evaluate decision criteria against nature")
    source = crit.add_mutually_exclusive_group()
    source.add_argument("--example", choices=sorted(EXAMPLE_PROBLEMS), default="production", help="Built-in problem")
    source.add_argument("--matrix", help='Payoff matrix, rows separated by ";"')
    crit.add_argument("--alpha", type=float, default=config.DEFAULT_ALPHA, help="Hurwicz optimism coefficient")
    crit.add_argument("--probabilities", help="Comma separated state probabilities (enables Bayes)")
    crit.set_defaults(func=run_criteria)
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        args.func(args)
    except InvalidInput as exc:
        print(f"Invalid input: {exc}", file=sys.stderr)
        return 2
    except SolverError as exc:
        logger.debug(f"solver status: {exc.status}")
        print(f"Solver error: {exc}", file=sys.stderr)
        return 3
    return 0
