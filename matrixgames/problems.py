"""Problem definitions and payoff builders for decisions under uncertainty"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np

from matrixgames.errors import InvalidInput
from matrixgames.matrix import as_payoff_matrix


@dataclass(frozen=True)
class ProblemData:
    strategies: Sequence  # labels of the decision maker's options (rows)
    states: Sequence  # labels of the states of nature (columns)
    probabilities: Optional[Sequence[float]] = None
    payoffs: Optional[Sequence[Sequence[float]]] = None

    def matrix(self) -> np.ndarray:
        if self.payoffs is None:
            raise InvalidInput("payoff matrix is not set")
        matrix = as_payoff_matrix(self.payoffs)
        expected = (len(self.strategies), len(self.states))
        if matrix.shape != expected:
            raise InvalidInput(f"payoff matrix shape {matrix.shape} does not match strategies x states {expected}")
        return matrix

    def strategy_label(self, index: int):
        return self.strategies[index]


def production_payoffs(strategies: Sequence[int], states: Sequence[int],
                       price: float, cost: float) -> list[list[float]]:
    """
    Profit of producing A units when demand turns out to be S.

    Sold units earn price - cost each; unsold units lose their full cost.
    """
    payoffs = []
    for A in strategies:
        row = []
        for S in states:
            sales = min(A, S)
            surplus = max(0, A - S)
            row.append(float(sales * (price - cost) - surplus * cost))
        payoffs.append(row)
    return payoffs


def guide_payoffs(strategies: Sequence[int], states: Sequence[int],
                  exhibition_cost: float, guide_salary: float, ticket_price: float,
                  visitors_per_guide: int = 100) -> list[list[float]]:
    """
    Daily profit of an exhibition that hires E guides and receives S visitors.

    Each guide serves at most visitors_per_guide visitors; the rest are turned away.
    """
    payoffs = []
    for E in strategies:
        row = []
        for S in states:
            served = min(E * visitors_per_guide, S)
            row.append(float(served * ticket_price - (exhibition_cost + E * guide_salary)))
        payoffs.append(row)
    return payoffs


def production_example() -> ProblemData:
    """TV sets: produce 100..400, demand 100..400, price 100, cost 50."""
    strategies = [100, 200, 300, 400]
    states = [100, 200, 300, 400]
    return ProblemData(strategies, states, payoffs=production_payoffs(strategies, states, price=100.0, cost=50.0))


def guides_example() -> ProblemData:
    """Exhibition: 1..4 guides, 50..300 visitors a day."""
    strategies = [1, 2, 3, 4]
    states = [50, 100, 150, 200, 250, 300]
    payoffs = guide_payoffs(strategies, states, exhibition_cost=80.0, guide_salary=40.0, ticket_price=2.0)
    return ProblemData(strategies, states, payoffs=payoffs)


EXAMPLE_PROBLEMS = {
    "production": production_example,
    "guides": guides_example,
}

EXAMPLE_GAMES = {
    "mixed": [
        [3, 4, 6, 1],
        [2, 8, 4, 3],
        [10, 3, 1, 7],
    ],
    "saddle": [
        [0, -1, -2],
        [1, 0, -1],
        [2, 1, 0],
    ],
}
