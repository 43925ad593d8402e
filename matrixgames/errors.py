"""Exceptions raised by the matrix game solvers"""

from __future__ import annotations

from typing import Optional


class InvalidInput(ValueError):
    """Malformed payoff matrix or parameter (empty, ragged, non-finite, out of range)."""


class SolverError(RuntimeError):
    """The LP could not be solved to optimality."""

    def __init__(self, message: str, status: Optional[str] = None) -> None:
        super().__init__(message)
        self.status = status
