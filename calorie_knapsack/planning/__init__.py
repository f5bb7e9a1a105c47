# -*- coding: utf-8 -*-
"""
Planning layer public API for the calorie knapsack.

This module exposes the core planning-time data contracts:
  - ProblemState (immutable solver input)
  - Policy configuration
  - SolverOutcome and Strategy

Solvers, normalization, assembly and the optimizer are intentionally not
exported here to avoid import cycles; import them explicitly when needed.
"""

from .state import ProblemState
from .policy import Policy
from .solution import SolverOutcome, Strategy

__all__ = [
    "ProblemState",
    "Policy",
    "SolverOutcome",
    "Strategy",
]
