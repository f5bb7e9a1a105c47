# -*- coding: utf-8 -*-
"""
Solver result models.

Every solver (weight DP, value DP, greedy, exhaustive) returns the same
SolverOutcome so the strategy selector and the cross-checker can compare
results without caring which path produced them.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Tuple


class Strategy(str, Enum):
    """Closed set of solver paths."""
    WEIGHT_DP = "weight_dp"
    VALUE_DP = "value_dp"
    GREEDY = "greedy"

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    Strategy.WEIGHT_DP: "DP by weight (maximizes value, then picks the lowest feasible weight)",
    Strategy.VALUE_DP: "DP by value (minimizes weight to reach at least the value target)",
    Strategy.GREEDY: "Greedy fallback (value/weight ratio approximation)",
}


@dataclass(frozen=True)
class SolverOutcome:
    """
    Result of a single solver run.

    Attributes
    ----------
    feasible : bool
        True if the selection reaches the value target within capacity.
    weight_scaled : int
        Total scaled weight of the selection.
    value : int
        Total value of the selection.
    selected : tuple[int, ...]
        Original item positions, in ascending order for exact solvers and in
        acceptance order for greedy.
    """
    feasible: bool
    weight_scaled: int
    value: int
    selected: Tuple[int, ...]

    @classmethod
    def infeasible(cls) -> "SolverOutcome":
        return cls(feasible=False, weight_scaled=0, value=0, selected=())

    @classmethod
    def from_selection(
        cls,
        feasible: bool,
        weight_scaled: int,
        value: int,
        selected: Iterable[int],
    ) -> "SolverOutcome":
        return cls(
            feasible=feasible,
            weight_scaled=int(weight_scaled),
            value=int(value),
            selected=tuple(int(i) for i in selected),
        )

    def improves_on(self, other: "SolverOutcome") -> bool:
        """True if this outcome should replace ``other`` (feasible and strictly lighter, or other infeasible)."""
        if not self.feasible:
            return False
        return (not other.feasible) or self.weight_scaled < other.weight_scaled
