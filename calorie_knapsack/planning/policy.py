# -*- coding: utf-8 -*-
"""
Policy (configuration knobs) for the calorie knapsack pipeline.

Scaling:
  - scale_factor: decimal kg -> integer units (1000 = grams, 3 decimals of fidelity)

Strategy selection:
  - dp_dimension_ceiling: largest DP axis (weight or value) solved exactly;
    if both axes exceed it, the greedy fallback is used instead.

Cross-check:
  - exhaustive_item_limit: item counts up to this run the 2^n enumeration
    after the main solver.
"""

from __future__ import annotations
from dataclasses import dataclass

from calorie_knapsack.business_objects.errors import StateValidationError


@dataclass(frozen=True)
class Policy:
    """
    Solver knobs (pure data holder).

    Attributes
    ----------
    scale_factor : int
        Multiplier applied to kg weights before rounding to integers.
    dp_dimension_ceiling : int
        Upper bound on DP table size along its indexing axis.
    exhaustive_item_limit : int
        Maximum item count for the exhaustive cross-check (0 disables it).
    """
    scale_factor: int = 1000
    dp_dimension_ceiling: int = 250_000
    exhaustive_item_limit: int = 25

    def __post_init__(self) -> None:  # type: ignore[override]
        if self.scale_factor <= 0:
            raise StateValidationError("Policy.scale_factor must be > 0.")
        if self.dp_dimension_ceiling < 0:
            raise StateValidationError("Policy.dp_dimension_ceiling must be >= 0.")
        if not 0 <= self.exhaustive_item_limit <= 30:
            raise StateValidationError("Policy.exhaustive_item_limit must be within [0, 30].")

    def describe_scaling(self) -> str:
        """Human-readable scaling rule, e.g. ``1kg = 1000g (scale=1000)``."""
        return f"1kg = {self.scale_factor}g (scale={self.scale_factor})"
