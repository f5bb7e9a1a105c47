# -*- coding: utf-8 -*-
"""
Immutable per-call problem state.

ProblemState is what every solver receives: normalized items (integer
weights), the value target and the scaled capacity. It is built by
``planning.normalization`` and discarded when the call returns.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List

from calorie_knapsack.business_objects.errors import StateValidationError
from calorie_knapsack.business_objects.items import NormalizedItem


@dataclass(frozen=True)
class ProblemState:
    """
    Immutable solver input.

    Attributes
    ----------
    items : list[NormalizedItem]
        Items in request order; ``items[i].index == i``.
    min_value : int
        Value target (> 0).
    capacity_scaled : int
        Maximum total scaled weight (> 0).
    """
    items: List[NormalizedItem]
    min_value: int
    capacity_scaled: int

    def __post_init__(self) -> None:  # type: ignore[override]
        if self.min_value <= 0:
            raise StateValidationError("ProblemState.min_value must be > 0.")
        if self.capacity_scaled <= 0:
            raise StateValidationError("ProblemState.capacity_scaled must be > 0.")
        for pos, it in enumerate(self.items):
            if it.index != pos:
                raise StateValidationError(
                    f"ProblemState.items[{pos}] has index {it.index}; items must keep request order."
                )

    @property
    def weight_dimension(self) -> int:
        """Size of the weight axis (scaled capacity)."""
        return self.capacity_scaled

    @property
    def value_dimension(self) -> int:
        """Size of the value axis (sum of all item values)."""
        return sum(it.value for it in self.items)
