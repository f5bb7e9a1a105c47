# -*- coding: utf-8 -*-
"""
Request/response models for a single optimization call.

Both are plain data holders; validation happens in
``planning.normalization`` so that failures can be reported as notes.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional, Sequence

from .items import Number, RawItem, SelectedItem


@dataclass(frozen=True)
class OptimizationRequest:
    """
    Input of ``optimize``.

    Attributes
    ----------
    min_value : int
        Minimum total calories required (must be > 0).
    max_weight_kg : Decimal | int | float | str
        Maximum total weight in kg (must be > 0).
    items : Sequence[RawItem] | None
        Candidate items (must be non-empty).
    """
    min_value: int
    max_weight_kg: Number
    items: Optional[Sequence[RawItem]]


@dataclass(frozen=True)
class OptimizationResponse:
    """
    Output of ``optimize``.

    Attributes
    ----------
    feasible : bool
        True if a subset reaches ``min_value`` within ``max_weight_kg``.
    total_weight_kg : Decimal
        Weight of the selection, rounded to 3 decimals.
    total_value : int
        Calories of the selection.
    selected_items : list[SelectedItem]
        Chosen items in original order.
    strategy : str
        Which solver path produced the selection.
    weight_scaling : str
        The decimal-to-integer scaling rule that was applied.
    notes : list[str]
        Validation messages, fallback warnings, infeasibility explanation.
    """
    feasible: bool
    total_weight_kg: Decimal = Decimal("0")
    total_value: int = 0
    selected_items: List[SelectedItem] = field(default_factory=list)
    strategy: str = ""
    weight_scaling: str = ""
    notes: List[str] = field(default_factory=list)
