# -*- coding: utf-8 -*-
"""
Item models for the calorie knapsack.

  - RawItem:        caller-supplied item (weights in kg, possibly missing id/label)
  - NormalizedItem: per-call item with an integer scaled weight, used by solvers
  - SelectedItem:   an item reported back in the response
"""

from __future__ import annotations
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Optional, Union

from .errors import SchemaError, StateValidationError

Number = Union[Decimal, int, float, str]


def to_decimal(raw: Number, field_name: str = "value") -> Decimal:
    """
    Convert a numeric input into a finite Decimal.

    Floats go through ``str`` so that ``0.1`` becomes ``Decimal("0.1")`` rather
    than its binary expansion.
    """
    if isinstance(raw, bool):
        raise SchemaError(f"{field_name} must be a number, got a boolean.")
    if isinstance(raw, Decimal):
        d = raw
    elif isinstance(raw, int):
        d = Decimal(raw)
    elif isinstance(raw, (float, str)):
        try:
            d = Decimal(str(raw).strip())
        except InvalidOperation as e:
            raise SchemaError(f"{field_name} is not a number: {raw!r}") from e
    else:
        raise SchemaError(f"{field_name} must be a number, got {type(raw).__name__}.")

    if not d.is_finite():
        raise SchemaError(f"{field_name} must be finite, got {raw!r}.")
    return d


@dataclass(frozen=True)
class RawItem:
    """
    An item as supplied by the caller.

    Attributes
    ----------
    weight_kg : Decimal | int | float | str
        Weight in kilograms. Validated (> 0) during normalization.
    value : int
        Calories contributed if selected. Validated (>= 0) during normalization.
    id : str | None
        Client-side identifier; defaults to ``E{position}`` (1-based).
    label : str | None
        Display name; defaults to the id if given, else ``Elemento {position}``.
    """
    weight_kg: Number
    value: int
    id: Optional[str] = None
    label: Optional[str] = None


@dataclass(frozen=True)
class NormalizedItem:
    """
    An item ready for integer dynamic programming.

    Attributes
    ----------
    index : int
        Original 0-based position in the request.
    id : str
        Resolved identifier.
    label : str
        Resolved display name.
    weight_scaled : int
        ``weight_kg * scale_factor`` rounded half away from zero (grams by default).
    weight_kg : Decimal
        Original weight, kept for output.
    value : int
        Calories.
    """
    index: int
    id: str
    label: str
    weight_scaled: int
    weight_kg: Decimal
    value: int

    def __post_init__(self) -> None:  # type: ignore[override]
        if self.index < 0:
            raise StateValidationError(f"NormalizedItem[{self.id}] index must be >= 0.")
        if self.weight_scaled <= 0:
            raise StateValidationError(f"NormalizedItem[{self.id}] weight_scaled must be > 0.")
        if self.value < 0:
            raise StateValidationError(f"NormalizedItem[{self.id}] value must be >= 0.")


@dataclass(frozen=True)
class SelectedItem:
    """Output row: one item chosen by the optimizer."""
    id: str
    label: str
    weight_kg: Decimal
    value: int
