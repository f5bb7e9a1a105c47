# -*- coding: utf-8 -*-
"""
Scaler/Validator: OptimizationRequest -> ProblemState.

Validation order (first failure wins, raised as StateValidationError whose
message is the note reported to the caller):
  1) min_value > 0
  2) max_weight_kg > 0
  3) items present and non-empty
  4) per item, in request order: weight_kg > 0, value >= 0, value within
     MAX_MAGNITUDE, scaled weight within MAX_MAGNITUDE, scaled weight > 0
  5) sum of values within MAX_MAGNITUDE
  6) scaled capacity within MAX_MAGNITUDE, scaled capacity > 0

MAX_MAGNITUDE keeps every solver sum inside int64: up to 30 weights or the
full value sum, plus the value-DP sentinel.

Weights are scaled with ROUND_HALF_UP, which for Decimal means half away
from zero (0.0005 kg -> 1 g, 0.0004 kg -> 0 g).
"""

from __future__ import annotations
import logging
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import List

import numpy as np

from calorie_knapsack.business_objects.errors import SchemaError, StateValidationError
from calorie_knapsack.business_objects.items import NormalizedItem, Number, to_decimal
from calorie_knapsack.business_objects.optimization import OptimizationRequest
from calorie_knapsack.planning.policy import Policy
from calorie_knapsack.planning.state import ProblemState

logger = logging.getLogger(__name__)

_KG_PLACES = Decimal("0.001")

MAX_MAGNITUDE = int(np.iinfo(np.int64).max // 64)


def scale_weight(weight_kg: Number, scale_factor: int, field_name: str = "weight_kg") -> int:
    """
    Convert a kg weight into integer units, rounding half away from zero.

    Raises StateValidationError when the scaled magnitude exceeds MAX_MAGNITUDE.
    """
    d = to_decimal(weight_kg, field_name)
    too_large = f"Validation: {field_name} is too large to scale."
    try:
        scaled = int((d * scale_factor).quantize(Decimal(1), rounding=ROUND_HALF_UP))
    except InvalidOperation as e:
        raise StateValidationError(too_large) from e
    if abs(scaled) > MAX_MAGNITUDE:
        raise StateValidationError(too_large)
    return scaled


def unscale_weight(weight_scaled: int, scale_factor: int) -> Decimal:
    """Convert integer units back to kg, rounded to 3 decimals."""
    return (Decimal(weight_scaled) / Decimal(scale_factor)).quantize(_KG_PLACES, rounding=ROUND_HALF_UP)


def _require_int(raw: object, field_name: str) -> int:
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise SchemaError(f"{field_name} must be an integer, got {raw!r}.")
    return raw


def normalize_request(request: OptimizationRequest, policy: Policy) -> ProblemState:
    """
    Validate the request and build the immutable solver state.

    Raises
    ------
    StateValidationError
        On the first domain rule violated; the message is caller-facing.
    SchemaError
        If a numeric field is not a number at all.
    """
    min_value = _require_int(request.min_value, "min_value")
    if min_value <= 0:
        raise StateValidationError("Validation: min_value must be > 0.")

    max_weight_kg = to_decimal(request.max_weight_kg, "max_weight_kg")
    if max_weight_kg <= 0:
        raise StateValidationError("Validation: max_weight_kg must be > 0.")

    if not request.items:
        raise StateValidationError("Validation: the items list is required and cannot be empty.")

    normalized: List[NormalizedItem] = []
    for i, raw in enumerate(request.items):
        weight_kg = to_decimal(raw.weight_kg, f"items[{i}].weight_kg")
        if weight_kg <= 0:
            raise StateValidationError(f"Validation: item at index {i} must have weight_kg > 0.")

        value = _require_int(raw.value, f"items[{i}].value")
        if value < 0:
            raise StateValidationError(f"Validation: item at index {i} must have value >= 0.")
        if value > MAX_MAGNITUDE:
            raise StateValidationError(f"Validation: item at index {i} has a value too large to process.")

        weight_scaled = scale_weight(weight_kg, policy.scale_factor, f"item at index {i} weight_kg")
        if weight_scaled <= 0:
            raise StateValidationError(
                f"Validation: item at index {i} has a weight_kg too small to scale."
            )

        item_id = raw.id if raw.id is not None else f"E{i + 1}"
        if raw.label is not None:
            label = raw.label
        else:
            label = raw.id if raw.id is not None else f"Elemento {i + 1}"

        normalized.append(NormalizedItem(
            index=i,
            id=item_id,
            label=label,
            weight_scaled=weight_scaled,
            weight_kg=weight_kg,
            value=value,
        ))

    if sum(it.value for it in normalized) > MAX_MAGNITUDE:
        raise StateValidationError("Validation: the sum of item values is too large to process.")

    capacity_scaled = scale_weight(max_weight_kg, policy.scale_factor, "max_weight_kg")
    if capacity_scaled <= 0:
        raise StateValidationError("Validation: max_weight_kg is too small to scale.")

    logger.debug(
        "Normalized %d items: capacity=%d (scale=%d), target=%d",
        len(normalized), capacity_scaled, policy.scale_factor, min_value,
    )
    return ProblemState(items=normalized, min_value=min_value, capacity_scaled=capacity_scaled)
