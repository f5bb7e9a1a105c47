from __future__ import annotations

from decimal import Decimal

import pytest

from calorie_knapsack import OptimizationRequest, Policy, RawItem
from calorie_knapsack.business_objects import NormalizedItem, SchemaError, StateValidationError
from calorie_knapsack.planning.normalization import MAX_MAGNITUDE, normalize_request, scale_weight, unscale_weight


def _request(items, min_value=10, max_weight_kg=Decimal("10")) -> OptimizationRequest:
    return OptimizationRequest(min_value=min_value, max_weight_kg=max_weight_kg, items=items)


def _rejection(request: OptimizationRequest) -> str:
    with pytest.raises(StateValidationError) as exc:
        normalize_request(request, Policy())
    return str(exc.value)


@pytest.mark.parametrize(
    "raw, expected",
    [
        (Decimal("2.345"), 2345),
        (Decimal("0.0005"), 1),
        (Decimal("0.0004"), 0),
        (Decimal("2.3455"), 2346),
        (Decimal("-0.0005"), -1),
        (0.1, 100),
        (3, 3000),
        ("1.5", 1500),
    ],
)
def test_scale_weight_rounds_half_away_from_zero(raw, expected) -> None:
    assert scale_weight(raw, 1000) == expected


def test_unscale_weight_rounds_to_three_places() -> None:
    assert unscale_weight(6000, 1000) == Decimal("6.000")
    assert str(unscale_weight(1234, 1000)) == "1.234"
    assert unscale_weight(1, 10_000) == Decimal("0.000")
    assert unscale_weight(5, 10_000) == Decimal("0.001")


def test_defaults_for_missing_id_and_label() -> None:
    state = normalize_request(
        _request([
            RawItem(weight_kg=Decimal("1"), value=2),
            RawItem(weight_kg=Decimal("1"), value=2, id="X"),
            RawItem(weight_kg=Decimal("1"), value=2, label="Apple"),
            RawItem(weight_kg=Decimal("1"), value=2, id="Y", label="Pear"),
        ]),
        Policy(),
    )
    assert [(it.id, it.label) for it in state.items] == [
        ("E1", "Elemento 1"),
        ("X", "X"),
        ("E3", "Apple"),
        ("Y", "Pear"),
    ]


def test_normalized_fields() -> None:
    state = normalize_request(_request([RawItem(weight_kg=Decimal("2.5"), value=7)], 5, Decimal("3.25")), Policy())
    assert state.capacity_scaled == 3250
    assert state.min_value == 5
    only = state.items[0]
    assert only.index == 0
    assert only.weight_scaled == 2500
    assert only.weight_kg == Decimal("2.5")
    assert only.value == 7


def test_min_value_checked_first() -> None:
    note = _rejection(_request([], min_value=0, max_weight_kg=Decimal("0")))
    assert note == "Validation: min_value must be > 0."


def test_max_weight_checked_before_items() -> None:
    note = _rejection(_request(None, max_weight_kg=Decimal("-1")))
    assert note == "Validation: max_weight_kg must be > 0."


@pytest.mark.parametrize("items", [None, []])
def test_missing_items(items) -> None:
    note = _rejection(_request(items))
    assert note == "Validation: the items list is required and cannot be empty."


def test_item_weight_must_be_positive_reports_index() -> None:
    note = _rejection(_request([
        RawItem(weight_kg=Decimal("1"), value=1),
        RawItem(weight_kg=Decimal("0"), value=1),
    ]))
    assert note == "Validation: item at index 1 must have weight_kg > 0."


def test_item_value_must_be_non_negative() -> None:
    note = _rejection(_request([RawItem(weight_kg=Decimal("1"), value=-3)]))
    assert note == "Validation: item at index 0 must have value >= 0."


def test_item_too_small_to_scale() -> None:
    note = _rejection(_request([RawItem(weight_kg=Decimal("0.0001"), value=3)]))
    assert "too small to scale" in note
    assert "index 0" in note


def test_item_checks_run_before_capacity_scaling() -> None:
    note = _rejection(_request(
        [RawItem(weight_kg=Decimal("1"), value=-1)],
        max_weight_kg=Decimal("0.0001"),
    ))
    assert "index 0" in note


def test_capacity_too_small_to_scale() -> None:
    note = _rejection(_request([RawItem(weight_kg=Decimal("1"), value=1)], max_weight_kg=Decimal("0.0004")))
    assert note == "Validation: max_weight_kg is too small to scale."


def test_non_numeric_weight_is_a_schema_error() -> None:
    with pytest.raises(SchemaError):
        normalize_request(_request([RawItem(weight_kg="heavy", value=1)]), Policy())


def test_non_integer_value_is_a_schema_error() -> None:
    with pytest.raises(SchemaError):
        normalize_request(_request([RawItem(weight_kg=Decimal("1"), value=1.5)]), Policy())  # type: ignore[arg-type]


def test_normalized_item_rejects_zero_weight() -> None:
    with pytest.raises(StateValidationError):
        NormalizedItem(index=0, id="E1", label="E1", weight_scaled=0, weight_kg=Decimal("0.0001"), value=1)


def test_custom_scale_factor() -> None:
    state = normalize_request(
        _request([RawItem(weight_kg=Decimal("0.25"), value=1)], max_weight_kg=Decimal("1")),
        Policy(scale_factor=10),
    )
    assert state.items[0].weight_scaled == 3
    assert state.capacity_scaled == 10


def test_magnitude_limit_fits_thirty_weights_in_int64() -> None:
    assert 30 * MAX_MAGNITUDE < 2**63 - 1


def test_value_beyond_int64_is_rejected() -> None:
    note = _rejection(_request([RawItem(weight_kg=Decimal("1"), value=10**19)]))
    assert note == "Validation: item at index 0 has a value too large to process."


def test_value_at_magnitude_limit_is_accepted() -> None:
    state = normalize_request(_request([RawItem(weight_kg=Decimal("1"), value=MAX_MAGNITUDE)]), Policy())
    assert state.value_dimension == MAX_MAGNITUDE


def test_sum_of_values_too_large() -> None:
    note = _rejection(_request([
        RawItem(weight_kg=Decimal("1"), value=MAX_MAGNITUDE),
        RawItem(weight_kg=Decimal("1"), value=1),
    ]))
    assert note == "Validation: the sum of item values is too large to process."


def test_item_weight_too_large_to_scale() -> None:
    note = _rejection(_request([
        RawItem(weight_kg=Decimal("1"), value=1),
        RawItem(weight_kg=Decimal("1e30"), value=1),
    ]))
    assert note == "Validation: item at index 1 weight_kg is too large to scale."


@pytest.mark.parametrize("capacity", [Decimal("1e30"), Decimal("1e15")])
def test_capacity_too_large_to_scale(capacity) -> None:
    note = _rejection(_request([RawItem(weight_kg=Decimal("1"), value=1)], max_weight_kg=capacity))
    assert note == "Validation: max_weight_kg is too large to scale."


def test_scale_weight_rejects_unrepresentable_magnitude() -> None:
    with pytest.raises(StateValidationError, match="too large to scale"):
        scale_weight(Decimal("1e30"), 1000)
