from __future__ import annotations

import sys
from decimal import Decimal
from pathlib import Path
from typing import Callable, Sequence, Tuple

import pytest

# Ensure project root is on sys.path for package imports like `calorie_knapsack.*`
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from calorie_knapsack import OptimizationRequest, Policy, RawItem, sample_request  # noqa: E402
from calorie_knapsack.planning.normalization import normalize_request  # noqa: E402
from calorie_knapsack.planning.state import ProblemState  # noqa: E402

Pair = Tuple[object, int]
StateFactory = Callable[[Sequence[Pair], int, object], ProblemState]


def make_request(pairs: Sequence[Pair], min_value: int, capacity_kg: object) -> OptimizationRequest:
    """Request from (weight_kg, value) pairs; weights go through str() into Decimal."""
    return OptimizationRequest(
        min_value=min_value,
        max_weight_kg=Decimal(str(capacity_kg)),
        items=[RawItem(weight_kg=Decimal(str(w)), value=v) for w, v in pairs],
    )


@pytest.fixture
def request_factory() -> Callable[[Sequence[Pair], int, object], OptimizationRequest]:
    return make_request


@pytest.fixture
def state_factory() -> StateFactory:
    def _build(pairs: Sequence[Pair], min_value: int, capacity_kg: object) -> ProblemState:
        return normalize_request(make_request(pairs, min_value, capacity_kg), Policy())

    return _build


@pytest.fixture
def sample_state() -> ProblemState:
    return normalize_request(sample_request(), Policy())
