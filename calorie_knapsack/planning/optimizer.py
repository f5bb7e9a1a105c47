# -*- coding: utf-8 -*-
"""
Optimization orchestrator: the single entry point of the core.

Pipeline per call:
  1) Validate + scale the request (planning.normalization)
  2) Pick and run a solver by DP dimension (planning.strategy)
  3) Cross-check with exhaustive enumeration when the item count is small
  4) Assemble the response (planning.assembly)

Domain problems never raise: validation failures come back as an infeasible
response with a "Validation: ..." note.
"""

from __future__ import annotations
import logging
from decimal import Decimal
from typing import List, Optional

from calorie_knapsack.business_objects.errors import SchemaError, StateValidationError
from calorie_knapsack.business_objects.items import RawItem
from calorie_knapsack.business_objects.optimization import OptimizationRequest, OptimizationResponse
from calorie_knapsack.planning.assembly import assemble_response
from calorie_knapsack.planning.normalization import normalize_request
from calorie_knapsack.planning.policy import Policy
from calorie_knapsack.planning.solution import Strategy
from calorie_knapsack.planning.solvers.exhaustive import run_exhaustive
from calorie_knapsack.planning.strategy import run_selected_strategy

logger = logging.getLogger(__name__)

GREEDY_NOTE = (
    "Note: the input is too large for exact search; the value/weight ratio "
    "approximation was used and the result may not be optimal."
)


def exhaustive_suffix(policy: Policy) -> str:
    return f" + exhaustive check (n<={policy.exhaustive_item_limit})"


def optimize(
    request: OptimizationRequest,
    policy: Optional[Policy] = None,
) -> OptimizationResponse:
    """
    Find the minimum-weight subset reaching ``request.min_value`` within
    ``request.max_weight_kg``.

    Parameters
    ----------
    request : OptimizationRequest
        Targets and candidate items.
    policy : Policy | None
        Solver knobs; defaults to ``Policy()``.

    Returns
    -------
    OptimizationResponse
        Always returned; check ``feasible`` and ``notes``.
    """
    policy = policy or Policy()

    try:
        state = normalize_request(request, policy)
    except (StateValidationError, SchemaError) as e:
        message = str(e)
        if not message.startswith("Validation:"):
            message = f"Validation: {message}"
        logger.info("Request rejected: %s", message)
        return OptimizationResponse(
            feasible=False,
            weight_scaling=policy.describe_scaling(),
            notes=[message],
        )

    notes: List[str] = []
    strategy, outcome = run_selected_strategy(state, policy)
    description = strategy.description
    if strategy is Strategy.GREEDY:
        logger.warning(
            "Both DP axes exceed %d; using greedy approximation for %d items",
            policy.dp_dimension_ceiling, len(state.items),
        )
        notes.append(GREEDY_NOTE)

    if len(state.items) <= policy.exhaustive_item_limit:
        exhaustive = run_exhaustive(state)
        if exhaustive.improves_on(outcome):
            logger.info(
                "Exhaustive check replaced %s outcome (feasible=%s, weight=%d) with weight=%d",
                strategy.value, outcome.feasible, outcome.weight_scaled, exhaustive.weight_scaled,
            )
            outcome = exhaustive
            description += exhaustive_suffix(policy)

    return assemble_response(state, outcome, description, policy, notes)


def sample_request() -> OptimizationRequest:
    """
    Fixed illustrative input: five items, target 15 calories, capacity 10 kg.

    A new (equal) object is built on every call.
    """
    return OptimizationRequest(
        min_value=15,
        max_weight_kg=Decimal("10"),
        items=[
            RawItem(id="E1", label="Elemento 1", weight_kg=Decimal("5"), value=3),
            RawItem(id="E2", label="Elemento 2", weight_kg=Decimal("3"), value=5),
            RawItem(id="E3", label="Elemento 3", weight_kg=Decimal("5"), value=2),
            RawItem(id="E4", label="Elemento 4", weight_kg=Decimal("1"), value=8),
            RawItem(id="E5", label="Elemento 5", weight_kg=Decimal("2"), value=3),
        ],
    )
