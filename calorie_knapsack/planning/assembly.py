# -*- coding: utf-8 -*-
"""
Result assembly: SolverOutcome -> OptimizationResponse.

  1) Drop repeated indices (first occurrence wins); warn if any were found
  2) Convert the scaled weight back to kg (3 decimals)
  3) Map selected positions back to their normalized items
  4) Explain infeasibility in the notes
"""

from __future__ import annotations
import logging
from typing import List, Tuple

from calorie_knapsack.business_objects.items import SelectedItem
from calorie_knapsack.business_objects.optimization import OptimizationResponse
from calorie_knapsack.planning.normalization import unscale_weight
from calorie_knapsack.planning.policy import Policy
from calorie_knapsack.planning.solution import SolverOutcome
from calorie_knapsack.planning.state import ProblemState

logger = logging.getLogger(__name__)

DUPLICATES_NOTE = "Warning: repeated indices were detected in the selection; duplicates were removed."
INFEASIBLE_NOTE = "Result: no feasible subset reaches min_value without exceeding max_weight_kg."


def dedupe_selection(outcome: SolverOutcome) -> Tuple[SolverOutcome, bool]:
    """Return the outcome with unique indices (order kept) and whether any were removed."""
    unique = tuple(dict.fromkeys(outcome.selected))
    if len(unique) == len(outcome.selected):
        return outcome, False
    return SolverOutcome(
        feasible=outcome.feasible,
        weight_scaled=outcome.weight_scaled,
        value=outcome.value,
        selected=unique,
    ), True


def assemble_response(
    state: ProblemState,
    outcome: SolverOutcome,
    strategy: str,
    policy: Policy,
    notes: List[str],
) -> OptimizationResponse:
    """
    Build the caller-facing response.

    ``notes`` holds messages gathered earlier in the run (e.g. the greedy
    disclosure); assembly appends its own after them.
    """
    notes = list(notes)

    outcome, had_duplicates = dedupe_selection(outcome)
    if had_duplicates:
        logger.warning("Duplicate indices removed from selection: %s", outcome.selected)
        notes.append(DUPLICATES_NOTE)

    selected_items = [
        SelectedItem(
            id=state.items[i].id,
            label=state.items[i].label,
            weight_kg=state.items[i].weight_kg,
            value=state.items[i].value,
        )
        for i in outcome.selected
    ]

    if not outcome.feasible:
        notes.append(INFEASIBLE_NOTE)

    return OptimizationResponse(
        feasible=outcome.feasible,
        total_weight_kg=unscale_weight(outcome.weight_scaled, policy.scale_factor),
        total_value=outcome.value,
        selected_items=selected_items,
        strategy=strategy,
        weight_scaling=policy.describe_scaling(),
        notes=notes,
    )
