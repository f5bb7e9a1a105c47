# -*- coding: utf-8 -*-
"""
Greedy fallback solver (approximation, no optimality guarantee).

Pipeline:
  1) Build item queue with heuristics.select_next (ratio desc, weight asc, index asc)
  2) Walk the queue: stop once the value target is met; skip (do not stop on)
     items that would overflow capacity, lighter items later may still fit
  3) Feasible iff the accumulated value reached the target

Used only when both DP axes exceed the dimension ceiling.
"""

from __future__ import annotations
import logging
from typing import List

from calorie_knapsack.heuristics.select_next import select_next
from calorie_knapsack.planning.solution import SolverOutcome
from calorie_knapsack.planning.state import ProblemState

logger = logging.getLogger(__name__)


def run_greedy(state: ProblemState) -> SolverOutcome:
    """
    Accept items in heuristic order until the value target is reached.

    Returns
    -------
    SolverOutcome
        ``selected`` is in acceptance order.
    """
    queue: List[int] = select_next(state.items)

    selected: List[int] = []
    total_weight = 0
    total_value = 0
    skipped = 0

    for idx in queue:
        if total_value >= state.min_value:
            break
        it = state.items[idx]
        if total_weight + it.weight_scaled > state.capacity_scaled:
            skipped += 1
            continue
        selected.append(idx)
        total_weight += it.weight_scaled
        total_value += it.value

    feasible = total_value >= state.min_value
    logger.debug(
        "Greedy: accepted=%d skipped=%d weight=%d value=%d feasible=%s",
        len(selected), skipped, total_weight, total_value, feasible,
    )
    return SolverOutcome.from_selection(feasible, total_weight, total_value, selected)
