# -*- coding: utf-8 -*-
"""
Weight-indexed 0/1 knapsack DP.

best[w] = maximum total value of a subset whose scaled weight is exactly w,
for w in [0, capacity]; best[0] = 0, everything else starts unreachable.

Each item updates the table once from a snapshot of the previous row
(the vectorized form of the descending inner loop), so no item is counted
twice. The answer is the smallest w with best[w] >= target.
"""

from __future__ import annotations
import logging

import numpy as np

from calorie_knapsack.planning.solution import SolverOutcome
from calorie_knapsack.planning.state import ProblemState
from .backtrack import backtrack, new_marks, record_hits

logger = logging.getLogger(__name__)

_UNREACHABLE = -1


def solve_by_weight(state: ProblemState) -> SolverOutcome:
    """Minimum feasible weight via the weight axis. O(items x capacity)."""
    cap = state.capacity_scaled
    target = state.min_value

    if target > state.value_dimension:
        logger.debug("Weight DP: target %d exceeds total value %d", target, state.value_dimension)
        return SolverOutcome.infeasible()

    best = np.full(cap + 1, _UNREACHABLE, dtype=np.int64)
    best[0] = 0
    marks = new_marks(len(state.items), cap)
    scratch = np.zeros(cap + 1, dtype=bool)

    for it in state.items:
        wi = it.weight_scaled
        if wi > cap:
            continue

        prev = best[: cap + 1 - wi]
        cand = np.where(prev != _UNREACHABLE, prev + it.value, _UNREACHABLE)
        tail = best[wi:]
        hit = cand > tail
        tail[hit] = cand[hit]
        record_hits(marks, it.index, wi, hit, scratch)

    reach = np.flatnonzero(best >= target)
    if reach.size == 0:
        logger.debug("Weight DP: no weight in [0, %d] reaches value %d", cap, target)
        return SolverOutcome.infeasible()

    best_w = int(reach[0])
    selected = backtrack(marks, [it.weight_scaled for it in state.items], best_w)
    total_value = sum(state.items[i].value for i in selected)

    logger.debug(
        "Weight DP: table=%d best_w=%d value=%d items=%s",
        cap + 1, best_w, total_value, selected,
    )
    return SolverOutcome.from_selection(True, best_w, total_value, selected)
