# -*- coding: utf-8 -*-
"""
Value-indexed 0/1 knapsack DP.

min_weight[c] = minimum scaled weight of a subset whose value is exactly c,
for c in [0, sum of values]; min_weight[0] = 0, everything else INF.

Weights above capacity are stored as INF, and items heavier than the
capacity are skipped, so real entries never exceed the capacity and
INF + any item weight still fits in int64. Zero-value items are skipped:
they cannot move along the value axis.

Among levels c >= target with min_weight[c] <= capacity, the lightest wins;
ties go to the lowest such c.
"""

from __future__ import annotations
import logging

import numpy as np

from calorie_knapsack.planning.solution import SolverOutcome
from calorie_knapsack.planning.state import ProblemState
from .backtrack import backtrack, new_marks, record_hits

logger = logging.getLogger(__name__)

INF = int(np.iinfo(np.int64).max // 4)


def solve_by_value(state: ProblemState) -> SolverOutcome:
    """Minimum feasible weight via the value axis. O(items x sum of values)."""
    cap = state.capacity_scaled
    target = state.min_value
    total = state.value_dimension

    # No level >= target exists on the axis, the table would be all INF there.
    if target > total:
        logger.debug("Value DP: target %d exceeds total value %d", target, total)
        return SolverOutcome.infeasible()

    top = total
    min_weight = np.full(top + 1, INF, dtype=np.int64)
    min_weight[0] = 0
    marks = new_marks(len(state.items), top)
    scratch = np.zeros(top + 1, dtype=bool)

    for it in state.items:
        ci = it.value
        if ci <= 0 or it.weight_scaled > cap:
            continue

        prev = min_weight[: top + 1 - ci]
        cand = prev + it.weight_scaled
        cand[(prev >= INF) | (cand > cap)] = INF
        tail = min_weight[ci:]
        hit = cand < tail
        tail[hit] = cand[hit]
        record_hits(marks, it.index, ci, hit, scratch)

    window = min_weight[target:]
    fits = window <= cap
    if not fits.any():
        logger.debug("Value DP: no level in [%d, %d] fits capacity %d", target, top, cap)
        return SolverOutcome.infeasible()

    best_w = int(window[fits].min())
    best_c = target + int(np.argmax(window == best_w))

    selected = backtrack(marks, [it.value for it in state.items], best_c)
    total_weight = sum(state.items[i].weight_scaled for i in selected)
    total_value = sum(state.items[i].value for i in selected)

    logger.debug(
        "Value DP: table=%d best_c=%d weight=%d items=%s",
        top + 1, best_c, total_weight, selected,
    )
    return SolverOutcome.from_selection(True, total_weight, total_value, selected)
