# -*- coding: utf-8 -*-
"""
Exhaustive cross-check: enumerate every subset of a small item list.

A mask qualifies when weight <= capacity and value >= target. The winner is
the lightest qualifying mask; on equal weight the more valuable one; on a
full tie the lowest mask (masks are scanned in increasing order).

Enumeration is split into a low-bit block, whose 2^k subset sums are built
once, and a loop over high-bit prefixes. Each prefix adds a scalar to the
low-bit sums and evaluates 2^k masks with numpy, in increasing mask order.
Validated magnitudes keep every subset sum of up to 30 items inside int64.
"""

from __future__ import annotations
import logging
from typing import List, Optional, Tuple

import numpy as np

from calorie_knapsack.planning.solution import SolverOutcome
from calorie_knapsack.planning.state import ProblemState

logger = logging.getLogger(__name__)

_LOW_BITS = 16


def subset_sums(values: np.ndarray) -> np.ndarray:
    """
    Sums of all subsets, indexed by bitmask: bit i of the index selects values[i].
    """
    sums = np.zeros(1, dtype=np.int64)
    for x in values:
        sums = np.concatenate([sums, sums + int(x)])
    return sums


def _mask_to_indices(mask: int, n: int) -> List[int]:
    return [i for i in range(n) if (mask >> i) & 1]


def run_exhaustive(state: ProblemState) -> SolverOutcome:
    """Ground-truth minimum-weight subset. O(2^n); callers bound n."""
    n = len(state.items)
    cap = state.capacity_scaled
    target = state.min_value

    if target > state.value_dimension:
        logger.debug("Exhaustive: target %d exceeds total value %d", target, state.value_dimension)
        return SolverOutcome.infeasible()

    weights = np.array([it.weight_scaled for it in state.items], dtype=np.int64)
    values = np.array([it.value for it in state.items], dtype=np.int64)

    low_n = min(n, _LOW_BITS)
    low_w = subset_sums(weights[:low_n])
    low_v = subset_sums(values[:low_n])
    high_w = subset_sums(weights[low_n:])
    high_v = subset_sums(values[low_n:])

    # (weight, value, mask)
    best: Optional[Tuple[int, int, int]] = None

    for high in range(high_w.size):
        base_w = int(high_w[high])
        if base_w > cap:
            continue
        w = low_w + base_w
        v = low_v + int(high_v[high])
        ok = (w <= cap) & (v >= target)
        if not ok.any():
            continue

        cand_w = int(w[ok].min())
        at_w = ok & (w == cand_w)
        cand_v = int(v[at_w].max())
        low = int(np.argmax(at_w & (v == cand_v)))

        if best is None or cand_w < best[0] or (cand_w == best[0] and cand_v > best[1]):
            best = (cand_w, cand_v, (high << low_n) | low)

    if best is None:
        logger.debug("Exhaustive: no feasible subset among 2^%d masks", n)
        return SolverOutcome.infeasible()

    best_w, best_v, mask = best
    selected = _mask_to_indices(mask, n)
    logger.debug("Exhaustive: weight=%d value=%d items=%s", best_w, best_v, selected)
    return SolverOutcome.from_selection(True, best_w, best_v, selected)
