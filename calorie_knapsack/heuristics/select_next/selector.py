# -*- coding: utf-8 -*-
"""
Select Next: item sequencing for the greedy fallback.

The queue order is fixed so repeated calls pick the same items:
  - ratio  -> descending (higher value per weight unit first)
  - weight -> ascending (lighter first)
  - index  -> ascending (request order on full ties)
"""

from __future__ import annotations
from typing import Dict, List, Tuple

from calorie_knapsack.business_objects.items import NormalizedItem
from .features import build_feature_table


def _sort_key_for_item(index: int, features: Dict[str, float]) -> Tuple[float, float, int]:
    """Ratio is negated since Python sorts ascending."""
    return (-features["ratio"], features["weight"], index)


def select_next(items: List[NormalizedItem]) -> List[int]:
    """
    Return item indices in greedy consideration order (first = consider first).

    No mutation occurs here.
    """
    feat_table = build_feature_table(items)
    return sorted(
        (it.index for it in items),
        key=lambda idx: _sort_key_for_item(idx, feat_table[idx]),
    )
