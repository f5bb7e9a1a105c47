# -*- coding: utf-8 -*-
"""
Derived item features for greedy sequencing.

This module computes the per-item features behind the greedy queue order.
It is intentionally pure/stateless and performs no mutation or I/O.
"""

from __future__ import annotations
from typing import Dict, List

from calorie_knapsack.business_objects.items import NormalizedItem


def compute_item_features(item: NormalizedItem) -> Dict[str, float]:
    """
    Compute derived features for a single item.

    Features:
      - weight: scaled weight (integer units)
      - ratio:  value/weight; convention:
                value == 0 -> 0.0
                weight is clamped to >= 1 (scaled weights are positive anyway)
    """
    w = float(item.weight_scaled)

    ratio = 0.0 if item.value <= 0 else item.value / max(1.0, w)

    return {
        "weight": w,
        "ratio": ratio,
    }


def build_feature_table(items: List[NormalizedItem]) -> Dict[int, Dict[str, float]]:
    """
    Convenience: return {item_index: {feature_name: value, ...}, ...}
    """
    return {it.index: compute_item_features(it) for it in items}
