# -*- coding: utf-8 -*-
"""
Item ordering heuristics used by the greedy fallback.
"""

from .features import build_feature_table, compute_item_features
from .selector import select_next

__all__ = ["build_feature_table", "compute_item_features", "select_next"]
