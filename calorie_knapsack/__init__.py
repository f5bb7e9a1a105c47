# -*- coding: utf-8 -*-
"""
calorie_knapsack: minimum-weight 0/1 knapsack with a calorie target.

    from calorie_knapsack import optimize, sample_request

    response = optimize(sample_request())
    response.feasible, response.total_weight_kg, response.selected_items
"""

from calorie_knapsack.business_objects import (
    OptimizationRequest,
    OptimizationResponse,
    RawItem,
    SelectedItem,
)
from calorie_knapsack.planning.policy import Policy
from calorie_knapsack.planning.optimizer import optimize, sample_request

__all__ = [
    "OptimizationRequest",
    "OptimizationResponse",
    "RawItem",
    "SelectedItem",
    "Policy",
    "optimize",
    "sample_request",
]

__version__ = "0.1.0"
