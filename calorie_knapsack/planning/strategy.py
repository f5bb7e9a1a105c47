# -*- coding: utf-8 -*-
"""
Strategy selection: which solver indexes the smaller DP axis.

Cost of either DP is items x dimension, so the smaller axis wins:
  - weight axis = scaled capacity
  - value axis  = sum of item values
If both axes are above the ceiling, exact DP is abandoned for greedy.
"""

from __future__ import annotations
import logging
from typing import Callable, Dict, Tuple

from calorie_knapsack.planning.policy import Policy
from calorie_knapsack.planning.solution import SolverOutcome, Strategy
from calorie_knapsack.planning.state import ProblemState
from calorie_knapsack.planning.solvers.greedy import run_greedy
from calorie_knapsack.planning.solvers.value_dp import solve_by_value
from calorie_knapsack.planning.solvers.weight_dp import solve_by_weight

logger = logging.getLogger(__name__)

SolverFn = Callable[[ProblemState], SolverOutcome]

SOLVERS: Dict[Strategy, SolverFn] = {
    Strategy.WEIGHT_DP: solve_by_weight,
    Strategy.VALUE_DP: solve_by_value,
    Strategy.GREEDY: run_greedy,
}


def select_strategy(weight_dimension: int, value_dimension: int, ceiling: int) -> Strategy:
    """
    Pure dispatch rule.

    Ties between the axes go to the weight DP.
    """
    if weight_dimension <= value_dimension and weight_dimension <= ceiling:
        return Strategy.WEIGHT_DP
    if value_dimension < weight_dimension and value_dimension <= ceiling:
        return Strategy.VALUE_DP
    return Strategy.GREEDY


def run_selected_strategy(state: ProblemState, policy: Policy) -> Tuple[Strategy, SolverOutcome]:
    """Pick the strategy for ``state`` and run it."""
    strategy = select_strategy(
        weight_dimension=state.weight_dimension,
        value_dimension=state.value_dimension,
        ceiling=policy.dp_dimension_ceiling,
    )
    logger.info(
        "Strategy %s (weight_dim=%d, value_dim=%d, ceiling=%d)",
        strategy.value, state.weight_dimension, state.value_dimension, policy.dp_dimension_ceiling,
    )
    return strategy, SOLVERS[strategy](state)
