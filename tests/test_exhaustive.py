from __future__ import annotations

import numpy as np

from calorie_knapsack.planning.solvers.exhaustive import run_exhaustive, subset_sums


def test_subset_sums_indexed_by_mask() -> None:
    sums = subset_sums(np.array([1, 2, 4], dtype=np.int64))

    assert sums.tolist() == [0, 1, 2, 3, 4, 5, 6, 7]


def test_subset_sums_empty() -> None:
    assert subset_sums(np.array([], dtype=np.int64)).tolist() == [0]


def test_sample(sample_state) -> None:
    outcome = run_exhaustive(sample_state)

    assert outcome.feasible
    assert outcome.weight_scaled == 6000
    assert outcome.value == 16
    assert outcome.selected == (1, 3, 4)


def test_equal_weight_prefers_more_value(state_factory) -> None:
    outcome = run_exhaustive(state_factory([(1, 5), (1, 6)], 5, 10))

    assert outcome.selected == (1,)
    assert outcome.value == 6


def test_full_tie_keeps_lowest_mask(state_factory) -> None:
    outcome = run_exhaustive(state_factory([(1, 5), (1, 5)], 5, 10))

    assert outcome.selected == (0,)


def test_infeasible(state_factory) -> None:
    outcome = run_exhaustive(state_factory([(5, 3), (3, 5)], 100, 10))

    assert not outcome.feasible
    assert outcome.selected == ()


def test_items_beyond_low_block(state_factory) -> None:
    pairs = [(1, 0)] * 17 + [(2, 5)]

    outcome = run_exhaustive(state_factory(pairs, 5, 10))

    assert outcome.selected == (17,)
    assert outcome.weight_scaled == 2000


def test_selection_spanning_both_blocks(state_factory) -> None:
    pairs = [(1, 3)] + [(1, 1)] * 16 + [(1, 3)]

    outcome = run_exhaustive(state_factory(pairs, 6, 10))

    assert outcome.selected == (0, 17)
    assert outcome.weight_scaled == 2000
    assert outcome.value == 6
