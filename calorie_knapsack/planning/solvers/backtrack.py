# -*- coding: utf-8 -*-
"""
Backward walk over per-item improvement records.

Both DP solvers record, for each item i, the table positions that item i
improved while it was being processed. Records are packed bit rows (one bit
per table position, ``np.packbits`` order), so the record matrix costs
items x dimension / 8 bytes.

Walking the items from last to first and stepping back by the item's size
whenever the current position is marked for it recovers a subset that
realizes the final table entry exactly, with each item used at most once.
"""

from __future__ import annotations
from typing import List, Sequence

import numpy as np


def new_marks(n_items: int, dimension: int) -> np.ndarray:
    """Zeroed record matrix for table positions ``0 .. dimension``."""
    return np.zeros((n_items, (dimension + 8) // 8), dtype=np.uint8)


def record_hits(marks: np.ndarray, item: int, offset: int, hit: np.ndarray, scratch: np.ndarray) -> None:
    """
    Mark positions ``offset + k`` where ``hit[k]`` is True for ``item``.

    ``scratch`` is a reusable bool buffer of length dimension + 1.
    """
    scratch[:offset] = False
    scratch[offset:] = hit
    marks[item] = np.packbits(scratch)


def is_marked(marks: np.ndarray, item: int, pos: int) -> bool:
    return bool((int(marks[item, pos >> 3]) >> (7 - (pos & 7))) & 1)


def backtrack(
    marks: np.ndarray,
    steps: Sequence[int],
    start: int,
) -> List[int]:
    """
    Recover item indices (ascending) that lead from position 0 to ``start``.

    Parameters
    ----------
    marks : np.ndarray
        ``(items, ceil((dimension + 1) / 8))`` uint8 matrix from ``new_marks``.
    steps : sequence of int
        Axis size of each item (scaled weight or value).
    start : int
        Final table position to explain.
    """
    selected: List[int] = []
    pos = start
    for i in range(marks.shape[0] - 1, -1, -1):
        if pos == 0:
            break
        if is_marked(marks, i, pos):
            selected.append(i)
            pos -= steps[i]

    if pos != 0:
        raise RuntimeError(f"DP backtrack stopped at position {pos}, expected 0.")
    selected.reverse()
    return selected
