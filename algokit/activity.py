"""Activity selection: the largest set of mutually compatible activities.

Activity ``i`` occupies ``[starts[i], finishes[i])``. The selectors expect
the activities sorted by finish time and return the chosen indices.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

__all__ = [
    "sort_by_finish",
    "greedy_activity_selector",
    "recursive_activity_selector",
]


def _check_lengths(starts: Sequence, finishes: Sequence) -> None:
    if len(starts) != len(finishes):
        raise ValueError("starts and finishes differ in length")


def _check_sorted(starts: Sequence, finishes: Sequence) -> None:
    _check_lengths(starts, finishes)
    if any(a > b for a, b in zip(finishes, finishes[1:])):
        raise ValueError("finish times must be sorted")


def sort_by_finish(starts: Sequence, finishes: Sequence) -> tuple[list, list]:
    """Return the activities reordered by finish time (stable for ties)."""
    _check_lengths(starts, finishes)
    order = sorted(range(len(finishes)), key=finishes.__getitem__)
    return [starts[i] for i in order], [finishes[i] for i in order]


def greedy_activity_selector(starts: Sequence, finishes: Sequence) -> list[int]:
    """Pick activities greedily, always taking the next one to finish."""
    _check_sorted(starts, finishes)
    if not starts:
        return []
    chosen = [0]
    last_finish = finishes[0]
    for m, (start, finish) in enumerate(zip(starts[1:], finishes[1:]), start=1):
        if start >= last_finish:
            chosen.append(m)
            last_finish = finish
    return chosen


def recursive_activity_selector(starts: Sequence, finishes: Sequence) -> list[int]:
    """Same selection as ``greedy_activity_selector``, written recursively."""
    _check_sorted(starts, finishes)
    n = len(starts)

    def pick(m: int, last_finish) -> list[int]:
        while m < n and starts[m] < last_finish:
            m += 1
        if m == n:
            return []
        return [m, *pick(m + 1, finishes[m])]

    return pick(0, -math.inf)