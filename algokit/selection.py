"""Order statistics: selecting the k-th smallest item, min/max and weighted medians.

Selection functions work on the inclusive range ``items[lo..hi]``, take a
1-based ``rank`` and may reorder the list in place.
"""

from __future__ import annotations

import random
from collections.abc import MutableSequence, Sequence

__all__ = [
    "randomized_select",
    "select",
    "partition_around",
    "min_max",
    "weighted_median",
]

_GROUP = 5


def _check_rank(lo: int, hi: int, rank: int) -> None:
    if not 1 <= rank <= hi - lo + 1:
        raise IndexError("order statistic out of range")


def _partition_first(items: MutableSequence, lo: int, hi: int) -> int:
    """Hoare partition around ``items[lo]``; returns the pivot's final index."""
    pivot = items[lo]
    i, j = lo, hi + 1
    while True:
        while True:
            i += 1
            if not (items[i] < pivot and i != hi):
                break
        while True:
            j -= 1
            if not items[j] > pivot:
                break
        if i >= j:
            break
        items[i], items[j] = items[j], items[i]
    items[j], items[lo] = items[lo], items[j]
    return j


def _randomized_partition(items: MutableSequence, lo: int, hi: int) -> int:
    i = random.randint(lo, hi)
    items[i], items[lo] = items[lo], items[i]
    return _partition_first(items, lo, hi)


def randomized_select(items: MutableSequence, lo: int, hi: int, rank: int):
    """Return the ``rank``-th smallest item of ``items[lo..hi]`` (expected linear time)."""
    _check_rank(lo, hi, rank)
    while lo != hi:
        q = _randomized_partition(items, lo, hi)
        k = q - lo + 1
        if rank == k:
            return items[q]
        if rank < k:
            hi = q - 1
        else:
            lo = q + 1
            rank -= k
    return items[lo]


def partition_around(items: MutableSequence, lo: int, hi: int, pivot) -> int:
    """Partition ``items[lo..hi]`` around the value ``pivot``, which must be present."""
    try:
        index = next(i for i in range(lo, hi + 1) if items[i] == pivot)
    except StopIteration:
        raise ValueError("pivot not found") from None
    items[lo], items[index] = items[index], items[lo]
    if lo == hi:
        return lo
    return _partition_first(items, lo, hi)


def select(items: MutableSequence, lo: int, hi: int, rank: int):
    """Return the ``rank``-th smallest item of ``items[lo..hi]`` in worst-case linear time."""
    _check_rank(lo, hi, rank)
    if hi - lo < _GROUP:
        items[lo:hi + 1] = sorted(items[lo:hi + 1])
        return items[lo + rank - 1]

    groups = (hi - lo + _GROUP) // _GROUP
    for g in range(groups):
        left = lo + _GROUP * g
        right = min(left + _GROUP - 1, hi)
        items[left:right + 1] = sorted(items[left:right + 1])
        median = left + (right - left) // 2
        items[lo + g], items[median] = items[median], items[lo + g]

    pivot = select(items, lo, lo + groups - 1, (groups + 1) // 2)
    q = partition_around(items, lo, hi, pivot)
    k = q - lo + 1
    if rank == k:
        return items[q]
    if rank < k:
        return select(items, lo, q - 1, rank)
    return select(items, q + 1, hi, rank - k)


def min_max(items: Sequence) -> tuple:
    """Return ``(smallest, largest)`` using about 3n/2 comparisons."""
    if not items:
        raise ValueError("items cannot be empty")
    if len(items) % 2:
        low = high = items[0]
        start = 1
    else:
        a, b = items[0], items[1]
        low, high = (a, b) if a < b else (b, a)
        start = 2
    for a, b in zip(items[start::2], items[start + 1::2]):
        small, large = (a, b) if a < b else (b, a)
        if small < low:
            low = small
        if large > high:
            high = large
    return low, high


def weighted_median(values: Sequence, weights: Sequence):
    """Return the weighted median of ``values``.

    The weights are expected to sum to 1; the result ``m`` has total weight
    at most 0.5 on each side (strictly smaller and strictly larger values).
    """
    if len(values) != len(weights):
        raise ValueError("values and weights differ in length")
    if not values:
        raise ValueError("values cannot be empty")

    pairs = list(zip(values, weights))
    left_weight = 0
    right_weight = 0
    while True:
        if len(pairs) == 1:
            return pairs[0][0]
        keys = [v for v, _ in pairs]
        pivot = select(keys, 0, len(keys) - 1, (len(keys) + 1) // 2)
        lower = [(v, w) for v, w in pairs if v < pivot]
        upper = [(v, w) for v, w in pairs if v > pivot]
        pivot_weight = sum(w for v, w in pairs if v == pivot)
        wl = left_weight + sum(w for _, w in lower)
        wr = right_weight + sum(w for _, w in upper)
        if wl <= 0.5 and wr <= 0.5:
            return pivot
        if wl < 0.5:
            left_weight = wl + pivot_weight
            pairs = upper
        else:
            right_weight = wr + pivot_weight
            pairs = lower
        if not pairs:
            return pivot