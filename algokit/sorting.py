"""Comparison sorts and the partition schemes they are built on.

Functions taking ``lo`` and ``hi`` work on the inclusive range
``items[lo..hi]`` and modify the list in place.
"""

from __future__ import annotations

import random
from collections.abc import Iterable, MutableSequence
from typing import Optional

__all__ = [
    "random_int_list",
    "bubble_sort",
    "insertion_sort",
    "MaxHeap",
    "heap_sort",
    "merge",
    "merge_sort",
    "hoare_partition",
    "lomuto_partition",
    "randomized_partition",
    "median_of_three_partition",
    "quicksort",
    "hybrid_sort",
]

_INSERTION_CUTOFF = 16


def _bounds(items: MutableSequence, lo: int, hi: Optional[int]) -> tuple[int, int]:
    return lo, len(items) - 1 if hi is None else hi


def random_int_list(size: int, lower: int, upper: int) -> list[int]:
    """Return ``size`` random integers drawn uniformly from ``[lower, upper]``."""
    if size < 0:
        raise ValueError("size cannot be negative")
    if lower > upper:
        raise ValueError("lower bound exceeds upper bound")
    rng = random.SystemRandom()
    return [rng.randint(lower, upper) for _ in range(size)]


def bubble_sort(items: MutableSequence) -> None:
    """Sort ``items`` in place by repeatedly bubbling the largest item up."""
    for end in range(len(items) - 1, 0, -1):
        for j in range(1, end + 1):
            if items[j - 1] > items[j]:
                items[j - 1], items[j] = items[j], items[j - 1]


def insertion_sort(items: MutableSequence, lo: int = 0, hi: Optional[int] = None) -> None:
    """Sort ``items[lo..hi]`` in place by insertion."""
    lo, hi = _bounds(items, lo, hi)
    for i in range(lo + 1, hi + 1):
        key = items[i]
        j = i - 1
        while j >= lo and items[j] > key:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key


class MaxHeap:
    """A binary max-heap stored 1-based, able to heap-sort its contents."""

    def __init__(self, items: Iterable) -> None:
        self._heap = [None, *items]

    def __len__(self) -> int:
        return len(self._heap) - 1

    def _sift_down(self, i: int, n: int) -> None:
        heap = self._heap
        while True:
            largest = i
            left, right = 2 * i, 2 * i + 1
            if left <= n and heap[left] > heap[largest]:
                largest = left
            if right <= n and heap[right] > heap[largest]:
                largest = right
            if largest == i:
                return
            heap[i], heap[largest] = heap[largest], heap[i]
            i = largest

    def _build(self) -> None:
        n = len(self)
        for i in range(n // 2, 0, -1):
            self._sift_down(i, n)

    def sort(self) -> None:
        """Rearrange the stored items into ascending order."""
        self._build()
        heap = self._heap
        n = len(self)
        for i in range(n, 1, -1):
            heap[1], heap[i] = heap[i], heap[1]
            self._sift_down(1, i - 1)

    def items(self) -> list:
        """Return the stored items in their current order."""
        return self._heap[1:]


def heap_sort(items: Iterable) -> list:
    """Return a new ascending list of ``items`` using a max-heap."""
    heap = MaxHeap(items)
    heap.sort()
    return heap.items()


def merge(items: MutableSequence, lo: int, mid: int, hi: int) -> None:
    """Merge the sorted runs ``items[lo..mid]`` and ``items[mid+1..hi]``."""
    left = items[lo:mid + 1]
    right = items[mid + 1:hi + 1]
    i = j = 0
    k = lo
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            items[k] = left[i]
            i += 1
        else:
            items[k] = right[j]
            j += 1
        k += 1
    for value in left[i:] + right[j:]:
        items[k] = value
        k += 1


def _merge_sort(items: MutableSequence, lo: int, hi: int) -> None:
    if lo >= hi:
        return
    mid = lo + (hi - lo) // 2
    _merge_sort(items, lo, mid)
    _merge_sort(items, mid + 1, hi)
    merge(items, lo, mid, hi)


def merge_sort(items: MutableSequence) -> None:
    """Sort ``items`` in place with top-down merge sort."""
    _merge_sort(items, 0, len(items) - 1)


def hoare_partition(items: MutableSequence, lo: int, hi: int) -> int:
    """Partition ``items[lo..hi]`` around the pivot ``items[hi]``.

    Returns the final index of the pivot: everything before it is no
    greater and everything after it is no smaller.
    """
    pivot = items[hi]
    i, j = lo - 1, hi
    while True:
        i += 1
        while items[i] < pivot:
            i += 1
        while True:
            j -= 1
            if not items[j] > pivot or j == lo:
                break
        if i >= j:
            break
        items[i], items[j] = items[j], items[i]
    if j == lo or i > j:
        items[i], items[hi] = items[hi], items[i]
    return i


def lomuto_partition(items: MutableSequence, lo: int, hi: int) -> int:
    """Partition ``items[lo..hi]`` around ``items[hi]`` with Lomuto's scheme."""
    pivot = items[hi]
    i = lo - 1
    for j in range(lo, hi):
        if items[j] <= pivot:
            i += 1
            items[i], items[j] = items[j], items[i]
    items[i + 1], items[hi] = items[hi], items[i + 1]
    return i + 1


def randomized_partition(items: MutableSequence, lo: int, hi: int) -> int:
    """Partition ``items[lo..hi]`` around a uniformly chosen pivot."""
    i = random.randint(lo, hi)
    items[i], items[hi] = items[hi], items[i]
    return hoare_partition(items, lo, hi)


def median_of_three_partition(items: MutableSequence, lo: int, hi: int) -> int:
    """Partition ``items[lo..hi]`` around the median of its ends and middle."""
    mid = lo + ((hi - lo) >> 1)
    if items[lo] > items[mid]:
        items[lo], items[mid] = items[mid], items[lo]
    if items[lo] > items[hi]:
        items[lo], items[hi] = items[hi], items[lo]
    if items[mid] > items[hi]:
        items[mid], items[hi] = items[hi], items[mid]
    items[mid], items[hi] = items[hi], items[mid]
    return hoare_partition(items, lo, hi)


def quicksort(items: MutableSequence, lo: int = 0, hi: Optional[int] = None) -> None:
    """Sort ``items[lo..hi]`` in place with quicksort."""
    lo, hi = _bounds(items, lo, hi)
    if lo >= hi:
        return
    q = hoare_partition(items, lo, hi)
    quicksort(items, lo, q - 1)
    quicksort(items, q + 1, hi)


def hybrid_sort(items: MutableSequence, lo: int = 0, hi: Optional[int] = None) -> None:
    """Quicksort with median-of-three pivots and insertion sort on short ranges."""
    lo, hi = _bounds(items, lo, hi)
    if hi - lo <= _INSERTION_CUTOFF:
        insertion_sort(items, lo, hi)
        return
    q = median_of_three_partition(items, lo, hi)
    hybrid_sort(items, lo, q - 1)
    hybrid_sort(items, q + 1, hi)