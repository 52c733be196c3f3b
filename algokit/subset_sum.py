"""Subset sum decided four ways: backtracking, memoized recursion, a full
dynamic-programming table and a two-row table.

All items and the target must be non-negative integers.
"""

from __future__ import annotations

from collections.abc import Sequence
from functools import lru_cache

__all__ = [
    "subset_sum_backtrack",
    "subset_sum_memo",
    "subset_sum_dp",
    "subset_sum_dp_optimized",
]


def _check(items: Sequence[int], target: int) -> list[int]:
    if target < 0:
        raise ValueError("target cannot be negative")
    if any(x < 0 for x in items):
        raise ValueError("items cannot be negative")
    return list(items)


def subset_sum_backtrack(items: Sequence[int], target: int) -> bool:
    """Return whether some subset of ``items`` sums to ``target``, by backtracking."""
    items = _check(items, target)
    if target == 0:
        return True

    def search(t: int, total: int) -> bool:
        if t == len(items):
            return False
        for take in (False, True):
            new_total = total + items[t] if take else total
            if new_total == target:
                return True
            if new_total < target and search(t + 1, new_total):
                return True
        return False

    return search(0, 0)


def subset_sum_memo(items: Sequence[int], target: int) -> bool:
    """Return whether some subset of ``items`` sums to ``target``, by memoized recursion."""
    items = _check(items, target)

    @lru_cache(maxsize=None)
    def rec(i: int, s: int) -> bool:
        if s == 0:
            return True
        if i < 0:
            return False
        if i == 0:
            return items[0] == s
        if items[i] > s:
            return rec(i - 1, s)
        return rec(i - 1, s - items[i]) or rec(i - 1, s)

    return rec(len(items) - 1, target)


def subset_sum_dp(items: Sequence[int], target: int) -> bool:
    """Return whether some subset of ``items`` sums to ``target``, using an (n+1) x (target+1) table."""
    items = _check(items, target)
    n = len(items)
    dp = [[s == 0 for s in range(target + 1)] for _ in range(n + 1)]
    for i in range(1, n + 1):
        item = items[i - 1]
        for s in range(1, target + 1):
            dp[i][s] = dp[i - 1][s] or (item <= s and dp[i - 1][s - item])
    return dp[n][target]


def subset_sum_dp_optimized(items: Sequence[int], target: int) -> bool:
    """Same as ``subset_sum_dp`` but keeping only two rows of the table."""
    items = _check(items, target)
    prev = [s == 0 for s in range(target + 1)]
    for item in items:
        curr = [True] + [
            prev[s] or (item <= s and prev[s - item]) for s in range(1, target + 1)
        ]
        prev = curr
    return prev[target]