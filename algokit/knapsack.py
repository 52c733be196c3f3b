"""0/1 knapsack: the tabular solution, the jump-point method and the
fractional upper bound used when branching and bounding.

Items are indexed from 0. ``values[i]`` and ``weights[i]`` describe item ``i``.
"""

from __future__ import annotations

from collections.abc import Sequence

__all__ = [
    "knapsack_table",
    "knapsack_jump",
    "knapsack_traceback",
    "fractional_bound",
]


def _check_items(values: Sequence, weights: Sequence) -> None:
    if len(values) != len(weights):
        raise ValueError("values and weights differ in length")
    if any(w < 0 for w in weights):
        raise ValueError("weights cannot be negative")


def knapsack_table(values: Sequence[int], weights: Sequence[int], capacity: int) -> list[list[int]]:
    """Build the table ``m`` of optimal values.

    ``m[i][j]`` is the best value reachable with items ``i..n-1`` and
    capacity ``j``; row ``n`` is all zeros. ``m[0][capacity]`` is the optimum.
    Runs in O(n * capacity).
    """
    _check_items(values, weights)
    if capacity < 0:
        raise ValueError("capacity cannot be negative")
    n = len(values)
    table = [[0] * (capacity + 1) for _ in range(n + 1)]
    for i in reversed(range(n)):
        weight, value = weights[i], values[i]
        below, row = table[i + 1], table[i]
        for j in range(capacity + 1):
            if j < weight:
                row[j] = below[j]
            else:
                row[j] = max(below[j], below[j - weight] + value)
    return table


def knapsack_traceback(table: Sequence[Sequence[int]], weights: Sequence[int], capacity: int) -> list[bool]:
    """Recover which items an optimal packing takes from a table built by ``knapsack_table``."""
    if len(table) != len(weights) + 1:
        raise ValueError("table does not match the number of items")
    chosen = []
    remaining = capacity
    for i, weight in enumerate(weights):
        if table[i][remaining] == table[i + 1][remaining]:
            chosen.append(False)
        else:
            chosen.append(True)
            remaining -= weight
    return chosen


def knapsack_jump(values: Sequence, weights: Sequence, capacity: float):
    """Return the optimal value using the list of jump points (weight, value).

    Only non-dominated step points of each stage's value function are
    kept, so the work depends on the number of such points rather than on
    the capacity. Weights must be positive.
    """
    _check_items(values, weights)
    if any(w <= 0 for w in weights):
        raise ValueError("weights must be positive")
    if capacity < 0:
        raise ValueError("capacity cannot be negative")

    points: list[tuple] = [(0, 0)]
    for i in reversed(range(len(values))):
        merged: list[tuple] = []
        k = 0
        for weight, value in points:
            y, m = weight + weights[i], value + values[i]
            if y > capacity:
                break
            while k < len(points) and points[k][0] < y:
                merged.append(points[k])
                k += 1
            if k < len(points) and points[k][0] == y:
                m = max(m, points[k][1])
                k += 1
            if m > merged[-1][1]:
                merged.append((y, m))
            while k < len(points) and points[k][1] <= merged[-1][1]:
                k += 1
        merged.extend(points[k:])
        points = merged
    return points[-1][1]


def fractional_bound(
    values: Sequence,
    weights: Sequence,
    capacity: float,
    start: int,
    current_weight: float,
    current_value: float,
):
    """Upper bound on the value reachable from item ``start`` onward.

    Items are assumed sorted by decreasing value per unit weight. Whole
    items are added while they fit, then a fraction of the next one.
    """
    _check_items(values, weights)
    if not 0 <= start <= len(values):
        raise IndexError("start out of range")
    room = capacity - current_weight
    bound = current_value
    i = start
    while i < len(values) and weights[i] <= room:
        room -= weights[i]
        bound += values[i]
        i += 1
    if i < len(values):
        bound += values[i] / weights[i] * room
    return bound