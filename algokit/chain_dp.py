"""Interval dynamic programs: matrix-chain ordering, convex polygon
triangulation, optimal binary search trees and rod cutting with cut costs.

Tables returned here are indexed from 1, as the recurrences are written.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from functools import lru_cache

__all__ = [
    "Matrix",
    "matrix_chain_order",
    "matrix_chain_recursive",
    "matrix_chain_memoized",
    "min_weight_triangulation",
    "optimal_bst",
    "min_cut_cost",
]


class Matrix:
    """A dense integer matrix filled with zeros on creation."""

    def __init__(self, rows: int, cols: int) -> None:
        if rows < 0 or cols < 0:
            raise ValueError("dimensions cannot be negative")
        self.rows = rows
        self.cols = cols
        self._data = [[0] * cols for _ in range(rows)]

    def __getitem__(self, index: int) -> list[int]:
        return self._data[index]

    def __mul__(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.cols != other.rows:
            raise ValueError("matrix dimensions do not agree")
        result = Matrix(self.rows, other.cols)
        columns = list(zip(*other._data)) if other.rows else [()] * other.cols
        for i, row in enumerate(self._data):
            result._data[i] = [sum(a * b for a, b in zip(row, col)) for col in columns]
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return (self.rows, self.cols, self._data) == (other.rows, other.cols, other._data)

    def tolist(self) -> list[list[int]]:
        """Return a copy of the entries as nested lists."""
        return [row[:] for row in self._data]


def _chain_length(dims: Sequence[int]) -> int:
    if len(dims) < 2:
        raise ValueError("a chain needs at least one matrix")
    return len(dims) - 1


def _check_range(n: int, i: int, j: int) -> None:
    if not 1 <= i <= j <= n:
        raise IndexError("matrix range out of bounds")


def matrix_chain_order(dims: Sequence[int]) -> tuple[list[list[int]], list[list[int]]]:
    """Bottom-up matrix-chain ordering.

    Matrix ``A_i`` has shape ``dims[i-1] x dims[i]``. Returns ``(cost, split)``
    where ``cost[i][j]`` is the fewest scalar multiplications for
    ``A_i..A_j`` and ``split[i][j]`` is the ``k`` after which to split.
    """
    n = _chain_length(dims)
    cost = [[0] * (n + 1) for _ in range(n + 1)]
    split = [[0] * (n + 1) for _ in range(n + 1)]
    for d in range(1, n):
        for i in range(1, n - d + 1):
            j = i + d
            best, best_k = None, i
            for k in range(i, j):
                c = cost[i][k] + cost[k + 1][j] + dims[i - 1] * dims[k] * dims[j]
                if best is None or c < best:
                    best, best_k = c, k
            cost[i][j] = best
            split[i][j] = best_k
    return cost, split


def matrix_chain_recursive(dims: Sequence[int], i: int, j: int) -> int:
    """Fewest multiplications for ``A_i..A_j`` by plain recursion (exponential time)."""
    n = _chain_length(dims)
    _check_range(n, i, j)

    def solve(i: int, j: int) -> int:
        if i == j:
            return 0
        return min(
            solve(i, k) + solve(k + 1, j) + dims[i - 1] * dims[k] * dims[j]
            for k in range(i, j)
        )

    return solve(i, j)


def matrix_chain_memoized(dims: Sequence[int], i: int, j: int) -> int:
    """Fewest multiplications for ``A_i..A_j`` by memoized recursion."""
    n = _chain_length(dims)
    _check_range(n, i, j)

    @lru_cache(maxsize=None)
    def lookup(i: int, j: int) -> int:
        if i == j:
            return 0
        return min(
            lookup(i, k) + lookup(k + 1, j) + dims[i - 1] * dims[k] * dims[j]
            for k in range(i, j)
        )

    return lookup(i, j)


def min_weight_triangulation(edges: Sequence[int]) -> int:
    """Minimum total weight of a triangulation of a convex polygon.

    ``edges[v]`` is the weight of vertex ``v``; a triangle ``(i, j, k)``
    weighs ``e_i e_j + e_j e_k + e_i e_k``.
    """
    if len(edges) < 2:
        raise ValueError("a polygon needs at least two vertices")
    n = len(edges) - 1

    def weight(i: int, j: int, k: int) -> int:
        return edges[i] * edges[j] + edges[j] * edges[k] + edges[i] * edges[k]

    t = [[0] * (n + 1) for _ in range(n + 1)]
    for d in range(1, n):
        for i in range(1, n - d + 1):
            j = i + d
            t[i][j] = min(
                t[i][k] + t[k + 1][j] + weight(i - 1, j, k) for k in range(i, j)
            )
    return t[1][n]


def optimal_bst(p: Sequence[float], q: Sequence[float]) -> tuple[float, list[list[int]]]:
    """Build an optimal binary search tree.

    ``p[k-1]`` is the probability of searching key ``k`` (1..n) and
    ``q[k]`` that of falling into gap ``k`` (0..n). Returns the expected
    search cost and ``root``, where ``root[i][j]`` is the best root for keys
    ``i..j``.
    """
    n = len(p)
    if len(q) != n + 1:
        raise ValueError("q must have one more entry than p")
    e = [[0.0] * (n + 1) for _ in range(n + 2)]
    w = [[0.0] * (n + 1) for _ in range(n + 2)]
    root = [[0] * (n + 1) for _ in range(n + 1)]
    for i in range(1, n + 2):
        e[i][i - 1] = w[i][i - 1] = q[i - 1]
    for length in range(1, n + 1):
        for i in range(1, n - length + 2):
            j = i + length - 1
            w[i][j] = w[i][j - 1] + p[i - 1] + q[j]
            e[i][j] = math.inf
            for r in range(i, j + 1):
                c = e[i][r - 1] + e[r + 1][j] + w[i][j]
                if c < e[i][j]:
                    e[i][j] = c
                    root[i][j] = r
    return e[1][n], root


def min_cut_cost(length: int, cuts: Sequence[int]) -> int:
    """Least total cost to cut a rod at all of ``cuts``, each cut costing the
    length of the piece being cut."""
    if any(not 0 < c < length for c in cuts):
        raise ValueError("cuts must lie strictly inside the rod")
    points = [0, *sorted(cuts), length]
    m = len(points)
    dp = [[0] * m for _ in range(m)]
    for span in range(2, m):
        for i in range(m - span):
            j = i + span
            dp[i][j] = min(dp[i][k] + dp[k][j] for k in range(i + 1, j)) + points[j] - points[i]
    return dp[0][m - 1]