"""Counting and enumerating: integer partitions, permutations and n queens."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from functools import lru_cache

__all__ = ["integer_partition", "permutations", "distinct_permutations", "n_queens"]


def integer_partition(n: int) -> int:
    """Number of ways to write ``n`` as a sum of positive integers; 0 when ``n < 1``."""

    @lru_cache(maxsize=None)
    def count(total: int, largest: int) -> int:
        if total < 1 or largest < 1:
            return 0
        if total == 1 or largest == 1:
            return 1
        if total < largest:
            return count(total, total)
        if total == largest:
            return 1 + count(total, largest - 1)
        return count(total, largest - 1) + count(total - largest, largest)

    return count(n, n)


def permutations(items: Iterable) -> Iterator[tuple]:
    """Yield every ordering of ``items`` by swapping each element to the front in turn."""
    pool = list(items)

    def perm(begin: int) -> Iterator[tuple]:
        if begin >= len(pool) - 1:
            yield tuple(pool)
            return
        for i in range(begin, len(pool)):
            pool[begin], pool[i] = pool[i], pool[begin]
            yield from perm(begin + 1)
            pool[begin], pool[i] = pool[i], pool[begin]

    yield from perm(0)


def distinct_permutations(text: str) -> Iterator[str]:
    """Yield each distinct rearrangement of ``text`` exactly once."""
    chars = list(text)

    def perm(k: int) -> Iterator[str]:
        if k >= len(chars) - 1:
            yield "".join(chars)
            return
        tried = set()
        for i in range(k, len(chars)):
            if chars[i] in tried:
                continue
            tried.add(chars[i])
            chars[k], chars[i] = chars[i], chars[k]
            yield from perm(k + 1)
            chars[k], chars[i] = chars[i], chars[k]

    yield from perm(0)


def n_queens(n: int) -> int:
    """Number of ways to place ``n`` non-attacking queens on an ``n x n`` board."""
    if n < 0:
        raise ValueError("board size cannot be negative")
    cols: set[int] = set()
    diagonals: set[int] = set()
    anti_diagonals: set[int] = set()

    def place(row: int) -> int:
        if row == n:
            return 1
        total = 0
        for col in range(n):
            if col in cols or row - col in diagonals or row + col in anti_diagonals:
                continue
            cols.add(col)
            diagonals.add(row - col)
            anti_diagonals.add(row + col)
            total += place(row + 1)
            cols.remove(col)
            diagonals.remove(row - col)
            anti_diagonals.remove(row + col)
        return total

    return place(0)