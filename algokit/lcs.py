"""Longest common subsequence of two sequences."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = ["lcs_length", "lcs_sequence"]

_DIAGONAL, _UP, _LEFT = 1, 2, 3


def _tables(x: Sequence, y: Sequence) -> tuple[list[list[int]], list[list[int]]]:
    m, n = len(x), len(y)
    c = [[0] * (n + 1) for _ in range(m + 1)]
    b = [[0] * (n + 1) for _ in range(m + 1)]
    for i in range(1, m + 1):
        for j in range(1, n + 1):
            if x[i - 1] == y[j - 1]:
                c[i][j] = c[i - 1][j - 1] + 1
                b[i][j] = _DIAGONAL
            elif c[i - 1][j] >= c[i][j - 1]:
                c[i][j] = c[i - 1][j]
                b[i][j] = _UP
            else:
                c[i][j] = c[i][j - 1]
                b[i][j] = _LEFT
    return c, b


def lcs_length(x: Sequence, y: Sequence) -> int:
    """Return the length of a longest common subsequence of ``x`` and ``y``."""
    c, _ = _tables(x, y)
    return c[len(x)][len(y)]


def lcs_sequence(x: Sequence, y: Sequence):
    """Return one longest common subsequence; a string when ``x`` is a string, else a list."""
    _, b = _tables(x, y)
    i, j = len(x), len(y)
    picked = []
    while i and j:
        step = b[i][j]
        if step == _DIAGONAL:
            picked.append(x[i - 1])
            i -= 1
            j -= 1
        elif step == _UP:
            i -= 1
        else:
            j -= 1
    picked.reverse()
    return "".join(picked) if isinstance(x, str) else picked