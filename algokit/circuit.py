"""Maximum non-crossing subset of nets in a channel-routing circuit.

Net ``i`` joins pin ``i`` on the top edge to pin ``perm[i-1]`` on the bottom
edge. Nets ``i < j`` cross exactly when ``perm[i-1] > perm[j-1]``. Nets are
numbered from 1.
"""

from __future__ import annotations

from collections.abc import Sequence

__all__ = ["mnset", "mnset_traceback", "max_noncrossing_set"]


def _one_based(perm: Sequence[int]) -> list[int]:
    if sorted(perm) != list(range(1, len(perm) + 1)):
        raise ValueError("perm must be a permutation of 1..n")
    return [0, *perm]


def mnset(perm: Sequence[int]) -> list[list[int]]:
    """Build the table ``size`` of the dynamic program.

    ``size[i][j]`` is the largest number of mutually non-crossing nets among
    nets ``1..i`` whose bottom pins are at most ``j``. The table has
    ``n + 1`` rows and columns; row 0 is all zeros.
    """
    c = _one_based(perm)
    n = len(perm)
    size = [[0] * (n + 1) for _ in range(n + 1)]
    if n == 0:
        return size
    for j in range(c[1], n + 1):
        size[1][j] = 1
    for i in range(2, n + 1):
        prev, row = size[i - 1], size[i]
        with_net = prev[c[i] - 1] + 1
        for j in range(n + 1):
            row[j] = prev[j] if j < c[i] else max(prev[j], with_net)
    return size


def mnset_traceback(perm: Sequence[int], size: Sequence[Sequence[int]]) -> list[int]:
    """Recover the nets of a maximum non-crossing subset, highest net first."""
    c = _one_based(perm)
    n = len(perm)
    if len(size) != n + 1 or any(len(row) != n + 1 for row in size):
        raise ValueError("table does not match the permutation")
    if n == 0:
        return []
    nets = []
    j = n
    for i in range(n, 1, -1):
        if size[i][j] != size[i - 1][j]:
            nets.append(i)
            j = c[i] - 1
    if j >= c[1]:
        nets.append(1)
    return nets


def max_noncrossing_set(perm: Sequence[int]) -> list[int]:
    """Return the nets of a maximum non-crossing subset in ascending order."""
    return sorted(mnset_traceback(perm, mnset(perm)))