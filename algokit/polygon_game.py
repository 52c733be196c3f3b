"""The polygon game: maximise the value left after merging a polygon.

A polygon has ``n`` vertices holding integers and ``n`` edges labelled
``'+'`` or ``'*'``. One edge is removed first; then two adjacent vertices
are repeatedly merged through the edge between them.
"""

from __future__ import annotations

from collections.abc import Sequence

__all__ = ["PolygonGame"]

_OPERATORS = frozenset("+*")


def _combine(op: str, left: tuple[int, int], right: tuple[int, int]) -> tuple[int, int]:
    a, b = left
    c, d = right
    if op == "+":
        return a + c, b + d
    products = (a * c, a * d, b * c, b * d)
    return min(products), max(products)


class PolygonGame:
    """A polygon with ``values[i]`` at vertex ``i`` and ``ops[i]`` on the edge
    joining vertex ``i - 1`` and vertex ``i`` (``ops[0]`` joins the last and
    the first vertex)."""

    def __init__(self, values: Sequence[int], ops: Sequence[str]) -> None:
        values, ops = list(values), list(ops)
        if not values:
            raise ValueError("a polygon needs at least one vertex")
        if len(values) != len(ops):
            raise ValueError("values and ops differ in length")
        if any(op not in _OPERATORS for op in ops):
            raise ValueError("operators must be '+' or '*'")
        self.values = values
        self.ops = ops

    def max_value(self) -> int:
        """Return the largest value reachable by any play."""
        n = len(self.values)
        # span[i][j]: (min, max) of the chain of j vertices starting at vertex i
        span: list[dict[int, tuple[int, int]]] = [{1: (v, v)} for v in self.values]
        for j in range(2, n + 1):
            for i in range(n):
                options = [
                    _combine(self.ops[(i + s) % n], span[i][s], span[(i + s) % n][j - s])
                    for s in range(1, j)
                ]
                span[i][j] = (min(lo for lo, _ in options), max(hi for _, hi in options))
        return max(chains[n][1] for chains in span)