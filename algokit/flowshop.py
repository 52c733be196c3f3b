"""Two-machine flow-shop scheduling by Johnson's rule."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = ["flowshop"]


def flowshop(a: Sequence[int], b: Sequence[int]) -> tuple[int, list[int]]:
    """Schedule jobs on two machines to minimise the finishing time.

    Job ``i`` runs ``a[i]`` on the first machine, then ``b[i]`` on the second.
    Returns ``(makespan, order)`` where ``order`` lists job indices.
    """
    if len(a) != len(b):
        raise ValueError("a and b differ in length")
    if any(t < 0 for t in (*a, *b)):
        raise ValueError("times cannot be negative")

    by_key = sorted(range(len(a)), key=lambda i: min(a[i], b[i]))
    front = [i for i in by_key if a[i] <= b[i]]
    back = [i for i in by_key if a[i] > b[i]]
    order = front + back[::-1]

    first = second = 0
    for job in order:
        first += a[job]
        second = max(first, second) + b[job]
    return second, order