"""Points in the plane."""

from __future__ import annotations

import math
from dataclasses import dataclass

__all__ = ["Point", "distance"]


@dataclass(frozen=True)
class Point:
    """A point with coordinates ``x`` and ``y``."""

    x: float
    y: float


def distance(p: Point, q: Point) -> float:
    """Euclidean distance between ``p`` and ``q``."""
    return math.hypot(p.x - q.x, p.y - q.y)