"""Single-source shortest paths with Dijkstra's algorithm."""

from __future__ import annotations

import heapq
import math
from collections.abc import Sequence

__all__ = ["dijkstra"]


def dijkstra(graph: Sequence[Sequence[float]], source: int) -> tuple[list[float], list]:
    """Shortest distances from ``source`` in an adjacency matrix.

    ``graph[u][v]`` is the weight of edge ``u -> v`` or ``math.inf`` when
    there is none. Returns ``(dist, prev)``: unreachable nodes have distance
    ``math.inf``, and ``prev[v]`` is the node before ``v`` on a shortest path
    (``None`` for the source and unreachable nodes).
    """
    n = len(graph)
    if any(len(row) != n for row in graph):
        raise ValueError("graph must be a square matrix")
    if not 0 <= source < n:
        raise IndexError("source out of range")
    if any(w < 0 for row in graph for w in row):
        raise ValueError("edge weights cannot be negative")

    dist = [math.inf] * n
    prev: list = [None] * n
    dist[source] = 0
    heap = [(0, source)]
    while heap:
        d, u = heapq.heappop(heap)
        if d > dist[u]:
            continue
        for v, weight in enumerate(graph[u]):
            if weight < math.inf and d + weight < dist[v]:
                dist[v] = d + weight
                prev[v] = u
                heapq.heappush(heap, (dist[v], v))
    return dist, prev