"""Greedy placement of signal boosters on a weighted tree.

Signal loss is measured along edges towards the leaves; a node is marked
whenever the loss below it would exceed the tolerance ``d``. Node 0 is the
root.
"""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Iterable, Sequence
from pathlib import Path

__all__ = ["DTree", "read_tree", "main"]


class DTree:
    """A tree of ``n`` nodes where ``children[i]`` lists ``(child, weight)`` pairs."""

    def __init__(self, n: int, d: int, children: Sequence[Iterable[tuple[int, int]]]) -> None:
        if n < 1:
            raise ValueError("a tree needs at least one node")
        kids = [list(c) for c in children]
        if len(kids) != n:
            raise ValueError("children must be given for every node")
        parent: list = [None] * n
        length = [0] * n
        for node, pairs in enumerate(kids):
            for child, weight in pairs:
                if not 0 < child < n:
                    raise ValueError(f"invalid child id {child}")
                if parent[child] is not None:
                    raise ValueError(f"node {child} has two parents")
                parent[child] = node
                length[child] = weight
        orphans = [i for i in range(1, n) if parent[i] is None]
        if orphans:
            raise ValueError(f"nodes without a parent: {orphans}")
        self.n = n
        self.d = d
        self.children = kids
        self._parent = parent
        self._length = length

    def cut_count(self) -> int:
        """Return the number of nodes the greedy pass marks."""
        parent, length, d = self._parent, self._length, self.d
        max_len = [0] * self.n
        pending = [len(c) for c in self.children]
        is_cut = [False] * self.n
        queue = deque(i for i in reversed(range(self.n)) if pending[i] == 0)
        cuts = 0
        while queue:
            node = queue.popleft()
            par = parent[node]
            if par is None:
                continue
            reach = max_len[node] + length[node]
            if not is_cut[par] and reach > d:
                is_cut[par] = True
                cuts += 1
                par = parent[par]
                if par is None:
                    continue
            elif not is_cut[node] and max_len[par] < reach:
                max_len[par] = reach
            pending[par] -= 1
            if pending[par] == 0:
                queue.append(par)
        return cuts


def read_tree(text: str) -> DTree:
    """Parse ``n d`` followed, for each node, by ``k`` and ``k`` pairs ``id weight``."""
    tokens = iter(text.split())
    try:
        n, d = int(next(tokens)), int(next(tokens))
        children = []
        for _ in range(max(n, 0)):
            k = int(next(tokens))
            children.append([(int(next(tokens)), int(next(tokens))) for _ in range(k)])
    except StopIteration:
        raise ValueError("unexpected end of input") from None
    return DTree(n, d, children)


def main(argv: Sequence[str] | None = None) -> int:
    """Read a tree from the file named in ``argv`` (or standard input) and print the count."""
    args = sys.argv[1:] if argv is None else list(argv)
    text = Path(args[0]).read_text() if args else sys.stdin.read()
    try:
        tree = read_tree(text)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    print(tree.cut_count())
    return 0