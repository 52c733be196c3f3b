"""Towers of Hanoi solved three ways.

Every solver moves ``n`` disks from peg ``A`` to peg ``C`` and returns the
moves in order. Disks are numbered from 1 (the smallest).
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["Move", "hanoi_recursive", "hanoi_iterative", "hanoi_parity"]

_PEGS = "ABC"


@dataclass(frozen=True)
class Move:
    """Moving ``disk`` from peg ``source`` to peg ``target``."""

    disk: int
    source: str
    target: str

    def __str__(self) -> str:
        return f"Move disk {self.disk} from {self.source} to {self.target}"


def _check(n: int) -> None:
    if n < 0:
        raise ValueError("number of disks cannot be negative")


def hanoi_recursive(n: int) -> list[Move]:
    """Solve by the classic recursion: park ``n - 1`` disks, move one, bring them back."""
    _check(n)
    moves: list[Move] = []

    def solve(k: int, source: str, target: str, spare: str) -> None:
        if k <= 0:
            return
        solve(k - 1, source, spare, target)
        moves.append(Move(k, source, target))
        solve(k - 1, spare, target, source)

    solve(n, "A", "C", "B")
    return moves


def hanoi_iterative(n: int) -> list[Move]:
    """Solve without recursion.

    Odd-numbered moves carry the smallest disk one peg along a fixed cycle
    (A, C, B for odd ``n``; A, B, C for even ``n``); even-numbered moves
    make the only legal move between the other two pegs.
    """
    _check(n)
    pegs: list[list[int]] = [list(range(n, 0, -1)), [], []]
    moves: list[Move] = []

    def shift(src: int, dst: int) -> None:
        disk = pegs[src].pop()
        pegs[dst].append(disk)
        moves.append(Move(disk, _PEGS[src], _PEGS[dst]))

    step = 2 if n % 2 else 1
    smallest = 0
    for k in range(1, 2 ** n):
        if k % 2:
            nxt = (smallest + step) % 3
            shift(smallest, nxt)
            smallest = nxt
            continue
        p1, p2 = (p for p in range(3) if p != smallest)
        if not pegs[p1]:
            shift(p2, p1)
        elif not pegs[p2]:
            shift(p1, p2)
        elif pegs[p1][-1] < pegs[p2][-1]:
            shift(p1, p2)
        else:
            shift(p2, p1)
    return moves


def hanoi_parity(n: int) -> list[Move]:
    """Solve by the parity rule.

    Each peg rests on a sentinel (``n + 1``, ``n + 2``, ``n + 3``). A disk
    may only go onto a larger one of opposite parity, and the disk that just
    moved never moves again straight away; this leaves one move each time.
    """
    _check(n)
    pegs: list[list[int]] = [[n + 1, *range(n, 0, -1)], [n + 2], [n + 3]]
    moves: list[Move] = []
    last_target = None
    for _ in range(2 ** n - 1):
        src, dst = next(
            (s, d)
            for s in range(3)
            for d in range(3)
            if s != d
            and s != last_target
            and pegs[s][-1] <= n
            and pegs[s][-1] < pegs[d][-1]
            and (pegs[d][-1] - pegs[s][-1]) % 2
        )
        disk = pegs[src].pop()
        pegs[dst].append(disk)
        moves.append(Move(disk, _PEGS[src], _PEGS[dst]))
        last_target = dst
    return moves