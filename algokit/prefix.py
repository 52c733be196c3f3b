"""Evaluation of integer expressions in prefix (Polish) notation."""

from __future__ import annotations

import operator
import string

__all__ = ["evaluate_prefix"]


def _truncating_div(a: int, b: int) -> int:
    if b == 0:
        raise ZeroDivisionError("division by zero")
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


_OPERATORS = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _truncating_div,
}


def evaluate_prefix(expr: str) -> int:
    """Evaluate ``expr`` such as ``"* + 1 2 3"``.

    Operands are non-negative integers; ``/`` truncates towards zero.
    """
    pos = 0

    def skip_space() -> None:
        nonlocal pos
        while pos < len(expr) and expr[pos].isspace():
            pos += 1

    def parse() -> int:
        nonlocal pos
        skip_space()
        if pos == len(expr):
            raise ValueError("unexpected end of expression")
        ch = expr[pos]
        if ch in _OPERATORS:
            pos += 1
            left = parse()
            right = parse()
            return _OPERATORS[ch](left, right)
        start = pos
        while pos < len(expr) and expr[pos] in string.digits:
            pos += 1
        if start == pos:
            raise ValueError(f"unexpected character {ch!r} at position {pos}")
        return int(expr[start:pos])

    result = parse()
    skip_space()
    if pos != len(expr):
        raise ValueError(f"unexpected trailing input at position {pos}")
    return result