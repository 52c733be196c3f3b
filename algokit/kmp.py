"""Substring search with the Knuth-Morris-Pratt prefix function.

Search functions return the index of the first match, 0 for an empty
pattern and -1 when there is none, as ``str.find`` does.
"""

from __future__ import annotations

from collections.abc import Sequence

__all__ = ["prefix_function", "find_concat", "find_kmp"]

_SEPARATOR = object()


def prefix_function(s: Sequence) -> list[int]:
    """``pi[i]`` is the length of the longest proper prefix of ``s[:i+1]`` that is also its suffix."""
    pi = [0] * len(s)
    for i in range(1, len(s)):
        k = pi[i - 1]
        while k and s[i] != s[k]:
            k = pi[k - 1]
        if s[i] == s[k]:
            k += 1
        pi[i] = k
    return pi


def find_concat(text: Sequence, pattern: Sequence) -> int:
    """Find ``pattern`` in ``text`` via the prefix function of pattern, separator, text."""
    m = len(pattern)
    if m == 0:
        return 0
    combined = [*pattern, _SEPARATOR, *text]
    for i, length in enumerate(prefix_function(combined)):
        if length == m:
            return i - 2 * m
    return -1


def find_kmp(text: Sequence, pattern: Sequence) -> int:
    """Find ``pattern`` in ``text`` by scanning ``text`` once with the pattern's prefix function."""
    m = len(pattern)
    if m == 0:
        return 0
    pi = prefix_function(pattern)
    k = 0
    for i, item in enumerate(text):
        while k and item != pattern[k]:
            k = pi[k - 1]
        if item == pattern[k]:
            k += 1
        if k == m:
            return i - m + 1
    return -1