"""Small classic problems: adding numbers stored as digit lists, longest
substring without repeats, median of two sorted arrays and longest
palindromic substring."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from itertools import zip_longest
from typing import Optional

__all__ = [
    "ListNode",
    "add_two_numbers",
    "length_of_longest_substring",
    "find_median_sorted_arrays",
    "longest_palindrome",
]


@dataclass
class ListNode:
    """A node of a singly linked list of digits, least significant first."""

    val: int = 0
    next: Optional["ListNode"] = None

    @classmethod
    def from_digits(cls, digits: Iterable[int]) -> "ListNode":
        """Build a list holding ``digits`` in the given order."""
        digits = list(digits)
        if not digits:
            raise ValueError("a number needs at least one digit")
        head = None
        for digit in reversed(digits):
            if not 0 <= digit <= 9:
                raise ValueError(f"not a digit: {digit}")
            head = cls(digit, head)
        return head

    def __iter__(self) -> Iterator[int]:
        node: Optional[ListNode] = self
        while node is not None:
            yield node.val
            node = node.next

    def to_digits(self) -> list[int]:
        """Return the digits held from this node onward."""
        return list(self)


def add_two_numbers(l1: Optional[ListNode], l2: Optional[ListNode]) -> ListNode:
    """Add two numbers stored as reversed digit lists; the sum is stored the same way."""
    digits = []
    carry = 0
    for a, b in zip_longest(() if l1 is None else l1, () if l2 is None else l2, fillvalue=0):
        carry, digit = divmod(a + b + carry, 10)
        digits.append(digit)
    if carry:
        digits.append(carry)
    if not digits:
        raise ValueError("both numbers are empty")
    return ListNode.from_digits(digits)


def length_of_longest_substring(s: str) -> int:
    """Length of the longest substring of ``s`` without repeated characters."""
    last_seen: dict[str, int] = {}
    start = longest = 0
    for end, ch in enumerate(s):
        if last_seen.get(ch, -1) >= start:
            start = last_seen[ch] + 1
        last_seen[ch] = end
        longest = max(longest, end - start + 1)
    return longest


def find_median_sorted_arrays(a: Sequence[int], b: Sequence[int]) -> float:
    """Median of the union of two ascending sequences."""
    merged = list(heapq.merge(a, b))
    if not merged:
        raise ValueError("both arrays are empty")
    mid = len(merged) // 2
    if len(merged) % 2 == 0:
        return (merged[mid - 1] + merged[mid]) / 2
    return float(merged[mid])


def longest_palindrome(s: str) -> str:
    """Longest palindromic substring of ``s``; the leftmost one on ties."""
    if not s:
        return ""
    best_start, best_len = 0, 1
    for center in range(2 * len(s) - 1):
        lo = center // 2
        hi = lo + center % 2
        while lo >= 0 and hi < len(s) and s[lo] == s[hi]:
            lo -= 1
            hi += 1
        length = hi - lo - 1
        if length > best_len:
            best_start, best_len = lo + 1, length
    return s[best_start:best_start + best_len]