"""Optimal segmentation of a grey-scale pixel sequence for storage.

Each segment stores a header of 11 bits plus, for every pixel, as many bits
as the widest pixel of the segment needs. A segment holds at most 255
pixels. Tables returned by ``compress`` are indexed from 1; entry 0 is the
empty prefix.
"""

from __future__ import annotations

from collections.abc import Sequence

__all__ = [
    "MAX_SEGMENT",
    "HEADER_BITS",
    "length_in_bits",
    "compress",
    "compress_traceback",
    "segments",
]

MAX_SEGMENT = 255
HEADER_BITS = 11


def length_in_bits(x: int) -> int:
    """Number of bits needed to store ``x``; at least 1."""
    if x < 0:
        raise ValueError("pixel values cannot be negative")
    return max(1, x.bit_length())


def compress(pixels: Sequence[int]) -> tuple[list[int], list[int], list[int]]:
    """Run the dynamic program.

    Returns ``(s, lengths, bits)``: ``s[i]`` is the fewest bits storing the
    first ``i`` pixels, ``lengths[i]`` the length of the last segment in that
    optimum and ``bits[i]`` the width of pixel ``i``.
    """
    n = len(pixels)
    s = [0] * (n + 1)
    lengths = [0] * (n + 1)
    bits = [0] * (n + 1)
    for i, pixel in enumerate(pixels, start=1):
        bits[i] = length_in_bits(pixel)
        widest = bits[i]
        best = s[i - 1] + widest
        lengths[i] = 1
        for k in range(2, min(i, MAX_SEGMENT) + 1):
            widest = max(widest, bits[i - k + 1])
            cost = s[i - k] + k * widest
            if cost < best:
                best = cost
                lengths[i] = k
        s[i] = best + HEADER_BITS
    return s, lengths, bits


def compress_traceback(lengths: Sequence[int]) -> list[int]:
    """Return the end position (1-based, inclusive) of each segment, in order."""
    ends = []
    pos = len(lengths) - 1
    while pos > 0:
        step = lengths[pos]
        if not 1 <= step <= pos:
            raise ValueError("inconsistent segment lengths")
        ends.append(pos)
        pos -= step
    ends.reverse()
    return ends


def segments(pixels: Sequence[int]) -> tuple[int, list[tuple[int, int]]]:
    """Return the optimal bit count and the ``(length, bits)`` of each segment."""
    s, lengths, bits = compress(pixels)
    result = []
    start = 0
    for end in compress_traceback(lengths):
        result.append((end - start, max(bits[start + 1:end + 1])))
        start = end
    return s[-1], result