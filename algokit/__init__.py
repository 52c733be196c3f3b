"""Classic algorithms: sorting, selection, dynamic programming, greedy, recursion and string search."""

__version__ = "0.1.0"