"""Day of the week in the proleptic Gregorian calendar (Tomohiko Sakamoto's method).

Both functions return 0 for Sunday, 1 for Monday, ..., 6 for Saturday.
"""

from __future__ import annotations

__all__ = ["day_of_week", "dow"]

_MONTH_OFFSETS = (0, 3, 2, 5, 0, 3, 5, 1, 4, 6, 2, 4)
_ENCODED_OFFSETS = "bed=pen+mad."


def _check_month(month: int) -> None:
    if not 1 <= month <= 12:
        raise ValueError("month must be in 1..12")


def day_of_week(year: int, month: int, day: int) -> int:
    """Day of the week using a table of month offsets."""
    _check_month(month)
    if month < 3:
        year -= 1
    return (year + year // 4 - year // 100 + year // 400 + _MONTH_OFFSETS[month - 1] + day) % 7


def dow(year: int, month: int, day: int) -> int:
    """Day of the week with the month offsets packed into a string."""
    _check_month(month)
    year -= month < 3
    return (
        year + year // 4 - year // 100 + year // 400 + ord(_ENCODED_OFFSETS[month - 1]) + day
    ) % 7