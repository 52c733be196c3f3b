import datetime

import pytest
from hypothesis import given, strategies as st

from algokit.dates import day_of_week, dow


def _expected(d):
    return d.isoweekday() % 7


@pytest.mark.parametrize(
    "year, month, day",
    [(2025, 4, 17), (2024, 1, 1), (2000, 2, 29), (1900, 3, 1), (1, 1, 1), (2023, 12, 31)],
)
def test_known_dates(year, month, day):
    expected = _expected(datetime.date(year, month, day))
    assert day_of_week(year, month, day) == expected
    assert dow(year, month, day) == expected


@given(st.dates())
def test_matches_datetime(d):
    assert day_of_week(d.year, d.month, d.day) == _expected(d)
    assert dow(d.year, d.month, d.day) == _expected(d)


@pytest.mark.parametrize("month", [0, 13])
def test_bad_month(month):
    with pytest.raises(ValueError):
        day_of_week(2025, month, 1)
    with pytest.raises(ValueError):
        dow(2025, month, 1)