from itertools import product

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from algokit.knapsack import (
    fractional_bound,
    knapsack_jump,
    knapsack_table,
    knapsack_traceback,
)


def _brute(values, weights, capacity):
    best = 0
    for choice in product((False, True), repeat=len(values)):
        w = sum(wt for wt, c in zip(weights, choice) if c)
        if w <= capacity:
            best = max(best, sum(v for v, c in zip(values, choice) if c))
    return best


items = st.lists(
    st.tuples(st.integers(0, 20), st.integers(1, 10)), max_size=6
)


@settings(max_examples=80)
@given(items, st.integers(0, 30))
def test_table_matches_brute_force(pairs, capacity):
    values = [v for v, _ in pairs]
    weights = [w for _, w in pairs]
    table = knapsack_table(values, weights, capacity)
    assert table[0][capacity] == _brute(values, weights, capacity)


@settings(max_examples=80)
@given(items, st.integers(0, 30))
def test_jump_matches_table(pairs, capacity):
    values = [v for v, _ in pairs]
    weights = [w for _, w in pairs]
    table = knapsack_table(values, weights, capacity)
    assert knapsack_jump(values, weights, capacity) == table[0][capacity]


@settings(max_examples=80)
@given(items, st.integers(0, 30))
def test_traceback_is_feasible_and_optimal(pairs, capacity):
    values = [v for v, _ in pairs]
    weights = [w for _, w in pairs]
    table = knapsack_table(values, weights, capacity)
    chosen = knapsack_traceback(table, weights, capacity)
    assert len(chosen) == len(values)
    assert sum(w for w, c in zip(weights, chosen) if c) <= capacity
    assert sum(v for v, c in zip(values, chosen) if c) == table[0][capacity]


def test_table_last_row_is_zero():
    table = knapsack_table([5, 7], [2, 3], 6)
    assert table[2] == [0] * 7


def test_empty_items():
    assert knapsack_table([], [], 5) == [[0] * 6]
    assert knapsack_jump([], [], 5) == 0


def test_mismatched_lengths_raise():
    with pytest.raises(ValueError):
        knapsack_table([1, 2], [1], 3)
    with pytest.raises(ValueError):
        knapsack_jump([1], [1, 2], 3)


def test_negative_capacity_raises():
    with pytest.raises(ValueError):
        knapsack_table([1], [1], -1)


def test_jump_rejects_zero_weight():
    with pytest.raises(ValueError):
        knapsack_jump([3], [0], 4)


def test_traceback_rejects_wrong_table():
    with pytest.raises(ValueError):
        knapsack_traceback([[0, 0]], [1, 2], 1)


def test_bound_when_everything_fits():
    values, weights = [6, 4, 2], [1, 2, 3]
    assert fractional_bound(values, weights, 100, 0, 0, 0) == sum(values)


def test_bound_at_end_returns_current_value():
    assert fractional_bound([6, 4], [1, 2], 10, 2, 3, 9) == 9


def test_bound_start_out_of_range():
    with pytest.raises(IndexError):
        fractional_bound([1], [1], 5, 3, 0, 0)


@settings(max_examples=80)
@given(items, st.integers(0, 30))
def test_bound_is_upper_bound(pairs, capacity):
    pairs = sorted(pairs, key=lambda p: p[0] / p[1], reverse=True)
    values = [v for v, _ in pairs]
    weights = [w for _, w in pairs]
    bound = fractional_bound(values, weights, capacity, 0, 0, 0)
    assert bound >= _brute(values, weights, capacity) - 1e-9