from collections import Counter
from itertools import combinations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.activity import (
    greedy_activity_selector,
    recursive_activity_selector,
    sort_by_finish,
)

S = [1, 3, 0, 5, 3, 5, 6, 8, 8, 2, 12]
F = [9, 13, 7, 6, 11, 4, 8, 11, 12, 5, 14]

intervals = st.lists(st.tuples(st.integers(0, 20), st.integers(1, 10)), max_size=8)


def _split(pairs):
    return [s for s, _ in pairs], [s + d for s, d in pairs]


def _compatible(starts, finishes, chosen):
    return all(starts[b] >= finishes[a] for a, b in zip(chosen, chosen[1:]))


def test_source_example():
    starts, finishes = sort_by_finish(S, F)
    assert greedy_activity_selector(starts, finishes) == [0, 2, 4, 7, 10]
    assert recursive_activity_selector(starts, finishes) == [0, 2, 4, 7, 10]


def test_sort_by_finish_example():
    starts, finishes = sort_by_finish(S, F)
    assert finishes == sorted(F)
    assert Counter(zip(starts, finishes)) == Counter(zip(S, F))


def test_empty():
    assert greedy_activity_selector([], []) == []
    assert recursive_activity_selector([], []) == []


@given(intervals)
def test_selection_is_compatible_and_maximum(pairs):
    starts, finishes = sort_by_finish(*_split(pairs))
    chosen = greedy_activity_selector(starts, finishes)
    assert _compatible(starts, finishes, chosen)
    n = len(starts)
    best = max(
        (r for r in range(n + 1) for c in combinations(range(n), r)
         if _compatible(starts, finishes, list(c))),
        default=0,
    )
    assert len(chosen) == best


@given(intervals)
def test_recursive_matches_greedy(pairs):
    starts, finishes = sort_by_finish(*_split(pairs))
    assert recursive_activity_selector(starts, finishes) == greedy_activity_selector(starts, finishes)


def test_unsorted_finishes_raise():
    with pytest.raises(ValueError):
        greedy_activity_selector(S, F)
    with pytest.raises(ValueError):
        recursive_activity_selector(S, F)


def test_mismatched_lengths_raise():
    with pytest.raises(ValueError):
        sort_by_finish([1, 2], [3])
    with pytest.raises(ValueError):
        greedy_activity_selector([1, 2], [3])