from itertools import combinations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.circuit import max_noncrossing_set, mnset, mnset_traceback

EXAMPLE = [8, 7, 4, 2, 5, 1, 9, 3, 10, 6]

perms = st.integers(0, 7).flatmap(lambda n: st.permutations(list(range(1, n + 1))))


def _longest_increasing(perm):
    n = len(perm)
    for r in range(n, 0, -1):
        for combo in combinations(range(n), r):
            if all(perm[a] < perm[b] for a, b in zip(combo, combo[1:])):
                return r
    return 0


def test_example_set():
    assert max_noncrossing_set(EXAMPLE) == [3, 5, 7, 9]


def test_example_table_shape_and_size():
    size = mnset(EXAMPLE)
    n = len(EXAMPLE)
    assert len(size) == n + 1
    assert all(len(row) == n + 1 for row in size)
    assert size[n][n] == len(max_noncrossing_set(EXAMPLE))


def test_traceback_is_descending():
    nets = mnset_traceback(EXAMPLE, mnset(EXAMPLE))
    assert nets == sorted(nets, reverse=True)
    assert sorted(nets) == max_noncrossing_set(EXAMPLE)


def test_identity_keeps_every_net():
    perm = list(range(1, 8))
    assert max_noncrossing_set(perm) == perm


def test_reversed_keeps_one_net():
    perm = list(range(7, 0, -1))
    assert len(max_noncrossing_set(perm)) == 1


def test_empty_permutation():
    assert max_noncrossing_set([]) == []
    assert mnset([]) == [[0]]


@given(perms)
def test_result_is_noncrossing_and_maximum(perm):
    nets = max_noncrossing_set(perm)
    bottoms = [perm[i - 1] for i in nets]
    assert bottoms == sorted(bottoms)
    assert len(nets) == _longest_increasing(perm)
    assert mnset(perm)[len(perm)][len(perm)] == len(nets)


@given(perms)
def test_table_rows_are_monotone(perm):
    size = mnset(perm)
    for row in size:
        assert all(a <= b for a, b in zip(row, row[1:]))
    for upper, lower in zip(size, size[1:]):
        assert all(a <= b for a, b in zip(upper, lower))


@pytest.mark.parametrize("bad", [[1, 1], [0, 1], [2, 3], [1, 3]])
def test_invalid_permutation_raises(bad):
    with pytest.raises(ValueError):
        mnset(bad)
    with pytest.raises(ValueError):
        max_noncrossing_set(bad)


def test_traceback_rejects_mismatched_table():
    with pytest.raises(ValueError):
        mnset_traceback(EXAMPLE, [[0]])