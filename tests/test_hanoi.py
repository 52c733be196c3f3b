import pytest

from algokit.hanoi import Move, hanoi_iterative, hanoi_parity, hanoi_recursive

SOLVERS = [hanoi_recursive, hanoi_iterative, hanoi_parity]


def _play(n, moves):
    pegs = {"A": list(range(n, 0, -1)), "B": [], "C": []}
    for move in moves:
        src, dst = pegs[move.source], pegs[move.target]
        assert src and src[-1] == move.disk
        assert not dst or dst[-1] > move.disk
        dst.append(src.pop())
    return pegs


@pytest.mark.parametrize("n", range(0, 9))
def test_move_count_is_minimal(n):
    assert len(hanoi_recursive(n)) == 2 ** n - 1
    assert len(hanoi_iterative(n)) == 2 ** n - 1
    assert len(hanoi_parity(n)) == 2 ** n - 1


@pytest.mark.parametrize("n", range(1, 8))
def test_moves_are_legal_and_finish_on_c(n):
    expected = {"A": [], "B": [], "C": list(range(n, 0, -1))}
    assert _play(n, hanoi_recursive(n)) == expected
    assert _play(n, hanoi_iterative(n)) == expected
    assert _play(n, hanoi_parity(n)) == expected


@pytest.mark.parametrize("n", range(0, 11))
def test_all_solvers_agree(n):
    expected = hanoi_recursive(n)
    assert hanoi_iterative(n) == expected
    assert hanoi_parity(n) == expected


@pytest.mark.parametrize("solver", SOLVERS)
def test_single_disk(solver):
    assert solver(1) == [Move(1, "A", "C")]


def test_move_text():
    assert str(Move(3, "A", "B")) == "Move disk 3 from A to B"


def test_negative_disks_rejected():
    with pytest.raises(ValueError):
        hanoi_recursive(-1)
    with pytest.raises(ValueError):
        hanoi_iterative(-1)
    with pytest.raises(ValueError):
        hanoi_parity(-1)