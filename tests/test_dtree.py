import io

import pytest

from algokit.dtree import DTree, main, read_tree

CHAIN_TEXT = "3 7\n1 1 5\n1 2 5\n0\n"
CHAIN = [[(1, 5)], [(2, 5)], []]


def test_chain_over_tolerance():
    assert DTree(3, 7, CHAIN).cut_count() == 1


def test_generous_tolerance_needs_nothing():
    assert DTree(3, 100, CHAIN).cut_count() == 0


def test_count_is_repeatable():
    tree = DTree(3, 7, CHAIN)
    first = tree.cut_count()
    assert tree.cut_count() == first


def test_single_node():
    assert DTree(1, 0, [[]]).cut_count() == DTree(3, 100, CHAIN).cut_count()


def test_read_tree_matches_constructor():
    tree = read_tree(CHAIN_TEXT)
    assert tree.n == 3
    assert tree.d == 7
    assert tree.children == CHAIN
    assert tree.cut_count() == DTree(3, 7, CHAIN).cut_count()


def test_main_reads_file(tmp_path, capsys):
    path = tmp_path / "tree.txt"
    path.write_text(CHAIN_TEXT)
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == f"{DTree(3, 7, CHAIN).cut_count()}\n"


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(CHAIN_TEXT))
    assert main([]) == 0
    assert capsys.readouterr().out.strip() == str(DTree(3, 7, CHAIN).cut_count())


def test_main_reports_bad_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3 7\n1 1"))
    assert main([]) == 1
    assert capsys.readouterr().err


def test_truncated_input_raises():
    with pytest.raises(ValueError):
        read_tree("3 7\n1 1 5\n")


def test_orphan_node_raises():
    with pytest.raises(ValueError):
        DTree(3, 7, [[(1, 5)], [], []])


def test_two_parents_raise():
    with pytest.raises(ValueError):
        DTree(3, 7, [[(1, 5), (2, 1)], [(2, 5)], []])


def test_root_as_child_raises():
    with pytest.raises(ValueError):
        DTree(2, 7, [[(1, 5)], [(0, 1)]])