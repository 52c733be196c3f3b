from hypothesis import given, settings
from hypothesis import strategies as st

from algokit.lcs import lcs_length, lcs_sequence


def _is_subsequence(sub, seq):
    it = iter(seq)
    return all(any(ch == other for other in it) for ch in sub)


def test_textbook_example():
    assert lcs_length("ABCBDAB", "BDCABA") == 4
    assert lcs_sequence("ABCBDAB", "BDCABA") == "BCBA"


def test_empty_inputs():
    assert lcs_length("", "abc") == 0
    assert lcs_sequence("abc", "") == ""


def test_identical_strings():
    assert lcs_sequence("kayak", "kayak") == "kayak"
    assert lcs_length("kayak", "kayak") == len("kayak")


def test_lists_give_lists():
    result = lcs_sequence([1, 2, 3, 4], [2, 4, 5])
    assert result == [2, 4]


text = st.text(alphabet="abcd", max_size=12)


@settings(max_examples=100)
@given(text, text)
def test_sequence_is_common_and_longest(x, y):
    seq = lcs_sequence(x, y)
    assert len(seq) == lcs_length(x, y)
    assert _is_subsequence(seq, x)
    assert _is_subsequence(seq, y)


@settings(max_examples=100)
@given(text, text)
def test_length_is_symmetric_and_bounded(x, y):
    length = lcs_length(x, y)
    assert length == lcs_length(y, x)
    assert length <= min(len(x), len(y))