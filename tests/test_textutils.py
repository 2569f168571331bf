import pytest

from syslab.textutils import linebreaker, makewords, quick_sort, sort_lines


@pytest.mark.parametrize("func", [linebreaker, makewords])
def test_spaces_become_newlines(func):
    text = "the quick brown fox"
    result = func(text)
    assert " " not in result
    assert result.split("\n") == text.split(" ")


@pytest.mark.parametrize("func", [linebreaker, makewords])
def test_text_without_spaces_is_unchanged(func):
    assert func("nospaces\n") == "nospaces\n"


@pytest.mark.parametrize("func", [linebreaker, makewords])
def test_length_is_preserved(func):
    text = "  leading and trailing  \n"
    assert len(func(text)) == len(text)


def test_makewords_none():
    assert makewords(None) is None


def test_quick_sort_orders_strings():
    words = ["pear", "apple", "fig", "banana", "apple", "cherry"]
    result = quick_sort(words)
    assert result == sorted(words)
    assert words[0] == "pear"


def test_quick_sort_empty_and_single():
    assert quick_sort([]) == []
    assert quick_sort(["only"]) == ["only"]


def test_quick_sort_handles_sorted_input_without_recursion_limit():
    words = [f"{i:06d}" for i in range(5000)]
    assert quick_sort(words) == words
    assert quick_sort(reversed(words)) == words


def test_quick_sort_uses_byte_order():
    words = ["b", "B", "a", "é", "A"]
    result = quick_sort(words)
    assert [w.encode("utf-8") for w in result] == sorted(w.encode("utf-8") for w in words)


def test_sort_lines_strips_newlines():
    assert sort_lines(["zeta\n", "alpha\n", "mid"]) == ["alpha", "mid", "zeta"]


def test_sort_lines_cuts_at_first_newline():
    assert sort_lines(["two\nparts\n"]) == ["two"]