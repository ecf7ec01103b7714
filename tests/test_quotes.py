import pytest

from tinyshell.quotes import (
    Char,
    chars_to_str,
    remove_quotes,
    remove_quotes_from_chars,
    split_words,
    strip_quotes,
    to_chars,
)


@pytest.mark.parametrize("text", ["", "echo hi", "'a' \"b\"", "x*y"])
@pytest.mark.parametrize("expanded", [True, False])
def test_to_chars_round_trip(text, expanded):
    chars = to_chars(text, expanded)
    assert chars_to_str(chars) == text
    assert all(c.expanded is expanded for c in chars)


def test_remove_quotes_drops_syntax_quotes():
    text = "'ab'\"cd\""
    assert remove_quotes(text, to_chars(text, False)) == "abcd"


def test_remove_quotes_keeps_expanded_quotes():
    text = "'ab'"
    assert remove_quotes(text, to_chars(text, True)) == text


def test_remove_quotes_keeps_inner_other_quote():
    text = "\"it's\""
    assert remove_quotes(text, to_chars(text, False)) == "it's"


def test_remove_quotes_edge_cases():
    assert remove_quotes("", to_chars("x")) is None
    assert remove_quotes("abc", []) is None
    assert remove_quotes("abc", to_chars("abc")) == "abc"


def test_strip_quotes():
    assert strip_quotes("\"a'b\"") == "a'b"
    assert strip_quotes("plain") == "plain"
    assert strip_quotes("") is None


def test_remove_quotes_from_chars():
    chars = to_chars("'a'", False) + to_chars("\"b\"", True)
    result = remove_quotes_from_chars(chars)
    assert chars_to_str(result) == "a\"b\""
    assert result[0] == Char("a", False)


def test_split_words_on_whitespace():
    assert split_words(to_chars("echo  hello \t world")) == ["echo", "hello", "world"]


def test_split_words_leading_whitespace():
    assert split_words(to_chars("   a")) == ["a"]


def test_split_words_quoted_spaces():
    assert split_words(to_chars("'a b' c")) == ["a b", "c"]


def test_split_words_empty_quotes_give_empty_word():
    assert split_words(to_chars("\"\" x")) == ["", "x"]


def test_split_words_expanded_quotes_are_literal():
    assert split_words(to_chars("'x'", True)) == ["'x'"]


def test_split_words_empty_input():
    assert split_words([]) == []


def test_split_words_joins_adjacent_quoted_parts():
    assert split_words(to_chars("ab'cd'ef")) == ["abcdef"]