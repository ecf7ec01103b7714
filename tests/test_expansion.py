import pytest

from tinyshell.environment import Shell
from tinyshell.expansion import (
    breakdown,
    expand,
    expand_heredoc_line,
    expand_variable,
    var_name_length,
)
from tinyshell.quotes import chars_to_str


@pytest.fixture
def shell(tmp_path):
    return Shell(env={"USER": "alice", "PAIR": "a b", "Q": "'q'"}, cwd=str(tmp_path))


@pytest.mark.parametrize("text,name", [("HOME/x", "HOME"), ("_a1 rest", "_a1"), ("ab9", "ab9")])
def test_var_name_length(text, name):
    assert var_name_length(text) == len(name)


@pytest.mark.parametrize("text", ["", "1abc", "-x", "?"])
def test_var_name_length_invalid(text):
    assert var_name_length(text) == 0


def test_expand_variable_known(shell):
    consumed, chars = expand_variable(shell, "$USER!", False)
    assert consumed == len("$USER")
    assert chars_to_str(chars) == "alice"
    assert all(c.expanded for c in chars)


def test_expand_variable_before_quote_vanishes(shell):
    assert expand_variable(shell, "$'x'", False) == (1, [])


def test_expand_variable_lone_dollar(shell):
    consumed, chars = expand_variable(shell, "$ x", False)
    assert consumed == 1
    assert chars_to_str(chars) == "$"


def test_breakdown_marks_expanded(shell):
    chars = breakdown(shell, "x$USER")
    assert chars_to_str(chars) == "xalice"
    assert not chars[0].expanded
    assert all(c.expanded for c in chars[1:])


def test_expand_simple(shell, tmp_path):
    assert expand(shell, "echo $USER", tmp_path) == ["echo", "alice"]


def test_expand_exit_status(shell, tmp_path):
    shell.exit_status = 42
    assert expand(shell, "$?", tmp_path) == [str(42)]


def test_expand_single_quotes_block_expansion(shell, tmp_path):
    assert expand(shell, "'$USER'", tmp_path) == ["$USER"]


def test_expand_inside_double_quotes(shell, tmp_path):
    assert expand(shell, '"$USER x"', tmp_path) == ["alice x"]


def test_expand_unset_variable_disappears(shell, tmp_path):
    assert expand(shell, "$NOPE", tmp_path) == []


def test_expand_lone_dollar(shell, tmp_path):
    assert expand(shell, "$", tmp_path) == ["$"]
    assert expand(shell, '"$"', tmp_path) == ["$"]


def test_expand_dollar_before_quote(shell, tmp_path):
    assert expand(shell, "$'a'", tmp_path) == ["a"]


def test_expand_value_is_split(shell, tmp_path):
    assert expand(shell, "echo $PAIR", tmp_path) == ["echo", "a", "b"]


def test_expand_value_quotes_are_literal(shell, tmp_path):
    assert expand(shell, "$Q", tmp_path) == ["'q'"]


def test_expand_wildcards(shell, tmp_path):
    for name in ["one.txt", "two.txt", "other.md"]:
        (tmp_path / name).write_text("")
    assert expand(shell, "cat *.txt", tmp_path) == ["cat", "one.txt", "two.txt"]


def test_expand_heredoc_line(shell):
    assert expand_heredoc_line(shell, "hi $USER") == "hi alice"
    assert expand_heredoc_line(shell, "'$USER'") == "'alice'"


def test_expand_heredoc_line_without_variables(shell):
    line = "plain text, no vars"
    assert expand_heredoc_line(shell, line) == line