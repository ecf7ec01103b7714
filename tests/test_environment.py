import pytest

from tinyshell.environment import (
    Shell,
    default_environment,
    env_from_list,
    env_to_list,
    parse_shlvl,
)


def test_env_round_trip():
    entries = ["HOME=/home/x", "OLDPWD", "EMPTY=", "EQ=a=b"]
    assert env_to_list(env_from_list(entries)) == entries


def test_env_from_list_splits_on_first_equals():
    env = env_from_list(["EQ=a=b", "OLDPWD"])
    assert env == {"EQ": "a=b", "OLDPWD": None}


def test_default_environment():
    env = default_environment("/tmp")
    assert list(env) == ["OLDPWD", "PWD", "SHLVL", "_"]
    assert env["PWD"] == "/tmp"
    assert env["SHLVL"] == "0"
    assert env["OLDPWD"] is None
    assert env["_"] == "/tmp/./tinyshell"


def test_parse_shlvl_missing_value():
    assert parse_shlvl(None) == 1


@pytest.mark.parametrize("level", [1, 2, 41, 999, 1000])
def test_parse_shlvl_increments(level):
    assert parse_shlvl(str(level)) == level + 1
    assert parse_shlvl(f"  {level}xyz") == level + 1


@pytest.mark.parametrize("value", ["0", "-3", "+4", "abc", ""])
def test_parse_shlvl_without_usable_number(value):
    assert parse_shlvl(value) == 0


@pytest.mark.parametrize("value", ["1001", "50000", "9" * 40])
def test_parse_shlvl_resets_when_too_large(value):
    assert parse_shlvl(value) == 1


def test_getenv():
    shell = Shell(env=env_from_list(["A=1", "B"]), cwd="/")
    assert shell.getenv("A") == "1"
    assert shell.getenv("B") is None
    assert shell.getenv("MISSING") is None


def test_bump_shlvl_without_shlvl():
    shell = Shell(env={}, cwd="/")
    assert shell.bump_shlvl() == 1
    assert shell.getenv("SHLVL") == "1"


@pytest.mark.parametrize("level", [1, 4, 1000])
def test_bump_shlvl_increments(level):
    shell = Shell(env={"SHLVL": str(level)}, cwd="/")
    assert shell.bump_shlvl() == level + 1
    assert shell.env["SHLVL"] == str(level + 1)


def test_bump_shlvl_from_default_environment():
    shell = Shell(env=default_environment("/tmp"), cwd="/tmp")
    shell.bump_shlvl()
    assert shell.getenv("SHLVL") == "1"
    assert env_to_list(shell.env)[2] == "SHLVL=1"