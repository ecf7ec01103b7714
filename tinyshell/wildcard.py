"""Filename wildcard matching and expansion of '*' in command lines."""

import os
import sys

from tinyshell.quotes import Char, chars_to_str, remove_quotes, to_chars
from tinyshell.syntax import QUOTES, WHITESPACE, ErrorKind, format_error


def match_pattern(pattern, name):
    """True when ``name`` matches ``pattern``, where '*' matches any run of characters."""
    if pattern is None or name is None:
        return False
    pos = 0
    for index, ch in enumerate(pattern):
        if ch == "*":
            rest = pattern[index + 1:]
            if not rest:
                return True
            return any(match_pattern(rest, name[k:]) for k in range(pos, len(name)))
        if pos >= len(name) or ch != name[pos]:
            return False
        pos += 1
    return pos == len(name)


def trim_pattern(pattern):
    """Collapse runs of '*' at either end of ``pattern`` to a single '*'."""
    if not pattern:
        return pattern
    core = pattern.strip("*")
    if pattern.startswith("*"):
        core = "*" + core
    if pattern.endswith("*"):
        core = core + "*"
    return core


def glob_directory(pattern, directory="."):
    """Return the sorted names in ``directory`` that match ``pattern``.

    Names starting with '.' (including '.' and '..') only match when the
    pattern itself starts with '.'.  Raises OSError if the directory cannot
    be read.
    """
    trimmed = trim_pattern(pattern)
    names = sorted([".", "..", *os.listdir(directory)])
    return [
        name
        for name in names
        if match_pattern(trimmed, name) and (not name.startswith(".") or pattern.startswith("."))
    ]


def _expanded_at(chars, index):
    if not chars:
        return False
    return chars[min(index, len(chars) - 1)].expanded


def extract_pattern(text, index, sep, chars):
    """Return ``(start, end)`` of the word around ``text[index]``.

    The word stops at characters of ``sep`` outside quotes; quotes that came
    from expansion are not syntax.  Returns None when ``index`` is out of range.
    """
    if not text or index < 0 or index >= len(text):
        return None
    quote = ""

    def boundary(pos):
        nonlocal quote
        ch = text[pos]
        literal = _expanded_at(chars, pos)
        if not literal and quote and ch == quote:
            quote = ""
        elif not literal and ch in QUOTES and not quote:
            quote = ch
        elif not quote and ch in sep:
            return True
        return False

    start = index
    while start > 0 and not boundary(start - 1):
        start -= 1
    end = index
    while end < len(text) and not boundary(end):
        end += 1
    return start, end


def can_be_expanded(text, index):
    """False for a '*' that is the value of an ``export NAME=`` assignment."""
    if text.startswith("export "):
        pos = index
        while pos > 0 and text[pos] in WHITESPACE and text[pos] != "=":
            pos -= 1
        if text[pos] == "=":
            return False
    return True


def _expand_one(text, new, index, chars, directory):
    start, end = extract_pattern(text, index, WHITESPACE, chars)
    del new[max(len(new) - (index - start), 0):]
    raw = text[start:end]
    pattern = remove_quotes(raw, chars[start:end]) or raw
    try:
        matches = glob_directory(pattern, directory)
    except OSError:
        print(format_error(ErrorKind.DIRECT), file=sys.stderr)
        matches = []
    replacement = " ".join(matches) if matches else pattern
    new.extend(to_chars(replacement, True))
    return end - index


def expand_wildcards(text, chars, directory="."):
    """Replace unquoted wildcard words in ``text`` by the names they match.

    ``chars`` gives the origin of every character of ``text``.  Returns the
    new text and its tagged characters; replaced words are tagged as expanded.
    A word with no match is kept, with its quotes removed.
    """
    new = []
    quote = ""
    index = 0
    while index < len(text):
        ch = text[index]
        literal = _expanded_at(chars, index)
        if not literal and ch in QUOTES:
            if ch == quote:
                quote = ""
            elif not quote:
                quote = ch
            new.append(Char(ch, False))
            index += 1
        elif not quote and ch == "*" and can_be_expanded(text, index):
            index += _expand_one(text, new, index, chars, directory)
        else:
            new.append(Char(ch, literal))
            index += 1
    return chars_to_str(new), new