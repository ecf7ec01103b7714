"""Variable expansion of command lines and here-document lines."""

from tinyshell.quotes import Char, chars_to_str, split_words, to_chars
from tinyshell.syntax import WHITESPACE
from tinyshell.wildcard import expand_wildcards


def _is_name_start(ch):
    return ch.isascii() and (ch.isalpha() or ch == "_")


def _is_name_char(ch):
    return ch.isascii() and (ch.isalnum() or ch == "_")


def var_name_length(text):
    """Return the length of the variable name at the start of ``text``, or 0."""
    if not text or not _is_name_start(text[0]):
        return 0
    length = 0
    for ch in text:
        if not _is_name_char(ch):
            break
        length += 1
    return length


def expand_variable(shell, text, in_double):
    """Expand the ``$`` reference at the start of ``text``.

    Returns the number of characters consumed and the tagged characters that
    replace them.  Outside double quotes, a '$' before a quote vanishes; a '$'
    not followed by a name or '?' stays as it is.
    """
    if text[1:2] and text[1] in "'\"" and not in_double:
        return 1, []
    if text[1:2] == "?":
        return 2, to_chars(str(shell.exit_status), True)
    length = var_name_length(text[1:])
    if length == 0:
        return 1, [Char("$", False)]
    value = shell.getenv(text[1:1 + length]) or ""
    return length + 1, to_chars(value, True)


def breakdown(shell, text):
    """Expand the variables of ``text`` into tagged characters.

    Single-quoted parts outside double quotes are kept as they are.
    """
    chars = []
    in_double = False
    index = 0
    while text and index < len(text):
        ch = text[index]
        if ch == '"':
            in_double = not in_double
            chars.append(Char(ch, False))
            index += 1
        elif ch == "'" and not in_double:
            closing = text.find("'", index + 1)
            end = len(text) if closing == -1 else closing + 1
            chars.extend(to_chars(text[index:end], False))
            index = end
        elif ch == "$":
            consumed, produced = expand_variable(shell, text[index:], in_double)
            chars.extend(produced)
            index += consumed
        else:
            chars.append(Char(ch, False))
            index += 1
    return chars


def expand(shell, text, directory="."):
    """Expand variables and wildcards in ``text`` and split it into words."""
    chars = breakdown(shell, text)
    _, chars = expand_wildcards(chars_to_str(chars), chars, directory)
    return split_words(chars, WHITESPACE)


def expand_heredoc_line(shell, line):
    """Expand the variables of one here-document line; quotes are not special."""
    parts = []
    index = 0
    while index < len(line):
        if line[index] == "$":
            consumed, produced = expand_variable(shell, line[index:], False)
            parts.append(chars_to_str(produced))
            index += consumed
        else:
            parts.append(line[index])
            index += 1
    return "".join(parts)