"""Characters tagged with their origin, quote removal and word splitting."""

from dataclasses import dataclass

from tinyshell.syntax import QUOTES, WHITESPACE


@dataclass(frozen=True)
class Char:
    """One character of a command line.

    ``expanded`` is True when the character came from a variable or wildcard
    expansion; quotes produced that way are literal text, not syntax.
    """

    ch: str
    expanded: bool = False


def to_chars(text, expanded=False):
    """Tag every character of ``text`` with the same origin."""
    return [Char(ch, expanded) for ch in text or ""]


def chars_to_str(chars):
    """Join tagged characters back into a string."""
    return "".join(c.ch for c in chars)


def _expanded_at(chars, index):
    if not chars:
        return False
    return chars[min(index, len(chars) - 1)].expanded


def remove_quotes(text, chars):
    """Remove the syntactic quotes of ``text``, whose origins are ``chars``.

    Returns None for empty text or missing origins, and ``text`` itself when
    it holds no quote character.
    """
    if not text or not chars:
        return None
    if not any(q in text for q in QUOTES):
        return text
    result = []
    quote = ""
    for index, ch in enumerate(text):
        literal = _expanded_at(chars, index)
        if not literal and ch in QUOTES and not quote:
            quote = ch
        elif not literal and ch == quote:
            quote = ""
        else:
            result.append(ch)
    return "".join(result)


def strip_quotes(text):
    """Remove quotes from ``text``, treating every quote as syntax.

    Returns None for empty text.
    """
    if not text:
        return None
    if not any(q in text for q in QUOTES):
        return text
    result = []
    quote = ""
    for ch in text:
        if ch in QUOTES and not quote:
            quote = ch
        elif ch == quote:
            quote = ""
        else:
            result.append(ch)
    return "".join(result)


def remove_quotes_from_chars(chars):
    """Return ``chars`` without their syntactic quote characters."""
    result = []
    quote = ""
    for c in chars:
        if not c.expanded and c.ch in QUOTES and not quote:
            quote = c.ch
        elif not c.expanded and c.ch == quote:
            quote = ""
        else:
            result.append(c)
    return result


def split_words(chars, sep=WHITESPACE):
    """Split tagged characters into words on unquoted whitespace.

    Syntactic quotes are dropped; a quoted empty string followed by
    whitespace or the end still yields an (empty) word.
    """
    words = []
    chunk = []
    quote = ""
    index = 0
    count = len(chars)
    while index < count:
        current = chars[index]
        following = chars[index + 1] if index + 1 < count else None
        if not current.expanded and current.ch in QUOTES:
            if not quote:
                quote = current.ch
            elif quote == current.ch:
                quote = ""
                if following is None or following.ch in WHITESPACE:
                    chunk.append("")
            else:
                chunk.append(current.ch)
        elif not quote and current.ch in WHITESPACE:
            if chunk:
                words.append("".join(chunk))
                chunk = []
            while index + 1 < count and chars[index + 1].ch in sep:
                index += 1
        else:
            chunk.append(current.ch)
        index += 1
    if chunk:
        words.append("".join(chunk))
    return words