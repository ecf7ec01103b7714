"""Split a command line into raw tokens."""

from collections.abc import Iterator

OPERATOR_CHARS = "&|<>"
DOUBLE_OPERATORS = (">>", "<<", "&&", "||")
QUOTES = "'\""

#: Delimiters used while validating a line (redirections split out).
CHECK_DELIMS = "'\"()|&<>"
#: Delimiters used while building the command tree (redirections stay in words).
PARSE_DELIMS = "'\"()|&"


def tokenize(text: str, delims: str) -> Iterator[str]:
    """Yield the tokens of ``text``.

    A quote starts a token that runs to the matching quote, or to the end of
    the text when the quote is never closed.  Operator characters that are
    delimiters form one- or two-character tokens, other delimiters form
    one-character tokens, and everything else is gathered into words that
    stop at the next delimiter.  Joining the tokens gives back ``text``.
    """
    pos = 0
    length = len(text)
    while pos < length:
        ch = text[pos]
        if ch in QUOTES:
            closing = text.find(ch, pos + 1)
            end = length if closing == -1 else closing + 1
        elif ch in delims and ch in OPERATOR_CHARS:
            end = pos + (2 if text[pos:pos + 2] in DOUBLE_OPERATORS else 1)
        elif ch in delims:
            end = pos + 1
        else:
            end = pos + 1
            while end < length and text[end] not in delims:
                end += 1
        yield text[pos:end]
        pos = end