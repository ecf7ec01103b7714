"""Here-documents: reading their bodies into temporary files."""

import itertools
import os
import tempfile
from dataclasses import dataclass

from tinyshell.environment import PROGRAM_NAME
from tinyshell.expansion import expand_heredoc_line
from tinyshell.quotes import strip_quotes
from tinyshell.syntax import QUOTES, WHITESPACE, ErrorKind, format_error

PROMPT = "> "
_DELIMITER_STOPS = "|&<>()"
_serial = itertools.count()


@dataclass
class Heredoc:
    """One here-document: its delimiter, whether it was quoted, and its file."""

    delimiter: str | None
    quoted: bool
    path: str


class HeredocInterrupted(Exception):
    """Reading a here-document was interrupted by the user."""

    status = 130


def _read_prompt(prompt):
    try:
        return input(prompt)
    except EOFError:
        return None


def extract_delimiter(text):
    """Return the raw delimiter word at the start of ``text``, quotes included."""
    text = text.lstrip(WHITESPACE)
    quote = ""
    end = 0
    for ch in text:
        if not quote and ch in QUOTES:
            quote = ch
        elif quote and ch == quote:
            quote = ""
        elif not quote and (ch in WHITESPACE or ch in _DELIMITER_STOPS):
            break
        end += 1
    return text[:end]


def fill_heredoc(shell, heredoc, read_line=None):
    """Read lines with ``read_line`` into the here-document file until its delimiter.

    ``read_line`` takes a prompt and returns a line, or None at end of input;
    a KeyboardInterrupt from it raises HeredocInterrupted.  Unquoted
    here-documents have their variables expanded.
    """
    read_line = read_line or _read_prompt
    with open(heredoc.path, "w", encoding="utf-8") as out:
        while True:
            try:
                line = read_line(PROMPT)
            except KeyboardInterrupt:
                shell.exit_status = HeredocInterrupted.status
                print()
                raise HeredocInterrupted(heredoc.delimiter) from None
            if line is None:
                print(format_error(ErrorKind.EOOF, heredoc.delimiter, shell.line_count))
                break
            if heredoc.delimiter is None or line == heredoc.delimiter:
                break
            if not heredoc.quoted:
                line = expand_heredoc_line(shell, line)
            out.write(line + "\n")


def collect_heredocs(shell, tokens, read_line=None, directory=None):
    """Read every here-document of a validated token list, in order.

    Files are created in ``directory`` (the system temporary directory by
    default).  If reading fails, the files created so far are removed.
    """
    tokens = list(tokens)
    directory = directory if directory is not None else tempfile.gettempdir()
    heredocs = []
    try:
        for token, target in zip(tokens, tokens[1:]):
            if token != "<<":
                continue
            heredoc = Heredoc(
                delimiter=strip_quotes(extract_delimiter(target)),
                quoted=any(q in target for q in QUOTES),
                path=os.path.join(str(directory), f"{PROGRAM_NAME}{next(_serial)}"),
            )
            heredocs.append(heredoc)
            fill_heredoc(shell, heredoc, read_line)
    except BaseException:
        clean_heredocs(heredocs)
        raise
    return heredocs


def clean_heredocs(heredocs):
    """Remove the files of ``heredocs``; missing files are ignored."""
    for heredoc in heredocs:
        try:
            os.unlink(heredoc.path)
        except FileNotFoundError:
            pass