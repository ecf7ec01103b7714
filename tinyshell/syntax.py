"""Syntax checks on the token list of a command line."""

import enum
import errno
import os

SHELL_NAME = "tinyshell"
WHITESPACE = "\t\f\r \v\n"
QUOTES = "'\""


class ErrorKind(enum.Enum):
    """Kinds of error messages the shell prints."""

    EOOF = enum.auto()
    ENOENT = enum.auto()
    EACCES = enum.auto()
    SYNTAX = enum.auto()
    CMD_NOT_FOUND = enum.auto()
    DIRECT = enum.auto()
    REDIR = enum.auto()


def format_error(kind, target=None, line=None):
    """Return the message the shell prints for an error of ``kind``."""
    if kind is ErrorKind.EOOF:
        return (
            f"{SHELL_NAME}: warning: here-document at line {line} "
            f"delimited by end-of-file (wanted `{target}')"
        )
    if kind is ErrorKind.ENOENT:
        return f"{SHELL_NAME}: {target}: {os.strerror(errno.ENOENT)}"
    if kind is ErrorKind.EACCES:
        return f"{SHELL_NAME}: {target}: {os.strerror(errno.EACCES)}"
    if kind is ErrorKind.SYNTAX:
        return f"{SHELL_NAME}: syntax error near unexpected token `{target}'"
    if kind is ErrorKind.CMD_NOT_FOUND:
        return f"{target}: command not found"
    if kind is ErrorKind.DIRECT:
        return f"{SHELL_NAME}: Cannot open current working directory"
    if kind is ErrorKind.REDIR:
        return f"{SHELL_NAME}: {target}: ambiguous redirect"
    raise ValueError(f"unknown error kind: {kind!r}")


class ShellSyntaxError(ValueError):
    """A command line that is not valid shell syntax."""

    status = 2

    def __init__(self, token):
        self.token = token
        super().__init__(format_error(ErrorKind.SYNTAX, token))


def is_op(token):
    """True for control operators: one or two characters starting with & or |."""
    return bool(token) and len(token) <= 2 and token[0] in "&|"


def is_par(token):
    """True for a lone parenthesis."""
    return token in ("(", ")")


def is_red(token):
    """True for redirection operators: one or two characters starting with < or >."""
    return bool(token) and len(token) <= 2 and token[0] in "<>"


def is_word(token):
    """True for tokens that are neither operators, parentheses nor redirections."""
    if len(token) > 2:
        return True
    return not is_op(token) and not is_par(token) and not is_red(token)


def is_there_red(token):
    """True when ``token`` begins, after blanks, with a redirection or is blank."""
    rest = token.lstrip(WHITESPACE)
    return rest == "" or rest[0] in "<>"


def join_words(tokens):
    """Merge runs of adjacent word tokens into single tokens."""
    joined = []
    for token in tokens:
        if joined and is_word(joined[-1]) and is_word(token):
            joined[-1] += token
        else:
            joined.append(token)
    return joined


def pop_spaces(tokens):
    """Drop tokens made only of whitespace."""
    return [token for token in tokens if token.strip(WHITESPACE)]


def check_quotes(tokens):
    """Raise when a quoted token is not closed."""
    for token in tokens:
        if token and token[0] in QUOTES and (len(token) == 1 or token[-1] != token[0]):
            raise ShellSyntaxError("newline")


def check_parentheses(tokens):
    """Raise when parentheses are unbalanced or a ')' comes before any '('."""
    depth = 0
    seen_open = False
    for token in tokens:
        first = token[:1]
        if first == "(":
            depth += 1
            seen_open = True
        elif first == ")":
            depth -= 1
            if not seen_open:
                raise ShellSyntaxError(")")
    if depth:
        raise ShellSyntaxError("newline")


def check_syntax(tokens):
    """Raise on misplaced parentheses around commands and operators."""
    for current, following in zip(tokens, tokens[1:]):
        nxt = following.strip(WHITESPACE)
        if is_par(current) and is_par(nxt) and current != nxt:
            raise ShellSyntaxError(nxt)
        if not is_par(current) and not is_op(current) and nxt == "(":
            raise ShellSyntaxError(nxt)
        if not is_par(current) and is_op(current) and nxt == ")":
            raise ShellSyntaxError(nxt)
        if current == ")" and not is_op(nxt) and not is_par(nxt) and not is_there_red(nxt):
            raise ShellSyntaxError(nxt)
        if current == "(" and is_op(nxt):
            raise ShellSyntaxError(nxt)


def _second_word(text):
    """Return the second blank-separated word of ``text``, or None if there is none."""
    stripped = text.strip(WHITESPACE)
    quote = ""
    pos = 0
    while pos < len(stripped):
        ch = stripped[pos]
        if ch in QUOTES and not quote:
            quote = ch
        elif ch in QUOTES and quote == ch:
            quote = ""
        elif not quote and ch in WHITESPACE:
            pos += 1
            break
        pos += 1
    if pos >= len(stripped):
        return None
    word = []
    quote = ""
    for ch in stripped[pos:]:
        if ch in QUOTES and not quote:
            quote = ch
        elif ch in QUOTES and quote == ch:
            quote = ""
        elif not quote and ch in WHITESPACE:
            break
        word.append(ch)
    return "".join(word)


def check_redirections(tokens):
    """Raise on redirections without a target or followed by extra words after ')'."""
    for index, current in enumerate(tokens):
        following = tokens[index + 1] if index + 1 < len(tokens) else None
        if is_red(current) and following is None:
            raise ShellSyntaxError("newline")
        if following is None:
            continue
        if is_red(current) and (is_op(following) or is_red(following)):
            raise ShellSyntaxError(following)
        if current == ")" and is_red(following) and index + 2 < len(tokens):
            extra = _second_word(tokens[index + 2])
            if extra is not None:
                raise ShellSyntaxError(extra)


def check_operators(tokens):
    """Raise on a lone '&', doubled operators, or an operator at the end."""
    for index, current in enumerate(tokens):
        rest = tokens[index + 1:]
        if current == "&":
            raise ShellSyntaxError("&")
        if not is_op(current):
            continue
        if not rest:
            raise ShellSyntaxError("newline")
        if is_op(rest[0]):
            raise ShellSyntaxError(rest[0])
        if not rest[0].strip(WHITESPACE) and len(rest) > 1 and is_op(rest[1]):
            raise ShellSyntaxError(rest[1])


def validate(tokens):
    """Run every check on ``tokens`` and return the joined, space-free token list."""
    tokens = list(tokens)
    if tokens and is_op(tokens[0]):
        raise ShellSyntaxError(tokens[0])
    check_quotes(tokens)
    check_parentheses(tokens)
    tokens = pop_spaces(join_words(tokens))
    check_syntax(tokens)
    check_redirections(tokens)
    check_operators(tokens)
    return tokens