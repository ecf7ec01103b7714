"""Turn a command line into a tree of nodes."""

import enum
from dataclasses import dataclass, field

from tinyshell.heredoc import collect_heredocs
from tinyshell.syntax import ShellSyntaxError, join_words, pop_spaces, validate
from tinyshell.tokenizer import CHECK_DELIMS, PARSE_DELIMS, tokenize


class NodeType(enum.Enum):
    """What a node of the command tree stands for."""

    SUBSHELL = enum.auto()
    OR = enum.auto()
    AND = enum.auto()
    PIPE = enum.auto()
    TRUNC = enum.auto()
    READ = enum.auto()
    APPEND = enum.auto()
    HEREDOC = enum.auto()
    CMD = enum.auto()


_OPERATOR_TYPES = {
    "||": NodeType.OR,
    "&&": NodeType.AND,
    "|": NodeType.PIPE,
    ">": NodeType.TRUNC,
    "<": NodeType.READ,
    ">>": NodeType.APPEND,
    "<<": NodeType.HEREDOC,
}


def define_type(content):
    """Return the node type for a token; None stands for a subshell."""
    if content is None:
        return NodeType.SUBSHELL
    return _OPERATOR_TYPES.get(content, NodeType.CMD)


@dataclass
class Node:
    """A token of the command tree; subshells hold their nodes as children."""

    content: str | None
    children: list = field(default_factory=list)
    type: NodeType = field(init=False)

    def __post_init__(self):
        self.type = define_type(self.content)


def _build(tokens):
    nodes = []
    for token in tokens:
        if token == "(":
            nodes.append(Node(None, _build(tokens)))
        elif token == ")":
            return nodes
        else:
            nodes.append(Node(token))
    return nodes


def build_ast(tokens):
    """Build the list of top-level nodes; parenthesised runs become subshells."""
    return _build(iter(tokens))


def validate_line(shell, line, read_line=None, directory=None):
    """Check the syntax of ``line`` and read its here-documents.

    Raises ShellSyntaxError, setting the shell's exit status to 2, when the
    line is invalid.  Returns the here-documents read.
    """
    if not line:
        return []
    try:
        tokens = validate(tokenize(line, CHECK_DELIMS))
    except ShellSyntaxError:
        shell.exit_status = ShellSyntaxError.status
        raise
    return collect_heredocs(shell, tokens, read_line, directory)


def parse_line(shell, line, read_line=None, directory=None):
    """Validate ``line`` and build its command tree.

    Returns ``(nodes, heredocs)``, or None for an empty line.  The tree is
    prefixed with ``true &&`` so that every command follows an operator.
    """
    if not line:
        return None
    heredocs = validate_line(shell, line, read_line, directory)
    tokens = ["true", "&&", *tokenize(line, PARSE_DELIMS)]
    tokens = pop_spaces(join_words(tokens))
    return build_ast(tokens), heredocs