"""Parsing front end of a small shell: tokens, syntax checks, expansion, here-documents and a command tree."""

__version__ = "0.1.0"

__all__ = [
    "environment",
    "expansion",
    "heredoc",
    "linereader",
    "parser",
    "printfd",
    "quotes",
    "syntax",
    "tokenizer",
    "wildcard",
]