# tinyshell

The parsing half of a small interactive shell, as a Python library. It
checks the syntax of a command line, reads its here-documents and turns it
into a tree of command and operator nodes. It also provides the variable and
wildcard expansion a POSIX-like shell applies to words.

## Modules

- **`tinyshell.tokenizer`**: `tokenize(text, delims)` yields the tokens of a
  line. These are quoted strings, operators (`|`, `||`, `&`, `&&`, `<`,
  `<<`, `>`, `>>`), single-character delimiters and the words between them.
  Joining the tokens gives back the original text. Two delimiter sets are
  provided: `CHECK_DELIMS` and `PARSE_DELIMS`.
- **`tinyshell.syntax`**: `validate(tokens)` runs every check and returns
  the token list with adjacent words joined and blank tokens removed. The
  checks are `check_quotes`, `check_parentheses`, `check_syntax`,
  `check_redirections` and `check_operators`, and each can also be called on
  its own. An invalid line raises `ShellSyntaxError` (a `ValueError` with
  `status = 2`) carrying the offending token. Its message looks like
  ``tinyshell: syntax error near unexpected token `|'``.
  `format_error(kind, target, line)` builds the messages for every
  `ErrorKind`.
- **`tinyshell.environment`**: `Shell` is a dataclass holding `env`, `cwd`,
  `exit_status` and `line_count`.
  - `Shell.getenv(name)` looks a variable up.
  - `Shell.bump_shlvl()` sets `SHLVL` for a new shell level.
  - `env_from_list` and `env_to_list` convert between `NAME=value` strings and
    a mapping.
  - `default_environment(cwd)` and `parse_shlvl(value)` complete the module.
- **`tinyshell.quotes`**: `Char` is a character tagged with whether it came
  from an expansion, which makes any quotes it holds literal. The module also
  has `remove_quotes`, `strip_quotes`, `remove_quotes_from_chars` and
  `split_words`, which splits on unquoted whitespace.
- **`tinyshell.wildcard`**: `match_pattern(pattern, name)` matches patterns
  where `*` stands for any run of characters.
  - `glob_directory(pattern, directory)` returns the sorted matching entries.
    Names starting with a dot match only when the pattern starts with one.
  - `expand_wildcards(text, chars, directory)` replaces unquoted `*` words in
    a line. A word with no match is kept as written.
- **`tinyshell.expansion`**: `expand(shell, text, directory)` expands `$NAME`
  and `$?`, then wildcards, and returns the list of words. Single quotes
  protect their contents and double quotes keep spaces. The lower-level
  functions are `breakdown`, `expand_variable` and `var_name_length`.
  `expand_heredoc_line(shell, line)` expands variables in a here-document
  line, where quotes are not special.
- **`tinyshell.heredoc`**: `collect_heredocs(shell, tokens, read_line,
  directory)` reads the body of each `<<` in a validated token list.
  - `read_line` is a callable that takes a prompt and returns a line, or
    `None` at end of input. The default reads with `input()`.
  - Each body is written to a file in `directory`, which defaults to the
    system temporary directory, and is returned as a `Heredoc`.
  - Quoted delimiters turn off expansion.
  - A `KeyboardInterrupt` while reading raises `HeredocInterrupted`, and the
    files created so far are removed.
  - `clean_heredocs(heredocs)` deletes the files.
- **`tinyshell.parser`**: `parse_line(shell, line, read_line, directory)`
  validates a line, reads its here-documents and returns `(nodes, heredocs)`.
  It returns `None` for an empty line.
  - Each `Node` has a `content`, a `NodeType` (`CMD`, `PIPE`, `AND`, `OR`,
    `TRUNC`, `READ`, `APPEND`, `HEREDOC`, `SUBSHELL`) and `children`.
  - A parenthesised group becomes a `SUBSHELL` node whose children are the
    nodes inside it.
  - The tree always starts with `true` and `&&`.
  - Node contents are the raw words of the line: call `expand` on them to
    substitute variables and wildcards.
  - `validate_line` does only the checking and here-document part. On a syntax
    error it sets `shell.exit_status` to 2.
  - `build_ast(tokens)` and `define_type(content)` are also available.
- **`tinyshell.printfd`**: `format_printf(fmt, *args)` is a small printf that
  supports `%c %s %d %i %u %x %X %p %%` with 32-bit integer semantics.
  `printfd(stream, fmt, *args)` writes the result to a stream and returns
  its length.
- **`tinyshell.linereader`**: `iter_lines(stream, buffer_size)` yields the
  lines of a text or binary stream, read in fixed-size chunks.
  `read_file(path)` returns the lines of a file, with newlines kept.

## Example

```python
from tinyshell.environment import Shell, env_from_list
from tinyshell.expansion import expand
from tinyshell.parser import NodeType, parse_line

shell = Shell(env=env_from_list(["HOME=/home/user"]))
nodes, heredocs = parse_line(shell, "echo $HOME && (ls | wc -l)")
for node in nodes:
    if node.type is NodeType.SUBSHELL:
        print("subshell:", [child.content for child in node.children])
    else:
        print(node.type.name, expand(shell, node.content))
```

## What it does not do

This package stops at the parsed and expanded command line. It has no prompt
loop and no command to start, and it does not run anything. There are no
pipelines, no process handling, no redirections applied to files, and no
builtins such as `cd`, `echo`, `export` or `exit`.

## Installing and testing

```
pip install .
pip install ".[test]"
pytest
```