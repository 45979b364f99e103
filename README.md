# minish

Building blocks of a small command shell. The package checks a command line for
syntax errors, spaces out and expands it, splits it into typed tokens, looks
commands up through `PATH`, and opens the files named by output redirections.

## What it does not do

The package has no interactive prompt and installs no command. It does not run
commands or pipelines, does not read here-documents, and does not decide where
a command's input comes from. It covers the steps before execution, plus
output-file handling, exit-status helpers and signal handlers.

## Installation

```
pip install .
```

## Modules

- `minish.validation` – `validate(line)` returns `False` for a blank line and
  `True` for a usable one, and raises `minish.messages.ShellSyntaxError` for an
  unclosed quote, a stray pipe or a malformed redirection.
  `has_open_quote` and `find_syntax_error` expose the two checks.
- `minish.syntax` – character-level checks (`is_special_char`, `is_quoted`,
  `check_pipe`, `check_redir`, `missing_space_before`, ...). `SpecialChar` is
  the kind of a metacharacter.
- `minish.environment` – `Environment`, an ordered mapping of variables built
  with `Environment.from_strings`. It has `get`, `set`, `unset` and
  `to_strings`. Iterating over it yields `EnvVar` items. When it is built from
  no strings at all, it starts with `PWD` set and `OLDPWD` declared without a
  value.
- `minish.expansion` – `expand_variables(text, env, exit_code)` replaces `$NAME`
  and `$?` outside single quotes. A word right after `<<` is left alone.
- `minish.formatting` – `add_spaces` separates unquoted `|`, `<` and `>` from
  their neighbours. `normalize_line` does that and then expands variables.
- `minish.words` – `split_words` splits on a separator and keeps quoted
  sections whole. `remove_quotes` strips the quotes.
- `minish.lexer` – `tokenize(line, env, exit_code)` returns a list of `Token`
  items (`text`, `kind`), where `kind` is a `TokenType`. `classify` types words
  that are already split.
- `minish.pathsearch` – `resolve_command(name, env)` returns the first
  executable `dir/name` along `PATH`. If none is found, it returns `name`.
- `minish.exitcodes` – `exit_code_from_returncode` (a signal death becomes
  128 + the signal number), `exit_code_for_error` (127 for a missing command,
  126 for one that is not permitted, 1 otherwise) and `command_error_message`.
- `minish.files` – `open_file(path, mode)` with an `OpenMode`,
  `file_error_message`, `block_start`, and `create_orphan_files`. The last
  opens the files of pipe blocks that have no command.
- `minish.redirect_out` – `resolve_output(tokens, index, piped)` returns an
  `OutputTarget` of kind `FILE`, `PIPE`, `STDOUT` or `INVALID`. The target is
  usable as a context manager that closes its descriptor.
- `minish.signals` – `SignalState` and installers for handlers at the prompt
  (`install_prompt_handlers`), while commands run (`install_exec_handlers`) and
  while a here-document is read (`install_heredoc_handlers`).
- `minish.messages` – the error message texts, `format_error`, `print_error`
  and `ShellSyntaxError`.

## Example

```python
from minish.environment import Environment
from minish.expansion import expand_variables
from minish.lexer import tokenize
from minish.validation import validate
from minish.words import remove_quotes, split_words

env = Environment.from_strings(["HOME=/home/user"])

line = "echo $HOME>out.txt"
if validate(line):
    for token in tokenize(line, env, 0):
        print(token.text, token.kind.name)
# echo CMD
# /home/user ARG
# > OUTPUT
# out.txt OUTFILE

print(expand_variables("echo '$HOME' \"$?\"", env, 1))
# echo '$HOME' "1"

print([remove_quotes(w) for w in split_words("echo 'a b' c")])
# ['echo', 'a b', 'c']
```

## Running the tests

```
pip install ".[test]"
pytest
```