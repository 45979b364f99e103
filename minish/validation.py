"""Rejection of empty and syntactically broken command lines."""

from .messages import (
    E_SYNTAX_NL,
    E_SYNTAX_PIPE,
    E_SYNTAX_QUOTE,
    E_SYNTAX_REDIR,
    ShellSyntaxError,
)
from .syntax import check_pipe, check_redir, empty_line, is_special_char


def has_open_quote(line: str) -> bool:
    """True if a single or double quote is never closed."""
    quote = None
    for char in line:
        if quote:
            if char == quote:
                quote = None
        elif char in ("'", '"'):
            quote = char
    return quote is not None


def find_syntax_error(line: str) -> "str | None":
    """Return the message for the first pipe or redirection error, or None."""
    stripped = line.lstrip(" ")
    if stripped.startswith("|"):
        return E_SYNTAX_PIPE
    start = len(line) - len(stripped)
    for i in range(start, len(line)):
        if not check_pipe(line, i):
            return E_SYNTAX_PIPE
        special = is_special_char(line[i])
        if special and empty_line(line[i + 1:]):
            return E_SYNTAX_NL
        if special and not check_redir(line, i):
            return E_SYNTAX_REDIR
    return None


def validate(line: str) -> bool:
    """Check a command line.

    Returns False for a blank line and True for a usable one; raises
    ShellSyntaxError for an open quote or a syntax error.
    """
    if empty_line(line):
        return False
    if has_open_quote(line):
        raise ShellSyntaxError(E_SYNTAX_QUOTE)
    message = find_syntax_error(line)
    if message is not None:
        raise ShellSyntaxError(message)
    return True