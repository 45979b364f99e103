"""Expansion of $VAR and $? references in a command line."""

from typing import Optional

from .environment import Environment
from .syntax import is_whitespace, key_length


def _isalnum(char: str) -> bool:
    return char.isascii() and char.isalnum()


def is_heredoc_delimiter(text: str, index: int) -> bool:
    """True if the word starting at index directly follows a '<<' operator."""
    if index > 0:
        index -= 1
    while index > 0 and is_whitespace(text[index]):
        index -= 1
    return index >= 1 and text[index] == "<" and text[index - 1] == "<"


def is_expandable(text: str, index: int) -> bool:
    """True if the '$' at index starts a reference that should be expanded."""
    nxt = text[index + 1] if index + 1 < len(text) else ""
    if not nxt or is_whitespace(nxt):
        return False
    if is_heredoc_delimiter(text, index):
        return False
    in_single = in_double = False
    for char in text[:index]:
        if char == "'" and not in_double:
            in_single = not in_single
        elif char == '"' and not in_single:
            in_double = not in_double
    return not (in_single or (in_double and nxt == '"'))


def expand_variables(text: Optional[str], env: Environment, exit_code: int) -> Optional[str]:
    """Replace variable references outside single quotes.

    $? becomes exit_code, $NAME its value (empty when unset), and a '$'
    followed by any other character becomes a space. Inserted values are
    not expanded again.
    """
    if text is None:
        return None
    i = 0
    while i < len(text):
        if text[i] != "$" or not is_expandable(text, i):
            i += 1
            continue
        nxt = text[i + 1]
        if nxt == "?":
            value, length = str(exit_code), 2
        elif _isalnum(nxt) or nxt == "_":
            length = key_length(text, i)
            value = env.get(text[i + 1:i + length]) or ""
        else:
            value, length = " ", 1
        text = text[:i] + value + text[i + length:]
        i += len(value)
    return text