"""Character-level checks used when validating and formatting command lines."""

from enum import IntEnum

_WHITESPACE = frozenset(" \t\n\v\f\r")
_QUOTES = frozenset("'\"")


class SpecialChar(IntEnum):
    """Kind of a shell metacharacter; NONE is falsy."""

    INVALID = -1
    NONE = 0
    PIPE = 1
    REDIR = 2


def _isalnum(char: str) -> bool:
    return char.isascii() and char.isalnum()


def _at(text: str, index: int) -> str:
    return text[index] if 0 <= index < len(text) else ""


def is_whitespace(char: str) -> bool:
    """True for space, tab, newline, vertical tab, form feed and carriage return."""
    return char != "" and char in _WHITESPACE


def is_special_char(char: str) -> SpecialChar:
    """Classify one character as a pipe, a redirection or neither."""
    if char == "|":
        return SpecialChar.PIPE
    if char in ("<", ">") and char != "":
        return SpecialChar.REDIR
    return SpecialChar.NONE


def is_quoted(text: str, index: int) -> str:
    """Return the quote character enclosing position index, or an empty string."""
    before = text[:index]
    if before.count("'") % 2:
        return "'"
    if before.count('"') % 2:
        return '"'
    return ""


def is_special_symbol(text: str, start: int) -> SpecialChar:
    """Classify the run of metacharacters starting at start.

    Returns INVALID when the run mixes different metacharacters, except
    when a pipe is directly followed by a redirection.
    """
    word = text[start:]
    for i, char in enumerate(word):
        if not is_special_char(char) or char == " ":
            break
        if i > 0 and char != word[i - 1] and not is_quoted(word, i) and word[i - 1] != "|":
            return SpecialChar.INVALID
    return is_special_char(_at(word, 0))


def check_pipe(text: str, index: int) -> bool:
    """False if an unquoted pipe at index is followed by an invalid character or a pipe."""
    if _at(text, index) != "|" or is_quoted(text, index):
        return True
    index += 1
    char = _at(text, index)
    if char and char != " " and not _isalnum(char) and not is_special_char(char):
        return False
    while _at(text, index) == " ":
        index += 1
    return _at(text, index) != "|"


def check_redir(text: str, index: int) -> bool:
    """False if an unquoted redirection at index is malformed."""
    if is_quoted(text, index):
        return True
    kind = is_special_symbol(text, index)
    if kind is SpecialChar.INVALID:
        return False
    if kind is SpecialChar.REDIR:
        length = 0
        while is_special_char(_at(text, index)):
            length += 1
            if length > 2:
                return False
            index += 1
        while _at(text, index) == " ":
            index += 1
        if is_special_char(_at(text, index)):
            return False
    return True


def empty_line(text: str) -> bool:
    """True if text holds only whitespace."""
    return all(char in _WHITESPACE for char in text)


def missing_space_before(text: str, index: int) -> bool:
    """True if the metacharacter at index needs a space inserted before it."""
    if index == 0 or is_quoted(text, index):
        return False
    prev = text[index - 1]
    return prev != " " and not is_special_char(prev) and prev not in _QUOTES


def missing_space_after(text: str, index: int) -> bool:
    """True if the metacharacter at index needs a space inserted after it."""
    nxt = _at(text, index + 1)
    if nxt == "" or is_quoted(text, index):
        return False
    if nxt != " " and not is_special_char(nxt) and nxt not in _QUOTES:
        return True
    if nxt in _QUOTES:
        return True
    return bool(is_special_char(nxt)) and text[index] != nxt


def count_missing_spaces(text: str) -> int:
    """Number of spaces needed to separate every metacharacter from its neighbours."""
    return sum(
        missing_space_before(text, i) + missing_space_after(text, i)
        for i, char in enumerate(text)
        if is_special_char(char)
    )


def key_length(text: str, index: int) -> int:
    """Length of the variable reference starting with the '$' at index."""
    length = 1
    while True:
        char = _at(text, index + length)
        if not char or not (_isalnum(char) or char == "_"):
            return length
        length += 1