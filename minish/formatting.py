"""Normalisation of a raw command line before it is split into words."""

from .environment import Environment
from .expansion import expand_variables
from .syntax import (
    is_special_char,
    is_whitespace,
    missing_space_after,
    missing_space_before,
)


def add_spaces(text: str) -> str:
    """Turn whitespace into spaces and separate unquoted metacharacters with spaces."""
    out = []
    for i, char in enumerate(text):
        if is_whitespace(char):
            out.append(" ")
        elif is_special_char(char):
            if missing_space_before(text, i):
                out.append(" ")
            out.append(char)
            if missing_space_after(text, i):
                out.append(" ")
        else:
            out.append(char)
    return "".join(out)


def normalize_line(text: str, env: Environment, exit_code: int) -> str:
    """Space out metacharacters, then expand variables."""
    return expand_variables(add_spaces(text), env, exit_code)