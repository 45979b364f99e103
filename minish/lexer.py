"""Splitting a command line into typed tokens."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Optional

from .environment import Environment
from .formatting import normalize_line
from .words import split_words


class TokenType(IntEnum):
    """Role of a word on the command line."""

    INFILE = 0
    OUTFILE = 1
    INPUT = 2
    HEREDOC = 3
    DELIM = 4
    OUTPUT = 5
    APPEND = 6
    PIPE = 7
    CMD = 8
    ARG = 9
    OPTION = 10
    REDIR = 11


@dataclass
class Token:
    """A word of the command line and its role."""

    text: str
    kind: TokenType


_OPERATORS = {
    "<<": TokenType.HEREDOC,
    "<": TokenType.INPUT,
    ">>": TokenType.APPEND,
    ">": TokenType.OUTPUT,
    "|": TokenType.PIPE,
}

_FILE_AFTER = {
    TokenType.INPUT: TokenType.INFILE,
    TokenType.OUTPUT: TokenType.OUTFILE,
    TokenType.APPEND: TokenType.OUTFILE,
    TokenType.HEREDOC: TokenType.DELIM,
}


def classify(words: Iterable[str]) -> list:
    """Assign a TokenType to every word.

    Operators come first, then the files that follow redirections. A word
    at the start or right after an operator or file is a command; only the
    first command of each pipe block stays one, the rest are arguments.
    Remaining words are options when they start with '-', else arguments.
    """
    words = list(words)
    kinds: list = [_OPERATORS.get(word) for word in words]

    for i in range(1, len(words)):
        prev: Optional[TokenType] = kinds[i - 1]
        if prev in _FILE_AFTER:
            kinds[i] = _FILE_AFTER[prev]

    for i in reversed(range(len(words))):
        if kinds[i] is None and (i == 0 or kinds[i - 1] is not None):
            kinds[i] = TokenType.CMD

    for i, word in enumerate(words):
        if kinds[i] is None:
            kinds[i] = TokenType.OPTION if word.startswith("-") else TokenType.ARG

    seen_cmd = False
    for i, kind in enumerate(kinds):
        if kind is TokenType.PIPE:
            seen_cmd = False
        elif kind is TokenType.CMD:
            if seen_cmd:
                kinds[i] = TokenType.ARG
            seen_cmd = True

    return [Token(word, kind) for word, kind in zip(words, kinds)]


def tokenize(line: str, env: Environment, exit_code: int) -> list:
    """Normalise, expand and split a validated line into tokens.

    Quotes are kept in the token text. A line that expands to nothing
    gives an empty list.
    """
    formatted = normalize_line(line, env, exit_code)
    if not formatted:
        return []
    return classify(split_words(formatted, " "))