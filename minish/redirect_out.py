"""Choosing where a command writes its output."""

import os
from dataclasses import dataclass
from enum import Enum
from itertools import takewhile
from typing import Iterator, Optional, Sequence, Tuple

from .files import OpenMode, block_start, file_error_message, open_file
from .lexer import Token, TokenType
from .messages import print_error

_REDIRECTIONS = (TokenType.OUTPUT, TokenType.APPEND)


class OutputKind(Enum):
    """Where a command's standard output goes."""

    STDOUT = "stdout"
    PIPE = "pipe"
    FILE = "file"
    INVALID = "invalid"


@dataclass
class OutputTarget:
    """Resolved output of a command; fd is an open descriptor for files."""

    kind: OutputKind
    path: Optional[str] = None
    fd: Optional[int] = None

    @property
    def ok(self) -> bool:
        """False when the output could not be set up."""
        return self.kind is not OutputKind.INVALID

    def close(self) -> None:
        """Close the descriptor if one is held."""
        if self.fd is not None:
            os.close(self.fd)
            self.fd = None

    def __enter__(self) -> "OutputTarget":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def _block(tokens: Sequence[Token], index: int) -> Iterator[Tuple[int, Token]]:
    start = block_start(tokens, index)
    return takewhile(
        lambda pair: pair[1].kind is not TokenType.PIPE,
        enumerate(tokens[start:], start),
    )


def _mode_for(tokens: Sequence[Token], index: int) -> OpenMode:
    operator = tokens[index - 1].kind if index > 0 else None
    if operator is TokenType.OUTPUT:
        return OpenMode.WRITE
    if operator is TokenType.APPEND:
        return OpenMode.APPEND
    raise ValueError(f"output file {tokens[index].text!r} has no redirection operator")


def count_output_redirections(tokens: Sequence[Token]) -> int:
    """Number of '>' and '>>' operators among tokens."""
    return sum(token.kind in _REDIRECTIONS for token in tokens)


def is_last_output_redirection(tokens: Sequence[Token], index: int) -> bool:
    """True if index is the last '>' or '>>' operator of the whole line."""
    last = next(
        (i for i in reversed(range(len(tokens))) if tokens[i].kind in _REDIRECTIONS),
        None,
    )
    return last == index


def create_outfiles(tokens: Sequence[Token], index: int) -> None:
    """Create output files from the start of the block holding index.

    Stops at the last output redirection of the line, at the first token
    that is not an output file, or at the first file that cannot be opened.
    """
    start = block_start(tokens, index)
    for i, token in enumerate(tokens[start:], start):
        if is_last_output_redirection(tokens, i):
            return
        if token.kind is TokenType.INFILE:
            try:
                os.close(open_file(token.text, OpenMode.READ))
            except OSError:
                pass
            return
        if token.kind is not TokenType.OUTFILE:
            return
        try:
            os.close(open_file(token.text, _mode_for(tokens, i)))
        except (OSError, ValueError):
            return


def resolve_output(tokens: Sequence[Token], index: int, piped: bool) -> OutputTarget:
    """Decide the output of the command at index.

    Every output file of the block is created in order until an input file
    fails to open; the last one created wins over the pipe, and the pipe
    over the terminal. A file that cannot be created is reported and gives
    an INVALID target.
    """
    if count_output_redirections(tokens[index:]) > 1:
        create_outfiles(tokens, index)
    target: Optional[int] = None
    for i, token in _block(tokens, index):
        if token.kind is TokenType.INFILE:
            try:
                os.close(open_file(token.text, OpenMode.READ))
            except OSError:
                break
        elif token.kind is TokenType.OUTFILE:
            try:
                os.close(open_file(token.text, _mode_for(tokens, i)))
            except OSError as exc:
                print_error(file_error_message(token.text, exc))
                return OutputTarget(OutputKind.INVALID, token.text)
            target = i

    if target is not None:
        path = tokens[target].text
        try:
            return OutputTarget(
                OutputKind.FILE, path, open_file(path, _mode_for(tokens, target))
            )
        except OSError:
            return OutputTarget(OutputKind.INVALID, path)
    start = block_start(tokens, index)
    if piped and any(token.kind is TokenType.PIPE for token in tokens[start:]):
        return OutputTarget(OutputKind.PIPE)
    return OutputTarget(OutputKind.STDOUT)