"""Opening redirection files and creating files named by command-less blocks."""

import errno
import os
from enum import Enum
from typing import Sequence, Union

from .lexer import Token, TokenType
from .messages import E_FILE_EXIST, E_FILE_OPEN, E_FILE_PERM, print_error


class OpenMode(Enum):
    """How a redirection file is opened."""

    READ = "read"
    HEREDOC = "heredoc"
    WRITE = "write"
    APPEND = "append"
    TMP = "tmp"


_OPEN_ARGS = {
    OpenMode.READ: (os.O_RDONLY, 0o644),
    OpenMode.HEREDOC: (os.O_CREAT | os.O_WRONLY | os.O_APPEND, 0o644),
    OpenMode.WRITE: (os.O_CREAT | os.O_TRUNC | os.O_WRONLY, 0o644),
    OpenMode.APPEND: (os.O_CREAT | os.O_APPEND | os.O_RDWR, 0o644),
    OpenMode.TMP: (os.O_CREAT | os.O_EXCL | os.O_WRONLY, 0o777),
}


def open_file(path: str, mode: OpenMode) -> int:
    """Open path in the given mode and return the descriptor; raises OSError."""
    flags, permissions = _OPEN_ARGS[mode]
    return os.open(path, flags, permissions)


def block_start(tokens: Sequence[Token], index: int) -> int:
    """Index of the first token of the pipe block reaching back from index."""
    while index > 0 and tokens[index - 1].kind is not TokenType.PIPE:
        index -= 1
    return index


def file_error_message(path: str, error: Union[int, OSError]) -> str:
    """Message for a file that could not be opened."""
    code = error.errno if isinstance(error, OSError) else error
    if code == errno.EACCES:
        return E_FILE_PERM + path
    if code == errno.ENOENT:
        return E_FILE_EXIST + path
    return E_FILE_OPEN + path


def _blocks(tokens: Sequence[Token]):
    block: list = []
    for token in tokens:
        if token.kind is TokenType.PIPE:
            yield block
            block = []
        else:
            block.append(token)
    yield block


def create_orphan_files(tokens: Sequence[Token]) -> bool:
    """Open the redirection files of every pipe block that has no command.

    Output files are created (truncated); input files must exist. On the
    first failure an error is printed and False is returned.
    """
    for block in _blocks(tokens):
        has_cmd = any(token.kind is TokenType.CMD for token in block)
        has_files = any(
            token.kind in (TokenType.INFILE, TokenType.OUTFILE) for token in block
        )
        if has_cmd or not has_files:
            continue
        for token in block:
            if token.kind is TokenType.OUTFILE:
                mode = OpenMode.WRITE
            elif token.kind is TokenType.INFILE:
                mode = OpenMode.READ
            else:
                continue
            try:
                os.close(open_file(token.text, mode))
            except OSError:
                print_error(E_FILE_EXIST, token.text)
                return False
    return True