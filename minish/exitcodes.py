"""Exit statuses of finished commands and messages for commands that fail to start."""

import errno
import os
from typing import Union

from .messages import E_CMD_NF, E_FILE_DIR, E_FILE_EXIST, E_FILE_PERM


def exit_code_from_returncode(returncode: int) -> int:
    """Shell status of a child process.

    A normal exit keeps its status; death by a signal gives 128 plus the
    signal number (a negative returncode is how subprocess reports it).
    """
    if returncode >= 0:
        return returncode
    return 128 - returncode


def exit_code_for_error(error: Union[int, OSError]) -> int:
    """Status for a command that could not run: 127 if missing, 126 if not permitted, else 1."""
    code = error.errno if isinstance(error, OSError) else error
    if code == errno.ENOENT:
        return 127
    if code == errno.EACCES:
        return 126
    return 1


def command_error_message(command: str) -> str:
    """Message explaining why command could not be executed.

    Names containing a slash are checked as paths: missing, not executable,
    or otherwise taken to be a directory. Other names are reported as not found.
    """
    if "/" not in command:
        return E_CMD_NF + command
    if not os.path.lexists(command):
        return E_FILE_EXIST + command
    if not os.access(command, os.X_OK):
        return E_FILE_PERM + command
    return E_FILE_DIR + command