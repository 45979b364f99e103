"""Error messages of the shell and helpers to build and print them."""

import sys

E_SYNTAX_REDIR = "minishell: syntax error near angle brackets"
E_SYNTAX_PIPE = "minishell: syntax error near pipe"
E_SYNTAX_QUOTE = "minishell: syntax error near quote"
E_SYNTAX_NL = "minishell: syntax error near newline"

E_FILE_OPEN = "minishell: error opening file: "
E_FILE_EXIST = "minishell: no such file or directory: "
E_FILE_PERM = "minishell: permission denied: "
E_FILE_DIR = "minishell: is a directory: "

E_CMD_NF = "minishell: command not found: "

E_EXPORT_ID = "minishell: export: not a valid identifier: "
E_EXIT_ARGC = "minishell: exit: too many arguments"
E_EXIT_NUM = "minishell: exit: numeric argument required"

E_ENV_ARGC = "minishell: env: too many arguments"

E_MALLOC = "minishell: malloc error"
E_PIPE = "minishell: pipe error"
E_FORK = "minishell: fork error"

E_DELIM = (
    "minishell: warning: here-document delimited by end-of-file (wanted '"
)

E_CD_HOME = "minishell: cd: HOME not set"
E_CD_DIR = "minishell: error retrieving current directory"
E_CD_ARGC = "minishell: cd: too many arguments"

EMPTY_HEREDOC = "empty_heredoc_file"

INT_64_MAX = "9223372036854775807"
INT_64_MIN = "9223372036854775808"


class ShellSyntaxError(Exception):
    """Raised when a command line is rejected before it is parsed."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


def format_error(*args: "str | None") -> "str | None":
    """Join the non-empty parts of a message; None if the first part is missing."""
    if not args or args[0] is None:
        return None
    return "".join(part for part in args if part is not None)


def print_error(*args: "str | None") -> None:
    """Write a message built by format_error, followed by a newline, to stderr."""
    message = format_error(*args)
    if message is None:
        return
    sys.stderr.write(message + "\n")
    sys.stderr.flush()