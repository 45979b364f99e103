"""The shell's own copy of the process environment."""

import os
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional


@dataclass(frozen=True)
class EnvVar:
    """One environment variable; a value of None means declared but unset."""

    key: str
    value: Optional[str]

    @property
    def entry(self) -> Optional[str]:
        """The KEY=VALUE form, or None when the variable has no value."""
        if self.value is None:
            return None
        return f"{self.key}={self.value}"


class Environment:
    """Ordered mapping of environment variables.

    Assigning to an existing key keeps its position; new keys go last.
    """

    def __init__(self) -> None:
        self._vars: dict = {}

    @classmethod
    def from_strings(cls, strings: Iterable[str]) -> "Environment":
        """Build from KEY=VALUE strings.

        With no strings at all, the environment starts with PWD set to the
        current directory and OLDPWD declared without a value.
        """
        env = cls()
        for entry in strings:
            key, sep, value = entry.partition("=")
            env.set(key, value if sep else None)
        if not env._vars:
            try:
                cwd: Optional[str] = os.getcwd()
            except OSError:
                cwd = None
            env.set("PWD", cwd)
            env.set("OLDPWD", None)
        return env

    def get(self, key: str) -> Optional[str]:
        """Value of key, or None if it is missing or has no value."""
        return self._vars.get(key)

    def set(self, key: str, value: Optional[str]) -> None:
        """Assign value to key."""
        self._vars[key] = value

    def unset(self, key: str) -> None:
        """Remove key; missing keys are ignored."""
        self._vars.pop(key, None)

    def to_strings(self) -> list:
        """KEY=VALUE strings for every variable that has a value, in order."""
        return [var.entry for var in self if var.value is not None]

    def __contains__(self, key: object) -> bool:
        return key in self._vars

    def __len__(self) -> int:
        return len(self._vars)

    def __iter__(self) -> Iterator[EnvVar]:
        return (EnvVar(key, value) for key, value in self._vars.items())