"""Lookup of commands in the directories listed by PATH."""

import os
from typing import Optional

from .environment import Environment


def path_entry(env: Environment) -> Optional[str]:
    """The value of PATH, or None if it is not set."""
    return env.get("PATH")


def resolve_command(name: str, env: Environment) -> str:
    """Full path of the first executable dir/name along PATH.

    Empty PATH entries are skipped. When nothing matches, or PATH is
    missing or empty, name is returned unchanged.
    """
    value = path_entry(env)
    if not value:
        return name
    for directory in (entry for entry in value.split(":") if entry):
        candidate = f"{directory}/{name}"
        if os.access(candidate, os.F_OK | os.X_OK):
            return candidate
    return name