"""Shell state and environment handling."""

import os
from dataclasses import dataclass, field

PROGRAM_NAME = "tinyshell"
WHITESPACE = "\t\f\r \v\n"
_LONG_MAX = 2**63 - 1


def env_from_list(entries):
    """Build an ordered environment mapping from ``NAME=value`` strings.

    Entries without ``=`` are kept with the value None.
    """
    env = {}
    for entry in entries:
        name, sep, value = entry.partition("=")
        env[name] = value if sep else None
    return env


def env_to_list(env):
    """Turn an environment mapping back into ``NAME=value`` strings."""
    return [name if value is None else f"{name}={value}" for name, value in env.items()]


def default_environment(cwd):
    """Return the environment used when the shell starts with an empty one."""
    return env_from_list(
        [
            "OLDPWD",
            f"PWD={cwd}",
            "SHLVL=0",
            f"_={cwd}/./{PROGRAM_NAME}",
        ]
    )


def parse_shlvl(value):
    """Return the next shell level for an inherited SHLVL value.

    A missing value gives 1; values from 1 to 1000 are incremented; larger
    values and overflowing ones reset to 1; anything with no leading digits
    (signs included) gives 0.
    """
    if value is None:
        return 1
    digits = []
    for ch in value.lstrip(WHITESPACE):
        if not ch.isdigit() or not ch.isascii():
            break
        digits.append(ch)
    number = 0
    for ch in digits:
        number = number * 10 + int(ch)
        if number > _LONG_MAX:
            return 1
    if number > 1000:
        return 1
    return number + 1 if number else 0


@dataclass
class Shell:
    """State shared by every stage of reading and running a command line."""

    env: dict = field(default_factory=dict)
    cwd: str = field(default_factory=os.getcwd)
    exit_status: int = 0
    line_count: int = 0

    def getenv(self, name):
        """Return the value of ``name``, or None when it is unset or has no value."""
        return self.env.get(name)

    def bump_shlvl(self):
        """Set SHLVL for a new shell from the inherited one and return it."""
        inherited = self.getenv("SHLVL")
        level = parse_shlvl(inherited)
        if inherited is None or level == 0:
            level = 1
        self.env["SHLVL"] = str(level)
        return level