"""Fully assembled external command."""

import shlex
from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class CommandSpec:
    """A command line plus the environment overrides it runs with.

    Attributes:
        argv: Program followed by its arguments
        env: Environment variables added on top of the inherited environment
        cwd: Optional working directory
    """

    argv: list[str]
    env: dict[str, str] = field(default_factory=dict)
    cwd: Path | None = None

    def display(self) -> str:
        """Shell-quoted rendering, environment first, for logs and dry runs."""
        env_part = " ".join(f"{k}={shlex.quote(v)}" for k, v in sorted(self.env.items()))
        cmd_part = shlex.join(self.argv)
        return f"{env_part} {cmd_part}" if env_part else cmd_part
