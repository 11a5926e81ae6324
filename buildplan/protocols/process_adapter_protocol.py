"""Protocol definition for running external processes."""

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from buildplan.invocation.command import CommandSpec


@dataclass(frozen=True)
class ProcessOutput:
    """Captured result of a finished process."""

    exit_code: int
    stdout: str
    stderr: str


@runtime_checkable
class ProcessAdapterProtocol(Protocol):
    """Protocol for running cargo and nextest invocations."""

    def run(self, command: CommandSpec) -> ProcessOutput:
        """Run ``command`` to completion and capture its output.

        Returns:
            The captured output of a successful run

        Raises:
            ProcessError: If the process fails to spawn or exits non-zero
        """
        ...
