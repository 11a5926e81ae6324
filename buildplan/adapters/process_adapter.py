"""Subprocess adapter for cargo and nextest invocations."""

import subprocess

from buildplan.core.errors import ProcessError
from buildplan.core.structlog_logger import get_struct_logger
from buildplan.invocation.command import CommandSpec
from buildplan.protocols.process_adapter_protocol import (
    ProcessAdapterProtocol,
    ProcessOutput,
)
from buildplan.utils import stream_process
from buildplan.utils.stream_process import OutputMiddleware


logger = get_struct_logger(__name__)


class LoggerOutputMiddleware(OutputMiddleware[str]):
    """Logs each output line at debug level and captures it unchanged."""

    def __init__(self, program: str) -> None:
        self.program = program

    def process(self, line: str, stream_type: str) -> str:
        logger.debug("process_output", program=self.program, stream=stream_type, line=line)
        return line


class ProcessAdapter:
    """Runs commands with streamed output and raises ``ProcessError`` on failure."""

    def run(self, command: CommandSpec) -> ProcessOutput:
        cmd_str = command.display()
        program = command.argv[0] if command.argv else ""
        logger.info("running_command", command=cmd_str)

        try:
            return_code, stdout_lines, stderr_lines = stream_process.run_command(
                command.argv,
                LoggerOutputMiddleware(program),
                env=command.env,
                cwd=command.cwd,
            )
        except FileNotFoundError as e:
            logger.error("executable_not_found", program=program, error=str(e))
            raise ProcessError(
                f"Executable not found: {program}", command.argv
            ) from e
        except (OSError, subprocess.SubprocessError) as e:
            logger.error("process_spawn_failed", command=cmd_str, error=str(e))
            raise ProcessError(
                f"Failed to run command: {e}", command.argv
            ) from e

        stdout = "\n".join(stdout_lines)
        stderr = "\n".join(stderr_lines)

        if return_code != 0:
            logger.error("command_failed", command=cmd_str, exit_code=return_code)
            raise ProcessError(
                f"Command failed: {cmd_str}",
                command.argv,
                exit_code=return_code,
                stdout=stdout,
                stderr=stderr,
            )

        logger.debug("command_succeeded", command=cmd_str, stdout_lines=len(stdout_lines))
        return ProcessOutput(exit_code=return_code, stdout=stdout, stderr=stderr)


def create_process_adapter() -> ProcessAdapterProtocol:
    """Factory function to create a ProcessAdapter instance."""
    logger.debug("creating_process_adapter")
    return ProcessAdapter()
