"""Process execution and streaming output handling.

This module runs subprocesses and feeds each output line through a middleware
object while the process is still running, so long cargo builds show up in the
logs as they happen.

Example:
    ```python
    from buildplan.utils.stream_process import run_command, CollectingMiddleware

    return_code, stdout, stderr = run_command(
        ["cargo", "nextest", "list"], CollectingMiddleware()
    )
    ```
"""

import os
import shlex
import subprocess
from collections.abc import Mapping
from pathlib import Path
from threading import Thread
from typing import Any, Generic, TypeAlias, TypeVar, cast


T = TypeVar("T")  # Type of processed output

# (return_code, stdout, stderr)
ProcessResult: TypeAlias = tuple[int, list[T], list[T]]


class OutputMiddleware(Generic[T]):
    """Base class for processing command output streams.

    Type parameter T is the type returned by ``process``. Returning ``None``
    drops the line from the captured output.
    """

    def process(self, line: str, stream_type: str) -> T:
        """Process a line of output from a subprocess stream.

        Args:
            line: A line of text from the process output, without line ending
            stream_type: Either "stdout" or "stderr"
        """
        raise NotImplementedError()


class CollectingMiddleware(OutputMiddleware[str]):
    """Middleware that captures lines unchanged."""

    def process(self, line: str, stream_type: str) -> str:
        return line


def run_command(
    cmd: str | list[str],
    middleware: OutputMiddleware[T] | None = None,
    env: Mapping[str, str] | None = None,
    cwd: Path | None = None,
) -> ProcessResult[T]:
    """Run a command and process its output through middleware.

    Args:
        cmd: Command to run, either as a string or list of arguments
        middleware: Optional middleware for processing output
        env: Variables added on top of the current environment
        cwd: Working directory for the process

    Returns:
        Tuple of return code, processed stdout lines and processed stderr lines

    Raises:
        FileNotFoundError: If the program does not exist
        OSError: If the process cannot be spawned
    """
    if middleware is None:
        middleware = cast(OutputMiddleware[T], CollectingMiddleware())

    if isinstance(cmd, str):
        cmd = shlex.split(cmd)

    process_env = None
    if env:
        process_env = dict(os.environ)
        process_env.update(env)

    process = subprocess.Popen(
        cmd,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=True,
        bufsize=1,
        env=process_env,
        cwd=cwd,
        encoding="utf-8",
        errors="replace",
    )

    def stream_output(stream: Any, stream_type: str) -> list[T]:
        captured: list[T] = []
        for line in iter(stream.readline, ""):
            if line:
                processed = middleware.process(line.rstrip("\r\n"), stream_type)
                if processed is not None:
                    captured.append(processed)
        stream.close()
        return captured

    stdout_lines: list[T] = []
    stderr_lines: list[T] = []

    stdout_thread = Thread(
        target=lambda: stdout_lines.extend(stream_output(process.stdout, "stdout")),
        daemon=True,
    )
    stderr_thread = Thread(
        target=lambda: stderr_lines.extend(stream_output(process.stderr, "stderr")),
        daemon=True,
    )

    stdout_thread.start()
    stderr_thread.start()

    return_code = process.wait()

    stdout_thread.join()
    stderr_thread.join()

    return return_code, stdout_lines, stderr_lines
