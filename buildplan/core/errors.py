"""Error hierarchy for buildplan.

Every failure raised while resolving a build plan is fatal for the request it
belongs to. The errors carry enough context (raw content, command, captured
output) for the pipeline step to report the cause without re-running anything.
"""

from typing import Any


class BuildPlanError(Exception):
    """Base class for all buildplan errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context: dict[str, Any] = context or {}


class ConfigError(BuildPlanError):
    """Invalid or unreadable configuration."""


class ParseError(BuildPlanError):
    """Malformed JSON or JSON-lines input.

    Attributes:
        content: The offending raw text (whole document or single line)
        cause: The underlying decoding/validation error
    """

    def __init__(
        self,
        message: str,
        content: str,
        cause: Exception | None = None,
        line_number: int | None = None,
    ) -> None:
        context: dict[str, Any] = {"content": content}
        if line_number is not None:
            context["line_number"] = line_number
        super().__init__(message, context)
        self.content = content
        self.cause = cause
        self.line_number = line_number

    def __str__(self) -> str:
        parts = [self.message]
        if self.line_number is not None:
            parts.append(f"line {self.line_number}: {self.content}")
        else:
            parts.append(f"content: {_truncate(self.content)}")
        if self.cause is not None:
            parts.append(f"error: {self.cause}")
        return "\n".join(parts)


class SchemaError(BuildPlanError):
    """Well-formed JSON missing an expected structural key."""

    def __init__(self, message: str, content: str, missing_key: str | None = None) -> None:
        super().__init__(message, {"missing_key": missing_key})
        self.content = content
        self.missing_key = missing_key


class ProcessError(BuildPlanError):
    """An external invocation failed to spawn or exited non-zero."""

    def __init__(
        self,
        message: str,
        command: list[str],
        exit_code: int | None = None,
        stdout: str = "",
        stderr: str = "",
    ) -> None:
        super().__init__(message, {"command": command, "exit_code": exit_code})
        self.command = command
        self.exit_code = exit_code
        self.stdout = stdout
        self.stderr = stderr

    def __str__(self) -> str:
        text = f"{self.message} (exit code: {self.exit_code})"
        if self.stderr:
            text += f"\nstderr:\n{_truncate(self.stderr)}"
        return text


def _truncate(text: str, limit: int = 500) -> str:
    return text if len(text) <= limit else text[:limit] + "..."
