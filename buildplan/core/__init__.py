"""Core infrastructure for buildplan: errors and logging."""

from buildplan.core.errors import (
    BuildPlanError,
    ConfigError,
    ParseError,
    ProcessError,
    SchemaError,
)


__all__ = [
    "BuildPlanError",
    "ConfigError",
    "ParseError",
    "ProcessError",
    "SchemaError",
]
