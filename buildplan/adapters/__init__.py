"""Adapters for external collaborators."""

from buildplan.adapters.process_adapter import (
    LoggerOutputMiddleware,
    ProcessAdapter,
    create_process_adapter,
)


__all__ = ["LoggerOutputMiddleware", "ProcessAdapter", "create_process_adapter"]
