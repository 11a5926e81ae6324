"""Command-line interface for buildplan."""

from buildplan.cli.app import app, main


__all__ = ["app", "main"]
