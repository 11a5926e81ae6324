"""CLI command modules."""

import typer

from buildplan.cli.commands.args import register_commands as register_args_commands
from buildplan.cli.commands.plan import register_commands as register_plan_commands
from buildplan.cli.commands.resolve import (
    register_commands as register_resolve_commands,
)


def register_all_commands(app: typer.Typer) -> None:
    """Register all CLI commands with the main app.

    Args:
        app: The main Typer app
    """
    register_resolve_commands(app)
    register_plan_commands(app)
    register_args_commands(app)
