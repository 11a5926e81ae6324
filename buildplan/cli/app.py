"""Main CLI application for buildplan."""

import logging
import sys
from importlib.metadata import PackageNotFoundError, distribution
from typing import Annotated

import typer

from buildplan.cli.decorators.error_handling import print_stack_trace_if_verbose
from buildplan.config.settings import BuildPlanSettings, load_settings
from buildplan.core.errors import ConfigError
from buildplan.core.logging import setup_logging


__all__ = ["AppContext", "app", "main"]

try:
    __version__ = distribution("buildplan").version
except PackageNotFoundError:
    __version__ = "0.0.0"

logger = logging.getLogger(__name__)


class AppContext:
    """Application context for storing shared state."""

    def __init__(
        self,
        settings: BuildPlanSettings,
        verbose: int = 0,
        log_file: str | None = None,
        config_file: str | None = None,
    ) -> None:
        self.settings = settings
        self.verbose = verbose
        self.log_file = log_file
        self.config_file = config_file


app = typer.Typer(
    name="buildplan",
    help=f"""buildplan v{__version__}

Resolve which VMM test artifacts must be built for a filtered test run.

Common workflows:
  • Resolve from captured outputs: buildplan resolve --listing list.json --manifest artifacts.jsonl
  • Run and resolve:               buildplan plan --target x86_64-unknown-linux-gnu --filter 'test(uefi)' --archive-file tests.tar.zst
  • Show the manifest command:     buildplan args --target x86_64-pc-windows-msvc -p vmm_tests -- --list-required-artifacts=json""",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    verbose: Annotated[
        int,
        typer.Option(
            "-v",
            "--verbose",
            count=True,
            help="Increase verbosity (-v=INFO, -vv=DEBUG)",
        ),
    ] = 0,
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Enable debug logging (equivalent to -vv)"),
    ] = False,
    log_file: Annotated[
        str | None, typer.Option("--log-file", help="Also log to this file as JSON")
    ] = None,
    config_file: Annotated[
        str | None,
        typer.Option("-c", "--config", help="Path to configuration file"),
    ] = None,
    version: Annotated[
        bool, typer.Option("--version", help="Show version and exit")
    ] = False,
) -> None:
    """buildplan command line."""
    if version:
        print(f"buildplan v{__version__}")
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        print(ctx.get_help())
        raise typer.Exit()

    # Keep stdout clean while settings load; reconfigured below
    setup_logging(level=logging.WARNING)

    try:
        settings = load_settings(config_file)
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from e

    ctx.obj = AppContext(
        settings=settings, verbose=verbose, log_file=log_file, config_file=config_file
    )

    log_level: int | str = settings.log_level
    if debug or verbose >= 2:
        log_level = logging.DEBUG
    elif verbose == 1:
        log_level = logging.INFO

    setup_logging(
        level=log_level,
        json_logs=settings.log_format == "json",
        log_file=log_file,
    )


def main() -> int:
    """Main CLI entry point."""
    exit_code = 0

    try:
        from buildplan.cli.commands import register_all_commands

        register_all_commands(app)
        app()

    except SystemExit as e:
        exit_code = e.code if isinstance(e.code, int) else 0

    except Exception as e:
        logger.exception("Unexpected error: %s", e)
        print_stack_trace_if_verbose()
        exit_code = 1

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
