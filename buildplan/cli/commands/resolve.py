"""Resolve build selections from captured listing and manifest outputs."""

from pathlib import Path
from typing import Annotated

import typer

from buildplan.cli.app import AppContext
from buildplan.cli.decorators import handle_errors
from buildplan.cli.helpers.output import OutputFormat, print_result
from buildplan.models.platform import HostPlatform
from buildplan.services.plan_service import create_build_plan_service, write_selections


@handle_errors
def resolve(
    ctx: typer.Context,
    listing: Annotated[
        Path,
        typer.Option(
            "--listing",
            help="Output of 'cargo nextest list --message-format json'",
            exists=True,
            dir_okay=False,
        ),
    ],
    manifest: Annotated[
        Path,
        typer.Option(
            "--manifest",
            help="Output of the test binary run with --list-required-artifacts=json",
            exists=True,
            dir_okay=False,
        ),
    ],
    host: Annotated[
        HostPlatform | None,
        typer.Option("--host", help="Host platform (defaults to config, then running host)"),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write build selections JSON to this file"),
    ] = None,
    output_format: Annotated[
        OutputFormat, typer.Option("--format", help="Output format")
    ] = OutputFormat.JSON,
) -> None:
    """Resolve build selections from already captured outputs."""
    app_ctx: AppContext = ctx.obj
    settings = app_ctx.settings

    service = create_build_plan_service(
        backend=settings.backend,
        cargo_flags=settings.cargo_flags,
        rust_toolchain=settings.rust_toolchain,
    )
    result = service.resolve_from_outputs(
        listing.read_text(encoding="utf-8"),
        manifest.read_text(encoding="utf-8"),
        host or settings.effective_host(),
    )

    if output is not None:
        write_selections(result, output)
    print_result(result, output_format)


def register_commands(app: typer.Typer) -> None:
    app.command(name="resolve")(resolve)
