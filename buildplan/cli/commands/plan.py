"""Run the listing and manifest invocations, then resolve build selections."""

from pathlib import Path
from typing import Annotated

import typer

from buildplan.cli.app import AppContext
from buildplan.cli.decorators import handle_errors
from buildplan.cli.helpers.output import OutputFormat, print_result
from buildplan.models.platform import BackendKind, HostPlatform
from buildplan.services.plan_service import (
    PlanRequest,
    create_build_plan_service,
    write_selections,
)


@handle_errors
def plan(
    ctx: typer.Context,
    target: Annotated[str, typer.Option("--target", help="Target triple")],
    filter_expr: Annotated[
        str, typer.Option("--filter", "-E", help="Nextest filter expression")
    ],
    nextest_profile: Annotated[
        str, typer.Option("--nextest-profile", help="Nextest profile")
    ] = "default",
    archive_file: Annotated[
        Path | None,
        typer.Option("--archive-file", help="Nextest archive to list tests from"),
    ] = None,
    nextest_bin: Annotated[
        Path | None, typer.Option("--nextest-bin", help="cargo-nextest binary")
    ] = None,
    nextest_config: Annotated[
        Path | None, typer.Option("--nextest-config", help="Nextest config file")
    ] = None,
    workspace_remap: Annotated[
        Path | None,
        typer.Option("--workspace-remap", help="Workspace root for archive listings"),
    ] = None,
    release: Annotated[
        bool, typer.Option("--release", help="Test binary is built in release mode")
    ] = False,
    run_ignored: Annotated[
        bool, typer.Option("--run-ignored", help="Include ignored tests")
    ] = False,
    host: Annotated[
        HostPlatform | None, typer.Option("--host", help="Host platform")
    ] = None,
    backend: Annotated[
        BackendKind | None, typer.Option("--backend", help="Execution backend")
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write build selections JSON to this file"),
    ] = None,
    output_format: Annotated[
        OutputFormat, typer.Option("--format", help="Output format")
    ] = OutputFormat.JSON,
) -> None:
    """Run nextest and the test binary, then resolve build selections."""
    app_ctx: AppContext = ctx.obj
    settings = app_ctx.settings

    service = create_build_plan_service(
        backend=backend or settings.backend,
        cargo_flags=settings.cargo_flags,
        rust_toolchain=settings.rust_toolchain,
    )
    request = PlanRequest(
        target=target,
        nextest_profile=nextest_profile,
        filter_expr=filter_expr,
        archive_file=archive_file,
        nextest_bin=nextest_bin,
        config_file=nextest_config,
        workspace_remap=workspace_remap,
        release=release,
        run_ignored=run_ignored,
    )
    result = service.plan(request, host or settings.effective_host())

    if output is not None:
        write_selections(result, output)
    print_result(result, output_format)


def register_commands(app: typer.Typer) -> None:
    app.command(name="plan")(plan)
