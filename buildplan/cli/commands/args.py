"""Print the cargo test command for a given configuration."""

from typing import Annotated

import typer

from buildplan.cli.app import AppContext
from buildplan.cli.decorators import handle_errors
from buildplan.invocation.cargo_test import CargoTestInvocation
from buildplan.models.invocation import (
    BuildProfile,
    CratePackages,
    FeatureSelection,
    PackageSelection,
    WorkspacePackages,
)
from buildplan.models.platform import BackendKind


def _package_selection(
    packages: list[str] | None, workspace: bool, exclude: list[str] | None
) -> PackageSelection:
    if workspace:
        if packages:
            raise typer.BadParameter("--workspace cannot be combined with --package")
        return WorkspacePackages(exclude=tuple(exclude or ()))
    if exclude:
        raise typer.BadParameter("--exclude requires --workspace")
    if not packages:
        raise typer.BadParameter("Select packages with --package or --workspace")
    return CratePackages(crates=tuple(packages))


def _feature_selection(features: str | None, all_features: bool) -> FeatureSelection:
    if all_features:
        if features:
            raise typer.BadParameter("--all-features cannot be combined with --features")
        return FeatureSelection.all()
    if features:
        return FeatureSelection.specific(f.strip() for f in features.split(","))
    return FeatureSelection.none()


@handle_errors
def args(
    ctx: typer.Context,
    target: Annotated[str, typer.Option("--target", help="Target triple")],
    packages: Annotated[
        list[str] | None, typer.Option("--package", "-p", help="Package to test")
    ] = None,
    workspace: Annotated[
        bool, typer.Option("--workspace", help="Test all workspace packages")
    ] = False,
    exclude: Annotated[
        list[str] | None,
        typer.Option("--exclude", help="Workspace package to exclude"),
    ] = None,
    features: Annotated[
        str | None, typer.Option("--features", help="Comma separated features")
    ] = None,
    all_features: Annotated[
        bool, typer.Option("--all-features", help="Enable all features")
    ] = False,
    profile: Annotated[
        str, typer.Option("--profile", help="dev, release or a custom profile")
    ] = "dev",
    backend: Annotated[
        BackendKind | None, typer.Option("--backend", help="Execution backend")
    ] = None,
    extra_args: Annotated[
        list[str] | None,
        typer.Argument(help="Arguments passed to the test binaries (after --)"),
    ] = None,
) -> None:
    """Print the cargo test command line and its environment."""
    app_ctx: AppContext = ctx.obj
    settings = app_ctx.settings

    invocation = CargoTestInvocation(
        packages=_package_selection(packages, workspace, exclude),
        profile=BuildProfile.parse(profile),
        target=target,
        features=_feature_selection(features, all_features),
        flags=settings.cargo_flags,
        extra_args=tuple(extra_args) if extra_args else None,
        rust_toolchain=settings.rust_toolchain,
    )
    command = invocation.to_command(backend or settings.backend)
    print(command.display())


def register_commands(app: typer.Typer) -> None:
    app.command(name="args")(args)
