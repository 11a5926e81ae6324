"""Argument builder for ``cargo nextest list`` with a filter expression."""

from dataclasses import dataclass, field
from pathlib import Path

from buildplan.invocation.command import CommandSpec
from buildplan.invocation.environment import cargo_backend_env
from buildplan.models.invocation import (
    BuildProfile,
    CargoFlags,
    FeatureSelection,
    PackageSelection,
    WorkspacePackages,
)
from buildplan.models.platform import BackendKind


@dataclass(frozen=True)
class NextestListInvocation:
    """Parameters of a ``cargo nextest list`` invocation.

    With ``archive_file`` set the tests are listed from a prebuilt nextest
    archive and nothing is compiled. Without it nextest builds the selected
    packages first, using ``packages``, ``features`` and ``cargo_profile``.
    """

    nextest_profile: str
    filter_expr: str | None = None
    archive_file: Path | None = None
    workspace_remap: Path | None = None
    nextest_bin: Path | None = None
    target: str | None = None
    config_file: Path | None = None
    run_ignored: bool = False
    packages: PackageSelection = field(default_factory=WorkspacePackages)
    features: FeatureSelection = field(default_factory=FeatureSelection.none)
    cargo_profile: BuildProfile = field(default_factory=BuildProfile.debug)
    flags: CargoFlags = field(default_factory=CargoFlags)
    rust_toolchain: str | None = None
    extra_env: dict[str, str] = field(default_factory=dict)
    working_dir: Path | None = None

    @property
    def from_archive(self) -> bool:
        return self.archive_file is not None

    def build_args(self) -> list[str]:
        """Build the ``nextest list`` argument list (after the ``nextest`` subcommand)."""
        args = ["list"]

        if self.archive_file is not None:
            args.extend(["--archive-file", str(self.archive_file)])
            if self.workspace_remap is not None:
                args.extend(["--workspace-remap", str(self.workspace_remap)])
        else:
            args.extend(self.flags.to_cargo_arg_strings())
            args.extend(self.packages.to_cargo_arg_strings())
            args.extend(self.features.to_cargo_arg_strings())
            args.extend(["--cargo-profile", self.cargo_profile.cargo_profile])

        if self.target:
            args.extend(["--target", self.target])
        if self.config_file is not None:
            args.extend(["--config-file", str(self.config_file)])

        args.extend(["--profile", self.nextest_profile])
        args.extend(["--message-format", "json"])

        if self.run_ignored:
            args.extend(["--run-ignored", "all"])
        if self.filter_expr:
            args.extend(["-E", self.filter_expr])

        return args

    def program(self) -> list[str]:
        if self.nextest_bin is not None:
            # A standalone cargo-nextest binary still expects the subcommand
            return [str(self.nextest_bin), "nextest"]
        if self.rust_toolchain:
            return ["rustup", "run", self.rust_toolchain, "cargo", "nextest"]
        return ["cargo", "nextest"]

    def build_env(self, backend: BackendKind) -> dict[str, str]:
        env = {} if self.from_archive else cargo_backend_env(backend)
        env.update(self.extra_env)
        return env

    def to_command(self, backend: BackendKind) -> CommandSpec:
        return CommandSpec(
            argv=[*self.program(), *self.build_args()],
            env=self.build_env(backend),
            cwd=self.working_dir,
        )
