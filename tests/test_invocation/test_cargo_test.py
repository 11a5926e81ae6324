"""Tests for the cargo test invocation builder."""

import pytest

from buildplan.invocation import (
    CARGO_INCREMENTAL,
    LIST_REQUIRED_ARTIFACTS_ARG,
    CargoTestInvocation,
    manifest_invocation,
)
from buildplan.models import (
    BackendKind,
    BuildProfile,
    CargoFlags,
    CratePackages,
    FeatureSelection,
    WorkspacePackages,
)


TARGET = "x86_64-unknown-linux-gnu"


def test_release_vmm_tests_arguments():
    invocation = CargoTestInvocation(
        packages=CratePackages(crates=("vmm_tests",)),
        profile=BuildProfile.release(),
        target=TARGET,
        features=FeatureSelection.none(),
        flags=CargoFlags(locked=False, verbose=False),
    )

    assert invocation.build_args() == [
        "--tests",
        "--bins",
        "-p",
        "vmm_tests",
        "--target",
        TARGET,
        "--profile",
        "release",
    ]


def test_locked_and_verbose_come_first():
    invocation = CargoTestInvocation(
        packages=CratePackages(crates=("vmm_tests",)),
        profile=BuildProfile.debug(),
        target=TARGET,
        flags=CargoFlags(locked=True, verbose=True),
    )

    assert invocation.build_args()[:4] == ["--locked", "--verbose", "--tests", "--bins"]


def test_workspace_selection_with_exclusions():
    invocation = CargoTestInvocation(
        packages=WorkspacePackages(exclude=("vmm_tests", "fuzz_ide")),
        profile=BuildProfile.debug(),
        target=TARGET,
    )

    assert invocation.build_args() == [
        "--tests",
        "--bins",
        "--workspace",
        "--exclude",
        "vmm_tests",
        "--exclude",
        "fuzz_ide",
        "--target",
        TARGET,
        "--profile",
        "dev",
    ]


def test_features_follow_package_selection():
    invocation = CargoTestInvocation(
        packages=CratePackages(crates=("openvmm",)),
        profile=BuildProfile.custom("boot-release"),
        target=TARGET,
        features=FeatureSelection.specific(["ci", "tdx"]),
    )

    assert invocation.build_args() == [
        "--tests",
        "--bins",
        "-p",
        "openvmm",
        "--features",
        "ci,tdx",
        "--target",
        TARGET,
        "--profile",
        "boot-release",
    ]


def test_extra_args_follow_separator_in_order():
    invocation = CargoTestInvocation(
        packages=CratePackages(crates=("vmm_tests",)),
        profile=BuildProfile.debug(),
        target=TARGET,
        extra_args=("--list-required-artifacts=json", "--nocapture"),
    )

    args = invocation.build_args()

    separator = args.index("--")
    assert args[separator + 1 :] == ["--list-required-artifacts=json", "--nocapture"]
    assert args[separator - 2 : separator] == ["--profile", "dev"]


def test_no_separator_without_extra_args():
    invocation = CargoTestInvocation(
        packages=CratePackages(crates=("vmm_tests",)),
        profile=BuildProfile.debug(),
        target=TARGET,
    )

    assert "--" not in invocation.build_args()


def test_program_uses_rustup_toolchain_when_configured():
    invocation = CargoTestInvocation(
        packages=CratePackages(crates=("vmm_tests",)),
        profile=BuildProfile.debug(),
        target=TARGET,
        rust_toolchain="1.85.0",
    )

    assert invocation.program() == ["rustup", "run", "1.85.0", "cargo", "test"]


def test_program_defaults_to_cargo():
    invocation = CargoTestInvocation(
        packages=CratePackages(crates=("vmm_tests",)),
        profile=BuildProfile.debug(),
        target=TARGET,
    )

    assert invocation.program() == ["cargo", "test"]


@pytest.mark.parametrize(
    ("backend", "expected"),
    [
        (BackendKind.LOCAL, {}),
        (BackendKind.GITHUB, {CARGO_INCREMENTAL: "0"}),
        (BackendKind.ADO, {CARGO_INCREMENTAL: "0"}),
    ],
)
def test_incremental_builds_disabled_off_local_backend(backend, expected):
    invocation = CargoTestInvocation(
        packages=CratePackages(crates=("vmm_tests",)),
        profile=BuildProfile.debug(),
        target=TARGET,
    )

    assert invocation.build_env(backend) == expected
    assert invocation.to_command(backend).env == expected


def test_manifest_invocation():
    invocation = manifest_invocation(target=TARGET, release=True)

    assert invocation.packages == CratePackages(crates=("vmm_tests",))
    assert invocation.profile == BuildProfile.release()
    assert invocation.features == FeatureSelection.none()
    assert invocation.extra_args == (LIST_REQUIRED_ARTIFACTS_ARG,)
    assert invocation.build_args()[-2:] == ["--", "--list-required-artifacts=json"]


def test_to_command_display():
    invocation = manifest_invocation(target=TARGET, release=False)

    command = invocation.to_command(BackendKind.GITHUB)

    assert command.argv[:2] == ["cargo", "test"]
    assert command.display() == (
        "CARGO_INCREMENTAL=0 cargo test --tests --bins -p vmm_tests "
        f"--target {TARGET} --profile dev -- --list-required-artifacts=json"
    )
