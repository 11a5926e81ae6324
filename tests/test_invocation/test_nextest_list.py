"""Tests for the nextest list invocation builder."""

from pathlib import Path

from buildplan.invocation import CARGO_INCREMENTAL, NextestListInvocation
from buildplan.models import (
    BackendKind,
    BuildProfile,
    CargoFlags,
    CratePackages,
    FeatureSelection,
)


def test_list_from_archive_arguments():
    invocation = NextestListInvocation(
        nextest_profile="ci",
        filter_expr="test(uefi)",
        archive_file=Path("/work/vmm-tests.tar.zst"),
        workspace_remap=Path("/work/src"),
        target="x86_64-pc-windows-msvc",
        config_file=Path("/work/src/.config/nextest.toml"),
    )

    assert invocation.build_args() == [
        "list",
        "--archive-file",
        "/work/vmm-tests.tar.zst",
        "--workspace-remap",
        "/work/src",
        "--target",
        "x86_64-pc-windows-msvc",
        "--config-file",
        "/work/src/.config/nextest.toml",
        "--profile",
        "ci",
        "--message-format",
        "json",
        "-E",
        "test(uefi)",
    ]


def test_list_from_workspace_arguments():
    invocation = NextestListInvocation(
        nextest_profile="default",
        filter_expr="all()",
        packages=CratePackages(crates=("vmm_tests",)),
        features=FeatureSelection.specific(["ci"]),
        cargo_profile=BuildProfile.release(),
        flags=CargoFlags(locked=True),
        run_ignored=True,
    )

    assert invocation.build_args() == [
        "list",
        "--locked",
        "-p",
        "vmm_tests",
        "--features",
        "ci",
        "--cargo-profile",
        "release",
        "--profile",
        "default",
        "--message-format",
        "json",
        "--run-ignored",
        "all",
        "-E",
        "all()",
    ]


def test_no_filter_lists_everything():
    invocation = NextestListInvocation(nextest_profile="default")

    assert "-E" not in invocation.build_args()


def test_program_with_standalone_nextest_binary():
    invocation = NextestListInvocation(
        nextest_profile="ci", nextest_bin=Path("/tools/cargo-nextest")
    )

    assert invocation.program() == ["/tools/cargo-nextest", "nextest"]


def test_program_with_toolchain():
    invocation = NextestListInvocation(nextest_profile="ci", rust_toolchain="stable")

    assert invocation.program() == ["rustup", "run", "stable", "cargo", "nextest"]


def test_archive_listing_env_only_has_extra_env():
    invocation = NextestListInvocation(
        nextest_profile="ci",
        archive_file=Path("a.tar.zst"),
        extra_env={"NEXTEST_HIDE_PROGRESS_BAR": "1"},
    )

    assert invocation.build_env(BackendKind.GITHUB) == {"NEXTEST_HIDE_PROGRESS_BAR": "1"}


def test_workspace_listing_env_on_ci():
    invocation = NextestListInvocation(
        nextest_profile="ci", extra_env={"RUST_BACKTRACE": "1"}
    )

    assert invocation.build_env(BackendKind.ADO) == {
        CARGO_INCREMENTAL: "0",
        "RUST_BACKTRACE": "1",
    }
    assert invocation.build_env(BackendKind.LOCAL) == {"RUST_BACKTRACE": "1"}


def test_to_command_carries_working_dir():
    invocation = NextestListInvocation(
        nextest_profile="ci",
        archive_file=Path("a.tar.zst"),
        working_dir=Path("/work"),
    )

    command = invocation.to_command(BackendKind.LOCAL)

    assert command.cwd == Path("/work")
    assert command.argv[:3] == ["cargo", "nextest", "list"]
