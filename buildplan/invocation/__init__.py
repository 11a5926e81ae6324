"""Builders for the cargo invocations a resolution request depends on."""

from buildplan.invocation.cargo_test import (
    LIST_REQUIRED_ARTIFACTS_ARG,
    TEST_TARGET_FLAGS,
    CargoTestInvocation,
    manifest_invocation,
)
from buildplan.invocation.command import CommandSpec
from buildplan.invocation.environment import CARGO_INCREMENTAL, cargo_backend_env
from buildplan.invocation.nextest_list import NextestListInvocation


__all__ = [
    "CARGO_INCREMENTAL",
    "LIST_REQUIRED_ARTIFACTS_ARG",
    "TEST_TARGET_FLAGS",
    "CargoTestInvocation",
    "CommandSpec",
    "NextestListInvocation",
    "cargo_backend_env",
    "manifest_invocation",
]
