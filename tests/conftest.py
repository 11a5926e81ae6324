"""Core test fixtures for the buildplan project."""

import json
import logging
import os
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest
import structlog
from typer.testing import CliRunner


# ---- Base Fixtures ----


@pytest.fixture
def cli_runner() -> CliRunner:
    """Return a Typer CLI test runner."""
    return CliRunner()


# ---- Test Isolation Fixtures ----


@pytest.fixture(autouse=True)
def isolated_environment(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Generator[Path, None, None]:
    """Run each test from an empty directory without BUILDPLAN_* variables."""
    for key in list(os.environ):
        if key.startswith("BUILDPLAN_"):
            monkeypatch.delenv(key)
    work_dir = tmp_path / "work"
    work_dir.mkdir()
    monkeypatch.chdir(work_dir)
    yield work_dir


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    """Undo logging configuration done by the code under test."""
    yield
    structlog.reset_defaults()
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        handler.close()
        root_logger.removeHandler(handler)
    root_logger.setLevel(logging.WARNING)


# ---- Data Builders ----


@pytest.fixture
def make_listing() -> Callable[[dict[str, dict[str, str | None]]], str]:
    """Build nextest ``list --message-format json`` output.

    Takes ``{suite: {test: status}}``; a ``None`` status omits the
    filter-match entry.
    """

    def _make(suites: dict[str, dict[str, str | None]]) -> str:
        rust_suites: dict[str, Any] = {}
        for suite_name, tests in suites.items():
            testcases: dict[str, Any] = {}
            for test_name, status in tests.items():
                testcase: dict[str, Any] = {"ignored": False}
                if status is not None:
                    testcase["filter-match"] = {"status": status}
                testcases[test_name] = testcase
            rust_suites[suite_name] = {
                "package-name": suite_name.split("::")[0],
                "kind": "test",
                "testcases": testcases,
            }
        return json.dumps({"test-count": 0, "rust-suites": rust_suites})

    return _make


@pytest.fixture
def make_manifest() -> Callable[[list[list[dict[str, Any]]]], str]:
    """Build the newline-delimited artifact manifest, one JSON array per line."""

    def _make(lines: list[list[dict[str, Any]]]) -> str:
        return "\n".join(json.dumps(line) for line in lines) + "\n"

    return _make


@pytest.fixture
def record() -> Callable[..., dict[str, Any]]:
    """Manifest record as the test binary prints it."""

    def _record(
        name: str, required: list[str] | None = None, optional: list[str] | None = None
    ) -> dict[str, Any]:
        return {"name": name, "required": required or [], "optional": optional or []}

    return _record
