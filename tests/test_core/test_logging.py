"""Tests for logging setup."""

import json
import logging

from buildplan.core.logging import get_logger, setup_logging


def test_setup_logging_sets_root_level():
    setup_logging("info")

    assert logging.getLogger().level == logging.INFO


def test_setup_logging_unknown_level_name_falls_back_to_warning():
    setup_logging("loud")

    assert logging.getLogger().level == logging.WARNING


def test_log_file_receives_json_events(tmp_path):
    log_file = tmp_path / "logs" / "buildplan.log"
    setup_logging(logging.INFO, log_file=log_file)

    get_logger("buildplan.test").info("build_selections_resolved", matched_tests=3)
    for handler in logging.getLogger().handlers:
        handler.flush()

    lines = [line for line in log_file.read_text().splitlines() if line.strip()]
    events = [json.loads(line) for line in lines]
    assert any(
        e.get("event") == "build_selections_resolved" and e.get("matched_tests") == 3
        for e in events
    )


def test_debug_events_filtered_at_warning(tmp_path):
    log_file = tmp_path / "buildplan.log"
    setup_logging(logging.WARNING, log_file=log_file)

    get_logger("buildplan.test").debug("hidden_event")
    for handler in logging.getLogger().handlers:
        handler.flush()

    assert not log_file.exists() or "hidden_event" not in log_file.read_text()
