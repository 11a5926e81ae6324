"""Parsers for the outputs of the listing and manifest invocations."""

from buildplan.parsers.filter_match import (
    RUST_SUITES_KEY,
    extract_matched_names,
    parse_filter_matches,
)
from buildplan.parsers.manifest import parse_manifest_line, parse_requirement_manifest


__all__ = [
    "RUST_SUITES_KEY",
    "extract_matched_names",
    "parse_filter_matches",
    "parse_manifest_line",
    "parse_requirement_manifest",
]
