"""Tests for extracting filter-matched test names."""

import json

import pytest

from buildplan.core.errors import ParseError, SchemaError
from buildplan.parsers import (
    RUST_SUITES_KEY,
    extract_matched_names,
    parse_filter_matches,
)


def test_matched_names_across_suites(make_listing):
    listing = make_listing(
        {
            "vmm_tests::tests": {
                "x86_64::openvmm_uefi_x64_guest_test_uefi": "matches",
                "x86_64::openhcl_linux_direct_x64": "mismatch",
            },
            "vmm_tests::tmks": {
                "tmk_tests::simple": "matches",
                "tmk_tests::ignored": None,
            },
        }
    )

    assert extract_matched_names(listing) == frozenset(
        {"x86_64::openvmm_uefi_x64_guest_test_uefi", "tmk_tests::simple"}
    )


def test_only_exact_matches_status_counts(make_listing):
    listing = make_listing({"suite": {"a": "Matches", "b": "matches ", "c": "matches"}})

    assert extract_matched_names(listing) == frozenset({"c"})


def test_test_names_are_not_stripped(make_listing):
    listing = make_listing({"suite": {" padded ": "matches"}})

    assert extract_matched_names(listing) == frozenset({" padded "})


def test_duplicate_names_across_suites_collapse(make_listing):
    listing = make_listing({"one": {"shared": "matches"}, "two": {"shared": "matches"}})

    assert extract_matched_names(listing) == frozenset({"shared"})


def test_suite_order_does_not_change_result(make_listing):
    suites = {
        "a": {"t1": "matches", "t2": "mismatch"},
        "b": {"t3": "matches"},
    }
    reversed_suites = {name: suites[name] for name in reversed(list(suites))}

    assert extract_matched_names(make_listing(suites)) == extract_matched_names(
        make_listing(reversed_suites)
    )


def test_parse_returns_statuses(make_listing):
    result = parse_filter_matches(make_listing({"suite": {"t": "mismatch"}}))

    assert result.suites == {"suite": {"t": "mismatch"}}


def test_bytes_input(make_listing):
    listing = make_listing({"suite": {"t": "matches"}}).encode("utf-8")

    assert extract_matched_names(listing) == frozenset({"t"})


def test_malformed_json_is_parse_error():
    with pytest.raises(ParseError) as exc_info:
        parse_filter_matches('{"rust-suites": {')

    assert exc_info.value.content == '{"rust-suites": {'
    assert isinstance(exc_info.value.cause, json.JSONDecodeError)


def test_missing_rust_suites_is_schema_error():
    with pytest.raises(SchemaError) as exc_info:
        parse_filter_matches(json.dumps({"test-count": 3}))

    assert exc_info.value.missing_key == RUST_SUITES_KEY


def test_non_object_document_is_schema_error():
    with pytest.raises(SchemaError):
        parse_filter_matches("[]")


def test_wrongly_typed_suites_is_schema_error():
    with pytest.raises(SchemaError):
        parse_filter_matches(json.dumps({"rust-suites": ["not", "a", "mapping"]}))


def test_empty_suites_match_nothing():
    assert extract_matched_names(json.dumps({"rust-suites": {}})) == frozenset()
