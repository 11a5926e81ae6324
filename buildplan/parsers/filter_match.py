"""Extraction of filter-matched test names from nextest listings."""

import json

from pydantic import ValidationError

from buildplan.core.errors import ParseError, SchemaError
from buildplan.core.structlog_logger import get_struct_logger
from buildplan.models.records import FilterMatchResult, NextestListing


logger = get_struct_logger(__name__)

RUST_SUITES_KEY = "rust-suites"


def parse_filter_matches(listing_output: str | bytes) -> FilterMatchResult:
    """Parse ``cargo nextest list --message-format json`` output.

    Args:
        listing_output: Raw stdout of the listing invocation

    Returns:
        Filter-match statuses for every listed testcase

    Raises:
        ParseError: If the output is not valid JSON
        SchemaError: If the JSON does not have the nextest listing shape
    """
    text = (
        listing_output.decode("utf-8", errors="replace")
        if isinstance(listing_output, bytes)
        else listing_output
    )

    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        raise ParseError("Failed to parse nextest listing JSON", text, e) from e

    if not isinstance(document, dict) or RUST_SUITES_KEY not in document:
        raise SchemaError(
            f"Nextest listing is missing '{RUST_SUITES_KEY}'",
            text,
            missing_key=RUST_SUITES_KEY,
        )

    try:
        listing = NextestListing.model_validate(document)
    except ValidationError as e:
        raise SchemaError(
            f"Nextest listing does not match the expected schema: {e}", text
        ) from e

    result = FilterMatchResult.from_listing(listing)
    logger.debug(
        "nextest_listing_parsed",
        suites=len(result.suites),
        tests=result.total_test_count,
    )
    return result


def extract_matched_names(listing_output: str | bytes) -> frozenset[str]:
    """Names of tests selected by the listing's filter, across all suites."""
    return parse_filter_matches(listing_output).matched_names()
