"""Parsing of the artifact-requirement manifest printed by the test binary."""

from pydantic import TypeAdapter, ValidationError

from buildplan.core.errors import ParseError
from buildplan.core.structlog_logger import get_struct_logger
from buildplan.models.records import TestRecord


logger = get_struct_logger(__name__)

_LINE_ADAPTER = TypeAdapter(list[TestRecord])


def parse_manifest_line(line: str, line_number: int | None = None) -> list[TestRecord]:
    """Parse one manifest line: a JSON array of test records.

    Raises:
        ParseError: If the line is not valid JSON or not an array of records
    """
    try:
        return _LINE_ADAPTER.validate_json(line)
    except ValidationError as e:
        raise ParseError(
            "Failed to parse test artifact requirements",
            line,
            e,
            line_number=line_number,
        ) from e


def parse_requirement_manifest(manifest_output: str) -> list[TestRecord]:
    """Parse the full newline-delimited manifest.

    Blank lines are skipped. The first malformed line aborts parsing; no
    partial result is returned.

    Args:
        manifest_output: Raw stdout of the manifest invocation

    Returns:
        Test records in manifest order
    """
    records: list[TestRecord] = []
    for line_number, raw_line in enumerate(manifest_output.splitlines(), start=1):
        line = raw_line.strip()
        if not line:
            continue
        records.extend(parse_manifest_line(line, line_number))

    logger.debug("requirement_manifest_parsed", records=len(records))
    return records
