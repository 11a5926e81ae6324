"""Build-plan resolution.

Correlates the tests selected by a nextest filter with the artifact manifest
emitted by the test binary and decides which components must be built.
"""

from collections.abc import Iterable, Set

from pydantic import ConfigDict

from buildplan.core.structlog_logger import get_struct_logger
from buildplan.models.artifacts import ArtifactId
from buildplan.models.base import BuildPlanBaseModel
from buildplan.models.platform import HostPlatform
from buildplan.models.records import TestRecord
from buildplan.models.selections import BuildSelections, BuildToggle
from buildplan.resolution.classification import classify, is_classified


logger = get_struct_logger(__name__)


class ResolutionResult(BuildPlanBaseModel):
    """Resolved build selections plus audit counts.

    Artifact tuples are sorted, so two resolutions of the same inputs compare
    equal.
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=False)

    selections: BuildSelections
    host: HostPlatform
    matched_test_count: int
    required_artifacts: tuple[ArtifactId, ...] = ()
    optional_artifacts: tuple[ArtifactId, ...] = ()
    unclassified_artifacts: tuple[ArtifactId, ...] = ()

    @property
    def all_artifacts(self) -> tuple[ArtifactId, ...]:
        return tuple(sorted(set(self.required_artifacts) | set(self.optional_artifacts)))


def select_matched_records(
    matched_names: Set[str], records: Iterable[TestRecord]
) -> list[TestRecord]:
    """Keep only records for tests the filter selected."""
    return [record for record in records if record.name in matched_names]


def collect_toggles(
    artifacts: Iterable[ArtifactId], host: HostPlatform
) -> frozenset[BuildToggle]:
    toggles: set[BuildToggle] = set()
    for identifier in artifacts:
        toggles |= classify(identifier, host)
    return frozenset(toggles)


def resolve_build_selections(
    matched_names: Set[str],
    records: Iterable[TestRecord],
    host: HostPlatform,
) -> ResolutionResult:
    """Compute the build selections for a filtered test run.

    Required and optional artifacts both count: an optional artifact that is
    not built would make the test skip the part that needs it.

    Args:
        matched_names: Tests selected by the filter expression
        records: Manifest records, for all tests of the binary
        host: Platform the tests will run on

    Returns:
        The resolution result; its selections are immutable
    """
    matched_records = select_matched_records(matched_names, records)

    required: set[ArtifactId] = set()
    optional: set[ArtifactId] = set()
    for record in matched_records:
        required |= record.required
        optional |= record.optional

    combined = sorted(required | optional)
    selections = BuildSelections.from_toggles(collect_toggles(combined, host))
    unclassified = tuple(
        identifier for identifier in combined if not is_classified(identifier)
    )

    logger.info(
        "build_selections_resolved",
        host=HostPlatform(host).value,
        matched_tests=len(matched_names),
        matched_records=len(matched_records),
        unique_required_artifacts=len(required),
        unique_optional_artifacts=len(optional),
        enabled=sorted(toggle.value for toggle in selections.enabled_toggles()),
    )
    if unclassified:
        logger.warning(
            "unclassified_artifacts",
            count=len(unclassified),
            artifacts=list(unclassified),
        )

    return ResolutionResult(
        selections=selections,
        host=host,
        matched_test_count=len(matched_names),
        required_artifacts=tuple(sorted(required)),
        optional_artifacts=tuple(sorted(optional)),
        unclassified_artifacts=unclassified,
    )
