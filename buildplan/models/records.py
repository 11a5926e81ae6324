"""Records ingested from the test binary and from nextest listings."""

from pydantic import ConfigDict, Field, field_validator

from buildplan.models.artifacts import ArtifactId
from buildplan.models.base import BuildPlanBaseModel


MATCHES_STATUS = "matches"


class TestRecord(BuildPlanBaseModel):
    """Artifact requirements self-reported by a single test."""

    __test__ = False  # not a pytest test class

    model_config = ConfigDict(frozen=True, str_strip_whitespace=False)

    name: str
    required: frozenset[ArtifactId]
    optional: frozenset[ArtifactId]

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v:
            raise ValueError("Test name must not be empty")
        return v

    @property
    def all_artifacts(self) -> frozenset[ArtifactId]:
        return self.required | self.optional


class FilterMatch(BuildPlanBaseModel):
    """Filter-match entry of a nextest testcase."""

    model_config = ConfigDict(str_strip_whitespace=False)

    status: str


class TestCaseListing(BuildPlanBaseModel):
    """A single testcase entry from ``cargo nextest list --message-format json``."""

    __test__ = False

    model_config = ConfigDict(str_strip_whitespace=False)

    filter_match: FilterMatch | None = Field(default=None, alias="filter-match")


class SuiteListing(BuildPlanBaseModel):
    """A test binary entry from the nextest listing."""

    model_config = ConfigDict(str_strip_whitespace=False)

    testcases: dict[str, TestCaseListing] = Field(default_factory=dict)


class NextestListing(BuildPlanBaseModel):
    """Top level of the nextest JSON listing."""

    model_config = ConfigDict(str_strip_whitespace=False)

    rust_suites: dict[str, SuiteListing] = Field(alias="rust-suites")


class FilterMatchResult(BuildPlanBaseModel):
    """Per-suite filter-match statuses keyed by test name.

    Testcases without a filter-match entry are recorded with an empty status.
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=False)

    suites: dict[str, dict[str, str]] = Field(default_factory=dict)

    @classmethod
    def from_listing(cls, listing: NextestListing) -> "FilterMatchResult":
        suites = {
            suite_name: {
                test_name: testcase.filter_match.status if testcase.filter_match else ""
                for test_name, testcase in suite.testcases.items()
            }
            for suite_name, suite in listing.rust_suites.items()
        }
        return cls(suites=suites)

    def matched_names(self) -> frozenset[str]:
        """Names of all tests, across suites, whose status is ``matches``."""
        return frozenset(
            test_name
            for tests in self.suites.values()
            for test_name, status in tests.items()
            if status == MATCHES_STATUS
        )

    @property
    def total_test_count(self) -> int:
        return sum(len(tests) for tests in self.suites.values())
