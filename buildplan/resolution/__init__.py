"""Build-plan resolution from filter matches and artifact manifests."""

from buildplan.resolution.classification import (
    CLASSIFICATION_TABLE,
    HOST_CONDITIONAL_TABLE,
    classify,
    is_classified,
)
from buildplan.resolution.resolver import (
    ResolutionResult,
    collect_toggles,
    resolve_build_selections,
    select_matched_records,
)


__all__ = [
    "CLASSIFICATION_TABLE",
    "HOST_CONDITIONAL_TABLE",
    "ResolutionResult",
    "classify",
    "collect_toggles",
    "is_classified",
    "resolve_build_selections",
    "select_matched_records",
]
