"""Models package for buildplan."""

from .artifacts import ArtifactCatalog, ArtifactId
from .invocation import (
    BuildProfile,
    BuildProfileKind,
    CargoFlags,
    CratePackages,
    FeatureSelection,
    PackageSelection,
    WorkspacePackages,
)
from .platform import BackendKind, HostPlatform
from .records import (
    MATCHES_STATUS,
    FilterMatchResult,
    NextestListing,
    SuiteListing,
    TestCaseListing,
    TestRecord,
)
from .selections import BuildSelections, BuildToggle


__all__ = [
    # Artifacts
    "ArtifactCatalog",
    "ArtifactId",
    # Invocation inputs
    "BuildProfile",
    "BuildProfileKind",
    "CargoFlags",
    "CratePackages",
    "FeatureSelection",
    "PackageSelection",
    "WorkspacePackages",
    # Platform
    "BackendKind",
    "HostPlatform",
    # Records
    "MATCHES_STATUS",
    "FilterMatchResult",
    "NextestListing",
    "SuiteListing",
    "TestCaseListing",
    "TestRecord",
    # Selections
    "BuildSelections",
    "BuildToggle",
]
