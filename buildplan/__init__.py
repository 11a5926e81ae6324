"""buildplan - build-artifact planning for filtered VMM test runs."""

from importlib.metadata import PackageNotFoundError, distribution

from .models import BuildSelections, BuildToggle, HostPlatform, TestRecord
from .resolution import ResolutionResult, resolve_build_selections


try:
    __version__ = distribution(__package__ or "buildplan").version
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "BuildSelections",
    "BuildToggle",
    "HostPlatform",
    "ResolutionResult",
    "TestRecord",
    "__version__",
    "resolve_build_selections",
]
