"""Build selections handed to the build scheduler."""

from collections.abc import Iterable
from enum import Enum

from pydantic import ConfigDict

from buildplan.models.base import BuildPlanBaseModel


class BuildToggle(str, Enum):
    """Buildable component classes. Values are ``BuildSelections`` field names."""

    OPENHCL = "openhcl"
    OPENVMM = "openvmm"
    PIPETTE_WINDOWS = "pipette_windows"
    PIPETTE_LINUX = "pipette_linux"
    PREP_STEPS = "prep_steps"
    GUEST_TEST_UEFI = "guest_test_uefi"
    TMKS = "tmks"
    TMK_VMM_WINDOWS = "tmk_vmm_windows"
    TMK_VMM_LINUX = "tmk_vmm_linux"
    VMGSTOOL = "vmgstool"


class BuildSelections(BuildPlanBaseModel):
    """Which components must be built for a filtered test run.

    Instances are immutable. ``BuildSelections()`` is the all-disabled plan;
    resolved plans are created in one step with ``from_toggles``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    openhcl: bool = False
    openvmm: bool = False
    pipette_windows: bool = False
    pipette_linux: bool = False
    prep_steps: bool = False
    guest_test_uefi: bool = False
    tmks: bool = False
    tmk_vmm_windows: bool = False
    tmk_vmm_linux: bool = False
    vmgstool: bool = False

    @classmethod
    def from_toggles(cls, toggles: Iterable[BuildToggle]) -> "BuildSelections":
        return cls(**{BuildToggle(toggle).value: True for toggle in toggles})

    def enabled_toggles(self) -> frozenset[BuildToggle]:
        return frozenset(toggle for toggle in BuildToggle if getattr(self, toggle.value))

    def with_enabled(self, *toggles: BuildToggle) -> "BuildSelections":
        """Return a copy with ``toggles`` additionally enabled."""
        return self.from_toggles(self.enabled_toggles() | set(toggles))

    def is_empty(self) -> bool:
        return not self.enabled_toggles()
