"""Artifact identifiers for the VMM test-artifact catalog.

Identifiers are opaque strings. Plain string comparison gives them a stable
total order, which is all the resolver relies on. ``ArtifactCatalog`` names
the identifiers the classification table knows about; manifests may carry
others, and those are accepted as plain strings.
"""

from enum import Enum
from typing import TypeAlias


ArtifactId: TypeAlias = str


class ArtifactCatalog(str, Enum):
    """Known artifact identifiers emitted by the VMM test binary."""

    # Guest agents
    PIPETTE_WINDOWS_X64 = "PIPETTE_WINDOWS_X64"
    PIPETTE_WINDOWS_AARCH64 = "PIPETTE_WINDOWS_AARCH64"
    PIPETTE_LINUX_X64 = "PIPETTE_LINUX_X64"
    PIPETTE_LINUX_AARCH64 = "PIPETTE_LINUX_AARCH64"

    # Native host executables
    OPENVMM_NATIVE = "OPENVMM_NATIVE"
    VMGSTOOL_NATIVE = "VMGSTOOL_NATIVE"

    # OpenHCL IGVM firmware images
    LATEST_STANDARD_X64 = "LATEST_STANDARD_X64"
    LATEST_STANDARD_DEV_KERNEL_X64 = "LATEST_STANDARD_DEV_KERNEL_X64"
    LATEST_CVM_X64 = "LATEST_CVM_X64"
    LATEST_LINUX_DIRECT_TEST_X64 = "LATEST_LINUX_DIRECT_TEST_X64"
    LATEST_STANDARD_AARCH64 = "LATEST_STANDARD_AARCH64"
    LATEST_STANDARD_DEV_KERNEL_AARCH64 = "LATEST_STANDARD_DEV_KERNEL_AARCH64"
    RELEASE_25_05_STANDARD_X64 = "RELEASE_25_05_STANDARD_X64"
    RELEASE_25_05_LINUX_DIRECT_X64 = "RELEASE_25_05_LINUX_DIRECT_X64"
    RELEASE_25_05_STANDARD_AARCH64 = "RELEASE_25_05_STANDARD_AARCH64"
    UM_BIN_LATEST_LINUX_DIRECT_TEST_X64 = "UM_BIN_LATEST_LINUX_DIRECT_TEST_X64"
    UM_DBG_LATEST_LINUX_DIRECT_TEST_X64 = "UM_DBG_LATEST_LINUX_DIRECT_TEST_X64"

    # Test disks
    GUEST_TEST_UEFI_X64 = "GUEST_TEST_UEFI_X64"
    GUEST_TEST_UEFI_AARCH64 = "GUEST_TEST_UEFI_AARCH64"
    GEN2_WINDOWS_DATA_CENTER_CORE2025_X64_PREPPED = (
        "GEN2_WINDOWS_DATA_CENTER_CORE2025_X64_PREPPED"
    )

    # Test micro-kernels and their runners
    TMK_VMM_NATIVE = "TMK_VMM_NATIVE"
    TMK_VMM_LINUX_X64_MUSL = "TMK_VMM_LINUX_X64_MUSL"
    TMK_VMM_LINUX_AARCH64_MUSL = "TMK_VMM_LINUX_AARCH64_MUSL"
    SIMPLE_TMK_X64 = "SIMPLE_TMK_X64"
    SIMPLE_TMK_AARCH64 = "SIMPLE_TMK_AARCH64"

    def __str__(self) -> str:
        return self.value
