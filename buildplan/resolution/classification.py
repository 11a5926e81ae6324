"""Classification of artifact identifiers into build toggles.

The tables here are read-only module constants. Adding a new artifact that
needs a build step means adding it to a group below; the resolver itself does
not change.
"""

from collections.abc import Iterable, Mapping
from types import MappingProxyType

from buildplan.models.artifacts import ArtifactCatalog as A
from buildplan.models.artifacts import ArtifactId
from buildplan.models.platform import HostPlatform
from buildplan.models.selections import BuildToggle as T


PIPETTE_WINDOWS = (A.PIPETTE_WINDOWS_X64, A.PIPETTE_WINDOWS_AARCH64)
PIPETTE_LINUX = (A.PIPETTE_LINUX_X64, A.PIPETTE_LINUX_AARCH64)

OPENHCL_IGVM = (
    A.LATEST_STANDARD_X64,
    A.LATEST_STANDARD_DEV_KERNEL_X64,
    A.LATEST_CVM_X64,
    A.LATEST_LINUX_DIRECT_TEST_X64,
    A.LATEST_STANDARD_AARCH64,
    A.LATEST_STANDARD_DEV_KERNEL_AARCH64,
    A.RELEASE_25_05_STANDARD_X64,
    A.RELEASE_25_05_LINUX_DIRECT_X64,
    A.RELEASE_25_05_STANDARD_AARCH64,
    A.UM_BIN_LATEST_LINUX_DIRECT_TEST_X64,
    A.UM_DBG_LATEST_LINUX_DIRECT_TEST_X64,
)

GUEST_TEST_UEFI = (A.GUEST_TEST_UEFI_X64, A.GUEST_TEST_UEFI_AARCH64)

# Prepped disks are produced by the prep steps
PREPPED_TEST_DISKS = (A.GEN2_WINDOWS_DATA_CENTER_CORE2025_X64_PREPPED,)

TMK_VMM_LINUX_MUSL = (A.TMK_VMM_LINUX_X64_MUSL, A.TMK_VMM_LINUX_AARCH64_MUSL)
SIMPLE_TMKS = (A.SIMPLE_TMK_X64, A.SIMPLE_TMK_AARCH64)


def _build_table(
    groups: Iterable[tuple[Iterable[A], frozenset[T]]],
) -> Mapping[ArtifactId, frozenset[T]]:
    table: dict[ArtifactId, frozenset[T]] = {}
    for identifiers, toggles in groups:
        for identifier in identifiers:
            table[identifier.value] = table.get(identifier.value, frozenset()) | toggles
    return MappingProxyType(table)


CLASSIFICATION_TABLE: Mapping[ArtifactId, frozenset[T]] = _build_table(
    [
        (PIPETTE_WINDOWS, frozenset({T.PIPETTE_WINDOWS})),
        (PIPETTE_LINUX, frozenset({T.PIPETTE_LINUX})),
        ((A.OPENVMM_NATIVE,), frozenset({T.OPENVMM})),
        (OPENHCL_IGVM, frozenset({T.OPENHCL})),
        (GUEST_TEST_UEFI, frozenset({T.GUEST_TEST_UEFI})),
        (PREPPED_TEST_DISKS, frozenset({T.PREP_STEPS})),
        (TMK_VMM_LINUX_MUSL, frozenset({T.TMKS, T.TMK_VMM_LINUX})),
        (SIMPLE_TMKS, frozenset({T.TMKS})),
        ((A.VMGSTOOL_NATIVE,), frozenset({T.VMGSTOOL})),
    ]
)

# The native TMK VMM is whatever the host runs: the Windows build on Windows
# hosts and the Linux build on Linux hosts.
HOST_CONDITIONAL_TABLE: Mapping[ArtifactId, Mapping[HostPlatform, frozenset[T]]] = (
    MappingProxyType(
        {
            A.TMK_VMM_NATIVE.value: MappingProxyType(
                {
                    HostPlatform.WINDOWS: frozenset({T.TMKS, T.TMK_VMM_WINDOWS}),
                    HostPlatform.LINUX: frozenset({T.TMKS, T.TMK_VMM_LINUX}),
                    HostPlatform.MACOS: frozenset({T.TMKS}),
                }
            ),
        }
    )
)


def is_classified(identifier: ArtifactId) -> bool:
    """Whether ``identifier`` has an entry in either table."""
    return identifier in CLASSIFICATION_TABLE or identifier in HOST_CONDITIONAL_TABLE


def classify(identifier: ArtifactId, host: HostPlatform) -> frozenset[T]:
    """Return the toggles ``identifier`` enables on ``host``.

    Unknown identifiers enable nothing.
    """
    toggles = CLASSIFICATION_TABLE.get(identifier, frozenset())
    per_host = HOST_CONDITIONAL_TABLE.get(identifier)
    if per_host is not None:
        toggles = toggles | per_host.get(HostPlatform(host), frozenset())
    return toggles
