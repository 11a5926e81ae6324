"""Tests for cargo invocation input models."""

import pytest
from pydantic import ValidationError

from buildplan.models import (
    BuildProfile,
    BuildProfileKind,
    CargoFlags,
    CratePackages,
    FeatureSelection,
    WorkspacePackages,
)


class TestBuildProfile:
    """Test BuildProfile mapping to cargo profile names."""

    def test_debug_maps_to_dev(self):
        assert BuildProfile.debug().cargo_profile == "dev"

    def test_release_maps_to_release(self):
        assert BuildProfile.release().cargo_profile == "release"

    def test_custom_maps_to_its_name(self):
        assert BuildProfile.custom("ci-fast").cargo_profile == "ci-fast"

    def test_custom_requires_name(self):
        with pytest.raises(ValidationError):
            BuildProfile(kind=BuildProfileKind.CUSTOM)

    def test_only_custom_carries_name(self):
        with pytest.raises(ValidationError):
            BuildProfile(kind=BuildProfileKind.RELEASE, custom_name="release")

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("dev", "dev"),
            ("debug", "dev"),
            ("Release", "release"),
            ("underhill-ship", "underhill-ship"),
        ],
    )
    def test_parse(self, value, expected):
        assert BuildProfile.parse(value).cargo_profile == expected

    def test_from_release_flag(self):
        assert BuildProfile.from_release_flag(True) == BuildProfile.release()
        assert BuildProfile.from_release_flag(False) == BuildProfile.debug()


class TestFeatureSelection:
    """Test FeatureSelection rendering."""

    def test_empty_selection_renders_nothing(self):
        assert FeatureSelection.none().to_cargo_arg_strings() == []

    def test_all_features(self):
        assert FeatureSelection.all().to_cargo_arg_strings() == ["--all-features"]

    def test_specific_features_are_sorted_and_joined(self):
        features = FeatureSelection.specific(["tdx", "ci", "", "snp"])

        assert features.to_cargo_arg_strings() == ["--features", "ci,snp,tdx"]

    def test_all_and_specific_are_exclusive(self):
        with pytest.raises(ValidationError):
            FeatureSelection(all_features=True, features=frozenset({"ci"}))


class TestPackageSelection:
    """Test package selection rendering."""

    def test_workspace_keeps_exclusion_order(self):
        packages = WorkspacePackages(exclude=("zeta", "alpha"))

        assert packages.to_cargo_arg_strings() == [
            "--workspace",
            "--exclude",
            "zeta",
            "--exclude",
            "alpha",
        ]

    def test_workspace_without_exclusions(self):
        assert WorkspacePackages().to_cargo_arg_strings() == ["--workspace"]

    def test_crates_keep_order(self):
        packages = CratePackages(crates=("vmm_tests", "petri"))

        assert packages.to_cargo_arg_strings() == ["-p", "vmm_tests", "-p", "petri"]


@pytest.mark.parametrize(
    ("locked", "verbose", "expected"),
    [
        (False, False, []),
        (True, False, ["--locked"]),
        (False, True, ["--verbose"]),
        (True, True, ["--locked", "--verbose"]),
    ],
)
def test_cargo_flags(locked, verbose, expected):
    assert CargoFlags(locked=locked, verbose=verbose).to_cargo_arg_strings() == expected
