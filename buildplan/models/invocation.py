"""Inputs of the cargo invocation builders."""

from collections.abc import Iterable
from enum import Enum
from typing import Literal, TypeAlias

from pydantic import ConfigDict, Field, model_validator

from buildplan.models.base import BuildPlanBaseModel


class WorkspacePackages(BuildPlanBaseModel):
    """All workspace packages minus ``exclude`` (kept in caller order)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["workspace"] = "workspace"
    exclude: tuple[str, ...] = ()

    def to_cargo_arg_strings(self) -> list[str]:
        args = ["--workspace"]
        for crate_name in self.exclude:
            args.extend(["--exclude", crate_name])
        return args


class CratePackages(BuildPlanBaseModel):
    """An explicit, ordered list of packages."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["crates"] = "crates"
    crates: tuple[str, ...]

    def to_cargo_arg_strings(self) -> list[str]:
        args: list[str] = []
        for crate_name in self.crates:
            args.extend(["-p", crate_name])
        return args


PackageSelection: TypeAlias = WorkspacePackages | CratePackages


class BuildProfileKind(str, Enum):
    DEBUG = "debug"
    RELEASE = "release"
    CUSTOM = "custom"


class BuildProfile(BuildPlanBaseModel):
    """Cargo build profile: debug, release, or a custom named profile."""

    model_config = ConfigDict(frozen=True)

    kind: BuildProfileKind
    custom_name: str | None = None

    @model_validator(mode="after")
    def validate_custom_name(self) -> "BuildProfile":
        if self.kind is BuildProfileKind.CUSTOM and not self.custom_name:
            raise ValueError("Custom build profile requires a name")
        if self.kind is not BuildProfileKind.CUSTOM and self.custom_name:
            raise ValueError("Only custom build profiles carry a name")
        return self

    @classmethod
    def debug(cls) -> "BuildProfile":
        return cls(kind=BuildProfileKind.DEBUG)

    @classmethod
    def release(cls) -> "BuildProfile":
        return cls(kind=BuildProfileKind.RELEASE)

    @classmethod
    def custom(cls, name: str) -> "BuildProfile":
        return cls(kind=BuildProfileKind.CUSTOM, custom_name=name)

    @classmethod
    def from_release_flag(cls, release: bool) -> "BuildProfile":
        return cls.release() if release else cls.debug()

    @classmethod
    def parse(cls, value: str) -> "BuildProfile":
        """Parse a profile name as typed on the command line.

        ``dev`` and ``debug`` both mean the debug profile.
        """
        lowered = value.strip().lower()
        if lowered in ("dev", "debug"):
            return cls.debug()
        if lowered == "release":
            return cls.release()
        return cls.custom(value.strip())

    @property
    def cargo_profile(self) -> str:
        """Profile name as passed to ``cargo --profile``."""
        if self.kind is BuildProfileKind.DEBUG:
            return "dev"
        if self.kind is BuildProfileKind.RELEASE:
            return "release"
        assert self.custom_name is not None
        return self.custom_name


class FeatureSelection(BuildPlanBaseModel):
    """Cargo features to enable.

    The empty selection renders no tokens.
    """

    model_config = ConfigDict(frozen=True)

    all_features: bool = False
    features: frozenset[str] = Field(default_factory=frozenset)

    @model_validator(mode="after")
    def validate_exclusive(self) -> "FeatureSelection":
        if self.all_features and self.features:
            raise ValueError("all_features cannot be combined with explicit features")
        return self

    @classmethod
    def none(cls) -> "FeatureSelection":
        return cls()

    @classmethod
    def all(cls) -> "FeatureSelection":
        return cls(all_features=True)

    @classmethod
    def specific(cls, features: Iterable[str]) -> "FeatureSelection":
        return cls(features=frozenset(f for f in features if f))

    def to_cargo_arg_strings(self) -> list[str]:
        if self.all_features:
            return ["--all-features"]
        if self.features:
            return ["--features", ",".join(sorted(self.features))]
        return []


class CargoFlags(BuildPlanBaseModel):
    """Workspace-wide flags passed to every cargo invocation."""

    model_config = ConfigDict(frozen=True)

    locked: bool = False
    verbose: bool = False

    def to_cargo_arg_strings(self) -> list[str]:
        args: list[str] = []
        if self.locked:
            args.append("--locked")
        if self.verbose:
            args.append("--verbose")
        return args
