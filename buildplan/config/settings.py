"""Settings for buildplan.

Sources, highest precedence first:
1. Environment variables (``BUILDPLAN_*``)
2. YAML config file (``--config`` path, or ``buildplan.yaml`` in the working directory)
3. Default values
"""

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from buildplan.core.errors import ConfigError
from buildplan.core.structlog_logger import get_struct_logger
from buildplan.models.invocation import CargoFlags
from buildplan.models.platform import BackendKind, HostPlatform


logger = get_struct_logger(__name__)

ENV_PREFIX = "BUILDPLAN_"
DEFAULT_CONFIG_FILENAMES = ("buildplan.yaml", ".buildplan.yml")


class BuildPlanSettings(BaseSettings):
    """Runtime settings with automatic environment variable support."""

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        case_sensitive=False,
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: Any,
        env_settings: Any,
        dotenv_settings: Any,
        file_secret_settings: Any,
    ) -> tuple[Any, ...]:
        """Environment variables override file data passed to the constructor."""
        return (
            env_settings,
            init_settings,
            dotenv_settings,
            file_secret_settings,
        )

    backend: BackendKind = Field(
        default=BackendKind.LOCAL,
        description="Execution backend; non-local backends disable incremental builds",
    )
    host: HostPlatform | None = Field(
        default=None,
        description="Host platform the plan is resolved for (defaults to the running host)",
    )
    rust_toolchain: str | None = Field(
        default=None, description="rustup toolchain to run cargo with"
    )
    locked: bool = Field(default=False, description="Pass --locked to cargo")
    cargo_verbose: bool = Field(default=False, description="Pass --verbose to cargo")
    log_level: str = Field(default="WARNING", description="Log level")
    log_format: Literal["console", "json"] = Field(default="console")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        upper_v = v.strip().upper()
        if upper_v not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}")
        return upper_v

    @field_validator("rust_toolchain")
    @classmethod
    def empty_toolchain_is_none(cls, v: str | None) -> str | None:
        if v is not None and not v.strip():
            return None
        return v

    @property
    def cargo_flags(self) -> CargoFlags:
        return CargoFlags(locked=self.locked, verbose=self.cargo_verbose)

    def effective_host(self) -> HostPlatform:
        return self.host or HostPlatform.current()


def _read_config_file(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")
    return data


def find_config_file(cli_config_path: str | Path | None = None) -> Path | None:
    """Return the config file to load, if any.

    An explicitly given path must exist; default locations are optional.
    """
    if cli_config_path:
        path = Path(cli_config_path).expanduser()
        if not path.is_file():
            raise ConfigError(f"Config file not found: {path}")
        return path

    for filename in DEFAULT_CONFIG_FILENAMES:
        candidate = Path.cwd() / filename
        if candidate.is_file():
            return candidate
    return None


def load_settings(cli_config_path: str | Path | None = None) -> BuildPlanSettings:
    """Load settings from the config file and environment.

    Raises:
        ConfigError: If the config file is missing, malformed or invalid
    """
    config_path = find_config_file(cli_config_path)
    file_data = _read_config_file(config_path) if config_path else {}
    logger.debug(
        "loading_settings",
        config_file=str(config_path) if config_path else None,
        keys=sorted(file_data),
    )

    try:
        return BuildPlanSettings(**file_data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e
