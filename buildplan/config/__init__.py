"""Configuration for buildplan."""

from buildplan.config.settings import (
    ENV_PREFIX,
    BuildPlanSettings,
    find_config_file,
    load_settings,
)


__all__ = ["ENV_PREFIX", "BuildPlanSettings", "find_config_file", "load_settings"]
