"""Host platform and execution backend enums."""

import sys
from enum import Enum

from buildplan.core.errors import ConfigError


class HostPlatform(str, Enum):
    """Operating system of the machine the resolved plan will run on."""

    WINDOWS = "windows"
    LINUX = "linux"
    MACOS = "macos"

    @classmethod
    def current(cls) -> "HostPlatform":
        """Return the platform of the running interpreter.

        Only entry points call this; the resolver always takes the host as an
        explicit argument.

        Raises:
            ConfigError: If the running platform is not supported
        """
        if sys.platform.startswith("win"):
            return cls.WINDOWS
        if sys.platform.startswith("linux"):
            return cls.LINUX
        if sys.platform == "darwin":
            return cls.MACOS
        raise ConfigError(f"Unsupported host platform: {sys.platform}")


class BackendKind(str, Enum):
    """Where a pipeline step executes."""

    LOCAL = "local"
    GITHUB = "github"
    ADO = "ado"

    @property
    def is_local(self) -> bool:
        return self is BackendKind.LOCAL
