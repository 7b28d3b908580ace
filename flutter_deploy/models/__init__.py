"""Data models for flutter-deploy"""

from .version import VersionString
from .report import PresenceCheck, ConfigPresenceReport
from .result import CommandResult, SetupResult, BuildResult
from .config import DeployConfig, ToolsConfig, KeystoreConfig

__all__ = [
    # Version models
    "VersionString",

    # Report models
    "PresenceCheck",
    "ConfigPresenceReport",

    # Result models
    "CommandResult",
    "SetupResult",
    "BuildResult",

    # Config models
    "DeployConfig",
    "ToolsConfig",
    "KeystoreConfig",
]
