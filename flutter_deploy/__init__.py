"""Flutter Deploy - Play Store release automation for Flutter apps.

Generates the release keystore, validates signing configuration, drives
``flutter build`` for app bundles and APKs, and bumps the version declared
in ``pubspec.yaml``.
"""

from .__version__ import __version__, __version_info__, __license__

# Exceptions and core API
from .api import (
    read_version,
    bump_version,
    validate,
    FlutterDeployError,
    ConfigError,
    NotFoundError,
    MalformedVersionError,
    FileAccessError,
    ToolNotFoundError,
    CommandError,
    BuildError,
    ValidationError,
)

# Main classes
from .core import VersionManager, ConfigValidator, ProcessRunner
from .services import ReleaseService

# Data models
from .models import VersionString, PresenceCheck, ConfigPresenceReport, BuildResult, SetupResult

__all__ = [
    # Version information
    "__version__",
    "__version_info__",
    "__license__",

    # Core API functions
    "read_version",
    "bump_version",
    "validate",

    # Main classes
    "VersionManager",
    "ConfigValidator",
    "ProcessRunner",
    "ReleaseService",

    # Data models
    "VersionString",
    "PresenceCheck",
    "ConfigPresenceReport",
    "BuildResult",
    "SetupResult",

    # Exceptions
    "FlutterDeployError",
    "ConfigError",
    "NotFoundError",
    "MalformedVersionError",
    "FileAccessError",
    "ToolNotFoundError",
    "CommandError",
    "BuildError",
    "ValidationError",
]
