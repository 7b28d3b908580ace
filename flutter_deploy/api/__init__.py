# flutter_deploy/api/__init__.py
"""API layer for flutter-deploy"""

from .exceptions import (
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
from .operations import read_version, bump_version, validate

__all__ = [
    # Convenience functions
    "read_version",
    "bump_version",
    "validate",

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
