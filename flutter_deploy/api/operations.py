"""Convenience functions for scripted use"""

from pathlib import Path
from typing import Union

from ..core import VersionManager, ConfigValidator
from ..models import VersionString, ConfigPresenceReport


def read_version(manifest_path: Union[str, Path]) -> VersionString:
    """
    Read the version declared in a manifest (convenience function)

    Args:
        manifest_path: Path to pubspec.yaml

    Returns:
        VersionString
    """
    return VersionManager().read_version(manifest_path)


def bump_version(manifest_path: Union[str, Path], new_name: str) -> VersionString:
    """
    Set a new version name and increment the build number (convenience function)

    Args:
        manifest_path: Path to pubspec.yaml
        new_name: New version name

    Returns:
        The VersionString written to the manifest
    """
    return VersionManager().bump_version(manifest_path, new_name)


def validate(project_root: Union[str, Path]) -> ConfigPresenceReport:
    """
    Check the signing configuration of a Flutter project (convenience function)

    Args:
        project_root: Flutter project root

    Returns:
        ConfigPresenceReport
    """
    return ConfigValidator().validate(project_root)
