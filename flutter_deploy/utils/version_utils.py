"""Version comparison utilities"""

from typing import Optional

from packaging.version import parse, Version, InvalidVersion


def parse_version(version_str: str) -> Optional[Version]:
    """
    Parse version string

    Args:
        version_str: Version string

    Returns:
        Version object or None if invalid
    """
    try:
        return parse(version_str)
    except InvalidVersion:
        return None


def compare_versions(version1: str, version2: str) -> Optional[int]:
    """
    Compare two version names

    Args:
        version1: First version
        version2: Second version

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2
        None if either name is not a parseable version
    """
    v1 = parse_version(version1)
    v2 = parse_version(version2)

    if v1 is None or v2 is None:
        return None

    if v1 < v2:
        return -1
    elif v1 > v2:
        return 1
    return 0


def is_downgrade(current_name: str, new_name: str) -> bool:
    """
    Check whether a new version name sorts below the current one

    Args:
        current_name: Current version name
        new_name: Proposed version name

    Returns:
        True only when both names parse and new_name is lower
    """
    return compare_versions(new_name, current_name) == -1
