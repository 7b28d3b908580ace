"""Manifest version model"""

import re
from dataclasses import dataclass

from ..api.exceptions import MalformedVersionError
from ..constants import BUILD_SEPARATOR

BUILD_NUMBER_PATTERN = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class VersionString:
    """A release version of the form ``<name>+<build_number>``

    ``name`` is free-form text (usually a semantic version such as ``1.0.1``),
    ``build_number`` is the non-negative integer that distinguishes successive
    releases sharing the same name.
    """
    name: str
    build_number: int

    def __post_init__(self):
        check_version_name(self.name)
        if isinstance(self.build_number, bool) or not isinstance(self.build_number, int):
            raise MalformedVersionError(
                str(self.build_number), reason="build number must be an integer"
            )
        if self.build_number < 0:
            raise MalformedVersionError(
                str(self.build_number), reason="build number must be non-negative"
            )

    @classmethod
    def parse(cls, value: str, path=None) -> 'VersionString':
        """Parse the canonical ``<name>+<build>`` encoding

        Args:
            value: Raw version value (without the ``version:`` key)
            path: Manifest path, used in error messages

        Returns:
            VersionString instance

        Raises:
            MalformedVersionError: If the value has no build suffix, an empty
                name or a build number that is not a non-negative integer
        """
        name, separator, build = value.partition(BUILD_SEPARATOR)

        if not separator:
            raise MalformedVersionError(value, path, "missing '+<build number>' suffix")
        if not name:
            raise MalformedVersionError(value, path, "version name is empty")
        if not BUILD_NUMBER_PATTERN.fullmatch(build):
            raise MalformedVersionError(
                value, path, f"build number '{build}' is not a non-negative integer"
            )

        return cls(name=name, build_number=int(build))

    def bump(self, new_name: str = None) -> 'VersionString':
        """Return the next version, incrementing the build number by one"""
        return VersionString(
            name=self.name if new_name is None else new_name,
            build_number=self.build_number + 1,
        )

    def to_dict(self):
        """Convert to dictionary"""
        return {
            "name": self.name,
            "build_number": self.build_number,
            "version": str(self),
        }

    def __str__(self) -> str:
        return f"{self.name}{BUILD_SEPARATOR}{self.build_number}"


def check_version_name(name: str) -> str:
    """Ensure a version name can be written back as a single manifest value"""
    if not isinstance(name, str) or not name.strip():
        raise MalformedVersionError(str(name), reason="version name is empty")
    if BUILD_SEPARATOR in name:
        raise MalformedVersionError(name, reason="version name must not contain '+'")
    if "\n" in name or "\r" in name:
        raise MalformedVersionError(name, reason="version name must be a single line")
    return name
