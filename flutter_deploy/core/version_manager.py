# flutter_deploy/core/version_manager.py
"""Read and bump the version declared in a Flutter manifest"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Union

from ..api.exceptions import NotFoundError, FileAccessError
from ..constants import VERSION_KEY
from ..models.version import VersionString, check_version_name
from ..utils.file_utils import stat_path, read_text_exact, atomic_write_text


@dataclass
class ManifestLines:
    """A manifest split into lines, with the located version line

    Lines are split on ``\\n`` only and keep any ``\\r``, so joining them
    with ``\\n`` reproduces the file byte for byte.
    """
    path: Path
    lines: List[str]
    index: int
    match_count: int

    @property
    def line(self) -> str:
        return self.lines[self.index]

    @property
    def line_ending(self) -> str:
        return "\r" if self.line.endswith("\r") else ""

    @property
    def value(self) -> str:
        """Version value with key, whitespace and one level of quotes removed"""
        value = self.line[len(VERSION_KEY):].strip()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
            value = value[1:-1].strip()
        return value

    def replace(self, version: VersionString) -> str:
        """Return the full text with only the version line rewritten"""
        lines = list(self.lines)
        lines[self.index] = f"{VERSION_KEY} {version}{self.line_ending}"
        return "\n".join(lines)


class VersionManager:
    """Read-modify-write of the ``version: <name>+<build>`` manifest line

    The version line is the first line starting with ``version:`` at column
    zero. Indented ``version:`` keys (e.g. inside ``dependencies``) never
    match. Only the first match is ever rewritten.
    """

    def __init__(self):
        self.logger = logging.getLogger(self.__class__.__name__)

    def read_version(self, manifest_path: Union[str, Path]) -> VersionString:
        """
        Parse the version declared in a manifest

        Args:
            manifest_path: Path to the manifest file

        Returns:
            VersionString

        Raises:
            NotFoundError: If the file or the version line is absent
            MalformedVersionError: If the value is not ``<name>+<build>``
            FileAccessError: If the file cannot be read
        """
        located = self._locate(Path(manifest_path))
        return VersionString.parse(located.value, located.path)

    def bump_version(self, manifest_path: Union[str, Path], new_name: str) -> VersionString:
        """
        Replace the version name and increment the build number

        Args:
            manifest_path: Path to the manifest file
            new_name: New version name (may equal the current one)

        Returns:
            The new VersionString written to the manifest

        Raises:
            NotFoundError: If the file or the version line is absent
            MalformedVersionError: If the current value or new_name is invalid
            FileAccessError: If the file cannot be read or written
        """
        check_version_name(new_name)

        located = self._locate(Path(manifest_path))
        current = VersionString.parse(located.value, located.path)
        new_version = current.bump(new_name.strip())

        if located.match_count > 1:
            self.logger.warning(
                f"{located.path} declares {located.match_count} version lines; "
                f"only line {located.index + 1} is updated"
            )

        if not os.access(located.path, os.W_OK):
            raise FileAccessError(f"No write permission: {located.path}", located.path)

        try:
            atomic_write_text(located.path, located.replace(new_version))
        except OSError as e:
            raise FileAccessError(f"Cannot write {located.path}: {e}", located.path) from e

        self.logger.info(f"Version bumped: {current} -> {new_version}")
        return new_version

    def _locate(self, path: Path) -> ManifestLines:
        try:
            info = stat_path(path)
        except OSError as e:
            raise FileAccessError(f"Cannot access {path}: {e}", path) from e

        if info is None:
            raise NotFoundError(f"Manifest not found: {path}", path)

        try:
            content = read_text_exact(path)
        except (OSError, UnicodeDecodeError) as e:
            raise FileAccessError(f"Cannot read {path}: {e}", path) from e

        lines = content.split("\n")
        matches = [i for i, line in enumerate(lines) if line.startswith(VERSION_KEY)]

        if not matches:
            raise NotFoundError(f"Version not found in {path}", path)

        return ManifestLines(
            path=path,
            lines=lines,
            index=matches[0],
            match_count=len(matches),
        )
