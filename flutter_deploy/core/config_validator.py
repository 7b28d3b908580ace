# flutter_deploy/core/config_validator.py
"""Presence validation of the release signing configuration"""

import logging
import os
import stat
from pathlib import Path
from typing import Union

from ..api.exceptions import FileAccessError
from ..constants import KEYSTORE_PROPERTIES_FILE, KEYSTORE_FILE, CheckKind
from ..models.report import PresenceCheck, ConfigPresenceReport
from ..utils.file_utils import stat_path


class ConfigValidator:
    """Check that keystore.properties and the release keystore exist

    Only presence is checked; neither file is opened.
    """

    CHECKS = (
        (KEYSTORE_PROPERTIES_FILE, CheckKind.PROPERTIES),
        (KEYSTORE_FILE, CheckKind.KEYSTORE),
    )

    def __init__(self):
        self.logger = logging.getLogger(self.__class__.__name__)

    def validate(self, project_root: Union[str, Path]) -> ConfigPresenceReport:
        """
        Validate signing configuration presence

        Args:
            project_root: Flutter project root directory

        Returns:
            ConfigPresenceReport; missing files yield ``valid=False``

        Raises:
            FileAccessError: If project_root is missing, not a directory or
                not readable
        """
        root = Path(project_root)

        info = self._stat(root)
        if info is None:
            raise FileAccessError(f"Project directory does not exist: {root}", root)
        if not stat.S_ISDIR(info.st_mode):
            raise FileAccessError(f"Project path is not a directory: {root}", root)
        if not os.access(root, os.R_OK | os.X_OK):
            raise FileAccessError(f"No read permission: {root}", root)

        checks = []
        for relative_path, kind in self.CHECKS:
            path = root / relative_path
            info = self._stat(path)
            present = info is not None and stat.S_ISREG(info.st_mode)
            self.logger.debug(f"{kind.value}: {path} ({'present' if present else 'missing'})")
            checks.append(PresenceCheck(path=path, kind=kind, present=present))

        report = ConfigPresenceReport(checks=tuple(checks))

        if not report.valid:
            self.logger.info(
                f"Signing configuration incomplete: "
                f"{', '.join(check.kind.value for check in report.missing)} missing"
            )

        return report

    def _stat(self, path: Path):
        try:
            return stat_path(path)
        except OSError as e:
            raise FileAccessError(f"Cannot access {path}: {e}", path) from e
