"""Signing configuration report models"""

from dataclasses import dataclass
from pathlib import Path
from typing import Tuple, List, Dict, Any

from ..constants import CheckKind


@dataclass(frozen=True)
class PresenceCheck:
    """Presence of a single signing configuration file"""
    path: Path
    kind: CheckKind
    present: bool

    @property
    def diagnostic(self) -> str:
        """Human-readable description of the check outcome"""
        if self.kind is CheckKind.PROPERTIES:
            if self.present:
                return f"keystore.properties found: {self.path}"
            return "keystore.properties not found. Run 'flutter-deploy setup' first"

        if self.present:
            return f"Keystore file found: {self.path}"
        return f"Keystore file not found. Expected: {self.path}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "path": str(self.path),
            "kind": self.kind.value,
            "present": self.present,
        }


@dataclass(frozen=True)
class ConfigPresenceReport:
    """Outcome of a signing configuration validation

    The report is built once per validation call and never mutated. It is
    valid only when every check found its file.
    """
    checks: Tuple[PresenceCheck, ...]

    @property
    def valid(self) -> bool:
        return all(check.present for check in self.checks)

    @property
    def missing(self) -> List[PresenceCheck]:
        """Checks whose file is absent, in check order"""
        return [check for check in self.checks if not check.present]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "valid": self.valid,
            "checks": [check.to_dict() for check in self.checks],
        }
