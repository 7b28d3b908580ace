"""Operation result models"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Dict, Any

from ..constants import BuildKind, PropertiesSource


@dataclass
class CommandResult:
    """Outcome of an external command"""
    args: List[str]
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def success(self) -> bool:
        return self.returncode == 0

    @property
    def command_line(self) -> str:
        return " ".join(str(arg) for arg in self.args)


@dataclass
class SetupResult:
    """Result of keystore setup"""
    keystore_path: Path
    properties_path: Path
    keystore_generated: bool = False
    properties_source: PropertiesSource = PropertiesSource.EXISTING

    @property
    def properties_created(self) -> bool:
        """True when setup wrote a new keystore.properties file"""
        return self.properties_source is not PropertiesSource.EXISTING

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "keystore_path": str(self.keystore_path),
            "properties_path": str(self.properties_path),
            "keystore_generated": self.keystore_generated,
            "properties_source": self.properties_source.value,
        }


@dataclass
class BuildResult:
    """Result of a release build"""
    kind: BuildKind
    artifact_path: Path
    artifact_size: int = 0
    duration: float = 0.0
    commands: List[CommandResult] = field(default_factory=list)
    version: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        data = {
            "kind": self.kind.value,
            "artifact_path": str(self.artifact_path),
            "artifact_size": self.artifact_size,
            "duration": self.duration,
            "commands": [command.command_line for command in self.commands],
        }

        if self.version:
            data["version"] = self.version

        return data
