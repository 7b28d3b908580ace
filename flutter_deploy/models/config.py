"""Configuration data models"""

from dataclasses import dataclass, field
from typing import Dict, Any

from ..api.exceptions import ConfigError
from ..constants import (
    DEFAULT_MANIFEST_FILE,
    DEFAULT_FLUTTER_BIN,
    DEFAULT_KEYTOOL_BIN,
    DEFAULT_KEY_ALIAS,
    DEFAULT_KEY_ALGORITHM,
    DEFAULT_KEY_SIZE,
    DEFAULT_KEY_VALIDITY_DAYS,
)


def _require(value, expected_type, key: str):
    if isinstance(value, bool) and expected_type is int:
        raise ConfigError(f"'{key}' must be an integer, got {value!r}")
    if not isinstance(value, expected_type):
        type_name = "an integer" if expected_type is int else "a string"
        raise ConfigError(f"'{key}' must be {type_name}, got {value!r}")
    return value


def _section(data: Dict[str, Any], key: str) -> Dict[str, Any]:
    section = data.get(key) or {}
    if not isinstance(section, dict):
        raise ConfigError(f"'{key}' must be a mapping")
    return section


@dataclass
class ToolsConfig:
    """External executables"""
    flutter: str = DEFAULT_FLUTTER_BIN
    keytool: str = DEFAULT_KEYTOOL_BIN

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ToolsConfig':
        """Create from dictionary"""
        return cls(
            flutter=_require(data.get('flutter', DEFAULT_FLUTTER_BIN), str, 'tools.flutter'),
            keytool=_require(data.get('keytool', DEFAULT_KEYTOOL_BIN), str, 'tools.keytool'),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            'flutter': self.flutter,
            'keytool': self.keytool,
        }


@dataclass
class KeystoreConfig:
    """Parameters passed to keytool when generating the release keystore"""
    alias: str = DEFAULT_KEY_ALIAS
    keyalg: str = DEFAULT_KEY_ALGORITHM
    keysize: int = DEFAULT_KEY_SIZE
    validity: int = DEFAULT_KEY_VALIDITY_DAYS

    def __post_init__(self):
        if self.keysize <= 0:
            raise ConfigError("'keystore.keysize' must be positive")
        if self.validity <= 0:
            raise ConfigError("'keystore.validity' must be positive")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'KeystoreConfig':
        """Create from dictionary"""
        return cls(
            alias=_require(data.get('alias', DEFAULT_KEY_ALIAS), str, 'keystore.alias'),
            keyalg=_require(data.get('keyalg', DEFAULT_KEY_ALGORITHM), str, 'keystore.keyalg'),
            keysize=_require(data.get('keysize', DEFAULT_KEY_SIZE), int, 'keystore.keysize'),
            validity=_require(data.get('validity', DEFAULT_KEY_VALIDITY_DAYS), int, 'keystore.validity'),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            'alias': self.alias,
            'keyalg': self.keyalg,
            'keysize': self.keysize,
            'validity': self.validity,
        }


@dataclass
class DeployConfig:
    """Tool configuration stored in .flutter-deploy.yaml"""
    manifest: str = DEFAULT_MANIFEST_FILE
    tools: ToolsConfig = field(default_factory=ToolsConfig)
    keystore: KeystoreConfig = field(default_factory=KeystoreConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'DeployConfig':
        """Create DeployConfig from dictionary

        Args:
            data: Configuration dictionary

        Returns:
            DeployConfig instance

        Raises:
            ConfigError: If a section or value has the wrong type
        """
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError("Configuration must be a mapping")

        return cls(
            manifest=_require(data.get('manifest', DEFAULT_MANIFEST_FILE), str, 'manifest'),
            tools=ToolsConfig.from_dict(_section(data, 'tools')),
            keystore=KeystoreConfig.from_dict(_section(data, 'keystore')),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            'manifest': self.manifest,
            'tools': self.tools.to_dict(),
            'keystore': self.keystore.to_dict(),
        }
