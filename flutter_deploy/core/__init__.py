"""Core functionality for flutter-deploy"""

from .path_resolver import PathResolver
from .process_runner import ProcessRunner
from .version_manager import VersionManager
from .config_validator import ConfigValidator
from .environment import check_environment
from .keystore_manager import KeystoreManager
from .flutter_builder import FlutterBuilder

__all__ = [
    "PathResolver",
    "ProcessRunner",
    "VersionManager",
    "ConfigValidator",
    "check_environment",
    "KeystoreManager",
    "FlutterBuilder",
]
