"""Service layer for flutter-deploy"""

from .config_service import ConfigService
from .release_service import ReleaseService

__all__ = [
    "ConfigService",
    "ReleaseService",
]
