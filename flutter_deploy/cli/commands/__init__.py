# flutter_deploy/cli/commands/__init__.py
"""CLI commands"""

from . import keystore
from . import validate
from . import build
from . import version
from . import clean
from . import info

__all__ = [
    "keystore",
    "validate",
    "build",
    "version",
    "clean",
    "info",
]
