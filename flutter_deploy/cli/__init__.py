"""Command line interface for flutter-deploy"""

from .main import cli, main

__all__ = ["cli", "main"]
