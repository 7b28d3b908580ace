"""CLI decorators"""

from .project import handle_errors, pass_service

__all__ = [
    'handle_errors',
    'pass_service',
]
