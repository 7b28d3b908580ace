"""Project context decorators for CLI commands"""

import sys
from functools import wraps
from typing import Callable

import click

from ..utils.output import console, print_error
from ...api.exceptions import FlutterDeployError, ToolNotFoundError
from ...constants import EXIT_FAILURE


def handle_errors(func: Callable) -> Callable:
    """Decorator that reports flutter-deploy errors and exits with status 1

    The error code and message are printed; tracebacks are only shown
    in debug mode.

    Args:
        func: Command function to decorate

    Returns:
        Decorated function
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except ToolNotFoundError as e:
            print_error(str(e))
            sys.exit(EXIT_FAILURE)
        except FlutterDeployError as e:
            print_error(f"[{e.error_code}] {e}")
            ctx = click.get_current_context(silent=True)
            if ctx is not None and getattr(ctx.obj, 'debug', False):
                console.print_exception()
            sys.exit(EXIT_FAILURE)

    return wrapper


def pass_service(func: Callable) -> Callable:
    """Decorator that passes the project's ReleaseService as first argument

    The service is created lazily from the CLI context, so commands that
    never touch the project (help) do not load its configuration.

    Args:
        func: Command function to decorate

    Returns:
        Decorated function
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        ctx = click.get_current_context()
        return func(ctx.obj.service, *args, **kwargs)

    return wrapper
