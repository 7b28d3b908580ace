"""CLI utility functions"""

from .output import (
    console,
    format_report,
    format_setup_result,
    format_build_result,
    format_next_steps,
    format_paths,
    print_error,
    print_warning,
    print_info,
    print_success,
)

__all__ = [
    'console',

    # Result formatting
    'format_report',
    'format_setup_result',
    'format_build_result',
    'format_next_steps',
    'format_paths',

    # Messages
    'print_error',
    'print_warning',
    'print_info',
    'print_success',
]
