"""Utility functions for flutter-deploy"""

from .file_utils import (
    stat_path,
    get_file_size,
    format_size,
    read_text_exact,
    atomic_write_text,
)

from .version_utils import (
    parse_version,
    compare_versions,
    is_downgrade,
)

__all__ = [
    # File utilities
    "stat_path",
    "get_file_size",
    "format_size",
    "read_text_exact",
    "atomic_write_text",

    # Version utilities
    "parse_version",
    "compare_versions",
    "is_downgrade",
]
