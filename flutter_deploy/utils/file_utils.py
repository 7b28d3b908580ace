# flutter_deploy/utils/file_utils.py
"""File operation utilities"""

import os
import shutil
import tempfile
from pathlib import Path
from typing import Optional


def stat_path(file_path: Path) -> Optional[os.stat_result]:
    """
    Stat a path, distinguishing absence from inaccessibility

    Args:
        file_path: Path to inspect

    Returns:
        stat result, or None if the path does not exist

    Raises:
        OSError: If the path cannot be inspected (e.g. an unsearchable
            parent directory)
    """
    try:
        return Path(file_path).stat()
    except (FileNotFoundError, NotADirectoryError):
        return None


def get_file_size(file_path: Path) -> int:
    """
    Get file size in bytes

    Args:
        file_path: Path to file

    Returns:
        Size in bytes
    """
    return file_path.stat().st_size


def format_size(size: int) -> str:
    """
    Format file size in human-readable format

    Args:
        size: Size in bytes

    Returns:
        Formatted size string
    """
    for unit in ['B', 'KB', 'MB', 'GB', 'TB']:
        if size < 1024.0:
            return f"{size:.1f} {unit}"
        size /= 1024.0
    return f"{size:.1f} PB"


def read_text_exact(file_path: Path, encoding: str = "utf-8") -> str:
    """
    Read a text file without newline translation

    Args:
        file_path: Path to file
        encoding: Text encoding

    Returns:
        File content with original line endings
    """
    with open(file_path, 'r', encoding=encoding, newline='') as f:
        return f.read()


def atomic_write_text(file_path: Path, content: str, encoding: str = "utf-8") -> None:
    """
    Replace a file's content via a temporary file and rename

    The temporary file lives in the target directory so the final
    ``os.replace`` stays on one filesystem. The original permission bits
    are carried over. On failure the target is left untouched.

    Args:
        file_path: File to replace
        content: New content, written without newline translation
        encoding: Text encoding
    """
    file_path = Path(file_path)
    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{file_path.name}.",
        suffix=".tmp",
        dir=str(file_path.parent)
    )
    tmp_path = Path(tmp_name)

    try:
        with os.fdopen(fd, 'w', encoding=encoding, newline='') as f:
            f.write(content)
            f.flush()
            os.fsync(f.fileno())

        if file_path.exists():
            shutil.copymode(file_path, tmp_path)

        os.replace(tmp_path, file_path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise
