"""Existence and size checks for paths."""

import os
from pathlib import Path


def is_file(path: str | os.PathLike[str] | None) -> bool:
    """Return True if ``path`` is an existing regular file."""
    if not path:
        return False
    return Path(path).is_file()


def is_directory(path: str | os.PathLike[str] | None) -> bool:
    """Return True if ``path`` is an existing directory."""
    if not path:
        return False
    return Path(path).is_dir()


def file_size(path: str | os.PathLike[str] | None) -> int:
    """Return the size of a regular file in bytes.

    Returns:
        The size, or -1 if ``path`` is empty, absent, or not a regular file.
    """
    if not is_file(path):
        return -1
    try:
        return Path(path).stat().st_size  # type: ignore[arg-type]
    except OSError:
        return -1
