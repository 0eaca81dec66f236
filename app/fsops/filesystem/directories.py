"""Directory and file creation.

All creation helpers treat "already exists" as success and report
failures through their return value rather than raising.
"""

import logging
import os
from pathlib import Path

from fsops.core.locking import serialized
from fsops.filesystem.components import parent

logger = logging.getLogger(__name__)


def _make_dirs(directory: Path) -> bool:
    """Create ``directory`` and any missing ancestors, reporting the outcome."""
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.debug("Cannot create directory %s: %s", directory, e)
        return False
    return True


def ensure_parent_dirs(path: str | os.PathLike[str]) -> bool:
    """Create the directories that would contain ``path``.

    A bare file name has no parent segment, so nothing can be created
    for it and the call fails. Re-running on an existing tree is a
    no-op success.

    Args:
        path: Path of a file (or directory) whose parent should exist.

    Returns:
        True if the parent directory exists afterwards, False otherwise.
    """
    folder = parent(os.fspath(path))
    if not folder:
        return False

    directory = Path(folder)
    if directory.is_dir():
        return True
    return _make_dirs(directory)


@serialized
def create_directory(path: str | os.PathLike[str] | None) -> Path | None:
    """Create a directory (and its ancestors) unless it already exists.

    Args:
        path: Directory path to create.

    Returns:
        The directory, or None if ``path`` is empty or creation failed.
    """
    if not path:
        return None

    directory = Path(path)
    if directory.is_dir():
        return directory
    return directory if _make_dirs(directory) else None


@serialized
def create_file(path: str | os.PathLike[str] | None) -> Path | None:
    """Create an empty file, or return it if it already exists.

    Missing parent directories are created first.

    Args:
        path: File path to create.

    Returns:
        The file, or None if ``path`` is empty or the file could not be created.
    """
    if not path:
        return None

    file = Path(path)
    if file.is_file():
        return file

    folder = file.parent
    if not (folder.is_dir() or _make_dirs(folder)):
        return None

    try:
        file.touch(exist_ok=False)
    except OSError as e:
        logger.warning("Cannot create file %s: %s", file, e)
        return None
    return file
