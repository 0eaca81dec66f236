"""Line-oriented text file helpers.

Reads return None for paths that are not regular files; any I/O
failure while reading or writing is raised as FileOperationError.
Lines are joined and written with the configured line separator.
"""

import os
from collections.abc import Iterable
from pathlib import Path

from fsops.core.config import get_settings
from fsops.filesystem.directories import ensure_parent_dirs
from fsops.filesystem.errors import FileOperationError


def read_lines(path: str | os.PathLike[str], encoding: str = "utf-8") -> list[str] | None:
    """Read a text file into a list of lines without line endings.

    Args:
        path: File to read.
        encoding: Text encoding name.

    Returns:
        The lines of the file, or None if ``path`` is not a regular file.

    Raises:
        FileOperationError: If the file cannot be read or decoded.
    """
    file = Path(path)
    if not file.is_file():
        return None

    try:
        with open(file, encoding=encoding) as f:
            return f.read().splitlines()
    except (OSError, UnicodeDecodeError, LookupError) as e:
        raise FileOperationError(f"Failed to read {file}: {e}") from e


def read_text(path: str | os.PathLike[str], encoding: str = "utf-8") -> str | None:
    """Read a text file, normalizing line endings to the configured separator.

    Returns:
        The file content, or None if ``path`` is not a regular file.

    Raises:
        FileOperationError: If the file cannot be read or decoded.
    """
    lines = read_lines(path, encoding)
    if lines is None:
        return None
    return get_settings().io.line_separator.join(lines)


def _write(path: str | os.PathLike[str], content: str, append: bool) -> None:
    ensure_parent_dirs(path)
    try:
        with open(path, "a" if append else "w", encoding="utf-8", newline="") as f:
            f.write(content)
    except OSError as e:
        raise FileOperationError(f"Failed to write {path}: {e}") from e


def write_text(path: str | os.PathLike[str], content: str | None, append: bool = False) -> bool:
    """Write a string to a file.

    Args:
        path: File to write. Missing parent directories are created.
        content: Text to write.
        append: If True, append instead of replacing the file content.

    Returns:
        False if ``content`` is empty (nothing is written), True otherwise.

    Raises:
        FileOperationError: If the file cannot be written.
    """
    if not content:
        return False
    _write(path, content, append)
    return True


def write_lines(
    path: str | os.PathLike[str],
    lines: Iterable[str] | None,
    append: bool = False,
) -> bool:
    """Write lines to a file, separated by the configured line separator.

    No separator is written after the last line.

    Returns:
        False if ``lines`` is None or empty (nothing is written), True otherwise.

    Raises:
        FileOperationError: If the file cannot be written.
    """
    items = list(lines) if lines is not None else []
    if not items:
        return False
    _write(path, get_settings().io.line_separator.join(items), append)
    return True
