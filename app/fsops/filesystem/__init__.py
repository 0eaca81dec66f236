"""Filesystem path parsing and tree operations.

This module provides path component parsing, directory creation,
fail-fast and best-effort deletion, age-based clearing, stream copying,
moves, and small text and object persistence helpers.
"""

from fsops.filesystem.components import (
    PathComponents,
    components,
    extension,
    name,
    name_without_extension,
    parent,
)
from fsops.filesystem.deletion import clear_all, clear_expired, delete, delete_best_effort
from fsops.filesystem.directories import create_directory, create_file, ensure_parent_dirs
from fsops.filesystem.errors import FileOperationError
from fsops.filesystem.models import ClearResult, OperationResult, ProgressCallback
from fsops.filesystem.persistence import read_object, save_object
from fsops.filesystem.queries import file_size, is_directory, is_file
from fsops.filesystem.streams import copy_file, copy_stream, copy_with_progress, move, store
from fsops.filesystem.textio import read_lines, read_text, write_lines, write_text

__all__ = [
    "ClearResult",
    "FileOperationError",
    "OperationResult",
    "PathComponents",
    "ProgressCallback",
    "clear_all",
    "clear_expired",
    "components",
    "copy_file",
    "copy_stream",
    "copy_with_progress",
    "create_directory",
    "create_file",
    "delete",
    "delete_best_effort",
    "ensure_parent_dirs",
    "extension",
    "file_size",
    "is_directory",
    "is_file",
    "move",
    "name",
    "name_without_extension",
    "parent",
    "read_lines",
    "read_object",
    "read_text",
    "save_object",
    "store",
    "write_lines",
    "write_text",
]
