"""Stream copying, file copy, and move.

Failure policies differ per entry point:

- copy_stream() and copy_file() raise FileOperationError on any I/O failure.
- copy_with_progress() and store() log the failure and report it
  through their return value.

Both streams are always closed before a copy returns, whatever the outcome.
"""

import logging
import os
import shutil
from pathlib import Path
from typing import BinaryIO

from fsops.core.config import get_settings
from fsops.core.locking import serialized
from fsops.filesystem.deletion import delete
from fsops.filesystem.directories import create_file, ensure_parent_dirs
from fsops.filesystem.errors import FileOperationError
from fsops.filesystem.models import OperationResult, ProgressCallback

logger = logging.getLogger(__name__)


def _write_mode(append: bool) -> str:
    return "ab" if append else "wb"


def copy_stream(
    source: BinaryIO,
    destination: str | os.PathLike[str],
    append: bool = False,
    *,
    buffer_size: int | None = None,
) -> bool:
    """Copy a readable stream into a file, chunk by chunk.

    Args:
        source: Readable binary stream. It is closed on return.
        destination: File to write. Missing parent directories are created.
        append: If True, write after the current end of the file
            instead of truncating it.
        buffer_size: Chunk size in bytes. Defaults to the configured
            copy buffer size.

    Returns:
        True once the whole source has been written.

    Raises:
        FileOperationError: If opening, reading, or writing fails.
    """
    chunk_size = buffer_size or get_settings().io.copy_buffer_size
    ensure_parent_dirs(destination)

    try:
        with source, open(destination, _write_mode(append)) as out:
            while chunk := source.read(chunk_size):
                out.write(chunk)
            out.flush()
    except OSError as e:
        raise FileOperationError(f"Failed to copy stream to {destination}: {e}") from e

    return True


def copy_with_progress(
    source: BinaryIO | None,
    destination: str | os.PathLike[str] | None,
    total_length: int,
    on_progress: ProgressCallback | None = None,
    append: bool = False,
    *,
    buffer_size: int | None = None,
) -> OperationResult:
    """Copy up to ``total_length`` bytes from a stream, reporting progress.

    The content is buffered in memory (sized to the declared length)
    and written once the source is drained or the declared length is
    reached. A source that ends early is not an error: whatever was
    read is written.

    Args:
        source: Readable binary stream. It is closed on return.
        destination: File to write. Missing parent directories are created.
        total_length: Number of bytes the caller expects the source to hold.
        on_progress: Called after every chunk with
            ``(bytes_in_chunk, bytes_remaining)``.
        append: If True, write after the current end of the file.
        buffer_size: Chunk size in bytes. Defaults to the configured
            copy buffer size.

    Returns:
        OperationResult, with the I/O error attached on failure.
    """
    if source is None or destination is None:
        return OperationResult(
            path=os.fspath(destination) if destination is not None else "",
            success=False,
            error="Source and destination are required",
        )

    target = os.fspath(destination)
    chunk_size = buffer_size or get_settings().io.copy_buffer_size
    ensure_parent_dirs(target)

    buffer = bytearray(max(total_length, 0))
    consumed = 0
    try:
        with source, open(target, _write_mode(append)) as out:
            remaining = total_length
            while remaining > 0:
                chunk = source.read(min(chunk_size, remaining))
                if not chunk:
                    break
                buffer[consumed : consumed + len(chunk)] = chunk
                consumed += len(chunk)
                remaining -= len(chunk)
                if on_progress is not None:
                    on_progress(len(chunk), remaining)

            out.write(buffer[:consumed])
            out.flush()
    except OSError as e:
        logger.warning("Progress copy to %s failed: %s", target, e)
        return OperationResult(path=target, success=False, error=str(e))

    logger.debug("Copied %d of %d bytes to %s", consumed, total_length, target)
    return OperationResult(path=target, success=True)


def copy_file(
    source_path: str | os.PathLike[str],
    destination_path: str | os.PathLike[str],
    append: bool = False,
) -> bool:
    """Copy one file to another path.

    Args:
        source_path: File to read.
        destination_path: File to write.
        append: If True, append to the destination instead of truncating it.

    Returns:
        True once the copy has completed.

    Raises:
        FileOperationError: If the source cannot be opened or the copy fails.
    """
    try:
        source = open(source_path, "rb")
    except OSError as e:
        raise FileOperationError(f"Cannot open {source_path}: {e}") from e
    return copy_stream(source, destination_path, append)


@serialized
def store(source: BinaryIO, path: str | os.PathLike[str] | None) -> bool:
    """Save a stream into a file, replacing its content.

    The source stream is always closed, even when the file cannot be
    created.

    Args:
        source: Readable binary stream.
        path: File to write. It is created, with its parent directories,
            if missing.

    Returns:
        True if the whole stream was written, False on any failure.

    Raises:
        ValueError: If ``path`` is None.
    """
    if path is None:
        raise ValueError("path should not be None")

    chunk_size = get_settings().io.store_buffer_size
    with source:
        file = create_file(path)
        if file is None:
            return False
        try:
            with open(file, "wb") as out:
                while chunk := source.read(chunk_size):
                    out.write(chunk)
        except OSError as e:
            logger.warning("Failed to store stream to %s: %s", file, e)
            return False
    return True


def _copy_tree(source: Path, destination: Path) -> None:
    """Copy a directory tree file by file.

    Raises:
        FileOperationError: If any directory or file cannot be copied.
    """
    pending = [(source, destination)]
    while pending:
        src_dir, dst_dir = pending.pop()
        try:
            dst_dir.mkdir(parents=True, exist_ok=True)
            entries = sorted(src_dir.iterdir())
        except OSError as e:
            raise FileOperationError(f"Cannot copy directory {src_dir}: {e}") from e

        for entry in entries:
            target = dst_dir / entry.name
            if entry.is_symlink():
                try:
                    target.symlink_to(os.readlink(entry))
                except OSError as e:
                    raise FileOperationError(f"Cannot copy link {entry}: {e}") from e
            elif entry.is_dir():
                pending.append((entry, target))
            else:
                copy_file(entry, target)
                try:
                    shutil.copystat(entry, target)
                except OSError as e:
                    logger.debug("Cannot copy metadata of %s: %s", entry, e)


def move(source: str | os.PathLike[str], destination: str | os.PathLike[str]) -> bool:
    """Move a file or directory, copying when a rename is not possible.

    A plain rename is tried first. If it fails (for example across
    devices) the source is copied and only then deleted with the
    fail-fast delete().

    Args:
        source: File or directory to move.
        destination: New location.

    Returns:
        True if the source is gone afterwards. False means the copy
        succeeded but the source could not be fully deleted.

    Raises:
        ValueError: If either path is empty.
        FileOperationError: If the fallback copy fails; the source is
            left untouched in that case.
    """
    if not source or not destination:
        raise ValueError("Both source and destination must be non-empty paths")

    src = Path(source)
    dst = Path(destination)
    try:
        src.rename(dst)
        return True
    except OSError as e:
        logger.debug("Rename %s -> %s failed, copying instead: %s", src, dst, e)

    if src.is_dir() and not src.is_symlink():
        _copy_tree(src, dst)
    else:
        copy_file(src, dst)

    return delete(src)
