"""Recursive deletion and age-based clearing of directory trees.

Two delete routines with different failure policies live here and
are kept apart on purpose, since callers rely on either:

- delete(): fail-fast. The first entry that cannot be removed aborts
  the walk and the call reports failure, leaving the rest in place.
- delete_best_effort(): keeps removing siblings past failures and
  reports only whether the top-level node itself went away.

Walks use an explicit stack, so tree depth is not bounded by the
recursion limit. Symlinks are removed as links and never followed.
"""

import logging
import os
import time
from collections.abc import Iterator
from pathlib import Path

from fsops.core.locking import serialized
from fsops.filesystem.models import ClearResult

logger = logging.getLogger(__name__)


def _is_real_dir(path: Path) -> bool:
    """Return True for directories that are not symlinks."""
    return path.is_dir() and not path.is_symlink()


def _exists(path: Path) -> bool:
    """Return True if ``path`` exists, counting dead symlinks."""
    return path.exists() or path.is_symlink()


def _children(directory: Path) -> list[Path]:
    """List a directory's entries in name order.

    An unreadable directory is treated as empty; removing it will then
    fail on its own if it still has content.
    """
    try:
        return sorted(directory.iterdir())
    except OSError as e:
        logger.debug("Cannot list %s: %s", directory, e)
        return []


def _remove_entry(path: Path) -> bool:
    """Remove a single file, symlink, or empty directory.

    An entry that vanished in the meantime counts as removed.
    """
    try:
        if _is_real_dir(path):
            path.rmdir()
        else:
            path.unlink()
    except FileNotFoundError:
        return True
    except OSError as e:
        logger.debug("Cannot remove %s: %s", path, e)
        return False
    return True


def _post_order(root: Path) -> Iterator[Path]:
    """Yield every entry below ``root`` with children before their parent."""
    pending: list[tuple[Path, bool]] = [(child, False) for child in reversed(_children(root))]
    while pending:
        current, expanded = pending.pop()
        if expanded or not _is_real_dir(current):
            yield current
            continue
        pending.append((current, True))
        pending.extend((child, False) for child in reversed(_children(current)))


@serialized
def delete(path: str | os.PathLike[str] | None) -> bool:
    """Delete a file or directory tree, stopping at the first failure.

    Args:
        path: File or directory to delete.

    Returns:
        True if ``path`` is empty, absent, or fully deleted. False as soon
        as any entry cannot be removed; the containing directories and
        any entries not yet visited are left in place.
    """
    if not path or not os.fspath(path).strip():
        return True

    root = Path(path)
    if not _exists(root):
        return True

    if _is_real_dir(root):
        for entry in _post_order(root):
            if not _remove_entry(entry):
                logger.warning("Aborting delete of %s: cannot remove %s", root, entry)
                return False

    return _remove_entry(root)


@serialized
def delete_best_effort(path: str | os.PathLike[str] | None) -> bool:
    """Delete a file or directory tree, continuing past failures.

    Every entry below ``path`` is attempted regardless of whether its
    siblings could be removed.

    Args:
        path: File or directory to delete.

    Returns:
        True if ``path`` is empty or absent, otherwise whether ``path``
        itself was removed at the end.
    """
    if not path:
        return True

    root = Path(path)
    if not _exists(root):
        return True
    if not _is_real_dir(root):
        return _remove_entry(root)

    for entry in _post_order(root):
        if not _remove_entry(entry):
            logger.debug("Skipping undeletable entry %s", entry)

    return _remove_entry(root)


def _clear(directory: Path, expired_before_ms: float | None) -> ClearResult:
    """Remove entries below ``directory``, oldest-first policy optional.

    A symlinked ``directory`` is cleared through the link; links found
    below it are removed as links.

    Args:
        directory: Directory whose content is cleared; it is kept itself.
        expired_before_ms: Only entries modified before this epoch time
            (milliseconds) are removed. None removes everything.
    """
    if not directory.is_dir():
        return ClearResult(path=str(directory))

    deleted = 0
    failures: list[str] = []

    for entry in _post_order(directory):
        if expired_before_ms is not None:
            try:
                modified_ms = entry.lstat().st_mtime * 1000
            except OSError:
                continue
            if modified_ms >= expired_before_ms:
                continue

        if _remove_entry(entry):
            deleted += 1
        else:
            failures.append(str(entry))

    if failures:
        logger.warning("Could not clear %d entries under %s", len(failures), directory)
    logger.debug("Cleared %d entries under %s", deleted, directory)
    return ClearResult(path=str(directory), deleted=deleted, failures=tuple(failures))


@serialized
def clear_expired(directory: str | os.PathLike[str], max_age_ms: int) -> ClearResult:
    """Delete every entry under ``directory`` older than ``max_age_ms``.

    Subdirectories are processed before they are themselves checked,
    so an old directory is only removed once it is empty and its own
    modification time (which removing children refreshes) is still old.

    Args:
        directory: Directory to clear. The directory itself is kept.
        max_age_ms: Maximum age in milliseconds; older entries are removed.

    Returns:
        ClearResult with the number of removed entries. Absent or
        non-directory input yields a zero count.
    """
    expired_before_ms = time.time() * 1000 - max_age_ms
    return _clear(Path(directory), expired_before_ms)


@serialized
def clear_all(directory: str | os.PathLike[str]) -> ClearResult:
    """Delete every entry under ``directory``, keeping the directory itself.

    Args:
        directory: Directory to clear.

    Returns:
        ClearResult with the number of removed entries.
    """
    return _clear(Path(directory), None)
