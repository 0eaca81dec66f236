"""Filesystem operation result models.

This module defines the result types returned by operations that
report failures instead of raising, so callers can tell "nothing to
do" apart from "I/O failed".
"""

from collections.abc import Callable
from dataclasses import dataclass

# Called with (bytes read in this chunk, bytes still expected).
ProgressCallback = Callable[[int, int], None]


@dataclass(frozen=True, slots=True)
class OperationResult:
    """Outcome of a single swallow-and-report operation.

    Attributes:
        path: Path that was operated on.
        success: Whether the operation completed successfully.
        error: Cause of the failure, None on success.
    """

    path: str
    success: bool
    error: str | None = None

    def __bool__(self) -> bool:
        return self.success


@dataclass(frozen=True, slots=True)
class ClearResult:
    """Outcome of clearing a directory tree.

    Attributes:
        path: Directory that was cleared.
        deleted: Number of entries successfully removed.
        failures: Entries that were due for removal but could not be removed.
    """

    path: str
    deleted: int = 0
    failures: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate the deleted count."""
        if self.deleted < 0:
            msg = f"Deleted count cannot be negative, got {self.deleted}"
            raise ValueError(msg)

    def __int__(self) -> int:
        return self.deleted
