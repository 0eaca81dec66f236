"""Serialization of mutating filesystem operations.

Operations decorated with :func:`serialized` are not safe to run
concurrently with each other and share one process-wide re-entrant
lock: at most one of them executes at a time, whatever paths they
target. Currently serialized: directory and file creation, both delete
variants, expiry and full clearing, stream storage, and object
persistence.

Plain copies, progress copies, moves, and text helpers take no lock.
Calling them concurrently on the same path is the caller's problem.
"""

import functools
import threading
from collections.abc import Callable
from typing import ParamSpec, TypeVar

P = ParamSpec("P")
R = TypeVar("R")

# Re-entrant: serialized operations call each other (store -> create_file).
_OPERATION_LOCK = threading.RLock()


def serialized(func: Callable[P, R]) -> Callable[P, R]:
    """Run ``func`` while holding the process-wide operation lock."""

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        with _OPERATION_LOCK:
            return func(*args, **kwargs)

    return wrapper
