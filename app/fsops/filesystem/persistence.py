"""Single-object persistence.

Saves one in-memory value to one file as JSON and reads it back,
validated through a pydantic TypeAdapter. Failures never propagate:
they are logged and reported as False (save) or None (read).
"""

import logging
import os
from pathlib import Path
from typing import Any

from pydantic import PydanticSchemaGenerationError, TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from fsops.core.locking import serialized

logger = logging.getLogger(__name__)


@serialized
def save_object(obj: object | None, path: str | os.PathLike[str]) -> bool:
    """Serialize ``obj`` to ``path``, replacing any previous content.

    Args:
        obj: Value to save: pydantic models, dataclasses, and plain
            JSON-compatible values are supported.
        path: Destination file.

    Returns:
        True on success, False if ``obj`` is None or saving failed.
    """
    if obj is None:
        return False

    try:
        data = TypeAdapter(type(obj)).dump_json(obj)
        Path(path).write_bytes(data)
    except (OSError, PydanticSchemaGenerationError, PydanticSerializationError) as e:
        logger.warning("Failed to save object to %s: %s", path, e)
        return False
    return True


@serialized
def read_object(path: str | os.PathLike[str], type_: Any = Any) -> Any | None:
    """Load a value previously written by :func:`save_object`.

    Args:
        path: File to read.
        type_: Type to validate the content against. Defaults to Any,
            which returns the decoded JSON value.

    Returns:
        The loaded value, or None if reading or validation failed.
    """
    try:
        data = Path(path).read_bytes()
        return TypeAdapter(type_).validate_json(data)
    except (OSError, PydanticSchemaGenerationError, ValidationError) as e:
        logger.warning("Failed to read object from %s: %s", path, e)
        return None
