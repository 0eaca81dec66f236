"""Path component parsing.

Splits a path string into parent, name, stem, and extension without
touching the filesystem. Only the last separator and the last dot
matter, and a dot that sits before the last separator belongs to a
directory name, never to the extension::

    path                        name        stem    parent              extension
    "abc"                       "abc"       "abc"   ""                  ""
    "a.b.rmvb"                  "a.b.rmvb"  "a.b"   ""                  "rmvb"
    "/home/admin"               "admin"     "admin" "/home"             ""
    "/home/admin/a.txt/b.mp3"   "b.mp3"     "b"     "/home/admin/a.txt" "mp3"
    "c:a.txt\\a"  (sep="\\")    "a"         "a"     "c:a.txt"           ""

Every function accepts None and returns empty input unchanged, except
parent() which always returns a string. The separator defaults to the
host's native one and can be overridden to parse foreign paths.
"""

import os
from dataclasses import dataclass
from typing import overload

EXTENSION_SEPARATOR = "."


@dataclass(frozen=True, slots=True)
class PathComponents:
    """Derived view of a path string.

    Attributes:
        parent: Everything before the last separator, or "".
        name: Everything after the last separator, or the whole path.
        stem: Name without its last extension segment.
        extension: Text after the last dot of the name, or "".
    """

    parent: str
    name: str
    stem: str
    extension: str


@overload
def name(path: str, *, sep: str = ...) -> str: ...
@overload
def name(path: None, *, sep: str = ...) -> None: ...
def name(path: str | None, *, sep: str = os.sep) -> str | None:
    """Return the last path segment, extension included."""
    if not path:
        return path

    sep_pos = path.rfind(sep)
    return path if sep_pos == -1 else path[sep_pos + 1 :]


@overload
def name_without_extension(path: str, *, sep: str = ...) -> str: ...
@overload
def name_without_extension(path: None, *, sep: str = ...) -> None: ...
def name_without_extension(path: str | None, *, sep: str = os.sep) -> str | None:
    """Return the last path segment with its last extension stripped."""
    if not path:
        return path

    dot_pos = path.rfind(EXTENSION_SEPARATOR)
    sep_pos = path.rfind(sep)
    if sep_pos == -1:
        return path if dot_pos == -1 else path[:dot_pos]
    if dot_pos == -1 or dot_pos < sep_pos:
        return path[sep_pos + 1 :]
    return path[sep_pos + 1 : dot_pos]


@overload
def extension(path: str, *, sep: str = ...) -> str: ...
@overload
def extension(path: None, *, sep: str = ...) -> None: ...
def extension(path: str | None, *, sep: str = os.sep) -> str | None:
    """Return the text after the last dot, if that dot follows the last separator."""
    if not path or not path.strip():
        return path

    dot_pos = path.rfind(EXTENSION_SEPARATOR)
    if dot_pos == -1:
        return ""
    sep_pos = path.rfind(sep)
    return "" if sep_pos >= dot_pos else path[dot_pos + 1 :]


def parent(path: str | None, *, sep: str = os.sep) -> str:
    """Return everything before the last separator, or "" when there is none."""
    if not path:
        return ""

    sep_pos = path.rfind(sep)
    return "" if sep_pos == -1 else path[:sep_pos]


def components(path: str, *, sep: str = os.sep) -> PathComponents:
    """Decompose a path into all four components at once.

    Args:
        path: Path string to decompose.
        sep: Separator to split on. Defaults to the host separator.

    Returns:
        PathComponents for the given path.
    """
    return PathComponents(
        parent=parent(path, sep=sep),
        name=name(path, sep=sep),
        stem=name_without_extension(path, sep=sep),
        extension=extension(path, sep=sep),
    )
