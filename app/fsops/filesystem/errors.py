"""Exceptions raised by propagating filesystem operations."""


class FileOperationError(RuntimeError):
    """Raised when an I/O failure must reach the caller.

    Text read/write, plain stream copy, and file copy wrap the
    underlying OSError in this exception (available as ``__cause__``).
    """
