"""fsops - filesystem path parsing and tree operations."""

__version__ = "0.1.0"
