"""Utility modules for fsops.

This module exports commonly used utility functions.
"""

from fsops.utils.formatting import (
    console,
    create_components_table,
    err_console,
    format_size,
    print_error,
    print_info,
    print_success,
    print_warning,
)

__all__ = [
    "console",
    "create_components_table",
    "err_console",
    "format_size",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
]
