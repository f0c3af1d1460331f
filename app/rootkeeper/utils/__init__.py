"""Utility modules for rootkeeper.

This module exports commonly used utility functions.
"""

from rootkeeper.utils.formatting import (
    console,
    create_root_folder_table,
    create_unmapped_table,
    err_console,
    format_size,
    print_error,
    print_info,
    print_success,
)

__all__ = [
    "console",
    "create_root_folder_table",
    "create_unmapped_table",
    "err_console",
    "format_size",
    "print_error",
    "print_info",
    "print_success",
]
