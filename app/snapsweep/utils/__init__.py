"""Utility modules for snapsweep.

This module exports commonly used utility functions.
"""

from snapsweep.utils.formatting import (
    console,
    create_screenshot_table,
    create_undo_table,
    err_console,
    print_error,
    print_info,
    print_success,
    print_warning,
)

__all__ = [
    "console",
    "create_screenshot_table",
    "create_undo_table",
    "err_console",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
]
