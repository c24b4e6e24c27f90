"""Utility modules for cull.

This module exports commonly used utility functions.
"""

from cull.utils.formatting import (
    console,
    create_worklist_table,
    err_console,
    print_error,
    print_warning,
)

__all__ = [
    "console",
    "create_worklist_table",
    "err_console",
    "print_error",
    "print_warning",
]
