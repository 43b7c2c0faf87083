"""CLI utilities"""

from .output import (
    console,
    print_success,
    print_error,
    print_warning,
    format_build_result,
    show_build_plan,
)

__all__ = [
    "console",
    "print_success",
    "print_error",
    "print_warning",
    "format_build_result",
    "show_build_plan",
]
