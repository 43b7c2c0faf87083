# deb_tool/utils/__init__.py
"""Utility functions for deb-tool"""

from .file_utils import (
    calculate_file_checksum,
    format_size,
    ensure_dir,
    atomic_write,
)

from .git_utils import (
    get_repository_root,
    get_short_commit,
    get_config_value,
)

from .template_utils import render_template

__all__ = [
    # File utilities
    "calculate_file_checksum",
    "format_size",
    "ensure_dir",
    "atomic_write",

    # Git utilities
    "get_repository_root",
    "get_short_commit",
    "get_config_value",

    # Template utilities
    "render_template",
]
