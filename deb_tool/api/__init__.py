"""Public API for deb-tool"""

from .exceptions import (
    DebToolError,
    InvalidTargetError,
    ConfigError,
    WorkspaceError,
    AssemblyError,
    ControlError,
    ArchiveError,
    PublishError,
)
from .builder import Builder, build

__all__ = [
    "Builder",
    "build",
    "DebToolError",
    "InvalidTargetError",
    "ConfigError",
    "WorkspaceError",
    "AssemblyError",
    "ControlError",
    "ArchiveError",
    "PublishError",
]
