"""deb-tool - Build Debian binary packages from arbitrary files and directories.

Project name, version and descriptions are inferred from the target when they
are not given, and the result is a standard three-member .deb archive.
"""

from .__version__ import __version__, __version_info__, __author__, __email__, __license__

# Exceptions
from .api.exceptions import (
    DebToolError,
    InvalidTargetError,
    ConfigError,
    WorkspaceError,
    AssemblyError,
    ControlError,
    ArchiveError,
    PublishError,
)

# Core API
from .api.builder import Builder, build

# Data models
from .models import (
    BuildConfig,
    BuildRequest,
    BuildResult,
    PackageMetadata,
    ProjectIdentity,
)

# Building blocks
from .core import resolve_identity, synthesize_version
from .services import load_config

__all__ = [
    # Version information
    "__version__",
    "__version_info__",
    "__author__",
    "__email__",
    "__license__",

    # Main classes
    "Builder",
    "build",

    # Data models
    "BuildConfig",
    "BuildRequest",
    "BuildResult",
    "PackageMetadata",
    "ProjectIdentity",

    # Exceptions
    "DebToolError",
    "InvalidTargetError",
    "ConfigError",
    "WorkspaceError",
    "AssemblyError",
    "ControlError",
    "ArchiveError",
    "PublishError",

    # Building blocks
    "resolve_identity",
    "synthesize_version",
    "load_config",
]
