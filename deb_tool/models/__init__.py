"""Data models for deb-tool"""

from .config import BuildConfig, CONFIG_SCHEMA
from .request import BuildRequest
from .metadata import ProjectIdentity, PackageMetadata
from .result import BuildResult

__all__ = [
    "BuildConfig",
    "CONFIG_SCHEMA",
    "BuildRequest",
    "ProjectIdentity",
    "PackageMetadata",
    "BuildResult",
]
