"""Service layer for deb-tool"""

from .build_service import BuildService, BuildPlan
from .config_service import load_config

__all__ = [
    "BuildService",
    "BuildPlan",
    "load_config",
]
