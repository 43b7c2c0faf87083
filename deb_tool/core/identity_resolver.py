"""Project identity resolution

Works out what a build target should be called. The rules, first match wins:

1. A directory holding exactly one readable, executable regular file is named
   after that file.
2. The project path is the target directory (or a file target's parent),
   widened to the enclosing git working tree when there is one.
3. The name is the base name of the canonical project path.
4. Otherwise the configured fallback name is used.
"""

import logging
import os
import stat
from pathlib import Path
from typing import Iterator, Optional, Union

from ..models import BuildConfig, ProjectIdentity
from ..utils.git_utils import get_repository_root

logger = logging.getLogger(__name__)


def iter_executables(directory: Path) -> Iterator[Path]:
    """Yield readable, executable regular files below directory

    Symlinks are neither followed nor reported.
    """
    for dirpath, dirnames, filenames in os.walk(directory):
        dirnames.sort()
        for filename in sorted(filenames):
            path = Path(dirpath) / filename
            try:
                mode = path.lstat().st_mode
            except OSError:
                continue
            if stat.S_ISREG(mode) and os.access(path, os.R_OK | os.X_OK):
                yield path


def find_single_executable(directory: Path) -> Optional[Path]:
    """Return the only executable below directory, or None

    Scanning stops at the second candidate.
    """
    found = None
    for path in iter_executables(directory):
        if found is not None:
            logger.debug(f"Multiple executables under {directory} ({found.name}, {path.name})")
            return None
        found = path
    return found


def resolve_project_path(target: Path, config: BuildConfig) -> Path:
    """Directory used for naming: the target dir, or the enclosing git root"""
    project_path = target if target.is_dir() else target.parent
    project_path = Path(os.path.abspath(project_path))

    repo_root = get_repository_root(project_path, config.git_executable)
    if repo_root is not None:
        logger.debug(f"{project_path} is inside git working tree {repo_root}")
        project_path = repo_root

    return project_path


def resolve_identity(target_path: Union[str, Path],
                     config: Optional[BuildConfig] = None) -> ProjectIdentity:
    """
    Resolve the project name and project path for a build target

    Args:
        target_path: File or directory being packaged
        config: Build configuration

    Returns:
        ProjectIdentity
    """
    config = config or BuildConfig()
    target = Path(target_path)

    project_path = resolve_project_path(target, config)

    if target.is_dir():
        executable = find_single_executable(target)
        if executable is not None:
            logger.debug(f"Naming project after single executable {executable}")
            return ProjectIdentity(name=executable.name, path=project_path)

    name = project_path.resolve().name
    if name:
        return ProjectIdentity(name=name, path=project_path)

    logger.debug(f"No usable name for {target}, using '{config.fallback_name}'")
    return ProjectIdentity(name=config.fallback_name, path=project_path)
