"""Temporary build workspace management"""

import logging
import shutil
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Generator, Optional

from ..api.exceptions import WorkspaceError
from ..constants import (
    WORKSPACE_PREFIX,
    WORKSPACE_CONTROL_DIR,
    WORKSPACE_ROOT_DIR,
    WORKSPACE_PKG_DIR,
)
from ..models import BuildConfig

logger = logging.getLogger(__name__)


class Workspace:
    """Paths of one build's scratch directory"""

    def __init__(self, path: Path):
        self.path = Path(path)

    @property
    def control_dir(self) -> Path:
        """Control file staging"""
        return self.path / WORKSPACE_CONTROL_DIR

    @property
    def root_dir(self) -> Path:
        """Package filesystem image"""
        return self.path / WORKSPACE_ROOT_DIR

    @property
    def pkg_dir(self) -> Path:
        """Archive member staging"""
        return self.path / WORKSPACE_PKG_DIR

    def __repr__(self) -> str:
        return f"Workspace({str(self.path)!r})"


def create_workspace(config: Optional[BuildConfig] = None) -> Path:
    """
    Create a uniquely named workspace with pkg/, root/ and control/

    Args:
        config: Build configuration (``work_dir`` selects the parent directory)

    Returns:
        Workspace path

    Raises:
        WorkspaceError: If the directories cannot be created
    """
    config = config or BuildConfig()

    try:
        path = Path(tempfile.mkdtemp(prefix=WORKSPACE_PREFIX, dir=config.work_dir))
    except OSError as e:
        raise WorkspaceError(f"Cannot create workspace: {e}") from e

    try:
        for name in (WORKSPACE_PKG_DIR, WORKSPACE_ROOT_DIR, WORKSPACE_CONTROL_DIR):
            (path / name).mkdir()
    except OSError as e:
        destroy_workspace(path)
        raise WorkspaceError(f"Cannot create workspace layout in {path}: {e}") from e

    logger.debug(f"Created workspace {path}")
    return path


def destroy_workspace(path: Path) -> None:
    """
    Remove a workspace recursively

    Args:
        path: Workspace path
    """
    shutil.rmtree(path, ignore_errors=True)
    logger.debug(f"Removed workspace {path}")


@contextmanager
def workspace(config: Optional[BuildConfig] = None) -> Generator[Workspace, None, None]:
    """Workspace that is destroyed however the block exits"""
    path = create_workspace(config)
    try:
        yield Workspace(path)
    finally:
        destroy_workspace(path)
