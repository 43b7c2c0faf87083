"""Git operation utilities

Every helper treats a missing ``git`` binary, a path outside any working
tree or any other git failure as "not under version control" and returns
``None``/``False`` instead of raising.
"""

import logging
import subprocess
from pathlib import Path
from typing import List, Optional

logger = logging.getLogger(__name__)


def _run_git(args: List[str], cwd: Path, git: str = 'git') -> Optional[str]:
    """
    Run a git command and return its stripped stdout

    Args:
        args: Git arguments
        cwd: Working directory
        git: Git executable

    Returns:
        Output or None if the command failed
    """
    try:
        result = subprocess.run(
            [git] + args,
            cwd=cwd,
            capture_output=True,
            text=True,
            check=True
        )
    except (subprocess.CalledProcessError, OSError) as e:
        logger.debug(f"git {' '.join(args)} failed in {cwd}: {e}")
        return None

    output = result.stdout.strip()
    return output or None


def get_repository_root(path: Path, git: str = 'git') -> Optional[Path]:
    """
    Get the top-level directory of the working tree containing path

    Args:
        path: Directory path
        git: Git executable

    Returns:
        Repository root or None
    """
    top_level = _run_git(['rev-parse', '--show-toplevel'], path, git)
    return Path(top_level) if top_level else None


def get_short_commit(path: Path, git: str = 'git') -> Optional[str]:
    """
    Get the abbreviated hash of HEAD

    Args:
        path: Repository path
        git: Git executable

    Returns:
        Short commit hash or None
    """
    return _run_git(['rev-parse', '--short', 'HEAD'], path, git)


def get_config_value(key: str, path: Optional[Path] = None,
                     git: str = 'git') -> Optional[str]:
    """
    Read a git configuration value (e.g. ``user.name``)

    Args:
        key: Configuration key
        path: Repository path (current directory if None)
        git: Git executable

    Returns:
        Configured value or None
    """
    return _run_git(['config', '--get', key], path or Path.cwd(), git)
