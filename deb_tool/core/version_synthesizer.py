"""Rolling release version synthesis"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

from ..constants import VERSION_DATE_FORMAT, VERSION_TIME_FORMAT
from ..models import BuildConfig
from ..utils.git_utils import get_short_commit

logger = logging.getLogger(__name__)


def find_commit(target_path: Union[str, Path],
                config: Optional[BuildConfig] = None) -> Optional[str]:
    """
    Short HEAD hash of the repository holding the target

    Falls back to the repository of the current working directory.

    Args:
        target_path: File or directory being packaged
        config: Build configuration

    Returns:
        Short commit hash or None
    """
    config = config or BuildConfig()
    target = Path(target_path)
    directory = target if target.is_dir() else target.parent

    for candidate in (directory, Path.cwd()):
        commit = get_short_commit(candidate, config.git_executable)
        if commit:
            return commit

    return None


def synthesize_version(target_path: Union[str, Path],
                       config: Optional[BuildConfig] = None,
                       now: Optional[datetime] = None) -> str:
    """
    Build a ``{baseline}-{YYMMDD}-{HHMMSS}[-{commit}]`` version string

    The timestamp makes two builds of the same content one second apart
    produce different, correctly ordered versions.

    Args:
        target_path: File or directory being packaged
        config: Build configuration
        now: Build time (current local time if None)

    Returns:
        Version string
    """
    config = config or BuildConfig()
    now = now or datetime.now()

    parts = [
        config.baseline_version,
        now.strftime(VERSION_DATE_FORMAT),
        now.strftime(VERSION_TIME_FORMAT),
    ]

    commit = find_commit(target_path, config)
    if commit:
        parts.append(commit)
    else:
        logger.debug("No git repository found, omitting commit from version")

    return '-'.join(parts)
