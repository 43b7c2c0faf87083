"""Package data tree assembly and permission policy"""

import logging
import os
import shutil
import stat
from pathlib import Path
from typing import Iterable, Optional, Union

from ..constants import DIR_MODE, FILE_MODE, EXEC_MODE, EXECUTABLE_DIRS

logger = logging.getLogger(__name__)


def install_root(workspace_root: Path, install_prefix: Optional[str] = None) -> Path:
    """Directory inside the image where target content lands

    An unset, empty or ``/`` prefix means the image root itself.
    """
    prefix = (install_prefix or '').strip('/')
    return workspace_root / prefix if prefix else workspace_root


def copy_target(target: Path, dest: Path) -> None:
    """
    Archive-style copy of target into dest

    A directory target contributes its contents, a file target itself.
    Symlinks are copied as symlinks.
    """
    dest.mkdir(parents=True, exist_ok=True)
    if target.is_dir():
        shutil.copytree(target, dest, symlinks=True, dirs_exist_ok=True)
    else:
        shutil.copy2(target, dest / target.name, follow_symlinks=False)


def is_real_dir(root: Path, relpath: Union[str, Path]) -> bool:
    """True when every component of root/relpath is a directory, not a symlink"""
    current = root
    for part in Path(relpath).parts:
        current = current / part
        try:
            st_mode = current.lstat().st_mode
        except FileNotFoundError:
            return False
        if not stat.S_ISDIR(st_mode):
            return False
    return True


def make_real_dir(root: Path, relpath: Union[str, Path]) -> Path:
    """
    Create root/relpath as real directories

    A symlink or file in the way is removed first, so nothing written
    below the returned path can end up outside root.

    Returns:
        The directory path
    """
    current = root
    for part in Path(relpath).parts:
        current = current / part
        if current.is_symlink() or (current.exists() and not current.is_dir()):
            logger.warning(f"Replacing {current.relative_to(root)} with a directory")
            current.unlink()
        if not current.exists():
            current.mkdir()
            os.chmod(current, DIR_MODE)
    return current


def _set_mode(path: Path, mode: int) -> None:
    st_mode = path.lstat().st_mode
    if stat.S_ISLNK(st_mode):
        return
    if stat.S_IMODE(st_mode) != mode:
        os.chmod(path, mode)


def apply_permission_policy(root: Path,
                            executable_dirs: Iterable[str] = EXECUTABLE_DIRS) -> None:
    """
    Normalize modes under root

    Directories become 0755 and regular files 0644; then every regular file
    below one of the executable directories (relative to root) becomes 0755.
    Modes of the source tree are not kept.
    """
    _set_mode(root, DIR_MODE)
    for dirpath, dirnames, filenames in os.walk(root):
        for dirname in dirnames:
            _set_mode(Path(dirpath) / dirname, DIR_MODE)
        for filename in filenames:
            path = Path(dirpath) / filename
            if stat.S_ISREG(path.lstat().st_mode):
                _set_mode(path, FILE_MODE)

    for exec_dir in executable_dirs:
        relpath = exec_dir.strip('/')
        if not is_real_dir(root, relpath):
            continue
        bin_dir = root / relpath
        logger.debug(f"Marking files under /{relpath} executable")
        for dirpath, dirnames, filenames in os.walk(bin_dir):
            for filename in filenames:
                path = Path(dirpath) / filename
                if stat.S_ISREG(path.lstat().st_mode):
                    _set_mode(path, EXEC_MODE)


def assemble_data_tree(workspace_root: Union[str, Path],
                       target_path: Union[str, Path],
                       install_prefix: Optional[str] = None,
                       executable_dirs: Iterable[str] = EXECUTABLE_DIRS) -> Path:
    """
    Copy the target into the package image and apply the permission policy

    Args:
        workspace_root: Package filesystem image (workspace ``root/``)
        target_path: File or directory being packaged
        install_prefix: Installation path of the content (package root if unset)
        executable_dirs: Directories whose files are made executable

    Returns:
        Directory the content was copied to
    """
    workspace_root = Path(workspace_root)
    dest = install_root(workspace_root, install_prefix)

    logger.info(f"Copying {target_path} to /{(install_prefix or '').strip('/')}")
    copy_target(Path(target_path), dest)
    apply_permission_policy(workspace_root, executable_dirs)

    return dest
