"""Archive packager: turns a populated workspace into .deb bytes"""

import io
import logging
import tarfile
from pathlib import Path
from typing import Optional, Union

from ..api.exceptions import ArchiveError, PublishError
from ..constants import (
    DEBIAN_BINARY_MEMBER,
    DEBIAN_BINARY_CONTENT,
    CONTROL_MEMBER,
    DATA_MEMBER,
    DEB_MEMBER_ORDER,
)
from ..models import BuildConfig
from ..utils.file_utils import atomic_write
from .archive import create_tar_gz, write_ar
from .workspace import Workspace

logger = logging.getLogger(__name__)


def stage_members(ws: Workspace, config: BuildConfig, mtime: Optional[int] = None) -> None:
    """Write debian-binary, control.tar.gz and data.tar.gz into pkg/"""
    pkg_dir = ws.pkg_dir

    (pkg_dir / DEBIAN_BINARY_MEMBER).write_bytes(DEBIAN_BINARY_CONTENT)

    create_tar_gz(
        ws.control_dir,
        pkg_dir / CONTROL_MEMBER,
        compression_level=config.compression_level,
        mtime=mtime
    )
    logger.debug(f"Created {CONTROL_MEMBER}")

    create_tar_gz(
        ws.root_dir,
        pkg_dir / DATA_MEMBER,
        force_root_owner=True,
        compression_level=config.compression_level,
        mtime=mtime
    )
    logger.debug(f"Created {DATA_MEMBER}")


def package(ws: Union[Workspace, Path],
            config: Optional[BuildConfig] = None,
            build_time: Optional[int] = None) -> bytes:
    """
    Build the .deb archive from a workspace

    Args:
        ws: Workspace (or its path) with populated control/ and root/
        config: Build configuration
        build_time: Epoch that entry timestamps are clamped to when
            ``source_date_epoch`` is not configured

    Returns:
        Archive content

    Raises:
        ArchiveError: If any member cannot be produced
    """
    config = config or BuildConfig()
    if not isinstance(ws, Workspace):
        ws = Workspace(ws)

    mtime = config.source_date_epoch
    if mtime is None:
        mtime = build_time

    try:
        stage_members(ws, config, mtime)
        members = [
            (name, (ws.pkg_dir / name).read_bytes())
            for name in DEB_MEMBER_ORDER
        ]
        buffer = io.BytesIO()
        write_ar(buffer, members, mtime=mtime)
    except (OSError, tarfile.TarError, ValueError) as e:
        raise ArchiveError(f"Cannot create package archive: {e}") from e

    return buffer.getvalue()


def publish(data: bytes, output_path: Union[str, Path]) -> Path:
    """
    Atomically write the archive to output_path, replacing any existing file

    Args:
        data: Archive content
        output_path: Destination .deb path

    Returns:
        Absolute output path

    Raises:
        PublishError: If the file cannot be written
    """
    output_path = Path(output_path).absolute()
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        atomic_write(output_path, data, mode='wb')
    except OSError as e:
        raise PublishError(f"Cannot write {output_path}: {e}", str(output_path)) from e

    logger.info(f"Wrote {output_path}")
    return output_path
