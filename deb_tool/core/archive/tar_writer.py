# deb_tool/core/archive/tar_writer.py
"""Gzip-compressed tar creation for package members"""

import gzip
import tarfile
from pathlib import Path
from typing import Callable, Optional

from ...constants import DEFAULT_COMPRESSION_LEVEL

TarFilter = Callable[[tarfile.TarInfo], Optional[tarfile.TarInfo]]


def root_owner_filter(info: tarfile.TarInfo) -> tarfile.TarInfo:
    """Force uid/gid 0 on an entry"""
    info.uid = 0
    info.gid = 0
    info.uname = "root"
    info.gname = "root"
    return info


def clamp_mtime_filter(epoch: int) -> TarFilter:
    """Entry filter clamping modification times to epoch"""

    def _filter(info: tarfile.TarInfo) -> tarfile.TarInfo:
        if info.mtime > epoch:
            info.mtime = epoch
        return info

    return _filter


def chain_filters(*filters: Optional[TarFilter]) -> Optional[TarFilter]:
    """Combine entry filters, skipping None"""
    active = [f for f in filters if f is not None]
    if not active:
        return None

    def _filter(info: tarfile.TarInfo) -> Optional[tarfile.TarInfo]:
        for f in active:
            info = f(info)
            if info is None:
                return None
        return info

    return _filter


def create_tar_gz(source_dir: Path,
                  output_path: Path,
                  force_root_owner: bool = False,
                  compression_level: int = DEFAULT_COMPRESSION_LEVEL,
                  mtime: Optional[int] = None) -> Path:
    """
    Archive the contents of source_dir as ``./...`` entries into a .tar.gz

    Entries are added in sorted order and the gzip header carries a zero
    timestamp, so identical trees produce identical archives.

    Args:
        source_dir: Directory whose contents are archived
        output_path: Archive file to create
        force_root_owner: Record every entry as owned by root:root
        compression_level: Gzip level (0-9)
        mtime: Clamp entry modification times to this epoch

    Returns:
        Path to created archive
    """
    entry_filter = chain_filters(
        root_owner_filter if force_root_owner else None,
        clamp_mtime_filter(mtime) if mtime is not None else None,
    )

    with open(output_path, 'wb') as raw:
        with gzip.GzipFile(filename='', mode='wb', fileobj=raw,
                           compresslevel=compression_level, mtime=0) as gz:
            with tarfile.open(fileobj=gz, mode='w', format=tarfile.GNU_FORMAT) as tar:
                tar.add(str(source_dir), arcname='.', recursive=True, filter=entry_filter)

    return output_path
