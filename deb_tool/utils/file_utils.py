# deb_tool/utils/file_utils.py
"""File operation utilities"""

import hashlib
import os
import tempfile
from pathlib import Path
from typing import Union


def calculate_file_checksum(file_path: Path,
                            algorithm: str = "md5",
                            chunk_size: int = 8192) -> str:
    """
    Calculate file checksum

    Args:
        file_path: Path to file
        algorithm: Hash algorithm (md5, sha256, sha1)
        chunk_size: Read chunk size

    Returns:
        Hex digest string
    """
    hash_func = hashlib.new(algorithm)

    with open(file_path, 'rb') as f:
        while chunk := f.read(chunk_size):
            hash_func.update(chunk)

    return hash_func.hexdigest()


def format_size(size: int) -> str:
    """
    Format file size in human-readable format

    Args:
        size: Size in bytes

    Returns:
        Formatted size string
    """
    for unit in ['B', 'KB', 'MB', 'GB', 'TB']:
        if size < 1024.0:
            return f"{size:.2f} {unit}"
        size /= 1024.0
    return f"{size:.2f} PB"


def ensure_dir(path: Path, mode: int = 0o755) -> Path:
    """
    Create a directory (and parents) and set its mode

    Args:
        path: Directory path
        mode: Permission bits for the created directories

    Returns:
        The directory path
    """
    missing = []
    current = path
    while not current.exists():
        missing.append(current)
        current = current.parent

    path.mkdir(parents=True, exist_ok=True)
    for created in missing:
        os.chmod(created, mode)
    return path


def atomic_write(file_path: Path,
                 content: Union[str, bytes],
                 mode: str = 'w',
                 permissions: int = 0o644) -> None:
    """
    Write file atomically

    The content goes to a temporary file next to the target which is then
    renamed over it, so readers never observe a partial file.

    Args:
        file_path: Target file path
        content: Content to write
        mode: Write mode
        permissions: Permission bits of the final file
    """
    temp_fd, temp_path = tempfile.mkstemp(
        dir=file_path.parent,
        prefix=f".{file_path.name}.",
        suffix=".tmp"
    )

    try:
        with os.fdopen(temp_fd, mode) as f:
            f.write(content)

        os.chmod(temp_path, permissions)
        # Atomic rename
        os.replace(temp_path, file_path)

    except BaseException:
        # Clean up temp file on error
        if os.path.exists(temp_path):
            os.unlink(temp_path)
        raise
