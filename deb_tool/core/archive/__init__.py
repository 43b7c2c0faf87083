# deb_tool/core/archive/__init__.py
"""Archive formats used to assemble .deb files"""

from .ar_writer import write_ar, read_ar, ArMember
from .tar_writer import create_tar_gz, root_owner_filter

__all__ = [
    "write_ar",
    "read_ar",
    "ArMember",
    "create_tar_gz",
    "root_owner_filter",
]
