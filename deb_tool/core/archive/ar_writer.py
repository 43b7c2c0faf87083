# deb_tool/core/archive/ar_writer.py
"""Minimal common ``ar`` format support

Only what a .deb needs: short member names (at most 16 bytes), no symbol
table, members stored in the order given.
"""

import time
from typing import BinaryIO, List, Optional, Sequence, Tuple

AR_MAGIC = b"!<arch>\n"
AR_FMAG = b"`\n"
AR_HEADER_SIZE = 60

ArMember = Tuple[str, bytes]


def member_header(name: str, size: int, mtime: int,
                  uid: int = 0, gid: int = 0, mode: int = 0o100644) -> bytes:
    """Build the fixed 60-byte header of one member"""
    encoded = name.encode('ascii')
    if len(encoded) > 16:
        raise ValueError(f"ar member name too long: {name}")

    header = b"".join([
        encoded.ljust(16, b' '),
        str(int(mtime)).encode().ljust(12, b' '),
        str(int(uid)).encode().ljust(6, b' '),
        str(int(gid)).encode().ljust(6, b' '),
        oct(mode)[2:].encode().ljust(8, b' '),
        str(int(size)).encode().ljust(10, b' '),
        AR_FMAG,
    ])
    if len(header) != AR_HEADER_SIZE:
        raise ValueError("Invalid ar header length")
    return header


def write_ar(stream: BinaryIO, members: Sequence[ArMember],
             mtime: Optional[int] = None) -> None:
    """
    Write an ar archive

    Args:
        stream: Binary output stream
        members: (name, data) pairs, in archive order
        mtime: Member modification time (current time if None)
    """
    if mtime is None:
        mtime = int(time.time())

    stream.write(AR_MAGIC)
    for name, data in members:
        stream.write(member_header(name, len(data), mtime))
        stream.write(data)
        # Members start on even offsets
        if len(data) % 2:
            stream.write(b"\n")


def read_ar(data: bytes) -> List[ArMember]:
    """
    Parse an ar archive into (name, data) pairs

    Args:
        data: Archive content

    Returns:
        Members in archive order

    Raises:
        ValueError: If the archive is malformed
    """
    if not data.startswith(AR_MAGIC):
        raise ValueError("Not an ar archive")

    members = []
    offset = len(AR_MAGIC)
    while offset < len(data):
        header = data[offset:offset + AR_HEADER_SIZE]
        if len(header) != AR_HEADER_SIZE or header[58:60] != AR_FMAG:
            raise ValueError(f"Corrupt ar header at offset {offset}")

        name = header[0:16].decode('ascii').rstrip(' ')
        if name.endswith('/'):
            name = name[:-1]
        size = int(header[48:58].decode('ascii').strip())

        offset += AR_HEADER_SIZE
        members.append((name, data[offset:offset + size]))
        offset += size + (size % 2)

    return members
