"""Control file and Debian documentation rendering"""

import gzip
import os
from datetime import datetime
from email.utils import format_datetime
from pathlib import Path
from typing import Optional

from ..constants import DEFAULT_COMPRESSION_LEVEL, FILE_MODE, DIR_MODE
from ..models import PackageMetadata
from ..utils.file_utils import calculate_file_checksum, ensure_dir
from ..utils.template_utils import render_template

COPYRIGHT_TEMPLATE = """\
Format: https://www.debian.org/doc/packaging-manuals/copyright-format/1.0/
Upstream-Name: ${name}

Files: *
Copyright: ${YEAR} ${maintainer}
License: MIT
 Permission is hereby granted, free of charge, to any person obtaining a
 copy of this software and associated documentation files (the "Software"),
 to deal in the Software without restriction, including without limitation
 the rights to use, copy, modify, merge, publish, distribute, sublicense,
 and/or sell copies of the Software, and to permit persons to whom the
 Software is furnished to do so, subject to the following conditions:
 .
 The above copyright notice and this permission notice shall be included
 in all copies or substantial portions of the Software.
 .
 THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS
 OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
 MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT.
 IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY
 CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN ACTION OF CONTRACT,
 TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN CONNECTION WITH THE
 SOFTWARE OR THE USE OR OTHER DEALINGS IN THE SOFTWARE.
"""

CHANGELOG_TEMPLATE = """\
${name} (${version}) unstable; urgency=low

  * Release.

 -- ${maintainer}  ${date}
"""


def _write(dest: Path, content: bytes) -> None:
    ensure_dir(dest.parent, DIR_MODE)
    # Never write through a link
    if dest.is_symlink():
        dest.unlink()
    dest.write_bytes(content)
    os.chmod(dest, FILE_MODE)


def format_long_description(text: str) -> str:
    """Turn free text into control-file continuation lines

    Each line gets a single leading space; empty lines become `` .``.
    """
    lines = []
    for line in text.strip('\n').splitlines():
        if not line.strip():
            lines.append(' .')
        elif line.startswith(' '):
            lines.append(line)
        else:
            lines.append(f' {line}')
    return '\n'.join(lines)


def render_control(metadata: PackageMetadata) -> str:
    """
    Render the control record

    The short description is appended to ``Description:`` exactly as given,
    so its own leading space (or lack of one) is preserved.
    """
    lines = []
    for key, value in metadata.to_dict().items():
        if key == 'Description':
            lines.append(f"{key}:{value}")
        else:
            lines.append(f"{key}: {value}")

    if metadata.long_description:
        lines.append(format_long_description(metadata.long_description))

    return '\n'.join(lines) + '\n'


def write_control_file(dest: Path, metadata: PackageMetadata) -> Path:
    """
    Write the control file

    Args:
        dest: Path of the control file
        metadata: Package metadata

    Returns:
        Written path
    """
    _write(dest, render_control(metadata).encode('utf-8'))
    return dest


def write_copyright(dest: Path, metadata: PackageMetadata,
                    now: Optional[datetime] = None) -> Path:
    """
    Write the copyright file with the current year

    Args:
        dest: Path of the copyright file
        metadata: Package metadata
        now: Build time

    Returns:
        Written path
    """
    content = render_template(
        COPYRIGHT_TEMPLATE,
        {'name': metadata.name, 'maintainer': metadata.maintainer},
        now=now
    )
    _write(dest, content.encode('utf-8'))
    return dest


def write_changelog(dest: Path, metadata: PackageMetadata,
                    now: Optional[datetime] = None) -> Path:
    """
    Write a single-entry changelog, gzip-compressed

    Args:
        dest: Path of the compressed changelog
        metadata: Package metadata
        now: Build time

    Returns:
        Written path
    """
    now = (now or datetime.now()).astimezone()
    content = render_template(
        CHANGELOG_TEMPLATE,
        {
            'name': metadata.name,
            'version': metadata.version,
            'maintainer': metadata.maintainer,
            'date': format_datetime(now),
        },
        now=now
    )
    compressed = gzip.compress(
        content.encode('utf-8'),
        compresslevel=DEFAULT_COMPRESSION_LEVEL,
        mtime=0
    )
    _write(dest, compressed)
    return dest


def write_md5sums(dest: Path, root: Path) -> Path:
    """
    Write the md5sums control member for every regular file under root

    Args:
        dest: Path of the md5sums file
        root: Package filesystem image

    Returns:
        Written path
    """
    lines = []
    for dirpath, dirnames, filenames in os.walk(root):
        for filename in filenames:
            path = Path(dirpath) / filename
            if path.is_symlink() or not path.is_file():
                continue
            relpath = path.relative_to(root).as_posix()
            lines.append((relpath, calculate_file_checksum(path, 'md5')))

    content = ''.join(f"{digest}  {relpath}\n" for relpath, digest in sorted(lines))
    _write(dest, content.encode('utf-8'))
    return dest
