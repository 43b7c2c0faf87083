"""Configuration data models"""

from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Dict, Optional, Any, Tuple

from ..constants import (
    DEFAULT_BASELINE_VERSION,
    DEFAULT_SECTION,
    DEFAULT_PRIORITY,
    DEFAULT_ARCHITECTURE,
    DEFAULT_STANDARDS_VERSION,
    DEFAULT_PROJECT_NAME,
    DEFAULT_COMPRESSION_LEVEL,
    EXECUTABLE_DIRS,
)


@dataclass(frozen=True)
class BuildConfig:
    """Immutable build configuration

    Built once (from defaults, a YAML file and a few well-known environment
    variables) and passed explicitly to every stage of a build.
    """

    baseline_version: str = DEFAULT_BASELINE_VERSION
    section: str = DEFAULT_SECTION
    priority: str = DEFAULT_PRIORITY
    architecture: str = DEFAULT_ARCHITECTURE
    standards_version: str = DEFAULT_STANDARDS_VERSION
    fallback_name: str = DEFAULT_PROJECT_NAME
    executable_dirs: Tuple[str, ...] = EXECUTABLE_DIRS
    compression_level: int = DEFAULT_COMPRESSION_LEVEL
    md5sums: bool = True
    source_date_epoch: Optional[int] = None
    work_dir: Optional[Path] = None
    author_name: Optional[str] = None
    author_email: Optional[str] = None
    git_executable: str = "git"

    def with_overrides(self, **overrides) -> 'BuildConfig':
        """Return a copy with the non-None overrides applied"""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes) if changes else self

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        data = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, Path):
                value = str(value)
            elif isinstance(value, tuple):
                value = list(value)
            data[f.name] = value
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'BuildConfig':
        """Create from dictionary, ignoring unknown keys"""
        known = {f.name for f in fields(cls)}
        values = {k: v for k, v in data.items() if k in known and v is not None}

        if 'executable_dirs' in values:
            values['executable_dirs'] = tuple(
                str(d).strip('/') for d in values['executable_dirs']
            )
        if 'work_dir' in values:
            values['work_dir'] = Path(values['work_dir']).expanduser()
        if 'source_date_epoch' in values:
            values['source_date_epoch'] = int(values['source_date_epoch'])

        return cls(**values)


# JSON schema for the YAML configuration file
CONFIG_SCHEMA = {
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "baseline_version": {"type": "string", "pattern": "^[0-9][A-Za-z0-9.+~]*$"},
        "section": {"type": "string", "minLength": 1},
        "priority": {"type": "string", "minLength": 1},
        "architecture": {"type": "string", "minLength": 1},
        "standards_version": {"type": "string", "minLength": 1},
        "fallback_name": {"type": "string", "minLength": 1},
        "executable_dirs": {
            "type": "array",
            "items": {"type": "string", "minLength": 1},
        },
        "compression_level": {"type": "integer", "minimum": 0, "maximum": 9},
        "md5sums": {"type": "boolean"},
        "source_date_epoch": {"type": ["integer", "null"], "minimum": 0},
        "work_dir": {"type": ["string", "null"]},
        "author_name": {"type": ["string", "null"]},
        "author_email": {"type": ["string", "null"]},
        "git_executable": {"type": "string", "minLength": 1},
    },
}
