"""Package metadata models"""

from dataclasses import dataclass
from pathlib import Path
from typing import Dict


@dataclass(frozen=True)
class ProjectIdentity:
    """Resolved project name and the directory it was derived from"""
    name: str
    path: Path


@dataclass(frozen=True)
class PackageMetadata:
    """Fully resolved control-file fields"""

    name: str
    version: str
    author_name: str
    author_email: str
    short_description: str
    long_description: str
    section: str = "misc"
    priority: str = "extra"
    architecture: str = "all"
    standards_version: str = "3.9.2"

    @property
    def maintainer(self) -> str:
        return f"{self.author_name} <{self.author_email}>"

    def to_dict(self) -> Dict[str, str]:
        """Control fields as an ordered dictionary"""
        return {
            "Package": self.name,
            "Version": self.version,
            "Section": self.section,
            "Priority": self.priority,
            "Maintainer": self.maintainer,
            "Standards-Version": self.standards_version,
            "Architecture": self.architecture,
            "Description": self.short_description,
        }
