"""Build request model"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union


@dataclass(frozen=True)
class BuildRequest:
    """What to package, plus optional metadata overrides"""

    target: Path
    name: Optional[str] = None
    version: Optional[str] = None
    output: Optional[Path] = None
    short_description: Optional[str] = None
    long_description: Optional[str] = None
    author_name: Optional[str] = None
    author_email: Optional[str] = None
    install_prefix: Optional[str] = None

    @classmethod
    def create(cls, target: Union[str, Path], **overrides) -> 'BuildRequest':
        """Create a request, coercing path-like arguments"""
        output = overrides.pop('output', None)
        return cls(
            target=Path(target),
            output=Path(output) if output else None,
            **overrides
        )
