# deb_tool/core/validation.py
"""Input and metadata validation"""

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Union

from ..api.exceptions import InvalidTargetError
from ..models import PackageMetadata

# Debian policy 5.6.1 / 5.6.12
PACKAGE_NAME_PATTERN = re.compile(r"^[a-z0-9][a-z0-9+.-]+$")
DEBIAN_VERSION_PATTERN = re.compile(r"^(?:\d+:)?\d[A-Za-z0-9.+~-]*$")


@dataclass
class ValidationResult:
    """Validation result container"""
    is_valid: bool = True
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def add_error(self, message: str) -> None:
        """Add error message"""
        self.errors.append(message)
        self.is_valid = False

    def add_warning(self, message: str) -> None:
        """Add warning message"""
        self.warnings.append(message)


def validate_target(target_path: Union[str, Path]) -> Path:
    """
    Check that the build target exists as a file or directory

    Args:
        target_path: Target path

    Returns:
        Absolute target path

    Raises:
        InvalidTargetError: If the target is missing or of another type
    """
    target = Path(target_path)

    if not target.exists():
        raise InvalidTargetError(str(target_path))

    if not (target.is_file() or target.is_dir()):
        raise InvalidTargetError(str(target_path), "is neither a file nor a directory")

    return target.absolute()


def check_metadata(metadata: PackageMetadata) -> ValidationResult:
    """
    Check metadata against Debian naming rules

    Inferred names do not always follow policy; the build still proceeds,
    so problems are reported as warnings.

    Args:
        metadata: Resolved package metadata

    Returns:
        ValidationResult
    """
    result = ValidationResult()

    if not PACKAGE_NAME_PATTERN.match(metadata.name):
        result.add_warning(
            f"Package name '{metadata.name}' does not follow Debian policy "
            f"(lowercase letters, digits, '+', '-', '.')"
        )

    if not DEBIAN_VERSION_PATTERN.match(metadata.version):
        result.add_warning(f"Version '{metadata.version}' should start with a digit")

    if '\n' in metadata.short_description:
        result.add_error("Short description must be a single line")

    return result
