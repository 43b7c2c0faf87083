"""Result models for operations"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Any


@dataclass
class BuildResult:
    """Build operation result"""
    success: bool
    package_name: Optional[str] = None
    version: Optional[str] = None
    package_path: Optional[str] = None
    package_size: int = 0
    error: Optional[str] = None
    error_code: Optional[str] = None
    stage: Optional[str] = None
    duration: float = 0.0
    metadata: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        data = {
            "success": self.success,
            "package_name": self.package_name,
            "version": self.version,
            "package_path": self.package_path,
            "package_size": self.package_size,
            "duration": self.duration,
        }
        if not self.success:
            data["error"] = self.error
            data["error_code"] = self.error_code
            data["stage"] = self.stage
        if self.metadata:
            data["metadata"] = self.metadata
        return data
