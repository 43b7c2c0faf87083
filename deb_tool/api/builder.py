"""Builder API for packaging operations"""

import logging
import time
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional, Union

from ..models import BuildConfig, BuildRequest, BuildResult
from ..services.build_service import BuildService, BuildPlan
from .exceptions import DebToolError


class Builder:
    """Builder class for .deb packaging operations"""

    def __init__(self,
                 config: Optional[BuildConfig] = None,
                 clock: Callable[[], datetime] = datetime.now):
        """
        Initialize builder

        Args:
            config: Build configuration (defaults if None)
            clock: Source of the build time
        """
        self.config = config or BuildConfig()
        self.service = BuildService(self.config, clock=clock)
        self.logger = logging.getLogger(self.__class__.__name__)

    def plan(self, request: BuildRequest) -> BuildPlan:
        """
        Resolve metadata without building anything

        Args:
            request: Build request

        Returns:
            BuildPlan

        Raises:
            InvalidTargetError: If the target is missing or unusable
        """
        return self.service.plan(request)

    def build(self, request: BuildRequest) -> BuildResult:
        """
        Execute a build

        Failures do not raise; they come back as an unsuccessful result
        naming the failing stage.

        Args:
            request: Build request

        Returns:
            BuildResult
        """
        start_time = time.time()

        try:
            return self.service.build(request)
        except DebToolError as e:
            self.logger.debug(f"Build failed at stage {e.stage}", exc_info=True)
            return BuildResult(
                success=False,
                error=str(e),
                error_code=e.error_code,
                stage=e.stage,
                duration=time.time() - start_time
            )


def build(target: Union[str, Path],
          config: Optional[BuildConfig] = None,
          **overrides) -> BuildResult:
    """
    Convenience function for a single build

    Args:
        target: File or directory to package
        config: Build configuration
        **overrides: BuildRequest fields (name, version, output,
            short_description, long_description, author_name,
            author_email, install_prefix)

    Returns:
        BuildResult
    """
    request = BuildRequest.create(target, **overrides)
    return Builder(config).build(request)
