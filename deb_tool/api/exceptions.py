"""Exception definitions for deb-tool API"""

from ..constants import ErrorCode, Stage


class DebToolError(Exception):
    """Base exception for deb-tool"""

    stage = None

    def __init__(self, message: str, error_code: str = None, stage: str = None):
        super().__init__(message)
        self.error_code = error_code
        if stage is not None:
            self.stage = stage


class InvalidTargetError(DebToolError):
    """Build target does not exist or is not a file or directory"""

    stage = Stage.VALIDATE

    def __init__(self, target_path: str, reason: str = "does not exist"):
        message = f"Target {reason}: {target_path}"
        super().__init__(message, ErrorCode.INVALID_TARGET)
        self.target_path = target_path


class ConfigError(DebToolError):
    """Configuration error"""

    stage = Stage.CONFIG

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.CONFIG_FORMAT_ERROR)


class WorkspaceError(DebToolError):
    """Workspace could not be created"""

    stage = Stage.WORKSPACE

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.WORKSPACE_FAILED)


class AssemblyError(DebToolError):
    """Copying the target or applying permissions failed"""

    stage = Stage.ASSEMBLE

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.ASSEMBLY_FAILED)


class ControlError(DebToolError):
    """Control file or documentation could not be written"""

    stage = Stage.CONTROL

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.CONTROL_FAILED)


class ArchiveError(DebToolError):
    """Tar, gzip or ar step failed"""

    stage = Stage.PACKAGE

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.ARCHIVE_FAILED)


class PublishError(DebToolError):
    """Output package could not be written"""

    stage = Stage.PUBLISH

    def __init__(self, message: str, output_path: str = None):
        super().__init__(message, ErrorCode.PUBLISH_FAILED)
        self.output_path = output_path
