"""Global constants for deb-tool"""

APP_NAME = "deb-tool"
LOG_FORMAT = "%(message)s"

# Configuration
PROJECT_CONFIG_FILE = ".deb-tool.yaml"
ENV_CONFIG_PATH = "DEB_TOOL_CONFIG"
ENV_MAINTAINER_NAME = "DEBFULLNAME"
ENV_MAINTAINER_EMAIL = "DEBEMAIL"
ENV_SOURCE_DATE_EPOCH = "SOURCE_DATE_EPOCH"

# Package metadata defaults
DEFAULT_BASELINE_VERSION = "1.0"
DEFAULT_SECTION = "misc"
DEFAULT_PRIORITY = "extra"
DEFAULT_ARCHITECTURE = "all"
DEFAULT_STANDARDS_VERSION = "3.9.2"
DEFAULT_PROJECT_NAME = "project"
DEFAULT_SHORT_DESCRIPTION = " {name} rolling release"
DEFAULT_LONG_DESCRIPTION = "Automatically generated package for {name}."
DEFAULT_OUTPUT_PATTERN = "{name}-{version}.deb"

# Version synthesis
VERSION_DATE_FORMAT = "%y%m%d"
VERSION_TIME_FORMAT = "%H%M%S"

# Workspace layout
WORKSPACE_PREFIX = "deb-tool-"
WORKSPACE_CONTROL_DIR = "control"
WORKSPACE_ROOT_DIR = "root"
WORKSPACE_PKG_DIR = "pkg"

# Archive format
DEBIAN_BINARY_MEMBER = "debian-binary"
CONTROL_MEMBER = "control.tar.gz"
DATA_MEMBER = "data.tar.gz"
DEB_MEMBER_ORDER = (DEBIAN_BINARY_MEMBER, CONTROL_MEMBER, DATA_MEMBER)
DEBIAN_BINARY_CONTENT = b"2.0\n"
DEFAULT_COMPRESSION_LEVEL = 9

# Permission policy
DIR_MODE = 0o755
FILE_MODE = 0o644
EXEC_MODE = 0o755
EXECUTABLE_DIRS = (
    "usr/local/sbin",
    "usr/local/bin",
    "usr/sbin",
    "usr/bin",
    "sbin",
    "bin",
)

# Documentation paths inside the package
DOC_DIR_PATTERN = "usr/share/doc/{name}"
COPYRIGHT_FILE = "copyright"
CHANGELOG_FILE = "changelog.Debian.gz"

# Error codes
class ErrorCode:
    CONFIG_FORMAT_ERROR = "DT001"
    INVALID_TARGET = "DT002"
    WORKSPACE_FAILED = "DT003"
    ASSEMBLY_FAILED = "DT004"
    CONTROL_FAILED = "DT005"
    ARCHIVE_FAILED = "DT006"
    PUBLISH_FAILED = "DT007"


# Build stages, used in diagnostics
class Stage:
    VALIDATE = "validate"
    CONFIG = "config"
    WORKSPACE = "workspace"
    CONTROL = "control"
    ASSEMBLE = "assemble"
    PACKAGE = "package"
    PUBLISH = "publish"


# Display constants
EMOJI_SUCCESS = "✓"
EMOJI_ERROR = "✗"
EMOJI_WARNING = "⚠"
EMOJI_PACKAGE = "📦"

MSG_BUILD_SUCCESS = f"{EMOJI_SUCCESS} Package created: {{path}} ({{size}})"
MSG_BUILD_FAILED = f"{EMOJI_ERROR} Build failed [{{stage}}]: {{error}}"
