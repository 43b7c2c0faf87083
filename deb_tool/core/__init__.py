"""Core functionality for deb-tool"""

from .identity_resolver import resolve_identity, find_single_executable
from .version_synthesizer import synthesize_version
from .workspace import Workspace, create_workspace, destroy_workspace, workspace
from .control_writer import (
    write_control_file,
    write_copyright,
    write_changelog,
    write_md5sums,
)
from .data_assembler import assemble_data_tree, apply_permission_policy
from .packager import package, publish
from .validation import validate_target, check_metadata, ValidationResult

__all__ = [
    "resolve_identity",
    "find_single_executable",
    "synthesize_version",
    "Workspace",
    "create_workspace",
    "destroy_workspace",
    "workspace",
    "write_control_file",
    "write_copyright",
    "write_changelog",
    "write_md5sums",
    "assemble_data_tree",
    "apply_permission_policy",
    "package",
    "publish",
    "validate_target",
    "check_metadata",
    "ValidationResult",
]
