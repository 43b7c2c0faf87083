"""Build service implementation"""

import getpass
import logging
import socket
import tarfile
import time
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Callable, Generator, Optional, Tuple, Type

from ..api.exceptions import (
    DebToolError,
    AssemblyError,
    ControlError,
)
from ..constants import (
    DEFAULT_SHORT_DESCRIPTION,
    DEFAULT_LONG_DESCRIPTION,
    DEFAULT_OUTPUT_PATTERN,
    DOC_DIR_PATTERN,
    COPYRIGHT_FILE,
    CHANGELOG_FILE,
)
from ..core import (
    resolve_identity,
    synthesize_version,
    workspace,
    write_control_file,
    write_copyright,
    write_changelog,
    write_md5sums,
    assemble_data_tree,
    package,
    publish,
    validate_target,
    check_metadata,
)
from ..core.data_assembler import make_real_dir
from ..core.identity_resolver import resolve_project_path
from ..core.workspace import Workspace
from ..models import BuildConfig, BuildRequest, BuildResult, PackageMetadata
from ..utils.git_utils import get_config_value


@dataclass(frozen=True)
class BuildPlan:
    """Everything decided before a workspace is created"""
    target: Path
    metadata: PackageMetadata
    output_path: Path
    install_prefix: str
    project_path: Path
    timestamp: datetime


def login_name() -> str:
    """Login name of the invoking user"""
    try:
        return getpass.getuser()
    except (KeyError, OSError):
        return "unknown"


@contextmanager
def build_stage(error_cls: Type[DebToolError]) -> Generator[None, None, None]:
    """Translate I/O failures inside a stage into that stage's error"""
    try:
        yield
    except DebToolError:
        raise
    except (OSError, tarfile.TarError) as e:
        raise error_cls(str(e)) from e


class BuildService:
    """Packaging workflow: plan, populate a workspace, package, publish"""

    def __init__(self,
                 config: Optional[BuildConfig] = None,
                 clock: Callable[[], datetime] = datetime.now):
        """
        Initialize build service

        Args:
            config: Build configuration
            clock: Source of the build time
        """
        self.config = config or BuildConfig()
        self.clock = clock
        self.logger = logging.getLogger(self.__class__.__name__)

    def default_maintainer(self, project_path: Path) -> Tuple[str, str]:
        """Maintainer name and email when neither request nor config has them"""
        git = self.config.git_executable

        name = (self.config.author_name
                or get_config_value('user.name', project_path, git)
                or login_name())
        email = (self.config.author_email
                 or get_config_value('user.email', project_path, git)
                 or f"{login_name()}@{socket.getfqdn()}")
        return name, email

    def plan(self, request: BuildRequest) -> BuildPlan:
        """
        Validate the request and resolve all package metadata

        Args:
            request: Build request

        Returns:
            BuildPlan

        Raises:
            InvalidTargetError: If the target is missing or unusable
        """
        target = validate_target(request.target)
        now = self.clock()

        if request.name:
            name = request.name
            project_path = resolve_project_path(target, self.config)
        else:
            identity = resolve_identity(target, self.config)
            name, project_path = identity.name, identity.path
        self.logger.info(f"Project name: {name}")

        version = request.version or synthesize_version(target, self.config, now)
        self.logger.info(f"Version: {version}")

        if request.author_name and request.author_email:
            author_name, author_email = request.author_name, request.author_email
        else:
            default_name, default_email = self.default_maintainer(project_path)
            author_name = request.author_name or default_name
            author_email = request.author_email or default_email

        metadata = PackageMetadata(
            name=name,
            version=version,
            author_name=author_name,
            author_email=author_email,
            short_description=(request.short_description
                               if request.short_description is not None
                               else DEFAULT_SHORT_DESCRIPTION.format(name=name)),
            long_description=(request.long_description
                              if request.long_description is not None
                              else DEFAULT_LONG_DESCRIPTION.format(name=name)),
            section=self.config.section,
            priority=self.config.priority,
            architecture=self.config.architecture,
            standards_version=self.config.standards_version,
        )

        output_path = request.output or Path.cwd() / DEFAULT_OUTPUT_PATTERN.format(
            name=name, version=version
        )

        return BuildPlan(
            target=target,
            metadata=metadata,
            output_path=Path(output_path).absolute(),
            install_prefix=request.install_prefix or '',
            project_path=project_path,
            timestamp=now,
        )

    def populate(self, ws: Workspace, plan: BuildPlan) -> None:
        """Fill control/ and root/ of a workspace"""
        metadata = plan.metadata

        with build_stage(AssemblyError):
            assemble_data_tree(
                ws.root_dir,
                plan.target,
                plan.install_prefix,
                self.config.executable_dirs
            )

        with build_stage(ControlError):
            doc_dir = make_real_dir(ws.root_dir, DOC_DIR_PATTERN.format(name=metadata.name))
            write_copyright(doc_dir / COPYRIGHT_FILE, metadata, plan.timestamp)
            write_changelog(doc_dir / CHANGELOG_FILE, metadata, plan.timestamp)

            write_control_file(ws.control_dir / 'control', metadata)
            if self.config.md5sums:
                write_md5sums(ws.control_dir / 'md5sums', ws.root_dir)

    def execute(self, plan: BuildPlan) -> Path:
        """
        Build and publish the package described by plan

        Args:
            plan: Build plan

        Returns:
            Path of the published package

        Raises:
            DebToolError: If any stage fails
        """
        validation = check_metadata(plan.metadata)
        for warning in validation.warnings:
            self.logger.warning(warning)
        if not validation.is_valid:
            raise ControlError('; '.join(validation.errors))

        with workspace(self.config) as ws:
            self.logger.debug(f"Using {ws}")
            self.populate(ws, plan)
            data = package(ws, self.config, int(plan.timestamp.timestamp()))
            return publish(data, plan.output_path)

    def build(self, request: BuildRequest) -> BuildResult:
        """
        Run the whole build

        Args:
            request: Build request

        Returns:
            Successful BuildResult

        Raises:
            DebToolError: If any stage fails
        """
        start_time = time.time()

        plan = self.plan(request)
        output_path = self.execute(plan)

        return BuildResult(
            success=True,
            package_name=plan.metadata.name,
            version=plan.metadata.version,
            package_path=str(output_path),
            package_size=output_path.stat().st_size,
            duration=time.time() - start_time,
            metadata={
                'maintainer': plan.metadata.maintainer,
                'install_prefix': '/' + plan.install_prefix.strip('/'),
            }
        )
