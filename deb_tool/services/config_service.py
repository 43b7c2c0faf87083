"""Configuration loading service"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import jsonschema
import yaml

from ..api.exceptions import ConfigError
from ..constants import (
    PROJECT_CONFIG_FILE,
    ENV_CONFIG_PATH,
    ENV_MAINTAINER_NAME,
    ENV_MAINTAINER_EMAIL,
    ENV_SOURCE_DATE_EPOCH,
)
from ..models import BuildConfig, CONFIG_SCHEMA

logger = logging.getLogger(__name__)


def find_config_file(explicit: Optional[Union[str, Path]] = None,
                     environ: Optional[Mapping[str, str]] = None,
                     cwd: Optional[Path] = None) -> Optional[Path]:
    """
    Locate the configuration file

    Order: explicit path, ``$DEB_TOOL_CONFIG``, ``./.deb-tool.yaml``.

    Returns:
        Path or None when no file is configured

    Raises:
        ConfigError: If an explicitly requested file does not exist
    """
    environ = os.environ if environ is None else environ

    requested = explicit or environ.get(ENV_CONFIG_PATH)
    if requested:
        path = Path(requested).expanduser()
        if not path.is_file():
            raise ConfigError(f"Configuration file not found: {path}")
        return path

    default = (cwd or Path.cwd()) / PROJECT_CONFIG_FILE
    return default if default.is_file() else None


def read_config_file(path: Path) -> Dict[str, Any]:
    """
    Read and validate a YAML configuration file

    Environment variables in the file are expanded before parsing.

    Raises:
        ConfigError: If the file is unreadable or invalid
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            content = f.read()
    except OSError as e:
        raise ConfigError(f"Cannot read configuration {path}: {e}") from e

    content = os.path.expandvars(content)

    try:
        data = yaml.safe_load(content) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Configuration {path} must be a mapping")

    try:
        jsonschema.validate(data, CONFIG_SCHEMA)
    except jsonschema.ValidationError as e:
        location = '.'.join(str(p) for p in e.absolute_path) or '<root>'
        raise ConfigError(f"Invalid configuration {path} at {location}: {e.message}") from e

    return data


def environment_defaults(environ: Mapping[str, str]) -> Dict[str, Any]:
    """Config values taken from the standard Debian environment variables"""
    defaults = {}

    if environ.get(ENV_MAINTAINER_NAME):
        defaults['author_name'] = environ[ENV_MAINTAINER_NAME]
    if environ.get(ENV_MAINTAINER_EMAIL):
        defaults['author_email'] = environ[ENV_MAINTAINER_EMAIL]

    epoch = environ.get(ENV_SOURCE_DATE_EPOCH)
    if epoch:
        try:
            defaults['source_date_epoch'] = int(epoch)
        except ValueError:
            raise ConfigError(f"{ENV_SOURCE_DATE_EPOCH} must be an integer, got {epoch!r}") from None

    return defaults


def load_config(config_path: Optional[Union[str, Path]] = None,
                environ: Optional[Mapping[str, str]] = None,
                cwd: Optional[Path] = None) -> BuildConfig:
    """
    Build the immutable configuration for a run

    Environment defaults are applied first and the configuration file
    overrides them. The environment is not consulted again afterwards.

    Args:
        config_path: Explicit configuration file
        environ: Environment mapping (``os.environ`` if None)
        cwd: Directory searched for ``.deb-tool.yaml``

    Returns:
        BuildConfig

    Raises:
        ConfigError: If the configuration is invalid
    """
    environ = os.environ if environ is None else environ

    data = environment_defaults(environ)

    path = find_config_file(config_path, environ, cwd)
    if path is not None:
        logger.debug(f"Loading configuration from {path}")
        data.update(read_config_file(path))

    return BuildConfig.from_dict(data)
