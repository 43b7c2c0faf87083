"""Command line interface for deb-tool"""

from .main import cli, main

__all__ = ["cli", "main"]
