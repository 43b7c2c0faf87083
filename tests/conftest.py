"""Test configuration for pytest."""

import os
import shutil
import subprocess
from datetime import datetime
from pathlib import Path
from typing import Dict, Optional

import pytest

from deb_tool.models import BuildConfig


FIXED_NOW = datetime(2026, 10, 19, 14, 30, 5)
MISSING_GIT = "/nonexistent/bin/git"


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def config(tmp_path) -> BuildConfig:
    """Config isolated from git and from the host's temp directory"""
    work_dir = tmp_path / "work"
    work_dir.mkdir()
    return BuildConfig(
        author_name="Test User",
        author_email="test@example.com",
        git_executable=MISSING_GIT,
        work_dir=work_dir,
    )


def make_tree(root: Path, files: Dict[str, Optional[int]]) -> Path:
    """Create files below root; the value is the file mode (None: 0644)"""
    root.mkdir(parents=True, exist_ok=True)
    for relpath, mode in files.items():
        path = root / relpath
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(f"content of {relpath}\n")
        os.chmod(path, 0o644 if mode is None else mode)
    return root


@pytest.fixture
def tree_factory(tmp_path):
    def _factory(name: str, files: Dict[str, Optional[int]]) -> Path:
        return make_tree(tmp_path / name, files)
    return _factory


def _git(repo: Path, *args: str) -> str:
    result = subprocess.run(
        ["git", *args],
        cwd=repo,
        check=True,
        capture_output=True,
        text=True,
    )
    return result.stdout.strip()


@pytest.fixture
def git_repo(tmp_path) -> Path:
    """A git repository with one commit"""
    if shutil.which("git") is None:
        pytest.skip("git is not installed")

    repo = tmp_path / "repo"
    repo.mkdir()
    _git(repo, "init", "-q")
    (repo / "README").write_text("readme\n")
    _git(repo, "add", "README")
    _git(
        repo,
        "-c", "user.name=Test User",
        "-c", "user.email=test@example.com",
        "-c", "commit.gpgsign=false",
        "commit", "-q", "-m", "initial",
    )
    return repo


@pytest.fixture
def git_head():
    """Short HEAD hash of a repository"""
    def _head(repo: Path) -> str:
        return _git(repo, "rev-parse", "--short", "HEAD")
    return _head
