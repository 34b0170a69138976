"""Shared test fixtures for next-refactor tests."""

import shutil
import subprocess
from pathlib import Path

import pytest

from next_refactor.exceptions import ProviderError


def pytest_addoption(parser):
    """Add --run-slow option for slow tests."""
    parser.addoption(
        "--run-slow",
        action="store_true",
        default=False,
        help="run slow tests",
    )


def pytest_configure(config):
    """Configure slow marker."""
    config.addinivalue_line("markers", "slow: mark test as slow to run")


def pytest_collection_modifyitems(config, items):
    """Skip slow tests unless --run-slow is given."""
    if config.getoption("--run-slow"):
        return
    skip_slow = pytest.mark.skip(reason="need --run-slow option to run")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


class FakeProvider:
    """In-memory change-count provider.

    counts maps relative path -> count; unknown paths get ``default``.
    Paths in ``fail_on`` raise ProviderError, like git exiting non-zero.
    """

    def __init__(self, counts=None, default=0, fail_on=()):
        self.counts = dict(counts or {})
        self.default = default
        self.fail_on = set(fail_on)
        self.calls = []

    def count(self, path, branch):
        self.calls.append((path, branch))
        if path in self.fail_on:
            raise ProviderError(
                path, branch, "git rev-list exited abnormally", output="fatal: bad revision"
            )
        return self.counts.get(path, self.default)


@pytest.fixture
def fake_provider():
    """Factory for FakeProvider instances."""
    return FakeProvider


@pytest.fixture
def make_tree(tmp_path):
    """Create files (and their parent directories) under tmp_path.

    Usage: root = make_tree("a.txt", "src/b.py", ".git/config")
    """

    def _make(*paths: str) -> Path:
        for rel in paths:
            target = tmp_path / rel
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(f"{rel}\n")
        return tmp_path

    return _make


GIT = shutil.which("git")


def _git(repo: Path, *args: str) -> str:
    result = subprocess.run(
        [
            "git",
            "-c",
            "user.name=Test",
            "-c",
            "user.email=test@example.com",
            "-c",
            "commit.gpgsign=false",
            *args,
        ],
        cwd=repo,
        capture_output=True,
        text=True,
        check=True,
    )
    return result.stdout


class GitRepo:
    """Tiny helper around a throwaway repository on branch main."""

    def __init__(self, path: Path):
        self.path = path
        _git(path, "init", "-q")
        _git(path, "symbolic-ref", "HEAD", "refs/heads/main")

    def commit(self, *files: str, message: str = "change") -> None:
        for rel in files:
            target = self.path / rel
            target.parent.mkdir(parents=True, exist_ok=True)
            previous = target.read_text() if target.exists() else ""
            target.write_text(previous + f"{message}\n")
        _git(self.path, "add", "--", *files)
        _git(self.path, "commit", "-q", "-m", message)


@pytest.fixture
def git_repo(tmp_path):
    """An empty git repository in tmp_path (skips when git is missing)."""
    if GIT is None:
        pytest.skip("git executable not available")
    return GitRepo(tmp_path)
