"""Count commits touching a path via ``git rev-list --count``."""

import subprocess
from pathlib import Path

from ..exceptions import ParseError, ProviderError
from ..logging_config import get_logger

logger = get_logger(__name__)


class GitChangeCounter:
    """Ask git how many commits on a branch touched a path.

    One short-lived git process per query. stderr is merged into stdout so
    diagnostics (e.g. "unknown revision") end up in the raised error.
    """

    def __init__(self, repo_root: str, timeout_seconds: int = 30, git_executable: str = "git"):
        self.repo_root = str(Path(repo_root).resolve())
        self.timeout_seconds = timeout_seconds
        self.git_executable = git_executable

    def command(self, path: str, branch: str) -> list[str]:
        return [self.git_executable, "rev-list", "--count", branch, "--", path]

    def count(self, path: str, branch: str) -> int:
        cmd = self.command(path, branch)
        logger.debug("Running %s", " ".join(cmd))
        try:
            result = subprocess.run(
                cmd,
                cwd=self.repo_root,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                errors="replace",
                timeout=self.timeout_seconds,
            )
        except FileNotFoundError as e:
            raise ProviderError(path, branch, f"git executable not found: {e}") from e
        except subprocess.TimeoutExpired as e:
            raise ProviderError(
                path, branch, f"git rev-list timed out after {self.timeout_seconds}s"
            ) from e
        except OSError as e:
            raise ProviderError(path, branch, f"cannot run git rev-list: {e}") from e

        output = result.stdout or ""
        if result.returncode != 0:
            raise ProviderError(
                path,
                branch,
                "git rev-list exited abnormally",
                output=output.strip(),
                returncode=result.returncode,
            )

        return parse_count(output, path, branch)

    def is_git_repository(self) -> bool:
        try:
            result = subprocess.run(
                [self.git_executable, "rev-parse", "--git-dir"],
                cwd=self.repo_root,
                capture_output=True,
                text=True,
                timeout=5,
            )
            return result.returncode == 0
        except (OSError, subprocess.TimeoutExpired):
            return False


def parse_count(output: str, path: str, branch: str) -> int:
    """Parse ``git rev-list --count`` output into a non-negative int."""
    trimmed = output.strip()
    if not trimmed.isdigit() or not trimmed.isascii():
        raise ParseError(path, branch, output)
    return int(trimmed)
