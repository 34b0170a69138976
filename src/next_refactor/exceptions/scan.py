"""Scan-related exceptions: filtering, directory reads, git queries."""

from typing import Optional

from .base import NextRefactorError


class ScanError(NextRefactorError):
    """Base class for errors raised while walking a tree."""

    pass


class FilterError(ScanError):
    """Raised when an exclusion pattern is syntactically invalid."""

    def __init__(self, pattern: str, path: str, reason: str):
        super().__init__(
            f"Invalid filter pattern {pattern!r} while checking {path}",
            details={"pattern": pattern, "path": path, "reason": reason},
        )
        self.pattern = pattern
        self.path = path
        self.reason = reason


class DirectoryReadError(ScanError):
    """Raised when an entry cannot be read. Recoverable: the subtree is skipped."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Cannot read {path}", details={"path": path, "reason": reason})
        self.path = path
        self.reason = reason


class ProviderError(ScanError):
    """Raised when the change-count query fails to run or exits abnormally."""

    def __init__(
        self,
        path: str,
        branch: str,
        reason: str,
        output: str = "",
        returncode: Optional[int] = None,
    ):
        super().__init__(
            f"Counting commits failed for {path}",
            details={
                "path": path,
                "branch": branch,
                "reason": reason,
                "returncode": returncode,
                "output": output,
            },
        )
        self.path = path
        self.branch = branch
        self.reason = reason
        self.output = output
        self.returncode = returncode


class ParseError(ScanError):
    """Raised when the change-count output is not a non-negative integer."""

    def __init__(self, path: str, branch: str, output: str):
        super().__init__(
            f"Cannot parse commit count for {path}",
            details={"path": path, "branch": branch, "output": repr(output)},
        )
        self.path = path
        self.branch = branch
        self.output = output


class WalkError(ScanError):
    """Raised when a fatal error aborts the walk of a tree."""

    def __init__(self, root: str, cause: NextRefactorError):
        super().__init__(f"Walk directory {root} failed: {cause}")
        self.root = root
        self.cause = cause
