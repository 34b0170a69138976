"""Configuration exceptions: invocation, scan root, settings."""

from pathlib import Path
from typing import Any

from .base import NextRefactorError


class ConfigurationError(NextRefactorError):
    """Base class for configuration-related errors."""

    pass


class UsageError(ConfigurationError):
    """Raised when the command line is malformed."""

    def __init__(self, reason: str):
        super().__init__(f"Wrong usage: {reason}", details={"reason": reason})
        self.reason = reason


class PathResolutionError(ConfigurationError):
    """Raised when the scan root cannot be determined or normalized."""

    def __init__(self, path: Path, reason: str):
        super().__init__(
            f"Cannot resolve scan root: {path}", details={"path": str(path), "reason": reason}
        )
        self.path = path
        self.reason = reason


class InvalidConfigError(ConfigurationError):
    """Raised when configuration values are invalid."""

    def __init__(self, key: str, value: Any, reason: str):
        super().__init__(
            f"Invalid configuration for {key}: {value}",
            details={"key": key, "value": str(value), "reason": reason},
        )
        self.key = key
        self.value = value
        self.reason = reason
