"""Exception hierarchy for next-refactor."""

from .base import NextRefactorError
from .config import (
    ConfigurationError,
    InvalidConfigError,
    PathResolutionError,
    UsageError,
)
from .scan import (
    DirectoryReadError,
    FilterError,
    ParseError,
    ProviderError,
    ScanError,
    WalkError,
)

__all__ = [
    "NextRefactorError",
    "ConfigurationError",
    "UsageError",
    "PathResolutionError",
    "InvalidConfigError",
    "ScanError",
    "FilterError",
    "DirectoryReadError",
    "ProviderError",
    "ParseError",
    "WalkError",
]
