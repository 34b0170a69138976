"""Root of the next-refactor error hierarchy."""

from typing import Any, Dict, Optional


class NextRefactorError(Exception):
    """Base exception for all next-refactor errors.

    ``details`` carries the context printed after the message, such as the
    path being counted, the branch or git's own diagnostic output. Values are
    rendered with ``str()``; ``None`` and empty values are left out so callers
    can pass optional context unconditionally.
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = {
            key: str(value)
            for key, value in (details or {}).items()
            if value is not None and value != ""
        }

    def __str__(self) -> str:
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message
