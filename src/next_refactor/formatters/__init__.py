"""Output formatters for next-refactor."""

from .base import BaseFormatter
from .json_formatter import JsonFormatter
from .quiet_formatter import QuietFormatter
from .rich_formatter import RichFormatter
from .text_formatter import TextFormatter


def get_formatter(name: str) -> BaseFormatter:
    """Get a formatter instance by name.

    Args:
        name: One of "text", "rich", "json", "quiet"

    Returns:
        Formatter instance

    Raises:
        ValueError: If name is not recognized
    """
    formatters = {
        "text": TextFormatter,
        "rich": RichFormatter,
        "json": JsonFormatter,
        "quiet": QuietFormatter,
    }
    cls = formatters.get(name)
    if cls is None:
        raise ValueError(
            f"Unknown formatter: {name!r}. Choose from: {', '.join(sorted(formatters))}"
        )
    return cls()


__all__ = [
    "BaseFormatter",
    "TextFormatter",
    "RichFormatter",
    "JsonFormatter",
    "QuietFormatter",
    "get_formatter",
]
