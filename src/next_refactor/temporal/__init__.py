"""Change history: per-file commit counts from git."""

from .git_counter import GitChangeCounter, parse_count
from .provider import ChangeCountProvider

__all__ = [
    "ChangeCountProvider",
    "GitChangeCounter",
    "parse_count",
]
