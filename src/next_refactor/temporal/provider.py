"""Interface the walker consumes to obtain per-file change counts."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class ChangeCountProvider(Protocol):
    """Synchronous, fallible source of historical change counts."""

    def count(self, path: str, branch: str) -> int:
        """Return how many commits on ``branch`` touched ``path``.

        Raises:
            ProviderError: If the query cannot run or exits abnormally
            ParseError: If the query output is not a non-negative integer
        """
        ...
