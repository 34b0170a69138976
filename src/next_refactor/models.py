"""Data models for a change-frequency scan."""

from __future__ import annotations

import posixpath
from collections.abc import Iterable, Iterator
from dataclasses import asdict, dataclass, field

from .exceptions import DirectoryReadError

# Cleaned form of ".git/": git metadata is never scanned.
DEFAULT_EXCLUDES: tuple[str, ...] = (".git",)


@dataclass(frozen=True)
class FileChange:
    """One scanned file and the number of commits that touched it."""

    path: str  # relative to the scan root, "/" separated
    count: int

    def __post_init__(self) -> None:
        if self.count < 0:
            raise ValueError(f"count must be non-negative, got {self.count}")


@dataclass
class ScanResult:
    """All files found by one walk, in discovery order.

    Appended to by the walker only; read-only once frozen.
    """

    _entries: list[FileChange] = field(default_factory=list, repr=False)
    _skipped: list[DirectoryReadError] = field(default_factory=list, repr=False)
    directories: int = 0
    _paths: set[str] = field(default_factory=set, repr=False)
    _frozen: bool = field(default=False, repr=False)

    def add(self, change: FileChange) -> None:
        self._check_mutable()
        if change.path in self._paths:
            raise ValueError(f"duplicate path in scan result: {change.path}")
        self._paths.add(change.path)
        self._entries.append(change)

    @property
    def entries(self) -> tuple[FileChange, ...]:
        return tuple(self._entries)

    @property
    def skipped(self) -> tuple[DirectoryReadError, ...]:
        return tuple(self._skipped)

    def record_skip(self, error: DirectoryReadError) -> None:
        self._check_mutable()
        self._skipped.append(error)

    def record_directory(self) -> None:
        self._check_mutable()
        self.directories += 1

    def freeze(self) -> ScanResult:
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def _check_mutable(self) -> None:
        if self._frozen:
            raise RuntimeError("scan result is read-only once the walk has completed")

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[FileChange]:
        return iter(self._entries)


def clean_pattern(pattern: str) -> str:
    """Normalize an exclusion pattern the way paths are normalized.

    >>> clean_pattern("build/")
    'build'
    >>> clean_pattern("./src//gen/*")
    'src/gen/*'
    """
    cleaned = posixpath.normpath(pattern)
    # normpath keeps a leading "//"; a clean path never has one
    if cleaned.startswith("//"):
        cleaned = "/" + cleaned.lstrip("/")
    return cleaned


@dataclass(frozen=True)
class FilterSpec:
    """Ordered, cleaned exclusion patterns. Always contains the defaults."""

    patterns: tuple[str, ...] = DEFAULT_EXCLUDES

    @classmethod
    def from_patterns(cls, extra: Iterable[str] = ()) -> FilterSpec:
        """Build a filter set from user patterns, prepending the defaults."""
        seen: dict[str, None] = {}
        for pattern in (*DEFAULT_EXCLUDES, *extra):
            seen.setdefault(clean_pattern(pattern), None)
        return cls(patterns=tuple(seen))

    def __iter__(self) -> Iterator[str]:
        return iter(self.patterns)

    def __len__(self) -> int:
        return len(self.patterns)


@dataclass(frozen=True)
class RankedReport:
    """Top-N slice of a scan, sorted by count descending, plus run metadata."""

    entries: tuple[FileChange, ...]
    requested: int
    limit: int
    total_files: int
    elapsed_seconds: float = 0.0
    branch: str = ""
    root: str = ""
    skipped: int = 0  # unreadable entries left out of the walk

    @property
    def is_empty(self) -> bool:
        return not self.entries

    def to_dict(self) -> dict:
        return {
            "branch": self.branch,
            "root": self.root,
            "requested": self.requested,
            "limit": self.limit,
            "total_files": self.total_files,
            "elapsed_seconds": round(self.elapsed_seconds, 3),
            "skipped": self.skipped,
            "entries": [asdict(e) for e in self.entries],
        }
