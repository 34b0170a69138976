"""Tree walker: enumerate files under a root and collect their change counts."""

from __future__ import annotations

import os
import stat
from collections.abc import Callable, Iterable
from typing import Optional

from .exceptions import DirectoryReadError, ParseError, ScanError, WalkError
from .filtering import should_exclude
from .logging_config import get_logger
from .models import FileChange, FilterSpec, ScanResult
from .temporal.provider import ChangeCountProvider

logger = get_logger(__name__)

ROOT = "."


class TreeWalker:
    """Depth-first walk of a directory tree, one change-count query per file.

    Entries are visited in lexicographic order of their names, so two walks
    over the same tree produce the same ScanResult order. Unreadable entries
    are reported and skipped; any filter or provider failure aborts the walk.

    Args:
        root: Directory to scan; paths in the result are relative to it
        branch: Revision handed to the provider
        filters: Exclusion patterns (a FilterSpec or any iterable of globs)
        provider: Change-count source, usually a GitChangeCounter
        on_enter: Called with the relative path of every directory entered
        on_skip: Called with every recoverable DirectoryReadError
    """

    def __init__(
        self,
        root: str,
        branch: str,
        filters: Iterable[str],
        provider: ChangeCountProvider,
        on_enter: Optional[Callable[[str], None]] = None,
        on_skip: Optional[Callable[[DirectoryReadError], None]] = None,
    ):
        self.root = str(root)
        self.branch = branch
        if not isinstance(filters, FilterSpec):
            filters = FilterSpec.from_patterns(filters)
        self.filters = filters
        self.provider = provider
        self.on_enter = on_enter
        self.on_skip = on_skip
        self._result = ScanResult()

    def walk(self) -> ScanResult:
        """Walk the tree and return the frozen result.

        Raises:
            WalkError: Wrapping the FilterError, ProviderError or ParseError
                that aborted the walk
        """
        self._result = ScanResult()
        try:
            self._walk_root()
        except ScanError as e:
            raise WalkError(self.root, e) from e
        return self._result.freeze()

    def _walk_root(self) -> None:
        try:
            st = os.lstat(self.root)
        except OSError as e:
            self._skip(ROOT, e)
            return

        if should_exclude(ROOT, self.filters):
            logger.debug("Excluded %s", ROOT)
            return

        if stat.S_ISDIR(st.st_mode):
            self._walk_dir(ROOT)
        else:
            self._count(ROOT)

    def _walk_dir(self, rel: str) -> None:
        self._result.record_directory()
        if self.on_enter is not None:
            self.on_enter(rel)

        try:
            with os.scandir(self._absolute(rel)) as it:
                entries = sorted(it, key=lambda entry: entry.name)
        except OSError as e:
            self._skip(rel, e)
            return

        for entry in entries:
            child = entry.name if rel == ROOT else f"{rel}/{entry.name}"
            try:
                is_dir = entry.is_dir(follow_symlinks=False)
            except OSError as e:
                self._skip(child, e)
                continue

            if should_exclude(child, self.filters):
                logger.debug("Excluded %s", child)
                continue

            if is_dir:
                self._walk_dir(child)
            else:
                self._count(child)

    def _count(self, rel: str) -> None:
        count = self.provider.count(rel, self.branch)
        if isinstance(count, bool) or not isinstance(count, int) or count < 0:
            raise ParseError(rel, self.branch, repr(count))
        logger.debug("%s: %d commits", rel, count)
        self._result.add(FileChange(path=rel, count=count))

    def _skip(self, rel: str, error: OSError) -> None:
        skipped = DirectoryReadError(rel, error.strerror or str(error))
        logger.warning("Skipping %s because of: %s", rel, skipped.reason)
        self._result.record_skip(skipped)
        if self.on_skip is not None:
            self.on_skip(skipped)

    def _absolute(self, rel: str) -> str:
        if rel == ROOT:
            return self.root
        return os.path.join(self.root, *rel.split("/"))


def walk(
    root: str,
    branch: str,
    filters: Iterable[str],
    provider: ChangeCountProvider,
) -> ScanResult:
    """Walk ``root`` with a fresh TreeWalker and return its result."""
    return TreeWalker(root, branch, filters, provider).walk()
