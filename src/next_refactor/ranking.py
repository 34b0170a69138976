"""Rank scanned files by change count."""

from __future__ import annotations

from collections.abc import Iterable

from .models import FileChange, RankedReport, ScanResult


def rank(
    results: Iterable[FileChange],
    n: int,
    elapsed_seconds: float = 0.0,
    branch: str = "",
    root: str = "",
) -> RankedReport:
    """Return the ``n`` most frequently changed files, highest count first.

    The sort is stable: files with equal counts keep their discovery order,
    so identical input always ranks identically. ``n`` larger than the input
    is clamped; an empty input yields an empty report.

    Raises:
        ValueError: If ``n`` is negative
    """
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")

    entries = list(results)
    ordered = sorted(entries, key=lambda change: change.count, reverse=True)
    limit = min(n, len(ordered))
    skipped = len(results.skipped) if isinstance(results, ScanResult) else 0

    return RankedReport(
        entries=tuple(ordered[:limit]),
        requested=n,
        limit=limit,
        total_files=len(entries),
        elapsed_seconds=elapsed_seconds,
        branch=branch,
        root=root,
        skipped=skipped,
    )
