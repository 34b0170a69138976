"""Base formatter interface for next-refactor output rendering."""

from abc import ABC, abstractmethod

from ..models import RankedReport


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    @abstractmethod
    def render(self, report: RankedReport) -> None:
        """Render the report to stdout."""

    @abstractmethod
    def format(self, report: RankedReport) -> str:
        """Return formatted string representation of the report."""


def summary_line(report: RankedReport) -> str:
    """'Scanned N files in X.XXs' plus the skipped-entry count, if any."""
    noun = "file" if report.total_files == 1 else "files"
    line = f"Scanned {report.total_files} {noun} in {report.elapsed_seconds:.2f}s"
    if report.skipped:
        line += f" ({report.skipped} unreadable skipped)"
    return line
