"""Quiet formatter: file paths only."""

from ..models import RankedReport
from .base import BaseFormatter


class QuietFormatter(BaseFormatter):
    """Render just file paths, one per line, highest count first."""

    def render(self, report: RankedReport) -> None:
        if not report.is_empty:
            print(self.format(report))

    def format(self, report: RankedReport) -> str:
        return "\n".join(e.path for e in report.entries)
