"""Plain-text formatter: tab-separated table, safe to pipe."""

from ..models import RankedReport
from .base import BaseFormatter, summary_line

NO_FILES = "No files found"


class TextFormatter(BaseFormatter):
    """Header, commits/file table with a dashed separator, summary line."""

    def render(self, report: RankedReport) -> None:
        print(self.format(report))

    def format(self, report: RankedReport) -> str:
        if report.is_empty:
            return NO_FILES

        lines = ["", "Next to refactor:", "commits\tfile", "-------\t----"]
        lines.extend(f"{e.count}\t{e.path}" for e in report.entries)
        lines.append("")
        lines.append(summary_line(report))
        return "\n".join(lines)
