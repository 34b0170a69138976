"""Rich terminal formatter for next-refactor."""

from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..models import RankedReport
from .base import BaseFormatter, summary_line


def _count_style(count: int, top: int) -> str:
    if top and count >= top * 0.75:
        return "red bold"
    elif top and count >= top * 0.4:
        return "yellow"
    return "green"


class RichFormatter(BaseFormatter):
    """Colored table of the most frequently changed files."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def render(self, report: RankedReport) -> None:
        if report.is_empty:
            self.console.print("[yellow]No files found[/yellow]")
            return

        self.console.print()
        self.console.print(self._build_table(report))
        self.console.print(f"[dim]{summary_line(report)}[/dim]")

    def format(self, report: RankedReport) -> str:
        with self.console.capture() as capture:
            self.render(report)
        return capture.get()

    def _build_table(self, report: RankedReport) -> Table:
        title = "Next to refactor"
        if report.branch:
            title += f" [dim]({escape(report.branch)})[/dim]"
        table = Table(title=title, title_justify="left", show_lines=False)
        table.add_column("#", style="dim", justify="right")
        table.add_column("commits", justify="right")
        table.add_column("file", style="bold", overflow="fold")

        top = report.entries[0].count
        for i, entry in enumerate(report.entries, 1):
            style = _count_style(entry.count, top)
            table.add_row(str(i), f"[{style}]{entry.count}[/]", escape(entry.path))
        return table
