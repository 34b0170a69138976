"""JSON formatter for next-refactor."""

import json

from ..models import RankedReport
from .base import BaseFormatter


class JsonFormatter(BaseFormatter):
    """Render the report as JSON."""

    def render(self, report: RankedReport) -> None:
        print(self.format(report))

    def format(self, report: RankedReport) -> str:
        return json.dumps(report.to_dict(), indent=2)
