"""JSON formatter for buoy-drift."""

import json
from dataclasses import asdict

from ..baseline import get_signal_signature
from ..models import DriftReport
from .base import BaseFormatter


class JsonFormatter(BaseFormatter):
    """Render the report as JSON. Each signal carries its baseline signature."""

    def render(self, report: DriftReport) -> None:
        print(self.format(report))

    def format(self, report: DriftReport) -> str:
        data = {
            "root": report.root,
            "files_scanned": report.files_scanned,
            "summary": {
                "total": len(report.signals),
                "by_severity": report.counts_by_severity(),
                "by_type": report.counts_by_type(),
                "baselined": report.baselined,
            },
            "signals": [
                dict(asdict(s), signature=get_signal_signature(s)) for s in report.signals
            ],
            "fixes": [asdict(f) for f in report.fixes],
            "errors": report.errors,
        }
        return json.dumps(data, indent=2)
