"""The result of one drift run, as handed to the output formatters."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .drift import SEVERITIES, DriftSignal
from .fix import Fix


@dataclass
class DriftReport:
    """Signals of one run plus what a formatter needs to summarize them.

    ``baselined`` counts signals hidden by the baseline; ``fixed`` holds
    signals of a previous run that no longer occur.
    """

    signals: List[DriftSignal] = field(default_factory=list)
    root: str = "."
    files_scanned: int = 0
    errors: List[Dict[str, str]] = field(default_factory=list)
    fixes: List[Fix] = field(default_factory=list)
    baselined: int = 0
    fixed: Optional[List[DriftSignal]] = None

    def counts_by_severity(self) -> Dict[str, int]:
        counts = {severity: 0 for severity in SEVERITIES}
        for signal in self.signals:
            counts[signal.severity] += 1
        return counts

    def counts_by_type(self) -> Dict[str, int]:
        counts: Dict[str, int] = {}
        for signal in self.signals:
            counts[signal.type] = counts.get(signal.type, 0) + 1
        return dict(sorted(counts.items()))
