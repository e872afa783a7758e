"""Drift signal and style fragment models.

A ``StyleFragment`` is a located blob of CSS-like text pulled out of a
source file by an extractor. A ``DriftSignal`` is one detected instance of
hardcoded or drifted styling. Signals are plain records: they are created by
the scanner (or an analyzer) and never updated in place. Attaching an author
after a blame lookup produces a new record via ``with_author``.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Literal, Optional

FragmentContext = Literal["inline", "style-block"]
Severity = Literal["critical", "warning", "info"]

# Closed set of drift types. The first seven come from the style scanner and
# the fix generator; the rest are emitted by the component analyzers.
DRIFT_TYPES = frozenset(
    {
        "hardcoded-color",
        "hardcoded-spacing",
        "hardcoded-radius",
        "hardcoded-font-size",
        "arbitrary-tailwind",
        "inline-style",
        "magic-number",
        "hardcoded-value",
        "deprecated-pattern",
        "accessibility-conflict",
        "semantic-mismatch",
        "orphaned-component",
        "orphaned-token",
        "value-divergence",
        "naming-inconsistency",
        "missing-documentation",
        "framework-sprawl",
        "unused-component",
        "unused-token",
        "color-contrast",
    }
)

SEVERITIES = ("critical", "warning", "info")

# Lower rank = more severe
SEVERITY_RANK = {"critical": 0, "warning": 1, "info": 2}


def severity_at_least(severity: str, threshold: str) -> bool:
    """Return True if ``severity`` is as severe as ``threshold`` or worse."""
    return SEVERITY_RANK[severity] <= SEVERITY_RANK[threshold]


def _utcnow() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass(frozen=True)
class StyleFragment:
    """CSS declarations found in a source file.

    ``line`` and ``column`` are 1-based and always refer to the original
    file text, never to a masked copy of it.
    """

    css: str
    line: int
    column: int
    context: FragmentContext = "inline"


@dataclass(frozen=True)
class DriftSignal:
    """One detected instance of design drift."""

    type: str
    severity: Severity
    file: str
    line: int
    value: str
    message: str
    column: Optional[int] = None
    suggestion: Optional[str] = None
    component_name: Optional[str] = None
    author: Optional[str] = None
    detected_at: str = field(default_factory=_utcnow, compare=False)

    def __post_init__(self) -> None:
        if self.type not in DRIFT_TYPES:
            raise ValueError(f"Unknown drift type: {self.type!r}")
        if self.severity not in SEVERITY_RANK:
            raise ValueError(f"Unknown severity: {self.severity!r}")
        if self.line < 1:
            raise ValueError("line must be at least 1")

    def with_author(self, author: Optional[str]) -> DriftSignal:
        """Return a copy of this signal attributed to ``author``."""
        return replace(self, author=author, detected_at=self.detected_at)

    @property
    def location(self) -> str:
        if self.column is not None:
            return f"{self.file}:{self.line}:{self.column}"
        return f"{self.file}:{self.line}"
