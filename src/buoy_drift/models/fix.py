"""Fix suggestion models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional

ConfidenceLevel = Literal["exact", "high", "medium", "low"]
FixType = Literal["hardcoded-color", "hardcoded-spacing", "hardcoded-radius", "hardcoded-font-size"]
FixStatus = Literal["applied", "skipped", "failed"]

# Best first
CONFIDENCE_LEVELS = ("exact", "high", "medium", "low")

# Higher = more confident
CONFIDENCE_RANK = {"low": 0, "medium": 1, "high": 2, "exact": 3}

SUPPORTED_FIX_TYPES = (
    "hardcoded-color",
    "hardcoded-spacing",
    "hardcoded-radius",
    "hardcoded-font-size",
)


@dataclass(frozen=True)
class ConfidenceResult:
    """Outcome of matching one raw value against one token."""

    level: ConfidenceLevel
    score: float
    reason: str


@dataclass(frozen=True)
class Fix:
    """A proposed replacement of a hardcoded value with a design token."""

    id: str
    signal_id: str
    confidence: ConfidenceLevel
    confidence_score: float
    file: str
    line: int
    column: int
    original: str
    replacement: str
    reason: str
    fix_type: FixType
    token_name: Optional[str] = None


@dataclass(frozen=True)
class FixResult:
    """Outcome of applying a single fix to disk."""

    fix_id: str
    status: FixStatus
    error: Optional[str] = None


def create_fix_id(file: str, line: int, column: int) -> str:
    return f"fix:{file}:{line}:{column}"


def get_confidence_level(score: float) -> ConfidenceLevel:
    """Map a 0-100 score to its confidence tier."""
    if score >= 100:
        return "exact"
    if score >= 95:
        return "high"
    if score >= 70:
        return "medium"
    return "low"


def meets_confidence_threshold(level: str, minimum: str) -> bool:
    """True if ``level`` is at least as confident as ``minimum``."""
    return CONFIDENCE_RANK[level] >= CONFIDENCE_RANK[minimum]
