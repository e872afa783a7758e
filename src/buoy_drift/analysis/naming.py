"""Naming convention consistency.

The convention is the project's own: a naming pattern is dominant when more
than 60% of components use it. Components using another pattern are flagged
only when the dominant pattern has enough members to be an established
convention (at least 3 components, or 10% of the total).
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from ..models import Component, DriftSignal
from .signals import component_signal

NAMING_PATTERNS = ("PascalCase", "camelCase", "kebab-case", "snake_case", "other")

DOMINANT_PATTERN_THRESHOLD = 0.6
OUTLIER_MIN_COUNT = 3
OUTLIER_MIN_PERCENTAGE = 0.1

_PATTERN_RULES = (
    ("PascalCase", re.compile(r"^[A-Z][a-zA-Z0-9]*$")),
    ("camelCase", re.compile(r"^[a-z][a-zA-Z0-9]*$")),
    ("kebab-case", re.compile(r"^[a-z][a-z0-9-]*$")),
    ("snake_case", re.compile(r"^[a-z][a-z0-9_]*$")),
)


@dataclass
class NamingPatternAnalysis:
    counts: Dict[str, int] = field(default_factory=lambda: {p: 0 for p in NAMING_PATTERNS})
    dominant: Optional[str] = None
    total: int = 0


def identify_naming_pattern(name: str) -> str:
    for pattern, rule in _PATTERN_RULES:
        if rule.match(name):
            return pattern
    return "other"


def outlier_threshold(total: int) -> float:
    return max(OUTLIER_MIN_COUNT, total * OUTLIER_MIN_PERCENTAGE)


def detect_naming_patterns(components: Sequence[Component]) -> NamingPatternAnalysis:
    analysis = NamingPatternAnalysis(total=len(components))
    for component in components:
        analysis.counts[identify_naming_pattern(component.name)] += 1

    best = 0
    for pattern in NAMING_PATTERNS:
        count = analysis.counts[pattern]
        if count > best and count / analysis.total > DOMINANT_PATTERN_THRESHOLD:
            analysis.dominant = pattern
            best = count
    return analysis


def check_naming_consistency(component: Component, analysis: NamingPatternAnalysis) -> Optional[DriftSignal]:
    if analysis.dominant is None:
        return None
    pattern = identify_naming_pattern(component.name)
    if pattern == analysis.dominant:
        return None
    dominant_count = analysis.counts[analysis.dominant]
    if dominant_count < outlier_threshold(analysis.total):
        return None

    percentage = round(dominant_count / analysis.total * 100)
    return component_signal(
        component,
        "naming-inconsistency",
        "info",
        component.name,
        f'Component "{component.name}" uses {pattern} but {percentage}% of components use {analysis.dominant}',
        f"Consider renaming to match project convention ({analysis.dominant})",
    )


def analyze_naming(components: Sequence[Component]) -> List[DriftSignal]:
    if not components:
        return []
    analysis = detect_naming_patterns(components)
    signals = []
    for component in components:
        signal = check_naming_consistency(component, analysis)
        if signal is not None:
            signals.append(signal)
    return signals
