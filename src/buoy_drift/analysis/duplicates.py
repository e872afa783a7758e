"""Duplicate component detection.

Only true duplicates are flagged: ``Button`` vs ``ButtonNew`` or
``CardLegacy``. Compound components such as ``ButtonGroup`` or
``CardHeader`` are distinct components and never grouped with their base.
"""

from __future__ import annotations

import re
from typing import List, Sequence, Set, Tuple

from ..models import Component, DriftSignal
from .signals import component_signal

SEMANTIC_COMPONENT_SUFFIXES = (
    "group", "list", "item", "items", "container", "wrapper", "provider",
    "context", "header", "footer", "body", "content", "section", "sidebar",
    "panel", "trigger", "target", "overlay", "portal", "root", "slot",
    "action", "actions", "icon", "label", "text", "title", "description",
    "separator", "divider", "small", "large", "mini", "skeleton",
    "placeholder", "loading", "error", "empty", "input", "field", "control",
    "message", "helper", "hint", "link", "menu", "submenu", "tab", "tabs",
    "cell", "row", "column", "columns", "head", "view",
)

VERSION_SUFFIXES = re.compile(
    r"(New|Old|V\d+|Legacy|Updated|Deprecated|Beta|Alpha|Experimental|Next|Previous"
    r"|Original|Backup|Copy|Clone|Alt|Alternative|Temp|Temporary|WIP|Draft)$",
    re.IGNORECASE,
)

MIN_BASE_NAME_LENGTH = 3


def extract_base_name(name: str) -> Tuple[str, bool]:
    """``(base name, has version suffix)`` for a component name."""
    lower = name.lower()
    for suffix in SEMANTIC_COMPONENT_SUFFIXES:
        if (
            lower.endswith(suffix)
            and len(lower) > len(suffix)
            and lower[-len(suffix) - 1].isalnum()
        ):
            return lower, False

    has_version_suffix = VERSION_SUFFIXES.search(name) is not None
    stripped = re.sub(r"\d+$", "", VERSION_SUFFIXES.sub("", name, count=1))
    return stripped.lower(), has_version_suffix


def detect_potential_duplicates(components: Sequence[Component]) -> List[List[Component]]:
    """Groups of components sharing a base name where at least one is versioned."""
    groups: List[List[Component]] = []
    processed: Set[str] = set()
    bases = [extract_base_name(c.name) for c in components]

    for i, component in enumerate(components):
        if component.id in processed:
            continue
        base, versioned = bases[i]
        if len(base) < MIN_BASE_NAME_LENGTH:
            continue
        similar = [
            other
            for j, other in enumerate(components)
            if other.id != component.id
            and bases[j][0] == base
            and (versioned or bases[j][1])
        ]
        if similar:
            group = [component] + similar
            processed.update(c.id for c in group)
            groups.append(group)
    return groups


def analyze_duplicates(components: Sequence[Component]) -> List[DriftSignal]:
    signals = []
    for group in detect_potential_duplicates(components):
        names = ", ".join(c.name for c in group)
        signals.append(
            component_signal(
                group[0],
                "naming-inconsistency",
                "warning",
                names,
                f"Potential duplicate components: {names}",
                "Consider consolidating these components or clarifying their distinct purposes",
            )
        )
    return signals
