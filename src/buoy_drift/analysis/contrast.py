"""Accessibility checks: interactive components and WCAG color contrast."""

from __future__ import annotations

from typing import Dict, List, Sequence

from ..models import Component, DriftSignal, HardcodedValue
from ..primitives.color import contrast_ratio
from .signals import component_signal

WCAG_AA_NORMAL_TEXT = 4.5
WCAG_AA_LARGE_TEXT = 3.0
WCAG_AAA_NORMAL_TEXT = 7.0

INTERACTIVE_COMPONENTS = ("button", "link", "input", "select", "checkbox", "radio")

_BACKGROUND_PROPERTIES = ("background-color", "backgroundcolor", "background")


def is_interactive_component(name: str) -> bool:
    lower = name.lower()
    return any(kind in lower for kind in INTERACTIVE_COMPONENTS)


def check_accessibility(component: Component) -> List[str]:
    """Reported accessibility issues of an interactive component with no accessible name.

    A component has an accessible name when it takes an aria-label or
    children prop.
    """
    if not is_interactive_component(component.name):
        return []
    prop_names = [p.name.lower() for p in component.props]
    if any("arialabel" in p or "aria-label" in p for p in prop_names):
        return []
    if "children" in prop_names:
        return []
    accessibility = component.metadata.accessibility
    return list(accessibility.issues) if accessibility else []


def _colors_by_property(values: Sequence[HardcodedValue]) -> Dict[str, List[HardcodedValue]]:
    grouped: Dict[str, List[HardcodedValue]] = {}
    for value in values:
        if value.type == "color":
            grouped.setdefault(value.property.lower(), []).append(value)
    return grouped


def check_color_contrast(component: Component) -> List[DriftSignal]:
    """Foreground/background pairs below the WCAG AA ratio for normal text."""
    grouped = _colors_by_property(component.metadata.hardcoded_values)
    foreground = grouped.get("color", [])
    background: List[HardcodedValue] = []
    for prop in _BACKGROUND_PROPERTIES:
        if prop in grouped:
            background = grouped[prop]
            break

    signals = []
    for fg in foreground:
        for bg in background:
            ratio = contrast_ratio(fg.value, bg.value)
            if ratio is None or ratio >= WCAG_AA_NORMAL_TEXT:
                continue
            level = "WCAG AA and AAA" if ratio < WCAG_AA_LARGE_TEXT else "WCAG AAA"
            signals.append(
                component_signal(
                    component,
                    "color-contrast",
                    "critical",
                    f"{fg.value} on {bg.value}",
                    f'Component "{component.name}" has insufficient color contrast: '
                    f"{fg.value} on {bg.value} (ratio: {ratio:.2f}:1)",
                    f"Fails {level} - adjust colors to meet minimum {WCAG_AA_NORMAL_TEXT}:1 ratio",
                )
            )
    return signals


def analyze_accessibility(components: Sequence[Component]) -> List[DriftSignal]:
    signals = []
    for component in components:
        for issue in check_accessibility(component):
            signals.append(
                component_signal(
                    component,
                    "accessibility-conflict",
                    "critical",
                    issue,
                    f'Component "{component.name}" has accessibility issues: {issue}',
                    "Fix accessibility issue to ensure inclusive design",
                )
            )
        signals.extend(check_color_contrast(component))
    return signals
