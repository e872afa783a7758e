"""Spacing primitives: dimension parsing and unit conversion."""

from __future__ import annotations

import re
from typing import Optional, Tuple

# rem and em are resolved against the browser default font size
BASE_FONT_SIZE_PX = 16.0

_SPACING_RE = re.compile(r"^(-?[\d.]+)\s*(px|rem|em)?$", re.IGNORECASE)
_DIMENSION_RE = re.compile(r"^(-?[\d.]+)(px|rem|em)?$")


def convert_to_px(value: float, unit: str) -> float:
    """Convert a ``value`` in ``unit`` (px, rem, em) to pixels."""
    if unit.lower() in ("rem", "em"):
        return value * BASE_FONT_SIZE_PX
    return value


def parse_spacing_to_px(value: str) -> Optional[float]:
    """Parse ``"16px"``, ``"1rem"``, ``"1.5 em"`` or ``"8"`` to pixels.

    Returns None for anything else (including ``calc()``, percentages and
    malformed numbers such as ``"1.2.3"``).
    """
    match = _SPACING_RE.match(value.strip())
    if not match:
        return None
    try:
        number = float(match.group(1))
    except ValueError:
        return None
    return convert_to_px(number, match.group(2) or "px")


def parse_dimension(raw: object) -> Tuple[float, str]:
    """Split a token dimension into ``(value, unit)``.

    Numbers are taken as px. Unparseable strings fall back to ``(0, "px")``.
    """
    if isinstance(raw, bool):
        return 0.0, "px"
    if isinstance(raw, (int, float)):
        return float(raw), "px"
    if isinstance(raw, dict) and "value" in raw:
        try:
            number = float(raw["value"])
        except (TypeError, ValueError):
            return 0.0, "px"
        unit = str(raw.get("unit") or "px")
        return number, unit if unit in ("px", "rem", "em") else "px"

    match = _DIMENSION_RE.match(str(raw).strip())
    if match:
        try:
            return float(match.group(1)), match.group(2) or "px"
        except ValueError:
            pass
    return 0.0, "px"


def format_px(value: float) -> str:
    """``16.0`` -> ``"16"``, ``0.5`` -> ``"0.5"``."""
    return f"{value:g}"
