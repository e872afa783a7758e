"""Line-level drift detectors.

Each detector looks at one source line and reports ``Detection`` records with
a 0-based match index. The scanner turns detections into ``DriftSignal``
records and enforces uniqueness of ``(line, column, tag)``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Tuple

from ..primitives.color import (
    HEX_COLOR_PATTERN,
    HSL_COLOR_PATTERN,
    RGB_COLOR_PATTERN,
    contains_color,
    is_hardcoded_color,
)

COLOR_SUGGESTION = "Use a design token or CSS variable"

_TAILWIND_COLOR = re.compile(
    r"(?:text|bg|border|fill|stroke|from|via|to|accent|caret|decoration|shadow)"
    r"-\[([^\]]+)\](?:/\d+)?"
)
_TAILWIND_SPACING = re.compile(
    r"(?:p|px|py|pt|pr|pb|pl|m|mx|my|mt|mr|mb|ml|gap|gap-x|gap-y|space-x|space-y"
    r"|inset|top|right|bottom|left)-\[([\d.]+(?:px|rem|em|vh|vw|%)?)\]"
)
_TAILWIND_SIZE = re.compile(
    r"(?:w|h|min-w|max-w|min-h|max-h|size)-\[([\d.]+(?:px|rem|em|vh|vw|%)?)\]"
)

_INLINE_STYLE_JSX = re.compile(r"style\s*=\s*\{\{([^}]+)\}\}")
_INLINE_STYLE_ATTR = re.compile(r"""style\s*=\s*["']([^"']+)["']""")

# Tie-break order for signals at the same position
DETECTOR_TAGS = (
    "hex",
    "rgb",
    "hsl",
    "tw-color",
    "tw-spacing",
    "tw-size",
    "inline-jsx",
    "inline-attr",
    "inline-fragment",
)
DETECTOR_RANK: Dict[str, int] = {tag: rank for rank, tag in enumerate(DETECTOR_TAGS)}

INLINE_PREVIEW_LENGTH = 50


@dataclass(frozen=True)
class Detection:
    """A detector hit on a single line; ``index`` is 0-based."""

    tag: str
    index: int
    type: str
    severity: str
    value: str
    message: str
    suggestion: Optional[str] = None


Detector = Callable[[str], List[Detection]]


def comment_flags(lines: Iterable[str]) -> Iterator[bool]:
    """Yield, for each line, whether it is a pure comment line.

    A line is a comment when it starts with ``//`` or ``/*``, or when it sits
    inside a ``/* ... */`` block opened on an earlier comment line. A leading
    ``*`` on its own is a selector (``* { ... }``), not a comment.
    """
    in_block = False
    for line in lines:
        stripped = line.strip()
        if in_block:
            yield True
            in_block = "*/" not in stripped
        elif stripped.startswith("//"):
            yield True
        elif stripped.startswith("/*"):
            yield True
            in_block = "*/" not in stripped[2:]
        else:
            yield False


def preview(style_body: str) -> str:
    """First 50 characters of a style body, with ``...`` if truncated."""
    if len(style_body) > INLINE_PREVIEW_LENGTH:
        return style_body[:INLINE_PREVIEW_LENGTH] + "..."
    return style_body


def is_color_exempt(line: str) -> bool:
    """Custom property declarations and theme config lines may hold raw colors."""
    if "--" in line and ":" in line:
        return True
    return "theme(" in line or "colors:" in line


def detect_hardcoded_colors(line: str) -> List[Detection]:
    """Hex, rgb()/rgba() and hsl()/hsla() literals."""
    if is_color_exempt(line):
        return []

    detections: List[Detection] = []
    for match in HEX_COLOR_PATTERN.finditer(line):
        before = line[: match.start()]
        if "var(--" in before or "theme(" in before:
            continue
        detections.append(_color_detection("hex", match))
    for match in RGB_COLOR_PATTERN.finditer(line):
        detections.append(_color_detection("rgb", match))
    for match in HSL_COLOR_PATTERN.finditer(line):
        detections.append(_color_detection("hsl", match))
    return detections


def _color_detection(tag: str, match: "re.Match[str]") -> Detection:
    value = match.group(0)
    return Detection(
        tag=tag,
        index=match.start(),
        type="hardcoded-color",
        severity="warning",
        value=value,
        message=f"Hardcoded color {value}",
        suggestion=COLOR_SUGGESTION,
    )


def detect_tailwind_arbitrary(line: str) -> List[Detection]:
    """Arbitrary-value utilities such as ``bg-[#fff]``, ``p-[17px]``, ``w-[300px]``.

    Color utilities are only reported when the bracket holds a literal color;
    ``bg-[var(--x)]`` is fine.
    """
    if "[" not in line or "]" not in line:
        return []

    detections: List[Detection] = []
    for match in _TAILWIND_COLOR.finditer(line):
        if not is_hardcoded_color(match.group(1)):
            continue
        detections.append(
            Detection(
                tag="tw-color",
                index=match.start(),
                type="arbitrary-tailwind",
                severity="warning",
                value=match.group(0),
                message=f"Arbitrary Tailwind color: {match.group(0)}",
                suggestion="Use a Tailwind theme color class",
            )
        )
    for match in _TAILWIND_SPACING.finditer(line):
        detections.append(
            Detection(
                tag="tw-spacing",
                index=match.start(),
                type="arbitrary-tailwind",
                severity="info",
                value=match.group(0),
                message=f"Arbitrary Tailwind spacing: {match.group(0)}",
                suggestion="Use a Tailwind spacing class (p-4, m-2, etc.)",
            )
        )
    for match in _TAILWIND_SIZE.finditer(line):
        detections.append(
            Detection(
                tag="tw-size",
                index=match.start(),
                type="arbitrary-tailwind",
                severity="info",
                value=match.group(0),
                message=f"Arbitrary Tailwind size: {match.group(0)}",
                suggestion="Use a Tailwind size class (w-full, h-screen, etc.)",
            )
        )
    return detections


def detect_inline_styles(line: str) -> List[Detection]:
    """``style={{...}}`` objects and ``style="..."`` attributes that hold a color.

    Only colors make an inline style reportable; spacing inside an inline
    style is left to the Tailwind and dedicated spacing rules.
    """
    detections: List[Detection] = []
    for match in _INLINE_STYLE_JSX.finditer(line):
        body = match.group(1).strip()
        if contains_color(body):
            detections.append(
                Detection(
                    tag="inline-jsx",
                    index=match.start(),
                    type="inline-style",
                    severity="warning",
                    value=f"style={{{{ {preview(body)} }}}}",
                    message="Inline style with hardcoded color",
                    suggestion="Use className with design tokens instead",
                )
            )
    for match in _INLINE_STYLE_ATTR.finditer(line):
        body = match.group(1)
        if contains_color(body):
            detections.append(
                Detection(
                    tag="inline-attr",
                    index=match.start(),
                    type="inline-style",
                    severity="warning",
                    value=f'style="{preview(body)}"',
                    message="Inline style with hardcoded color",
                    suggestion="Use CSS classes with design tokens instead",
                )
            )
    return detections


def inline_fragment_detection(css: str) -> Optional[Detection]:
    """The inline-style signal for an extracted fragment, if it holds a color."""
    if not contains_color(css):
        return None
    return Detection(
        tag="inline-fragment",
        index=0,
        type="inline-style",
        severity="warning",
        value=f'style="{preview(css)}"',
        message="Inline style with hardcoded color",
        suggestion="Use CSS classes with design tokens instead",
    )


def jsx_object_detection(css: str) -> Optional[Detection]:
    """The inline-style signal for a ``style={{...}}`` object, if it holds a color.

    Shares its tag with the line detector, so an object already reported from
    a single line is not reported again.
    """
    if not contains_color(css):
        return None
    return Detection(
        tag="inline-jsx",
        index=0,
        type="inline-style",
        severity="warning",
        value=f"style={{{{ {preview(css)} }}}}",
        message="Inline style with hardcoded color",
        suggestion="Use className with design tokens instead",
    )


# Order matters: it is the tie-break for signals at one position
LINE_DETECTORS: Tuple[Detector, ...] = (
    detect_hardcoded_colors,
    detect_tailwind_arbitrary,
    detect_inline_styles,
)
