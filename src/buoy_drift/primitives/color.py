"""Color primitives: recognition, normalization and distance.

All functions are pure and total. Unparseable input yields ``None`` (or the
maximum distance) rather than an exception, so callers can treat it as a
non-match.
"""

from __future__ import annotations

import math
import re
from typing import Optional, Tuple

import numpy as np

RGB = Tuple[int, int, int]

# Recognizers shared by the scanner and the extractors
HEX_COLOR_PATTERN = re.compile(r"#(?:[0-9a-fA-F]{8}|[0-9a-fA-F]{6}|[0-9a-fA-F]{3,4})\b")
RGB_COLOR_PATTERN = re.compile(r"rgba?\s*\([^)]+\)")
HSL_COLOR_PATTERN = re.compile(r"hsla?\s*\([^)]+\)")

# Bracket content of a Tailwind arbitrary value that hardcodes a color
_ARBITRARY_COLOR_PATTERNS = (
    re.compile(r"^#(?:[0-9a-fA-F]{8}|[0-9a-fA-F]{6}|[0-9a-fA-F]{3,4})$"),
    re.compile(r"^(?:rgb|rgba|hsl|hsla)\s*\(", re.IGNORECASE),
    re.compile(r"^color\s*\(", re.IGNORECASE),
)

_HEX6 = re.compile(r"^#[0-9a-f]{6}$")
_HEX3 = re.compile(r"^#[0-9a-f]{3}$")
_HEX4 = re.compile(r"^#[0-9a-f]{4}$")
_HEX8 = re.compile(r"^#[0-9a-f]{8}$")
_RGB_COMPONENTS = re.compile(r"rgba?\s*\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)")
_HSL_COMPONENTS = re.compile(
    r"hsla?\s*\(\s*(-?[\d.]+)(?:deg)?\s*[,\s]\s*([\d.]+)%\s*[,\s]\s*([\d.]+)%"
)

# Euclidean distance between black and white in RGB space
MAX_RGB_DISTANCE = 441.0

NAMED_COLORS = {
    "black": "#000000",
    "white": "#ffffff",
    "red": "#ff0000",
    "green": "#008000",
    "blue": "#0000ff",
    "yellow": "#ffff00",
    "orange": "#ffa500",
    "purple": "#800080",
    "gray": "#808080",
    "grey": "#808080",
    "silver": "#c0c0c0",
    "navy": "#000080",
    "teal": "#008080",
    "maroon": "#800000",
    "olive": "#808000",
    "lime": "#00ff00",
    "aqua": "#00ffff",
    "cyan": "#00ffff",
    "fuchsia": "#ff00ff",
    "magenta": "#ff00ff",
    "pink": "#ffc0cb",
}

# Identifiers that are valid CSS color values on their own
CSS_COLOR_KEYWORDS = frozenset(
    set(NAMED_COLORS) | {"transparent", "currentcolor", "inherit", "initial", "unset"}
)


def contains_color(text: str) -> bool:
    """True if ``text`` contains a hex, rgb() or hsl() color literal."""
    return bool(
        HEX_COLOR_PATTERN.search(text)
        or RGB_COLOR_PATTERN.search(text)
        or HSL_COLOR_PATTERN.search(text)
    )


def is_hardcoded_color(value: str) -> bool:
    """True if an arbitrary-value body is a literal color (``var(...)`` is not)."""
    stripped = value.strip()
    return any(p.match(stripped) for p in _ARBITRARY_COLOR_PATTERNS)


def _to_hex(r: float, g: float, b: float) -> str:
    parts = (max(0, min(255, int(round(c)))) for c in (r, g, b))
    return "#" + "".join(f"{c:02x}" for c in parts)


def hsl_to_rgb(h: float, s: float, l: float) -> RGB:
    """Convert HSL (degrees, percent, percent) to an RGB triple."""
    h = (h % 360) / 360.0
    s = max(0.0, min(100.0, s)) / 100.0
    l = max(0.0, min(100.0, l)) / 100.0
    if s == 0:
        v = int(round(l * 255))
        return (v, v, v)

    def channel(t: float) -> float:
        t %= 1.0
        if t < 1 / 6:
            return p + (q - p) * 6 * t
        if t < 1 / 2:
            return q
        if t < 2 / 3:
            return p + (q - p) * (2 / 3 - t) * 6
        return p

    q = l * (1 + s) if l < 0.5 else l + s - l * s
    p = 2 * l - q
    return (
        int(round(channel(h + 1 / 3) * 255)),
        int(round(channel(h) * 255)),
        int(round(channel(h - 1 / 3) * 255)),
    )


def normalize_color(color: str) -> Optional[str]:
    """Normalize a color literal to lowercase ``#rrggbb``.

    Expands ``#rgb``/``#rgba``, drops the alpha channel of ``#rrggbbaa`` and
    converts ``rgb()``/``rgba()``/``hsl()`` and a handful of named colors.
    Returns None when the input is not a recognizable color.
    """
    trimmed = color.strip().lower()

    if _HEX6.match(trimmed):
        return trimmed
    if _HEX3.match(trimmed) or _HEX4.match(trimmed):
        return "#" + "".join(ch * 2 for ch in trimmed[1:4])
    if _HEX8.match(trimmed):
        return trimmed[:7]

    rgb_match = _RGB_COMPONENTS.search(trimmed)
    if rgb_match:
        return _to_hex(*(int(g) for g in rgb_match.groups()))

    hsl_match = _HSL_COMPONENTS.search(trimmed)
    if hsl_match:
        h, s, l = (float(g) for g in hsl_match.groups())
        return _to_hex(*hsl_to_rgb(h, s, l))

    return NAMED_COLORS.get(trimmed)


def hex_to_rgb(hex_color: str) -> Optional[RGB]:
    """Parse ``#rrggbb`` (or anything normalize_color accepts) to an RGB triple."""
    normalized = normalize_color(hex_color)
    if normalized is None:
        return None
    return (
        int(normalized[1:3], 16),
        int(normalized[3:5], 16),
        int(normalized[5:7], 16),
    )


def color_distance(color_a: str, color_b: str) -> float:
    """Euclidean RGB distance scaled to 0-100.

    0 means identical, 100 means black vs white. Unparseable input is
    treated as maximally distant.
    """
    rgb_a = hex_to_rgb(color_a)
    rgb_b = hex_to_rgb(color_b)
    if rgb_a is None or rgb_b is None:
        return 100.0

    distance = float(np.linalg.norm(np.subtract(rgb_a, rgb_b, dtype=float)))
    return distance / MAX_RGB_DISTANCE * 100


def color_similarity(color_a: str, color_b: str) -> float:
    """Similarity in [0, 1]: 1.0 for identical colors."""
    return max(0.0, 1.0 - color_distance(color_a, color_b) / 100)


def relative_luminance(rgb: RGB) -> float:
    """WCAG 2.x relative luminance of an sRGB color."""
    channels = np.asarray(rgb, dtype=float) / 255.0
    linear = np.where(
        channels <= 0.03928, channels / 12.92, ((channels + 0.055) / 1.055) ** 2.4
    )
    return float(np.dot(linear, [0.2126, 0.7152, 0.0722]))


def contrast_ratio(foreground: str, background: str) -> Optional[float]:
    """WCAG contrast ratio between two colors, or None if either is unparseable."""
    fg = hex_to_rgb(foreground)
    bg = hex_to_rgb(background)
    if fg is None or bg is None:
        return None

    l1 = relative_luminance(fg)
    l2 = relative_luminance(bg)
    lighter, darker = max(l1, l2), min(l1, l2)
    ratio = (lighter + 0.05) / (darker + 0.05)
    # 3 decimal places, half up
    return math.floor(ratio * 1000 + 0.5) / 1000
