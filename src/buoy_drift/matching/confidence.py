"""Confidence scoring: how sure are we that a token can replace a raw value?

Scores are 0-100. An exact textual match (after normalization) is always
``exact``/100; everything else degrades with distance:

Colors (Euclidean RGB distance scaled to 0-100):
    d <= 5    high    98 - d
    d <= 15   medium  max(70, 90 - 2d)
    d <= 30   low     max(40, 70 - d)
    else      low     20

Spacing (pixels, rem/em at 16px):
    |diff| <= 1   high    98
    |diff| <= 2   high    95
    pct <= 10     medium  max(70, 90 - pct)
    pct <= 25     low     max(40, 70 - pct)
    else          low     20
"""

from ..models import ColorValue, ConfidenceResult, DesignToken, SpacingValue
from ..primitives.color import color_distance, normalize_color
from ..primitives.spacing import convert_to_px, format_px, parse_spacing_to_px

COLOR_FIX_TYPES = ("hardcoded-color",)
SPACING_FIX_TYPES = ("hardcoded-spacing", "hardcoded-radius", "hardcoded-font-size")


def score_color_confidence(original: str, token: DesignToken) -> ConfidenceResult:
    if not isinstance(token.value, ColorValue):
        return ConfidenceResult(level="low", score=0, reason="Token is not a color")

    normalized = normalize_color(original)
    token_hex = normalize_color(token.value.hex) or token.value.hex.lower()

    if normalized is not None and normalized == token_hex:
        return ConfidenceResult(level="exact", score=100, reason=f"Exact match to {token.name}")

    distance = color_distance(normalized or original, token_hex)

    if distance <= 5:
        # Imperceptible difference
        return ConfidenceResult(
            level="high",
            score=98 - distance,
            reason=f"Near-exact match to {token.name} (deltaE: {distance:.1f})",
        )
    if distance <= 15:
        return ConfidenceResult(
            level="medium",
            score=max(70, 90 - distance * 2),
            reason=f"Close match to {token.name} (deltaE: {distance:.1f})",
        )
    if distance <= 30:
        return ConfidenceResult(
            level="low",
            score=max(40, 70 - distance),
            reason=f"Possible match to {token.name} (deltaE: {distance:.1f})",
        )
    return ConfidenceResult(
        level="low", score=20, reason=f"Weak match to {token.name} (deltaE: {distance:.1f})"
    )


def score_spacing_confidence(original: str, token: DesignToken) -> ConfidenceResult:
    if not isinstance(token.value, SpacingValue):
        return ConfidenceResult(level="low", score=0, reason="Token is not a spacing value")

    original_px = parse_spacing_to_px(original)
    if original_px is None:
        return ConfidenceResult(level="low", score=0, reason="Could not parse original spacing")

    token_px = convert_to_px(token.value.value, token.value.unit)

    if original_px == token_px:
        return ConfidenceResult(level="exact", score=100, reason=f"Exact match to {token.name}")

    diff = abs(original_px - token_px)
    percent = diff / max(original_px, token_px, 1) * 100
    diff_text = format_px(diff)

    if diff <= 1:
        # Likely rounding
        return ConfidenceResult(
            level="high",
            score=98,
            reason=f"Near-exact match to {token.name} ({diff_text}px difference)",
        )
    if diff <= 2:
        return ConfidenceResult(
            level="high",
            score=95,
            reason=f"Close match to {token.name} ({diff_text}px difference)",
        )
    if percent <= 10:
        return ConfidenceResult(
            level="medium",
            score=max(70, 90 - percent),
            reason=f"Approximate match to {token.name} ({diff_text}px / {percent:.0f}% difference)",
        )
    if percent <= 25:
        return ConfidenceResult(
            level="low",
            score=max(40, 70 - percent),
            reason=f"Possible match to {token.name} ({diff_text}px / {percent:.0f}% difference)",
        )
    return ConfidenceResult(
        level="low", score=20, reason=f"Weak match to {token.name} ({diff_text}px difference)"
    )


def score_confidence(original: str, token: DesignToken, fix_type: str) -> ConfidenceResult:
    """Dispatch on fix type; unknown types score 0."""
    if fix_type in COLOR_FIX_TYPES:
        return score_color_confidence(original, token)
    if fix_type in SPACING_FIX_TYPES:
        return score_spacing_confidence(original, token)
    return ConfidenceResult(level="low", score=0, reason="Unknown fix type")
