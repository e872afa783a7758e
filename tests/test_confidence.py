"""Tests for confidence scoring of value-to-token matches."""

import pytest

from buoy_drift.matching.confidence import (
    score_color_confidence,
    score_confidence,
    score_spacing_confidence,
)
from buoy_drift.models import ColorValue, DesignToken, SpacingValue, TokenSource, get_confidence_level


def _make_color(hex_value="#3b82f6", name="primary"):
    return DesignToken(
        id=f"css:tokens.css:{name}",
        name=name,
        category="color",
        value=ColorValue(hex=hex_value),
        source=TokenSource(type="css", path="tokens.css"),
    )


def _make_spacing(value=16, unit="px", name="space-4"):
    return DesignToken(
        id=f"css:tokens.css:{name}",
        name=name,
        category="spacing",
        value=SpacingValue(value=value, unit=unit),
        source=TokenSource(type="css", path="tokens.css"),
    )


class TestColorConfidence:
    def test_exact_after_normalization(self):
        result = score_color_confidence("#3B82F6", _make_color())
        assert (result.level, result.score) == ("exact", 100)
        assert result.reason == "Exact match to primary"

    def test_short_hex_exact(self):
        result = score_color_confidence("#fff", _make_color("#ffffff", "white"))
        assert result.level == "exact"

    def test_rgb_exact(self):
        result = score_color_confidence("rgb(59, 130, 246)", _make_color())
        assert result.level == "exact"

    def test_near_exact(self):
        result = score_color_confidence("#3b82f7", _make_color())
        assert result.level == "high"
        assert result.score == pytest.approx(98 - 100 / 441, abs=0.01)
        assert "deltaE: 0.2" in result.reason

    def test_close(self):
        result = score_color_confidence("#3ba0f6", _make_color())
        assert result.level == "medium"
        assert result.score == pytest.approx(90 - 2 * 3000 / 441, abs=0.01)

    def test_possible(self):
        result = score_color_confidence("#3bdaf6", _make_color())
        assert result.level == "low"
        assert result.score == pytest.approx(70 - 8800 / 441, abs=0.01)

    def test_weak(self):
        result = score_color_confidence("#000000", _make_color("#ffffff", "white"))
        assert (result.level, result.score) == ("low", 20)

    def test_non_color_token(self):
        result = score_color_confidence("#fff", _make_spacing())
        assert (result.level, result.score) == ("low", 0)


class TestSpacingConfidence:
    def test_exact(self):
        assert score_spacing_confidence("16px", _make_spacing()).level == "exact"
        assert score_spacing_confidence("1rem", _make_spacing()).level == "exact"
        assert score_spacing_confidence("16px", _make_spacing(1, "rem")).level == "exact"

    def test_within_one_pixel(self):
        result = score_spacing_confidence("15px", _make_spacing())
        assert (result.level, result.score) == ("high", 98)
        assert result.reason == "Near-exact match to space-4 (1px difference)"

    def test_within_two_pixels(self):
        result = score_spacing_confidence("18px", _make_spacing(20))
        assert (result.level, result.score) == ("high", 95)

    def test_percentage_bands(self):
        medium = score_spacing_confidence("45px", _make_spacing(48))
        assert medium.level == "medium"
        assert medium.score == pytest.approx(90 - 6.25)

        low = score_spacing_confidence("12px", _make_spacing(16))
        assert low.level == "low"
        assert low.score == pytest.approx(45)

        weak = score_spacing_confidence("8px", _make_spacing(16))
        assert (weak.level, weak.score) == ("low", 20)

    def test_unparseable(self):
        result = score_spacing_confidence("auto", _make_spacing())
        assert (result.level, result.score) == ("low", 0)
        assert score_spacing_confidence("8px", _make_color()).score == 0


class TestDispatch:
    def test_by_fix_type(self):
        assert score_confidence("#3b82f6", _make_color(), "hardcoded-color").level == "exact"
        assert score_confidence("16px", _make_spacing(), "hardcoded-radius").level == "exact"
        assert score_confidence("16px", _make_spacing(), "hardcoded-font-size").level == "exact"

    def test_unknown_fix_type(self):
        result = score_confidence("#fff", _make_color(), "magic-number")
        assert (result.level, result.score) == ("low", 0)


class TestConfidenceLevel:
    @pytest.mark.parametrize(
        "score,level",
        [(100, "exact"), (99.9, "high"), (95, "high"), (94.9, "medium"), (70, "medium"), (69, "low")],
    )
    def test_tiers(self, score, level):
        assert get_confidence_level(score) == level
