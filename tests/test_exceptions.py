"""Tests for the buoy-drift exception hierarchy."""

from pathlib import Path

import pytest

from buoy_drift.exceptions import (
    BaselineError,
    BuoyError,
    ConfigurationError,
    FileAccessError,
    InvalidConfigError,
    InvalidPathError,
    ScanError,
    TokenError,
    TokenParseError,
    TokenValidationError,
    UnsupportedTemplateError,
)


class TestBuoyError:
    def test_message_only(self):
        error = BuoyError("Something broke")
        assert str(error) == "Something broke"
        assert error.details == {}
        assert error.hint is None

    def test_details_are_rendered_as_strings(self):
        error = BuoyError("Bad value", details={"key": "workers", "value": 0})
        assert error.details == {"key": "workers", "value": "0"}
        assert str(error) == "Bad value (key=workers, value=0)"


class TestHierarchy:
    @pytest.mark.parametrize(
        "error,parent",
        [
            (FileAccessError(Path("a.css"), "denied"), ScanError),
            (UnsupportedTemplateError("cobol", ["react"]), ScanError),
            (BaselineError(Path(".buoy-baseline.json"), "not JSON"), ScanError),
            (TokenValidationError("brand", "bad"), TokenError),
            (TokenParseError("tokens.json", "bad"), TokenError),
            (InvalidConfigError("workers", 0, "must be positive"), ConfigurationError),
            (InvalidPathError(Path("nope"), "missing"), ConfigurationError),
        ],
    )
    def test_parents(self, error, parent):
        assert isinstance(error, parent)
        assert isinstance(error, BuoyError)

    def test_unsupported_template(self):
        error = UnsupportedTemplateError("cobol", ["react", "vue"])
        assert str(error) == "Unsupported template type: cobol (template_type=cobol, supported=react, vue)"
        assert "[templates]" in error.hint

    def test_hints(self):
        assert "buoy baseline" in BaselineError(Path("b.json"), "not JSON").hint
        assert TokenParseError("t.yaml", "unsupported").hint.startswith("Token files are JSON")
        assert InvalidPathError(Path("x"), "missing").hint is None
