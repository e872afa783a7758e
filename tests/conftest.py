"""Shared test fixtures for buoy-drift tests."""

import json

import pytest

from buoy_drift.models import ColorValue, DesignToken, DriftSignal, SpacingValue, TokenSource


def pytest_addoption(parser):
    """Add --run-slow option for slow tests."""
    parser.addoption(
        "--run-slow",
        action="store_true",
        default=False,
        help="run slow tests",
    )


def pytest_configure(config):
    """Configure slow marker."""
    config.addinivalue_line("markers", "slow: mark test as slow to run")


def pytest_collection_modifyitems(config, items):
    """Skip slow tests unless --run-slow is given."""
    if config.getoption("--run-slow"):
        return
    skip_slow = pytest.mark.skip(reason="need --run-slow option to run")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


def make_signal(
    type="hardcoded-color",
    severity="warning",
    file="src/Button.tsx",
    line=1,
    value="#3b82f6",
    message="Hardcoded color #3b82f6",
    column=None,
    **kwargs,
):
    return DriftSignal(
        type=type,
        severity=severity,
        file=file,
        line=line,
        value=value,
        message=message,
        column=column,
        **kwargs,
    )


def make_color_token(name, hex_value):
    return DesignToken(
        id=f"json:tokens.json:{name}",
        name=name,
        category="color",
        value=ColorValue(hex=hex_value),
        source=TokenSource(type="json", path="tokens.json", key=name),
    )


def make_spacing_token(name, value, unit="px", category="spacing"):
    return DesignToken(
        id=f"json:tokens.json:{name}",
        name=name,
        category=category,
        value=SpacingValue(value=value, unit=unit),
        source=TokenSource(type="json", path="tokens.json", key=name),
    )


@pytest.fixture
def palette():
    """A small color palette plus a spacing scale."""
    return [
        make_color_token("primary", "#3b82f6"),
        make_color_token("danger", "#ef4444"),
        make_color_token("white", "#ffffff"),
        make_spacing_token("space-2", 8),
        make_spacing_token("space-4", 16),
    ]


@pytest.fixture
def project(tmp_path):
    """A tiny front-end project with drift in JSX, markup and CSS."""
    src = tmp_path / "src"
    src.mkdir()
    (src / "Button.tsx").write_text(
        "export function Button() {\n"
        "  return <button style={{ color: '#3b82f6' }}>Go</button>;\n"
        "}\n",
        encoding="utf-8",
    )
    (src / "card.css").write_text(
        ".card {\n  background: #ffffff;\n  padding: 16px;\n}\n",
        encoding="utf-8",
    )
    (src / "notes.txt").write_text("color: #123456\n", encoding="utf-8")
    return tmp_path


@pytest.fixture
def token_file(tmp_path):
    """A DTCG token file matching the colors used by ``project``."""
    path = tmp_path / "tokens.json"
    path.write_text(
        json.dumps(
            {
                "color": {
                    "$type": "color",
                    "primary": {"$value": "#3b82f6"},
                    "white": {"$value": "#ffffff"},
                },
                "space": {"$type": "dimension", "md": {"$value": "16px"}},
            }
        ),
        encoding="utf-8",
    )
    return path
