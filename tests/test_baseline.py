"""Tests for signal signatures, baseline persistence and run diffs."""

import json
import tempfile

import pytest

from buoy_drift.baseline import (
    diff_signals,
    filter_against_baseline,
    get_signal_signature,
    load_baseline,
    load_baseline_entries,
    save_baseline,
    signature_of,
)
from buoy_drift.exceptions import BaselineError
from buoy_drift.models import DriftSignal


def _make_signal(file="src/Button.tsx", line=3, value="#3b82f6", component_name=None):
    return DriftSignal(
        type="hardcoded-color",
        severity="warning",
        file=file,
        line=line,
        value=value,
        message=f"Hardcoded color {value}",
        component_name=component_name,
    )


class TestSignature:
    def test_sixteen_characters(self):
        assert len(get_signal_signature(_make_signal())) == 16

    def test_ignores_line_and_message(self):
        a = _make_signal(line=3)
        b = _make_signal(line=40)
        assert get_signal_signature(a) == get_signal_signature(b)

    def test_depends_on_value_and_component(self):
        base = get_signal_signature(_make_signal())
        assert get_signal_signature(_make_signal(value="#fff")) != base
        assert get_signal_signature(_make_signal(component_name="Button")) != base

    def test_empty_parts_skipped(self):
        assert signature_of("a", None, "b") == signature_of("a", "", "b")
        assert signature_of("a", None, "b") == signature_of("a", "b")


class TestFilterAgainstBaseline:
    def test_removes_known_signals(self):
        known = _make_signal()
        new = _make_signal(value="#ef4444")
        remaining = filter_against_baseline([known, new], {get_signal_signature(known)})
        assert remaining == [new]

    def test_empty_baseline_keeps_everything(self):
        signals = [_make_signal(), _make_signal(value="#000")]
        assert filter_against_baseline(signals, []) == signals


class TestSaveAndLoadBaseline:
    def test_roundtrip(self, tmp_path):
        path = tmp_path / "nested" / ".buoy-baseline.json"
        signals = [_make_signal(), _make_signal(line=9), _make_signal(file="b.css")]
        count = save_baseline(signals, str(path))

        assert count == 2
        loaded = load_baseline(str(path))
        assert loaded == {get_signal_signature(s) for s in signals}

    def test_file_contents(self, tmp_path):
        path = tmp_path / "baseline.json"
        save_baseline([_make_signal()], str(path))
        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["version"] == 1
        assert data["entries"][0]["file"] == "src/Button.tsx"
        assert data["entries"][0]["value"] == "#3b82f6"
        assert load_baseline_entries(str(path)) == data["entries"]

    def test_plain_list_form(self):
        with tempfile.NamedTemporaryFile("w", suffix=".json", delete=False) as f:
            json.dump(["abc", "def"], f)
            path = f.name
        assert load_baseline(path) == {"abc", "def"}
        assert load_baseline_entries(path) == []

    def test_load_missing_file(self):
        assert load_baseline("/nonexistent/path.json") == set()
        assert load_baseline_entries("/nonexistent/path.json") == []

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(BaselineError):
            load_baseline(str(path))

    def test_wrong_shape(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"signatures": [1, 2]}), encoding="utf-8")
        with pytest.raises(BaselineError):
            load_baseline(str(path))


class TestDiffSignals:
    def test_new_unchanged_fixed(self):
        kept = _make_signal()
        gone = _make_signal(value="#111111")
        added = _make_signal(value="#222222")
        previous = [get_signal_signature(kept), get_signal_signature(gone)]

        diff = diff_signals([kept, added], previous)

        assert diff.new == [added]
        assert diff.unchanged == [kept]
        assert diff.fixed == [get_signal_signature(gone)]
