"""Tests for applying fixes to files on disk."""

from buoy_drift.fixes import apply_fixes, generate_fix_diff
from buoy_drift.models import Fix


def _make_fix(file="a.css", line=2, column=10, original="#3b82f6", replacement="var(--primary)", confidence="exact"):
    return Fix(
        id=f"fix:{file}:{line}:{column}",
        signal_id="sig",
        confidence=confidence,
        confidence_score=100,
        file=file,
        line=line,
        column=column,
        original=original,
        replacement=replacement,
        reason="Exact match to primary",
        fix_type="hardcoded-color",
        token_name="primary",
    )


CSS = "a {\n  color: #3b82f6;\n  border: 1px solid #3b82f6;\n}\n"


class TestApplyFixes:
    def test_applies_and_writes(self, tmp_path):
        (tmp_path / "a.css").write_text(CSS, encoding="utf-8")
        outcome = apply_fixes([_make_fix()], root=tmp_path)

        assert outcome.applied == 1
        assert outcome.results[0].status == "applied"
        text = (tmp_path / "a.css").read_text(encoding="utf-8")
        assert "color: var(--primary);" in text
        assert "solid #3b82f6" in text

    def test_bottom_up_multiple_on_one_line(self, tmp_path):
        (tmp_path / "a.css").write_text("a { color: #fff; background: #000; }\n", encoding="utf-8")
        fixes = [
            _make_fix(line=1, column=12, original="#fff", replacement="var(--white)"),
            _make_fix(line=1, column=30, original="#000", replacement="var(--black)"),
        ]
        outcome = apply_fixes(fixes, root=tmp_path)
        assert outcome.applied == 2
        text = (tmp_path / "a.css").read_text(encoding="utf-8")
        assert text == "a { color: var(--white); background: var(--black); }\n"

    def test_column_picks_later_occurrence(self, tmp_path):
        (tmp_path / "a.css").write_text("a { color: #fff; border-color: #fff; }\n", encoding="utf-8")
        apply_fixes([_make_fix(line=1, column=32, original="#fff", replacement="var(--white)")], root=tmp_path)
        text = (tmp_path / "a.css").read_text(encoding="utf-8")
        assert text == "a { color: #fff; border-color: var(--white); }\n"

    def test_dry_run_writes_nothing(self, tmp_path):
        (tmp_path / "a.css").write_text(CSS, encoding="utf-8")
        outcome = apply_fixes([_make_fix()], dry_run=True, root=tmp_path)
        assert outcome.applied == 1
        assert (tmp_path / "a.css").read_text(encoding="utf-8") == CSS

    def test_backup(self, tmp_path):
        (tmp_path / "a.css").write_text(CSS, encoding="utf-8")
        apply_fixes([_make_fix()], backup=True, root=tmp_path)
        assert (tmp_path / "a.css.bak").read_text(encoding="utf-8") == CSS

    def test_below_threshold_skipped(self, tmp_path):
        (tmp_path / "a.css").write_text(CSS, encoding="utf-8")
        outcome = apply_fixes([_make_fix(confidence="medium")], root=tmp_path)
        assert (outcome.applied, outcome.skipped) == (0, 1)
        assert "below threshold high" in outcome.results[0].error
        assert (tmp_path / "a.css").read_text(encoding="utf-8") == CSS

    def test_failures(self, tmp_path):
        (tmp_path / "a.css").write_text(CSS, encoding="utf-8")
        fixes = [
            _make_fix(line=99),
            _make_fix(line=1, original="#abcdef"),
            _make_fix(file="missing.css"),
        ]
        outcome = apply_fixes(fixes, root=tmp_path)
        assert outcome.failed == 3
        errors = [r.error for r in outcome.results]
        assert any("out of range" in e for e in errors)
        assert any("not found on line 1" in e for e in errors)
        assert any("File not found" in e for e in errors)

    def test_empty(self, tmp_path):
        outcome = apply_fixes([], root=tmp_path)
        assert (outcome.applied, outcome.skipped, outcome.failed) == (0, 0, 0)


class TestGenerateFixDiff:
    def test_without_content(self):
        diff = generate_fix_diff(_make_fix())
        assert diff.splitlines() == [
            "--- a.css",
            "+++ a.css",
            "@@ -2,1 +2,1 @@",
            "-#3b82f6",
            "+var(--primary)",
        ]

    def test_with_content(self):
        diff = generate_fix_diff(_make_fix(), CSS)
        assert "-  color: #3b82f6;" in diff
        assert "+  color: var(--primary);" in diff
