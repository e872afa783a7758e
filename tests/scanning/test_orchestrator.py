"""Tests for ProjectScanner: multi-file scanning and error isolation."""

import pytest

from buoy_drift.config import DriftConfig
from buoy_drift.exceptions import InvalidPathError
from buoy_drift.scanning.orchestrator import ProjectScanner


class TestProjectScanner:
    def test_scan_project(self, project):
        result = ProjectScanner().scan(project)
        assert result.files_scanned == 2
        assert result.errors == []
        files = {s.file for s in result.signals}
        assert files == {"src/Button.tsx", "src/card.css"}

    def test_signals_sorted_by_file_and_position(self, project):
        result = ProjectScanner().scan(project)
        keys = [(s.file, s.line, s.column or 0) for s in result.signals]
        assert keys == sorted(keys)

    def test_paths_relative_to_root_in_posix_form(self, project):
        result = ProjectScanner().scan(project / "src")
        assert {s.file for s in result.signals} == {"Button.tsx", "card.css"}

    def test_single_file_root(self, project):
        result = ProjectScanner().scan(project / "src" / "card.css")
        assert result.files_scanned == 1
        assert [s.file for s in result.signals] == ["card.css"]

    def test_template_override(self, tmp_path):
        (tmp_path / "App.js").write_text("const c = '#abcdef';\n", encoding="utf-8")
        assert ProjectScanner().scan(tmp_path).files_scanned == 0

        config = DriftConfig(template_overrides={".js": "react"})
        result = ProjectScanner(config).scan(tmp_path)
        assert [s.value for s in result.signals] == ["#abcdef"]

    def test_unreadable_file_becomes_error(self, project, monkeypatch):
        scanner = ProjectScanner()
        original = scanner.scan_path

        def flaky(path, root):
            if path.name == "card.css":
                raise OSError("permission denied")
            return original(path, root)

        monkeypatch.setattr(scanner, "scan_path", flaky)
        result = scanner.scan(project)
        assert result.files_scanned == 1
        assert result.files_failed == 1
        assert result.errors[0].file == "src/card.css"
        assert "permission denied" in result.errors[0].error

    def test_parallel_matches_sequential(self, tmp_path):
        for i in range(15):
            (tmp_path / f"c{i:02d}.css").write_text(
                f".c{i} {{\n  color: #0000{i:02d};\n}}\n", encoding="utf-8"
            )
        sequential = ProjectScanner(DriftConfig(workers=1)).scan(tmp_path)
        parallel = ProjectScanner(DriftConfig(workers=4)).scan(tmp_path)
        assert sequential.files_scanned == parallel.files_scanned == 15
        assert [(s.file, s.line, s.value) for s in sequential.signals] == [
            (s.file, s.line, s.value) for s in parallel.signals
        ]

    def test_missing_root(self, tmp_path):
        with pytest.raises(InvalidPathError):
            ProjectScanner().scan(tmp_path / "nope")
