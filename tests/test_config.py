"""Tests for configuration loading and merging."""

import pytest

from buoy_drift.config import DriftConfig, FixConfig, load_config
from buoy_drift.exceptions import ConfigurationError, InvalidConfigError


@pytest.fixture
def workspace(tmp_path, monkeypatch):
    """An empty project directory with an empty home, and no BUOY_* variables."""
    home = tmp_path / "home"
    home.mkdir()
    project = tmp_path / "project"
    project.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(project)
    for key in ("BUOY_FAIL_ON", "BUOY_WORKERS", "BUOY_MAX_FILES", "BUOY_OUTPUT_FORMAT", "BUOY_VERBOSITY"):
        monkeypatch.delenv(key, raising=False)
    return home, project


class TestDefaults:
    def test_defaults(self, workspace):
        config = load_config()
        assert config.fail_on == "warning"
        assert config.output_format == "rich"
        assert config.baseline_file == ".buoy-baseline.json"
        assert config.workers is None
        assert "node_modules/*" in config.exclude_patterns
        assert config.fix == FixConfig()
        assert config.fix.apply_min_confidence == "high"

    def test_max_file_size_bytes(self):
        assert DriftConfig(max_file_size_mb=1.5).max_file_size_bytes == 1572864

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"workers": 0},
            {"max_files": 0},
            {"max_file_size_mb": 0},
            {"fail_on": "sometimes"},
            {"output_format": "xml"},
            {"template_overrides": {"js": "react"}},
        ],
    )
    def test_validation(self, kwargs):
        with pytest.raises(ValueError):
            DriftConfig(**kwargs)

    def test_fix_validation(self):
        with pytest.raises(ValueError):
            FixConfig(min_confidence="certain")
        with pytest.raises(ValueError):
            FixConfig(types=["hardcoded-shadow"])


class TestFiles:
    def test_project_file(self, workspace):
        _, project = workspace
        (project / "buoy-drift.toml").write_text(
            'fail_on = "critical"\n'
            "workers = 2\n"
            'token_files = ["tokens.json"]\n'
            "\n"
            "[fix]\n"
            'min_confidence = "high"\n'
            "backup = true\n"
            "\n"
            "[templates]\n"
            '".js" = "react"\n',
            encoding="utf-8",
        )
        config = load_config()
        assert config.fail_on == "critical"
        assert config.workers == 2
        assert config.token_files == ["tokens.json"]
        assert config.fix.min_confidence == "high"
        assert config.fix.backup is True
        assert config.template_overrides == {".js": "react"}

    def test_project_overrides_global(self, workspace):
        home, project = workspace
        (home / ".buoy-drift.toml").write_text(
            'fail_on = "info"\nmax_files = 50\n\n[fix]\nbackup = true\n', encoding="utf-8"
        )
        (project / "buoy-drift.toml").write_text(
            'fail_on = "critical"\n\n[fix]\nmin_confidence = "medium"\n', encoding="utf-8"
        )
        config = load_config()
        assert config.fail_on == "critical"
        assert config.max_files == 50
        assert config.fix.backup is True
        assert config.fix.min_confidence == "medium"

    def test_explicit_file(self, workspace, tmp_path):
        path = tmp_path / "ci.toml"
        path.write_text('output_format = "github"\n', encoding="utf-8")
        assert load_config(path).output_format == "github"

    def test_missing_explicit_file(self, workspace, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            load_config(tmp_path / "nope.toml")

    def test_unknown_key(self, workspace):
        _, project = workspace
        (project / "buoy-drift.toml").write_text("colour = 1\n", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            load_config()

    def test_invalid_value(self, workspace):
        _, project = workspace
        (project / "buoy-drift.toml").write_text('fail_on = "sometimes"\n', encoding="utf-8")
        with pytest.raises(InvalidConfigError):
            load_config()

    def test_invalid_fix_table(self, workspace):
        _, project = workspace
        (project / "buoy-drift.toml").write_text('[fix]\ntypes = ["magic"]\n', encoding="utf-8")
        with pytest.raises(InvalidConfigError):
            load_config()

    def test_malformed_toml(self, workspace):
        _, project = workspace
        (project / "buoy-drift.toml").write_text("fail_on = \n", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="Invalid config"):
            load_config()


class TestEnvironmentAndOverrides:
    def test_env_beats_files(self, workspace, monkeypatch):
        _, project = workspace
        (project / "buoy-drift.toml").write_text('fail_on = "critical"\n', encoding="utf-8")
        monkeypatch.setenv("BUOY_FAIL_ON", "info")
        monkeypatch.setenv("BUOY_WORKERS", "3")
        config = load_config()
        assert config.fail_on == "info"
        assert config.workers == 3

    def test_bad_env_value(self, workspace, monkeypatch):
        monkeypatch.setenv("BUOY_MAX_FILES", "lots")
        with pytest.raises(InvalidConfigError):
            load_config()

    def test_overrides_beat_env(self, workspace, monkeypatch):
        monkeypatch.setenv("BUOY_FAIL_ON", "info")
        config = load_config(fail_on="none", output_format=None)
        assert config.fail_on == "none"
        assert config.output_format == "rich"

    def test_verbosity_flags(self, workspace):
        assert load_config(verbose=True).verbosity == "verbose"
        assert load_config(quiet=True).verbosity == "quiet"
        assert load_config(verbose=False, quiet=False).verbosity == "normal"

    def test_fix_overrides(self, workspace):
        _, project = workspace
        (project / "buoy-drift.toml").write_text("[fix]\nbackup = true\n", encoding="utf-8")
        config = load_config(fix={"min_confidence": "exact", "backup": None})
        assert config.fix.min_confidence == "exact"
        assert config.fix.backup is True
