"""Tests for harness configuration loading."""

import os

import pytest
import yaml
from pydantic import ValidationError

from patternbench.config.harness_config import HarnessConfig, load_config


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Point HOME and the working directory at an empty temp dir."""
    home = tmp_path / "home"
    project = tmp_path / "project"
    home.mkdir()
    project.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(project)
    for key in list(os.environ):
        if key.startswith("PATTERNBENCH_"):
            monkeypatch.delenv(key)
    return home, project


def _write(path, data):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.dump(data))


class TestLoadConfig:
    """Tests for load_config precedence."""

    def test_defaults(self):
        config = load_config()
        assert config.time_budget_seconds == 5.0
        assert config.output_format == "text"
        assert config.log_level == "WARNING"

    def test_project_overrides_global(self, isolated_environment):
        home, project = isolated_environment
        _write(home / ".patternbench" / "config.yaml", {"time_budget_seconds": 2, "output_format": "json"})
        _write(project / ".patternbench" / "config.yaml", {"time_budget_seconds": 3})

        config = load_config()

        assert config.time_budget_seconds == 3
        assert config.output_format == "json"

    def test_explicit_file_with_harness_section(self, tmp_path):
        path = tmp_path / "custom.yaml"
        _write(path, {"harness": {"output_format": "markdown"}, "other": {"x": 1}})

        assert load_config(str(path)).output_format == "markdown"

    def test_environment_wins(self, tmp_path, monkeypatch):
        path = tmp_path / "custom.yaml"
        _write(path, {"time_budget_seconds": 3})
        monkeypatch.setenv("PATTERNBENCH_TIME_BUDGET_SECONDS", "0.5")
        monkeypatch.setenv("PATTERNBENCH_LOG_LEVEL", "DEBUG")

        config = load_config(str(path))

        assert config.time_budget_seconds == 0.5
        assert config.log_level == "DEBUG"

    def test_environment_none_disables_budget(self, monkeypatch):
        monkeypatch.setenv("PATTERNBENCH_TIME_BUDGET_SECONDS", "none")
        assert load_config().time_budget_seconds is None

    def test_unreadable_yaml_is_skipped(self, isolated_environment):
        _, project = isolated_environment
        path = project / ".patternbench" / "config.yaml"
        path.parent.mkdir(parents=True)
        path.write_text("time_budget_seconds: [unclosed")

        assert load_config().time_budget_seconds == 5.0

    def test_invalid_value_rejected(self, monkeypatch):
        monkeypatch.setenv("PATTERNBENCH_OUTPUT_FORMAT", "html")
        with pytest.raises(ValidationError):
            load_config()


class TestHarnessConfig:
    def test_budget_must_be_positive(self):
        with pytest.raises(ValidationError):
            HarnessConfig(time_budget_seconds=0)

    def test_unknown_keys_ignored(self):
        assert HarnessConfig(unknown=True).output_format == "text"
