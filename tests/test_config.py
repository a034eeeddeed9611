"""Tests for environment configuration."""

from pathlib import Path

import pytest

from glauncher.config import LauncherConfig, default_config_dir, default_output_log

ENV_VARS = [
    "GLAUNCHER_CONFIG_DIR",
    "GLAUNCHER_SHELL",
    "GLAUNCHER_SETTLE_DELAY",
    "GLAUNCHER_OUTPUT_LOG",
    "GLAUNCHER_LOG_LEVEL",
]


class TestFromEnv:

    def test_defaults(self, monkeypatch):
        for name in ENV_VARS:
            monkeypatch.delenv(name, raising=False)
        config = LauncherConfig.from_env()
        assert config.config_dir == default_config_dir()
        assert config.config_dir.name == "glauncher"
        assert config.shell == "sh"
        assert config.settle_delay == 0.0
        assert config.output_log == default_output_log()
        assert config.log_level == "WARNING"

    def test_overrides(self, monkeypatch, tmp_path):
        monkeypatch.setenv("GLAUNCHER_CONFIG_DIR", str(tmp_path / "conf"))
        monkeypatch.setenv("GLAUNCHER_SHELL", "/bin/bash")
        monkeypatch.setenv("GLAUNCHER_SETTLE_DELAY", "1.5")
        monkeypatch.setenv("GLAUNCHER_OUTPUT_LOG", str(tmp_path / "out.log"))
        monkeypatch.setenv("GLAUNCHER_LOG_LEVEL", "debug")
        config = LauncherConfig.from_env()
        assert config.config_dir == tmp_path / "conf"
        assert config.shell == "/bin/bash"
        assert config.settle_delay == 1.5
        assert config.output_log == tmp_path / "out.log"
        assert config.log_level == "DEBUG"

    def test_empty_output_log_disables_it(self, monkeypatch):
        monkeypatch.setenv("GLAUNCHER_OUTPUT_LOG", "")
        assert LauncherConfig.from_env().output_log is None

    def test_bad_settle_delay_falls_back(self, monkeypatch, caplog):
        monkeypatch.setenv("GLAUNCHER_SETTLE_DELAY", "soon")
        assert LauncherConfig.from_env().settle_delay == 0.0
        assert "GLAUNCHER_SETTLE_DELAY" in caplog.text

    def test_negative_settle_delay_falls_back(self, monkeypatch):
        monkeypatch.setenv("GLAUNCHER_SETTLE_DELAY", "-2")
        assert LauncherConfig.from_env().settle_delay == 0.0

    def test_direct_construction_fills_config_dir(self):
        assert isinstance(LauncherConfig().config_dir, Path)

    @pytest.mark.parametrize("raw", ["inf", "-inf", "nan", "Infinity"])
    def test_non_finite_settle_delay_falls_back(self, monkeypatch, caplog, raw):
        monkeypatch.setenv("GLAUNCHER_SETTLE_DELAY", raw)
        assert LauncherConfig.from_env().settle_delay == 0.0
        assert "GLAUNCHER_SETTLE_DELAY" in caplog.text
