"""
Tests for Phosphor configuration loading.
"""

import json

import pytest

from phosphor import config as config_module
from phosphor.config import PhosphorConfig, get_config, set_config


@pytest.fixture(autouse=True)
def reset_global_config():
    set_config(None)
    yield
    set_config(None)


class TestDefaults:

    def test_defaults(self):
        config = PhosphorConfig()
        assert config.grid.columns == 64
        assert config.grid.rows == 20
        assert config.demo.fps == 20.0
        assert config.demo.color is True
        assert config.debug is False
        assert config.log_level == "INFO"

    def test_to_dict(self):
        data = PhosphorConfig().to_dict()
        assert data["grid"]["width"] == 24.0
        assert data["demo"]["seed"] == 7
        assert data["log_level"] == "INFO"


class TestFromFile:

    def test_missing_file_gives_defaults(self, tmp_path):
        config = PhosphorConfig.from_file(tmp_path / "nope.yaml")
        assert config.to_dict() == PhosphorConfig().to_dict()

    def test_json(self, tmp_path):
        path = tmp_path / "phosphor.json"
        path.write_text(json.dumps({"grid": {"columns": 32}, "debug": True}))
        config = PhosphorConfig.from_file(path)
        assert config.grid.columns == 32
        assert config.grid.rows == 20
        assert config.debug is True

    def test_yaml(self, tmp_path):
        path = tmp_path / "phosphor.yaml"
        path.write_text("demo:\n  fps: 12\n  color: false\nlog_level: DEBUG\n")
        config = PhosphorConfig.from_file(path)
        assert config.demo.fps == 12
        assert config.demo.color is False
        assert config.log_level == "DEBUG"

    def test_empty_yaml(self, tmp_path):
        path = tmp_path / "phosphor.yml"
        path.write_text("")
        assert PhosphorConfig.from_file(path).grid.columns == 64

    def test_unsupported_suffix(self, tmp_path):
        path = tmp_path / "phosphor.toml"
        path.write_text("debug = true\n")
        with pytest.raises(ValueError):
            PhosphorConfig.from_file(path)

    def test_to_dict_round_trip(self, tmp_path):
        original = PhosphorConfig()
        original.grid.rows = 9
        original.demo.seconds = 2.5
        path = tmp_path / "phosphor.json"
        path.write_text(json.dumps(original.to_dict()))
        assert PhosphorConfig.from_file(path).to_dict() == original.to_dict()


class TestFromEnv:

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("PHOSPHOR_GRID_COLUMNS", "40")
        monkeypatch.setenv("PHOSPHOR_GRID_ROWS", "10")
        monkeypatch.setenv("PHOSPHOR_FPS", "30")
        monkeypatch.setenv("NO_COLOR", "1")
        config = PhosphorConfig.from_env()
        assert config.grid.columns == 40
        assert config.grid.rows == 10
        assert config.demo.fps == 30.0
        assert config.demo.color is False

    def test_debug_implies_debug_logging(self, monkeypatch):
        monkeypatch.setenv("PHOSPHOR_DEBUG", "true")
        monkeypatch.delenv("PHOSPHOR_LOG_LEVEL", raising=False)
        config = PhosphorConfig.from_env()
        assert config.debug is True
        assert config.log_level == "DEBUG"


class TestGlobalConfig:

    def test_get_config_is_cached(self):
        assert get_config() is get_config()

    def test_set_config(self):
        custom = PhosphorConfig()
        custom.demo.seed = 99
        set_config(custom)
        assert get_config() is custom
        assert config_module.get_config().demo.seed == 99
