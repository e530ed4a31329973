"""Tests for configuration loading.

**Feature: bluelock-terminal**
"""

import tempfile
from pathlib import Path

import pytest

from bluelock.config import (
    CONFIG_DIR_ENV,
    create_template_config,
    get_config_dir,
    get_db_path,
    get_default_settings,
    get_log_level,
    load_config,
    open_store,
)
from bluelock.models import Settings


@pytest.fixture
def config_dir(monkeypatch):
    """Point the config directory at a temporary location."""
    with tempfile.TemporaryDirectory() as tmpdir:
        monkeypatch.setenv(CONFIG_DIR_ENV, tmpdir)
        yield Path(tmpdir)


class TestLoadConfig:
    """A missing or broken config file falls back to defaults."""

    def test_env_override(self, config_dir: Path):
        assert get_config_dir() == config_dir

    def test_missing_config(self, config_dir: Path):
        assert load_config() == {}

    def test_broken_config(self, config_dir: Path):
        (config_dir / "config.toml").write_text("this is [not toml")
        assert load_config() == {}

    def test_template_round_trip(self, config_dir: Path):
        path = create_template_config()
        config = load_config(path)
        assert get_db_path(config) == config_dir / "bluelock.db"
        assert get_default_settings(config) == Settings()
        assert get_log_level(config) == "WARNING"


class TestConfigValues:
    """Values read from the config dict."""

    def test_db_path_default(self, config_dir: Path):
        assert get_db_path({}) == config_dir / "bluelock.db"

    def test_db_path_custom(self):
        assert get_db_path({"storage": {"path": "/tmp/x.db"}}) == Path("/tmp/x.db")

    @pytest.mark.parametrize("storage", [{"path": 5}, {"path": ["a.db"]}, {"path": ""}, "x.db"])
    def test_db_path_malformed_falls_back(self, config_dir: Path, storage):
        assert get_db_path({"storage": storage}) == config_dir / "bluelock.db"

    def test_default_settings_override(self):
        settings = get_default_settings({"defaults": {"target_capital": 25000, "current_capital": "bad"}})
        assert settings.target_capital == 25000
        assert settings.current_capital == Settings().current_capital

    @pytest.mark.parametrize(
        "config,expected",
        [({}, "WARNING"), ({"logging": {"level": "debug"}}, "DEBUG"), ({"logging": {"level": "loud"}}, "WARNING")],
    )
    def test_log_level(self, config, expected):
        assert get_log_level(config) == expected


class TestOpenStore:
    """open_store builds an initialized SQLite-backed store."""

    def test_open_store(self, config_dir: Path):
        store = open_store({"defaults": {"target_capital": 777}})
        assert store.ready
        assert store.settings.target_capital == 777

        store.append_ego(61)
        assert (config_dir / "bluelock.db").exists()
        assert open_store().ego_entries[0].label == "HUNGRY"
