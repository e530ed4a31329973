"""Tests for the command-line views.

**Feature: bluelock-terminal**
"""

import json
import tempfile
from pathlib import Path

import pytest
from click.testing import CliRunner

from bluelock.cli.main import LAZY_SUBCOMMANDS, cli
from bluelock.config import CONFIG_DIR_ENV, open_store


@pytest.fixture
def config_dir(monkeypatch):
    """Point the config directory at a temporary location."""
    with tempfile.TemporaryDirectory() as tmpdir:
        monkeypatch.setenv(CONFIG_DIR_ENV, tmpdir)
        yield Path(tmpdir)


@pytest.fixture
def runner():
    return CliRunner()


class TestLazyCommands:
    """Every registered command can be loaded."""

    @pytest.mark.parametrize("name", sorted(LAZY_SUBCOMMANDS))
    def test_help(self, runner, config_dir, name):
        result = runner.invoke(cli, [name, "--help"])
        assert result.exit_code == 0, result.output

    def test_unknown_command(self, runner, config_dir):
        result = runner.invoke(cli, ["nope"])
        assert result.exit_code != 0


class TestEgoCommands:
    def test_log_and_history(self, runner, config_dir):
        result = runner.invoke(cli, ["ego", "log", "72", "--notes", "focused"])
        assert result.exit_code == 0, result.output
        assert "EGOIST" in result.output

        runner.invoke(cli, ["ego", "log", "15"])
        result = runner.invoke(cli, ["ego", "history"])
        assert result.exit_code == 0
        assert result.output.index("DONKEY") < result.output.index("EGOIST")

    def test_score_out_of_range_rejected(self, runner, config_dir):
        result = runner.invoke(cli, ["ego", "log", "101"])
        assert result.exit_code != 0
        assert open_store().ego_entries == ()

    def test_empty_history(self, runner, config_dir):
        result = runner.invoke(cli, ["ego", "history"])
        assert result.exit_code == 0
        assert "No entries yet" in result.output


class TestTradeCommands:
    def test_add_and_list(self, runner, config_dir):
        result = runner.invoke(
            cli, ["trade", "add", "aapl", "--entry", "10", "--exit", "15", "--shares", "2"]
        )
        assert result.exit_code == 0, result.output
        assert "+10.00" in result.output

        runner.invoke(cli, ["trade", "add", "tsla", "--entry", "20", "--exit", "10", "--result", "loss"])
        result = runner.invoke(cli, ["trade", "list"])
        assert result.exit_code == 0
        assert "AAPL" in result.output
        assert "Win Rate:" in result.output
        assert "50%" in result.output

    def test_malformed_price_coerced(self, runner, config_dir):
        result = runner.invoke(cli, ["trade", "add", "x", "--entry", "abc", "--exit", "5"])
        assert result.exit_code == 0
        trade = open_store().trade_entries[0]
        assert trade.entry_price == 0
        assert trade.pnl == 5


class TestDrillCommands:
    def test_add_and_list(self, runner, config_dir):
        for intensity in ("8", "3", "9", "9"):
            result = runner.invoke(cli, ["drill", "add", "Sprints", "--intensity", intensity])
            assert result.exit_code == 0, result.output

        result = runner.invoke(cli, ["drill", "list"])
        assert result.exit_code == 0
        assert "STREAK" in result.output
        assert open_store().drill_entries[-1].intensity == 9

    def test_blank_name_is_noop(self, runner, config_dir):
        result = runner.invoke(cli, ["drill", "add", "   "])
        assert result.exit_code == 0
        assert "blank" in result.output
        assert open_store().drill_entries == ()


class TestSettingsCommands:
    def test_set_and_show(self, runner, config_dir):
        result = runner.invoke(cli, ["settings", "set", "--current", "5200", "--weekly", "abc"])
        assert result.exit_code == 0, result.output

        settings = open_store().settings
        assert settings.current_capital == 5200
        assert settings.weekly_injection == 0
        assert settings.target_capital == 10000

        result = runner.invoke(cli, ["settings", "show"])
        assert "$5,200" in result.output

    def test_set_nothing(self, runner, config_dir):
        result = runner.invoke(cli, ["settings", "set"])
        assert result.exit_code == 0
        assert "Nothing to update" in result.output

    def test_reset_keeps_settings(self, runner, config_dir):
        runner.invoke(cli, ["settings", "set", "--target", "20000"])
        runner.invoke(cli, ["ego", "log", "50"])
        runner.invoke(cli, ["drill", "add", "Reading"])

        result = runner.invoke(cli, ["reset", "--confirm"])
        assert result.exit_code == 0, result.output

        store = open_store()
        assert store.ego_entries == ()
        assert store.drill_entries == ()
        assert store.settings.target_capital == 20000

    def test_reset_cancelled(self, runner, config_dir):
        runner.invoke(cli, ["ego", "log", "50"])
        result = runner.invoke(cli, ["reset"], input="n\n")
        assert "cancelled" in result.output
        assert len(open_store().ego_entries) == 1


class TestViews:
    def test_dashboard_empty(self, runner, config_dir):
        result = runner.invoke(cli, ["dashboard"])
        assert result.exit_code == 0, result.output
        assert "NO DATA" in result.output
        assert "MISSION" in result.output

    def test_dashboard_trend(self, runner, config_dir):
        runner.invoke(cli, ["ego", "log", "40"])
        runner.invoke(cli, ["ego", "log", "60"])
        result = runner.invoke(cli, ["dashboard"])
        assert "HUNGRY" in result.output
        assert "20% from last entry" in result.output

    def test_stats(self, runner, config_dir):
        runner.invoke(cli, ["trade", "add", "a", "--entry", "1", "--exit", "3"])
        runner.invoke(cli, ["drill", "add", "Meditate", "--category", "mindset"])
        result = runner.invoke(cli, ["stats"])
        assert result.exit_code == 0, result.output
        assert "MINDSET" in result.output
        assert "Win Rate" in result.output


class TestBackupCommands:
    def test_export_import(self, runner, config_dir):
        runner.invoke(cli, ["ego", "log", "77"])
        runner.invoke(cli, ["trade", "add", "spy", "--entry", "1", "--exit", "2"])

        out_dir = config_dir / "backups"
        result = runner.invoke(cli, ["export", "--output", str(out_dir)])
        assert result.exit_code == 0, result.output

        files = list(out_dir.glob("bluelock-backup-*.json"))
        assert len(files) == 1
        document = json.loads(files[0].read_text())
        assert document["egoEntries"][0]["score"] == 77

        runner.invoke(cli, ["reset", "--confirm"])
        assert open_store().ego_entries == ()

        result = runner.invoke(cli, ["import", str(files[0]), "--confirm"])
        assert result.exit_code == 0, result.output
        store = open_store()
        assert store.ego_entries[0].score == 77
        assert store.trade_entries[0].ticker == "SPY"

    def test_import_invalid(self, runner, config_dir):
        bad = config_dir / "bad.json"
        bad.write_text('{"egoEntries": "nope"}')
        result = runner.invoke(cli, ["import", str(bad), "--confirm"])
        assert result.exit_code == 1
        assert "Failed to import" in result.output


class TestInit:
    def test_creates_config(self, runner, config_dir):
        result = runner.invoke(cli, ["init"])
        assert result.exit_code == 0, result.output
        assert (config_dir / "config.toml").exists()

        result = runner.invoke(cli, ["init"])
        assert "already exists" in result.output
