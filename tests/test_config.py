"""Tests for configuration loading.

**Feature: trading-dashboard**
"""

import tempfile
from pathlib import Path

import pytest

from tradepilot.config import DEFAULT_DB_PATH, Settings, load_config, parse_config
from tradepilot.exceptions import ConfigError
from tradepilot.strategies import DEFAULT_STRATEGIES


class TestLoadConfig:

    def test_missing_file_gives_defaults(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            settings = load_config(Path(tmpdir) / "missing.toml")

        assert settings == Settings()
        assert settings.db_path == DEFAULT_DB_PATH
        assert settings.trade_count == 200
        assert settings.strategies == DEFAULT_STRATEGIES

    def test_reads_values(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            config_path = Path(tmpdir) / "config.toml"
            config_path.write_text(
                f'[storage]\ndb_path = "{Path(tmpdir).as_posix()}/journal.db"\n\n'
                "[backtest]\ntrade_count = 120\n\n"
                '[[strategies]]\nid = "orb"\nname = "Opening Range"\nrr = 1.5\ntimeframe = "M5"\n'
            )

            settings = load_config(config_path)

        assert settings.db_path == Path(tmpdir) / "journal.db"
        assert settings.trade_count == 120
        assert [s.id for s in settings.strategies] == ["orb"]
        assert settings.strategies[0].timeframe == "M5"

    def test_malformed_toml_falls_back_to_defaults(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            config_path = Path(tmpdir) / "config.toml"
            config_path.write_text("[storage\ndb_path = ")

            assert load_config(config_path) == Settings()

    def test_invalid_values_fall_back_to_defaults(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            config_path = Path(tmpdir) / "config.toml"
            config_path.write_text("[backtest]\ntrade_count = -5\n")

            assert load_config(config_path) == Settings()


class TestParseConfig:

    def test_empty_document(self):
        assert parse_config({}) == Settings()

    def test_expands_user_in_db_path(self):
        settings = parse_config({"storage": {"db_path": "~/journal.db"}})
        assert settings.db_path == Path.home() / "journal.db"

    def test_non_table_sections_are_ignored(self):
        assert parse_config({"storage": "nope", "backtest": 3}) == Settings()

    def test_invalid_strategy_raises(self):
        with pytest.raises(ConfigError):
            parse_config({"strategies": [{"id": "", "name": "x"}]})
