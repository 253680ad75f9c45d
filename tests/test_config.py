"""Tests for configuration loading."""

from __future__ import annotations

import logging

import pytest

from todo_list.config import AppConfig
from todo_list.exceptions import ConfigurationError


class TestDefaults:
    def test_defaults(self):
        config = AppConfig()
        assert config.seed_demo_tasks is True
        assert config.log_level == "WARNING"
        assert config.table_format == "simple"
        assert config.log_level_value == logging.WARNING


class TestEnvironment:
    """Environment variables fill in what the constructor leaves out."""

    @pytest.mark.parametrize("raw, expected", [("0", False), ("no", False), ("TRUE", True)])
    def test_seed_from_env(self, monkeypatch, raw, expected):
        monkeypatch.setenv("TODO_LIST_SEED", raw)
        assert AppConfig().seed_demo_tasks is expected

    def test_log_level_from_env_is_normalised(self, monkeypatch):
        monkeypatch.setenv("TODO_LIST_LOG_LEVEL", "debug")
        config = AppConfig()
        assert config.log_level == "DEBUG"
        assert config.log_level_value == logging.DEBUG

    def test_constructor_beats_env(self, monkeypatch):
        monkeypatch.setenv("TODO_LIST_TABLE_FORMAT", "grid")
        assert AppConfig(table_format="plain").table_format == "plain"

    def test_invalid_bool(self, monkeypatch):
        monkeypatch.setenv("TODO_LIST_SEED", "maybe")
        with pytest.raises(ConfigurationError, match="TODO_LIST_SEED"):
            AppConfig()


class TestValidation:
    def test_invalid_log_level(self):
        with pytest.raises(ConfigurationError, match="log_level"):
            AppConfig(log_level="LOUD")

    def test_invalid_table_format(self):
        with pytest.raises(ConfigurationError, match="table_format"):
            AppConfig(table_format="not-a-format")

    def test_with_overrides(self):
        base = AppConfig()
        changed = base.with_overrides(seed_demo_tasks=False)

        assert changed.seed_demo_tasks is False
        assert base.seed_demo_tasks is True

    def test_is_frozen(self):
        config = AppConfig()
        with pytest.raises(AttributeError):
            config.log_level = "DEBUG"  # type: ignore[misc]
