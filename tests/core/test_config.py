"""Unit tests for src/core/config.py and src/core/log_config.py"""

import logging

import pytest

from src.core.config import Settings, get_settings
from src.core.log_config import configure_logging


def test_defaults_keep_everything_in_memory(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ["CHESS_DATABASE_URL", "CHESS_SQL_ECHO", "CHESS_LOG_LEVEL"]:
        monkeypatch.delenv(name, raising=False)
    settings = Settings.from_env()
    assert settings.database_url == "sqlite:///:memory:"
    assert settings.sql_echo is False
    assert settings.log_level == "INFO"


def test_settings_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CHESS_DATABASE_URL", "sqlite:///games.db")
    monkeypatch.setenv("CHESS_SQL_ECHO", "true")
    monkeypatch.setenv("CHESS_LOG_LEVEL", "debug")
    settings = Settings.from_env()
    assert settings.database_url == "sqlite:///games.db"
    assert settings.sql_echo is True
    assert settings.log_level == "debug"


def test_settings_are_cached() -> None:
    assert get_settings() is get_settings()


def test_configure_logging_does_not_stack_handlers() -> None:
    configure_logging("debug")
    logger = configure_logging("warning")
    assert logger.name == "src"
    assert logger.level == logging.WARNING
    assert len(logger.handlers) == 1
