"""Tests for settings loading and logging configuration."""

import logging

import pytest

from slack_relay.config import SLACK_POST_MESSAGE_URL, Settings, get_settings
from slack_relay.logging_config import LOGGING_CONFIG, configure_logging


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("SLACK_BOT_TOKEN", raising=False)
    settings = Settings(_env_file=None)
    assert settings.slack_bot_token == ""
    assert settings.slack_api_url == SLACK_POST_MESSAGE_URL
    assert settings.slack_timeout_seconds == 10.0
    assert settings.log_level == "INFO"


def test_settings_read_from_environment(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("SLACK_BOT_TOKEN", "xoxb-from-env")
    monkeypatch.setenv("SLACK_TIMEOUT_SECONDS", "3")
    settings = Settings(_env_file=None)
    assert settings.slack_bot_token == "xoxb-from-env"
    assert settings.slack_timeout_seconds == 3.0


def test_get_settings_is_cached():
    get_settings.cache_clear()
    try:
        assert get_settings() is get_settings()
    finally:
        get_settings.cache_clear()


def test_configure_logging_sets_level():
    configure_logging("warning")
    try:
        assert logging.getLogger().level == logging.WARNING
    finally:
        configure_logging()


def test_configure_logging_does_not_mutate_template():
    configure_logging("DEBUG")
    assert LOGGING_CONFIG["root"]["level"] == "INFO"
    configure_logging()
