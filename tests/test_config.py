"""
Tests for settings and logging setup.
"""

import logging

import pytest
import structlog

from fortnite_api.client import FortniteAPIClient
from fortnite_api.constants import Language
from fortnite_api.core.config import Settings
from fortnite_api.core.logging import LOGGER_NAMESPACE, get_logger, setup_logging


class TestSettings:
    """Test cases for Settings."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("FORTNITE_API_KEY", raising=False)
        monkeypatch.delenv("FORTNITE_API_LANGUAGE", raising=False)

        settings = Settings(_env_file=None)

        assert settings.key is None
        assert settings.language == Language.ENGLISH
        assert settings.timeout == 30.0
        assert settings.log_level == "INFO"

    def test_environment_variables(self, monkeypatch):
        monkeypatch.setenv("FORTNITE_API_KEY", "env-key")
        monkeypatch.setenv("FORTNITE_API_LANGUAGE", "ja")
        monkeypatch.setenv("FORTNITE_API_TIMEOUT", "5")

        settings = Settings(_env_file=None)

        assert settings.key == "env-key"
        assert settings.language == Language.JAPANESE
        assert settings.timeout == 5.0

    def test_field_names_map_to_prefixed_variables(self, monkeypatch):
        monkeypatch.setenv("FORTNITE_API_USER_AGENT", "stats-bot/2.0")
        monkeypatch.setenv("FORTNITE_API_LOG_LEVEL", "DEBUG")

        settings = Settings(_env_file=None)

        assert settings.user_agent == "stats-bot/2.0"
        assert settings.log_level == "DEBUG"
        assert set(Settings.model_fields) == {"key", "language", "timeout", "user_agent", "log_level"}

    def test_rejects_non_positive_timeout(self):
        with pytest.raises(ValueError):
            Settings(_env_file=None, timeout=0)


class TestClientSettings:
    """Test cases for how the client reads settings."""

    def test_client_falls_back_to_settings(self):
        settings = Settings(_env_file=None, key="settings-key", language="ko", timeout=3)
        client = FortniteAPIClient(settings=settings)

        assert client.key == "settings-key"
        assert client.language == Language.KOREAN
        assert client.timeout == 3

    def test_arguments_override_settings(self):
        settings = Settings(_env_file=None, key="settings-key", language="ko")
        client = FortniteAPIClient(key="arg-key", language="pl", settings=settings)

        assert client.key == "arg-key"
        assert client.language == Language.POLISH


class TestLogging:
    """Test cases for logging setup."""

    def teardown_method(self):
        structlog.reset_defaults()

    def test_setup_logging_sets_level(self):
        setup_logging("DEBUG")
        assert logging.getLogger(LOGGER_NAMESPACE).level == logging.DEBUG

    def test_setup_logging_console_renderer(self):
        setup_logging("WARNING", json_logs=False)

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)
        assert logging.getLogger(LOGGER_NAMESPACE).level == logging.WARNING

    def test_get_logger(self):
        assert get_logger("fortnite_api.tests") is not None
