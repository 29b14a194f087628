"""Tests for settings loading."""

import logging

from nsplanner.core.config import Settings, get_settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("STORAGE_URL", raising=False)
    settings = Settings(_env_file=None)

    assert settings.default_locale == "es"
    assert settings.default_unit == "km"
    assert settings.default_training_days == 5
    assert settings.storage_key == "ns-user-data"
    assert settings.locale_key == "ns-locale"
    assert settings.storage_url.startswith("sqlite:///")


def test_environment_override(monkeypatch):
    monkeypatch.setenv("DEFAULT_LOCALE", "en")
    monkeypatch.setenv("default_training_days", "4")

    settings = get_settings()

    assert settings.default_locale == "en"
    assert settings.default_training_days == 4


def test_cached(monkeypatch):
    assert get_settings() is get_settings()


def test_in_memory_storage_warns(monkeypatch, caplog):
    monkeypatch.setenv("STORAGE_URL", "sqlite://")
    monkeypatch.setenv("DEBUG", "false")

    with caplog.at_level(logging.WARNING, logger="nsplanner.core.config"):
        get_settings()

    assert "in-memory" in caplog.text


def test_in_memory_storage_quiet_in_debug(monkeypatch, caplog):
    monkeypatch.setenv("STORAGE_URL", "sqlite:///:memory:")
    monkeypatch.setenv("DEBUG", "true")

    with caplog.at_level(logging.WARNING, logger="nsplanner.core.config"):
        get_settings()

    assert "in-memory" not in caplog.text
