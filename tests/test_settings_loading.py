"""
Test settings loading from the environment.

Verifies defaults, exact variable-name matching and validation for every
settings section.
"""
from __future__ import annotations

import pytest
from pydantic import ValidationError

from core.settings import (
    LoggingSettings,
    ReflectionSettings,
    ScheduleSettings,
    get_app_settings,
)
from orchestration import load_use_case
from tests.fakes import FakeReflectionUseCase


_ENV_KEYS = [
    "SCHEDULE_CRON",
    "SCHEDULE_TIMEZONE",
    "SCHEDULE_ENABLED",
    "SCHEDULE_NOTIFICATION_URL",
    "SCHEDULE_CONFIG_DIR",
    "SCHEDULE_HISTORY_SIZE",
    "SCHEDULE_NOTIFICATION_TIMEOUT",
    "LOG_FILE_PATH",
    "LOG_LEVEL",
    "LOG_REDACTION_HEX_MIN_LENGTH",
    "REFLECTION_DEFAULT_PERIOD_DAYS",
    "REFLECTION_USE_CASE_FACTORY",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    # keep a developer .env out of the picture
    monkeypatch.chdir(tmp_path)
    get_app_settings.cache_clear()
    yield
    get_app_settings.cache_clear()


def test_defaults():
    settings = get_app_settings()

    assert settings.schedule.cron_expression == "0 19 * * 0"
    assert settings.schedule.timezone == "Asia/Tokyo"
    assert settings.schedule.enabled is False
    assert settings.schedule.notification_url is None
    assert settings.schedule.history_size == 50
    assert settings.schedule.notification_timeout == 5.0
    assert settings.logging.log_file_path == "~/.reflection-weekly/logs/execution.log"
    assert settings.logging.log_level == "info"
    assert settings.logging.redaction_hex_min_length == 32
    assert settings.reflection.default_period_days == 7
    assert settings.reflection.use_case_factory is None


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("SCHEDULE_CRON", "0 9 * * 1")
    monkeypatch.setenv("SCHEDULE_ENABLED", "true")
    monkeypatch.setenv("SCHEDULE_NOTIFICATION_URL", "https://hooks.example.com/x")
    monkeypatch.setenv("SCHEDULE_HISTORY_SIZE", "10")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("LOG_REDACTION_HEX_MIN_LENGTH", "40")

    settings = get_app_settings()

    assert settings.schedule.cron_expression == "0 9 * * 1"
    assert settings.schedule.enabled is True
    assert settings.schedule.notification_url == "https://hooks.example.com/x"
    assert settings.schedule.history_size == 10
    assert settings.logging.log_level == "debug"
    assert settings.logging.redaction_hex_min_length == 40


def test_env_file_is_read(tmp_path):
    (tmp_path / ".env").write_text("SCHEDULE_TIMEZONE=UTC\n", encoding="utf-8")

    assert ScheduleSettings().timezone == "UTC"


@pytest.mark.parametrize(
    "factory, key, value",
    [
        (ScheduleSettings, "SCHEDULE_HISTORY_SIZE", "0"),
        (ScheduleSettings, "SCHEDULE_NOTIFICATION_TIMEOUT", "0"),
        (LoggingSettings, "LOG_LEVEL", "verbose"),
        (LoggingSettings, "LOG_REDACTION_HEX_MIN_LENGTH", "0"),
        (LoggingSettings, "LOG_REDACTION_HEX_MIN_LENGTH", "4"),
        (ReflectionSettings, "REFLECTION_DEFAULT_PERIOD_DAYS", "0"),
    ],
)
def test_invalid_values_are_rejected(monkeypatch, factory, key, value):
    monkeypatch.setenv(key, value)

    with pytest.raises(ValidationError):
        factory()


def test_use_case_factory_is_imported(monkeypatch):
    monkeypatch.setenv("REFLECTION_USE_CASE_FACTORY", "tests.fakes:FakeReflectionUseCase")

    settings = get_app_settings()

    assert isinstance(load_use_case(settings), FakeReflectionUseCase)


def test_load_use_case_without_factory():
    assert load_use_case(get_app_settings()) is None
