"""Shared fixtures."""

from datetime import date

import pytest

from core.application.dtos import ScheduleExecutionOptions
from core.domain.value_objects import DateRange
from core.settings import AppSettings, LoggingSettings, ReflectionSettings, ScheduleSettings
from tests.fakes import RecordingAuditLogger


@pytest.fixture
def week_options() -> ScheduleExecutionOptions:
    return ScheduleExecutionOptions(
        date_range=DateRange(start=date(2025, 1, 6), end=date(2025, 1, 12)),
    )


@pytest.fixture
def recording_audit_logger() -> RecordingAuditLogger:
    return RecordingAuditLogger()


@pytest.fixture
def app_settings(tmp_path) -> AppSettings:
    """Settings pointing every file path into ``tmp_path``."""
    return AppSettings(
        schedule=ScheduleSettings(
            SCHEDULE_CONFIG_DIR=str(tmp_path / "config"),
            SCHEDULE_TIMEZONE="UTC",
        ),
        logging=LoggingSettings(LOG_FILE_PATH=str(tmp_path / "logs" / "execution.log")),
        reflection=ReflectionSettings(),
    )
