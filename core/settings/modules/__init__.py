# Settings modules
from .app_settings import AppSettings, get_app_settings
from .logging_settings import LoggingSettings
from .reflection_settings import ReflectionSettings
from .schedule_settings import ScheduleSettings

__all__ = [
    "AppSettings",
    "get_app_settings",
    "LoggingSettings",
    "ReflectionSettings",
    "ScheduleSettings",
]
