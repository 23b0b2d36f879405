from __future__ import annotations

from functools import lru_cache

from pydantic import BaseModel, ConfigDict

from core.settings.modules.logging_settings import LoggingSettings
from core.settings.modules.reflection_settings import ReflectionSettings
from core.settings.modules.schedule_settings import ScheduleSettings


class AppSettings(BaseModel):
    """Application settings aggregator."""

    model_config = ConfigDict(arbitrary_types_allowed=True, extra="ignore")

    schedule: ScheduleSettings
    logging: LoggingSettings
    reflection: ReflectionSettings


@lru_cache()
def get_app_settings() -> AppSettings:
    return AppSettings(
        schedule=ScheduleSettings(),
        logging=LoggingSettings(),
        reflection=ReflectionSettings(),
    )
