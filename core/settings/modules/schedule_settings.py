from __future__ import annotations

from typing import Optional

from pydantic import Field

from core.settings.base import ReflectionBaseSettings


class ScheduleSettings(ReflectionBaseSettings):
    """
    Scheduled execution settings.
    Loaded from environment / .env with exact variable name matching.
    """

    cron_expression: str = Field(default="0 19 * * 0", alias="SCHEDULE_CRON")
    timezone: str = Field(default="Asia/Tokyo", alias="SCHEDULE_TIMEZONE")
    enabled: bool = Field(default=False, alias="SCHEDULE_ENABLED")
    notification_url: Optional[str] = Field(default=None, alias="SCHEDULE_NOTIFICATION_URL")
    config_dir: str = Field(default="~/.reflection-weekly", alias="SCHEDULE_CONFIG_DIR")
    history_size: int = Field(default=50, ge=1, alias="SCHEDULE_HISTORY_SIZE")
    notification_timeout: float = Field(
        default=5.0, gt=0, alias="SCHEDULE_NOTIFICATION_TIMEOUT"
    )
