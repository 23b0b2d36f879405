"""Schedule registration adapters."""

from .platform_config import build_platform_config, cron_to_systemd_calendar
from .schedule_manager import ScheduleManager, detect_platform

__all__ = [
    "ScheduleManager",
    "build_platform_config",
    "cron_to_systemd_calendar",
    "detect_platform",
]
