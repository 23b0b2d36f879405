"""
Schedule DTOs.

Data transfer objects for the schedule-registration port.
"""
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional

from core.application.dtos.execution_dto import ExecutionHistoryEntry


class Platform(str, Enum):
    """OS schedulers the schedule manager can target."""

    MACOS_LAUNCHD = "macos-launchd"
    LINUX_SYSTEMD = "linux-systemd"
    LINUX_CRON = "linux-cron"


@dataclass(frozen=True)
class ScheduleRegisterOptions:
    cron_expression: str
    force: bool = False


@dataclass(frozen=True)
class ScheduleRegistration:
    cron_expression: str
    next_execution: datetime
    platform: Platform
    config_path: str


@dataclass(frozen=True)
class ScheduleStatus:
    registered: bool
    platform: Platform
    cron_expression: Optional[str] = None
    next_execution: Optional[datetime] = None
    last_execution: Optional[ExecutionHistoryEntry] = None


@dataclass(frozen=True)
class PlatformConfig:
    """Generated OS scheduler configuration plus install steps."""

    platform: Platform
    config_content: str
    config_path: str
    install_instructions: tuple[str, ...] = field(default_factory=tuple)
