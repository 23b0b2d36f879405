"""Application DTOs."""

from .execution_dto import (
    ExecutionContext,
    ExecutionErrorRecord,
    ExecutionHistoryEntry,
    ExecutionSuccessRecord,
    FailureNotification,
    LogEntry,
    NotificationError,
    ScheduleExecutionOptions,
)
from .reflection_dto import ReflectionOptions, ReflectionResult, ReflectionSummary
from .schedule_dto import (
    Platform,
    PlatformConfig,
    ScheduleRegisterOptions,
    ScheduleRegistration,
    ScheduleStatus,
)

__all__ = [
    "ExecutionContext",
    "ExecutionErrorRecord",
    "ExecutionHistoryEntry",
    "ExecutionSuccessRecord",
    "FailureNotification",
    "LogEntry",
    "NotificationError",
    "Platform",
    "PlatformConfig",
    "ReflectionOptions",
    "ReflectionResult",
    "ReflectionSummary",
    "ScheduleExecutionOptions",
    "ScheduleRegisterOptions",
    "ScheduleRegistration",
    "ScheduleStatus",
]
