"""
Schedule Errors.

Expected failures of schedule registration.
"""
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union


class ScheduleErrorKind(str, Enum):
    """Known failure kinds of the schedule-registration port."""

    INVALID_CRON_EXPRESSION = "INVALID_CRON_EXPRESSION"
    ALREADY_REGISTERED = "ALREADY_REGISTERED"
    NOT_REGISTERED = "NOT_REGISTERED"
    PLATFORM_NOT_SUPPORTED = "PLATFORM_NOT_SUPPORTED"
    PERMISSION_DENIED = "PERMISSION_DENIED"
    EXECUTION_FAILED = "EXECUTION_FAILED"


@dataclass(frozen=True)
class InvalidCronExpression:
    kind: ClassVar[ScheduleErrorKind] = ScheduleErrorKind.INVALID_CRON_EXPRESSION

    expression: str
    message: str


@dataclass(frozen=True)
class AlreadyRegistered:
    kind: ClassVar[ScheduleErrorKind] = ScheduleErrorKind.ALREADY_REGISTERED

    existing_expression: str


@dataclass(frozen=True)
class NotRegistered:
    kind: ClassVar[ScheduleErrorKind] = ScheduleErrorKind.NOT_REGISTERED


@dataclass(frozen=True)
class PlatformNotSupported:
    kind: ClassVar[ScheduleErrorKind] = ScheduleErrorKind.PLATFORM_NOT_SUPPORTED

    platform: str


@dataclass(frozen=True)
class PermissionDenied:
    kind: ClassVar[ScheduleErrorKind] = ScheduleErrorKind.PERMISSION_DENIED

    path: str


@dataclass(frozen=True)
class ExecutionFailed:
    kind: ClassVar[ScheduleErrorKind] = ScheduleErrorKind.EXECUTION_FAILED

    message: str


ScheduleError = Union[
    InvalidCronExpression,
    AlreadyRegistered,
    NotRegistered,
    PlatformNotSupported,
    PermissionDenied,
    ExecutionFailed,
]
