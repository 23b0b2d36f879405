"""Domain error taxonomies.

Errors here are values returned inside ``Err``, never raised.
"""

from .reflection_errors import (
    UNEXPECTED_ERROR_KIND,
    ConfigInvalid,
    DataCollectionFailed,
    PageCreationFailed,
    ReflectionError,
    ReflectionErrorKind,
    format_reflection_error,
)
from .schedule_errors import (
    AlreadyRegistered,
    ExecutionFailed,
    InvalidCronExpression,
    NotRegistered,
    PermissionDenied,
    PlatformNotSupported,
    ScheduleError,
    ScheduleErrorKind,
)

__all__ = [
    "UNEXPECTED_ERROR_KIND",
    "AlreadyRegistered",
    "ConfigInvalid",
    "DataCollectionFailed",
    "ExecutionFailed",
    "InvalidCronExpression",
    "NotRegistered",
    "PageCreationFailed",
    "PermissionDenied",
    "PlatformNotSupported",
    "ReflectionError",
    "ReflectionErrorKind",
    "ScheduleError",
    "ScheduleErrorKind",
    "format_reflection_error",
]
