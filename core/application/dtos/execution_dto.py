"""
Execution DTOs.

Data transfer objects for execution attempts, audit records and history.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

from core.domain.enums.execution_status import LogEvent, LogLevel, TriggerType
from core.domain.value_objects import DateRange


@dataclass(frozen=True)
class ExecutionContext:
    """Identity and trigger of one execution attempt."""

    execution_id: str
    scheduled_time: datetime
    trigger_type: TriggerType


@dataclass(frozen=True)
class ExecutionSuccessRecord:
    """Audit record of a successful attempt."""

    execution_id: str
    duration_ms: int
    page_url: str
    commit_count: int
    work_hours: float


@dataclass(frozen=True)
class ExecutionErrorRecord:
    """Audit record of a failed attempt."""

    execution_id: str
    duration_ms: int
    error_type: str
    error_message: str
    error_stack: Optional[str] = None
    local_file_path: Optional[str] = None


@dataclass(frozen=True)
class LogEntry:
    """One audit entry as read back from the sink."""

    timestamp: datetime
    level: LogLevel
    execution_id: str
    event: LogEvent
    details: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "timestamp": self.timestamp.isoformat(),
            "level": self.level.value,
            "execution_id": self.execution_id,
            "event": self.event.value,
            "details": self.details,
        }


@dataclass(frozen=True)
class ExecutionHistoryEntry:
    """Terminal outcome of one attempt, kept in the in-memory history."""

    execution_id: str
    timestamp: datetime
    success: bool
    duration_ms: int
    page_url: Optional[str] = None
    error: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "execution_id": self.execution_id,
            "timestamp": self.timestamp.isoformat(),
            "success": self.success,
            "page_url": self.page_url,
            "error": self.error,
            "duration_ms": self.duration_ms,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ExecutionHistoryEntry":
        return cls(
            execution_id=data["execution_id"],
            timestamp=datetime.fromisoformat(data["timestamp"]),
            success=bool(data["success"]),
            duration_ms=int(data["duration_ms"]),
            page_url=data.get("page_url"),
            error=data.get("error"),
        )


@dataclass(frozen=True)
class NotificationError:
    """Error part of a failure notification."""

    type: str
    message: str


@dataclass(frozen=True)
class FailureNotification:
    """Payload sent to the notification port for a failed attempt."""

    execution_id: str
    error: NotificationError
    timestamp: datetime


@dataclass(frozen=True)
class ScheduleExecutionOptions:
    """Caller-supplied options for one orchestrated attempt."""

    date_range: DateRange
    notification_url: Optional[str] = None
    trigger_type: TriggerType = TriggerType.SCHEDULED
