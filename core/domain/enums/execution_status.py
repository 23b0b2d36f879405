"""
Execution Enums.

Trigger, lifecycle state and audit log vocabularies.
"""
from enum import Enum


class TriggerType(str, Enum):
    """What started an execution attempt."""

    SCHEDULED = "scheduled"
    MANUAL = "manual"


class ExecutionState(str, Enum):
    """Lifecycle of a single execution attempt."""

    IDLE = "idle"
    STARTED = "started"
    SUCCEEDED = "succeeded"
    KNOWN_FAILED = "known_failed"
    UNEXPECTED_FAILED = "unexpected_failed"
    RECORDED = "recorded"


class LogLevel(str, Enum):
    """Audit log levels as written to the sink."""

    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"


class LogEvent(str, Enum):
    """Audit log event names."""

    START = "start"
    SUCCESS = "success"
    ERROR = "error"
