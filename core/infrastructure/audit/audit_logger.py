"""
Audit Logger.

Writes one JSON object per line for every execution event and reads the
most recent entries back.
"""
import json
import logging
import sys
from collections import deque
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional, Union

from core.application.dtos import (
    ExecutionContext,
    ExecutionErrorRecord,
    ExecutionSuccessRecord,
    LogEntry,
)
from core.application.interfaces import IAuditLogger
from core.domain.enums.execution_status import LogEvent, LogLevel
from core.infrastructure.audit.redaction import RedactionEngine


logger = logging.getLogger(__name__)

_PAYLOAD_ATTR = "audit_payload"

_LEVEL_NUMBERS = {
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARN: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
}
_LEVEL_NAMES = {number: level for level, number in _LEVEL_NUMBERS.items()}


class JsonLineFormatter(logging.Formatter):
    """Formats audit records as ``{"level", "time", ...payload}`` JSON lines."""

    def format(self, record: logging.LogRecord) -> str:
        level = _LEVEL_NAMES.get(record.levelno, LogLevel.INFO)
        line: dict[str, Any] = {
            "level": level.value,
            "time": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(
                timespec="milliseconds"
            ),
        }
        line.update(getattr(record, _PAYLOAD_ATTR, {}))
        return json.dumps(line, ensure_ascii=False, default=str)


class _AuditFileHandler(logging.FileHandler):
    """File handler that reports failed writes on the process log."""

    def emit(self, record: logging.LogRecord) -> None:
        # The delayed open happens outside StreamHandler.emit's own guard
        try:
            super().emit(record)
        except Exception:
            self.handleError(record)

    def handleError(self, record: logging.LogRecord) -> None:
        logger.warning(f"Audit log write to {self.baseFilename} failed: {sys.exc_info()[1]}")


class AuditLogger(IAuditLogger):
    """
    File-backed audit log.

    Every write goes through a dedicated logger whose file handler flushes
    each record before the call returns, so the outcome of an attempt
    survives an immediate crash. Error and warning text is redacted first.
    A write that fails is reported as a process-log warning and never
    raised to the caller.
    """

    def __init__(
        self,
        log_file_path: Union[str, Path],
        log_level: Union[LogLevel, str] = LogLevel.INFO,
        redaction_engine: Optional[RedactionEngine] = None,
    ):
        """
        Initialize the audit logger.

        Args:
            log_file_path: Path of the JSON-lines sink
            log_level: Minimum level written to the sink
            redaction_engine: Masking applied to freeform error text
        """
        self.log_file_path = Path(log_file_path).expanduser()
        self.log_level = LogLevel(log_level)
        self._redaction = redaction_engine or RedactionEngine()

        self.log_file_path.parent.mkdir(parents=True, exist_ok=True)

        # Not registered with logging.getLogger so each sink gets its own handler
        self._sink = logging.Logger(f"reflection.audit[{self.log_file_path}]")
        self._sink.setLevel(_LEVEL_NUMBERS[self.log_level])
        self._sink.propagate = False
        self._handler = _AuditFileHandler(
            self.log_file_path, mode="a", encoding="utf-8", delay=True
        )
        self._handler.setFormatter(JsonLineFormatter())
        self._sink.addHandler(self._handler)

    def write_start(self, context: ExecutionContext) -> None:
        self._write(
            LogLevel.INFO,
            {
                "event": LogEvent.START.value,
                "executionId": context.execution_id,
                "scheduledTime": context.scheduled_time.isoformat(),
                "triggerType": context.trigger_type.value,
            },
        )

    def write_success(self, record: ExecutionSuccessRecord) -> None:
        self._write(
            LogLevel.INFO,
            {
                "event": LogEvent.SUCCESS.value,
                "executionId": record.execution_id,
                "duration": record.duration_ms,
                "pageUrl": record.page_url,
                "commitCount": record.commit_count,
                "workHours": record.work_hours,
            },
        )

    def write_failure(self, record: ExecutionErrorRecord) -> None:
        payload: dict[str, Any] = {
            "event": LogEvent.ERROR.value,
            "executionId": record.execution_id,
            "duration": record.duration_ms,
            "errorType": record.error_type,
            "errorMessage": self._redaction.mask(record.error_message),
        }
        if record.error_stack:
            payload["errorStack"] = self._redaction.mask(record.error_stack)
        if record.local_file_path:
            payload["localFilePath"] = record.local_file_path
        self._write(LogLevel.ERROR, payload)

    def write_warning(
        self,
        execution_id: str,
        message: str,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        payload: dict[str, Any] = dict(details or {})
        payload["executionId"] = execution_id
        payload["message"] = self._redaction.mask(message)
        self._write(LogLevel.WARN, payload)

    def write_debug(self, execution_id: str, details: dict[str, Any]) -> None:
        payload: dict[str, Any] = {"executionId": execution_id}
        payload.update(details)
        self._write(LogLevel.DEBUG, payload)

    def read_recent(self, limit: int) -> list[LogEntry]:
        if limit <= 0 or not self.log_file_path.exists():
            return []

        recent: deque[LogEntry] = deque(maxlen=limit)
        try:
            with self.log_file_path.open("r", encoding="utf-8", errors="replace") as sink:
                for line in sink:
                    entry = self._parse_line(line)
                    if entry is not None:
                        recent.append(entry)
        except OSError as e:
            logger.warning(f"Could not read audit log {self.log_file_path}: {e}")
            return []
        return list(recent)

    def close(self) -> None:
        """Release the sink file handle."""
        self._sink.removeHandler(self._handler)
        self._handler.close()

    def _write(self, level: LogLevel, payload: dict[str, Any]) -> None:
        self._sink.log(
            _LEVEL_NUMBERS[level],
            payload.get("event", ""),
            extra={_PAYLOAD_ATTR: payload},
        )

    @staticmethod
    def _parse_line(line: str) -> Optional[LogEntry]:
        line = line.strip()
        if not line:
            return None
        try:
            parsed = json.loads(line)
            if not isinstance(parsed, dict):
                return None
            timestamp = datetime.fromisoformat(str(parsed["time"]))
        except (ValueError, KeyError):
            return None
        return LogEntry(
            timestamp=timestamp,
            level=_parse_level(parsed.get("level")),
            execution_id=str(parsed.get("executionId") or "unknown"),
            event=_parse_event(parsed.get("event")),
            details=parsed,
        )


def _parse_level(value: Any) -> LogLevel:
    try:
        return LogLevel(value)
    except ValueError:
        return LogLevel.INFO


def _parse_event(value: Any) -> LogEvent:
    try:
        return LogEvent(value)
    except ValueError:
        return LogEvent.START
