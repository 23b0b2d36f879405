"""Test doubles shared across test modules."""

from typing import Any, Optional, Union

from core.application.dtos import (
    ExecutionContext,
    ExecutionErrorRecord,
    ExecutionSuccessRecord,
    LogEntry,
    ReflectionOptions,
    ReflectionResult,
    ReflectionSummary,
)
from core.application.interfaces import IAuditLogger, IReflectionUseCase
from core.domain.errors import ReflectionError
from core.domain.result import Err, Ok


Behaviour = Union[ReflectionResult, ReflectionError, BaseException]


class FakeReflectionUseCase(IReflectionUseCase):
    """
    Fake reflection use case.

    Each call consumes the next behaviour; the last one repeats. A
    ReflectionResult becomes Ok, a reflection error becomes Err and an
    exception is raised.
    """

    def __init__(self, *behaviours: Behaviour) -> None:
        self.behaviours = list(behaviours) or [successful_result()]
        self.calls: list[ReflectionOptions] = []

    async def execute(self, options: ReflectionOptions):
        self.calls.append(options)
        index = min(len(self.calls) - 1, len(self.behaviours) - 1)
        behaviour = self.behaviours[index]
        if isinstance(behaviour, BaseException):
            raise behaviour
        if isinstance(behaviour, ReflectionResult):
            return Ok(behaviour)
        return Err(behaviour)


class RecordingAuditLogger(IAuditLogger):
    """Audit logger that keeps every write in memory."""

    def __init__(self) -> None:
        self.starts: list[ExecutionContext] = []
        self.successes: list[ExecutionSuccessRecord] = []
        self.failures: list[ExecutionErrorRecord] = []
        self.warnings: list[tuple[str, str, Optional[dict[str, Any]]]] = []

    def write_start(self, context: ExecutionContext) -> None:
        self.starts.append(context)

    def write_success(self, record: ExecutionSuccessRecord) -> None:
        self.successes.append(record)

    def write_failure(self, record: ExecutionErrorRecord) -> None:
        self.failures.append(record)

    def write_warning(
        self,
        execution_id: str,
        message: str,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.warnings.append((execution_id, message, details))

    def read_recent(self, limit: int) -> list[LogEntry]:
        return []


def successful_result(
    page_url: Optional[str] = "https://notion.so/reflection-1",
    pr_count: int = 5,
    work_hours: float = 40.0,
) -> ReflectionResult:
    return ReflectionResult(
        summary=ReflectionSummary(pr_count=pr_count, total_work_hours=work_hours),
        page_url=page_url,
    )


class FakeClock:
    """Monotonic clock returning the given readings in order."""

    def __init__(self, *readings: float) -> None:
        self.readings = list(readings)
        self._index = 0

    def __call__(self) -> float:
        reading = self.readings[min(self._index, len(self.readings) - 1)]
        self._index += 1
        return reading
