"""Execution orchestrator - runs one reflection attempt with audit, notification and history."""

import time
import traceback
from collections.abc import Callable
from typing import Optional

from core.application.dtos import (
    ExecutionContext,
    ExecutionErrorRecord,
    ExecutionHistoryEntry,
    ExecutionSuccessRecord,
    FailureNotification,
    NotificationError,
    ReflectionOptions,
    ScheduleExecutionOptions,
)
from core.application.interfaces import IAuditLogger, INotificationSender, IReflectionUseCase
from core.domain.enums.execution_status import ExecutionState
from core.domain.errors import format_reflection_error
from core.domain.result import Err, Ok
from core.domain.value_objects import ExecutionID
from reflection_sdk.logging import get_logger
from reflection_sdk.utils.datetime import utc_now

from .history import DEFAULT_HISTORY_CAPACITY, HistoryStore
from .models import (
    ExecutionOutcome,
    FailureOutcome,
    KnownFailureOutcome,
    SuccessOutcome,
    UnexpectedFailureOutcome,
)


class ExecutionOrchestrator:
    """
    Drives scheduled reflection attempts.

    Each ``run`` call is exactly one attempt: a start entry is audited, the
    reflection use case is invoked once, the outcome is audited, a failure
    notification is attempted when requested, and the terminal outcome is
    appended to the bounded history. Nothing raised by the use case or by the
    notification sender reaches the caller.
    """

    def __init__(
        self,
        audit_logger: IAuditLogger,
        use_case: IReflectionUseCase,
        notification_sender: INotificationSender,
        max_history_size: int = DEFAULT_HISTORY_CAPACITY,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize orchestrator.

        Args:
            audit_logger: Audit log receiving start/outcome/warning entries
            use_case: Reflection operation port
            notification_sender: Failure notification port
            max_history_size: Capacity of the in-memory history
            clock: Monotonic clock in seconds, used for durations
        """
        self._audit = audit_logger
        self._use_case = use_case
        self._notification_sender = notification_sender
        self._history = HistoryStore(max_history_size)
        self._clock = clock
        self._logger = get_logger("orchestration.orchestrator")

    async def run(self, options: ScheduleExecutionOptions) -> ExecutionHistoryEntry:
        """Run one reflection attempt.

        Args:
            options: Date range, optional notification URL and trigger type

        Returns:
            History entry describing the terminal outcome
        """
        execution_id = ExecutionID.generate().value
        started = self._clock()
        ctx = ExecutionContext(
            execution_id=execution_id,
            scheduled_time=utc_now(),
            trigger_type=options.trigger_type,
        )

        self._transition(execution_id, ExecutionState.STARTED)
        self._audit.write_start(ctx)

        outcome = await self._invoke(options, started)

        if isinstance(outcome, SuccessOutcome):
            self._transition(execution_id, ExecutionState.SUCCEEDED)
            entry = self._handle_success(execution_id, outcome)
        else:
            state = (
                ExecutionState.KNOWN_FAILED
                if isinstance(outcome, KnownFailureOutcome)
                else ExecutionState.UNEXPECTED_FAILED
            )
            self._transition(execution_id, state)
            entry = await self._handle_failure(execution_id, outcome, options.notification_url)

        self._history.append(entry)
        self._transition(execution_id, ExecutionState.RECORDED)

        self._logger.info(
            f"execution_finished exec={execution_id} success={entry.success} "
            f"duration_ms={entry.duration_ms}"
        )
        return entry

    def get_execution_history(self) -> list[ExecutionHistoryEntry]:
        """Return a copy of the history, oldest first."""
        return self._history.snapshot()

    def get_last_execution_record(self) -> Optional[ExecutionHistoryEntry]:
        """Return the most recent history entry, or None before the first run."""
        return self._history.last()

    def close(self) -> None:
        """Release the audit sink."""
        self._audit.close()

    async def _invoke(self, options: ScheduleExecutionOptions, started: float) -> ExecutionOutcome:
        try:
            result = await self._use_case.execute(
                ReflectionOptions(date_range=options.date_range, dry_run=False)
            )
            return self._classify(result, self._elapsed_ms(started))
        except Exception as exc:
            return UnexpectedFailureOutcome(
                message=str(exc) or type(exc).__name__,
                stack_trace="".join(
                    traceback.format_exception(type(exc), exc, exc.__traceback__)
                ),
                duration_ms=self._elapsed_ms(started),
            )

    @staticmethod
    def _classify(result: object, duration_ms: int) -> ExecutionOutcome:
        # A malformed result raises here and is reported as an unexpected failure
        if isinstance(result, Ok):
            reflection = result.value
            return SuccessOutcome(
                page_url=reflection.page_url or reflection.local_file_path,
                commit_count=reflection.summary.pr_count,
                work_hours=reflection.summary.total_work_hours,
                duration_ms=duration_ms,
            )
        if isinstance(result, Err):
            return KnownFailureOutcome(
                error=result.error,
                message=format_reflection_error(result.error),
                duration_ms=duration_ms,
            )
        raise TypeError(f"reflection use case returned {type(result).__name__}, expected a Result")

    def _handle_success(self, execution_id: str, outcome: SuccessOutcome) -> ExecutionHistoryEntry:
        self._audit.write_success(
            ExecutionSuccessRecord(
                execution_id=execution_id,
                duration_ms=outcome.duration_ms,
                page_url=outcome.page_url or "",
                commit_count=outcome.commit_count,
                work_hours=outcome.work_hours,
            )
        )
        return ExecutionHistoryEntry(
            execution_id=execution_id,
            timestamp=utc_now(),
            success=True,
            page_url=outcome.page_url,
            duration_ms=outcome.duration_ms,
        )

    async def _handle_failure(
        self,
        execution_id: str,
        outcome: FailureOutcome,
        notification_url: Optional[str],
    ) -> ExecutionHistoryEntry:
        stack = outcome.stack_trace if isinstance(outcome, UnexpectedFailureOutcome) else None
        self._audit.write_failure(
            ExecutionErrorRecord(
                execution_id=execution_id,
                duration_ms=outcome.duration_ms,
                error_type=outcome.error_type,
                error_message=outcome.message,
                error_stack=stack,
            )
        )
        self._logger.warning(
            f"execution_failed exec={execution_id} error_type={outcome.error_type}"
        )

        entry = ExecutionHistoryEntry(
            execution_id=execution_id,
            timestamp=utc_now(),
            success=False,
            error=outcome.message,
            duration_ms=outcome.duration_ms,
        )

        if notification_url:
            await self._notify_safely(
                execution_id,
                notification_url,
                NotificationError(type=outcome.error_type, message=outcome.message),
            )
        return entry

    async def _notify_safely(
        self, execution_id: str, notification_url: str, error: NotificationError
    ) -> None:
        notification = FailureNotification(
            execution_id=execution_id,
            error=error,
            timestamp=utc_now(),
        )
        try:
            await self._notification_sender.send_failure_notification(
                notification_url, notification
            )
        except Exception as exc:
            self._audit.write_warning(
                execution_id,
                f"failed to send failure notification: {exc}",
                {"notificationUrl": notification_url},
            )

    def _elapsed_ms(self, started: float) -> int:
        return int(round((self._clock() - started) * 1000))

    def _transition(self, execution_id: str, state: ExecutionState) -> None:
        self._logger.debug(f"execution_state exec={execution_id} state={state.value}")
