"""Application layer interfaces."""
from abc import ABC, abstractmethod
from typing import Any, Literal, Optional

from core.application.dtos import (
    ExecutionContext,
    ExecutionErrorRecord,
    ExecutionHistoryEntry,
    ExecutionSuccessRecord,
    FailureNotification,
    LogEntry,
    Platform,
    PlatformConfig,
    ReflectionOptions,
    ReflectionResult,
    ScheduleRegisterOptions,
    ScheduleRegistration,
    ScheduleStatus,
)
from core.domain.errors import ReflectionError, ScheduleError
from core.domain.result import Result


class IReflectionUseCase(ABC):
    """
    Interface for the reflection (business) operation.

    Collecting work data, summarizing it and publishing the page all happen
    behind this port. Expected failures come back as ``Err`` values; anything
    raised is treated by callers as an unexpected fault.
    """

    @abstractmethod
    async def execute(
        self, options: ReflectionOptions
    ) -> Result[ReflectionResult, ReflectionError]:
        """
        Generate one reflection.

        Args:
            options: Date range and dry-run flag

        Returns:
            Ok with the reflection result, or Err with a known reflection error
        """
        pass


class INotificationSender(ABC):
    """
    Interface for failure notification delivery.

    Implementations may raise on any delivery problem.
    """

    @abstractmethod
    async def send_failure_notification(
        self, url: str, notification: FailureNotification
    ) -> None:
        """
        Deliver a failure notification.

        Args:
            url: Notification endpoint
            notification: Failure payload
        """
        pass


class IAuditLogger(ABC):
    """Interface for the execution audit log."""

    @abstractmethod
    def write_start(self, context: ExecutionContext) -> None:
        pass

    @abstractmethod
    def write_success(self, record: ExecutionSuccessRecord) -> None:
        pass

    @abstractmethod
    def write_failure(self, record: ExecutionErrorRecord) -> None:
        pass

    @abstractmethod
    def write_warning(
        self,
        execution_id: str,
        message: str,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        pass

    @abstractmethod
    def read_recent(self, limit: int) -> list[LogEntry]:
        """
        Read the most recent audit entries.

        Args:
            limit: Maximum number of entries

        Returns:
            Entries oldest first
        """
        pass

    def close(self) -> None:
        """Release sink resources. Sinks without any keep this no-op."""


class IScheduleManager(ABC):
    """
    Interface for OS schedule registration.

    Used by the CLI command layer.
    """

    @abstractmethod
    def register(
        self, options: ScheduleRegisterOptions
    ) -> Result[ScheduleRegistration, ScheduleError]:
        pass

    @abstractmethod
    def unregister(self) -> Result[None, ScheduleError]:
        pass

    @abstractmethod
    def get_status(self) -> Result[ScheduleStatus, ScheduleError]:
        pass

    @abstractmethod
    def validate_cron_expression(
        self, expression: str
    ) -> Result[Literal[True], ScheduleError]:
        pass

    @abstractmethod
    def get_default_cron_expression(self) -> str:
        pass

    @abstractmethod
    def generate_platform_config(
        self, platform: Platform, cron_expression: str
    ) -> Result[PlatformConfig, ScheduleError]:
        pass

    @abstractmethod
    def record_last_execution(
        self, entry: ExecutionHistoryEntry
    ) -> Result[None, ScheduleError]:
        """
        Persist the outcome of the most recent attempt.

        Args:
            entry: History entry of the attempt
        """
        pass
