"""Orchestration layer - scheduled execution with audit, notification and history."""

from typing import TYPE_CHECKING, Optional

from .history import DEFAULT_HISTORY_CAPACITY, HistoryStore
from .models import (
    ExecutionOutcome,
    KnownFailureOutcome,
    SuccessOutcome,
    UnexpectedFailureOutcome,
)
from .orchestrator import ExecutionOrchestrator

if TYPE_CHECKING:
    from core.application.interfaces import IReflectionUseCase
    from core.settings import AppSettings

__all__ = [
    "DEFAULT_HISTORY_CAPACITY",
    "ExecutionOrchestrator",
    "ExecutionOutcome",
    "HistoryStore",
    "KnownFailureOutcome",
    "SuccessOutcome",
    "UnexpectedFailureOutcome",
    "create_default_orchestrator",
    "load_use_case",
]


def create_default_orchestrator(
    use_case: "IReflectionUseCase", settings: Optional["AppSettings"] = None
) -> ExecutionOrchestrator:
    """Create an orchestrator wired to the file audit log and webhook sender.

    Args:
        use_case: Reflection operation port
        settings: Application settings (defaults to the cached global settings)

    Returns:
        ExecutionOrchestrator instance
    """
    from core.infrastructure.adapters.notifications.webhook_notification_sender import (
        WebhookNotificationSender,
    )
    from core.infrastructure.audit import AuditLogger, RedactionEngine
    from core.settings import get_app_settings

    settings = settings or get_app_settings()
    audit_logger = AuditLogger(
        log_file_path=settings.logging.log_file_path,
        log_level=settings.logging.log_level,
        redaction_engine=RedactionEngine(
            hex_min_length=settings.logging.redaction_hex_min_length
        ),
    )
    return ExecutionOrchestrator(
        audit_logger=audit_logger,
        use_case=use_case,
        notification_sender=WebhookNotificationSender(
            timeout=settings.schedule.notification_timeout
        ),
        max_history_size=settings.schedule.history_size,
    )


def load_use_case(settings: Optional["AppSettings"] = None) -> Optional["IReflectionUseCase"]:
    """Build the reflection use case from ``REFLECTION_USE_CASE_FACTORY``.

    Args:
        settings: Application settings (defaults to the cached global settings)

    Returns:
        The use case, or None when no factory is configured
    """
    from core.settings import get_app_settings

    settings = settings or get_app_settings()
    factory = settings.reflection.use_case_factory
    if factory is None:
        return None
    return factory()
