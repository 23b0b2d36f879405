"""
Mock Notification Sender Implementation.

Records notifications instead of sending them. Useful for tests and demos.
"""
import logging
from typing import Optional

from core.application.dtos import FailureNotification
from core.application.interfaces import INotificationSender


logger = logging.getLogger(__name__)


class MockNotificationSender(INotificationSender):
    """
    Mock implementation of the notification port.

    Keeps every notification it receives. When ``fail_with`` is set, each
    send raises that exception after recording the attempt.
    """

    def __init__(self, fail_with: Optional[Exception] = None):
        self.notifications_sent: list[tuple[str, FailureNotification]] = []
        self.fail_with = fail_with

    async def send_failure_notification(
        self, url: str, notification: FailureNotification
    ) -> None:
        self.notifications_sent.append((url, notification))
        logger.info(
            f"FAILURE NOTIFICATION: exec={notification.execution_id} "
            f"type={notification.error.type} url={url}"
        )
        if self.fail_with is not None:
            raise self.fail_with

    def get_notifications(self) -> list[tuple[str, FailureNotification]]:
        """Get all recorded notifications (for testing)."""
        return self.notifications_sent

    def clear(self) -> None:
        """Clear recorded notifications (for testing)."""
        self.notifications_sent.clear()
