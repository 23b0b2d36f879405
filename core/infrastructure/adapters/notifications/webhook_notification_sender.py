"""
Webhook Notification Sender.

Posts failure notifications to a Slack-compatible incoming webhook.
"""
import logging

import aiohttp

from core.application.dtos import FailureNotification
from core.application.interfaces import INotificationSender


logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 5.0
NOTIFICATION_TITLE = "[reflection-weekly] scheduled execution failed"


class WebhookNotificationSender(INotificationSender):
    """
    Webhook implementation of the notification port.

    Sends ``{"text": ...}`` as JSON. Transport errors, timeouts and non-2xx
    responses are raised to the caller.
    """

    def __init__(self, timeout: float = DEFAULT_TIMEOUT_SECONDS):
        """
        Initialize webhook sender.

        Args:
            timeout: Total request timeout in seconds
        """
        self.timeout = aiohttp.ClientTimeout(total=timeout)

    async def send_failure_notification(
        self, url: str, notification: FailureNotification
    ) -> None:
        """Send failure notification to the webhook."""
        payload = {"text": self.format_notification_text(notification)}

        async with aiohttp.ClientSession(timeout=self.timeout) as session:
            async with session.post(url, json=payload) as response:
                response.raise_for_status()

        logger.info(f"Failure notification sent for {notification.execution_id}")

    @staticmethod
    def format_notification_text(notification: FailureNotification) -> str:
        """Render the notification as webhook message text."""
        return "\n".join(
            [
                NOTIFICATION_TITLE,
                f"Execution ID: {notification.execution_id}",
                f"Error type: {notification.error.type}",
                f"Error message: {notification.error.message}",
                f"Occurred at: {notification.timestamp.isoformat()}",
            ]
        )
