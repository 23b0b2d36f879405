"""Failure notification senders.

Import senders from their own modules; the webhook sender pulls in aiohttp.
"""

__all__ = []
