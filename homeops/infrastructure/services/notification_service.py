"""Automation notification: log-only sender for the send-notification action."""

from __future__ import annotations

import logging

from homeops.shared.telemetry.logging import get_logger
from homeops.shared.utils.datetime import utc_now

logger = get_logger(__name__)


class LogOnlyNotificationService:
    """INotificationService implementation that logs instead of pushing.

    Use when no push provider is configured. Production can swap in a
    push or queue-based implementation.
    """

    async def send(self, user_id: str, title: str, body: str) -> None:
        """Log the notification; nothing is delivered."""
        logger.info(
            "Automation notify: would push to user_id=%s (title=%r)",
            user_id,
            (title or "")[:80],
        )
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Automation notify body (first 500 chars, at %s): %s",
                utc_now().isoformat(),
                (body or "")[:500],
            )
