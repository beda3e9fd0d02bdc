"""IWebhookTransport over httpx.AsyncClient.

The client is owned by the caller (created once per process and closed on
shutdown); its timeout is the only deadline a webhook POST has.
"""

from __future__ import annotations

from typing import Any

import httpx

from homeops.domain.exceptions import WebhookDeliveryException
from homeops.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


class HttpxWebhookTransport:
    """POSTs JSON bodies and reports the HTTP status code."""

    def __init__(self, client: httpx.AsyncClient, user_agent: str | None = None) -> None:
        self._client = client
        self._user_agent = user_agent

    async def post(
        self, url: str, headers: dict[str, str], json_body: dict[str, Any]
    ) -> int:
        """POST json_body to url.

        Returns:
            The response status code (any status, including 4xx/5xx).

        Raises:
            WebhookDeliveryException: Connection, timeout or protocol failure.
        """
        merged = {"Content-Type": "application/json"}
        if self._user_agent:
            merged["User-Agent"] = self._user_agent
        merged.update(headers or {})
        try:
            response = await self._client.post(url, headers=merged, json=json_body)
        except httpx.HTTPError as e:
            logger.warning("Webhook POST failed: url=%s error=%s", url, e)
            raise WebhookDeliveryException(url, str(e) or type(e).__name__) from e
        logger.debug("Webhook POST: url=%s status=%s", url, response.status_code)
        return response.status_code


def create_webhook_client(timeout_seconds: float) -> httpx.AsyncClient:
    """Build the shared AsyncClient used for webhooks."""
    return httpx.AsyncClient(timeout=httpx.Timeout(timeout_seconds))
