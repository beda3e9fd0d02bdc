"""Outbound webhook transport (httpx)."""

from homeops.infrastructure.external.webhooks.transport import HttpxWebhookTransport

__all__ = ["HttpxWebhookTransport"]
