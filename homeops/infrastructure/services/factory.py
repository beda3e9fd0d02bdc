"""Wires the automation engine from a session factory and an HTTP client."""

from __future__ import annotations

import httpx
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from homeops.application.interfaces.services import INotificationService
from homeops.core.config import Settings, get_settings
from homeops.infrastructure.external.smart_locks import LockProviderRegistry
from homeops.infrastructure.external.webhooks import HttpxWebhookTransport
from homeops.infrastructure.persistence.stores import (
    SqlApprovalStore,
    SqlAutomationReader,
    SqlCalendarEventStore,
    SqlSmartLockStore,
    SqlTaskStore,
)
from homeops.infrastructure.services.action_executor import ActionExecutor
from homeops.infrastructure.services.automation_engine import AutomationEngine
from homeops.infrastructure.services.run_recorder import RunRecorder


def create_automation_engine(
    session_factory: async_sessionmaker[AsyncSession],
    http_client: httpx.AsyncClient,
    *,
    notification_service: INotificationService | None = None,
    lock_registry: LockProviderRegistry | None = None,
    settings: Settings | None = None,
) -> AutomationEngine:
    """Build an AutomationEngine backed by SQL stores.

    Args:
        session_factory: Async session factory; each store call opens its own session.
        http_client: Shared client for webhooks (caller owns its lifecycle).
        notification_service: Push sender; defaults to the log-only sender.
        lock_registry: Smart-lock providers; defaults to the built-in registry.
        settings: Used for the webhook User-Agent; defaults to get_settings().
    """
    s = settings or get_settings()
    executor = ActionExecutor(
        SqlTaskStore(session_factory),
        SqlApprovalStore(session_factory),
        SqlCalendarEventStore(session_factory),
        SqlSmartLockStore(session_factory),
        notification_service=notification_service,
        lock_registry=lock_registry,
        webhook_transport=HttpxWebhookTransport(http_client, s.webhook_user_agent),
    )
    return AutomationEngine(
        SqlAutomationReader(session_factory),
        RunRecorder(session_factory),
        executor,
    )
