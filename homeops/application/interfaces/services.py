"""Service interfaces (ports) for the application layer.

Protocols define contracts for the engine's components and its outbound
collaborators (notification, smart locks, webhooks).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from homeops.application.dtos.automation import (
        ActionConfig,
        ActionExecutionRecord,
        ActionResult,
        AutomationRunResult,
        TriggerEvent,
    )
    from homeops.domain.entities.automation import AutomationEntity
    from homeops.application.dtos.household import LockCommand


# Automation engine interface
class IAutomationEngine(Protocol):
    """Protocol for the trigger router."""

    async def process_trigger(self, event: TriggerEvent) -> list[AutomationRunResult]:
        """Run every matching automation for event. Never raises."""

    async def execute_automation(
        self, automation: AutomationEntity, event: TriggerEvent
    ) -> AutomationRunResult | None:
        """Run one automation's pipeline and record it."""


# Action executor interface
class IActionExecutor(Protocol):
    """Protocol for executing a single action. Never raises."""

    async def execute(
        self,
        action: ActionConfig,
        event: TriggerEvent,
        automation: AutomationEntity,
    ) -> ActionResult:
        """Run action; convert any failure to ActionResult(success=False)."""


# Run recorder interface
class IRunRecorder(Protocol):
    """Protocol for persisting run lifecycle."""

    async def start_run(
        self, automation: AutomationEntity, event: TriggerEvent
    ) -> AutomationRunResult:
        """Create the RUNNING row before any action executes."""

    async def finish_run(
        self,
        run: AutomationRunResult,
        status: str,
        actions_executed: list[ActionExecutionRecord],
        error: str | None,
    ) -> AutomationRunResult:
        """Finalize run and automation statistics (best-effort, never raises)."""


# Notification service interface (send-notification action)
class INotificationService(Protocol):
    """Protocol for push/alert delivery to one user."""

    async def send(self, user_id: str, title: str, body: str) -> None:
        """Deliver notification. Raise on delivery failure."""


# Smart-lock provider interface
class ILockProvider(Protocol):
    """Vendor adapter for lock/unlock commands."""

    name: str

    async def lock(self, cmd: LockCommand) -> bool:
        """Lock; raise or return False on failure."""

    async def unlock(self, cmd: LockCommand) -> bool:
        """Unlock; raise or return False on failure."""


# Webhook transport interface
class IWebhookTransport(Protocol):
    """Outbound HTTP POST of a JSON body."""

    async def post(
        self, url: str, headers: dict[str, str], json_body: dict[str, Any]
    ) -> int:
        """POST json_body to url; return HTTP status code."""
