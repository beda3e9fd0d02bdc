"""Repository and store interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
Repositories are bound to one session; stores own their transaction per call
(used by the engine and action handlers so a failed effect never poisons the
session that records the run).
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from homeops.application.dtos.automation import AutomationRunResult
    from homeops.application.dtos.household import (
        ApprovalResult,
        CalendarEventResult,
        SmartLockResult,
        TaskResult,
    )
    from homeops.domain.entities.automation import AutomationEntity


# Automation repository interface
class IAutomationRepository(Protocol):
    """Protocol for automation persistence (session-bound)."""

    async def get_by_id_and_tenant(
        self, automation_id: str, tenant_id: str
    ) -> AutomationEntity | None:
        """Return automation by id within tenant."""

    async def get_trigger_candidates(
        self, tenant_id: str, trigger: str
    ) -> list[AutomationEntity]:
        """Return enabled, unpaused automations of the tenant listening for trigger."""

    async def record_run_outcome(
        self,
        automation_id: str,
        status: str,
        error: str | None,
        ran_at: datetime,
    ) -> None:
        """Atomically increment run_count and overwrite the last-run fields."""

    async def set_paused(
        self,
        automation_id: str,
        tenant_id: str,
        is_paused: bool,
        pause_until: datetime | None,
    ) -> AutomationEntity | None:
        """Set pause flags; return updated automation or None when not found."""


# Automation run repository interface
class IAutomationRunRepository(Protocol):
    """Protocol for automation run history (session-bound)."""

    async def create_run(
        self,
        automation_id: str,
        tenant_id: str,
        triggered_by: dict[str, Any],
        started_at: datetime,
    ) -> AutomationRunResult:
        """Insert a RUNNING run with an empty actions_executed list."""

    async def complete_run(
        self,
        run_id: str,
        status: str,
        actions_executed: list[dict[str, Any]],
        error: str | None,
        completed_at: datetime,
    ) -> None:
        """Write terminal status, action outcomes and completed_at."""

    async def get_by_automation(
        self, automation_id: str, tenant_id: str, limit: int = 20
    ) -> list[AutomationRunResult]:
        """Return runs for automation, newest first."""

    async def fail_stale_runs(
        self, started_before: datetime, error: str, completed_at: datetime
    ) -> int:
        """Mark RUNNING runs started before cutoff as FAILED; return count."""


# Trigger router read side
class IAutomationReader(Protocol):
    """Loads trigger candidates in its own short transaction."""

    async def get_trigger_candidates(
        self, tenant_id: str, trigger: str
    ) -> list[AutomationEntity]:
        """Return enabled, unpaused automations of the tenant listening for trigger."""


# Stores used by action handlers (one transaction per call)
class ITaskStore(Protocol):
    """Task insert and status update."""

    async def create_task(
        self,
        tenant_id: str,
        title: str,
        *,
        description: str | None = None,
        urgency: str,
        created_by: str | None = None,
    ) -> TaskResult:
        """Insert a task in INBOX status."""

    async def update_status(self, task_id: str, tenant_id: str, status: str) -> bool:
        """Set task status; return False when no task matched."""


class IApprovalStore(Protocol):
    """Approval insert and status update."""

    async def create_approval(
        self,
        tenant_id: str,
        title: str,
        *,
        details: str | None = None,
        created_by: str | None = None,
    ) -> ApprovalResult:
        """Insert a PENDING approval request."""

    async def update_status(
        self, approval_id: str, tenant_id: str, status: str
    ) -> bool:
        """Set approval status; return False when no approval matched."""


class ICalendarEventStore(Protocol):
    """Calendar event insert."""

    async def create_event(
        self,
        tenant_id: str,
        title: str,
        start_at: datetime,
        end_at: datetime,
    ) -> CalendarEventResult:
        """Insert a calendar event."""


class ISmartLockStore(Protocol):
    """Smart lock lookup."""

    async def get_by_id_and_tenant(
        self, lock_id: str, tenant_id: str
    ) -> SmartLockResult | None:
        """Return lock (provider and credentials) or None."""
