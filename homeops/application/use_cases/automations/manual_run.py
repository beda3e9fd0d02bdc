"""Manual test run: execute one automation against sample event data."""

from __future__ import annotations

from datetime import timedelta
from typing import TYPE_CHECKING, Any

from homeops.application.dtos.automation import AutomationRunResult, TriggerEvent
from homeops.core.config import get_settings
from homeops.domain.entities.automation import AutomationEntity
from homeops.domain.exceptions import ResourceNotFoundException
from homeops.shared.utils.datetime import utc_now

if TYPE_CHECKING:
    from homeops.application.interfaces.repositories import IAutomationRepository
    from homeops.application.interfaces.services import IAutomationEngine

def build_test_event(
    automation: AutomationEntity,
    user_id: str,
    test_data: dict[str, Any] | None = None,
) -> TriggerEvent:
    """Sample event for automation's trigger; test_data overrides the sample fields."""
    data: dict[str, Any] = {
        "userId": user_id,
        "taskTitle": "Test Task",
        "amount": 100,
        "guestName": "Test Guest",
        "documentName": "Test Document",
        "daysUntilExpiry": 7,
        "expiryDate": (utc_now() + timedelta(days=7)).isoformat(),
        "threshold": 80,
        "pendingHours": 24,
    }
    data.update(test_data or {})
    return TriggerEvent(
        type=automation.trigger,
        tenant_id=automation.tenant_id,
        data=data,
        property_id=automation.property_id,
    )


class ManualAutomationRunUseCase:
    """Runs a single automation on demand, bypassing pause and condition filters."""

    def __init__(
        self,
        automation_repo: "IAutomationRepository",
        engine: "IAutomationEngine",
        *,
        default_user_id: str | None = None,
    ) -> None:
        self._automation_repo = automation_repo
        self._engine = engine
        self._default_user_id = default_user_id or get_settings().test_run_user_id

    async def execute(
        self,
        tenant_id: str,
        automation_id: str,
        user_id: str | None = None,
        test_data: dict[str, Any] | None = None,
    ) -> AutomationRunResult | None:
        """Execute the automation with sample data and return its finished run.

        Returns None when the run row could not be written (nothing executed).

        Raises:
            ResourceNotFoundException: Automation not found in tenant.
        """
        automation = await self._automation_repo.get_by_id_and_tenant(
            automation_id, tenant_id
        )
        if automation is None:
            raise ResourceNotFoundException("automation", automation_id)
        event = build_test_event(
            automation, user_id or self._default_user_id, test_data
        )
        return await self._engine.execute_automation(automation, event)
