"""Pause and resume an automation."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import TYPE_CHECKING

from homeops.core.config import get_settings
from homeops.domain.entities.automation import AutomationEntity
from homeops.domain.exceptions import ResourceNotFoundException, ValidationException
from homeops.shared.utils.datetime import ensure_utc, utc_now

if TYPE_CHECKING:
    from homeops.application.interfaces.repositories import IAutomationRepository


class PauseAutomationUseCase:
    """Sets or clears an automation's pause flags.

    Pausing sets is_paused and a pause_until deadline; resuming clears both.
    The trigger router skips paused automations.
    """

    def __init__(
        self,
        automation_repo: "IAutomationRepository",
        *,
        default_pause_hours: int | None = None,
    ) -> None:
        self._automation_repo = automation_repo
        if default_pause_hours is None:
            default_pause_hours = get_settings().default_pause_hours
        self._default_pause = timedelta(hours=default_pause_hours)

    async def pause(
        self,
        tenant_id: str,
        automation_id: str,
        until: datetime | None = None,
    ) -> AutomationEntity:
        """Pause until the given time (default: now + default_pause_hours).

        Raises:
            ValidationException: until is not in the future.
            ResourceNotFoundException: Automation not found in tenant.
        """
        now = utc_now()
        pause_until = ensure_utc(until) or now + self._default_pause
        if pause_until <= now:
            raise ValidationException(
                "pause_until must be in the future", field="pause_until"
            )
        updated = await self._automation_repo.set_paused(
            automation_id, tenant_id, True, pause_until
        )
        if updated is None:
            raise ResourceNotFoundException("automation", automation_id)
        return updated

    async def resume(self, tenant_id: str, automation_id: str) -> AutomationEntity:
        """Clear is_paused and pause_until.

        Raises:
            ResourceNotFoundException: Automation not found in tenant.
        """
        updated = await self._automation_repo.set_paused(
            automation_id, tenant_id, False, None
        )
        if updated is None:
            raise ResourceNotFoundException("automation", automation_id)
        return updated
