"""List an automation's run history (newest first)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from homeops.application.dtos.automation import AutomationRunResult
from homeops.domain.exceptions import ResourceNotFoundException, ValidationException

if TYPE_CHECKING:
    from homeops.application.interfaces.repositories import (
        IAutomationRepository,
        IAutomationRunRepository,
    )

DEFAULT_RUN_HISTORY_LIMIT = 20
MAX_RUN_HISTORY_LIMIT = 200


class ListAutomationRunsUseCase:
    """Returns recent runs of an automation within the tenant."""

    def __init__(
        self,
        automation_repo: "IAutomationRepository",
        run_repo: "IAutomationRunRepository",
    ) -> None:
        self._automation_repo = automation_repo
        self._run_repo = run_repo

    async def execute(
        self,
        tenant_id: str,
        automation_id: str,
        limit: int = DEFAULT_RUN_HISTORY_LIMIT,
    ) -> list[AutomationRunResult]:
        """Raises ResourceNotFoundException when the automation is not in the tenant."""
        if limit < 1 or limit > MAX_RUN_HISTORY_LIMIT:
            raise ValidationException(
                f"limit must be between 1 and {MAX_RUN_HISTORY_LIMIT}", field="limit"
            )
        automation = await self._automation_repo.get_by_id_and_tenant(
            automation_id, tenant_id
        )
        if automation is None:
            raise ResourceNotFoundException("automation", automation_id)
        return await self._run_repo.get_by_automation(automation_id, tenant_id, limit)
