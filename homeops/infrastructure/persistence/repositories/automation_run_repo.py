"""Automation run repository: run lifecycle writes and history reads."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from homeops.application.dtos.automation import AutomationRunResult
from homeops.infrastructure.persistence.models.automation import AutomationRun
from homeops.infrastructure.persistence.repositories.base import BaseRepository
from homeops.shared.enums import AutomationRunStatus
from homeops.shared.utils.datetime import ensure_utc


def _to_result(r: AutomationRun) -> AutomationRunResult:
    """Map AutomationRun ORM to AutomationRunResult DTO."""
    return AutomationRunResult(
        id=r.id,
        automation_id=r.automation_id,
        tenant_id=r.tenant_id,
        triggered_by=dict(r.triggered_by or {}),
        status=r.status,
        actions_executed=list(r.actions_executed or []),
        error=r.error,
        started_at=ensure_utc(r.started_at),
        completed_at=ensure_utc(r.completed_at),
    )


class AutomationRunRepository(BaseRepository[AutomationRun]):
    """Automation run repository. Implements IAutomationRunRepository."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, AutomationRun)

    async def create_run(
        self,
        automation_id: str,
        tenant_id: str,
        triggered_by: dict[str, Any],
        started_at: datetime,
    ) -> AutomationRunResult:
        run = AutomationRun(
            automation_id=automation_id,
            tenant_id=tenant_id,
            triggered_by=triggered_by,
            status=AutomationRunStatus.RUNNING.value,
            actions_executed=[],
            started_at=started_at,
        )
        return _to_result(await self.create(run))

    async def complete_run(
        self,
        run_id: str,
        status: str,
        actions_executed: list[dict[str, Any]],
        error: str | None,
        completed_at: datetime,
    ) -> None:
        await self.db.execute(
            update(AutomationRun)
            .execution_options(synchronize_session=False)
            .where(AutomationRun.id == run_id)
            .values(
                status=status,
                actions_executed=actions_executed,
                error=error,
                completed_at=completed_at,
            )
        )

    async def get_by_id_and_tenant(
        self, run_id: str, tenant_id: str
    ) -> AutomationRunResult | None:
        result = await self.db.execute(
            select(AutomationRun).where(
                AutomationRun.id == run_id,
                AutomationRun.tenant_id == tenant_id,
            )
        )
        row = result.scalar_one_or_none()
        return _to_result(row) if row else None

    async def get_by_automation(
        self, automation_id: str, tenant_id: str, limit: int = 20
    ) -> list[AutomationRunResult]:
        result = await self.db.execute(
            select(AutomationRun)
            .where(
                AutomationRun.automation_id == automation_id,
                AutomationRun.tenant_id == tenant_id,
            )
            .order_by(AutomationRun.started_at.desc(), AutomationRun.id.desc())
            .limit(limit)
        )
        return [_to_result(r) for r in result.scalars().all()]

    async def fail_stale_runs(
        self, started_before: datetime, error: str, completed_at: datetime
    ) -> int:
        """Mark RUNNING runs started before cutoff as FAILED. Returns rows updated."""
        result = await self.db.execute(
            update(AutomationRun)
            .execution_options(synchronize_session=False)
            .where(
                AutomationRun.status == AutomationRunStatus.RUNNING.value,
                AutomationRun.started_at < started_before,
            )
            .values(
                status=AutomationRunStatus.FAILED.value,
                error=error,
                completed_at=completed_at,
            )
        )
        return result.rowcount or 0
