"""Automation repository: trigger candidates, pause flags and run statistics."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from homeops.domain.entities.automation import AutomationEntity
from homeops.infrastructure.persistence.models.automation import Automation
from homeops.infrastructure.persistence.repositories.base import BaseRepository
from homeops.shared.utils.datetime import ensure_utc


def _to_entity(a: Automation) -> AutomationEntity:
    """Map Automation ORM to domain entity (datetimes normalized to UTC)."""
    return AutomationEntity(
        id=a.id,
        tenant_id=a.tenant_id,
        property_id=a.property_id,
        name=a.name,
        description=a.description,
        trigger=a.trigger,
        trigger_config=dict(a.trigger_config or {}),
        conditions=a.conditions,
        actions=list(a.actions or []),
        is_enabled=a.is_enabled,
        is_paused=a.is_paused,
        pause_until=ensure_utc(a.pause_until),
        run_count=a.run_count,
        last_run_at=ensure_utc(a.last_run_at),
        last_run_status=a.last_run_status,
        last_run_error=a.last_run_error,
        created_by=a.created_by,
    )


class AutomationRepository(BaseRepository[Automation]):
    """Automation repository. Implements IAutomationRepository."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Automation)

    async def get_by_id_and_tenant(
        self, automation_id: str, tenant_id: str
    ) -> AutomationEntity | None:
        result = await self.db.execute(
            select(Automation).where(
                Automation.id == automation_id,
                Automation.tenant_id == tenant_id,
            )
        )
        row = result.scalar_one_or_none()
        return _to_entity(row) if row else None

    async def get_trigger_candidates(
        self, tenant_id: str, trigger: str
    ) -> list[AutomationEntity]:
        """Enabled and not flagged paused; pause_until is checked by the caller."""
        result = await self.db.execute(
            select(Automation)
            .where(
                Automation.tenant_id == tenant_id,
                Automation.trigger == trigger,
                Automation.is_enabled.is_(True),
                Automation.is_paused.is_(False),
            )
            .order_by(Automation.created_at.asc(), Automation.id)
        )
        return [_to_entity(a) for a in result.scalars().all()]

    async def create_automation(
        self,
        tenant_id: str,
        name: str,
        trigger: str,
        actions: list[dict[str, Any]],
        *,
        property_id: str | None = None,
        description: str | None = None,
        trigger_config: dict[str, Any] | None = None,
        conditions: dict[str, Any] | None = None,
        is_enabled: bool = True,
        is_paused: bool = False,
        pause_until: datetime | None = None,
        created_by: str | None = None,
    ) -> AutomationEntity:
        """Create automation; return created entity."""
        automation = Automation(
            tenant_id=tenant_id,
            property_id=property_id,
            name=name,
            description=description,
            trigger=trigger,
            trigger_config=trigger_config or {},
            conditions=conditions,
            actions=actions,
            is_enabled=is_enabled,
            is_paused=is_paused,
            pause_until=pause_until,
            created_by=created_by,
        )
        return _to_entity(await self.create(automation))

    async def record_run_outcome(
        self,
        automation_id: str,
        status: str,
        error: str | None,
        ran_at: datetime,
    ) -> None:
        """Increment run_count and overwrite last-run fields in one UPDATE.

        run_count is incremented in SQL so concurrent runs of the same
        automation never lose an increment.
        """
        await self.db.execute(
            update(Automation)
            .execution_options(synchronize_session=False)
            .where(Automation.id == automation_id)
            .values(
                run_count=Automation.run_count + 1,
                last_run_at=ran_at,
                last_run_status=status,
                last_run_error=error,
                updated_at=ran_at,
            )
        )

    async def set_paused(
        self,
        automation_id: str,
        tenant_id: str,
        is_paused: bool,
        pause_until: datetime | None,
    ) -> AutomationEntity | None:
        result = await self.db.execute(
            select(Automation).where(
                Automation.id == automation_id,
                Automation.tenant_id == tenant_id,
            )
        )
        automation = result.scalar_one_or_none()
        if automation is None:
            return None
        automation.is_paused = is_paused
        automation.pause_until = pause_until
        await self.db.flush()
        await self.db.refresh(automation)
        return _to_entity(automation)
