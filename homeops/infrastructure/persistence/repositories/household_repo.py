"""Repositories for household records that automation actions create or update."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from homeops.application.dtos.household import (
    ApprovalResult,
    CalendarEventResult,
    SmartLockResult,
    TaskResult,
)
from homeops.infrastructure.persistence.models.household import (
    Approval,
    CalendarEvent,
    SmartLock,
    Task,
)
from homeops.infrastructure.persistence.repositories.base import BaseRepository
from homeops.shared.enums import ApprovalStatus, LockProviderName, TaskStatus
from homeops.shared.utils.datetime import ensure_utc, utc_now


def _task_result(t: Task) -> TaskResult:
    return TaskResult(
        id=t.id,
        tenant_id=t.tenant_id,
        title=t.title,
        description=t.description,
        status=t.status,
        urgency=t.urgency,
        created_by=t.created_by,
        created_at=ensure_utc(t.created_at),
    )


def _approval_result(a: Approval) -> ApprovalResult:
    return ApprovalResult(
        id=a.id,
        tenant_id=a.tenant_id,
        title=a.title,
        details=a.details,
        status=a.status,
        created_by=a.created_by,
        created_at=ensure_utc(a.created_at),
    )


class TaskRepository(BaseRepository[Task]):
    """Task repository (create-task, complete-task)."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Task)

    async def create_task(
        self,
        tenant_id: str,
        title: str,
        *,
        description: str | None = None,
        urgency: str,
        status: str = TaskStatus.INBOX.value,
        created_by: str | None = None,
    ) -> TaskResult:
        task = Task(
            tenant_id=tenant_id,
            title=title,
            description=description,
            urgency=urgency,
            status=status,
            created_by=created_by,
        )
        return _task_result(await self.create(task))

    async def get_by_id_and_tenant(self, task_id: str, tenant_id: str) -> TaskResult | None:
        result = await self.db.execute(
            select(Task).where(Task.id == task_id, Task.tenant_id == tenant_id)
        )
        row = result.scalar_one_or_none()
        return _task_result(row) if row else None

    async def update_status(self, task_id: str, tenant_id: str, status: str) -> bool:
        result = await self.db.execute(
            update(Task)
            .execution_options(synchronize_session=False)
            .where(Task.id == task_id, Task.tenant_id == tenant_id)
            .values(status=status, updated_at=utc_now())
        )
        return (result.rowcount or 0) > 0


class ApprovalRepository(BaseRepository[Approval]):
    """Approval repository (create-approval, auto-approve)."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Approval)

    async def create_approval(
        self,
        tenant_id: str,
        title: str,
        *,
        details: str | None = None,
        status: str = ApprovalStatus.PENDING.value,
        created_by: str | None = None,
    ) -> ApprovalResult:
        approval = Approval(
            tenant_id=tenant_id,
            title=title,
            details=details,
            status=status,
            created_by=created_by,
        )
        return _approval_result(await self.create(approval))

    async def get_by_id_and_tenant(
        self, approval_id: str, tenant_id: str
    ) -> ApprovalResult | None:
        result = await self.db.execute(
            select(Approval).where(
                Approval.id == approval_id, Approval.tenant_id == tenant_id
            )
        )
        row = result.scalar_one_or_none()
        return _approval_result(row) if row else None

    async def get_by_tenant(self, tenant_id: str) -> list[ApprovalResult]:
        result = await self.db.execute(
            select(Approval)
            .where(Approval.tenant_id == tenant_id)
            .order_by(Approval.created_at.asc(), Approval.id)
        )
        return [_approval_result(a) for a in result.scalars().all()]

    async def update_status(self, approval_id: str, tenant_id: str, status: str) -> bool:
        result = await self.db.execute(
            update(Approval)
            .execution_options(synchronize_session=False)
            .where(Approval.id == approval_id, Approval.tenant_id == tenant_id)
            .values(status=status, updated_at=utc_now())
        )
        return (result.rowcount or 0) > 0


class CalendarEventRepository(BaseRepository[CalendarEvent]):
    """Calendar event repository (add-calendar-event)."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, CalendarEvent)

    async def create_event(
        self,
        tenant_id: str,
        title: str,
        start_at: datetime,
        end_at: datetime,
    ) -> CalendarEventResult:
        event = await self.create(
            CalendarEvent(
                tenant_id=tenant_id, title=title, start_at=start_at, end_at=end_at
            )
        )
        return CalendarEventResult(
            id=event.id,
            tenant_id=event.tenant_id,
            title=event.title,
            start_at=ensure_utc(event.start_at),
            end_at=ensure_utc(event.end_at),
        )


class SmartLockRepository(BaseRepository[SmartLock]):
    """Smart lock repository (lock-door, unlock-door)."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, SmartLock)

    @staticmethod
    def _to_result(lock: SmartLock) -> SmartLockResult:
        return SmartLockResult(
            id=lock.id,
            tenant_id=lock.tenant_id,
            name=lock.name,
            provider=lock.provider,
            external_id=lock.external_id,
            access_token=lock.access_token,
        )

    async def create_lock(
        self,
        tenant_id: str,
        name: str,
        *,
        provider: str = LockProviderName.OTHER.value,
        external_id: str | None = None,
        access_token: str | None = None,
    ) -> SmartLockResult:
        lock = await self.create(
            SmartLock(
                tenant_id=tenant_id,
                name=name,
                provider=provider,
                external_id=external_id,
                access_token=access_token,
            )
        )
        return self._to_result(lock)

    async def get_by_id_and_tenant(
        self, lock_id: str, tenant_id: str
    ) -> SmartLockResult | None:
        result = await self.db.execute(
            select(SmartLock).where(
                SmartLock.id == lock_id, SmartLock.tenant_id == tenant_id
            )
        )
        row = result.scalar_one_or_none()
        return self._to_result(row) if row else None
