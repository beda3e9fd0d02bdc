"""Session-scoped stores: each call runs in its own short transaction.

The engine and action handlers depend on these rather than on a shared
session, so a failing insert in one action is rolled back on its own and the
run can still be recorded.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import datetime

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from homeops.application.dtos.household import (
    ApprovalResult,
    CalendarEventResult,
    SmartLockResult,
    TaskResult,
)
from homeops.domain.entities.automation import AutomationEntity
from homeops.infrastructure.persistence.repositories import (
    ApprovalRepository,
    AutomationRepository,
    CalendarEventRepository,
    SmartLockRepository,
    TaskRepository,
)


class _SessionScopedStore:
    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    @asynccontextmanager
    async def _transaction(self) -> AsyncIterator[AsyncSession]:
        async with self._session_factory() as session:
            async with session.begin():
                yield session


class SqlAutomationReader(_SessionScopedStore):
    """Implements IAutomationReader."""

    async def get_trigger_candidates(
        self, tenant_id: str, trigger: str
    ) -> list[AutomationEntity]:
        async with self._transaction() as session:
            return await AutomationRepository(session).get_trigger_candidates(
                tenant_id, trigger
            )


class SqlTaskStore(_SessionScopedStore):
    """Implements ITaskStore."""

    async def create_task(
        self,
        tenant_id: str,
        title: str,
        *,
        description: str | None = None,
        urgency: str,
        created_by: str | None = None,
    ) -> TaskResult:
        async with self._transaction() as session:
            return await TaskRepository(session).create_task(
                tenant_id,
                title,
                description=description,
                urgency=urgency,
                created_by=created_by,
            )

    async def update_status(self, task_id: str, tenant_id: str, status: str) -> bool:
        async with self._transaction() as session:
            return await TaskRepository(session).update_status(task_id, tenant_id, status)


class SqlApprovalStore(_SessionScopedStore):
    """Implements IApprovalStore."""

    async def create_approval(
        self,
        tenant_id: str,
        title: str,
        *,
        details: str | None = None,
        created_by: str | None = None,
    ) -> ApprovalResult:
        async with self._transaction() as session:
            return await ApprovalRepository(session).create_approval(
                tenant_id, title, details=details, created_by=created_by
            )

    async def update_status(
        self, approval_id: str, tenant_id: str, status: str
    ) -> bool:
        async with self._transaction() as session:
            return await ApprovalRepository(session).update_status(
                approval_id, tenant_id, status
            )


class SqlCalendarEventStore(_SessionScopedStore):
    """Implements ICalendarEventStore."""

    async def create_event(
        self,
        tenant_id: str,
        title: str,
        start_at: datetime,
        end_at: datetime,
    ) -> CalendarEventResult:
        async with self._transaction() as session:
            return await CalendarEventRepository(session).create_event(
                tenant_id, title, start_at, end_at
            )


class SqlSmartLockStore(_SessionScopedStore):
    """Implements ISmartLockStore."""

    async def get_by_id_and_tenant(
        self, lock_id: str, tenant_id: str
    ) -> SmartLockResult | None:
        async with self._transaction() as session:
            return await SmartLockRepository(session).get_by_id_and_tenant(
                lock_id, tenant_id
            )
