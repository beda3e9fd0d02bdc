"""Household records touched by automation actions: task, approval, calendar event, smart lock."""

from datetime import datetime

from sqlalchemy import DateTime, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from homeops.infrastructure.persistence.database import Base
from homeops.infrastructure.persistence.models.mixins import MultiTenantModel
from homeops.shared.enums import ApprovalStatus, LockProviderName, TaskPriority, TaskStatus


class Task(MultiTenantModel, Base):
    """Household task. Table: task."""

    __tablename__ = "task"

    title: Mapped[str] = mapped_column(String(500), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(
        String(32), nullable=False, default=TaskStatus.INBOX.value
    )
    urgency: Mapped[str] = mapped_column(
        String(16), nullable=False, default=TaskPriority.MEDIUM.value
    )
    created_by: Mapped[str | None] = mapped_column(String, nullable=True)

    __table_args__ = (Index("ix_task_tenant_status", "tenant_id", "status"),)


class Approval(MultiTenantModel, Base):
    """Approval request. Table: approval."""

    __tablename__ = "approval"

    title: Mapped[str] = mapped_column(String(500), nullable=False)
    details: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(
        String(32), nullable=False, default=ApprovalStatus.PENDING.value
    )
    created_by: Mapped[str | None] = mapped_column(String, nullable=True)

    __table_args__ = (Index("ix_approval_tenant_status", "tenant_id", "status"),)


class CalendarEvent(MultiTenantModel, Base):
    """Calendar event. Table: calendar_event."""

    __tablename__ = "calendar_event"

    title: Mapped[str] = mapped_column(String(500), nullable=False)
    start_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    end_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)


class SmartLock(MultiTenantModel, Base):
    """Smart lock registered for a household. Table: smart_lock."""

    __tablename__ = "smart_lock"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    provider: Mapped[str] = mapped_column(
        String(32), nullable=False, default=LockProviderName.OTHER.value
    )
    external_id: Mapped[str | None] = mapped_column(String, nullable=True)
    access_token: Mapped[str | None] = mapped_column(Text, nullable=True)
