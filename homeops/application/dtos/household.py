"""DTOs for household records that automation actions create or update."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class TaskResult:
    """Task created by create-task or completed by complete-task."""

    id: str
    tenant_id: str
    title: str
    description: str | None
    status: str
    urgency: str
    created_by: str | None
    created_at: datetime


@dataclass(frozen=True)
class ApprovalResult:
    """Approval request created by create-approval or approved by auto-approve."""

    id: str
    tenant_id: str
    title: str
    details: str | None
    status: str
    created_by: str | None
    created_at: datetime


@dataclass(frozen=True)
class CalendarEventResult:
    """Calendar event created by add-calendar-event."""

    id: str
    tenant_id: str
    title: str
    start_at: datetime
    end_at: datetime


@dataclass(frozen=True)
class SmartLockResult:
    """Smart lock as seen by lock-door / unlock-door (provider + credentials)."""

    id: str
    tenant_id: str
    name: str
    provider: str
    external_id: str | None
    access_token: str | None


@dataclass(frozen=True)
class LockCommand:
    """Command passed to a smart-lock provider."""

    lock_id: str
    external_id: str
    access_token: str
