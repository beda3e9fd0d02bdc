"""Persistence repositories. Re-exports for dependency injection."""

from homeops.infrastructure.persistence.repositories.automation_repo import (
    AutomationRepository,
)
from homeops.infrastructure.persistence.repositories.automation_run_repo import (
    AutomationRunRepository,
)
from homeops.infrastructure.persistence.repositories.base import BaseRepository
from homeops.infrastructure.persistence.repositories.household_repo import (
    ApprovalRepository,
    CalendarEventRepository,
    SmartLockRepository,
    TaskRepository,
)

__all__ = [
    "ApprovalRepository",
    "AutomationRepository",
    "AutomationRunRepository",
    "BaseRepository",
    "CalendarEventRepository",
    "SmartLockRepository",
    "TaskRepository",
]
