"""Persistence models: ORM entities and mixins."""

from homeops.infrastructure.persistence.models.automation import Automation, AutomationRun
from homeops.infrastructure.persistence.models.household import (
    Approval,
    CalendarEvent,
    SmartLock,
    Task,
)
from homeops.infrastructure.persistence.models.mixins import (
    CuidMixin,
    MultiTenantModel,
    TenantMixin,
    TimestampMixin,
)

__all__ = [
    "Approval",
    "Automation",
    "AutomationRun",
    "CalendarEvent",
    "SmartLock",
    "Task",
    "CuidMixin",
    "MultiTenantModel",
    "TenantMixin",
    "TimestampMixin",
]
