"""Application DTOs (no dependency on ORM)."""

from homeops.application.dtos.automation import (
    ActionConfig,
    ActionExecutionRecord,
    ActionResult,
    AutomationRunResult,
    StaleRunSweepResult,
    TriggerEvent,
)
from homeops.application.dtos.household import (
    ApprovalResult,
    CalendarEventResult,
    LockCommand,
    SmartLockResult,
    TaskResult,
)

__all__ = [
    "ActionConfig",
    "ActionExecutionRecord",
    "ActionResult",
    "ApprovalResult",
    "AutomationRunResult",
    "CalendarEventResult",
    "LockCommand",
    "SmartLockResult",
    "StaleRunSweepResult",
    "TaskResult",
    "TriggerEvent",
]
