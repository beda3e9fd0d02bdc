"""Shared utilities: enums, telemetry, and cross-cutting helpers.

Used by domain, application, and infrastructure. No business logic.
"""

from homeops.shared.enums import (
    ActionOutcomeStatus,
    ApprovalStatus,
    AutomationActionType,
    AutomationRunStatus,
    AutomationTrigger,
    LockProviderName,
    TaskPriority,
    TaskStatus,
)
from homeops.shared.utils import (
    ensure_utc,
    generate_cuid,
    interpolate,
    utc_now,
)

__all__ = [
    "ActionOutcomeStatus",
    "ApprovalStatus",
    "AutomationActionType",
    "AutomationRunStatus",
    "AutomationTrigger",
    "LockProviderName",
    "TaskPriority",
    "TaskStatus",
    "generate_cuid",
    "utc_now",
    "ensure_utc",
    "interpolate",
]
