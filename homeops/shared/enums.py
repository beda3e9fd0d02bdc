"""Shared enumerations for the automation engine.

Cross-cutting enums used by application and infrastructure (triggers,
action types, run status, and the statuses of records actions touch).
"""

from enum import Enum


class _ValuesMixin:
    """Mixin that adds a values() classmethod to str Enums."""

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid values as strings."""
        return [member.value for member in cls]


class AutomationTrigger(_ValuesMixin, str, Enum):
    """Known trigger types raised by event sources.

    Automations store the trigger as a plain string, so emitters may use
    types not listed here.
    """

    TASK_OVERDUE = "task-overdue"
    TASK_COMPLETED = "task-completed"
    CLEANING_COMPLETED = "cleaning-completed"
    APPROVAL_PENDING_HOURS = "approval-pending-hours"
    APPROVAL_CREATED = "approval-created"
    BUDGET_THRESHOLD = "budget-threshold"
    SPENDING_CREATED = "spending-created"
    GUEST_ACCESS_STARTED = "guest-access-started"
    DOCUMENT_EXPIRING = "document-expiring"
    SCHEDULE_TIME = "schedule-time"


class AutomationActionType(_ValuesMixin, str, Enum):
    """Action-type tags understood by the action executor."""

    SEND_NOTIFICATION = "send-notification"
    CREATE_TASK = "create-task"
    COMPLETE_TASK = "complete-task"
    CREATE_APPROVAL = "create-approval"
    AUTO_APPROVE = "auto-approve"
    LOCK_DOOR = "lock-door"
    UNLOCK_DOOR = "unlock-door"
    ADD_CALENDAR_EVENT = "add-calendar-event"
    TRIGGER_WEBHOOK = "trigger-webhook"
    LOG_EVENT = "log-event"
    SEND_EMAIL = "send-email"
    SEND_SMS = "send-sms"
    UPDATE_BUDGET = "update-budget"


class AutomationRunStatus(_ValuesMixin, str, Enum):
    """Automation run lifecycle status. RUNNING is the only non-terminal state."""

    RUNNING = "RUNNING"
    SUCCESS = "SUCCESS"
    FAILED = "FAILED"


class ActionOutcomeStatus(_ValuesMixin, str, Enum):
    """Outcome of a single executed action within a run."""

    SUCCESS = "SUCCESS"
    FAILED = "FAILED"


class TaskStatus(_ValuesMixin, str, Enum):
    """Household task status."""

    INBOX = "INBOX"
    PLANNED = "PLANNED"
    IN_PROGRESS = "IN_PROGRESS"
    WAITING_ON = "WAITING_ON"
    DONE = "DONE"


class TaskPriority(_ValuesMixin, str, Enum):
    """Task urgency."""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class ApprovalStatus(_ValuesMixin, str, Enum):
    """Approval request status."""

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    DECLINED = "DECLINED"


class LockProviderName(_ValuesMixin, str, Enum):
    """Smart-lock vendors with a registered provider. OTHER is the fallback."""

    AUGUST = "AUGUST"
    SCHLAGE = "SCHLAGE"
    YALE = "YALE"
    LEVEL = "LEVEL"
    OTHER = "OTHER"
