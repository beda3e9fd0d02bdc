"""Starter automation templates: static blueprints exposed for UI population.

Read-only data. An automation instantiated from a template is stored and
executed like any other automation.
"""

from __future__ import annotations

import copy
from typing import Any

from homeops.domain.exceptions import ResourceNotFoundException
from homeops.shared.enums import AutomationActionType as A
from homeops.shared.enums import AutomationTrigger as T

_AUTOMATION_TEMPLATES: list[dict[str, Any]] = [
    {
        "id": "lock-after-cleaning",
        "name": "Lock After Cleaning",
        "description": "Automatically lock all doors when cleaning is completed",
        "icon": "lock",
        "color": "green",
        "trigger": T.CLEANING_COMPLETED.value,
        "trigger_config": {},
        "actions": [
            {"type": A.LOCK_DOOR.value, "config": {"lock_id": ""}, "order": 1},
            {
                "type": A.SEND_NOTIFICATION.value,
                "config": {
                    "title": "Cleaning Complete",
                    "body": "Doors have been locked after cleaning session",
                },
                "order": 2,
            },
        ],
    },
    {
        "id": "approval-reminder",
        "name": "Approval Reminder",
        "description": "Send a notification when an approval has been pending for too long",
        "icon": "clock",
        "color": "amber",
        "trigger": T.APPROVAL_PENDING_HOURS.value,
        "trigger_config": {"pending_hours": 24},
        "actions": [
            {
                "type": A.SEND_NOTIFICATION.value,
                "config": {
                    "title": "Pending Approval",
                    "body": "An approval has been waiting for {{pendingHours}} hours",
                },
                "order": 1,
            },
        ],
    },
    {
        "id": "budget-alert",
        "name": "Budget Alert",
        "description": "Get notified when spending reaches a budget threshold",
        "icon": "alert-triangle",
        "color": "red",
        "trigger": T.BUDGET_THRESHOLD.value,
        "trigger_config": {"threshold": 80},
        "actions": [
            {
                "type": A.SEND_NOTIFICATION.value,
                "config": {
                    "title": "Budget Warning",
                    "body": "Spending has reached {{threshold}}% of budget",
                },
                "order": 1,
            },
        ],
    },
    {
        "id": "task-overdue-escalate",
        "name": "Overdue Task Escalation",
        "description": "Create an approval request when a task becomes overdue",
        "icon": "alert-circle",
        "color": "orange",
        "trigger": T.TASK_OVERDUE.value,
        "trigger_config": {},
        "actions": [
            {
                "type": A.CREATE_APPROVAL.value,
                "config": {
                    "title": "Overdue Task: {{taskTitle}}",
                    "description": "Task '{{taskTitle}}' is overdue and needs attention",
                },
                "order": 1,
            },
            {
                "type": A.SEND_NOTIFICATION.value,
                "config": {
                    "title": "Task Overdue",
                    "body": "{{taskTitle}} needs your attention",
                },
                "order": 2,
            },
        ],
    },
    {
        "id": "guest-arrival",
        "name": "Guest Arrival Prep",
        "description": "Unlock the door and create welcome tasks when a guest arrives",
        "icon": "users",
        "color": "blue",
        "trigger": T.GUEST_ACCESS_STARTED.value,
        "trigger_config": {},
        "actions": [
            {"type": A.UNLOCK_DOOR.value, "config": {"lock_id": ""}, "order": 1},
            {
                "type": A.CREATE_TASK.value,
                "config": {
                    "title": "Welcome guest {{guestName}}",
                    "description": "Prepare welcome amenities",
                    "priority": "HIGH",
                },
                "order": 2,
            },
            {
                "type": A.SEND_NOTIFICATION.value,
                "config": {
                    "title": "Guest Arriving",
                    "body": "{{guestName}} has arrived. Door unlocked.",
                },
                "order": 3,
            },
        ],
    },
    {
        "id": "document-expiry",
        "name": "Document Expiry Alert",
        "description": "Get notified before important documents expire",
        "icon": "file-warning",
        "color": "yellow",
        "trigger": T.DOCUMENT_EXPIRING.value,
        "trigger_config": {"document_days_before": 30},
        "actions": [
            {
                "type": A.SEND_NOTIFICATION.value,
                "config": {
                    "title": "Document Expiring",
                    "body": "{{documentName}} expires in {{daysUntilExpiry}} days",
                },
                "order": 1,
            },
            {
                "type": A.CREATE_TASK.value,
                "config": {
                    "title": "Renew: {{documentName}}",
                    "description": "Document expires on {{expiryDate}}",
                    "priority": "HIGH",
                },
                "order": 2,
            },
        ],
    },
    {
        "id": "spending-webhook",
        "name": "Spending Webhook",
        "description": "Send spending data to an external accounting system",
        "icon": "webhook",
        "color": "purple",
        "trigger": T.SPENDING_CREATED.value,
        "trigger_config": {},
        "actions": [
            {"type": A.TRIGGER_WEBHOOK.value, "config": {"url": ""}, "order": 1},
            {
                "type": A.LOG_EVENT.value,
                "config": {
                    "message": "Spending of {{amount}} logged and sent to webhook"
                },
                "order": 2,
            },
        ],
    },
    {
        "id": "daily-morning-routine",
        "name": "Morning Routine",
        "description": "Unlock doors, create daily task checklist every weekday morning",
        "icon": "sunrise",
        "color": "sky",
        "trigger": T.SCHEDULE_TIME.value,
        "trigger_config": {"schedule_time": "07:00", "schedule_days": [1, 2, 3, 4, 5]},
        "actions": [
            {"type": A.UNLOCK_DOOR.value, "config": {"lock_id": ""}, "order": 1},
            {
                "type": A.CREATE_TASK.value,
                "config": {
                    "title": "Morning household check",
                    "description": "Check mail, water plants, review schedule",
                    "priority": "MEDIUM",
                },
                "order": 2,
            },
        ],
    },
]


def list_automation_templates() -> list[dict[str, Any]]:
    """Return all starter templates (deep copies; callers may mutate them)."""
    return copy.deepcopy(_AUTOMATION_TEMPLATES)


def get_automation_template(template_id: str) -> dict[str, Any]:
    """Return one template by id. Raises ResourceNotFoundException if unknown."""
    normalized = (template_id or "").strip().lower()
    for template in _AUTOMATION_TEMPLATES:
        if template["id"] == normalized:
            return copy.deepcopy(template)
    raise ResourceNotFoundException("automation_template", template_id)
