"""Unit tests for the starter automation template catalog."""

import pytest

from homeops.application.services.automation_templates import (
    get_automation_template,
    list_automation_templates,
)
from homeops.domain.exceptions import ResourceNotFoundException
from homeops.shared.enums import AutomationActionType, AutomationTrigger


def test_catalog_has_the_eight_starter_templates() -> None:
    ids = [t["id"] for t in list_automation_templates()]
    assert ids == [
        "lock-after-cleaning",
        "approval-reminder",
        "budget-alert",
        "task-overdue-escalate",
        "guest-arrival",
        "document-expiry",
        "spending-webhook",
        "daily-morning-routine",
    ]


def test_templates_use_known_triggers_and_action_types() -> None:
    triggers = set(AutomationTrigger.values())
    action_types = set(AutomationActionType.values())
    for template in list_automation_templates():
        assert template["trigger"] in triggers
        assert template["actions"], template["id"]
        for action in template["actions"]:
            assert action["type"] in action_types
            assert isinstance(action["order"], int)


def test_list_returns_copies() -> None:
    """Mutating a returned template does not change the catalog."""
    first = list_automation_templates()
    first[0]["actions"].clear()
    assert list_automation_templates()[0]["actions"]


def test_get_template_by_id() -> None:
    template = get_automation_template("spending-webhook")
    assert template["trigger"] == "spending-created"
    template["name"] = "changed"
    assert get_automation_template("spending-webhook")["name"] == "Spending Webhook"


def test_get_unknown_template_raises() -> None:
    with pytest.raises(ResourceNotFoundException) as exc_info:
        get_automation_template("does-not-exist")
    assert exc_info.value.details["resource_type"] == "automation_template"
