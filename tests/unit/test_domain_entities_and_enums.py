"""Tests for the automation entity rules and shared enums."""

from datetime import timedelta

from homeops.domain.entities.automation import AutomationEntity
from homeops.shared.enums import (
    AutomationActionType,
    AutomationRunStatus,
    AutomationTrigger,
    LockProviderName,
)
from homeops.shared.utils.datetime import utc_now


def _automation(**kwargs) -> AutomationEntity:
    fields = {
        "id": "a1",
        "tenant_id": "t1",
        "name": "n",
        "trigger": "task-overdue",
        "actions": [],
    }
    fields.update(kwargs)
    return AutomationEntity(**fields)


def test_is_paused_at_only_for_future_pause_until() -> None:
    """is_paused_at is true only while pause_until lies in the future."""
    now = utc_now()
    assert _automation().is_paused_at(now) is False
    assert _automation(pause_until=now + timedelta(hours=1)).is_paused_at(now) is True
    assert _automation(pause_until=now - timedelta(hours=1)).is_paused_at(now) is False


def test_applies_to_property_scope_rules() -> None:
    """Missing property on either side is tenant-wide; otherwise ids must match."""
    assert _automation().applies_to_property("p1") is True
    assert _automation(property_id="p1").applies_to_property(None) is True
    assert _automation(property_id="p1").applies_to_property("p1") is True
    assert _automation(property_id="p1").applies_to_property("p2") is False


def test_enum_values() -> None:
    """Enums expose their wire values."""
    assert "task-overdue" in AutomationTrigger.values()
    assert len(AutomationTrigger.values()) == 10
    assert len(AutomationActionType.values()) == 13
    assert AutomationActionType.ADD_CALENDAR_EVENT.value == "add-calendar-event"
    assert AutomationRunStatus.values() == ["RUNNING", "SUCCESS", "FAILED"]
    assert LockProviderName.OTHER.value == "OTHER"
