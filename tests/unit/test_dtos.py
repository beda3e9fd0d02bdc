"""Unit tests for automation DTO serialization shapes."""

from datetime import UTC, datetime

from homeops.application.dtos.automation import (
    ActionConfig,
    ActionExecutionRecord,
    ActionResult,
    TriggerEvent,
)
from homeops.shared.enums import ActionOutcomeStatus


def test_trigger_event_snapshot_is_json_safe() -> None:
    """Non-JSON values (datetimes) become strings in the stored snapshot."""
    when = datetime(2026, 1, 2, 3, 4, 5, tzinfo=UTC)
    event = TriggerEvent(
        type="document-expiring",
        tenant_id="t1",
        data={"expiryDate": when, "daysUntilExpiry": 7},
        property_id="p1",
    )
    assert event.to_dict() == {
        "type": "document-expiring",
        "tenant_id": "t1",
        "property_id": "p1",
        "data": {"expiryDate": str(when), "daysUntilExpiry": 7},
    }


def test_action_config_from_dict_tolerates_missing_fields() -> None:
    assert ActionConfig.from_dict({"type": "log-event"}) == ActionConfig(
        type="log-event", config={}, order=0
    )
    assert ActionConfig.from_dict({"type": "x", "order": 2.0, "config": None}).order == 2
    assert ActionConfig.from_dict({"type": "x", "order": "3"}).order == 0


def test_action_result_constructors() -> None:
    assert ActionResult.ok() == ActionResult(success=True)
    failed = ActionResult.fail("nope", result={"status": 500})
    assert failed.success is False
    assert failed.error == "nope"
    assert failed.result == {"status": 500}


def test_execution_record_omits_unset_fields() -> None:
    at = datetime(2026, 1, 1, tzinfo=UTC)
    ok = ActionExecutionRecord(
        type="create-task",
        status=ActionOutcomeStatus.SUCCESS,
        executed_at=at,
        result={"task_id": "t1"},
    )
    assert ok.to_dict() == {
        "type": "create-task",
        "status": "SUCCESS",
        "executed_at": at.isoformat(),
        "result": {"task_id": "t1"},
    }
    failed = ActionExecutionRecord(
        type="send-notification",
        status=ActionOutcomeStatus.FAILED,
        executed_at=at,
        error="missing user id for notification",
    )
    assert "result" not in failed.to_dict()
    assert failed.to_dict()["error"] == "missing user id for notification"
