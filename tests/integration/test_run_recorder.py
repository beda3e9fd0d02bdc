"""RunRecorder integration tests: RUNNING row first, then outcome plus statistics."""

from unittest.mock import MagicMock

import pytest

from homeops.application.dtos.automation import ActionExecutionRecord, TriggerEvent
from homeops.infrastructure.persistence.repositories import (
    AutomationRepository,
    AutomationRunRepository,
)
from homeops.infrastructure.services.run_recorder import RunRecorder
from homeops.shared.enums import ActionOutcomeStatus
from homeops.shared.utils.datetime import utc_now

TENANT_ID = "hh_recorder"

pytestmark = pytest.mark.requires_db


async def _create_automation(session_factory):
    async with session_factory() as session:
        async with session.begin():
            return await AutomationRepository(session).create_automation(
                TENANT_ID, "recorded", "task-completed", []
            )


async def test_start_run_commits_running_row(session_factory) -> None:
    automation = await _create_automation(session_factory)
    event = TriggerEvent(
        type="task-completed", tenant_id=TENANT_ID, data={"taskId": "task_1"}
    )
    run = await RunRecorder(session_factory).start_run(automation, event)

    async with session_factory() as session:
        stored = await AutomationRunRepository(session).get_by_id_and_tenant(
            run.id, TENANT_ID
        )
    assert stored.status == "RUNNING"
    assert stored.completed_at is None
    assert stored.triggered_by == {
        "type": "task-completed",
        "tenant_id": TENANT_ID,
        "property_id": None,
        "data": {"taskId": "task_1"},
    }


async def test_finish_run_writes_outcome_and_statistics(session_factory) -> None:
    automation = await _create_automation(session_factory)
    recorder = RunRecorder(session_factory)
    run = await recorder.start_run(
        automation, TriggerEvent(type="task-completed", tenant_id=TENANT_ID)
    )
    record = ActionExecutionRecord(
        type="log-event", status=ActionOutcomeStatus.SUCCESS, executed_at=utc_now()
    )
    finished = await recorder.finish_run(run, "SUCCESS", [record], None)

    assert finished.status == "SUCCESS"
    assert finished.actions_executed == [record.to_dict()]
    async with session_factory() as session:
        stored = await AutomationRunRepository(session).get_by_id_and_tenant(
            run.id, TENANT_ID
        )
        refreshed = await AutomationRepository(session).get_by_id_and_tenant(
            automation.id, TENANT_ID
        )
    assert stored.status == "SUCCESS"
    assert stored.actions_executed == [record.to_dict()]
    assert stored.completed_at == finished.completed_at
    assert refreshed.run_count == 1
    assert refreshed.last_run_status == "SUCCESS"
    assert refreshed.last_run_at == finished.completed_at


async def test_finish_run_is_best_effort(session_factory) -> None:
    """A storage failure while finishing is logged, not raised."""
    automation = await _create_automation(session_factory)
    run = await RunRecorder(session_factory).start_run(
        automation, TriggerEvent(type="task-completed", tenant_id=TENANT_ID)
    )
    broken_factory = MagicMock(side_effect=RuntimeError("database unavailable"))

    finished = await RunRecorder(broken_factory).finish_run(run, "FAILED", [], "boom")

    assert finished.status == "FAILED"
    assert finished.error == "boom"
