"""End-to-end automation engine scenarios against in-memory SQLite.

The engine is built with create_automation_engine, so every store and the
run recorder open their own sessions on the shared test database.
"""

from datetime import timedelta
from unittest.mock import AsyncMock

import httpx
import pytest

from homeops.application.dtos.automation import TriggerEvent
from homeops.application.use_cases.automations import (
    ListAutomationRunsUseCase,
    PauseAutomationUseCase,
    ReconcileStaleRunsUseCase,
    ManualAutomationRunUseCase,
)
from homeops.core.config import Settings
from homeops.infrastructure.persistence.repositories import (
    ApprovalRepository,
    AutomationRepository,
    AutomationRunRepository,
    SmartLockRepository,
    TaskRepository,
)
from homeops.infrastructure.services import create_automation_engine
from homeops.shared.utils.datetime import utc_now

TENANT_ID = "t1"

pytestmark = pytest.mark.requires_db


@pytest.fixture
async def http_client():
    async with httpx.AsyncClient(
        transport=httpx.MockTransport(lambda request: httpx.Response(200))
    ) as client:
        yield client


@pytest.fixture
def notifier() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def engine(session_factory, http_client, notifier):
    return create_automation_engine(
        session_factory,
        http_client,
        notification_service=notifier,
        settings=Settings(_env_file=None, database_url="sqlite+aiosqlite://"),
    )


@pytest.fixture
def create_automation(session_factory):
    async def _create(name: str = "automation", trigger: str = "task-overdue", **kwargs):
        actions = kwargs.pop("actions", [])
        async with session_factory() as session:
            async with session.begin():
                return await AutomationRepository(session).create_automation(
                    kwargs.pop("tenant_id", TENANT_ID), name, trigger, actions, **kwargs
                )

    return _create


async def _runs(session_factory, automation_id: str):
    async with session_factory() as session:
        return await AutomationRunRepository(session).get_by_automation(
            automation_id, TENANT_ID
        )


async def _automation(session_factory, automation_id: str):
    async with session_factory() as session:
        return await AutomationRepository(session).get_by_id_and_tenant(
            automation_id, TENANT_ID
        )


async def test_overdue_task_creates_interpolated_approval(
    engine, session_factory, create_automation
) -> None:
    """A matching event runs the pipeline and the approval title is interpolated."""
    automation = await create_automation(
        actions=[
            {
                "type": "create-approval",
                "config": {"title": "Overdue Task: {{taskTitle}}"},
                "order": 1,
            }
        ]
    )
    runs = await engine.process_trigger(
        TriggerEvent(
            type="task-overdue", tenant_id=TENANT_ID, data={"taskTitle": "Pay invoice"}
        )
    )

    assert len(runs) == 1
    assert runs[0].status == "SUCCESS"
    stored = await _runs(session_factory, automation.id)
    assert len(stored) == 1
    assert stored[0].status == "SUCCESS"
    assert stored[0].completed_at is not None
    assert len(stored[0].actions_executed) == 1
    assert stored[0].actions_executed[0]["type"] == "create-approval"
    assert stored[0].actions_executed[0]["status"] == "SUCCESS"
    assert stored[0].triggered_by["data"] == {"taskTitle": "Pay invoice"}

    async with session_factory() as session:
        approvals = await ApprovalRepository(session).get_by_tenant(TENANT_ID)
    assert [a.title for a in approvals] == ["Overdue Task: Pay invoice"]
    assert approvals[0].status == "PENDING"

    refreshed = await _automation(session_factory, automation.id)
    assert refreshed.run_count == 1
    assert refreshed.last_run_status == "SUCCESS"
    assert refreshed.last_run_error is None
    assert refreshed.last_run_at is not None


async def test_failed_action_stops_pipeline(
    engine, session_factory, create_automation, notifier
) -> None:
    """send-notification without a target fails; log-event is never recorded."""
    automation = await create_automation(
        actions=[
            {"type": "send-notification", "config": {"title": "x"}, "order": 1},
            {"type": "log-event", "config": {"message": "never"}, "order": 2},
        ]
    )
    await engine.process_trigger(TriggerEvent(type="task-overdue", tenant_id=TENANT_ID))

    stored = await _runs(session_factory, automation.id)
    assert len(stored) == 1
    assert stored[0].status == "FAILED"
    assert stored[0].actions_executed == [
        {
            "type": "send-notification",
            "status": "FAILED",
            "executed_at": stored[0].actions_executed[0]["executed_at"],
            "error": "missing user id for notification",
        }
    ]
    assert stored[0].error == "missing user id for notification"
    notifier.send.assert_not_awaited()

    refreshed = await _automation(session_factory, automation.id)
    assert refreshed.run_count == 1
    assert refreshed.last_run_status == "FAILED"
    assert refreshed.last_run_error == "missing user id for notification"


async def test_condition_mismatch_creates_no_run(
    engine, session_factory, create_automation
) -> None:
    automation = await create_automation(
        conditions={"minAmount": 100},
        actions=[{"type": "log-event", "config": {}, "order": 1}],
    )
    runs = await engine.process_trigger(
        TriggerEvent(type="task-overdue", tenant_id=TENANT_ID, data={"amount": 50})
    )
    assert runs == []
    assert await _runs(session_factory, automation.id) == []
    assert (await _automation(session_factory, automation.id)).run_count == 0


async def test_two_matching_automations_run_independently(
    engine, session_factory, create_automation
) -> None:
    """A failure in one automation does not affect the other's run."""
    failing = await create_automation(
        "failing",
        actions=[{"type": "complete-task", "config": {"taskId": "nope"}, "order": 1}],
    )
    succeeding = await create_automation(
        "succeeding",
        actions=[{"type": "create-task", "config": {"title": "Follow up"}, "order": 1}],
    )
    runs = await engine.process_trigger(
        TriggerEvent(type="task-overdue", tenant_id=TENANT_ID)
    )
    assert len(runs) == 2

    failed_runs = await _runs(session_factory, failing.id)
    ok_runs = await _runs(session_factory, succeeding.id)
    assert [r.status for r in failed_runs] == ["FAILED"]
    assert failed_runs[0].error == "task nope not found"
    assert [r.status for r in ok_runs] == ["SUCCESS"]
    task_id = ok_runs[0].actions_executed[0]["result"]["task_id"]

    async with session_factory() as session:
        task = await TaskRepository(session).get_by_id_and_tenant(task_id, TENANT_ID)
    assert task.title == "Follow up"
    assert task.status == "INBOX"
    assert task.urgency == "MEDIUM"


async def test_paused_flag_wins_over_expired_pause_until(
    engine, session_factory, create_automation
) -> None:
    """is_paused excludes the automation even when pause_until has passed."""
    automation = await create_automation(
        is_paused=True,
        pause_until=utc_now() - timedelta(hours=1),
        actions=[{"type": "log-event", "config": {}, "order": 1}],
    )
    runs = await engine.process_trigger(
        TriggerEvent(type="task-overdue", tenant_id=TENANT_ID)
    )
    assert runs == []
    assert await _runs(session_factory, automation.id) == []


async def test_future_pause_until_skips_and_resume_restores(
    engine, session_factory, create_automation
) -> None:
    automation = await create_automation(
        actions=[{"type": "log-event", "config": {}, "order": 1}]
    )
    async with session_factory() as session:
        async with session.begin():
            await PauseAutomationUseCase(AutomationRepository(session)).pause(
                TENANT_ID, automation.id
            )
    event = TriggerEvent(type="task-overdue", tenant_id=TENANT_ID)
    assert await engine.process_trigger(event) == []

    async with session_factory() as session:
        async with session.begin():
            resumed = await PauseAutomationUseCase(AutomationRepository(session)).resume(
                TENANT_ID, automation.id
            )
    assert resumed.is_paused is False
    assert resumed.pause_until is None
    assert len(await engine.process_trigger(event)) == 1


async def test_scope_and_tenant_isolation(engine, session_factory, create_automation) -> None:
    scoped = await create_automation(
        "scoped",
        property_id="villa",
        actions=[{"type": "log-event", "config": {}, "order": 1}],
    )
    await create_automation(
        "other tenant",
        tenant_id="t2",
        actions=[{"type": "log-event", "config": {}, "order": 1}],
    )
    runs = await engine.process_trigger(
        TriggerEvent(type="task-overdue", tenant_id=TENANT_ID, property_id="cabin")
    )
    assert runs == []

    runs = await engine.process_trigger(
        TriggerEvent(type="task-overdue", tenant_id=TENANT_ID, property_id="villa")
    )
    assert [r.automation_id for r in runs] == [scoped.id]


async def test_lock_door_uses_tenant_lock(
    engine, session_factory, create_automation
) -> None:
    async with session_factory() as session:
        async with session.begin():
            lock = await SmartLockRepository(session).create_lock(
                TENANT_ID, "Front door", provider="AUGUST", external_id="aug_1"
            )
    automation = await create_automation(
        trigger="cleaning-completed",
        actions=[{"type": "lock-door", "config": {"lock_id": lock.id}, "order": 1}],
    )
    await engine.process_trigger(
        TriggerEvent(type="cleaning-completed", tenant_id=TENANT_ID)
    )
    stored = await _runs(session_factory, automation.id)
    assert stored[0].status == "SUCCESS"
    assert stored[0].actions_executed[0]["result"] == {
        "lock_id": lock.id,
        "action": "lock-door",
    }


async def test_manual_test_run_bypasses_filters(
    engine, session_factory, create_automation, notifier
) -> None:
    """A test run executes a paused automation with sample data."""
    automation = await create_automation(
        is_paused=True,
        conditions={"minAmount": 1000},
        actions=[
            {
                "type": "send-notification",
                "config": {"body": "{{taskTitle}} ({{amount}})"},
                "order": 1,
            }
        ],
    )
    async with session_factory() as session:
        run = await ManualAutomationRunUseCase(AutomationRepository(session), engine).execute(
            TENANT_ID, automation.id, user_id="owner"
        )
    assert run.status == "SUCCESS"
    notifier.send.assert_awaited_once_with("owner", "Automation Alert", "Test Task (100)")

    async with session_factory() as session:
        history = await ListAutomationRunsUseCase(
            AutomationRepository(session), AutomationRunRepository(session)
        ).execute(TENANT_ID, automation.id)
    assert [r.id for r in history] == [run.id]


async def test_reconcile_marks_orphaned_running_rows(
    session_factory, create_automation
) -> None:
    automation = await create_automation()
    async with session_factory() as session:
        async with session.begin():
            orphan = await AutomationRunRepository(session).create_run(
                automation.id, TENANT_ID, {}, utc_now() - timedelta(hours=2)
            )
    async with session_factory() as session:
        async with session.begin():
            result = await ReconcileStaleRunsUseCase(
                AutomationRunRepository(session), stale_after_minutes=60
            ).execute()
    assert result.runs_failed == 1

    stored = await _runs(session_factory, automation.id)
    assert stored[0].id == orphan.id
    assert stored[0].status == "FAILED"
    assert stored[0].error == "run abandoned: no completion recorded"
    assert stored[0].completed_at is not None
