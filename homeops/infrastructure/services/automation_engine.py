"""Automation engine: routes trigger events to automations and runs their actions.

Implements IAutomationEngine. For each event the engine loads candidate
automations, drops paused, out-of-scope and non-matching ones, then runs
each survivor independently: the run row is written first, actions run in
order and stop at the first failure, and the outcome is recorded.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from homeops.application.dtos.automation import (
    ActionConfig,
    ActionExecutionRecord,
    AutomationRunResult,
    TriggerEvent,
)
from homeops.application.interfaces.repositories import IAutomationReader
from homeops.application.interfaces.services import IActionExecutor, IRunRecorder
from homeops.application.services.condition_matcher import matches
from homeops.domain.entities.automation import AutomationEntity
from homeops.domain.exceptions import ValidationException
from homeops.shared.enums import ActionOutcomeStatus, AutomationRunStatus
from homeops.shared.telemetry.logging import get_logger
from homeops.shared.utils.datetime import utc_now

logger = get_logger(__name__)


@dataclass(frozen=True)
class InvalidActionEntry:
    """Stored action entry that could not be parsed; running it fails the run."""

    position: int
    type: str = ""
    order: int = 0

    @property
    def error(self) -> str:
        return f"invalid action at position {self.position}"


def _parse_action(position: int, raw: Any) -> ActionConfig | InvalidActionEntry:
    if not isinstance(raw, dict):
        return InvalidActionEntry(position)
    try:
        return ActionConfig.from_dict(raw)
    except (TypeError, ValueError, OverflowError):
        order = raw.get("order")
        return InvalidActionEntry(
            position,
            type=raw.get("type") if isinstance(raw.get("type"), str) else "",
            order=order if isinstance(order, int) else 0,
        )


def sorted_actions(actions: list[Any]) -> list[ActionConfig | InvalidActionEntry]:
    """Parse stored actions and order them by `order` (stable for ties).

    Unparseable entries are kept in place as InvalidActionEntry (order 0 unless
    a numeric order is readable) so the run stops there instead of skipping.
    """
    parsed = [_parse_action(i, a) for i, a in enumerate(actions or [])]
    return sorted(parsed, key=lambda a: a.order)


class AutomationEngine:
    """Trigger router and per-automation run loop."""

    def __init__(
        self,
        automation_reader: IAutomationReader,
        run_recorder: IRunRecorder,
        action_executor: IActionExecutor,
    ) -> None:
        self.automation_reader = automation_reader
        self.run_recorder = run_recorder
        self.action_executor = action_executor

    async def process_trigger(self, event: TriggerEvent) -> list[AutomationRunResult]:
        """Run every automation matching event. Never raises.

        Returns the finished runs (informational; callers may ignore it).
        """
        try:
            candidates = await self.automation_reader.get_trigger_candidates(
                event.tenant_id, event.type
            )
        except Exception:
            logger.exception(
                "Automation trigger processing failed: tenant_id=%s trigger=%s",
                event.tenant_id,
                event.type,
            )
            return []

        now = utc_now()
        runs: list[AutomationRunResult] = []
        for automation in candidates:
            if automation.is_paused_at(now):
                continue
            if not automation.applies_to_property(event.property_id):
                continue
            try:
                if not matches(automation.conditions, event.data):
                    continue
            except ValidationException as e:
                logger.warning(
                    "Skipping automation with invalid conditions: automation_id=%s error=%s",
                    automation.id,
                    e.message,
                )
                continue
            try:
                run = await self.execute_automation(automation, event)
            except Exception:
                logger.exception(
                    "Automation execution failed: automation_id=%s tenant_id=%s",
                    automation.id,
                    automation.tenant_id,
                )
                continue
            if run is not None:
                runs.append(run)
        return runs

    async def execute_automation(
        self, automation: AutomationEntity, event: TriggerEvent
    ) -> AutomationRunResult | None:
        """Run one automation's actions and record the run.

        Returns None when the RUNNING row could not be written; no action is
        executed in that case.
        """
        try:
            run = await self.run_recorder.start_run(automation, event)
        except Exception:
            logger.exception(
                "Could not start automation run: automation_id=%s tenant_id=%s",
                automation.id,
                automation.tenant_id,
            )
            return None

        executed: list[ActionExecutionRecord] = []
        status = AutomationRunStatus.SUCCESS
        error: str | None = None
        try:
            for action in sorted_actions(automation.actions):
                if isinstance(action, InvalidActionEntry):
                    executed.append(
                        ActionExecutionRecord(
                            type=action.type,
                            status=ActionOutcomeStatus.FAILED,
                            executed_at=utc_now(),
                            error=action.error,
                        )
                    )
                    status = AutomationRunStatus.FAILED
                    error = action.error
                    break
                result = await self.action_executor.execute(action, event, automation)
                executed.append(
                    ActionExecutionRecord(
                        type=action.type,
                        status=(
                            ActionOutcomeStatus.SUCCESS
                            if result.success
                            else ActionOutcomeStatus.FAILED
                        ),
                        executed_at=utc_now(),
                        result=result.result,
                        error=result.error,
                    )
                )
                if not result.success:
                    status = AutomationRunStatus.FAILED
                    error = result.error
                    break
        except Exception as e:
            logger.exception(
                "Automation run aborted: automation_id=%s run_id=%s",
                automation.id,
                run.id,
            )
            status = AutomationRunStatus.FAILED
            error = str(e) or type(e).__name__

        finished = await self.run_recorder.finish_run(
            run, status.value, executed, error
        )
        logger.info(
            "Automation executed: automation_id=%s run_id=%s status=%s actions=%d",
            automation.id,
            run.id,
            status.value,
            len(executed),
        )
        return finished
