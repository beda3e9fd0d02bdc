"""Run recorder: persists the automation run lifecycle (implements IRunRecorder).

start_run commits the RUNNING row before any action executes. finish_run
finalizes the run and updates the automation's statistics in one
transaction; it is best-effort and never raises.
"""

from __future__ import annotations

from dataclasses import replace

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from homeops.application.dtos.automation import (
    ActionExecutionRecord,
    AutomationRunResult,
    TriggerEvent,
)
from homeops.domain.entities.automation import AutomationEntity
from homeops.infrastructure.persistence.repositories import (
    AutomationRepository,
    AutomationRunRepository,
)
from homeops.shared.telemetry.logging import get_logger
from homeops.shared.utils.datetime import utc_now

logger = get_logger(__name__)


class RunRecorder:
    """Writes automation_run rows and automation statistics, one transaction per call."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def start_run(
        self, automation: AutomationEntity, event: TriggerEvent
    ) -> AutomationRunResult:
        """Insert and commit the RUNNING row. Raises when the row cannot be written."""
        async with self._session_factory() as session:
            async with session.begin():
                return await AutomationRunRepository(session).create_run(
                    automation_id=automation.id,
                    tenant_id=automation.tenant_id,
                    triggered_by=event.to_dict(),
                    started_at=utc_now(),
                )

    async def finish_run(
        self,
        run: AutomationRunResult,
        status: str,
        actions_executed: list[ActionExecutionRecord],
        error: str | None,
    ) -> AutomationRunResult:
        """Finalize run and bump automation statistics; log and swallow failures."""
        completed_at = utc_now()
        executed = [record.to_dict() for record in actions_executed]
        try:
            async with self._session_factory() as session:
                async with session.begin():
                    await AutomationRunRepository(session).complete_run(
                        run.id, status, executed, error, completed_at
                    )
                    await AutomationRepository(session).record_run_outcome(
                        run.automation_id, status, error, completed_at
                    )
        except Exception:
            logger.exception(
                "Failed to record automation run outcome: run_id=%s automation_id=%s status=%s",
                run.id,
                run.automation_id,
                status,
            )
        return replace(
            run,
            status=status,
            actions_executed=executed,
            error=error,
            completed_at=completed_at,
        )
