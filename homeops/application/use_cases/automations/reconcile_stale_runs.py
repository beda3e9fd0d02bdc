"""Fail automation runs left RUNNING by a crashed process."""

from __future__ import annotations

from datetime import timedelta
from typing import TYPE_CHECKING

from homeops.application.dtos.automation import StaleRunSweepResult
from homeops.core.config import get_settings
from homeops.domain.exceptions import ValidationException
from homeops.shared.utils.datetime import utc_now

if TYPE_CHECKING:
    from homeops.application.interfaces.repositories import IAutomationRunRepository

STALE_RUN_ERROR = "run abandoned: no completion recorded"


class ReconcileStaleRunsUseCase:
    """Marks RUNNING runs older than a cutoff as FAILED.

    The engine never does this on its own; operators run it (see
    scripts/reconcile_stale_runs.py). Automation statistics are left
    untouched since the abandoned run never reported an outcome.
    """

    def __init__(
        self,
        run_repo: "IAutomationRunRepository",
        *,
        stale_after_minutes: int | None = None,
    ) -> None:
        self._run_repo = run_repo
        if stale_after_minutes is None:
            stale_after_minutes = get_settings().stale_run_timeout_minutes
        self._stale_after = timedelta(minutes=stale_after_minutes)

    async def execute(self, older_than: timedelta | None = None) -> StaleRunSweepResult:
        age = older_than if older_than is not None else self._stale_after
        if age <= timedelta(0):
            raise ValidationException("older_than must be positive", field="older_than")
        now = utc_now()
        cutoff = now - age
        count = await self._run_repo.fail_stale_runs(
            started_before=cutoff, error=STALE_RUN_ERROR, completed_at=now
        )
        return StaleRunSweepResult(cutoff=cutoff, runs_failed=count)
