"""Automation use cases: pause/resume, manual test run, run history, stale-run reconciliation."""

from homeops.application.use_cases.automations.manual_run import (
    ManualAutomationRunUseCase,
    build_test_event,
)
from homeops.application.use_cases.automations.pause_automation import (
    PauseAutomationUseCase,
)
from homeops.application.use_cases.automations.reconcile_stale_runs import (
    STALE_RUN_ERROR,
    ReconcileStaleRunsUseCase,
)
from homeops.application.use_cases.automations.run_history import (
    ListAutomationRunsUseCase,
)

__all__ = [
    "STALE_RUN_ERROR",
    "ListAutomationRunsUseCase",
    "ManualAutomationRunUseCase",
    "PauseAutomationUseCase",
    "ReconcileStaleRunsUseCase",
    "build_test_event",
]
