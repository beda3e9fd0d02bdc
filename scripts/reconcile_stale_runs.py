"""Mark automation runs stuck in RUNNING (crashed process) as FAILED.

Usage:
    python -m scripts.reconcile_stale_runs [minutes]
Runs started more than `minutes` ago (default STALE_RUN_TIMEOUT_MINUTES, 60)
that never completed are failed with "run abandoned: no completion recorded".
Requires DATABASE_URL.
"""

import asyncio
import sys
from datetime import timedelta

from homeops.application.use_cases.automations import ReconcileStaleRunsUseCase
from homeops.core.config import get_settings
import homeops.infrastructure.persistence.database as database
from homeops.infrastructure.persistence.repositories import AutomationRunRepository
from homeops.shared.telemetry.logging import setup_logging


async def main() -> None:
    """Fail stale RUNNING runs in one transaction."""
    settings = get_settings()
    setup_logging(settings.debug)
    minutes = settings.stale_run_timeout_minutes
    if len(sys.argv) > 1:
        try:
            minutes = int(sys.argv[1])
        except ValueError:
            print(f"minutes must be an integer: {sys.argv[1]!r}", file=sys.stderr)
            sys.exit(2)
    if minutes < 1:
        print("minutes must be >= 1", file=sys.stderr)
        sys.exit(2)

    session_factory = database.get_session_factory()
    async with session_factory() as session:
        async with session.begin():
            use_case = ReconcileStaleRunsUseCase(AutomationRunRepository(session))
            result = await use_case.execute(older_than=timedelta(minutes=minutes))
    await database.dispose_engine()

    print(
        f"Done. Failed {result.runs_failed} stale run(s) started before "
        f"{result.cutoff.isoformat()}"
    )


if __name__ == "__main__":
    asyncio.run(main())
