"""Fire an automation trigger for a tenant (external clock for scheduled triggers).

Usage:
    python -m scripts.fire_trigger <tenant_id> <trigger> [json_data] [property_id]
Example:
    python -m scripts.fire_trigger hh_123 schedule-time '{"userId": "u_1"}'
Requires DATABASE_URL. Prints one line per automation run.
"""

import asyncio
import json
import sys

from homeops.application.dtos.automation import TriggerEvent
from homeops.core.config import get_settings
import homeops.infrastructure.persistence.database as database
from homeops.infrastructure.external.webhooks.transport import create_webhook_client
from homeops.infrastructure.services import create_automation_engine
from homeops.shared.enums import AutomationTrigger
from homeops.shared.telemetry.logging import setup_logging


async def main() -> None:
    """Route one trigger event through the automation engine."""
    if len(sys.argv) < 3:
        print(__doc__, file=sys.stderr)
        sys.exit(2)
    tenant_id, trigger = sys.argv[1], sys.argv[2]
    data = {}
    if len(sys.argv) > 3:
        try:
            data = json.loads(sys.argv[3])
        except json.JSONDecodeError as e:
            print(f"Invalid json_data: {e}", file=sys.stderr)
            sys.exit(2)
        if not isinstance(data, dict):
            print("json_data must be a JSON object", file=sys.stderr)
            sys.exit(2)
    property_id = sys.argv[4] if len(sys.argv) > 4 else None
    if trigger not in AutomationTrigger.values():
        print(f"Warning: {trigger!r} is not a known trigger type", file=sys.stderr)

    settings = get_settings()
    setup_logging(settings.debug)
    session_factory = database.get_session_factory()
    async with create_webhook_client(settings.webhook_timeout_seconds) as http_client:
        engine = create_automation_engine(
            session_factory, http_client, settings=settings
        )
        runs = await engine.process_trigger(
            TriggerEvent(
                type=trigger, tenant_id=tenant_id, data=data, property_id=property_id
            )
        )
    await database.dispose_engine()

    for run in runs:
        suffix = f" ({run.error})" if run.error else ""
        print(f"Automation {run.automation_id}: run {run.id} {run.status}{suffix}")
    print(f"Done. {len(runs)} automation run(s)")


if __name__ == "__main__":
    asyncio.run(main())
