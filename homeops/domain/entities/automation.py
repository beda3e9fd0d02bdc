"""Automation domain entity.

An automation is a tenant-owned definition: a trigger type, optional
conditions, and an ordered list of actions, plus lifecycle flags and the
statistics of its most recent run.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass
class AutomationEntity:
    """Domain entity for an automation definition (trigger + conditions + actions)."""

    id: str
    tenant_id: str
    name: str
    trigger: str
    actions: list[dict[str, Any]]
    property_id: str | None = None
    description: str | None = None
    trigger_config: dict[str, Any] = field(default_factory=dict)
    conditions: dict[str, Any] | None = None
    is_enabled: bool = True
    is_paused: bool = False
    pause_until: datetime | None = None
    run_count: int = 0
    last_run_at: datetime | None = None
    last_run_status: str | None = None
    last_run_error: str | None = None
    created_by: str | None = None

    def is_paused_at(self, now: datetime) -> bool:
        """Return whether pause_until is set and still in the future at now.

        Independent of is_paused: an expired pause_until does not clear the flag.
        """
        return self.pause_until is not None and self.pause_until > now

    def applies_to_property(self, property_id: str | None) -> bool:
        """Scope check: automations or events without a property id are tenant-wide."""
        if not self.property_id or not property_id:
            return True
        return self.property_id == property_id
