"""DTOs for trigger events, action configs and run outcomes."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from homeops.shared.enums import ActionOutcomeStatus


def _json_safe(value: dict[str, Any]) -> dict[str, Any]:
    """Return a JSON-serializable copy (non-JSON values such as datetimes become strings)."""
    return json.loads(json.dumps(value, default=str))


@dataclass(frozen=True)
class TriggerEvent:
    """Event raised by a domain source; routed to matching automations.

    data is an open bag of contextual fields (user id, amounts, titles, ...).
    """

    type: str
    tenant_id: str
    data: dict[str, Any] = field(default_factory=dict)
    property_id: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Snapshot for run audit (triggered_by) and webhook envelopes."""
        return _json_safe(
            {
                "type": self.type,
                "tenant_id": self.tenant_id,
                "property_id": self.property_id,
                "data": dict(self.data),
            }
        )


@dataclass(frozen=True)
class ActionConfig:
    """One configured action in an automation's pipeline."""

    type: str
    config: dict[str, Any]
    order: int = 0

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> ActionConfig:
        """Build from the stored JSON shape; tolerates missing config/order."""
        order = raw.get("order")
        return cls(
            type=str(raw.get("type") or ""),
            config=dict(raw.get("config") or {}),
            order=int(order) if isinstance(order, (int, float)) else 0,
        )


@dataclass(frozen=True)
class ActionResult:
    """Uniform outcome of one action: success flag, optional payload or error."""

    success: bool
    result: dict[str, Any] | None = None
    error: str | None = None

    @classmethod
    def ok(cls, result: dict[str, Any] | None = None) -> ActionResult:
        return cls(success=True, result=result)

    @classmethod
    def fail(cls, error: str, result: dict[str, Any] | None = None) -> ActionResult:
        return cls(success=False, result=result, error=error or "action failed")


@dataclass(frozen=True)
class ActionExecutionRecord:
    """Entry appended to a run's actions_executed list."""

    type: str
    status: ActionOutcomeStatus
    executed_at: datetime
    result: dict[str, Any] | None = None
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialized shape stored in automation_run.actions_executed."""
        out: dict[str, Any] = {
            "type": self.type,
            "status": self.status.value,
            "executed_at": self.executed_at.isoformat(),
        }
        if self.result is not None:
            out["result"] = _json_safe(self.result)
        if self.error is not None:
            out["error"] = self.error
        return out


@dataclass(frozen=True)
class AutomationRunResult:
    """Automation run record (history row)."""

    id: str
    automation_id: str
    tenant_id: str
    triggered_by: dict[str, Any]
    status: str
    actions_executed: list[dict[str, Any]]
    error: str | None
    started_at: datetime
    completed_at: datetime | None


@dataclass(frozen=True)
class StaleRunSweepResult:
    """Summary of a stale-run reconciliation pass."""

    cutoff: datetime
    runs_failed: int
