"""Condition matching: does an automation's condition set accept an event's data?

Pure functions, no I/O. Conditions are parsed into a typed model at the edge;
unknown keys are ignored so newer condition kinds do not break older engines.
All configured predicates must pass (AND); the first failing one decides.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from homeops.domain.exceptions import ValidationException


class AutomationConditions(BaseModel):
    """Stored condition set. Keys accepted in snake_case or camelCase."""

    model_config = ConfigDict(
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    user_ids: list[str] | None = None
    vendor_ids: list[str] | None = None
    task_categories: list[str] | None = None
    min_amount: float | None = None
    max_amount: float | None = None


def data_value(data: Mapping[str, Any], key: str) -> Any:
    """Look up an event data field by snake_case key, falling back to camelCase."""
    value = data.get(key)
    if value is None:
        value = data.get(to_camel(key))
    return value


def _as_number(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            return None
    return None


def _member(value: Any, allowed: list[str]) -> bool:
    return value is not None and str(value) in allowed


def parse_conditions(
    raw: Mapping[str, Any] | AutomationConditions | None,
) -> AutomationConditions | None:
    """Parse stored condition JSON. Raises ValidationException on a malformed shape."""
    if raw is None or isinstance(raw, AutomationConditions):
        return raw
    try:
        return AutomationConditions.model_validate(dict(raw))
    except ValidationError as e:
        raise ValidationException(
            f"Invalid automation conditions: {e.errors()[0].get('msg', str(e))}",
            field="conditions",
        ) from e


def matches(
    conditions: Mapping[str, Any] | AutomationConditions | None,
    data: Mapping[str, Any],
) -> bool:
    """Return True when every configured predicate passes against data.

    - No condition set: always matches.
    - user_ids / vendor_ids: data userId / vendorId must be listed (empty list = no constraint).
    - task_categories: passes when data has no category, or it is listed.
    - min_amount / max_amount: inclusive bounds on data amount. An event with no
      amount is not constrained; a non-numeric amount fails a configured bound.

    Raises:
        ValidationException: When conditions is a malformed mapping.
    """
    parsed = parse_conditions(conditions)
    if parsed is None:
        return True

    if parsed.user_ids and not _member(data_value(data, "user_id"), parsed.user_ids):
        return False
    if parsed.vendor_ids and not _member(
        data_value(data, "vendor_id"), parsed.vendor_ids
    ):
        return False
    if parsed.task_categories:
        category = data_value(data, "category")
        if category is not None and not _member(category, parsed.task_categories):
            return False

    if parsed.min_amount is None and parsed.max_amount is None:
        return True
    # Missing or non-numeric amounts are unconstrained.
    amount = _as_number(data_value(data, "amount"))
    if amount is None:
        return True
    if parsed.min_amount is not None and amount < parsed.min_amount:
        return False
    if parsed.max_amount is not None and amount > parsed.max_amount:
        return False
    return True
