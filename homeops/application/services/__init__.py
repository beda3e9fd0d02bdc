"""Application services: condition matching and the starter template catalog."""

from homeops.application.services.automation_templates import (
    get_automation_template,
    list_automation_templates,
)
from homeops.application.services.condition_matcher import (
    AutomationConditions,
    data_value,
    matches,
    parse_conditions,
)

__all__ = [
    "AutomationConditions",
    "data_value",
    "get_automation_template",
    "list_automation_templates",
    "matches",
    "parse_conditions",
]
