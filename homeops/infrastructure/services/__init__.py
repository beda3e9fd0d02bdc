"""Infrastructure services: automation engine, action executor, run recorder."""

from homeops.infrastructure.services.action_executor import ActionExecutor
from homeops.infrastructure.services.automation_engine import AutomationEngine
from homeops.infrastructure.services.factory import create_automation_engine
from homeops.infrastructure.services.notification_service import (
    LogOnlyNotificationService,
)
from homeops.infrastructure.services.run_recorder import RunRecorder

__all__ = [
    "ActionExecutor",
    "AutomationEngine",
    "LogOnlyNotificationService",
    "RunRecorder",
    "create_automation_engine",
]
