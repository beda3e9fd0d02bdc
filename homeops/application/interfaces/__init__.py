"""Application interfaces (ports): repository and service protocols."""

from homeops.application.interfaces.repositories import (
    IApprovalStore,
    IAutomationReader,
    IAutomationRepository,
    IAutomationRunRepository,
    ICalendarEventStore,
    ISmartLockStore,
    ITaskStore,
)
from homeops.application.interfaces.services import (
    IActionExecutor,
    IAutomationEngine,
    ILockProvider,
    INotificationService,
    IRunRecorder,
    IWebhookTransport,
)

__all__ = [
    "IActionExecutor",
    "IApprovalStore",
    "IAutomationEngine",
    "IAutomationReader",
    "IAutomationRepository",
    "IAutomationRunRepository",
    "ICalendarEventStore",
    "ILockProvider",
    "INotificationService",
    "IRunRecorder",
    "ISmartLockStore",
    "ITaskStore",
    "IWebhookTransport",
]
