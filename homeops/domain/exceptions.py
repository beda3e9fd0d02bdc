"""Domain exceptions for the automation engine.

Defines domain-level exceptions that represent business rule violations.
These exceptions are independent of infrastructure concerns. Callers
(API layer, scripts) map them to responses using message, error_code and
details.
"""

from typing import Any


class HomeOpsException(Exception):
    """Base exception for all homeops errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)


class ValidationException(HomeOpsException):
    """Raised when input validation fails (e.g. invalid format or range)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class ResourceNotFoundException(HomeOpsException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'automation', 'lock').
            resource_id: The ID that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class ActionConfigurationException(HomeOpsException):
    """Raised by an action handler when its config cannot be used (missing id, URL, ...)."""

    def __init__(self, action_type: str, message: str) -> None:
        super().__init__(
            message,
            "ACTION_CONFIGURATION_ERROR",
            {"action_type": action_type},
        )


class LockProviderException(HomeOpsException):
    """Raised when a smart-lock provider rejects or fails a command."""

    def __init__(self, provider: str, lock_id: str, reason: str) -> None:
        super().__init__(
            f"{provider} could not operate lock {lock_id}: {reason}",
            "LOCK_PROVIDER_ERROR",
            {"provider": provider, "lock_id": lock_id, "reason": reason},
        )


class WebhookDeliveryException(HomeOpsException):
    """Raised when a webhook POST cannot be delivered (connection, timeout)."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(
            f"Webhook delivery to {url} failed: {reason}",
            "WEBHOOK_DELIVERY_ERROR",
            {"url": url, "reason": reason},
        )


class SqlNotConfiguredException(HomeOpsException):
    """Raised when a SQL session is requested but DATABASE_URL is not configured."""

    def __init__(self) -> None:
        super().__init__(
            "SQL database is not configured. Set DATABASE_URL.",
            "SQL_NOT_CONFIGURED",
            {},
        )
