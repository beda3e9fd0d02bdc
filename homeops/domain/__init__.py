"""Domain layer: entities and exceptions.

No dependencies on infrastructure. Used by application and infrastructure
layers.
"""

from homeops.domain.entities import AutomationEntity
from homeops.domain.exceptions import (
    ActionConfigurationException,
    HomeOpsException,
    LockProviderException,
    ResourceNotFoundException,
    SqlNotConfiguredException,
    ValidationException,
    WebhookDeliveryException,
)

__all__ = [
    "AutomationEntity",
    "ActionConfigurationException",
    "HomeOpsException",
    "LockProviderException",
    "ResourceNotFoundException",
    "SqlNotConfiguredException",
    "ValidationException",
    "WebhookDeliveryException",
]
