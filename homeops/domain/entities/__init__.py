"""Domain entities."""

from homeops.domain.entities.automation import AutomationEntity

__all__ = ["AutomationEntity"]
