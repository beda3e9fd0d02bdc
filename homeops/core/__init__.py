"""Core: config and shared constants.

Single place for settings.
"""

from homeops.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
