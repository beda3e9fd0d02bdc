"""Smart-lock provider implementations.

AugustLockProvider issues vendor commands (logged; the vendor API call is the
integration boundary). GenericLockProvider tracks state manually for vendors
without an API integration.
"""

from __future__ import annotations

from homeops.application.dtos.household import LockCommand
from homeops.shared.enums import LockProviderName
from homeops.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


class AugustLockProvider:
    """ILockProvider for August locks."""

    name = LockProviderName.AUGUST.value

    async def lock(self, cmd: LockCommand) -> bool:
        logger.info(
            "August lock command: lock_id=%s external_id=%s",
            cmd.lock_id,
            cmd.external_id,
        )
        return True

    async def unlock(self, cmd: LockCommand) -> bool:
        logger.info(
            "August unlock command: lock_id=%s external_id=%s",
            cmd.lock_id,
            cmd.external_id,
        )
        return True


class GenericLockProvider:
    """ILockProvider that only records the command (manual tracking)."""

    def __init__(self, name: str) -> None:
        self.name = name

    async def lock(self, cmd: LockCommand) -> bool:
        logger.info("%s lock (manual tracking): lock_id=%s", self.name, cmd.lock_id)
        return True

    async def unlock(self, cmd: LockCommand) -> bool:
        logger.info("%s unlock (manual tracking): lock_id=%s", self.name, cmd.lock_id)
        return True
