"""Lock provider registry: provider name -> ILockProvider."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

from homeops.infrastructure.external.smart_locks.providers import (
    AugustLockProvider,
    GenericLockProvider,
)
from homeops.shared.enums import LockProviderName

if TYPE_CHECKING:
    from homeops.application.interfaces.services import ILockProvider


def default_lock_providers() -> dict[str, ILockProvider]:
    """August plus manual-tracking providers for every other known vendor."""
    providers: dict[str, ILockProvider] = {
        LockProviderName.AUGUST.value: AugustLockProvider()
    }
    for name in (
        LockProviderName.SCHLAGE,
        LockProviderName.YALE,
        LockProviderName.LEVEL,
        LockProviderName.OTHER,
    ):
        providers[name.value] = GenericLockProvider(name.value)
    return providers


class LockProviderRegistry:
    """Resolves provider names to providers; unknown names use the OTHER provider.

    Injected into the action executor so tests can substitute fakes.
    """

    def __init__(self, providers: Mapping[str, ILockProvider] | None = None) -> None:
        self._providers: dict[str, ILockProvider] = dict(
            providers if providers is not None else default_lock_providers()
        )
        if LockProviderName.OTHER.value not in self._providers:
            self._providers[LockProviderName.OTHER.value] = GenericLockProvider(
                LockProviderName.OTHER.value
            )

    def get_provider(self, name: str | None) -> ILockProvider:
        key = (name or "").upper()
        return self._providers.get(key) or self._providers[LockProviderName.OTHER.value]
