"""Unit tests for smart-lock providers and the provider registry."""

import pytest

from homeops.application.dtos.household import LockCommand
from homeops.infrastructure.external.smart_locks import (
    AugustLockProvider,
    GenericLockProvider,
    LockProviderRegistry,
    default_lock_providers,
)


def test_default_registry_resolves_known_vendors() -> None:
    registry = LockProviderRegistry()
    assert isinstance(registry.get_provider("AUGUST"), AugustLockProvider)
    for name in ("SCHLAGE", "YALE", "LEVEL", "OTHER"):
        provider = registry.get_provider(name)
        assert isinstance(provider, GenericLockProvider)
        assert provider.name == name


def test_unknown_or_missing_provider_falls_back_to_other() -> None:
    registry = LockProviderRegistry()
    assert registry.get_provider("ACME").name == "OTHER"
    assert registry.get_provider(None).name == "OTHER"
    assert registry.get_provider("august").name == "AUGUST"


def test_injected_providers_get_other_fallback() -> None:
    """A registry built from a custom map still has a fallback."""
    august = AugustLockProvider()
    registry = LockProviderRegistry({"AUGUST": august})
    assert registry.get_provider("AUGUST") is august
    assert registry.get_provider("YALE").name == "OTHER"


def test_default_lock_providers_keys() -> None:
    assert sorted(default_lock_providers()) == ["AUGUST", "LEVEL", "OTHER", "SCHLAGE", "YALE"]


@pytest.mark.asyncio
async def test_providers_acknowledge_commands() -> None:
    cmd = LockCommand(lock_id="lock_1", external_id="ext", access_token="tok")
    assert await AugustLockProvider().lock(cmd) is True
    assert await AugustLockProvider().unlock(cmd) is True
    assert await GenericLockProvider("YALE").lock(cmd) is True
    assert await GenericLockProvider("YALE").unlock(cmd) is True
