"""Smart-lock providers: August (vendor commands) and generic manual tracking.

LockProviderRegistry resolves a lock's provider name to an ILockProvider;
unknown names fall back to the OTHER (manual tracking) provider.
"""

from homeops.infrastructure.external.smart_locks.providers import (
    AugustLockProvider,
    GenericLockProvider,
)
from homeops.infrastructure.external.smart_locks.registry import (
    LockProviderRegistry,
    default_lock_providers,
)

__all__ = [
    "AugustLockProvider",
    "GenericLockProvider",
    "LockProviderRegistry",
    "default_lock_providers",
]
