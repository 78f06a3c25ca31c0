"""Core domain layer for suspenseql."""

from suspenseql.core.entities import (
    CacheEntry,
    OperationDefinition,
    PluginConfig,
    ReadResult,
)
from suspenseql.core.interfaces import (
    ICacheKeyStrategy,
    IEntryStore,
    ITransportClient,
)
from suspenseql.core.services import SuspenseHooksGenerator, SuspenseRepository

__all__ = [
    # Entities
    "CacheEntry",
    "OperationDefinition",
    "PluginConfig",
    "ReadResult",
    # Interfaces
    "ICacheKeyStrategy",
    "IEntryStore",
    "ITransportClient",
    # Services
    "SuspenseHooksGenerator",
    "SuspenseRepository",
]
