"""Core interfaces (Protocol classes) for suspenseql."""

from suspenseql.core.interfaces.entry_store import IEntryStore
from suspenseql.core.interfaces.key_strategy import ICacheKeyStrategy
from suspenseql.core.interfaces.transport_client import ITransportClient

__all__ = [
    "ICacheKeyStrategy",
    "IEntryStore",
    "ITransportClient",
]
