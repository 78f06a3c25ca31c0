"""Entry store implementations."""

from suspenseql.infrastructure.stores.memory import InMemoryEntryStore

__all__ = ["InMemoryEntryStore"]
