"""Infrastructure layer implementations for suspenseql."""

from suspenseql.infrastructure.key_strategies import (
    hash_key_strategy,
    variables_key_strategy,
)
from suspenseql.infrastructure.stores import InMemoryEntryStore

__all__ = [
    "InMemoryEntryStore",
    "hash_key_strategy",
    "variables_key_strategy",
]
