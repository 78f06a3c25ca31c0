"""Entry store interface."""

from collections.abc import Iterator
from typing import Protocol

from suspenseql.core.entities.cache_entry import CacheEntry


class IEntryStore(Protocol):
    """Contract for the key to value mapping owned by a repository.

    Methods are synchronous because suspense reads are synchronous.
    Stores never evict and never overwrite a resolved entry.
    """

    def get(self, key: str) -> CacheEntry | None:
        """Retrieve the resolved entry for a key.

        Args:
            key: The cache key.

        Returns:
            The entry, or None if the key has not resolved yet.
        """
        ...

    def add(self, entry: CacheEntry) -> bool:
        """Store an entry unless its key is already resolved.

        Args:
            entry: The resolved entry.

        Returns:
            True if stored, False if the key already had an entry.
        """
        ...

    def __contains__(self, key: object) -> bool:
        ...

    def __len__(self) -> int:
        ...

    def keys(self) -> Iterator[str]:
        """Iterate over resolved keys."""
        ...
