"""In-memory entry store implementation."""

import math
from collections.abc import Iterator

from cachetools import Cache  # type: ignore[import-untyped]

from suspenseql.core.entities.cache_entry import CacheEntry


class InMemoryEntryStore:
    """Unbounded in-memory store for resolved entries.

    Backed by a cachetools ``Cache`` with an infinite ``maxsize``, so
    nothing is ever evicted. Suitable for the single-threaded,
    cooperative scheduling model: no locking is performed.
    """

    def __init__(self) -> None:
        """Initialize an empty store."""
        self._cache: Cache[str, CacheEntry] = Cache(maxsize=math.inf)

    def get(self, key: str) -> CacheEntry | None:
        """Retrieve the resolved entry for a key.

        Args:
            key: The cache key.

        Returns:
            The entry, or None if the key has not resolved yet.
        """
        return self._cache.get(key)

    def add(self, entry: CacheEntry) -> bool:
        """Store an entry unless its key is already resolved.

        Args:
            entry: The resolved entry.

        Returns:
            True if stored, False if the key already had an entry.
        """
        if entry.key in self._cache:
            return False
        self._cache[entry.key] = entry
        return True

    def keys(self) -> Iterator[str]:
        """Iterate over resolved keys."""
        return iter(list(self._cache.keys()))

    def __contains__(self, key: object) -> bool:
        return key in self._cache

    def __len__(self) -> int:
        """Return the number of resolved entries."""
        return len(self._cache)
