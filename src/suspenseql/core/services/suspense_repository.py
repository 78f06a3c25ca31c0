"""Suspense repository - the read-through cache behind every hook.

A repository wraps one asynchronous fetcher. ``read`` is synchronous:
it returns the cached value when the key has resolved, otherwise it
starts a fetch and hands the in-flight computation back to the caller
as ``Pending``. The resolved value is stored under its key and every
later ``read`` for that key is served without calling the fetcher.

Limitations that are kept on purpose:
- Only resolved values are recorded. Concurrent reads of the same
  unresolved key each start their own fetch, unless the repository is
  created with ``dedupe_in_flight=True``.
- Failures are not cached. A rejected fetch leaves the key absent and
  the next read fetches again.
- No eviction, no expiry, no cancellation.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Any, Generic, TypeVar

from suspenseql.core.entities.cache_entry import CacheEntry
from suspenseql.core.entities.read_result import Failed, Pending, ReadResult, Ready
from suspenseql.core.interfaces.entry_store import IEntryStore
from suspenseql.core.interfaces.key_strategy import ICacheKeyStrategy
from suspenseql.infrastructure.key_strategies.default import hash_key_strategy
from suspenseql.infrastructure.stores.memory import InMemoryEntryStore

logger = logging.getLogger(__name__)

T = TypeVar("T")

Fetcher = Callable[..., Awaitable[T]]


class SuspenseRepository(Generic[T]):
    """Read-through cache with a suspension-compatible ``read``.

    Each repository exclusively owns its entry store; repositories are
    never shared and there is no global registry.
    """

    def __init__(
        self,
        fetcher: Fetcher[T],
        to_cache_key: ICacheKeyStrategy | None = None,
        store: IEntryStore | None = None,
        dedupe_in_flight: bool = False,
        name: str | None = None,
    ) -> None:
        """Initialize the repository.

        Args:
            fetcher: Async callable invoked with the read arguments on a miss.
            to_cache_key: Key strategy. Defaults to a stable hash of all
                arguments (``"default"`` when there are none).
            store: Entry store. Defaults to a fresh unbounded in-memory store.
            dedupe_in_flight: When True, reads of a key whose fetch is still
                running share that fetch instead of starting a new one.
            name: Label used in log messages.
        """
        self._fetcher = fetcher
        self._to_cache_key: ICacheKeyStrategy = to_cache_key or hash_key_strategy
        self._store: IEntryStore = store if store is not None else InMemoryEntryStore()
        self._dedupe_in_flight = dedupe_in_flight
        self._name = name or getattr(fetcher, "__name__", "repository")
        self._in_flight: dict[str, asyncio.Future[T]] = {}
        self._tasks: set[asyncio.Task[T]] = set()

        # Statistics
        self._hits = 0
        self._misses = 0
        self._fetches = 0
        self._failures = 0

    @property
    def name(self) -> str:
        return self._name

    @property
    def dedupe_in_flight(self) -> bool:
        return self._dedupe_in_flight

    @property
    def stats(self) -> dict[str, int]:
        """Get repository statistics.

        Returns:
            Dictionary with hits, misses, fetches started and failed fetches.
        """
        return {
            "hits": self._hits,
            "misses": self._misses,
            "fetches": self._fetches,
            "failures": self._failures,
        }

    def read(self, *args: Any) -> ReadResult[T]:
        """Read the value for ``args`` without blocking.

        Args:
            *args: Arguments forwarded to the key strategy and the fetcher.

        Returns:
            ``Ready`` with the cached value, ``Pending`` with the in-flight
            fetch, or ``Failed`` when no fetch could be started.
        """
        try:
            key = self._to_cache_key(args)
        except Exception as e:
            logger.debug("Cache key derivation failed for %s: %s", self._name, e)
            return Failed(e)

        entry = self._store.get(key)
        if entry is not None:
            self._hits += 1
            return Ready(entry.value)

        self._misses += 1

        if self._dedupe_in_flight:
            in_flight = self._in_flight.get(key)
            if in_flight is not None:
                return Pending(in_flight)

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError as e:
            return Failed(e)

        try:
            awaitable = self._fetcher(*args)
        except Exception as e:
            logger.debug("Fetcher for %s raised before suspending: %s", self._name, e)
            return Failed(e)

        self._fetches += 1
        logger.debug("Fetch started for %s key %r", self._name, key)
        task = loop.create_task(self._settle(key, awaitable))
        self._tasks.add(task)
        task.add_done_callback(self._release_task)
        if self._dedupe_in_flight:
            self._in_flight[key] = task
        return Pending(task)

    @property
    def pending_fetches(self) -> int:
        """Number of fetches started and not yet settled."""
        return len(self._tasks)

    def peek(self, key: str) -> T | None:
        """Return the resolved value for a key without fetching.

        Args:
            key: The cache key.

        Returns:
            The resolved value, or None if the key is absent.
        """
        entry = self._store.get(key)
        return entry.value if entry is not None else None

    def cache_key(self, *args: Any) -> str:
        """Derive the key ``read(*args)`` would use."""
        return self._to_cache_key(args)

    def _release_task(self, task: "asyncio.Task[T]") -> None:
        self._tasks.discard(task)
        # Mark the failure as retrieved; callers may have dropped the Pending.
        if not task.cancelled():
            task.exception()

    async def _settle(self, key: str, awaitable: Awaitable[T]) -> T:
        """Await a fetch and record its value under ``key``.

        Args:
            key: The cache key.
            awaitable: The fetcher's pending result.

        Returns:
            The value stored for the key.
        """
        try:
            value = await awaitable
        except Exception:
            self._failures += 1
            logger.warning("Fetch failed for %s key %r", self._name, key)
            raise
        finally:
            if self._dedupe_in_flight:
                self._in_flight.pop(key, None)

        if not self._store.add(CacheEntry.create(key=key, value=value)):
            # A concurrent fetch resolved first; its value stays.
            existing = self._store.get(key)
            if existing is not None:
                value = existing.value

        logger.debug("Fetch resolved for %s key %r", self._name, key)
        return value

    def __contains__(self, key: object) -> bool:
        return key in self._store

    def __len__(self) -> int:
        """Return the number of resolved keys."""
        return len(self._store)


def create_repository(
    fetcher: Fetcher[T],
    to_cache_key: ICacheKeyStrategy | None = None,
    **kwargs: Any,
) -> SuspenseRepository[T]:
    """Create a suspense repository for a fetcher.

    Args:
        fetcher: Async callable producing the value for a set of arguments.
        to_cache_key: Optional key strategy override.
        **kwargs: Extra SuspenseRepository options.

    Returns:
        A new SuspenseRepository.
    """
    return SuspenseRepository(fetcher, to_cache_key=to_cache_key, **kwargs)
