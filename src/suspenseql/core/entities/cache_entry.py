"""Resolved cache entry."""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any


@dataclass(frozen=True)
class CacheEntry:
    """A value recorded under its key once the fetch resolved.

    Stores only ever hold resolved entries: presence means ready.
    Entries never expire.
    """

    key: str
    value: Any
    resolved_at: datetime

    @property
    def age(self) -> timedelta:
        """Time since the fetch for this entry resolved."""
        return datetime.now(timezone.utc) - self.resolved_at

    @classmethod
    def create(cls, key: str, value: Any) -> "CacheEntry":
        """Record ``value`` under ``key``, stamped with the current time."""
        return cls(key=key, value=value, resolved_at=datetime.now(timezone.utc))
