"""Three-valued result returned by suspense reads.

A read either has the value (``Ready``), has started an asynchronous
computation the caller must wait for (``Pending``), or could not even
start (``Failed``). Schedulers treat ``Pending`` as "park and retry",
never as a fault.
"""

import asyncio
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class Suspended(Exception):
    """Raised by accessors to hand a pending computation to the scheduler.

    This is control flow, not an error: the scheduler awaits
    ``pending`` and re-runs the render that raised it.
    """

    def __init__(self, pending: "asyncio.Future[Any]") -> None:
        super().__init__("read suspended on a pending computation")
        self.pending = pending


@dataclass(frozen=True)
class Ready(Generic[T]):
    """The value is cached and returned synchronously."""

    value: T

    @property
    def is_ready(self) -> bool:
        return True

    def unwrap(self) -> T:
        """Return the value."""
        return self.value


@dataclass(frozen=True)
class Pending(Generic[T]):
    """A fetch is in flight; await ``future`` and read again."""

    future: "asyncio.Future[T]"

    @property
    def is_ready(self) -> bool:
        return False

    def unwrap(self) -> T:
        """Raise ``Suspended`` carrying the in-flight computation."""
        raise Suspended(self.future)


@dataclass(frozen=True)
class Failed:
    """The read could not start a fetch (e.g. key derivation raised)."""

    error: BaseException

    @property
    def is_ready(self) -> bool:
        return False

    def unwrap(self) -> Any:
        """Re-raise the stored error."""
        raise self.error


ReadResult = Ready[T] | Pending[T] | Failed
