"""Cache key strategy interface."""

from typing import Any, Protocol


class ICacheKeyStrategy(Protocol):
    """Contract for deriving cache keys from read arguments.

    A strategy must be total and deterministic: the same argument tuple
    always yields the same string key.
    """

    def __call__(self, args: tuple[Any, ...]) -> str:
        """Derive the cache key for a read.

        Args:
            args: The positional arguments passed to ``read``.

        Returns:
            The string key under which the resolved value is stored.
        """
        ...
