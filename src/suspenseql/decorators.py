"""Decorator for turning async functions into suspense repositories.

Example:
    @suspense(to_cache_key=lambda args: args[0])
    async def load_city(city_id: str) -> dict:
        return await api.get_city(city_id)

    result = load_city.read("melbourne")
"""

from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from suspenseql.core.interfaces.key_strategy import ICacheKeyStrategy
from suspenseql.core.services.suspense_repository import SuspenseRepository

T = TypeVar("T")


def suspense(
    to_cache_key: ICacheKeyStrategy | None = None,
    dedupe_in_flight: bool = False,
) -> Callable[[Callable[..., Awaitable[T]]], SuspenseRepository[T]]:
    """Decorator creating a SuspenseRepository around an async function.

    Args:
        to_cache_key: Optional key strategy. Defaults to a stable hash of
            all arguments.
        dedupe_in_flight: Share in-flight fetches per key.

    Returns:
        Decorator returning the repository. Call ``.read(*args)`` on it.
    """

    def decorator(func: Callable[..., Awaitable[T]]) -> SuspenseRepository[T]:
        return SuspenseRepository(
            func,
            to_cache_key=to_cache_key,
            dedupe_in_flight=dedupe_in_flight,
            name=_qualified_name(func),
        )

    return decorator


def _qualified_name(func: Callable[..., Any]) -> str:
    module = getattr(func, "__module__", None) or ""
    name = getattr(func, "__qualname__", None) or getattr(func, "__name__", "fetcher")
    return f"{module}.{name}" if module else name
