"""Cooperative scheduler for suspending renders.

A render is a plain synchronous callable that reads through suspense
hooks. When a hook raises ``Suspended`` the render is parked until the
pending computation settles, then invoked again. A rejected computation
goes to the error boundary (``on_error``) or propagates.
"""

import logging
from collections.abc import Callable
from typing import Any, TypeVar

from suspenseql.core.entities.read_result import Failed, Pending, ReadResult, Suspended

logger = logging.getLogger(__name__)

T = TypeVar("T")

ErrorBoundary = Callable[[BaseException], Any]


class SuspenseLimitExceeded(RuntimeError):
    """Raised when a render keeps suspending past ``max_suspensions``."""

    pass


async def render_with_suspense(
    render: Callable[[], T],
    on_error: ErrorBoundary | None = None,
    max_suspensions: int | None = None,
) -> T | Any:
    """Run ``render`` until it completes without suspending.

    Args:
        render: Synchronous render callable.
        on_error: Error boundary. Receives the error of a rejected
            computation (or of the render itself) and its return value
            becomes the render result. Without it, errors propagate.
        max_suspensions: Optional cap on how many times the render may
            suspend. There is no cap by default.

    Returns:
        The render result, or the error boundary's fallback.

    Raises:
        SuspenseLimitExceeded: If ``max_suspensions`` is exceeded.
    """
    suspensions = 0
    while True:
        try:
            return render()
        except Suspended as suspended:
            suspensions += 1
            if max_suspensions is not None and suspensions > max_suspensions:
                raise SuspenseLimitExceeded(
                    f"render suspended more than {max_suspensions} times"
                ) from None
            logger.debug("Render suspended (%d), waiting for data", suspensions)
            try:
                await suspended.pending
            except Exception as e:
                if on_error is None:
                    raise
                logger.debug("Suspended computation failed: %s", e)
                return on_error(e)
        except Exception as e:
            if on_error is None:
                raise
            return on_error(e)


async def resolve_read(read: Callable[[], ReadResult[T]]) -> T:
    """Drive a ``read`` callable to a value.

    ``Pending`` results are awaited and the read is issued again;
    ``Failed`` results raise their error, as does a rejected fetch.

    Args:
        read: Callable returning a ReadResult, e.g.
            ``lambda: repository.read(client, options)``.

    Returns:
        The resolved value.
    """
    while True:
        result = read()
        if isinstance(result, Pending):
            await result.future
            continue
        if isinstance(result, Failed):
            raise result.error
        return result.value
