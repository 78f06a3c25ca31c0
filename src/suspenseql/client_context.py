"""Ambient transport client for suspense hooks.

Hooks never receive a client argument: they read it from the current
context, the way React hooks read the Apollo client from a provider.

Usage:
    from suspenseql.client_context import provide_transport_client

    with provide_transport_client(client):
        weather = await render_with_suspense(
            lambda: use_get_weather({"variables": {"city": "melbourne"}})
        )
"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from suspenseql.core.interfaces.transport_client import ITransportClient

_transport_client: "ContextVar[ITransportClient | None]" = ContextVar(
    "suspenseql_transport_client", default=None
)


class MissingTransportClientError(LookupError):
    """Raised when a hook runs outside ``provide_transport_client``."""

    pass


@contextmanager
def provide_transport_client(
    client: "ITransportClient",
) -> Iterator["ITransportClient"]:
    """Make ``client`` the ambient transport client within the block.

    Args:
        client: The transport client hooks should use.

    Yields:
        The client.
    """
    token = _transport_client.set(client)
    try:
        yield client
    finally:
        _transport_client.reset(token)


def get_transport_client() -> "ITransportClient | None":
    """Get the ambient transport client, or None if none is provided."""
    return _transport_client.get()


def use_transport_client() -> "ITransportClient":
    """Get the ambient transport client.

    Returns:
        The client set by the innermost ``provide_transport_client``.

    Raises:
        MissingTransportClientError: If no client is provided.
    """
    client = _transport_client.get()
    if client is None:
        raise MissingTransportClientError(
            "No transport client in context. Wrap rendering in "
            "provide_transport_client(client)."
        )
    return client
