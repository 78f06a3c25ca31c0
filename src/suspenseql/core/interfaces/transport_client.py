"""Transport client interface."""

from typing import Any, Protocol

from suspenseql.core.entities.transport_result import TransportResponse


class ITransportClient(Protocol):
    """Contract for the host application's GraphQL transport.

    The generated fetchers call exactly one of these methods per fetch,
    passing the operation document under ``query`` or ``mutation`` and
    forwarding the caller's options bag.
    """

    async def query(
        self,
        *,
        query: Any,
        variables: dict[str, Any] | None = None,
        **options: Any,
    ) -> TransportResponse:
        """Execute a query document.

        Args:
            query: The graphql-core ``DocumentNode`` to execute.
            variables: Operation variables.
            **options: Transport-level options (context, operation name).

        Returns:
            The transport response.

        Raises:
            TransportError: If the response carries GraphQL errors.
        """
        ...

    async def mutate(
        self,
        *,
        mutation: Any,
        variables: dict[str, Any] | None = None,
        **options: Any,
    ) -> TransportResponse:
        """Execute a mutation document.

        Args:
            mutation: The graphql-core ``DocumentNode`` to execute.
            variables: Operation variables.
            **options: Transport-level options.

        Returns:
            The transport response.

        Raises:
            TransportError: If the response carries GraphQL errors.
        """
        ...
