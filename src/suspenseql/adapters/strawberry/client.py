"""Strawberry transport client."""

import logging
from typing import TYPE_CHECKING, Any

from graphql import print_ast

from suspenseql.core.entities.transport_result import TransportResponse

if TYPE_CHECKING:
    from strawberry import Schema

logger = logging.getLogger(__name__)


class StrawberryTransportClient:
    """Transport client executing operations against a Strawberry schema.

    Usage:
        import strawberry
        from suspenseql.adapters.strawberry import StrawberryTransportClient

        schema = strawberry.Schema(query=Query)
        client = StrawberryTransportClient(schema)
    """

    def __init__(
        self,
        schema: "Schema",
        context_value: Any = None,
        root_value: Any = None,
    ) -> None:
        """Initialize the client.

        Args:
            schema: The Strawberry schema.
            context_value: Default context passed to resolvers.
            root_value: Root value passed to resolvers.
        """
        self._schema = schema
        self._context_value = context_value
        self._root_value = root_value

    async def query(
        self,
        *,
        query: Any,
        variables: dict[str, Any] | None = None,
        **options: Any,
    ) -> TransportResponse:
        """Execute a query document."""
        return await self._execute(query, variables, options)

    async def mutate(
        self,
        *,
        mutation: Any,
        variables: dict[str, Any] | None = None,
        **options: Any,
    ) -> TransportResponse:
        """Execute a mutation document."""
        return await self._execute(mutation, variables, options)

    async def _execute(
        self,
        document: Any,
        variables: dict[str, Any] | None,
        options: dict[str, Any],
    ) -> TransportResponse:
        result = await self._schema.execute(
            document if isinstance(document, str) else print_ast(document),
            variable_values=variables,
            context_value=options.get("context", self._context_value),
            root_value=self._root_value,
            operation_name=options.get("operation_name"),
        )

        response = TransportResponse(
            data=result.data,
            errors=tuple(result.errors or ()),
        )
        if not response.ok:
            logger.debug(
                "Strawberry execution returned %d error(s)", len(response.errors)
            )
        return response.raise_for_errors()
