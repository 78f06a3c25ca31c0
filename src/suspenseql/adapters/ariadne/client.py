"""Ariadne transport client."""

import logging
from typing import Any

from ariadne import graphql
from graphql import GraphQLSchema, print_ast

from suspenseql.core.entities.transport_result import TransportResponse

logger = logging.getLogger(__name__)


class AriadneTransportClient:
    """Transport client executing operations against an Ariadne schema.

    Executes in-process through ``ariadne.graphql``. Responses carrying
    GraphQL errors raise ``TransportError`` so the suspended fetch
    rejects instead of caching a partial result.

    Usage:
        from ariadne import make_executable_schema
        from suspenseql.adapters.ariadne import AriadneTransportClient

        client = AriadneTransportClient(make_executable_schema(type_defs, query))
        with provide_transport_client(client):
            ...
    """

    def __init__(
        self,
        schema: GraphQLSchema,
        context_value: Any = None,
        root_value: Any = None,
        debug: bool = False,
    ) -> None:
        """Initialize the client.

        Args:
            schema: Executable schema, e.g. from ``make_executable_schema``.
            context_value: Default context passed to resolvers.
            root_value: Root value passed to resolvers.
            debug: Forwarded to Ariadne to include tracebacks in errors.
        """
        self._schema = schema
        self._context_value = context_value
        self._root_value = root_value
        self._debug = debug

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
        data: dict[str, Any] = {
            "query": document if isinstance(document, str) else print_ast(document),
            "variables": variables or {},
        }
        operation_name = options.get("operation_name")
        if operation_name:
            data["operationName"] = operation_name

        _, result = await graphql(
            self._schema,
            data,
            context_value=options.get("context", self._context_value),
            root_value=self._root_value,
            debug=self._debug,
        )

        response = TransportResponse(
            data=result.get("data"),
            errors=tuple(result.get("errors") or ()),
        )
        if not response.ok:
            logger.debug("Ariadne execution returned %d error(s)", len(response.errors))
        return response.raise_for_errors()
