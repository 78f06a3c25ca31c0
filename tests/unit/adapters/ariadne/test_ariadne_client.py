"""Unit tests for AriadneTransportClient."""

from unittest.mock import AsyncMock, patch

import pytest
from graphql import parse

ariadne = pytest.importorskip("ariadne")

from suspenseql import TransportError  # noqa: E402
from suspenseql.adapters.ariadne import AriadneTransportClient  # noqa: E402

GRAPHQL = "suspenseql.adapters.ariadne.client.graphql"


class TestAriadneTransportClient:
    """Tests for AriadneTransportClient."""

    @pytest.mark.asyncio
    async def test_query_prints_document(self) -> None:
        """Test the request data sent to Ariadne."""
        schema = object()
        client = AriadneTransportClient(schema, context_value={"user": "42"})
        document = parse("query GetCities { cities { name } }")

        with patch(GRAPHQL, AsyncMock(return_value=(True, {"data": {"cities": []}}))) as run:
            response = await client.query(query=document, variables={"limit": 1})

        assert response.data == {"cities": []}
        args, kwargs = run.call_args
        assert args[0] is schema
        assert args[1]["query"].startswith("query GetCities")
        assert args[1]["variables"] == {"limit": 1}
        assert "operationName" not in args[1]
        assert kwargs["context_value"] == {"user": "42"}

    @pytest.mark.asyncio
    async def test_mutate_uses_operation_name_and_context(self) -> None:
        """Test per-request options."""
        client = AriadneTransportClient(object())

        with patch(GRAPHQL, AsyncMock(return_value=(True, {"data": {}}))) as run:
            await client.mutate(
                mutation="mutation A { a } mutation B { b }",
                operation_name="B",
                context={"request": 1},
            )

        args, kwargs = run.call_args
        assert args[1]["operationName"] == "B"
        assert args[1]["variables"] == {}
        assert kwargs["context_value"] == {"request": 1}

    @pytest.mark.asyncio
    async def test_errors_raise(self) -> None:
        """Test that GraphQL errors reject the call."""
        client = AriadneTransportClient(object())
        result = {"data": None, "errors": [{"message": "City not found"}]}

        with patch(GRAPHQL, AsyncMock(return_value=(False, result))):
            with pytest.raises(TransportError, match="City not found"):
                await client.query(query="{ city { name } }")
