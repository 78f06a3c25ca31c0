"""Unit tests for StrawberryTransportClient."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from graphql import parse

strawberry = pytest.importorskip("strawberry")

from suspenseql import TransportError  # noqa: E402
from suspenseql.adapters.strawberry import StrawberryTransportClient  # noqa: E402


def _schema(data=None, errors=None) -> MagicMock:
    schema = MagicMock()
    schema.execute = AsyncMock(return_value=SimpleNamespace(data=data, errors=errors))
    return schema


class TestStrawberryTransportClient:
    """Tests for StrawberryTransportClient."""

    @pytest.mark.asyncio
    async def test_query(self) -> None:
        """Test the execute call."""
        schema = _schema(data={"cities": []})
        client = StrawberryTransportClient(schema, root_value="root")

        response = await client.query(
            query=parse("query GetCities { cities { name } }"),
            variables={"limit": 1},
            operation_name="GetCities",
        )

        assert response.data == {"cities": []}
        args, kwargs = schema.execute.call_args
        assert args[0].startswith("query GetCities")
        assert kwargs["variable_values"] == {"limit": 1}
        assert kwargs["root_value"] == "root"
        assert kwargs["operation_name"] == "GetCities"

    @pytest.mark.asyncio
    async def test_mutate_passes_source_through(self) -> None:
        """Test that string documents are sent unchanged."""
        schema = _schema(data={"updateCity": {"name": "Perth"}})
        client = StrawberryTransportClient(schema, context_value={"user": 1})

        await client.mutate(mutation="mutation { updateCity { name } }")

        args, kwargs = schema.execute.call_args
        assert args[0] == "mutation { updateCity { name } }"
        assert kwargs["context_value"] == {"user": 1}

    @pytest.mark.asyncio
    async def test_errors_raise(self) -> None:
        """Test that GraphQL errors reject the call."""
        client = StrawberryTransportClient(
            _schema(errors=[SimpleNamespace(message="Forbidden")])
        )

        with pytest.raises(TransportError, match="Forbidden"):
            await client.query(query="{ cities { name } }")
