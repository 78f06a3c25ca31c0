"""Pytest configuration for suspenseql tests."""

from typing import Any

import pytest
from graphql import DocumentNode, parse

from suspenseql.core.entities.transport_result import TransportResponse

WEATHER_SDL = """
    type Query {
        weather(city: String!, country: String!): Weather!
        cities: [City!]!
    }

    type Mutation {
        updateCity(name: String!): City!
    }

    type Subscription {
        cityAdded: City!
    }

    type Weather {
        city: String!
        country: String!
        summary: String!
    }

    type City {
        name: String!
    }
"""

WEATHER_DOCUMENT = """
    query GetWeather($city: String!, $country: String!) {
        weather(city: $city, country: $country) {
            city
            country
            summary
        }
    }

    mutation UpdateCity($name: String!) {
        updateCity(name: $name) {
            name
        }
    }
"""


class FakeTransportClient:
    """Transport client recording calls and answering from a callback."""

    def __init__(self, respond: Any = None) -> None:
        self.calls: list[tuple[str, dict[str, Any]]] = []
        self._respond = respond or (lambda action, request: {"ok": True})

    async def query(self, **request: Any) -> TransportResponse:
        self.calls.append(("query", request))
        return TransportResponse(data=self._respond("query", request))

    async def mutate(self, **request: Any) -> TransportResponse:
        self.calls.append(("mutate", request))
        return TransportResponse(data=self._respond("mutate", request))


@pytest.fixture
def weather_document() -> DocumentNode:
    """The GetWeather query plus the UpdateCity mutation."""
    return parse(WEATHER_DOCUMENT)


@pytest.fixture
def fake_client() -> FakeTransportClient:
    """A transport client echoing the variables it was called with."""
    return FakeTransportClient(
        respond=lambda action, request: {"echo": dict(request.get("variables") or {})}
    )
