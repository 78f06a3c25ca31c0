"""Integration tests running generated hooks against a Strawberry schema."""

import pytest

strawberry = pytest.importorskip("strawberry")

from suspenseql import (  # noqa: E402
    build_hooks,
    provide_transport_client,
    render_with_suspense,
)
from suspenseql.adapters.strawberry import StrawberryTransportClient  # noqa: E402

CALLS: list[str] = []


@strawberry.type
class Weather:
    city: str
    country: str
    summary: str


@strawberry.type
class City:
    name: str


@strawberry.type
class Query:
    @strawberry.field
    def weather(self, city: str, country: str) -> Weather:
        CALLS.append(f"{city}-{country}")
        return Weather(city=city, country=country, summary="cloudy")

    @strawberry.field
    def cities(self) -> list[City]:
        return [City(name="melbourne")]


DOCUMENT = """
    query GetWeather($city: String!, $country: String!) {
        weather(city: $city, country: $country) {
            city
            summary
        }
    }
"""


@pytest.fixture
def client() -> StrawberryTransportClient:
    """Client for a Strawberry weather schema."""
    CALLS.clear()
    return StrawberryTransportClient(strawberry.Schema(query=Query))


class TestStrawberryHooks:
    """End-to-end tests with Strawberry."""

    @pytest.mark.asyncio
    async def test_render_with_suspense(self, client: StrawberryTransportClient) -> None:
        """Test a suspending render against Strawberry."""
        use_weather = build_hooks([DOCUMENT])["useGetWeatherSuspenseQuery"]
        options = {"variables": {"city": "hobart", "country": "au"}}

        with provide_transport_client(client):
            data = await render_with_suspense(lambda: use_weather(options))
            again = use_weather(options)

        assert data == {"weather": {"city": "hobart", "summary": "cloudy"}}
        assert again == data
        assert CALLS == ["hobart-au"]

    @pytest.mark.asyncio
    async def test_different_variables_fetch_separately(
        self, client: StrawberryTransportClient
    ) -> None:
        """Test per-variables cache keys."""
        use_weather = build_hooks([DOCUMENT])["useGetWeatherSuspenseQuery"]

        with provide_transport_client(client):
            for city in ("hobart", "darwin"):
                await render_with_suspense(
                    lambda: use_weather({"variables": {"city": city, "country": "au"}})
                )

        assert CALLS == ["hobart-au", "darwin-au"]
        assert len(use_weather.repository) == 2
