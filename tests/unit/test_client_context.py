"""Tests for the ambient transport client."""

import pytest

from suspenseql import (
    MissingTransportClientError,
    get_transport_client,
    provide_transport_client,
    use_transport_client,
)


class TestTransportClientContext:
    """Tests for provide_transport_client."""

    def test_no_client_by_default(self) -> None:
        """Test reading the context without a provider."""
        assert get_transport_client() is None
        with pytest.raises(MissingTransportClientError, match="provide_transport_client"):
            use_transport_client()

    def test_provides_client_within_block(self, fake_client) -> None:
        """Test the provider scope."""
        with provide_transport_client(fake_client) as provided:
            assert provided is fake_client
            assert use_transport_client() is fake_client

        assert get_transport_client() is None

    def test_nested_providers(self, fake_client) -> None:
        """Test that the innermost provider wins."""
        other = object()

        with provide_transport_client(fake_client):
            with provide_transport_client(other):
                assert use_transport_client() is other
            assert use_transport_client() is fake_client

    def test_missing_client_is_lookup_error(self) -> None:
        """Test the error hierarchy."""
        assert issubclass(MissingTransportClientError, LookupError)
