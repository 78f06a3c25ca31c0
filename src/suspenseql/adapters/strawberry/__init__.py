"""Strawberry framework adapter for suspenseql."""

from suspenseql.adapters.strawberry.client import StrawberryTransportClient

__all__ = ["StrawberryTransportClient"]
