"""Ariadne framework adapter for suspenseql."""

from suspenseql.adapters.ariadne.client import AriadneTransportClient

__all__ = ["AriadneTransportClient"]
