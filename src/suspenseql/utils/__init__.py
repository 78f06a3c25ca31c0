"""Utility helpers for suspenseql."""
