"""Framework adapters for suspenseql."""
