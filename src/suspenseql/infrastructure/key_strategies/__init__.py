"""Cache key strategy implementations."""

from suspenseql.infrastructure.key_strategies.default import (
    DEFAULT_KEY,
    hash_key_strategy,
    join_variable_values,
    stringify_value,
    variables_key_strategy,
)

__all__ = [
    "DEFAULT_KEY",
    "hash_key_strategy",
    "variables_key_strategy",
    "join_variable_values",
    "stringify_value",
]
