"""Default cache key strategies."""

import hashlib
import json
from collections.abc import Mapping
from typing import Any

DEFAULT_KEY = "default"
VARIABLES_DELIMITER = "-"


def hash_key_strategy(args: tuple[Any, ...]) -> str:
    """Generic strategy: stable hash over the full argument tuple.

    Args:
        args: The positional arguments passed to ``read``.

    Returns:
        ``"default"`` when there are no arguments, otherwise a 16 char
        SHA-256 prefix of the JSON-normalized argument list.
    """
    if not args:
        return DEFAULT_KEY
    return args_digest(args)


def args_digest(args: tuple[Any, ...]) -> str:
    """SHA-256 prefix of the arguments as sorted-key JSON.

    Values JSON cannot encode (transport clients, futures) contribute
    their ``str()`` form.
    """
    payload = json.dumps(list(args), sort_keys=True, default=str)
    return hashlib.sha256(payload.encode()).hexdigest()[:16]


def variables_key_strategy(args: tuple[Any, ...]) -> str:
    """Per-operation strategy used by generated wiring.

    Ignores the first argument (the transport client) and joins the
    values of the second argument's ``variables`` mapping with ``-``,
    in enumeration order.

    Args:
        args: ``(client, options)`` as passed to ``read``.

    Returns:
        The joined variable values, ``""`` when there are none.
    """
    options = args[1] if len(args) > 1 else None
    variables = _variables_of(options)
    return join_variable_values(variables)


def join_variable_values(variables: Mapping[str, Any] | None) -> str:
    """Join the string form of each variable value with ``-``.

    Example:
        >>> join_variable_values({"city": "melbourne", "country": "au"})
        'melbourne-au'
    """
    return VARIABLES_DELIMITER.join(
        stringify_value(value) for value in (variables or {}).values()
    )


def stringify_value(value: Any) -> str:
    """String form of a variable value, matching the emitted TypeScript.

    Booleans and None follow JavaScript spelling, integral floats drop
    their fraction and lists are comma-joined. Mappings are rendered as
    sorted JSON so nested input objects still produce stable keys.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        return ",".join(stringify_value(item) for item in value)
    if isinstance(value, Mapping):
        return json.dumps(value, sort_keys=True, default=str)
    return str(value)


def _variables_of(options: Any) -> Mapping[str, Any]:
    if options is None:
        return {}
    if isinstance(options, Mapping):
        variables = options.get("variables")
    else:
        variables = getattr(options, "variables", None)
    if variables is None:
        return {}
    if not isinstance(variables, Mapping):
        raise TypeError(
            f"variables must be a mapping, got {type(variables).__name__}"
        )
    return variables
