"""Naming conventions for generated TypeScript identifiers.

Mirrors the ``change-case`` pascal-case rules used by GraphQL code
generators, so that ``GetWeather``, ``getWeather`` and ``get-weather``
all become ``GetWeather``.
"""

import re

_SPLIT_PATTERNS = (
    re.compile(r"([a-z0-9])([A-Z])"),
    re.compile(r"([A-Z])([A-Z][a-z])"),
)
_STRIP_PATTERN = re.compile(r"[^A-Z0-9]+", re.IGNORECASE)
_TRAILING_OPERATION_SUFFIXES = (
    re.compile(r"Query$"),
    re.compile(r"Mutation$"),
)


def _split_words(value: str) -> list[str]:
    result = value
    for pattern in _SPLIT_PATTERNS:
        result = pattern.sub("\\1\0\\2", result)
    result = _STRIP_PATTERN.sub("\0", result)
    return [word for word in result.split("\0") if word]


def pascal_case(value: str) -> str:
    """Convert a string to PascalCase.

    Args:
        value: The raw identifier, in any casing.

    Returns:
        The PascalCase identifier. Words starting with a digit after the
        first word are prefixed with ``_`` to keep them readable.
    """
    words: list[str] = []
    for index, word in enumerate(_split_words(value)):
        first, rest = word[0], word[1:].lower()
        if index > 0 and first.isdigit():
            words.append(f"_{first}{rest}")
        else:
            words.append(f"{first.upper()}{rest}")
    return "".join(words)


def convert_name(
    name: str,
    suffix: str = "",
    prefix: str = "",
    transform_underscore: bool = False,
) -> str:
    """Apply the naming convention to an operation or fragment name.

    Args:
        name: The GraphQL name (may be empty for anonymous operations).
        suffix: Appended verbatim after conversion.
        prefix: Prepended verbatim before conversion.
        transform_underscore: When False, underscores are kept and every
            underscore-separated part is converted on its own.

    Returns:
        The converted identifier.
    """
    if transform_underscore:
        converted = pascal_case(name)
    else:
        converted = "_".join(pascal_case(part) for part in name.split("_"))
    return f"{prefix}{converted}{suffix}"


def lower_case_first_letter(term: str) -> str:
    """Lower-case the first letter and drop a trailing Query/Mutation.

    ``GetWeatherSuspenseQuery`` becomes ``getWeatherSuspense``.
    """
    result = f"{term[:1].lower()}{term[1:]}"
    for pattern in _TRAILING_OPERATION_SUFFIXES:
        result = pattern.sub("", result)
    return result
