"""Transport response entity."""

from dataclasses import dataclass, field
from typing import Any


class TransportError(Exception):
    """Raised when a GraphQL response carries errors."""

    def __init__(self, errors: list[Any]) -> None:
        messages = ", ".join(_message(error) for error in errors) or "unknown error"
        super().__init__(f"GraphQL request failed: {messages}")
        self.errors = errors


@dataclass(frozen=True)
class TransportResponse:
    """Response of a transport call.

    Attributes:
        data: The ``data`` payload of the GraphQL response.
        errors: GraphQL errors, empty on success.
    """

    data: Any
    errors: tuple[Any, ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        return not self.errors

    def raise_for_errors(self) -> "TransportResponse":
        """Raise TransportError if the response has errors.

        Returns:
            The response itself, for chaining.
        """
        if self.errors:
            raise TransportError(list(self.errors))
        return self


def _message(error: Any) -> str:
    if isinstance(error, dict):
        return str(error.get("message", error))
    return str(getattr(error, "message", error))
