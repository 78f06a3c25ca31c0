"""Operation and fragment definitions consumed by the generator."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class OperationKind(Enum):
    """Kind of a GraphQL operation.

    SUBSCRIPTION is recognized only so it can be excluded.
    """

    QUERY = "query"
    MUTATION = "mutation"
    SUBSCRIPTION = "subscription"

    @property
    def type_suffix(self) -> str:
        """Suffix used in generated type names (``Query``, ``Mutation``)."""
        return self.value.capitalize()


@dataclass(frozen=True)
class VariableDefinition:
    """A declared operation variable.

    Attributes:
        name: Variable name without the ``$``.
        type: The printed GraphQL type, e.g. ``String!``.
    """

    name: str
    type: str


@dataclass(frozen=True)
class OperationDefinition:
    """A parsed, typed query or mutation.

    ``node`` keeps the graphql-core AST node so the document can be
    printed or executed later. It is excluded from equality.
    """

    name: str
    kind: OperationKind
    variables: tuple[VariableDefinition, ...] = ()
    node: Any = field(default=None, compare=False, repr=False)

    @property
    def variable_names(self) -> list[str]:
        """Declared variable names, in order."""
        return [variable.name for variable in self.variables]

    @property
    def has_variables(self) -> bool:
        return bool(self.variables)


@dataclass(frozen=True)
class FragmentDescriptor:
    """A fragment available to the generated documents.

    Local fragments are discovered in the parsed documents; external
    ones are supplied through configuration and are not re-emitted.
    """

    name: str
    on_type: str
    node: Any = field(default=None, compare=False, repr=False)
    is_external: bool = False
    import_from: str | None = None
