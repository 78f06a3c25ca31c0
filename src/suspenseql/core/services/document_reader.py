"""Reader turning parsed GraphQL documents into operation definitions.

Works on graphql-core ``DocumentNode`` trees. Anonymous operations keep
an empty name rather than failing.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from graphql import (
    DocumentNode,
    FragmentDefinitionNode,
    FragmentSpreadNode,
    OperationDefinitionNode,
    OperationType,
    concat_ast,
    parse,
    print_ast,
)

from suspenseql.core.entities.operation import (
    FragmentDescriptor,
    OperationDefinition,
    OperationKind,
    VariableDefinition,
)

_OPERATION_KINDS = {
    OperationType.QUERY: OperationKind.QUERY,
    OperationType.MUTATION: OperationKind.MUTATION,
    OperationType.SUBSCRIPTION: OperationKind.SUBSCRIPTION,
}


@dataclass(frozen=True)
class DocumentFile:
    """A parsed document and where it came from."""

    document: DocumentNode
    location: str | None = None

    @classmethod
    def from_source(cls, source: str, location: str | None = None) -> "DocumentFile":
        """Parse GraphQL source text into a DocumentFile."""
        return cls(document=parse(source), location=location)


class DocumentReader:
    """Reads operations and fragments out of GraphQL documents."""

    def merge(self, documents: Iterable[DocumentFile | DocumentNode | str]) -> DocumentNode:
        """Concatenate documents into a single AST.

        Args:
            documents: Document files, graphql-core documents or raw source.

        Returns:
            One DocumentNode holding every definition, in input order.
        """
        return concat_ast([_as_document(document) for document in documents])

    def read_operations(self, document: DocumentNode) -> list[OperationDefinition]:
        """Extract operation definitions in document order.

        Args:
            document: The parsed document.

        Returns:
            One OperationDefinition per operation node.
        """
        return [
            self.read_operation(definition)
            for definition in document.definitions
            if isinstance(definition, OperationDefinitionNode)
        ]

    def read_operation(self, node: OperationDefinitionNode) -> OperationDefinition:
        """Convert a single operation node."""
        name = node.name.value if node.name else ""
        variables = tuple(
            VariableDefinition(
                name=definition.variable.name.value,
                type=print_ast(definition.type),
            )
            for definition in node.variable_definitions or ()
        )
        return OperationDefinition(
            name=name,
            kind=_OPERATION_KINDS[node.operation],
            variables=variables,
            node=node,
        )

    def read_fragments(self, document: DocumentNode) -> list[FragmentDescriptor]:
        """Extract the local fragment definitions.

        Args:
            document: The parsed document.

        Returns:
            Fragment descriptors flagged as local.
        """
        return [
            FragmentDescriptor(
                name=definition.name.value,
                on_type=definition.type_condition.name.value,
                node=definition,
                is_external=False,
            )
            for definition in document.definitions
            if isinstance(definition, FragmentDefinitionNode)
        ]

    def operation_document(
        self,
        operation: OperationDefinition,
        fragments: Iterable[FragmentDescriptor],
    ) -> DocumentNode:
        """Build an executable document for one operation.

        The document holds the operation and every fragment it spreads,
        directly or transitively, that has an AST node available.

        Args:
            operation: The operation to execute.
            fragments: Known fragments.

        Returns:
            A standalone DocumentNode.
        """
        by_name = {fragment.name: fragment for fragment in fragments if fragment.node}
        used = self.used_fragment_names(operation.node, by_name)
        return DocumentNode(
            definitions=(
                operation.node,
                *(by_name[name].node for name in used if name in by_name),
            ),
        )

    def used_fragment_names(
        self,
        node: Any,
        fragments: dict[str, FragmentDescriptor],
    ) -> list[str]:
        """Names of fragments spread by ``node``, transitively, first use first."""
        found: list[str] = []
        pending = [node]
        while pending:
            current = pending.pop(0)
            for name in spread_names(current):
                if name in found:
                    continue
                found.append(name)
                fragment = fragments.get(name)
                if fragment is not None and fragment.node is not None:
                    pending.append(fragment.node)
        return found


def _as_document(document: DocumentFile | DocumentNode | str) -> DocumentNode:
    if isinstance(document, DocumentFile):
        return document.document
    if isinstance(document, str):
        return parse(document)
    return document


def spread_names(node: Any) -> list[str]:
    """Fragments spread directly inside ``node``'s selections, deduplicated."""
    names: list[str] = []
    selection_set = getattr(node, "selection_set", None)
    if selection_set is None:
        return names
    for selection in selection_set.selections:
        if isinstance(selection, FragmentSpreadNode):
            if selection.name.value not in names:
                names.append(selection.name.value)
        else:
            names.extend(
                name for name in spread_names(selection) if name not in names
            )
    return names
