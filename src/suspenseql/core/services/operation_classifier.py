"""Operation classifier.

Decides whether an operation gets a suspense hook and derives every
name and type the generated wiring needs.

Rules:
- Subscriptions are never processed.
- Mutation-only operations are skipped unless the configuration opts
  into ``emit_mutation_hooks``.
- Anonymous operations keep an empty name component.
"""

import logging
from dataclasses import dataclass

from suspenseql.codegen.ts_builder import TypeRef, omit
from suspenseql.core.entities.binding import GeneratedBinding
from suspenseql.core.entities.operation import OperationDefinition, OperationKind
from suspenseql.core.entities.plugin_config import PluginConfig
from suspenseql.utils.naming import convert_name, lower_case_first_letter

logger = logging.getLogger(__name__)

EXTERNAL_DOCUMENTS_NAMESPACE = "Operations"


@dataclass(frozen=True)
class OperationPlan:
    """Everything needed to wire and emit one suspense hook.

    Attributes:
        operation: The source operation.
        operation_name: Converted name with kind suffix (``GetWeatherQuery``).
        base_name: Converted name with suspense suffix
            (``GetWeatherSuspenseQuery``).
        hook_name: The exported accessor (``useGetWeatherSuspenseQuery``).
        repository_name: The repository constant (``getWeatherSuspense``).
        client_action: Transport method (``query`` or ``mutate``).
        document_keyword: Options key holding the document
            (``query`` or ``mutation``).
        options_type_name: ``QueryOptions`` or ``MutationOptions``.
        document_variable: Reference to the document constant.
        result_type: Result type name (``GetWeatherQuery``).
        variables_type: Variables type name (``GetWeatherQueryVariables``).
    """

    operation: OperationDefinition
    operation_name: str
    base_name: str
    hook_name: str
    repository_name: str
    client_action: str
    document_keyword: str
    options_type_name: str
    document_variable: str
    result_type: str
    variables_type: str

    @property
    def is_mutation(self) -> bool:
        return self.operation.kind is OperationKind.MUTATION

    @property
    def options_type(self) -> TypeRef:
        """``Omit<QueryOptions<Vars, Result>, 'query'>``.

        The document field is excluded because the wiring always
        supplies the document itself.
        """
        return omit(
            TypeRef(self.options_type_name, (self.variables_type, self.result_type)),
            self.document_keyword,
        )

    def to_binding(self) -> GeneratedBinding:
        """Record of this plan for introspection."""
        return GeneratedBinding(
            name=self.operation_name,
            action=self.client_action,
            options_type=self.options_type.render(),
            hook_name=self.hook_name,
            kind=self.operation.kind,
        )


class OperationClassifier:
    """Classifies operations and derives their hook plans."""

    def __init__(self, config: PluginConfig | None = None) -> None:
        """Initialize the classifier.

        Args:
            config: Plugin configuration. Uses defaults if not provided.
        """
        self._config = config or PluginConfig()

    def document_variable_name(self, operation: OperationDefinition) -> str:
        """Name of the constant holding the operation's document."""
        name = convert_name(operation.name, suffix="Document")
        if self._config.use_external_document:
            return f"{EXTERNAL_DOCUMENTS_NAMESPACE}.{name}"
        return name

    def should_generate(self, operation: OperationDefinition) -> bool:
        """Check whether a hook is generated for the operation.

        Args:
            operation: The operation definition.

        Returns:
            True for queries, and for mutations when mutation hooks are
            enabled. Always False for subscriptions.
        """
        if operation.kind is OperationKind.SUBSCRIPTION:
            return False
        if operation.kind is OperationKind.MUTATION:
            return self._config.emit_mutation_hooks
        return True

    def classify(self, operation: OperationDefinition) -> OperationPlan | None:
        """Build the hook plan for an operation.

        Args:
            operation: The operation definition.

        Returns:
            The plan, or None if no hook is generated.
        """
        if not self.should_generate(operation):
            logger.debug(
                "Skipping %s operation %r", operation.kind.value, operation.name
            )
            return None

        is_mutation = operation.kind is OperationKind.MUTATION
        kind_suffix = operation.kind.type_suffix
        operation_name = convert_name(operation.name, suffix=kind_suffix)
        base_name = convert_name(operation.name, suffix=f"Suspense{kind_suffix}")

        return OperationPlan(
            operation=operation,
            operation_name=operation_name,
            base_name=base_name,
            hook_name=f"use{base_name}",
            repository_name=lower_case_first_letter(base_name),
            client_action="mutate" if is_mutation else "query",
            document_keyword="mutation" if is_mutation else "query",
            options_type_name="MutationOptions" if is_mutation else "QueryOptions",
            document_variable=self.document_variable_name(operation),
            result_type=operation_name,
            variables_type=f"{operation_name}Variables",
        )
