"""Suspense hooks generator.

Walks the operations of the parsed documents, asks the classifier for
a hook plan for each one and emits TypeScript: fragment documents,
operation documents, one ``createRepository`` wiring per hook and the
exported ``use...`` accessor.
"""

import logging
from collections.abc import Iterable

from graphql import DocumentNode, print_ast

from suspenseql.codegen.doc_comment import build_hook_doc_comment
from suspenseql.codegen.templates import (
    CLIENT_TYPE,
    SUSPENSE_ARGS_TYPE,
    VARIABLES_KEY_STRATEGY,
    get_create_repository_declaration,
    suspense_args_alias,
)
from suspenseql.codegen.ts_builder import (
    ArrowFunction,
    Call,
    Const,
    Import,
    ObjectLiteral,
    Parameter,
    SourceFile,
    TypeRef,
    indent,
)
from suspenseql.core.entities.binding import GeneratedBinding, PluginOutput
from suspenseql.core.entities.operation import (
    FragmentDescriptor,
    OperationDefinition,
    OperationKind,
)
from suspenseql.core.entities.plugin_config import PluginConfig
from suspenseql.core.services.document_reader import (
    DocumentFile,
    DocumentReader,
    spread_names,
)
from suspenseql.core.services.operation_classifier import (
    EXTERNAL_DOCUMENTS_NAMESPACE,
    OperationClassifier,
    OperationPlan,
)
from suspenseql.utils.naming import convert_name

logger = logging.getLogger(__name__)


class SuspenseHooksGenerator:
    """Generates suspense hooks for the operations of a document set.

    A generator instance keeps the results of its last ``generate``
    call (plans and bindings) for introspection.
    """

    def __init__(
        self,
        config: PluginConfig | None = None,
        classifier: OperationClassifier | None = None,
        reader: DocumentReader | None = None,
    ) -> None:
        """Initialize the generator.

        Args:
            config: Plugin configuration. Uses defaults if not provided.
            classifier: Operation classifier. Built from config if omitted.
            reader: Document reader.
        """
        self._config = config or PluginConfig()
        self._classifier = classifier or OperationClassifier(self._config)
        self._reader = reader or DocumentReader()

        self._operations: list[OperationDefinition] = []
        self._fragments: list[FragmentDescriptor] = []
        self._plans: list[OperationPlan] = []
        self._query_bindings: list[GeneratedBinding] = []
        self._mutation_bindings: list[GeneratedBinding] = []

    @property
    def config(self) -> PluginConfig:
        return self._config

    @property
    def plans(self) -> list[OperationPlan]:
        return list(self._plans)

    @property
    def query_bindings(self) -> list[GeneratedBinding]:
        return list(self._query_bindings)

    @property
    def mutation_bindings(self) -> list[GeneratedBinding]:
        return list(self._mutation_bindings)

    @property
    def bindings(self) -> list[GeneratedBinding]:
        """All generated bindings, in emission order."""
        return [plan.to_binding() for plan in self._plans]

    @property
    def fragments(self) -> list[FragmentDescriptor]:
        """Local fragments followed by configured external ones."""
        return list(self._fragments)

    def generate(
        self,
        documents: Iterable[DocumentFile | DocumentNode | str],
    ) -> PluginOutput:
        """Run a generation pass.

        Args:
            documents: The parsed documents.

        Returns:
            The prepend lines and the generated body.
        """
        self._reset()
        ast = self._reader.merge(documents)

        self._fragments = [
            *self._reader.read_fragments(ast),
            *self._config.external_fragments,
        ]
        self._operations = self._reader.read_operations(ast)

        body = [self._operation_block(operation) for operation in self._operations]

        logger.debug(
            "Generated %d suspense hook(s) from %d operation(s)",
            len(self._plans),
            len(self._operations),
        )
        return PluginOutput(
            prepend=[*self.get_imports(), *self.create_dependencies()],
            content="\n".join([self.fragment_declarations(), *body]),
        )

    def get_imports(self) -> list[str]:
        """Import lines, plus the shared args type when there are operations."""
        client_imports = ["useApolloClient", "ApolloClient", "QueryOptions"]
        if self._mutation_bindings:
            client_imports.append("MutationOptions")

        imports = [
            Import(self._config.apollo_client_import, named=tuple(client_imports)).render(),
            Import("object-hash", default="hash").render(),
            *self._document_imports(),
        ]
        if not self._operations:
            return imports
        return [*imports, "", suspense_args_alias().render()]

    def create_dependencies(self) -> list[str]:
        """Shared declarations every generated hook depends on."""
        return [get_create_repository_declaration()]

    def fragment_declarations(self) -> str:
        """``gql`` constants for local fragments (inline document mode only)."""
        if self._config.use_external_document:
            return ""
        local = [fragment for fragment in self._fragments if not fragment.is_external]
        return SourceFile().add(
            *(
                Const(
                    name=self._fragment_doc_name(fragment.name),
                    value=self._gql(fragment.node),
                    exported=True,
                )
                for fragment in local
            )
        ).render()

    def _reset(self) -> None:
        self._operations = []
        self._fragments = []
        self._plans = []
        self._query_bindings = []
        self._mutation_bindings = []

    def _document_imports(self) -> list[str]:
        if self._config.use_external_document:
            if not self._operations:
                return []
            return [
                Import(
                    self._config.import_document_node_externally_from,
                    namespace=EXTERNAL_DOCUMENTS_NAMESPACE,
                ).render()
            ]

        if not self._operations and not self._fragments:
            return []
        imports = [Import(self._config.gql_import, default="gql").render()]
        for fragment in self._fragments:
            if fragment.is_external and fragment.import_from:
                imports.append(
                    Import(
                        fragment.import_from,
                        named=(self._fragment_doc_name(fragment.name),),
                    ).render()
                )
        return imports

    def _operation_block(self, operation: OperationDefinition) -> str:
        source = SourceFile()
        if not self._config.use_external_document:
            source.add(
                Const(
                    name=convert_name(operation.name, suffix="Document"),
                    value=self._gql(operation.node),
                    exported=True,
                )
            )

        plan = self._classifier.classify(operation)
        if plan is not None:
            source.add(*self._build_hook(plan))
            binding = plan.to_binding()
            self._plans.append(plan)
            if plan.operation.kind is OperationKind.MUTATION:
                self._mutation_bindings.append(binding)
            else:
                self._query_bindings.append(binding)

        return source.render()

    def _build_hook(self, plan: OperationPlan) -> tuple[Const, Const]:
        options_type = plan.options_type

        fetch_call = Call(
            callee=f"client.{plan.client_action}",
            type_args=(plan.result_type, plan.variables_type),
            args=(
                ObjectLiteral(
                    entries=((plan.document_keyword, plan.document_variable),),
                    spreads=("options",),
                ).render(),
            ),
        )
        fetcher = ArrowFunction(
            is_async=True,
            params=(
                Parameter("client", CLIENT_TYPE),
                Parameter("options", options_type),
            ),
            body=(
                f"const {{ data }} = await {fetch_call.render()};",
                "",
                "return data;",
            ),
        )
        repository = Const(
            name=plan.repository_name,
            value=Call(
                callee="createRepository",
                type_args=(
                    plan.result_type,
                    TypeRef(SUSPENSE_ARGS_TYPE, (options_type,)),
                ),
                args=(
                    fetcher.render(),
                    ObjectLiteral(entries=(("toCacheKey", VARIABLES_KEY_STRATEGY),)).render(),
                ),
            ).render(),
        )

        # Without variables the options bag may be omitted entirely; the
        # repository argument tuple still needs a value in its place.
        if plan.operation.has_variables:
            options_param, options_arg = "options", "options"
        else:
            options_param, options_arg = "options?", "options ?? {}"
        accessor = Const(
            name=plan.hook_name,
            exported=True,
            comment=build_hook_doc_comment(
                hook_name=plan.hook_name,
                document_keyword=plan.document_keyword,
                client_action=plan.client_action,
                variable_names=plan.operation.variable_names,
            ),
            value=ArrowFunction(
                params=(Parameter(options_param, options_type),),
                body=(
                    "const client = useApolloClient();",
                    f"return {plan.repository_name}.read(client, {options_arg});",
                ),
            ).render(),
        )
        return repository, accessor

    def _gql(self, node: object) -> str:
        printed = print_ast(node).replace("`", "\\`")  # type: ignore[arg-type]
        includes = [
            f"${{{self._fragment_doc_name(name)}}}"
            for name in spread_names(node)
            if self._knows_fragment(name)
        ]
        body = indent("\n".join([printed, *includes]))
        return f"gql`\n{body}\n`"

    def _knows_fragment(self, name: str) -> bool:
        return any(fragment.name == name for fragment in self._fragments)

    @staticmethod
    def _fragment_doc_name(name: str) -> str:
        return convert_name(name, suffix="FragmentDoc")
