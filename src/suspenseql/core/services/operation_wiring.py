"""Runtime wiring of operations into suspense hooks.

The Python counterpart of the generated TypeScript: for every hook
plan, a repository whose fetcher performs exactly one transport call,
and an accessor reading the client from the ambient context.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from graphql import DocumentNode

from suspenseql.client_context import use_transport_client
from suspenseql.core.entities.plugin_config import PluginConfig
from suspenseql.core.interfaces.transport_client import ITransportClient
from suspenseql.core.services.document_reader import DocumentFile, DocumentReader
from suspenseql.core.services.operation_classifier import (
    OperationClassifier,
    OperationPlan,
)
from suspenseql.core.services.suspense_repository import SuspenseRepository
from suspenseql.infrastructure.key_strategies.default import variables_key_strategy

Options = Mapping[str, Any]


class OperationHook:
    """A wired suspense hook for one operation.

    Calling the hook returns the operation's data, or raises
    ``Suspended`` while the fetch is in flight.
    """

    def __init__(
        self,
        plan: OperationPlan,
        document: DocumentNode,
        dedupe_in_flight: bool = False,
    ) -> None:
        """Initialize the hook.

        Args:
            plan: The classifier's plan for the operation.
            document: Executable document (operation plus fragments).
            dedupe_in_flight: Share in-flight fetches per key.
        """
        self._plan = plan
        self._document = document
        self._repository: SuspenseRepository[Any] = SuspenseRepository(
            self._fetch,
            to_cache_key=variables_key_strategy,
            dedupe_in_flight=dedupe_in_flight,
            name=plan.repository_name,
        )

    @property
    def name(self) -> str:
        return self._plan.hook_name

    @property
    def plan(self) -> OperationPlan:
        return self._plan

    @property
    def document(self) -> DocumentNode:
        return self._document

    @property
    def repository(self) -> SuspenseRepository[Any]:
        return self._repository

    async def _fetch(self, client: ITransportClient, options: Options | None) -> Any:
        request = {**(options or {}), self._plan.document_keyword: self._document}
        action = getattr(client, self._plan.client_action)
        response = await action(**request)
        return response.data

    def __call__(self, options: Options | None = None) -> Any:
        """Read the operation's data for ``options``.

        Args:
            options: Options bag: ``variables`` plus transport options.

        Returns:
            The response data.

        Raises:
            Suspended: While the fetch for these options is in flight.
        """
        client = use_transport_client()
        return self._repository.read(client, options).unwrap()


def wire_operation(
    plan: OperationPlan,
    document: DocumentNode,
    dedupe_in_flight: bool = False,
) -> OperationHook:
    """Wire a single operation plan into a hook."""
    return OperationHook(plan, document, dedupe_in_flight=dedupe_in_flight)


def build_hooks(
    documents: Iterable[DocumentFile | DocumentNode | str],
    config: PluginConfig | None = None,
    dedupe_in_flight: bool = False,
) -> dict[str, OperationHook]:
    """Wire every qualifying operation of the documents.

    The same classifier decides which operations get hooks as during
    code generation, so mutation-only operations are skipped unless
    ``emit_mutation_hooks`` is set.

    Args:
        documents: The parsed documents.
        config: Plugin configuration.
        dedupe_in_flight: Share in-flight fetches per key.

    Returns:
        Hooks keyed by their accessor name (``useGetWeatherSuspenseQuery``).
    """
    config = config or PluginConfig()
    reader = DocumentReader()
    classifier = OperationClassifier(config)

    ast = reader.merge(documents)
    fragments = [*reader.read_fragments(ast), *config.external_fragments]

    hooks: dict[str, OperationHook] = {}
    for operation in reader.read_operations(ast):
        plan = classifier.classify(operation)
        if plan is None:
            continue
        document = reader.operation_document(operation, fragments)
        hooks[plan.hook_name] = wire_operation(
            plan, document, dedupe_in_flight=dedupe_in_flight
        )
    return hooks
