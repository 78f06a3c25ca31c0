"""suspenseql - Suspense-ready data access for GraphQL operations.

Generates, for every query in a set of GraphQL documents, a small
read-through cache plus a ``use...SuspenseQuery`` hook that can be read
synchronously from a suspending renderer: missing data suspends the
render instead of blocking, and the scheduler re-runs it once the fetch
resolves.

Code generation (TypeScript output):
    from graphql import parse
    from suspenseql import plugin, validate

    documents = [parse('''
        query GetWeather($city: String!, $country: String!) {
            weather(city: $city, country: $country) { summary }
        }
    ''')]

    validate(schema, documents, {"disableChecks": False}, "src/hooks.tsx")
    output = plugin(schema, documents, {"useExternalDocument": False})
    print(output.render())

Runtime hooks (Python):
    from suspenseql import build_hooks, provide_transport_client, render_with_suspense
    from suspenseql.adapters.ariadne import AriadneTransportClient

    hooks = build_hooks(documents)
    use_weather = hooks["useGetWeatherSuspenseQuery"]

    with provide_transport_client(AriadneTransportClient(schema)):
        weather = await render_with_suspense(
            lambda: use_weather({"variables": {"city": "melbourne", "country": "au"}})
        )
"""

from suspenseql.client_context import (
    MissingTransportClientError,
    get_transport_client,
    provide_transport_client,
    use_transport_client,
)
from suspenseql.core.entities import (
    CacheEntry,
    Failed,
    FragmentDescriptor,
    GeneratedBinding,
    OperationDefinition,
    OperationKind,
    Pending,
    PluginConfig,
    PluginOutput,
    ReadResult,
    Ready,
    Suspended,
    TransportError,
    TransportResponse,
    VariableDefinition,
)
from suspenseql.core.interfaces import (
    ICacheKeyStrategy,
    IEntryStore,
    ITransportClient,
)
from suspenseql.core.services import (
    DocumentFile,
    DocumentReader,
    OperationClassifier,
    OperationHook,
    OperationPlan,
    OutputValidationError,
    SuspenseHooksGenerator,
    SuspenseLimitExceeded,
    SuspenseRepository,
    build_hooks,
    create_repository,
    render_with_suspense,
    resolve_read,
    wire_operation,
)
from suspenseql.decorators import suspense
from suspenseql.infrastructure import (
    InMemoryEntryStore,
    hash_key_strategy,
    variables_key_strategy,
)
from suspenseql.plugin import generate_file, plugin, validate

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Plugin entry points
    "plugin",
    "validate",
    "generate_file",
    # Core entities
    "CacheEntry",
    "PluginConfig",
    "PluginOutput",
    "GeneratedBinding",
    "OperationDefinition",
    "OperationKind",
    "VariableDefinition",
    "FragmentDescriptor",
    # Read results
    "ReadResult",
    "Ready",
    "Pending",
    "Failed",
    "Suspended",
    # Transport
    "TransportResponse",
    "TransportError",
    # Core interfaces
    "ICacheKeyStrategy",
    "IEntryStore",
    "ITransportClient",
    # Repository and scheduling
    "SuspenseRepository",
    "create_repository",
    "render_with_suspense",
    "resolve_read",
    "SuspenseLimitExceeded",
    # Generation
    "DocumentFile",
    "DocumentReader",
    "OperationClassifier",
    "OperationPlan",
    "SuspenseHooksGenerator",
    "OutputValidationError",
    # Runtime wiring
    "OperationHook",
    "build_hooks",
    "wire_operation",
    # Client context
    "provide_transport_client",
    "use_transport_client",
    "get_transport_client",
    "MissingTransportClientError",
    # Infrastructure implementations
    "InMemoryEntryStore",
    "hash_key_strategy",
    "variables_key_strategy",
    # Decorators
    "suspense",
]
