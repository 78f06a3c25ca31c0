"""Domain entities for suspenseql."""

from suspenseql.core.entities.binding import GeneratedBinding, PluginOutput
from suspenseql.core.entities.cache_entry import CacheEntry
from suspenseql.core.entities.operation import (
    FragmentDescriptor,
    OperationDefinition,
    OperationKind,
    VariableDefinition,
)
from suspenseql.core.entities.plugin_config import PluginConfig
from suspenseql.core.entities.read_result import (
    Failed,
    Pending,
    ReadResult,
    Ready,
    Suspended,
)
from suspenseql.core.entities.transport_result import (
    TransportError,
    TransportResponse,
)

__all__ = [
    "CacheEntry",
    "PluginConfig",
    # Operations
    "OperationKind",
    "OperationDefinition",
    "VariableDefinition",
    "FragmentDescriptor",
    # Generation output
    "GeneratedBinding",
    "PluginOutput",
    # Read results
    "ReadResult",
    "Ready",
    "Pending",
    "Failed",
    "Suspended",
    # Transport
    "TransportResponse",
    "TransportError",
]
