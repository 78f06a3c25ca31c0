"""Generated binding and plugin output entities."""

from dataclasses import dataclass, field

from suspenseql.core.entities.operation import OperationKind


@dataclass(frozen=True)
class GeneratedBinding:
    """Record of one generated suspense hook.

    Attributes:
        name: The converted operation name, e.g. ``GetWeatherQuery``.
        action: Transport client method the fetcher calls
            (``query`` or ``mutate``).
        options_type: The TypeScript options type of the accessor.
        hook_name: The exported accessor name.
        kind: The operation kind.
    """

    name: str
    action: str
    options_type: str
    hook_name: str
    kind: OperationKind


@dataclass
class PluginOutput:
    """Result of a generation pass.

    ``prepend`` holds import lines and shared declarations, ``content``
    the generated body.
    """

    prepend: list[str] = field(default_factory=list)
    content: str = ""

    def render(self) -> str:
        """Join prepend and content into the final file text."""
        return "\n".join([*self.prepend, self.content])
