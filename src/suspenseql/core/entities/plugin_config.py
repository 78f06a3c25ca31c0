"""Plugin configuration entity."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from suspenseql.core.entities.operation import FragmentDescriptor


@dataclass
class PluginConfig:
    """Configuration recognized by the suspense hooks generator.

    Document Mode:
        By default every operation document is inlined as a
        ``gql`` tagged template. With ``use_external_document=True`` the
        generated code references ``Operations.<Name>Document`` imported
        from ``import_document_node_externally_from`` instead.

    Output Checks:
        ``disable_checks=True`` skips the output file extension check.

    Mutations:
        Mutation-only operations are skipped unless
        ``emit_mutation_hooks=True``.
    """

    use_external_document: bool = False
    import_document_node_externally_from: str = "./graphql"
    disable_checks: bool = False
    external_fragments: list[FragmentDescriptor] = field(default_factory=list)

    emit_mutation_hooks: bool = False

    gql_import: str = "graphql-tag"
    apollo_client_import: str = "@apollo/client"

    def __post_init__(self) -> None:
        """Normalize external fragments given as plain mappings."""
        self.external_fragments = [
            _to_fragment(fragment) for fragment in self.external_fragments
        ]

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any] | None) -> "PluginConfig":
        """Build a config from the host pipeline's option bag.

        Accepts both camelCase (``useExternalDocument``) and snake_case
        keys. Unknown keys are ignored.

        Args:
            raw: The raw configuration mapping.

        Returns:
            A new PluginConfig.
        """
        if raw is None:
            return cls()

        values: dict[str, Any] = {}
        for name in cls.__dataclass_fields__:
            camel = _camel_case(name)
            if name in raw:
                values[name] = raw[name]
            elif camel in raw:
                values[name] = raw[camel]
        return cls(**values)


def _camel_case(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _to_fragment(fragment: FragmentDescriptor | Mapping[str, Any]) -> FragmentDescriptor:
    if isinstance(fragment, FragmentDescriptor):
        return fragment
    return FragmentDescriptor(
        name=fragment["name"],
        on_type=fragment.get("onType", fragment.get("on_type", "")),
        node=fragment.get("node"),
        is_external=fragment.get("isExternal", fragment.get("is_external", True)),
        import_from=fragment.get("importFrom", fragment.get("import_from")),
    )
