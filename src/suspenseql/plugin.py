"""Code generation plugin entry points.

The host pipeline calls ``validate`` with the intended output path and
then ``plugin`` with the schema, the parsed documents and the plugin
configuration. The configuration may be a ``PluginConfig`` or the raw
option mapping of the pipeline (``useExternalDocument``,
``disableChecks``, ``externalFragments``, ...).
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from graphql import DocumentNode

from suspenseql.core.entities.binding import PluginOutput
from suspenseql.core.entities.plugin_config import PluginConfig
from suspenseql.core.services.document_reader import DocumentFile
from suspenseql.core.services.generator import SuspenseHooksGenerator
from suspenseql.core.services.output_validator import validate_output_file

logger = logging.getLogger(__name__)

Documents = Iterable[DocumentFile | DocumentNode | str]


def plugin(
    schema: Any,
    documents: Documents,
    config: PluginConfig | Mapping[str, Any] | None = None,
) -> PluginOutput:
    """Generate suspense hooks for the documents.

    Args:
        schema: The parsed schema. Names and types are derived from the
            documents, so the schema is not inspected.
        documents: Parsed documents.
        config: Plugin configuration.

    Returns:
        Prepend lines (imports and shared declarations) and the content.
    """
    generator = SuspenseHooksGenerator(config=_as_config(config))
    output = generator.generate(documents)
    logger.info(
        "Generated %d suspense hook(s): %s",
        len(generator.bindings),
        ", ".join(binding.hook_name for binding in generator.bindings) or "none",
    )
    return output


def validate(
    schema: Any,
    documents: Documents,
    config: PluginConfig | Mapping[str, Any] | None,
    output_file: str,
) -> None:
    """Validate the output path before generation.

    Args:
        schema: The parsed schema (unused).
        documents: Parsed documents (unused).
        config: Plugin configuration; ``disable_checks`` skips validation.
        output_file: The intended output path.

    Raises:
        OutputValidationError: If the path is not a ``.ts``/``.tsx`` file.
    """
    validate_output_file(output_file, _as_config(config))


def generate_file(
    schema: Any,
    documents: Documents,
    output_file: str,
    config: PluginConfig | Mapping[str, Any] | None = None,
) -> str:
    """Validate the target and return the full generated file text.

    Args:
        schema: The parsed schema.
        documents: Parsed documents.
        output_file: The intended output path.
        config: Plugin configuration.

    Returns:
        Prepend lines and content joined into one source file.
    """
    resolved = _as_config(config)
    validate(schema, documents, resolved, output_file)
    return plugin(schema, documents, resolved).render()


def _as_config(config: PluginConfig | Mapping[str, Any] | None) -> PluginConfig:
    if isinstance(config, PluginConfig):
        return config
    return PluginConfig.from_mapping(config)
