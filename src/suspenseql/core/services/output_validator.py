"""Output file validation."""

from pathlib import PurePath

from suspenseql.core.entities.plugin_config import PluginConfig

VALID_FILE_EXTENSIONS = (".ts", ".tsx")


class OutputValidationError(Exception):
    """Raised when the generated file cannot be written to the target path."""

    pass


def validate_output_file(output_file: str, config: PluginConfig | None = None) -> None:
    """Check that the output file is a TypeScript source file.

    Args:
        output_file: The intended output path.
        config: Plugin configuration. ``disable_checks`` skips the check.

    Raises:
        OutputValidationError: If the extension is not ``.ts`` or ``.tsx``.
    """
    if config is not None and config.disable_checks:
        return

    if PurePath(output_file).suffix not in VALID_FILE_EXTENSIONS:
        raise OutputValidationError(
            "The output file must be a typescript file ending with either .ts or .tsx"
        )
