"""Tests for output file validation."""

import pytest

from suspenseql import OutputValidationError, PluginConfig
from suspenseql.core.services.output_validator import validate_output_file

MESSAGE = "The output file must be a typescript file ending with either .ts or .tsx"


class TestValidateOutputFile:
    """Tests for validate_output_file."""

    @pytest.mark.parametrize("path", ["hooks.ts", "src/schema.tsx", "a/b.c.ts"])
    def test_typescript_files_pass(self, path: str) -> None:
        """Test accepted extensions."""
        validate_output_file(path)

    @pytest.mark.parametrize("path", ["schema.py", "hooks.js", "hooks", "hooks.d.tsx.bak"])
    def test_other_files_fail(self, path: str) -> None:
        """Test rejected extensions."""
        with pytest.raises(OutputValidationError, match=MESSAGE):
            validate_output_file(path)

    def test_disable_checks(self) -> None:
        """Test that disable_checks skips the check."""
        validate_output_file("schema.py", PluginConfig(disable_checks=True))
