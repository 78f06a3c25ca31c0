"""Domain services for suspenseql."""

from suspenseql.core.services.document_reader import DocumentFile, DocumentReader
from suspenseql.core.services.generator import SuspenseHooksGenerator
from suspenseql.core.services.operation_classifier import (
    OperationClassifier,
    OperationPlan,
)
from suspenseql.core.services.operation_wiring import (
    OperationHook,
    build_hooks,
    wire_operation,
)
from suspenseql.core.services.output_validator import (
    VALID_FILE_EXTENSIONS,
    OutputValidationError,
    validate_output_file,
)
from suspenseql.core.services.suspense_repository import (
    SuspenseRepository,
    create_repository,
)
from suspenseql.core.services.suspense_scheduler import (
    SuspenseLimitExceeded,
    render_with_suspense,
    resolve_read,
)

__all__ = [
    "SuspenseRepository",
    "create_repository",
    # Scheduling
    "render_with_suspense",
    "resolve_read",
    "SuspenseLimitExceeded",
    # Generation
    "DocumentFile",
    "DocumentReader",
    "OperationClassifier",
    "OperationPlan",
    "SuspenseHooksGenerator",
    # Validation
    "OutputValidationError",
    "VALID_FILE_EXTENSIONS",
    "validate_output_file",
    # Runtime wiring
    "OperationHook",
    "build_hooks",
    "wire_operation",
]
