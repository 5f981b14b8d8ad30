"""ttninjs validators - fail-closed validation returning ValidationResult."""

from ttninjs.validators.document_validator import DocumentValidator, validate_document
from ttninjs.validators.schema_validator import (
    SchemaValidator,
    ValidationError,
    ValidationResult,
)

__all__ = [
    "DocumentValidator",
    "SchemaValidator",
    "ValidationError",
    "ValidationResult",
    "validate_document",
]
