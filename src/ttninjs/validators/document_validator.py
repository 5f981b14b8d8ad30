"""Document validator - codec-backed, non-raising validation of ttninjs input.

Runs the full decode (required fields, closed enumerations, types, embedding
depth) and reports every issue as a ValidationError with its field path.
FAILS CLOSED: anything other than a successful decode is a failed result.
"""

from __future__ import annotations

import logging
from typing import Any

from ttninjs.codec import DecodeError, decode, decode_value
from ttninjs.validators.schema_validator import ValidationError, ValidationResult

logger = logging.getLogger(__name__)


class DocumentValidator:
    """Validates raw ttninjs input without raising.

    Accepts JSON bytes/str or an already-parsed JSON tree.
    """

    def __init__(self, max_depth: int | None = None) -> None:
        self._max_depth = max_depth

    def validate(self, data: Any) -> ValidationResult:
        if data is None:
            return ValidationResult.fail_closed("Data is None - cannot validate")

        try:
            if isinstance(data, (bytes, bytearray, str)):
                decode(data, max_depth=self._max_depth)
            else:
                decode_value(data, max_depth=self._max_depth)
        except DecodeError as e:
            return ValidationResult.fail(
                [
                    ValidationError(code=issue.code, message=issue.message, path=issue.path)
                    for issue in e.issues
                ]
            )
        except Exception as e:
            # Anything unexpected (including configuration errors) fails closed
            logger.warning("Document validation failed closed: %s", e)
            return ValidationResult.fail_closed(f"Unexpected validation error: {e}")

        return ValidationResult.success()


def validate_document(data: Any, max_depth: int | None = None) -> ValidationResult:
    """Validate ttninjs input, returning a result instead of raising."""
    return DocumentValidator(max_depth=max_depth).validate(data)
