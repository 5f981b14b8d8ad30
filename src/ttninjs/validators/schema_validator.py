"""JSON Schema validator with fail-closed behavior.

Validates parsed JSON against the Document JSON Schema (or a schema file such
as the published ttninjs schema) and reports every violation with its path.
All validation FAILS CLOSED - any error or uncertainty results in rejection.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import jsonschema
from jsonschema import Draft202012Validator

from ttninjs.schemas import document_json_schema


@dataclass(frozen=True)
class ValidationError:
    """A single validation error."""

    code: str
    message: str
    path: str


@dataclass
class ValidationResult:
    """Result of validation - fail-closed by default."""

    passed: bool
    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationError] = field(default_factory=list)

    @classmethod
    def fail(cls, errors: list[ValidationError]) -> ValidationResult:
        """Create a failed result."""
        return cls(passed=False, errors=errors)

    @classmethod
    def success(cls, warnings: list[ValidationError] | None = None) -> ValidationResult:
        """Create a successful result."""
        return cls(passed=True, warnings=warnings or [])

    @classmethod
    def fail_closed(cls, reason: str) -> ValidationResult:
        """Fail closed with a single error - used when validation cannot proceed."""
        return cls(
            passed=False,
            errors=[ValidationError(code="FAIL_CLOSED", message=reason, path="$")],
        )


def _format_schema_path(parts: Any) -> str:
    return "$" + "".join(f".{p}" if isinstance(p, str) else f"[{p}]" for p in parts)


class SchemaValidator:
    """Validates JSON data against a JSON Schema with fail-closed behavior.

    - Missing required fields cause failure
    - Type mismatches and values outside enumerations cause failure
    - Unknown properties are allowed, matching the codec
    - Any schema loading error causes validation to fail closed
    """

    def __init__(self, schema_file: Path | str | None = None) -> None:
        """Initialize validator.

        Args:
            schema_file: JSON Schema file to validate against. Defaults to the
                         schema generated from the Document model.
        """
        self._schema_file = Path(schema_file) if schema_file is not None else None
        self._validator: Draft202012Validator | None = None

    def _load_schema(self) -> dict[str, Any] | None:
        """Load the schema. Returns None on any error (fail closed)."""
        if self._schema_file is None:
            return document_json_schema()

        try:
            if not self._schema_file.exists():
                return None

            with self._schema_file.open("r", encoding="utf-8") as f:
                schema: dict[str, Any] = json.load(f)
            return schema
        except (json.JSONDecodeError, OSError):
            # Fail closed on any file/parse error
            return None

    def _get_validator(self) -> Draft202012Validator | None:
        """Get the compiled validator. Returns None on error (fail closed)."""
        if self._validator is not None:
            return self._validator

        schema = self._load_schema()
        if schema is None:
            return None

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError:
            # Invalid schema - fail closed
            return None

        self._validator = Draft202012Validator(schema)
        return self._validator

    def validate(self, data: Any) -> ValidationResult:
        """Validate data against the schema.

        Args:
            data: Parsed JSON data to validate.

        Returns:
            ValidationResult with pass/fail and any errors.
            FAILS CLOSED on any error loading the schema or validating.
        """
        if data is None:
            return ValidationResult.fail_closed("Data is None - cannot validate")

        validator = self._get_validator()
        if validator is None:
            return ValidationResult.fail_closed(
                f"Cannot load or parse schema '{self._schema_file}' - validation fails closed"
            )

        errors: list[ValidationError] = []
        try:
            found = sorted(
                validator.iter_errors(data),
                key=lambda e: _format_schema_path(e.absolute_path),
            )
            for error in found:
                errors.append(
                    ValidationError(
                        code=str(error.validator),
                        message=error.message,
                        path=_format_schema_path(error.absolute_path),
                    )
                )
        except Exception as e:
            # Any unexpected error during validation - fail closed
            return ValidationResult.fail_closed(f"Unexpected validation error: {e}")

        if errors:
            return ValidationResult.fail(errors)

        return ValidationResult.success()

    def validate_json_file(self, json_path: Path | str) -> ValidationResult:
        """Validate a JSON file against the schema.

        Returns:
            ValidationResult - FAILS CLOSED on any file/parse error.
        """
        json_path = Path(json_path)

        try:
            if not json_path.exists():
                return ValidationResult.fail_closed(f"File not found: {json_path}")

            with json_path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            return ValidationResult.fail_closed(f"Invalid JSON: {e}")
        except OSError as e:
            return ValidationResult.fail_closed(f"Cannot read file: {e}")

        return self.validate(data)
