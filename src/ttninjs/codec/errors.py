"""Decode error taxonomy.

Every error names the location of the offending value from the document root.
The raised error is the first problem found; `issues` holds every problem
found in the same decode, in report order, the raised error included.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, ClassVar

from ttninjs.codec.paths import format_path


class DecodeError(ValueError):
    """Base class for all decode failures.

    Attributes:
        code: Stable machine-readable error code.
        message: Human-readable description.
        loc: Location of the offending value as a tuple.
        path: Rendered location, e.g. `associations["x"].uri`.
        issues: All problems found during the decode.
    """

    code: ClassVar[str] = "DECODE_ERROR"

    def __init__(self, message: str, *, loc: Sequence[str | int] = ()) -> None:
        super().__init__(message)
        self.message = message
        self.loc: tuple[str | int, ...] = tuple(loc)
        self.path = format_path(self.loc)
        self.issues: list[DecodeError] = [self]

    def __str__(self) -> str:
        return f"{self.path}: {self.message}"

    def with_issues(self, issues: Sequence[DecodeError]) -> DecodeError:
        self.issues = list(issues)
        return self


class MalformedInput(DecodeError):
    """Input is not syntactically valid JSON."""

    code: ClassVar[str] = "MALFORMED_INPUT"


class MissingRequiredField(DecodeError):
    """A required field is absent, null or empty."""

    code: ClassVar[str] = "MISSING_REQUIRED_FIELD"

    def __init__(self, field: str, entity: str, *, loc: Sequence[str | int] = ()) -> None:
        super().__init__(f"Field {field} in {entity} is required", loc=loc or (field,))
        self.field = field
        self.entity = entity


class InvalidEnumerationValue(DecodeError):
    """A present value is not a member of its closed enumeration."""

    code: ClassVar[str] = "INVALID_ENUMERATION_VALUE"

    def __init__(
        self,
        field: str,
        value: Any,
        permitted: Sequence[str],
        *,
        loc: Sequence[str | int] = (),
    ) -> None:
        super().__init__(
            f"Invalid value {value!r} for {field} (expected one of {', '.join(permitted)})",
            loc=loc or (field,),
        )
        self.field = field
        self.value = value
        self.permitted: tuple[str, ...] = tuple(permitted)


class TypeMismatch(DecodeError):
    """A present value has the wrong shape for its declared type."""

    code: ClassVar[str] = "TYPE_MISMATCH"

    def __init__(self, message: str, value: Any = None, *, loc: Sequence[str | int] = ()) -> None:
        super().__init__(message, loc=loc)
        self.value = value


class NestingTooDeep(DecodeError):
    """Embedded documents are nested deeper than the configured maximum."""

    code: ClassVar[str] = "NESTING_TOO_DEEP"

    def __init__(self, max_depth: int, *, loc: Sequence[str | int] = ()) -> None:
        super().__init__(
            f"Embedded documents exceed the maximum depth of {max_depth}", loc=loc
        )
        self.max_depth = max_depth
