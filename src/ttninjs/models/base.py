"""Shared base for every ttninjs entity.

Absence rules are enforced here once for the whole model:
- null, "" and empty arrays/objects in input are treated as absent, except
  that "" in a closed enumeration field is kept so it is rejected as a value
- a nested entity left with no fields set is itself absent
- absent and empty fields are omitted when serializing, except for the
  fields a class lists in `always_emitted`
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import (
    BaseModel,
    ConfigDict,
    SerializerFunctionWrapHandler,
    field_validator,
    model_serializer,
    model_validator,
)


def is_absent(value: Any) -> bool:
    """Return True for values that carry no content on the wire."""
    if value is None:
        return True
    if isinstance(value, (str, list, tuple, dict)) and len(value) == 0:
        return True
    return False


class NinjsModel(BaseModel):
    """Base model: forward-compatible, immutable, omits empty fields."""

    model_config = ConfigDict(
        extra="ignore",
        frozen=True,
        populate_by_name=True,
    )

    always_emitted: ClassVar[frozenset[str]] = frozenset()
    # Closed enumeration fields, where "" is an invalid value rather than absence
    closed_fields: ClassVar[frozenset[str]] = frozenset()

    @model_validator(mode="before")
    @classmethod
    def drop_absent_values(cls, data: Any) -> Any:
        """Treat explicit null and empty values as if the key were missing."""
        if isinstance(data, dict):
            return {
                key: value
                for key, value in data.items()
                if value is not None and (key in cls.closed_fields or not is_absent(value))
            }
        return data

    @field_validator("*", mode="after")
    @classmethod
    def collapse_empty_entities(cls, value: Any) -> Any:
        """An entity with no fields set is stored as None, the way it encodes."""
        if isinstance(value, NinjsModel) and value.is_empty():
            return None
        return value

    def is_empty(self) -> bool:
        return all(getattr(self, name) is None for name in type(self).model_fields)

    @model_serializer(mode="wrap")
    def omit_absent_values(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        return {
            key: value
            for key, value in data.items()
            if key in self.always_emitted or not is_absent(value)
        }
