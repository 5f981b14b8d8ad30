"""Encoder: Document out to the JSON wire format.

Encoding never validates and never fails for a well-typed Document. Absent and
empty fields are omitted; `uri` is always written.
"""

from __future__ import annotations

from typing import Any

from ttninjs.models.document import Document


def to_value(document: Document) -> dict[str, Any]:
    """Return the JSON-compatible tree of a Document (wire keys, ISO dates)."""
    return document.model_dump(mode="json", by_alias=True, exclude_none=True)


def encode(document: Document, *, indent: int | None = None) -> bytes:
    """Serialize a Document to UTF-8 JSON bytes."""
    return document.model_dump_json(by_alias=True, exclude_none=True, indent=indent).encode(
        "utf-8"
    )
