"""Generate the JSON Schema (draft 2020-12) of the Document model.

The schema is derived from the pydantic models, so it always matches what the
codec accepts structurally. Two codec rules are not expressible in it and are
only enforced by the codec: empty strings/collections counting as absent, and
the embedding depth limit.
"""

from __future__ import annotations

import copy
import json
from functools import cache
from pathlib import Path
from typing import Any

from ttninjs.models.document import Document

SCHEMA_DIALECT = "https://json-schema.org/draft/2020-12/schema"


@cache
def _generate() -> dict[str, Any]:
    schema = Document.model_json_schema(by_alias=True)
    schema["$schema"] = SCHEMA_DIALECT
    schema["title"] = "TT ninjs document"
    return schema


def document_json_schema() -> dict[str, Any]:
    """Return a fresh copy of the Document JSON Schema."""
    return copy.deepcopy(_generate())


def write_document_schema(path: Path | str) -> Path:
    """Write the Document JSON Schema to a file with deterministic ordering."""
    target = Path(path)
    target.write_text(
        json.dumps(document_json_schema(), indent=2, sort_keys=True, ensure_ascii=False) + "\n",
        encoding="utf-8",
    )
    return target
