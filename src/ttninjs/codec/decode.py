"""Validating decoder: JSON in, validated Document out.

Decoding runs in two phases:
1. Shape: parse the input into a generic JSON tree, require an object at the
   root and bound the embedding depth of associations/assignments.
2. Model: validate the tree against the Document model. Required fields and
   closed enumerations are checked field by field at every nesting level.

Every problem found in phase 2 is translated into the error taxonomy with its
location from the document root. Decoding is all-or-nothing: the first problem
is raised and carries the complete list in `issues`.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from typing import Any

from pydantic import ValidationError

from ttninjs.codec.errors import (
    DecodeError,
    InvalidEnumerationValue,
    MalformedInput,
    MissingRequiredField,
    NestingTooDeep,
    TypeMismatch,
)
from ttninjs.config import resolve_max_depth
from ttninjs.models.document import Document
from ttninjs.models.enums import INVALID_ENUMERATION

logger = logging.getLogger(__name__)

EMBEDDING_FIELDS = ("associations", "assignments")


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-standard JSON constant {name}")


def _json_type(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    return type(value).__name__


def parse_json(data: bytes | bytearray | str, *, max_depth: int | None = None) -> Any:
    """Parse raw input into a generic JSON tree.

    Raises:
        MalformedInput: If the input is not valid UTF-8 encoded JSON.
        NestingTooDeep: If the input nests deeper than the parser can follow.
    """
    try:
        text = data.decode("utf-8") if isinstance(data, (bytes, bytearray)) else data
        return json.loads(text, parse_constant=_reject_constant)
    except UnicodeDecodeError as e:
        raise MalformedInput(f"Input is not valid UTF-8: {e}") from e
    except ValueError as e:
        raise MalformedInput(f"Invalid JSON: {e}") from e
    except RecursionError as e:
        raise NestingTooDeep(resolve_max_depth(max_depth)) from e


def check_depth(tree: dict[str, Any], max_depth: int) -> None:
    """Reject trees whose embedded documents nest deeper than max_depth.

    The top-level document is depth 0; each associations/assignments level
    adds one. Walks iteratively so adversarial input cannot exhaust the stack.
    """
    pending: list[tuple[dict[str, Any], int, tuple[str | int, ...]]] = [(tree, 0, ())]
    while pending:
        node, depth, loc = pending.pop()
        for name in EMBEDDING_FIELDS:
            embedded = node.get(name)
            if not isinstance(embedded, dict):
                continue
            for key, child in embedded.items():
                if not isinstance(child, dict):
                    continue
                child_loc = (*loc, name, key)
                if depth + 1 > max_depth:
                    raise NestingTooDeep(max_depth, loc=child_loc)
                pending.append((child, depth + 1, child_loc))


def _entity_for(loc: Sequence[str | int]) -> str:
    # Revision entries are the only required-field holders inside a list
    if len(loc) >= 3 and loc[-3] == "revisions" and isinstance(loc[-2], int):
        return "Revision"
    return "Document"


def translate_errors(exc: ValidationError) -> list[DecodeError]:
    """Translate pydantic errors into decode errors, required fields first."""
    required: list[DecodeError] = []
    others: list[DecodeError] = []

    for error in exc.errors(include_url=False):
        loc = tuple(error["loc"])
        kind = error["type"]
        field = str(loc[-1]) if loc else "$"

        if kind == "missing":
            required.append(MissingRequiredField(field, _entity_for(loc), loc=loc))
        elif kind == INVALID_ENUMERATION:
            ctx = error.get("ctx") or {}
            others.append(
                InvalidEnumerationValue(
                    field,
                    ctx.get("value", error.get("input")),
                    ctx.get("permitted", ()),
                    loc=loc,
                )
            )
        else:
            others.append(TypeMismatch(error["msg"], error.get("input"), loc=loc))

    return required + others


def _validate_tree(tree: Any, max_depth: int | None) -> Document:
    if not isinstance(tree, dict):
        raise TypeMismatch(f"Document must be a JSON object, got {_json_type(tree)}", tree)

    check_depth(tree, resolve_max_depth(max_depth))

    try:
        document = Document.model_validate(tree)
    except ValidationError as e:
        issues = translate_errors(e)
        logger.debug(
            "Rejected document uri=%r with %d issue(s): %s",
            tree.get("uri"),
            len(issues),
            "; ".join(str(issue) for issue in issues),
        )
        raise issues[0].with_issues(issues) from e

    logger.debug("Decoded document uri=%s version=%s", document.uri, document.version)
    return document


def decode(data: bytes | bytearray | str, *, max_depth: int | None = None) -> Document:
    """Decode JSON text into a validated Document.

    Args:
        data: UTF-8 encoded JSON bytes, or JSON text.
        max_depth: Maximum embedding depth, capped at 64. Defaults to
            TTNINJS_MAX_DEPTH or 32.

    Returns:
        The validated, immutable Document.

    Raises:
        MalformedInput: If the input is not valid JSON.
        MissingRequiredField: If a required field is absent at any level.
        InvalidEnumerationValue: If a closed enumeration field has a foreign value.
        TypeMismatch: If a value has the wrong JSON type for its field.
        NestingTooDeep: If embedded documents nest deeper than max_depth.
    """
    return _validate_tree(parse_json(data, max_depth=max_depth), max_depth)


def decode_value(value: Any, *, max_depth: int | None = None) -> Document:
    """Decode an already-parsed JSON tree (dicts, lists, scalars) into a Document.

    Raises the same errors as `decode`, except MalformedInput.
    """
    return _validate_tree(value, max_depth)
