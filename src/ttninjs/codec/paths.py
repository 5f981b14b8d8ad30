"""Rendering of field locations as root-relative paths.

A location is the tuple of field names, mapping keys and list indexes leading
from the document root to a value, e.g. ("associations", "photo1", "pubstatus").
It renders as `associations["photo1"].pubstatus`. The empty location is the
document root and renders as `$`.
"""

from __future__ import annotations

from collections.abc import Sequence

ROOT = "$"

# Fields whose value is a mapping with caller-chosen keys
MAPPING_FIELDS = frozenset({"associations", "assignments", "renditions", "body_pages"})


def format_path(loc: Sequence[str | int]) -> str:
    """Render a location tuple as a field path."""
    if not loc:
        return ROOT

    parts: list[str] = []
    expecting_key = False
    for element in loc:
        if isinstance(element, int):
            parts.append(f"[{element}]")
            expecting_key = False
        elif expecting_key:
            parts.append(f'["{element}"]')
            expecting_key = False
        else:
            parts.append(f".{element}" if parts else element)
            expecting_key = element in MAPPING_FIELDS
    return "".join(parts)
