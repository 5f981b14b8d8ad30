"""Pointer to a previous version of a news object."""

from __future__ import annotations

from typing import ClassVar

from pydantic import Field

from ttninjs.models.base import NinjsModel
from ttninjs.models.types import Timestamp


class Revision(NinjsModel):
    """Lightweight reference to a prior version; only `uri` is required."""

    always_emitted: ClassVar[frozenset[str]] = frozenset({"uri"})

    replacing: list[str] | None = None
    slug: str | None = None
    uri: str = Field(..., min_length=1, description="Identifier of the previous version")
    versioncreated: Timestamp | None = None
