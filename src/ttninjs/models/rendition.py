"""Renditions of the non-textual content of a news object."""

from __future__ import annotations

from pydantic import Field

from ttninjs.models.base import NinjsModel
from ttninjs.models.types import Integer, Number


class Rendition(NinjsModel):
    """One rendition (a file or stream) of a picture, video, audio or graphic."""

    href: str | None = Field(default=None, description="Location of the rendition")
    mimetype: str | None = None
    title: str | None = None
    height: Integer | None = None
    width: Integer | None = None
    sizeinbytes: Integer | None = None
    usage: str | None = None
    variant: str | None = None
    unit: str | None = None
    bitrate: str | None = None
    duration: Number | None = None
    format: str | None = None
    printsize: Number | None = None
