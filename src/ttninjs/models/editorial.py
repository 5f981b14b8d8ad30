"""Editorial metadata entities: advice, bylines, rights and delivery signals."""

from __future__ import annotations

from typing import ClassVar

from pydantic import Field

from ttninjs.models.base import NinjsModel
from ttninjs.models.enums import ClosedAdviceRole, ClosedUpdateType
from ttninjs.models.types import Flag, Number


class AdviceCode(NinjsModel):
    code: str | None = None
    scheme: str | None = None


class Advice(NinjsModel):
    """Editorial advice to the receiver of the news object.

    `importance` uses the advice-importance vocabulary (essential, useful,
    entertaining) and `lifetime` the advice-lifetime vocabulary (short, medium,
    long, evergreen). Neither vocabulary is closed in the format.
    """

    closed_fields: ClassVar[frozenset[str]] = frozenset({"role"})

    environment: list[AdviceCode] | None = None
    importance: AdviceCode | None = None
    lifetime: AdviceCode | None = None
    role: ClosedAdviceRole | None = None


class Byline(NinjsModel):
    """One creator of the content."""

    affiliation: str | None = None
    byline: str | None = None
    email: str | None = None
    firstname: str | None = None
    initials: str | None = None
    internal: str | None = None
    jobtitle: str | None = None
    lastname: str | None = None
    phone: str | None = None
    role: str | None = None


class Altids(NinjsModel):
    originaltransmissionreference: str | None = Field(
        default=None, description="Identifier in the originating system"
    )


class Rightsinfo(NinjsModel):
    encodedrights: str | None = None
    langid: str | None = None
    linkedrights: str | None = None


class Standard(NinjsModel):
    """Standard, version and schema this instance is valid against."""

    name: str | None = None
    schema_: str | None = Field(default=None, alias="schema")
    version: str | None = None


class Signals(NinjsModel):
    """Delivery signals for page products and updates."""

    closed_fields: ClassVar[frozenset[str]] = frozenset({"updatetype"})

    deliverytags: list[str] | None = None
    multipagecount: Number | None = Field(
        default=None, description="Number of pages in a multi-page delivery"
    )
    pagecode: str | None = None
    pageproduct: str | None = None
    pagevariant: str | None = None
    paginae: list[str] | None = None
    retransmission: Flag | None = None
    updatetype: ClosedUpdateType | None = None
