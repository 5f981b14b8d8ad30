"""Event-database payload carried by event and planning items."""

from __future__ import annotations

from pydantic import Field

from ttninjs.models.base import NinjsModel
from ttninjs.models.types import Timestamp


class BodyEvent(NinjsModel):
    """Data on an upcoming event.

    A cancelled event keeps `pubstatus` usable on the document; the
    cancellation is expressed here through `eventstatus`.
    """

    accreditation: str | None = None
    address: str | None = None
    arena: str | None = None
    changedby: str | None = Field(default=None, description="Initials of the last editor")
    changeddate: Timestamp | None = None
    city: str | None = None
    country: str | None = Field(default=None, description="Three letter country code")
    courtcasenumber: str | None = None
    createdby: str | None = None
    createddate: Timestamp | None = None
    eventphone: str | None = None
    eventstatus: str | None = None
    eventstatus_text: str | None = None
    eventtags: str | None = None
    eventtype: str | None = None
    eventtype_text: str | None = None
    eventurl: str | None = None
    eventweb: str | None = None
    extraurl: str | None = None
    municipality: str | None = None
    municipality_text: str | None = None
    note_extra: str | None = None
    note_pm: str | None = None
    organizer: str | None = None
    organizeraddress: str | None = None
    organizercity: str | None = None
    organizercountry: str | None = None
    organizermail: str | None = None
    organizerphone: str | None = None
    organizerurl: str | None = None
    region: str | None = None
    region_text: str | None = None
