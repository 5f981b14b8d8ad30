"""Document model: one versioned TT ninjs news object.

Derived from IPTC ninjs 1.5 with the TT extensions. A Document can embed
other complete Documents through `associations` (related content such as the
pictures of an article) and `assignments` (content to produce for a planning
item). Embedded documents use the same model with no distinction from the top
level, to any depth; the codec bounds that depth on decode.

All fields except `uri` are optional. Absent values are None; zero is a value.
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import Field

from ttninjs.models.base import NinjsModel
from ttninjs.models.body_event import BodyEvent
from ttninjs.models.concepts import (
    Event,
    Fixture,
    Genre,
    Infosource,
    ObjectConcept,
    Organisation,
    Person,
    Place,
    Product,
    Subject,
    Trustindicator,
)
from ttninjs.models.editorial import Advice, Altids, Byline, Rightsinfo, Signals, Standard
from ttninjs.models.enums import (
    ClosedItemType,
    ClosedProfile,
    ClosedPubstatus,
    ClosedRepresentationtype,
    ClosedSector,
)
from ttninjs.models.rendition import Rendition
from ttninjs.models.revision import Revision
from ttninjs.models.types import CalendarDate, Integer, Number, Timestamp


class Document(NinjsModel):
    """A TT news item as a JSON object.

    Attributes:
        uri: The identifier for this object. Required and non-empty.
        version: The version of the object identified by `uri`.
        versioncreated: When this version of the object was created.
        associations: News objects associated with this one, keyed by name.
        assignments: Assignments to produce content for a planning item.
        body_pages: Page descriptions of a page delivery. Open mapping.
        revisions: Pointers to the previous versions of this object.
    """

    always_emitted: ClassVar[frozenset[str]] = frozenset({"uri"})
    closed_fields: ClassVar[frozenset[str]] = frozenset(
        {"type", "profile", "pubstatus", "representationtype", "sector"}
    )

    standard: Standard | None = Field(default=None, alias="$standard")
    advice: list[Advice] | None = None
    altids: Altids | None = None
    assignments: dict[str, Document] | None = Field(
        default=None, description="Assignments connected with a planning item"
    )
    associations: dict[str, Document] | None = Field(
        default=None, description="Content associated with this news object"
    )
    body_event: BodyEvent | None = None
    body_html5: str | None = Field(default=None, description="Content as HTML5 (PUBL, DATA)")
    body_pages: dict[str, Any] | None = Field(
        default=None, description="Page descriptions, no fixed schema"
    )
    body_richhtml5: str | None = None
    body_sportsml: str | None = Field(default=None, description="Sports results as SportsML")
    body_text: str | None = Field(default=None, description="Content as untagged text")
    byline: str | None = None
    bylines: list[Byline] | None = None
    charcount: Number | None = Field(
        default=None, description="Character count excluding figure captions"
    )
    commissioncode: str | None = None
    commissionedby: list[str] | None = None
    contentcreated: Timestamp | None = None
    copyrightholder: str | None = None
    copyrightnotice: str | None = None
    date: CalendarDate | None = Field(default=None, description="Date only, see also datetime")
    datetime: Timestamp | None = None
    description_text: str | None = None
    description_usage: str | None = Field(default=None, description="Deprecated, use ednote")
    ednote: str | None = None
    embargoed: Timestamp | None = Field(
        default=None, description="All versions are embargoed until this time"
    )
    embargoedreason: str | None = None
    enddate: CalendarDate | None = None
    enddatetime: Timestamp | None = None
    event: list[Event] | None = None
    expires: Timestamp | None = None
    firstcreated: Timestamp | None = None
    fixture: list[Fixture] | None = None
    genre: list[Genre] | None = None
    headline: str | None = None
    infosource: list[Infosource] | None = None
    job: str | None = None
    language: str | None = Field(default=None, description="IETF BCP47 language tag")
    located: str | None = None
    mimetype: str | None = None
    newsvalue: Integer | None = Field(default=None, description="6 (most important) to 1")
    object: list[ObjectConcept] | None = None
    organisation: list[Organisation] | None = None
    originaltransmissionreference: str | None = None
    person: list[Person] | None = None
    place: list[Place] | None = None
    product: list[Product] | None = None
    profile: ClosedProfile | None = None
    pubstatus: ClosedPubstatus | None = None
    renditions: dict[str, Rendition] | None = None
    replacedby: str | None = None
    replacing: list[str] | None = None
    representationtype: ClosedRepresentationtype | None = None
    revisions: list[Revision] | None = None
    rightsinfo: Rightsinfo | None = None
    sector: ClosedSector | None = Field(default=None, description="Deprecated, moved to genre")
    signals: Signals | None = None
    slug: str | None = None
    slugline: str | None = None
    source: str | None = None
    subject: list[Subject] | None = None
    title: str | None = None
    trustindicator: list[Trustindicator] | None = None
    type: ClosedItemType | None = None
    urgency: Integer | None = Field(default=None, description="1 (most urgent) to 9, 4 is normal")
    uri: str = Field(..., min_length=1, description="The identifier for this object")
    usageterms: str | None = None
    version: str | None = None
    versioncreated: Timestamp | None = None
    versionstored: Timestamp | None = None
    webprio: Integer | None = None
    week: Integer | None = None
    wordcount: Integer | None = None

    def as_revision(self) -> Revision:
        """Return the pointer a later version lists in its `revisions`."""
        return Revision(
            uri=self.uri,
            slug=self.slug,
            replacing=self.replacing,
            versioncreated=self.versioncreated,
        )

    def embedded(self) -> dict[str, Document]:
        """Return associations and assignments keyed by their wire path."""
        found: dict[str, Document] = {}
        for name in ("associations", "assignments"):
            for key, document in (getattr(self, name) or {}).items():
                found[f'{name}["{key}"]'] = document
        return found
