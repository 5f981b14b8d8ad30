"""ttninjs document model: pydantic models for the news object and its parts."""

from ttninjs.models.base import NinjsModel, is_absent
from ttninjs.models.body_event import BodyEvent
from ttninjs.models.concepts import (
    Address,
    Concept,
    ContactInfo,
    Event,
    Fixture,
    Genre,
    GeometryGeojson,
    Infosource,
    ObjectConcept,
    Organisation,
    Person,
    Place,
    Product,
    Subject,
    Symbol,
    Trustindicator,
)
from ttninjs.models.document import Document
from ttninjs.models.editorial import (
    Advice,
    AdviceCode,
    Altids,
    Byline,
    Rightsinfo,
    Signals,
    Standard,
)
from ttninjs.models.enums import (
    ENUMERATIONS,
    AdviceRole,
    GeometryType,
    ItemType,
    Profile,
    Pubstatus,
    Representationtype,
    Sector,
    UpdateType,
    permitted_values,
)
from ttninjs.models.rendition import Rendition
from ttninjs.models.revision import Revision

__all__ = [
    "ENUMERATIONS",
    "Address",
    "Advice",
    "AdviceCode",
    "AdviceRole",
    "Altids",
    "BodyEvent",
    "Byline",
    "Concept",
    "ContactInfo",
    "Document",
    "Event",
    "Fixture",
    "Genre",
    "GeometryGeojson",
    "GeometryType",
    "Infosource",
    "ItemType",
    "NinjsModel",
    "ObjectConcept",
    "Organisation",
    "Person",
    "Place",
    "Product",
    "Profile",
    "Pubstatus",
    "Rendition",
    "Representationtype",
    "Revision",
    "Rightsinfo",
    "Sector",
    "Signals",
    "Standard",
    "Subject",
    "Symbol",
    "Trustindicator",
    "UpdateType",
    "is_absent",
    "permitted_values",
]
