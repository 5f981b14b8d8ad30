"""Closed enumerations of the ttninjs format.

Every enumeration-constrained field is declared through `closed()`, which
attaches a membership check to the field. A string outside the fixed value set
is rejected with an `invalid_enumeration` error that names the offending value
and the permitted values, so an invalid value can never end up inside a model.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any

from pydantic import BeforeValidator
from pydantic_core import PydanticCustomError

INVALID_ENUMERATION = "invalid_enumeration"


class ItemType(str, Enum):
    """Generic news type of the object. `event` is a TT extension."""

    TEXT = "text"
    AUDIO = "audio"
    VIDEO = "video"
    PICTURE = "picture"
    GRAPHIC = "graphic"
    COMPOSITE = "composite"
    PLANNING = "planning"
    COMPONENT = "component"
    EVENT = "event"


class Profile(str, Enum):
    """Structure of the news object.

    PUBL is publishable, DATA is tables and figures not meant to be edited,
    INFO is for information only and RAW is material to be edited further.
    """

    PUBL = "PUBL"
    DATA = "DATA"
    INFO = "INFO"
    RAW = "RAW"


class Pubstatus(str, Enum):
    """Publishing status. `replaced` and `commissioned` are TT additions."""

    USABLE = "usable"
    WITHHELD = "withheld"
    CANCELED = "canceled"
    REPLACED = "replaced"
    COMMISSIONED = "commissioned"


class Representationtype(str, Enum):
    """How complete this representation of the item is."""

    COMPLETE = "complete"
    INCOMPLETE = "incomplete"
    ASSOCIATED = "associated"


class Sector(str, Enum):
    """Deprecated major grouping of content, superseded by genre."""

    INR = "INR"
    UTR = "UTR"
    EKO = "EKO"
    KLT = "KLT"
    SPT = "SPT"
    FEA = "FEA"
    NOJ = "NOJ"
    PRM = "PRM"


class AdviceRole(str, Enum):
    PUBLISH = "publish"


class GeometryType(str, Enum):
    POINT = "Point"


class UpdateType(str, Enum):
    """Kind of update signalled for a republished item."""

    KORR = "KORR"
    RA = "RÄ"
    UV = "UV"


def permitted_values(enum_cls: type[Enum]) -> tuple[str, ...]:
    """Return the wire values of an enumeration in declaration order."""
    return tuple(member.value for member in enum_cls)


def _membership_check(enum_cls: type[Enum]) -> Any:
    permitted = permitted_values(enum_cls)

    def check(value: Any) -> Any:
        if isinstance(value, enum_cls):
            return value
        if not isinstance(value, str):
            # Wrong shape, left to the enum validator itself
            return value
        if value not in permitted:
            raise PydanticCustomError(
                INVALID_ENUMERATION,
                "Value '{value}' is not one of the permitted values: {expected}",
                {
                    "value": value,
                    "expected": ", ".join(permitted),
                    "permitted": permitted,
                },
            )
        return enum_cls(value)

    return check


def closed(enum_cls: type[Enum]) -> Any:
    """Annotate an enumeration so that values outside its set are rejected."""
    return Annotated[enum_cls, BeforeValidator(_membership_check(enum_cls))]


ClosedItemType = closed(ItemType)
ClosedProfile = closed(Profile)
ClosedPubstatus = closed(Pubstatus)
ClosedRepresentationtype = closed(Representationtype)
ClosedSector = closed(Sector)
ClosedAdviceRole = closed(AdviceRole)
ClosedGeometryType = closed(GeometryType)
ClosedUpdateType = closed(UpdateType)

# Wire location of every enumeration-constrained field
ENUMERATIONS: dict[str, type[Enum]] = {
    "type": ItemType,
    "profile": Profile,
    "pubstatus": Pubstatus,
    "representationtype": Representationtype,
    "sector": Sector,
    "advice.role": AdviceRole,
    "place.geometry_geojson.type": GeometryType,
    "signals.updatetype": UpdateType,
}
