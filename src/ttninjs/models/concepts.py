"""Classification and annotation entities (subjects, persons, places, ...).

Most concepts share the `{code, name, rel, scheme}` shape. Persons, places,
organisations and information sources can also carry contact information.
"""

from __future__ import annotations

from typing import ClassVar

from pydantic import Field

from ttninjs.models.base import NinjsModel
from ttninjs.models.enums import ClosedGeometryType
from ttninjs.models.types import Integer, Number


class Address(NinjsModel):
    lines: list[str] | None = None
    locality: str | None = None
    area: str | None = None
    postalcode: str | None = None
    country: str | None = None


class ContactInfo(NinjsModel):
    """One way of contacting a person, place or organisation."""

    type: str | None = Field(default=None, description="Kind of contact, e.g. 'phone'")
    role: str | None = None
    lang: str | None = None
    name: str | None = None
    value: str | None = None
    address: Address | None = None


class Concept(NinjsModel):
    """Common shape of a concept attached to a news object."""

    code: str | None = None
    name: str | None = None
    rel: str | None = Field(default=None, description="Relationship of the concept to the item")
    scheme: str | None = Field(default=None, description="Scheme the code belongs to")


class ContactableConcept(Concept):
    contactinfo: list[ContactInfo] | None = None


class Subject(Concept):
    """Content classification (TT subject reference, IPTC media topics)."""

    creator: str | None = Field(default=None, description="Who or what assigned the subject")
    confidence: Integer | None = None
    relevance: Integer | None = None


class ObjectConcept(Concept):
    """Something material, excluding persons."""


class Event(Concept):
    """Something which happens in a planned or unplanned manner."""


class Fixture(Concept):
    """Story tag grouping items of a running story over time."""


class Person(ContactableConcept):
    """An individual human being."""


class Infosource(ContactableConcept):
    """A party that originated, modified or supplied the content."""


class GeometryGeojson(NinjsModel):
    """GeoJSON point geometry for a place."""

    closed_fields: ClassVar[frozenset[str]] = frozenset({"type"})

    coordinates: list[Number] | None = None
    type: ClosedGeometryType | None = None


class Place(ContactableConcept):
    """A named location."""

    geometry_geojson: GeometryGeojson | None = None


class Symbol(NinjsModel):
    """Financial instrument symbol of an organisation."""

    exchange: str | None = None
    symbol: str | None = None
    symboltype: str | None = None
    ticker: str | None = None


class Organisation(ContactableConcept):
    """A business, political party or not-for-profit party."""

    symbols: list[Symbol] | None = None


class Genre(NinjsModel):
    """Nature, intellectual or journalistic form of the content."""

    code: str | None = None
    name: str | None = None
    scheme: str | None = None


class Product(NinjsModel):
    """TT product classification code."""

    code: str | None = None
    name: str | None = None
    scheme: str | None = None


class Trustindicator(NinjsModel):
    """Link to a document about a trust indicator."""

    code: str | None = None
    href: str | None = None
    scheme: str | None = None
    title: str | None = None
