"""Tests for the Document model - construction, absence rules and immutability."""

from __future__ import annotations

import datetime as dt
from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from ttninjs.models import (
    ENUMERATIONS,
    Document,
    GeometryType,
    ItemType,
    Place,
    Pubstatus,
    Revision,
    Signals,
    Standard,
    UpdateType,
    permitted_values,
)


def make_document(**overrides: object) -> Document:
    """Helper to create a valid Document."""
    fields: dict[str, object] = {
        "uri": "http://tt.se/media/text/1",
        "version": "1",
        "versioncreated": datetime(2023, 5, 11, 9, 0, tzinfo=UTC),
    }
    fields.update(overrides)
    return Document(**fields)


class TestDocumentConstruction:
    """Tests for programmatic construction of documents."""

    def test_minimal_document_has_only_uri(self) -> None:
        """A document needs nothing but a uri."""
        doc = Document(uri="a")

        assert doc.uri == "a"
        assert doc.type is None
        assert doc.headline is None
        assert doc.associations is None

    def test_uri_is_required(self) -> None:
        """Constructing a document without uri fails."""
        with pytest.raises(ValidationError) as exc_info:
            Document(headline="x")

        errors = exc_info.value.errors()
        assert errors[0]["type"] == "missing"
        assert errors[0]["loc"] == ("uri",)

    def test_empty_uri_counts_as_missing(self) -> None:
        """An empty uri is treated as absent and therefore missing."""
        with pytest.raises(ValidationError) as exc_info:
            Document(uri="")

        assert exc_info.value.errors()[0]["type"] == "missing"

    def test_enum_strings_become_members(self) -> None:
        """Enumeration values given as strings are stored as enum members."""
        doc = make_document(type="picture", pubstatus="withheld")

        assert doc.type is ItemType.PICTURE
        assert doc.pubstatus is Pubstatus.WITHHELD

    def test_invalid_enum_value_is_unrepresentable(self) -> None:
        """A string outside the closed set cannot be stored."""
        with pytest.raises(ValidationError) as exc_info:
            make_document(pubstatus="published")

        error = exc_info.value.errors()[0]
        assert error["type"] == "invalid_enumeration"
        assert error["ctx"]["permitted"] == permitted_values(Pubstatus)

    def test_embedded_documents_are_documents(self) -> None:
        """Associations given as dicts are validated as full documents."""
        doc = make_document(associations={"photo": {"uri": "b", "type": "picture"}})

        assert doc.associations is not None
        assert isinstance(doc.associations["photo"], Document)
        assert doc.associations["photo"].type is ItemType.PICTURE

    def test_embedded_document_without_uri_fails(self) -> None:
        """Required fields apply at every nesting level."""
        with pytest.raises(ValidationError) as exc_info:
            make_document(assignments={"a1": {"headline": "no uri"}})

        assert exc_info.value.errors()[0]["loc"] == ("assignments", "a1", "uri")

    def test_standard_accepts_alias_and_name(self) -> None:
        """Aliased fields can be populated by wire name or Python name."""
        by_alias = Document.model_validate({"uri": "a", "$standard": {"schema": "s"}})
        by_name = Document(uri="a", standard=Standard(schema_="s"))

        assert by_alias.standard == by_name.standard
        assert by_alias.standard is not None
        assert by_alias.standard.schema_ == "s"


class TestAbsenceRules:
    """Tests for null/empty handling and nullable numbers."""

    def test_null_is_absence(self) -> None:
        """Explicit null is treated exactly like a missing key."""
        doc = Document.model_validate({"uri": "a", "headline": None, "subject": None})

        assert doc.headline is None
        assert doc.subject is None

    def test_empty_values_are_absence(self) -> None:
        """Empty strings and collections are treated as absent."""
        doc = Document.model_validate(
            {"uri": "a", "headline": "", "subject": [], "associations": {}}
        )

        assert doc.headline is None
        assert doc.subject is None
        assert doc.associations is None

    def test_entity_without_fields_is_absence(self) -> None:
        """A nested entity with nothing set is stored as None."""
        doc = make_document(signals=Signals(), standard=Standard(name=""))

        assert doc.signals is None
        assert doc.standard is None

    def test_empty_string_in_closed_field_is_kept_for_rejection(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            Document.model_validate({"uri": "a", "pubstatus": ""})

        assert exc_info.value.errors()[0]["type"] == "invalid_enumeration"

    def test_zero_is_a_value(self) -> None:
        """Zero is distinct from absent for nullable numbers."""
        doc = make_document(charcount=0, urgency=0, signals=Signals(multipagecount=0))

        assert doc.charcount == 0.0
        assert doc.urgency == 0
        assert doc.signals is not None
        assert doc.signals.multipagecount == 0.0

    def test_false_is_a_value(self) -> None:
        """False is kept for nullable booleans."""
        signals = Signals(retransmission=False)

        assert signals.retransmission is False

    def test_date_and_datetime_are_independent(self) -> None:
        """Date-only and timestamp fields can be set independently."""
        doc = make_document(date="2023-06-06", enddatetime="2023-06-06T17:00:00+02:00")

        assert doc.date == dt.date(2023, 6, 6)
        assert doc.datetime is None
        assert doc.enddate is None
        assert doc.enddatetime is not None
        assert doc.enddatetime.utcoffset() == dt.timedelta(hours=2)


class TestScalarStrictness:
    """Tests that scalar fields never coerce across JSON types."""

    def test_numeric_string_rejected_for_integer(self) -> None:
        with pytest.raises(ValidationError):
            make_document(urgency="4")

    def test_boolean_rejected_for_integer(self) -> None:
        with pytest.raises(ValidationError):
            make_document(wordcount=True)

    def test_numeric_string_rejected_for_number(self) -> None:
        with pytest.raises(ValidationError):
            make_document(charcount="12.5")

    def test_integer_accepted_for_number(self) -> None:
        doc = make_document(charcount=12)

        assert doc.charcount == 12.0

    def test_unix_timestamp_rejected(self) -> None:
        """Timestamps must be RFC 3339 strings, never epoch numbers."""
        with pytest.raises(ValidationError) as exc_info:
            make_document(firstcreated=1683792000)

        assert exc_info.value.errors()[0]["type"] == "timestamp_type"

    def test_naive_timestamp_rejected(self) -> None:
        """Timestamps without an offset are rejected."""
        with pytest.raises(ValidationError):
            make_document(firstcreated="2023-05-11T06:30:00")

    @pytest.mark.parametrize(
        "raw",
        [
            "20230511T063000Z",
            "2023-05-11 06:30:00+00:00",
            "2023-05-11T06:30Z",
            "2023-05-11T06:30:00+0200",
            "2023-05-11T06:30:00Z\n",
        ],
    )
    def test_non_rfc3339_timestamp_rejected(self, raw: str) -> None:
        """Looser ISO 8601 forms are not RFC 3339 date-times."""
        with pytest.raises(ValidationError) as exc_info:
            make_document(firstcreated=raw)

        assert exc_info.value.errors()[0]["type"] == "timestamp_parsing"

    def test_rfc3339_variants_accepted(self) -> None:
        doc = make_document(
            firstcreated="2023-05-11t06:30:00.25z", expires="2023-05-11T06:30:00-05:00"
        )

        assert doc.firstcreated == datetime(2023, 5, 11, 6, 30, 0, 250000, tzinfo=UTC)
        assert doc.expires is not None
        assert doc.expires.utcoffset() == -dt.timedelta(hours=5)

    @pytest.mark.parametrize("raw", ["20230606", "2023-W23-2", "2023-6-6"])
    def test_non_calendar_date_rejected(self, raw: str) -> None:
        with pytest.raises(ValidationError) as exc_info:
            make_document(date=raw)

        assert exc_info.value.errors()[0]["type"] == "calendar_date_parsing"

    def test_timestamp_rejected_for_date(self) -> None:
        """A full timestamp is not a calendar date."""
        with pytest.raises(ValidationError) as exc_info:
            make_document(date="2023-06-06T10:00:00Z")

        assert exc_info.value.errors()[0]["type"] == "calendar_date_parsing"

    def test_string_rejected_for_flag(self) -> None:
        with pytest.raises(ValidationError):
            Signals(retransmission="true")


class TestImmutability:
    """Tests proving documents cannot be mutated after construction."""

    def test_document_is_frozen(self) -> None:
        doc = make_document()

        with pytest.raises(ValidationError):
            doc.headline = "changed"  # type: ignore[misc]

    def test_new_version_is_a_new_value(self) -> None:
        """A new version shares the uri and links back through revisions."""
        first = make_document(slug="BUDGET")
        second = first.model_copy(
            update={
                "version": "2",
                "versioncreated": datetime(2023, 5, 11, 10, 0, tzinfo=UTC),
                "revisions": [first.as_revision()],
            }
        )

        assert first.version == "1"
        assert first.revisions is None
        assert second.uri == first.uri
        assert second.revisions == [
            Revision(uri=first.uri, slug="BUDGET", versioncreated=first.versioncreated)
        ]

    def test_embedded_lists_paths(self) -> None:
        doc = make_document(
            associations={"photo": {"uri": "b"}},
            assignments={"text": {"uri": "c"}},
        )

        embedded = doc.embedded()

        assert sorted(embedded) == ['assignments["text"]', 'associations["photo"]']
        assert embedded['associations["photo"]'].uri == "b"


class TestEnumerations:
    """Tests for the closed enumeration value sets."""

    def test_item_type_values(self) -> None:
        assert permitted_values(ItemType) == (
            "text",
            "audio",
            "video",
            "picture",
            "graphic",
            "composite",
            "planning",
            "component",
            "event",
        )

    def test_update_type_includes_non_ascii_value(self) -> None:
        assert UpdateType("RÄ") is UpdateType.RA

    def test_geometry_type_enforced_on_place(self) -> None:
        place = Place(name="Stockholm", geometry_geojson={"type": "Point"})

        assert place.geometry_geojson is not None
        assert place.geometry_geojson.type is GeometryType.POINT

        with pytest.raises(ValidationError):
            Place(name="Stockholm", geometry_geojson={"type": "Polygon"})

    def test_enumeration_registry_covers_all_closed_fields(self) -> None:
        assert set(ENUMERATIONS) == {
            "type",
            "profile",
            "pubstatus",
            "representationtype",
            "sector",
            "advice.role",
            "place.geometry_geojson.type",
            "signals.updatetype",
        }
