"""Scalar field types that never coerce across JSON types.

Timestamps accept RFC 3339 date-time strings with an offset (or aware
datetimes), dates accept `YYYY-MM-DD` strings (or dates). Numbers, booleans,
other shapes and the looser ISO 8601 forms (basic format, space separator,
missing seconds, week dates) are rejected.
"""

from __future__ import annotations

import datetime as dt
import re
from typing import Annotated, Any

from pydantic import AwareDatetime, BeforeValidator, StrictBool, StrictFloat, StrictInt
from pydantic_core import PydanticCustomError

RFC3339_DATETIME = re.compile(
    r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(?:\.\d+)?(?:Z|[+-]\d{2}:\d{2})",
    re.IGNORECASE | re.ASCII,
)
CALENDAR_DATE = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)


def parse_timestamp(value: Any) -> Any:
    """Parse an RFC 3339 string; datetimes pass through unchanged."""
    if isinstance(value, dt.datetime):
        return value
    if not isinstance(value, str):
        raise PydanticCustomError("timestamp_type", "Input should be an RFC 3339 date-time string")
    try:
        if not RFC3339_DATETIME.fullmatch(value):
            raise ValueError(value)
        return dt.datetime.fromisoformat(value.upper())
    except ValueError:
        raise PydanticCustomError(
            "timestamp_parsing",
            "Input should be an RFC 3339 date-time, got '{value}'",
            {"value": value},
        ) from None


def parse_calendar_date(value: Any) -> Any:
    """Parse a `YYYY-MM-DD` string; dates pass through unchanged."""
    # datetime is a date subclass but carries a time, which a date field cannot hold
    if isinstance(value, dt.date) and not isinstance(value, dt.datetime):
        return value
    if not isinstance(value, str):
        raise PydanticCustomError("calendar_date_type", "Input should be a YYYY-MM-DD date string")
    try:
        if not CALENDAR_DATE.fullmatch(value):
            raise ValueError(value)
        return dt.date.fromisoformat(value)
    except ValueError:
        raise PydanticCustomError(
            "calendar_date_parsing",
            "Input should be a YYYY-MM-DD date, got '{value}'",
            {"value": value},
        ) from None


Timestamp = Annotated[AwareDatetime, BeforeValidator(parse_timestamp)]
CalendarDate = Annotated[dt.date, BeforeValidator(parse_calendar_date)]

Integer = StrictInt
Number = StrictFloat
Flag = StrictBool
