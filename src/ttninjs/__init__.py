"""ttninjs - validated document model and codec for TT ninjs news objects."""

from ttninjs.codec import (
    DecodeError,
    InvalidEnumerationValue,
    MalformedInput,
    MissingRequiredField,
    NestingTooDeep,
    TypeMismatch,
    decode,
    decode_value,
    encode,
    to_value,
)
from ttninjs.models import Document, ItemType, Profile, Pubstatus, Representationtype, Revision

__version__ = "1.5.0"

__all__ = [
    "DecodeError",
    "Document",
    "InvalidEnumerationValue",
    "ItemType",
    "MalformedInput",
    "MissingRequiredField",
    "NestingTooDeep",
    "Profile",
    "Pubstatus",
    "Representationtype",
    "Revision",
    "TypeMismatch",
    "decode",
    "decode_value",
    "encode",
    "to_value",
]
