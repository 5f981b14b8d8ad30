"""Validating codec between the JSON wire format and the Document model."""

from ttninjs.codec.decode import decode, decode_value, parse_json
from ttninjs.codec.encode import encode, to_value
from ttninjs.codec.errors import (
    DecodeError,
    InvalidEnumerationValue,
    MalformedInput,
    MissingRequiredField,
    NestingTooDeep,
    TypeMismatch,
)
from ttninjs.codec.paths import format_path

__all__ = [
    "DecodeError",
    "InvalidEnumerationValue",
    "MalformedInput",
    "MissingRequiredField",
    "NestingTooDeep",
    "TypeMismatch",
    "decode",
    "decode_value",
    "encode",
    "format_path",
    "parse_json",
    "to_value",
]
