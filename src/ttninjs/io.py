"""Byte-stream transport helpers: read and write documents on binary streams.

Single documents are one JSON object per stream. Feeds are newline-delimited
JSON, one document per line; blank lines are skipped.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import IO

from ttninjs.codec import DecodeError, decode, encode
from ttninjs.models.document import Document

logger = logging.getLogger(__name__)


class FeedError(Exception):
    """A line of a newline-delimited feed failed to decode.

    Attributes:
        line_number: 1-based line number of the failing line.
        error: The underlying decode error.
    """

    def __init__(self, line_number: int, error: DecodeError) -> None:
        super().__init__(f"line {line_number}: {error}")
        self.line_number = line_number
        self.error = error


def read_document(stream: IO[bytes], *, max_depth: int | None = None) -> Document:
    """Read the whole stream and decode it as one Document."""
    return decode(stream.read(), max_depth=max_depth)


def write_document(document: Document, stream: IO[bytes], *, indent: int | None = None) -> int:
    """Encode a Document onto the stream. Returns the number of bytes written."""
    return stream.write(encode(document, indent=indent))


def iter_documents(stream: IO[bytes], *, max_depth: int | None = None) -> Iterator[Document]:
    """Decode a newline-delimited feed lazily, stopping at the first bad line.

    Raises:
        FeedError: If a line fails to decode.
    """
    for line_number, line in enumerate(stream, start=1):
        if not line.strip():
            continue
        try:
            yield decode(line, max_depth=max_depth)
        except DecodeError as e:
            logger.warning("Feed line %d rejected: %s", line_number, e)
            raise FeedError(line_number, e) from e


def write_documents(documents: Iterable[Document], stream: IO[bytes]) -> int:
    """Write Documents as a newline-delimited feed. Returns the document count."""
    count = 0
    for document in documents:
        stream.write(encode(document))
        stream.write(b"\n")
        count += 1
    return count
