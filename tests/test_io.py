"""Tests for reading and writing documents on byte streams."""

from __future__ import annotations

import io

import pytest

from ttninjs.codec import MissingRequiredField, NestingTooDeep
from ttninjs.io import FeedError, iter_documents, read_document, write_document, write_documents
from ttninjs.models import Document, ItemType


class TestSingleDocument:
    def test_read_document(self, article_bytes: bytes) -> None:
        doc = read_document(io.BytesIO(article_bytes))

        assert doc.type is ItemType.TEXT

    def test_read_document_depth_limit(self) -> None:
        stream = io.BytesIO(b'{"uri": "a", "associations": {"b": {"uri": "b"}}}')

        with pytest.raises(NestingTooDeep):
            read_document(stream, max_depth=0)

    def test_write_then_read(self) -> None:
        doc = Document(uri="a", headline="Rubrik", type=ItemType.PICTURE)
        stream = io.BytesIO()

        written = write_document(doc, stream, indent=2)

        assert written == len(stream.getvalue())
        stream.seek(0)
        assert read_document(stream) == doc


class TestFeed:
    """Tests for newline-delimited feeds."""

    def test_write_documents_counts(self) -> None:
        stream = io.BytesIO()

        count = write_documents([Document(uri="a"), Document(uri="b")], stream)

        assert count == 2
        assert stream.getvalue() == b'{"uri":"a"}\n{"uri":"b"}\n'

    def test_iter_documents_skips_blank_lines(self) -> None:
        stream = io.BytesIO(b'{"uri":"a"}\n\n  \n{"uri":"b"}\n')

        assert [doc.uri for doc in iter_documents(stream)] == ["a", "b"]

    def test_bad_line_reports_line_number(self) -> None:
        stream = io.BytesIO(b'{"uri":"a"}\n\n{"headline":"no uri"}\n{"uri":"c"}\n')
        docs = iter_documents(stream)

        assert next(docs).uri == "a"
        with pytest.raises(FeedError) as exc_info:
            next(docs)

        assert exc_info.value.line_number == 3
        assert isinstance(exc_info.value.error, MissingRequiredField)
        assert str(exc_info.value) == "line 3: uri: Field uri in Document is required"
