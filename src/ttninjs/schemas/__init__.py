"""JSON Schema export of the ttninjs Document model."""

from ttninjs.schemas.document import SCHEMA_DIALECT, document_json_schema, write_document_schema

__all__ = ["SCHEMA_DIALECT", "document_json_schema", "write_document_schema"]
