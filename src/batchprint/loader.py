"""Batch documents: JSON files describing a schema and its batches.

Document layout:

    {
      "schema": [{"name": "a", "type": "int64"}, {"name": "b"}],
      "batches": [
        {"columns": [[1, 2], ["x", "y"]]},
        {"rows": [[3, "z"]]}
      ]
    }

Each batch is given either column by column or row by row. Documents are
validated against DOCUMENT_SCHEMA before any batch is built.
"""

import json
from pathlib import Path
from typing import Any, TextIO

import jsonschema

from .model import Batch, Field, Schema

DOCUMENT_SCHEMA = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "batchprint document",
    "type": "object",
    "required": ["schema", "batches"],
    "properties": {
        "schema": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["name"],
                "properties": {
                    "name": {"type": "string", "minLength": 1},
                    "type": {"type": "string"},
                    "nullable": {"type": "boolean"},
                },
            },
        },
        "batches": {
            "type": "array",
            "items": {
                "type": "object",
                "oneOf": [
                    {
                        "required": ["columns"],
                        "properties": {
                            "columns": {"type": "array", "items": {"type": "array"}}
                        },
                    },
                    {
                        "required": ["rows"],
                        "properties": {
                            "rows": {"type": "array", "items": {"type": "array"}}
                        },
                    },
                ],
            },
        },
    },
}


class DocumentError(ValueError):
    """Raised when a batch document is malformed."""

    def __init__(self, location: str, reason: str):
        self.location = location
        self.reason = reason
        super().__init__(f"{location}: {reason}")


def parse_document(data: Any) -> tuple[Schema, list[Batch]]:
    """Validate a decoded document and build its schema and batches.

    Args:
        data: Decoded JSON document.

    Returns:
        Tuple of (schema, batches).

    Raises:
        DocumentError: If the document does not match DOCUMENT_SCHEMA or a
            batch does not fit the schema.
    """
    try:
        jsonschema.validate(data, DOCUMENT_SCHEMA)
    except jsonschema.ValidationError as e:
        location = "/".join(str(p) for p in e.absolute_path) or "document"
        raise DocumentError(location, e.message) from e

    schema = Schema(
        tuple(
            Field(f["name"], f.get("type", "utf8"), f.get("nullable", True))
            for f in data["schema"]
        )
    )

    batches = []
    for i, entry in enumerate(data["batches"]):
        try:
            if "columns" in entry:
                batches.append(Batch(schema, tuple(entry["columns"])))
            else:
                batches.append(Batch.from_rows(schema, entry["rows"]))
        except ValueError as e:
            raise DocumentError(f"batches/{i}", str(e)) from e
    return schema, batches


def read_document(stream: TextIO) -> tuple[Schema, list[Batch]]:
    """Read and parse a document from an open text stream."""
    try:
        data = json.load(stream)
    except json.JSONDecodeError as e:
        raise DocumentError("document", f"Invalid JSON: {e}") from e
    return parse_document(data)


def load_document(path: Path) -> tuple[Schema, list[Batch]]:
    """Load a document from a file.

    Raises:
        FileNotFoundError: If the file does not exist.
        DocumentError: If the document is malformed.
    """
    with open(path, "r", encoding="utf-8") as f:
        return read_document(f)
