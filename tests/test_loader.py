"""Tests for batch document loading and validation."""

import io
import json
from pathlib import Path

import pytest

from batchprint.loader import DocumentError, load_document, parse_document, read_document

VALID_DOCUMENT = {
    "schema": [{"name": "a", "type": "int64"}, {"name": "b"}],
    "batches": [
        {"columns": [[1, 2], ["x", "y"]]},
        {"rows": [[3, "z"]]},
    ],
}


class TestParseDocument:
    """Tests for parse_document."""

    def test_valid_document(self):
        schema, batches = parse_document(VALID_DOCUMENT)
        assert schema.names == ["a", "b"]
        assert schema.fields[0].type == "int64"
        assert schema.fields[1].type == "utf8"
        assert [b.num_rows for b in batches] == [2, 1]
        assert batches[1].row(0) == (3, "z")

    def test_empty_batches(self):
        schema, batches = parse_document({"schema": [{"name": "a"}], "batches": []})
        assert len(schema) == 1
        assert batches == []

    def test_missing_schema(self):
        with pytest.raises(DocumentError, match="schema"):
            parse_document({"batches": []})

    def test_empty_field_name(self):
        with pytest.raises(DocumentError) as exc_info:
            parse_document({"schema": [{"name": ""}], "batches": []})
        assert exc_info.value.location == "schema/0/name"

    def test_batch_needs_columns_or_rows(self):
        with pytest.raises(DocumentError):
            parse_document({"schema": [{"name": "a"}], "batches": [{}]})

    def test_batch_with_both_shapes_rejected(self):
        doc = {"schema": [{"name": "a"}], "batches": [{"columns": [[1]], "rows": [[1]]}]}
        with pytest.raises(DocumentError):
            parse_document(doc)

    def test_column_count_mismatch(self):
        doc = {"schema": [{"name": "a"}, {"name": "b"}], "batches": [{"columns": [[1]]}]}
        with pytest.raises(DocumentError) as exc_info:
            parse_document(doc)
        assert exc_info.value.location == "batches/0"

    def test_ragged_rows(self):
        doc = {"schema": [{"name": "a"}, {"name": "b"}], "batches": [{"rows": [[1, 2], [3]]}]}
        with pytest.raises(DocumentError, match="Row 1"):
            parse_document(doc)

    def test_document_error_is_value_error(self):
        assert issubclass(DocumentError, ValueError)


class TestReadDocument:
    """Tests for reading documents from streams and files."""

    def test_read_stream(self):
        schema, batches = read_document(io.StringIO(json.dumps(VALID_DOCUMENT)))
        assert schema.names == ["a", "b"]

    def test_invalid_json(self):
        with pytest.raises(DocumentError, match="Invalid JSON"):
            read_document(io.StringIO("{not json"))

    def test_load_file(self, tmp_path: Path):
        path = tmp_path / "doc.json"
        path.write_text(json.dumps(VALID_DOCUMENT), encoding="utf-8")
        _, batches = load_document(path)
        assert len(batches) == 2

    def test_load_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_document(tmp_path / "missing.json")
