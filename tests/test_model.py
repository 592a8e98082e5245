"""Tests for the schema and batch containers."""

import pytest

from batchprint.model import Batch, Field, Schema


class TestSchema:
    """Tests for Schema and Field."""

    def test_names_in_order(self):
        assert Schema.of("b", "a", "c").names == ["b", "a", "c"]

    def test_empty_field_name_rejected(self):
        with pytest.raises(ValueError):
            Field("")

    def test_fields_stored_as_tuple(self):
        schema = Schema([Field("a"), Field("b")])
        assert isinstance(schema.fields, tuple)
        assert len(schema) == 2


class TestBatch:
    """Tests for Batch."""

    def test_num_rows(self):
        batch = Batch(Schema.of("a", "b"), ([1, 2], [3, 4]))
        assert batch.num_rows == 2

    def test_column_count_must_match_schema(self):
        with pytest.raises(ValueError, match="columns"):
            Batch(Schema.of("a", "b"), ([1, 2],))

    def test_columns_must_share_length(self):
        with pytest.raises(ValueError, match="length"):
            Batch(Schema.of("a", "b"), ([1, 2], [3]))

    def test_empty(self):
        batch = Batch.empty(Schema.of("a", "b"))
        assert batch.num_rows == 0
        assert batch.columns == ((), ())

    def test_no_fields_has_no_rows(self):
        assert Batch.empty(Schema()).num_rows == 0

    def test_from_rows(self):
        batch = Batch.from_rows(Schema.of("a", "b"), [(1, "x"), (2, "y")])
        assert batch.columns == ((1, 2), ("x", "y"))
        assert batch.row(1) == (2, "y")

    def test_from_rows_rejects_ragged_rows(self):
        with pytest.raises(ValueError, match="Row 1"):
            Batch.from_rows(Schema.of("a", "b"), [(1, "x"), (2,)])

    def test_from_no_rows(self):
        assert Batch.from_rows(Schema.of("a"), []).num_rows == 0

    def test_slice_is_new_batch(self):
        batch = Batch(Schema.of("a"), ([1, 2, 3, 4],))
        part = batch.slice(1, 2)
        assert part.columns == ((2, 3),)
        assert batch.columns == ((1, 2, 3, 4),)
        assert part.schema is batch.schema

    def test_slice_past_end_is_clamped(self):
        batch = Batch(Schema.of("a"), ([1, 2],))
        assert batch.slice(1, 10).num_rows == 1

    def test_negative_slice_rejected(self):
        with pytest.raises(ValueError):
            Batch(Schema.of("a"), ([1],)).slice(-1, 1)

    def test_immutable(self):
        batch = Batch(Schema.of("a"), ([1],))
        with pytest.raises(AttributeError):
            batch.columns = ()
