"""Tests for delimiter-separated output."""

import io

import pytest

from batchprint.cells import DisplayFormatter
from batchprint.formats.separated import write_separated
from batchprint.model import Batch, Schema

from conftest import output_lines, three_column_batch, three_column_schema


def render(batches, delimiter=",", with_header=True, schema=None, formatter=None):
    buf = io.StringIO()
    write_separated(
        buf, schema or three_column_schema(), batches, delimiter, with_header, formatter
    )
    return buf.getvalue()


class TestWriteSeparated:
    """Tests for write_separated."""

    def test_header_only_when_requested(self):
        assert output_lines(render([three_column_batch()]))[0] == "a,b,c"
        assert output_lines(render([three_column_batch()], with_header=False))[0] == "1,4,7"

    def test_tab_delimiter(self):
        assert output_lines(render([three_column_batch()], "\t"))[1] == "1\t4\t7"

    def test_lines_end_with_newline(self):
        assert render([three_column_batch()], with_header=False) == "1,4,7\n2,5,8\n3,6,9\n"

    def test_values_with_delimiter_are_quoted(self):
        schema = Schema.of("name", "note")
        batch = Batch(schema, (["x,y", "plain"], ['say "hi"', "ok"]))
        lines = output_lines(render([batch], schema=schema, with_header=False))
        assert lines == ['"x,y","say ""hi"""', "plain,ok"]

    def test_tab_in_tsv_is_quoted(self):
        schema = Schema.of("v")
        batch = Batch(schema, (["a\tb"],))
        assert render([batch], "\t", False, schema) == '"a\tb"\n'

    def test_nulls_use_formatter_text(self):
        schema = Schema.of("a", "b")
        batch = Batch(schema, ([None], [1]))
        assert render([batch], schema=schema, with_header=False) == ",1\n"
        assert (
            render([batch], schema=schema, with_header=False, formatter=DisplayFormatter("NULL"))
            == "NULL,1\n"
        )

    @pytest.mark.parametrize("delimiter", [",", "\t"])
    def test_single_column_null_is_blank_line(self, delimiter):
        schema = Schema.of("a")
        batch = Batch(schema, ([None, 1, ""],))
        assert render([batch], delimiter, schema=schema) == "a\n\n1\n\n"

    def test_rows_across_batches_in_order(self):
        first = three_column_batch().slice(2, 1)
        second = three_column_batch().slice(0, 1)
        assert output_lines(render([first, second], with_header=False)) == ["3,6,9", "1,4,7"]
