"""Tests for the default cell formatter."""

from datetime import date, datetime, time
from decimal import Decimal

import pytest

from batchprint.cells import CellFormatter, DisplayFormatter, format_row
from batchprint.errors import CellFormattingError


class Unprintable:
    def __str__(self):
        raise RuntimeError("no text form")


class TestDisplayFormatter:
    """Tests for DisplayFormatter."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (1, "1"),
            (-42, "-42"),
            ("text", "text"),
            (True, "true"),
            (False, "false"),
            (1.5, "1.5"),
            (float("inf"), "inf"),
            (float("nan"), "NaN"),
            (b"\x01\xff", "01ff"),
            (date(2024, 3, 1), "2024-03-01"),
            (datetime(2024, 3, 1, 12, 30), "2024-03-01T12:30:00"),
            (time(8, 5), "08:05:00"),
            (Decimal("2.50"), "2.50"),
        ],
    )
    def test_values(self, value, expected):
        assert DisplayFormatter().format([value], 0) == expected

    def test_null_default_is_empty(self):
        assert DisplayFormatter().format([None], 0) == ""

    def test_null_text(self):
        assert DisplayFormatter(null="NULL").format([None], 0) == "NULL"

    def test_row_out_of_range(self):
        with pytest.raises(CellFormattingError) as exc_info:
            DisplayFormatter().format([1], 5)
        assert exc_info.value.row == 5

    def test_failing_str_is_wrapped(self):
        with pytest.raises(CellFormattingError) as exc_info:
            DisplayFormatter().format([Unprintable()], 0)
        assert "no text form" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, RuntimeError)

    def test_satisfies_protocol(self):
        assert isinstance(DisplayFormatter(), CellFormatter)


class TestFormatRow:
    """Tests for format_row."""

    def test_formats_each_column(self):
        columns = ([1, 2], ["x", "y"], [None, True])
        assert format_row(columns, 1, DisplayFormatter()) == ["2", "y", "true"]
