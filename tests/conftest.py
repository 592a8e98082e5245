"""Shared fixtures: small schemas and batches used across the test suite."""

import io

import pytest

from batchprint.model import Batch, Field, Schema


def three_column_schema() -> Schema:
    return Schema((Field("a", "int32"), Field("b", "int32"), Field("c", "int32")))


def three_column_batch() -> Batch:
    """Three columns, three rows: (1,4,7), (2,5,8), (3,6,9)."""
    return Batch(three_column_schema(), ([1, 2, 3], [4, 5, 6], [7, 8, 9]))


def three_column_batch_with_widths() -> Batch:
    """Same shape as three_column_batch, with wider values."""
    return Batch(
        three_column_schema(),
        ([1, 2222222, 3], [42222, 5, 6], [7, 8, 922222]),
    )


def one_column_schema() -> Schema:
    return Schema((Field("a", "int32"),))


def one_column_batch() -> Batch:
    """One column 'a' holding 1, 2, 3."""
    return Batch(one_column_schema(), ([1, 2, 3],))


def split_batch(batch: Batch) -> list[Batch]:
    """Split a batch into two halves."""
    half = batch.num_rows // 2
    return [batch.slice(0, half), batch.slice(half, batch.num_rows - half)]


def output_lines(text: str) -> list[str]:
    """Split rendered output into lines, ignoring the final newline."""
    return text.rstrip("\n").split("\n")


@pytest.fixture
def out() -> io.StringIO:
    return io.StringIO()


class BrokenStream:
    """Stream that accepts `fail_after` writes, then raises OSError."""

    def __init__(self, fail_after: int = 0):
        self.fail_after = fail_after
        self.written: list[str] = []

    def write(self, text: str) -> int:
        if len(self.written) >= self.fail_after:
            raise OSError("No space left on device")
        self.written.append(text)
        return len(text)


class ExplodingFormatter:
    """Cell formatter that fails on one specific value."""

    def __init__(self, bad_value):
        self.bad_value = bad_value

    def format(self, column, row):
        from batchprint.errors import CellFormattingError

        if column[row] == self.bad_value:
            raise CellFormattingError(row, "unsupported value")
        return str(column[row])
