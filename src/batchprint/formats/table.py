"""Bordered table rendering.

Layout contract for column widths w:

    +-----+------+      border: wi + 2 dashes per column
    | a   | bb   |      header / data: cells left-justified to wi
    +-----+------+
    | 1   | 2    |
    | .   | .    |      ellipsis row: a single dot per cell
    +-----+------+

The same width and row algorithm serves the materialized path
(format_table) and the streaming printer.
"""

from typing import Iterator, Optional, Sequence

from ..cells import DEFAULT_FORMATTER, CellFormatter, format_row
from ..model import Batch, Schema


def compute_column_widths(
    schema: Schema,
    batches: Sequence[Batch],
    formatter: Optional[CellFormatter] = None,
) -> list[int]:
    """Measure the display width of every column.

    Width of column i is the longest of the field name and every cell of
    column i across all given batches.
    """
    formatter = formatter or DEFAULT_FORMATTER
    widths = [len(name) for name in schema.names]
    for batch in batches:
        for row in range(batch.num_rows):
            for i, column in enumerate(batch.columns):
                widths[i] = max(widths[i], len(formatter.format(column, row)))
    return widths


def format_border(widths: Sequence[int]) -> str:
    return "+" + "+".join("-" * (w + 2) for w in widths) + "+"


def format_row_line(cells: Sequence[str], widths: Sequence[int]) -> str:
    """Join cells into one table line, padding each to its column width.

    Cells longer than their width are kept whole, so the line grows.
    """
    return "| " + " | ".join(cell.ljust(w) for cell, w in zip(cells, widths)) + " |"


def format_header(schema: Schema, widths: Sequence[int]) -> list[str]:
    """Return the header block: border, field names, border."""
    border = format_border(widths)
    return [border, format_row_line(schema.names, widths), border]


def format_ellipsis_row(widths: Sequence[int]) -> str:
    return format_row_line(["."] * len(widths), widths)


def batch_lines(
    batch: Batch,
    widths: Sequence[int],
    formatter: Optional[CellFormatter] = None,
) -> Iterator[str]:
    """Yield one data line per row of the batch."""
    formatter = formatter or DEFAULT_FORMATTER
    for row in range(batch.num_rows):
        yield format_row_line(format_row(batch.columns, row, formatter), widths)


def format_table(
    schema: Schema,
    batches: Sequence[Batch],
    formatter: Optional[CellFormatter] = None,
) -> tuple[list[str], list[int]]:
    """Render batches as a complete table.

    Args:
        schema: Schema shared by all batches.
        batches: Batches to render, in order. May be empty.
        formatter: Cell formatter (default: DisplayFormatter).

    Returns:
        Tuple of (lines, widths). Lines hold the header block, every data
        row and the final border, without line terminators.
    """
    widths = compute_column_widths(schema, batches, formatter)
    lines = format_header(schema, widths)
    for batch in batches:
        lines.extend(batch_lines(batch, widths, formatter))
    lines.append(format_border(widths))
    return lines, widths


# --- Layout Contract Verification ---


def verify_table_alignment(lines: Sequence[str]) -> bool:
    """Verify that every line of a table is as long as its top border.

    Only holds for tables whose widths were measured over every rendered
    row; streamed tables may legitimately break it.

    Returns:
        True if all lines are aligned.

    Raises:
        AssertionError: If a line differs in length from the top border.
    """
    if not lines:
        return True
    expected = len(lines[0])
    for number, line in enumerate(lines):
        assert len(line) == expected, (
            f"Line {number} is {len(line)} chars wide, border is {expected}: {line!r}"
        )
    return True
