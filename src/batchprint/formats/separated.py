"""Delimiter-separated output (CSV, TSV).

Cells are stringified by the cell formatter; quoting and escaping are left
to the csv module, configured with the requested delimiter.
"""

import csv
from typing import Optional, Sequence

from ..cells import DEFAULT_FORMATTER, CellFormatter, format_row
from ..model import Batch, Schema
from ..sink import as_sink


class _SinkAdapter:
    """Lets csv.writer write through an OutputSink."""

    def __init__(self, sink):
        self.sink = sink

    def write(self, text: str) -> None:
        self.sink.write(text)


def write_separated(
    out,
    schema: Schema,
    batches: Sequence[Batch],
    delimiter: str = ",",
    with_header: bool = True,
    formatter: Optional[CellFormatter] = None,
) -> None:
    """Write batches as delimiter-separated lines.

    Args:
        out: Text stream or OutputSink to write to.
        schema: Schema shared by all batches.
        batches: Batches to write, in order.
        delimiter: Single-character field separator.
        with_header: Write the field names as the first line.
        formatter: Cell formatter (default: DisplayFormatter).

    Raises:
        CellFormattingError: If a cell cannot be formatted.
        WriteError: If the stream rejects a write. Lines already written stay.
    """
    formatter = formatter or DEFAULT_FORMATTER
    sink = as_sink(out)
    writer = csv.writer(
        _SinkAdapter(sink),
        delimiter=delimiter,
        lineterminator="\n",
        quoting=csv.QUOTE_MINIMAL,
    )

    if with_header:
        writer.writerow(schema.names)

    for batch in batches:
        for row in range(batch.num_rows):
            cells = format_row(batch.columns, row, formatter)
            # csv.writer quotes a lone empty field as ""; write a blank line.
            if cells == [""]:
                sink.writeline()
            else:
                writer.writerow(cells)
