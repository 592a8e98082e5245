"""Top-level entry point: render batches in the requested format."""

import logging
from typing import Optional, Sequence

from .cells import CellFormatter
from .errors import RenderError
from .formats.json_writer import JsonFraming, write_json
from .formats.separated import write_separated
from .formats.table import format_table
from .formats.truncate import format_batches_with_maxrows
from .model import Batch, Schema
from .options import OutputFormat, format_max_rows
from .sink import as_sink

logger = logging.getLogger(__name__)

_DELIMITERS = {
    OutputFormat.CSV: ",",
    OutputFormat.AUTOMATIC: ",",
    OutputFormat.TSV: "\t",
}

_JSON_FRAMING = {
    OutputFormat.JSON: JsonFraming.ARRAY,
    OutputFormat.NDJSON: JsonFraming.LINES,
}


def print_batches(
    fmt: OutputFormat,
    schema: Schema,
    batches: Sequence[Batch],
    max_rows: Optional[int],
    with_header: bool,
    out,
    formatter: Optional[CellFormatter] = None,
) -> None:
    """Render batches to a stream in the given format.

    Args:
        fmt: Output format.
        schema: Schema shared by all batches.
        batches: Batches in arrival order. Zero-row batches are ignored.
        max_rows: Row budget for table output (None for unlimited).
        with_header: Header line for separated-value output.
        out: Text stream or OutputSink to write to.
        formatter: Cell formatter (default: DisplayFormatter).

    Raises:
        CellFormattingError: If a cell cannot be formatted.
        WriteError: If the stream rejects a write.
        InternalLayoutInvariantViolation: If table truncation lost rows.
    """
    sink = as_sink(out)

    non_empty = [b for b in batches if b.num_rows > 0]
    if len(non_empty) < len(batches):
        logger.debug("Dropped %d empty batches", len(batches) - len(non_empty))

    try:
        if not non_empty:
            _print_empty(fmt, schema, sink, formatter)
            return

        logger.debug(
            "Rendering %d batches as %s (max_rows=%s)",
            len(non_empty),
            fmt.value,
            format_max_rows(max_rows),
        )
        if fmt in _DELIMITERS:
            write_separated(
                sink, schema, non_empty, _DELIMITERS[fmt], with_header, formatter
            )
        elif fmt in _JSON_FRAMING:
            write_json(sink, schema, non_empty, _JSON_FRAMING[fmt], formatter)
        elif fmt is OutputFormat.TABLE:
            if max_rows == 0:
                return
            format_batches_with_maxrows(sink, schema, non_empty, max_rows, formatter)
        else:
            raise ValueError(f"Unsupported format: {fmt}")
    except RenderError as e:
        logger.debug("Render as %s failed: %s", fmt.value, e)
        raise


def _print_empty(
    fmt: OutputFormat, schema: Schema, sink, formatter: Optional[CellFormatter]
) -> None:
    """Print the representation of a result with no rows.

    Only a table with at least one field prints anything: its header block
    and bottom border.
    """
    if fmt is OutputFormat.TABLE and len(schema) > 0:
        lines, _ = format_table(schema, [], formatter)
        sink.writelines(lines)
