"""batchprint: render tabular batches as text.

Formats:
- csv / tsv / automatic: delimiter-separated lines
- table: bordered, column-aligned table with an optional row budget
- json / ndjson: JSON array of row objects, or one object per line

All renderers write to a caller-owned text stream and never reorder or
transform the data they are given.

Usage:
    from batchprint import OutputFormat, Schema, Batch, print_batches
    print_batches(OutputFormat.TABLE, schema, batches, 40, True, sys.stdout)

    from batchprint import StreamingTablePrinter
"""

from .cells import CellFormatter, DisplayFormatter
from .dispatch import print_batches
from .errors import (
    CellFormattingError,
    InternalLayoutInvariantViolation,
    RenderError,
    WriteError,
)
from .formats import (
    JsonFraming,
    StreamingTablePrinter,
    compute_column_widths,
    format_table,
    stream_batches,
)
from .model import Batch, Field, Schema
from .options import OutputFormat, PrintOptions, parse_format, parse_max_rows
from .sink import OutputSink

__all__ = [
    # Data model
    "Batch",
    "Field",
    "Schema",
    # Rendering
    "print_batches",
    "OutputFormat",
    "PrintOptions",
    "parse_format",
    "parse_max_rows",
    "JsonFraming",
    "StreamingTablePrinter",
    "stream_batches",
    "compute_column_widths",
    "format_table",
    # Collaborators
    "CellFormatter",
    "DisplayFormatter",
    "OutputSink",
    # Errors
    "RenderError",
    "CellFormattingError",
    "WriteError",
    "InternalLayoutInvariantViolation",
]
