"""Renderers for each output format.

Submodules:
- separated: CSV / TSV lines
- json_writer: JSON array and newline-delimited JSON
- table: Bordered table layout and column widths
- truncate: Row budget slicing and ellipsis rows
- stream: Streaming table printer with preview-based widths
"""

from .json_writer import JsonFraming, encode_row, write_json
from .separated import write_separated
from .stream import Collecting, Committed, StreamingTablePrinter, stream_batches
from .table import (
    batch_lines,
    compute_column_widths,
    format_border,
    format_ellipsis_row,
    format_header,
    format_row_line,
    format_table,
    verify_table_alignment,
)
from .truncate import format_batches_with_maxrows, keep_only_maxrows, slice_to_budget

__all__ = [
    # Separated values
    "write_separated",
    # JSON
    "JsonFraming",
    "encode_row",
    "write_json",
    # Table layout
    "batch_lines",
    "compute_column_widths",
    "format_border",
    "format_ellipsis_row",
    "format_header",
    "format_row_line",
    "format_table",
    "verify_table_alignment",
    # Truncation
    "format_batches_with_maxrows",
    "keep_only_maxrows",
    "slice_to_budget",
    # Streaming
    "Collecting",
    "Committed",
    "StreamingTablePrinter",
    "stream_batches",
]
