"""JSON output: one array of row objects, or one object per line.

Both variants share the row encoding; they differ only in framing:

- ARRAY:  [{"a":1},{"a":2}] followed by a newline
- LINES:  {"a":1}\\n{"a":2}\\n

Keys follow schema field order and null cells are omitted. Values JSON can
represent natively are written as is; anything else goes through the cell
formatter as a string.
"""

import json
import math
from enum import Enum
from typing import Any, Optional, Sequence

from ..cells import DEFAULT_FORMATTER, CellFormatter
from ..errors import CellFormattingError
from ..model import Batch, Schema
from ..sink import as_sink


class JsonFraming(Enum):
    """How row objects are framed in the output."""

    ARRAY = "array"
    LINES = "lines"


_NATIVE = (str, int, bool)


def _json_value(column: Sequence[Any], row: int, formatter: CellFormatter) -> Any:
    value = column[row]
    if isinstance(value, _NATIVE):
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    return formatter.format(column, row)


def encode_row(
    names: Sequence[str],
    columns: Sequence[Sequence[Any]],
    row: int,
    formatter: Optional[CellFormatter] = None,
) -> str:
    """Encode one row as a compact JSON object.

    Null cells are left out of the object; the remaining keys keep schema order.
    """
    formatter = formatter or DEFAULT_FORMATTER
    record = {
        name: _json_value(column, row, formatter)
        for name, column in zip(names, columns)
        if column[row] is not None
    }
    try:
        return json.dumps(record, ensure_ascii=False, separators=(",", ":"))
    except (TypeError, ValueError) as e:
        raise CellFormattingError(row, str(e)) from e


def write_json(
    out,
    schema: Schema,
    batches: Sequence[Batch],
    framing: JsonFraming = JsonFraming.ARRAY,
    formatter: Optional[CellFormatter] = None,
) -> None:
    """Write every row of every batch as JSON objects.

    Nothing is written when there are no rows at all.

    Args:
        out: Text stream or OutputSink to write to.
        schema: Schema shared by all batches.
        batches: Batches to write, in order.
        framing: ARRAY for a single JSON array, LINES for newline-delimited.
        formatter: Cell formatter for values without a native JSON form.
    """
    if not any(batch.num_rows for batch in batches):
        return

    sink = as_sink(out)
    names = schema.names
    first = True

    if framing is JsonFraming.ARRAY:
        sink.write("[")
    for batch in batches:
        for row in range(batch.num_rows):
            obj = encode_row(names, batch.columns, row, formatter)
            if framing is JsonFraming.ARRAY:
                sink.write(obj if first else "," + obj)
            else:
                sink.writeline(obj)
            first = False
    if framing is JsonFraming.ARRAY:
        sink.writeline("]")
