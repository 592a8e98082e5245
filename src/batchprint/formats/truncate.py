"""Row budget handling for bordered tables.

A table with more rows than its budget keeps the first max_rows data rows,
then three ellipsis rows, then its final border. Batches are sliced before
rendering, so widths are measured over the rows that are actually shown.
"""

import logging
from typing import Optional, Sequence

from ..cells import CellFormatter
from ..common import ELLIPSIS_ROW_COUNT
from ..errors import InternalLayoutInvariantViolation
from ..model import Batch, Schema
from ..sink import as_sink
from .table import format_ellipsis_row, format_table

logger = logging.getLogger(__name__)


def slice_to_budget(
    batches: Sequence[Batch], max_rows: int
) -> tuple[list[Batch], bool]:
    """Keep whole batches until the next one would cross max_rows.

    The batch crossing the budget is sliced to the remaining row count and
    nothing after it is kept.

    Returns:
        Tuple of (kept_batches, truncated).
    """
    kept = []
    row_count = 0
    for batch in batches:
        if row_count + batch.num_rows > max_rows:
            kept.append(batch.slice(0, max_rows - row_count))
            return kept, True
        kept.append(batch)
        row_count += batch.num_rows
    return kept, False


def keep_only_maxrows(
    lines: Sequence[str], max_rows: int, widths: Sequence[int]
) -> list[str]:
    """Replace everything after the first max_rows data rows with ellipsis rows.

    Args:
        lines: Fully rendered table (header block, rows, final border).
        max_rows: Number of data rows to keep.
        widths: Column widths the table was rendered with.

    Raises:
        InternalLayoutInvariantViolation: If the table holds fewer than
            max_rows data rows.
    """
    # top border, header, header border, rows, bottom border
    if len(lines) < max_rows + 4:
        raise InternalLayoutInvariantViolation(len(lines), max_rows)

    result = list(lines[: max_rows + 3])
    result.extend([format_ellipsis_row(widths)] * ELLIPSIS_ROW_COUNT)
    result.append(lines[-1])
    return result


def format_batches_with_maxrows(
    out,
    schema: Schema,
    batches: Sequence[Batch],
    max_rows: Optional[int],
    formatter: Optional[CellFormatter] = None,
) -> None:
    """Write batches as a table, truncated to max_rows data rows.

    Args:
        out: Text stream or OutputSink to write to.
        schema: Schema shared by all batches.
        batches: Non-empty batches, in order.
        max_rows: Row budget, or None for unlimited.
        formatter: Cell formatter (default: DisplayFormatter).
    """
    sink = as_sink(out)

    if max_rows is None:
        lines, _ = format_table(schema, batches, formatter)
        sink.writelines(lines)
        return

    kept, truncated = slice_to_budget(batches, max_rows)
    lines, widths = format_table(schema, kept, formatter)
    if truncated:
        logger.debug("Truncating table to %d rows", max_rows)
        lines = keep_only_maxrows(lines, max_rows, widths)
    sink.writelines(lines)
