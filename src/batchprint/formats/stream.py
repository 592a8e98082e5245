"""Streaming table output with preview-based column widths.

The printer buffers incoming batches until preview_limit rows have been seen,
measures column widths over that preview, prints the header and the buffered
rows, and from then on prints every batch as it arrives with the same widths.

Widths are never re-measured after they are committed. A later batch with
wider values than the preview produces rows that overrun their columns; the
rows stay well formed, only the alignment suffers. This keeps memory bounded
by the preview size.

Usage:
    printer = StreamingTablePrinter(sys.stdout, schema, preview_limit=100)
    for batch in batches:
        printer.process_batch(batch)
    printer.finish()
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence, Union

from ..cells import DEFAULT_FORMATTER, CellFormatter
from ..common import DEFAULT_PREVIEW_LIMIT, ELLIPSIS_ROW_COUNT
from ..model import Batch, Schema
from ..sink import as_sink
from .table import (
    batch_lines,
    compute_column_widths,
    format_border,
    format_ellipsis_row,
    format_header,
)

logger = logging.getLogger(__name__)


@dataclass
class Collecting:
    """Widths not known yet; batches are buffered."""

    preview_limit: int
    batches: list[Batch] = field(default_factory=list)
    row_count: int = 0


@dataclass
class Committed:
    """Widths fixed; batches are printed as they arrive."""

    widths: list[int]
    header_emitted: bool = False


RenderState = Union[Collecting, Committed]


class StreamingTablePrinter:
    """Prints batches as a bordered table without holding them all in memory.

    Args:
        out: Text stream or OutputSink to write to.
        schema: Schema shared by every batch of the session.
        preview_limit: Rows to buffer before committing to column widths.
            A non-positive limit commits to header-name widths up front.
        formatter: Cell formatter (default: DisplayFormatter).
        max_rows: Rows to print before eliding the rest (None for all).
    """

    def __init__(
        self,
        out,
        schema: Schema,
        preview_limit: int = DEFAULT_PREVIEW_LIMIT,
        formatter: Optional[CellFormatter] = None,
        max_rows: Optional[int] = None,
    ):
        self.sink = as_sink(out)
        self.schema = schema
        self.formatter = formatter or DEFAULT_FORMATTER
        self.max_rows = max_rows
        self.rows_accepted = 0
        self.rows_printed = 0
        self.elided = False
        self.finished = False

        if preview_limit > 0:
            self._state: RenderState = Collecting(preview_limit)
        else:
            self._state = Committed(compute_column_widths(schema, [], self.formatter))

    @property
    def state(self) -> RenderState:
        return self._state

    @property
    def widths(self) -> Optional[list[int]]:
        """Committed widths, or None while still collecting."""
        if isinstance(self._state, Committed):
            return list(self._state.widths)
        return None

    def process_batch(self, batch: Batch) -> None:
        """Accept the next batch of the stream."""
        if self.finished:
            raise RuntimeError("Printer already finished")
        if batch.num_rows == 0:
            return

        batch = self._apply_budget(batch)
        if self._suppressed:
            return

        state = self._state
        if isinstance(state, Collecting):
            state.batches.append(batch)
            state.row_count += batch.num_rows
            if state.row_count >= state.preview_limit:
                self._commit(state)
        else:
            self._ensure_header(state)
            self.print_batch_with_widths(batch, state.widths)

    def finish(self) -> None:
        """Flush buffered rows and close the table with its bottom border."""
        if self.finished:
            raise RuntimeError("Printer already finished")
        self.finished = True
        if self._suppressed:
            return

        state = self._state
        if isinstance(state, Collecting):
            state = self._commit(state)
        self._ensure_header(state)
        if self.elided:
            for _ in range(ELLIPSIS_ROW_COUNT):
                self.print_dotted_line(state.widths)
        self.print_bottom_border(state.widths)

    @property
    def _suppressed(self) -> bool:
        # A zero budget over non-empty input prints nothing at all.
        return self.max_rows == 0 and self.elided

    def _apply_budget(self, batch: Batch) -> Batch:
        if self.max_rows is None:
            return batch
        remaining = self.max_rows - self.rows_accepted
        if batch.num_rows > remaining:
            if not self.elided:
                logger.debug("Row budget of %d reached, eliding the rest", self.max_rows)
            self.elided = True
            batch = batch.slice(0, max(remaining, 0))
        self.rows_accepted += batch.num_rows
        return batch

    def _commit(self, state: Collecting) -> Committed:
        widths = compute_column_widths(self.schema, state.batches, self.formatter)
        logger.debug(
            "Committed column widths %s after %d preview rows", widths, state.row_count
        )
        committed = Committed(widths)
        self._state = committed
        self._ensure_header(committed)
        for buffered in state.batches:
            self.print_batch_with_widths(buffered, widths)
        state.batches.clear()
        return committed

    def _ensure_header(self, state: Committed) -> None:
        if not state.header_emitted:
            self.print_header(state.widths)
            state.header_emitted = True

    # --- Line emitters ---

    def print_header(self, widths: Sequence[int]) -> None:
        self.sink.writelines(format_header(self.schema, widths))

    def print_batch_with_widths(self, batch: Batch, widths: Sequence[int]) -> None:
        for line in batch_lines(batch, widths, self.formatter):
            self.sink.writeline(line)
            self.rows_printed += 1

    def print_dotted_line(self, widths: Sequence[int]) -> None:
        self.sink.writeline(format_ellipsis_row(widths))

    def print_bottom_border(self, widths: Sequence[int]) -> None:
        self.sink.writeline(format_border(widths))


def stream_batches(
    out,
    schema: Schema,
    batches: Iterable[Batch],
    preview_limit: int = DEFAULT_PREVIEW_LIMIT,
    formatter: Optional[CellFormatter] = None,
    max_rows: Optional[int] = None,
) -> int:
    """Print an iterable of batches through a StreamingTablePrinter.

    Returns:
        Number of data rows printed.
    """
    printer = StreamingTablePrinter(
        out, schema, preview_limit=preview_limit, formatter=formatter, max_rows=max_rows
    )
    for batch in batches:
        printer.process_batch(batch)
    printer.finish()
    return printer.rows_printed
