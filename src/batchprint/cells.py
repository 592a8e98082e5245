"""Cell value to display text conversion.

Renderers never stringify values themselves; they ask a CellFormatter for the
text of one cell, given the column and a row index.
"""

import math
from datetime import date, datetime, time
from typing import Any, Protocol, Sequence, runtime_checkable

from .errors import CellFormattingError


@runtime_checkable
class CellFormatter(Protocol):
    """Turns one cell into display text.

    Implementations raise CellFormattingError, and nothing else, when a value
    cannot be displayed.
    """

    def format(self, column: Sequence[Any], row: int) -> str:
        ...


class DisplayFormatter:
    """Default formatter for plain Python values.

    Args:
        null: Text shown for missing (None) values.
    """

    def __init__(self, null: str = ""):
        self.null = null

    def format(self, column: Sequence[Any], row: int) -> str:
        try:
            value = column[row]
        except IndexError:
            raise CellFormattingError(row, f"row index out of range ({len(column)} rows)")

        try:
            return self._to_text(value)
        except CellFormattingError:
            raise
        except Exception as e:
            raise CellFormattingError(row, f"{type(value).__name__}: {e}") from e

    def _to_text(self, value: Any) -> str:
        if value is None:
            return self.null
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, float):
            if math.isnan(value):
                return "NaN"
            return repr(value)
        if isinstance(value, (bytes, bytearray, memoryview)):
            return bytes(value).hex()
        if isinstance(value, (datetime, date, time)):
            return value.isoformat()
        return str(value)


DEFAULT_FORMATTER = DisplayFormatter()


def format_row(
    columns: Sequence[Sequence[Any]], row: int, formatter: CellFormatter
) -> list[str]:
    """Format every cell of one row, in column order."""
    return [formatter.format(column, row) for column in columns]
