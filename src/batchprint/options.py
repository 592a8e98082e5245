"""Output format selection and print options.

The OutputFormat enum is the validated tag the renderers dispatch on; turning
user text into a tag is the job of parse_format and parse_max_rows.
"""

import os
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional

from .cells import DisplayFormatter
from .common import DEFAULT_MAX_ROWS, DEFAULT_PREVIEW_LIMIT
from .model import Schema


class OutputFormat(Enum):
    """Output format for rendered batches."""

    CSV = "csv"
    TSV = "tsv"
    TABLE = "table"
    JSON = "json"
    NDJSON = "ndjson"
    AUTOMATIC = "automatic"  # Same as CSV


_UNLIMITED = {"inf", "none", "unlimited"}


def parse_format(text: str) -> OutputFormat:
    """Parse a format name, ignoring case.

    Raises:
        ValueError: If the name is not a known format.
    """
    try:
        return OutputFormat(text.strip().lower())
    except ValueError:
        choices = ", ".join(f.value for f in OutputFormat)
        raise ValueError(f"Unknown format {text!r}. Available: {choices}") from None


def parse_max_rows(text: str) -> Optional[int]:
    """Parse a row budget: 'inf', 'none' or 'unlimited' mean no limit.

    Raises:
        ValueError: If the text is neither unlimited nor a non-negative integer.
    """
    value = text.strip().lower()
    if value in _UNLIMITED:
        return None
    try:
        max_rows = int(value)
    except ValueError:
        raise ValueError(
            f"Invalid row budget {text!r}: expected a non-negative integer or 'inf'"
        ) from None
    if max_rows < 0:
        raise ValueError(f"Invalid row budget {text!r}: must not be negative")
    return max_rows


def format_max_rows(max_rows: Optional[int]) -> str:
    return "unlimited" if max_rows is None else str(max_rows)


@dataclass
class PrintOptions:
    """How batches are rendered.

    Attributes:
        format: Output format.
        max_rows: Row budget for table output (None for unlimited).
        with_header: Write a header line for separated-value output.
        preview_limit: Rows the streaming printer measures before committing widths.
        null_text: Text shown for missing values.
    """

    format: OutputFormat = OutputFormat.TABLE
    max_rows: Optional[int] = DEFAULT_MAX_ROWS
    with_header: bool = True
    preview_limit: int = DEFAULT_PREVIEW_LIMIT
    null_text: str = ""

    @classmethod
    def from_env(
        cls, environ: Optional[Mapping[str, str]] = None, **overrides
    ) -> "PrintOptions":
        """Build options from BATCHPRINT_* environment variables.

        Recognized: BATCHPRINT_FORMAT, BATCHPRINT_MAXROWS,
        BATCHPRINT_PREVIEW_LIMIT, BATCHPRINT_NULL. Keyword overrides win
        over the environment.

        Raises:
            ValueError: If a variable holds an invalid value.
        """
        if environ is None:
            environ = os.environ

        options = cls()
        if "BATCHPRINT_FORMAT" in environ:
            options.format = parse_format(environ["BATCHPRINT_FORMAT"])
        if "BATCHPRINT_MAXROWS" in environ:
            options.max_rows = parse_max_rows(environ["BATCHPRINT_MAXROWS"])
        if "BATCHPRINT_PREVIEW_LIMIT" in environ:
            raw = environ["BATCHPRINT_PREVIEW_LIMIT"]
            try:
                options.preview_limit = int(raw)
            except ValueError:
                raise ValueError(f"Invalid preview limit {raw!r}") from None
        if "BATCHPRINT_NULL" in environ:
            options.null_text = environ["BATCHPRINT_NULL"]

        for key, value in overrides.items():
            if value is not None:
                setattr(options, key, value)
        return options

    def formatter(self) -> DisplayFormatter:
        return DisplayFormatter(null=self.null_text)

    def print_batches(self, schema: Schema, batches, out) -> None:
        """Render batches to out according to these options."""
        from .dispatch import print_batches

        print_batches(
            self.format,
            schema,
            batches,
            self.max_rows,
            self.with_header,
            out,
            formatter=self.formatter(),
        )

    def streaming_printer(self, schema: Schema, out):
        """Create a StreamingTablePrinter configured by these options."""
        from .formats.stream import StreamingTablePrinter

        return StreamingTablePrinter(
            out,
            schema,
            preview_limit=self.preview_limit,
            formatter=self.formatter(),
            max_rows=self.max_rows,
        )
