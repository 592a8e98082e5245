"""Error types and error envelopes for batchprint.

This module provides:
- The render exception hierarchy raised by the formatters
- Standard error codes
- Error envelope format for --json output
- Helper functions for consistent error reporting
"""

import json
import sys
from dataclasses import dataclass, field
from typing import Optional


# =============================================================================
# Error Codes
# =============================================================================

# Render errors
CELL_FORMAT_ERROR = "CELL_FORMAT_ERROR"
WRITE_ERROR = "WRITE_ERROR"

# Input errors
INVALID_ARGUMENT = "INVALID_ARGUMENT"
INVALID_DOCUMENT = "INVALID_DOCUMENT"
FILE_NOT_FOUND = "FILE_NOT_FOUND"

# Generic errors
RENDER_ERROR = "RENDER_ERROR"
INTERNAL_ERROR = "INTERNAL_ERROR"


# =============================================================================
# Exceptions
# =============================================================================


class RenderError(Exception):
    """Base class for failures that abort a render call.

    Output written before the failure stays written; nothing is rolled back.
    """

    code = RENDER_ERROR

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class CellFormattingError(RenderError):
    """Raised when a cell value cannot be turned into display text."""

    code = CELL_FORMAT_ERROR

    def __init__(self, row: int, reason: str):
        self.row = row
        self.reason = reason
        super().__init__(
            f"Cannot format value at row {row}: {reason}",
            {"row": row, "reason": reason},
        )


class WriteError(RenderError):
    """Raised when the output stream rejects a write."""

    code = WRITE_ERROR

    def __init__(self, reason: str):
        super().__init__(f"Failed to write output: {reason}", {"reason": reason})


class InternalLayoutInvariantViolation(RenderError):
    """Raised when a rendered table is shorter than its row budget requires.

    This is a programming error in the truncation path, never a bad input.
    """

    code = INTERNAL_ERROR

    def __init__(self, line_count: int, max_rows: int):
        self.line_count = line_count
        self.max_rows = max_rows
        super().__init__(
            f"Rendered table has {line_count} lines, "
            f"expected at least {max_rows + 4} for {max_rows} rows",
            {"line_count": line_count, "max_rows": max_rows},
        )


# =============================================================================
# Error Envelope
# =============================================================================


@dataclass
class BatchPrintError:
    """Structured error for JSON output.

    Attributes:
        code: Machine-readable error code.
        message: Human-readable error message.
        hints: Actionable suggestions for resolving the error.
        details: Context-specific error details.
    """

    code: str
    message: str
    hints: list[str] = field(default_factory=list)
    details: dict = field(default_factory=dict)

    def to_dict(self) -> dict:
        """Convert to error envelope dict."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "hints": self.hints,
                "details": self.details,
            }
        }

    def to_json(self, indent: int = 2) -> str:
        """Convert to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    def print_json(self, file=None) -> None:
        """Print error as JSON to file (default: stderr)."""
        if file is None:
            file = sys.stderr
        print(self.to_json(), file=file)

    def print_text(self, file=None) -> None:
        """Print error as human-readable text to file (default: stderr)."""
        if file is None:
            file = sys.stderr
        print(f"Error: {self.message}", file=file)
        for hint in self.hints:
            print(f"  Hint: {hint}", file=file)


# =============================================================================
# Factory Functions
# =============================================================================


def file_not_found(path: str) -> BatchPrintError:
    """Create error for a missing input document."""
    return BatchPrintError(
        code=FILE_NOT_FOUND,
        message=f"File not found: {path}",
        hints=["Check that the file path is correct"],
        details={"path": path},
    )


def invalid_document(source: str, reason: str) -> BatchPrintError:
    """Create error for a batch document that failed validation."""
    return BatchPrintError(
        code=INVALID_DOCUMENT,
        message=f"Invalid batch document {source}: {reason}",
        hints=[
            'Expected {"schema": [...], "batches": [...]}',
            "Every batch needs one column per schema field",
        ],
        details={"source": source, "reason": reason},
    )


def invalid_argument(arg_name: str, value: str, reason: str = "") -> BatchPrintError:
    """Create error for invalid argument."""
    msg = f"Invalid argument '{arg_name}': {value}"
    if reason:
        msg += f" ({reason})"
    return BatchPrintError(
        code=INVALID_ARGUMENT,
        message=msg,
        hints=["Run: batchprint --help"],
        details={"argument": arg_name, "value": value, "reason": reason},
    )


def render_failed(exc: RenderError) -> BatchPrintError:
    """Create error for a render call aborted by a RenderError."""
    return BatchPrintError(
        code=exc.code,
        message=exc.message,
        hints=[],
        details=dict(exc.details),
    )


def internal_error(message: str, details: Optional[dict] = None) -> BatchPrintError:
    """Create internal error."""
    return BatchPrintError(
        code=INTERNAL_ERROR,
        message=f"Internal error: {message}",
        hints=["Please report this issue"],
        details=details or {},
    )


def from_render_error(exc: RenderError) -> BatchPrintError:
    """Convert a render exception into the matching envelope."""
    if isinstance(exc, InternalLayoutInvariantViolation):
        return internal_error(exc.message, dict(exc.details))
    return render_failed(exc)


# =============================================================================
# Output Helper
# =============================================================================


def print_error(
    error: BatchPrintError,
    json_mode: bool = False,
    file=None,
) -> None:
    """Print error in appropriate format.

    Args:
        error: The error to print.
        json_mode: If True, print as JSON envelope. If False, print as text.
        file: Output file (default: stderr).
    """
    if json_mode:
        error.print_json(file)
    else:
        error.print_text(file)
