"""Command-line interface for batchprint."""

import argparse
import logging
import sys
from pathlib import Path

from .common import PRODUCER
from .errors import (
    RenderError,
    file_not_found,
    from_render_error,
    invalid_argument,
    invalid_document,
    print_error,
)
from .formats.stream import stream_batches
from .loader import DocumentError, load_document, read_document
from .options import OutputFormat, PrintOptions, parse_format, parse_max_rows

# --maxrows parses 'inf' to None, so "not given" needs its own marker.
_MAXROWS_UNSET = object()


def cmd_render(args: argparse.Namespace) -> int:
    """Render a batch document to stdout."""
    try:
        options = PrintOptions.from_env(
            format=args.format,
            preview_limit=args.preview_limit,
            null_text=args.null,
        )
    except ValueError as e:
        print_error(invalid_argument("environment", "BATCHPRINT_*", str(e)), args.json)
        return 1
    if args.no_header:
        options.with_header = False
    if args.unlimited:
        options.max_rows = None
    elif args.maxrows is not _MAXROWS_UNSET:
        options.max_rows = args.maxrows

    source = args.file or "-"
    try:
        if source == "-":
            schema, batches = read_document(sys.stdin)
        else:
            schema, batches = load_document(Path(source))
    except FileNotFoundError:
        print_error(file_not_found(source), args.json)
        return 1
    except DocumentError as e:
        print_error(invalid_document(source, str(e)), args.json)
        return 1

    try:
        if args.stream and options.format is OutputFormat.TABLE:
            stream_batches(
                sys.stdout,
                schema,
                batches,
                preview_limit=options.preview_limit,
                formatter=options.formatter(),
                max_rows=options.max_rows,
            )
        else:
            options.print_batches(schema, batches, sys.stdout)
    except RenderError as e:
        print_error(from_render_error(e), args.json)
        return 1

    return 0


def _max_rows_arg(text: str):
    try:
        return parse_max_rows(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def main(argv: list[str] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog="batchprint",
        description="Render tabular batch documents as tables, CSV, TSV or JSON",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {PRODUCER['version']}"
    )
    parser.add_argument(
        "file", nargs="?", help="Batch document (JSON); reads stdin when omitted or '-'"
    )
    parser.add_argument(
        "-f",
        "--format",
        type=parse_format,
        help="Output format: csv, tsv, table, json, ndjson, automatic (default: table)",
    )
    limit_group = parser.add_mutually_exclusive_group()
    limit_group.add_argument(
        "--maxrows",
        type=_max_rows_arg,
        default=_MAXROWS_UNSET,
        help="Rows shown in table output before truncation, or 'inf' (default: 40)",
    )
    limit_group.add_argument(
        "--unlimited", action="store_true", help="Never truncate table output"
    )
    parser.add_argument(
        "--no-header", action="store_true", help="Omit the CSV/TSV header line"
    )
    parser.add_argument(
        "--stream",
        action="store_true",
        help="Print table rows as batches arrive, sizing columns from a preview",
    )
    parser.add_argument(
        "--preview-limit",
        type=int,
        help="Rows measured before streaming output fixes column widths",
    )
    parser.add_argument("--null", help="Text shown for missing values")
    parser.add_argument("--json", action="store_true", help="Report errors as JSON")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log rendering decisions to stderr"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    return cmd_render(args)


if __name__ == "__main__":
    sys.exit(main())
