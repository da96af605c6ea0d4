"""Command-line interface.

Validate one JSON document from a file or standard input and report the
outcome on a single line.

Usage:
    jsonsyntax document.json
    jsonsyntax < document.json
    jsonsyntax --format rust --trace document.json
    python -m jsonsyntax -

Exit Codes:
    0   Document is valid ("Successful parse!")
    1   Syntax error (first error reported on stdout)
    2   Usage error
    3   Input could not be read or decoded

Python 3.13+.
"""

from __future__ import annotations

import argparse
import io
import logging
import sys
from collections.abc import Sequence
from typing import TextIO

from jsonsyntax.config import ValidatorConfig
from jsonsyntax.constants import MAX_DEPTH, SUCCESS_MESSAGE
from jsonsyntax.diagnostics import DiagnosticFormatter, OutputFormat, SourceReadError
from jsonsyntax.syntax import JSONValidator, TreeTracer

__all__ = ["EXIT_INVALID", "EXIT_OK", "EXIT_UNREADABLE", "EXIT_USAGE", "build_parser", "main"]

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_USAGE = 2
EXIT_UNREADABLE = 3


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        msg = f"invalid integer: {text!r}"
        raise argparse.ArgumentTypeError(msg) from None
    if value <= 0:
        msg = f"must be positive, got {value}"
        raise argparse.ArgumentTypeError(msg)
    return value


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the ``jsonsyntax`` command."""
    parser = argparse.ArgumentParser(
        prog="jsonsyntax",
        description="Check that a document is syntactically valid JSON.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Validate a file:
  jsonsyntax config.json

  # Validate standard input, reporting errors as JSON:
  cat config.json | jsonsyntax --format json

  # Show which grammar rules ran (written to stderr):
  jsonsyntax --trace config.json
""",
    )
    parser.add_argument(
        "file",
        nargs="?",
        default="-",
        help="Document to validate ('-' or omitted: standard input)",
    )
    parser.add_argument(
        "--encoding",
        default="utf-8",
        help="Text encoding of the input (default: utf-8)",
    )
    parser.add_argument(
        "--format",
        choices=[f.value for f in OutputFormat],
        default=OutputFormat.CLASSIC.value,
        help="Report format (default: classic)",
    )
    parser.add_argument(
        "--strict-whitespace",
        action="store_true",
        help="Reject whitespace outside strings",
    )
    parser.add_argument(
        "--max-depth",
        type=_positive_int,
        default=MAX_DEPTH,
        help=f"Maximum nesting of objects and arrays (default: {MAX_DEPTH})",
    )
    parser.add_argument(
        "--escape",
        action="store_true",
        help="Show control characters in reports as escapes",
    )
    parser.add_argument(
        "--trace",
        action="store_true",
        help="Write a rule-by-rule trace to stderr",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging on stderr",
    )
    return parser


def _open_input(path: str, encoding: str) -> TextIO:
    # newline="" keeps CR and CRLF intact so rows are counted per code point
    if path == "-":
        buffer = getattr(sys.stdin, "buffer", None)
        if buffer is None:
            return sys.stdin
        try:
            return io.TextIOWrapper(buffer, encoding=encoding, newline="")
        except LookupError as e:
            msg = f"Cannot read standard input: {e}"
            raise SourceReadError(msg) from e
    try:
        return open(path, encoding=encoding, newline="")  # noqa: SIM115
    except (OSError, LookupError) as e:
        msg = f"Cannot open {path}: {e}"
        raise SourceReadError(msg) from e


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point.

    Args:
        argv: Arguments without the program name (default: ``sys.argv[1:]``)

    Returns:
        Process exit code
    """
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else EXIT_USAGE

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(levelname)s %(name)s: %(message)s",
        )

    config = ValidatorConfig(
        insignificant_whitespace=not args.strict_whitespace,
        max_nesting_depth=args.max_depth,
    )
    formatter = DiagnosticFormatter(
        output_format=OutputFormat(args.format),
        escape_found=args.escape,
    )
    tracer = TreeTracer(sys.stderr) if args.trace else None

    try:
        stream = _open_input(args.file, args.encoding)
        try:
            result = JSONValidator(config).validate(stream, tracer=tracer)
        finally:
            if args.file != "-":
                stream.close()
            elif stream is not sys.stdin:
                stream.detach()
    except SourceReadError as e:
        logger.debug("Unreadable input: %s", e)
        print(f"[ERROR] {e}", file=sys.stderr)
        return EXIT_UNREADABLE

    print(formatter.format_result(result, SUCCESS_MESSAGE))
    return EXIT_OK if result.is_valid else EXIT_INVALID


if __name__ == "__main__":
    sys.exit(main())
