"""
Entry point for the SML command line tool.

Usage:
    python -m sml /path/to/settings.sml
    python -m sml settings.sml --get server.port
    python -m sml --help
"""

import argparse
import json
import sys

from . import __version__
from .errors import ParseError
from .logging import get_logger, setup_logging_from_args
from .models.values import Array, MissingKeyError, String, Table, Value
from .options import ParserOptions
from .parser.loader import DocumentLoader


logger = get_logger("main")


def format_scalar(value: Value) -> str:
    if isinstance(value, String):
        return f'"{value.value}"'
    if isinstance(value, Array):
        return "[" + ", ".join(format_scalar(e) for e in value) + "]"
    return str(value.to_python())


def render_tree(table: Table, indent: int = 0) -> list[str]:
    """Render a table as indented lines, one per key."""
    pad = "  " * indent
    lines = []

    for key, value in table.items():
        if isinstance(value, Table):
            lines.append(f"{pad}{key}:")
            lines.extend(render_tree(value, indent + 1))
        elif isinstance(value, Array) and len(value) and value.array_is(Table):
            lines.append(f"{pad}{key}: ({len(value)} tables)")
            for index, element in enumerate(value):
                lines.append(f"{pad}  [{index}]")
                lines.extend(render_tree(element, indent + 2))
        else:
            lines.append(f"{pad}{key} = {format_scalar(value)}")

    return lines


def count_tables(table: Table) -> int:
    total = 0
    for value in table.values.values():
        if isinstance(value, Table):
            total += 1 + count_tables(value)
        elif isinstance(value, Array) and value.array_is(Table):
            for element in value:
                total += 1 + count_tables(element)
    return total


def print_value(value: Value, output_format: str) -> None:
    if isinstance(value, (Table, Array)):
        if output_format == "json":
            print(json.dumps(value.to_python(), indent=2))
        elif isinstance(value, Table):
            print("\n".join(render_tree(value)))
        else:
            print(format_scalar(value))
    else:
        print(value.to_python())


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog="sml",
        description="Parse an SML configuration file and print its contents",
    )

    parser.add_argument("file", help="Path to the document")

    parser.add_argument(
        "--get",
        metavar="PATH",
        help="Print a single value by dotted path (e.g. server.routes.0.path)",
    )

    parser.add_argument(
        "--format",
        choices=("tree", "json"),
        default="tree",
        help="Output format for tables and arrays (default: tree)",
    )

    parser.add_argument(
        "--validate",
        action="store_true",
        help="Parse the document, print a summary and exit",
    )

    parser.add_argument(
        "--integer-bits",
        type=int,
        choices=(32, 64),
        help="Width of the signed integer type (default: 32)",
    )

    parser.add_argument(
        "--precision",
        choices=("single", "double"),
        help="Floating point precision for real values (default: double)",
    )

    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging (INFO level)")
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging (DEBUG level)")
    parser.add_argument("-q", "--quiet", action="store_true", help="Quiet mode (only errors)")
    parser.add_argument("--log-file", metavar="PATH", help="Write logs to file")
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    args = parser.parse_args(argv)

    setup_logging_from_args(
        verbose=args.verbose,
        debug=args.debug,
        quiet=args.quiet,
        no_color=args.no_color,
        log_file=args.log_file,
    )

    loader = DocumentLoader(ParserOptions.from_args(args))
    logger.debug(f"Parsing {args.file} with {loader.options}")
    try:
        document = loader.load_file(args.file)
    except ParseError as e:
        print(f"{e.filename or args.file}: {e}", file=sys.stderr)
        return 1

    if args.validate:
        print(f"Top-level keys: {len(document)}")
        print(f"Tables: {count_tables(document)}")
        print("\nDocument is valid!")
        return 0

    if args.get:
        try:
            value = document.find(args.get)
        except MissingKeyError as e:
            print(f"{e}", file=sys.stderr)
            return 2
        print_value(value, args.format)
        return 0

    print_value(document, args.format)
    return 0


if __name__ == "__main__":
    sys.exit(main())
