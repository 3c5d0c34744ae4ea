"""Main CLI entry point for marshalwire."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from pprint import pformat

from .. import __version__
from ..api import Codec
from ..exceptions import MarshalWireError


def setup_logging(level: str = "WARNING") -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-8s [%(name)s:%(funcName)s] : %(message)s",
    )


def dump_file(codec: Codec, file_path: Path) -> None:
    """Print every value in a marshal stream, one per block."""
    data = file_path.read_bytes()
    count = 0
    for value in codec.iter_decode(data):
        count += 1
        print(f"--- value {count} ---")
        print(pformat(value))
    print(f"{count} value{'s' if count != 1 else ''} decoded from {len(data)} bytes.")


def encode_json_file(codec: Codec, file_path: Path, output: Path) -> int:
    """Encode a JSON document to a marshal file and return the byte count."""
    with file_path.open("r", encoding="utf-8") as fh:
        document = json.load(fh)
    data = codec.encode(document)
    output.write_bytes(data)
    return len(data)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the marshalwire CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        prog="marshalwire",
        description="marshalwire: Marshal wire-format codec",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  marshalwire --dump data.marshal                  Print decoded values
  marshalwire --from-json doc.json -o doc.marshal  Encode a JSON document
  marshalwire --version                            Show version
        """,
    )

    parser.add_argument(
        "--dump",
        metavar="FILE",
        type=str,
        help="Decode a marshal stream and print its values",
    )

    parser.add_argument(
        "--from-json",
        metavar="FILE",
        type=str,
        help="Encode a JSON document (requires --output)",
    )

    parser.add_argument(
        "-o",
        "--output",
        metavar="FILE",
        type=str,
        help="Output file for --from-json",
    )

    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"marshalwire {__version__}",
    )

    args = parser.parse_args(argv)
    setup_logging(args.log_level)
    codec = Codec()

    if args.dump:
        file_path = Path(args.dump)
        if not file_path.exists():
            print(f"Error: File not found: {file_path}", file=sys.stderr)
            return 1

        try:
            dump_file(codec, file_path)
            return 0
        except MarshalWireError as e:
            print(f"Error decoding file: {e}", file=sys.stderr)
            return 1

    if args.from_json:
        if not args.output:
            print("Error: --from-json requires --output", file=sys.stderr)
            return 2

        file_path = Path(args.from_json)
        if not file_path.exists():
            print(f"Error: File not found: {file_path}", file=sys.stderr)
            return 1

        try:
            size = encode_json_file(codec, file_path, Path(args.output))
        except (ValueError, MarshalWireError) as e:
            print(f"Error encoding file: {e}", file=sys.stderr)
            return 1
        print(f"Wrote {size} bytes to {args.output}")
        return 0

    # If no command specified, show help
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
