"""utfconv command-line interface.

Usage:
    utfconv convert --from utf-8 --to utf-16 < in.txt > out.bin
    utfconv convert -f 16 -t 8 --lenient --input in.bin --output out.txt
    python3 -m utfconv version

Input and output are raw code units in native byte order, exactly as the
Python API sees them.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from . import UtfError, __version__, convert

_FORMS = ["utf-8", "utf-16", "utf-32", "utf8", "utf16", "utf32", "8", "16", "32"]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="utfconv",
        description="utfconv: transcode between UTF-8, UTF-16 and UTF-32",
    )
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Log conversion details to stderr")
    sub = parser.add_subparsers(dest="command")

    # ── convert ──
    conv_p = sub.add_parser("convert", help="Convert between encoding forms")
    conv_p.add_argument("--from", "-f", dest="source", required=True,
                        choices=_FORMS, help="Encoding form of the input")
    conv_p.add_argument("--to", "-t", dest="target", required=True,
                        choices=_FORMS, help="Encoding form of the output")
    conv_p.add_argument("--lenient", action="store_true",
                        help="Replace ill-formed input with U+FFFD instead of failing")
    conv_p.add_argument("--input", "-i", metavar="FILE",
                        help="Read from FILE instead of stdin")
    conv_p.add_argument("--output", "-o", metavar="FILE",
                        help="Write to FILE instead of stdout")

    # ── version ──
    sub.add_parser("version", help="Print version and exit")

    return parser


def _read_input(filepath: Optional[str]) -> bytes:
    """Read raw bytes from a file or stdin."""
    if filepath:
        with open(filepath, "rb") as f:
            return f.read()
    if sys.stdin.isatty():
        print("utfconv: reading from stdin (Ctrl-D to end)...", file=sys.stderr)
    return sys.stdin.buffer.read()


def _write_output(filepath: Optional[str], data: bytes) -> None:
    if filepath:
        with open(filepath, "wb") as f:
            f.write(data)
        return
    sys.stdout.buffer.write(data)
    sys.stdout.buffer.flush()


def _cmd_convert(args: argparse.Namespace) -> None:
    raw = _read_input(args.input)
    out = convert(raw, args.source, args.target, strict=not args.lenient)
    _write_output(args.output, out)


def main(argv: Optional[List[str]] = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr,
                            format="%(name)s: %(message)s")

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    if args.command == "version":
        print(f"utfconv {__version__}")
        return

    try:
        if args.command == "convert":
            _cmd_convert(args)
    except UtfError as e:
        print(f"utfconv: error [{e.code}]: {e}", file=sys.stderr)
        sys.exit(2)
    except ValueError as e:
        print(f"utfconv: {e}", file=sys.stderr)
        sys.exit(2)
    except OSError as e:
        print(f"utfconv: I/O error: {e}", file=sys.stderr)
        sys.exit(2)


if __name__ == "__main__":
    main()
