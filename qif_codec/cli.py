#!/usr/bin/env python3
"""
QIF command-line tool

Commands:
- normalize: re-emit a QIF file in canonical layout (optionally switching
  the date format)
- dump: print a QIF file as JSON
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from qif_codec.controllers.qif_loader import load_document, save_document
from qif_codec.data_model import DEFAULT_DATE_FORMAT, DateFormat, QifFileError
from qif_codec.utilities.config_logging import configure_logging

log = logging.getLogger(__name__)


def _date_format(text: str) -> DateFormat:
    fmt = DateFormat.from_human(text)
    if fmt is None:
        choices = ", ".join(f.human_pattern for f in DateFormat)
        raise argparse.ArgumentTypeError(f"unknown date format {text!r} (choose from {choices})")
    return fmt


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="qif-codec",
        description="Read, normalize and inspect QIF (Quicken Interchange Format) files.",
    )
    ap.add_argument("--verbose", "-v", action="store_true", help="Log debug details to stderr")
    sub = ap.add_subparsers(dest="command", required=True)

    def _common(p: argparse.ArgumentParser) -> None:
        p.add_argument("input", type=Path, help="Path to input .qif file")
        p.add_argument("--encoding", default="utf-8",
                       help="Text encoding of the QIF file (default: utf-8)")
        p.add_argument("--date-format", type=_date_format, default=DEFAULT_DATE_FORMAT,
                       help="Date layout of D lines: mm/dd/yyyy (default), mm/dd/yy or yyyy-mm-dd")

    norm = sub.add_parser("normalize", help="Re-emit a QIF file in canonical layout")
    _common(norm)
    norm.add_argument("output", type=Path, help="Path to output .qif file")
    norm.add_argument("--output-date-format", type=_date_format, default=None,
                      help="Date layout for the output (default: same as --date-format)")

    dump = sub.add_parser("dump", help="Print a QIF file as JSON")
    _common(dump)

    return ap


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.WARNING, verbose=args.verbose)

    try:
        document = load_document(args.input, encoding=args.encoding, date_format=args.date_format)
        if args.command == "normalize":
            out_format = args.output_date_format or args.date_format
            save_document(document, args.output, encoding=args.encoding, date_format=out_format)
            print(f"Wrote {len(document.sections())} section(s) to {args.output}")
        else:
            print(json.dumps(document.to_dict(), indent=2))
    except QifFileError as e:
        log.debug("Aborting on file error", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
