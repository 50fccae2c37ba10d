"""``convert`` subcommand: batch SVG to PNG conversion."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from ..errors import ConversionError
from ..export.raster import INSTALL_HINTS, convert_directory


def add_subparser(sub: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    parser = sub.add_parser(
        "convert",
        help="Convert generated SVG charts to PNG",
        description="Convert every .svg file in INPUT_DIR using rsvg-convert, ImageMagick or Inkscape.",
    )
    parser.add_argument("input_dir", nargs="?", default="./generated-charts", help="Directory holding SVG files")
    parser.add_argument("output_dir", nargs="?", help="Destination directory (default: INPUT_DIR)")
    parser.set_defaults(func=run)


def run(args: argparse.Namespace) -> int:
    output_dir = Path(args.output_dir) if args.output_dir else None
    try:
        report = convert_directory(Path(args.input_dir), output_dir)
    except ConversionError as exc:
        print(str(exc), file=sys.stderr)
        return 1

    total = len(report.converted) + len(report.failed)
    if total == 0:
        print("No SVG files found")
        return 0
    print(f"Converted: {len(report.converted)}")
    print(f"Failed: {len(report.failed)}")
    for fallback in report.fallbacks:
        print(f"Manual conversion page: {fallback}")
    if report.failed and not report.converted:
        print(INSTALL_HINTS, file=sys.stderr)
    return 0 if report.ok else 1
