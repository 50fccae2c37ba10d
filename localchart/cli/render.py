"""``render`` subcommand: render a chart from a JSON data file."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from ..charts import render_chart
from ..config import get_settings
from ..errors import ChartGenerationError
from ..storage import ChartWriter, generate_chart


def _read_json(source: str) -> Any:
    if source == "-":
        text = sys.stdin.read()
    else:
        text = Path(source).read_text(encoding="utf-8")
    return json.loads(text)


def add_subparser(sub: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    parser = sub.add_parser(
        "render",
        help="Render a chart to SVG",
        description=(
            "Render a chart from a JSON array of data points. The document is "
            "written to --out, or into the configured output directory."
        ),
    )
    parser.add_argument("--type", "-t", required=True, help="Chart type (column, line, pie, ...)")
    parser.add_argument("--data", "-d", required=True, help="JSON data file (use '-' for stdin)")
    parser.add_argument("--options", "-o", help="JSON file with chart options")
    parser.add_argument("--out", help="Destination SVG path")
    parser.add_argument("--output-dir", help="Directory for generated files (default: CHART_OUTPUT_DIR)")
    parser.set_defaults(func=run)


def run(args: argparse.Namespace) -> int:
    try:
        data = _read_json(args.data)
        options = _read_json(args.options) if args.options else None
    except (OSError, ValueError) as exc:
        print(f"failed to read input: {exc}", file=sys.stderr)
        return 2

    if args.out:
        target = Path(args.out)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(render_chart(args.type, data, options), encoding="utf-8")
        print(target.resolve().as_uri())
        return 0

    writer = ChartWriter(args.output_dir or get_settings().output_dir)
    try:
        artifact = generate_chart(args.type, data, options, writer=writer)
    except ChartGenerationError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    print(artifact.uri)
    return 0
