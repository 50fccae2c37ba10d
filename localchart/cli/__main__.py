"""Entry point for the localchart CLI."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from ..boot.logging import configure_logging
from . import convert, render, serve


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="localchart", description="Local SVG chart renderer")
    sub = parser.add_subparsers(dest="command", required=True)

    render.add_subparser(sub)
    convert.add_subparser(sub)
    serve.add_subparser(sub)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    configure_logging()
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    return args.func(args)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
