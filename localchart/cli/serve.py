"""``serve`` subcommand: run the HTTP API."""

from __future__ import annotations

import argparse


def add_subparser(sub: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    parser = sub.add_parser("serve", help="Run the chart HTTP API with Uvicorn")
    parser.add_argument("--host", help="Bind address (default: HOST or 0.0.0.0)")
    parser.add_argument("--port", "-p", type=int, help="Port (default: PORT or 1122)")
    parser.set_defaults(func=run)


def run(args: argparse.Namespace) -> int:  # pragma: no cover - starts a server
    from ..api.app import run as run_api

    run_api(host=args.host, port=args.port)
    return 0
