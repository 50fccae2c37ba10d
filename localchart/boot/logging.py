"""Logging bootstrap for the localchart CLI and HTTP service."""

from __future__ import annotations

import logging
import os
from typing import Any

__all__ = ["configure_logging", "resolve_level"]

_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"


def resolve_level(value: str | int | None) -> int:
    """Translate a level name or number into a ``logging`` level.

    Unknown names and blank strings resolve to :data:`logging.INFO`.
    """

    if isinstance(value, int):
        return value
    candidate = (value or "").strip()
    if candidate.isdigit():
        return int(candidate)
    resolved = logging.getLevelName(candidate.upper()) if candidate else None
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(*, level: str | int | None = None, **kwargs: Any) -> int:
    """Configure the root logger and return the effective level.

    ``level`` overrides the ``LOG_LEVEL`` environment variable; extra
    keyword arguments go to :func:`logging.basicConfig`.
    """

    effective = resolve_level(level if level is not None else os.environ.get("LOG_LEVEL"))
    kwargs.setdefault("format", _FORMAT)
    kwargs.setdefault("datefmt", _DATEFMT)
    kwargs.setdefault("force", True)
    logging.basicConfig(level=effective, **kwargs)
    return effective
