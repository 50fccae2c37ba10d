"""Runtime settings for the chart writer, HTTP API and CLI.

Settings come from an optional YAML file (``LOCALCHART_CONFIG`` or an
explicit path) with environment variables layered on top.  The render core
never reads these; callers pass explicit options.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml
from pydantic import BaseModel, Field, field_validator

__all__ = ["APISettings", "Settings", "get_settings", "load_settings"]

CONFIG_ENV = "LOCALCHART_CONFIG"
DEFAULT_OUTPUT_DIR = "./generated-charts"
DEFAULT_PORT = 1122


def _parse_origins(value: Any) -> Tuple[str, ...]:
    if value is None:
        return tuple()
    raw_items = value.split(",") if isinstance(value, str) else list(value)
    origins: list[str] = []
    for item in raw_items:
        normalised = str(item).strip()
        if normalised and normalised not in origins:
            origins.append(normalised)
    return tuple(origins)


class APISettings(BaseModel):
    """Host/port and CORS settings for the HTTP surface."""

    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    log_level: str = "info"
    cors_origins: Tuple[str, ...] = Field(default_factory=tuple)

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _origins(cls, value: Any) -> Tuple[str, ...]:
        return _parse_origins(value)


class Settings(BaseModel):
    output_dir: Path = Path(DEFAULT_OUTPUT_DIR)
    api: APISettings = Field(default_factory=APISettings)


def _read_yaml(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        raw = yaml.safe_load(handle) or {}
    return raw if isinstance(raw, dict) else {}


def _env_overrides(data: Dict[str, Any]) -> Dict[str, Any]:
    merged = dict(data)
    api = dict(merged.get("api") or {})
    if os.getenv("CHART_OUTPUT_DIR"):
        merged["output_dir"] = os.environ["CHART_OUTPUT_DIR"]
    port_raw = os.getenv("PORT")
    if port_raw:
        try:
            api["port"] = int(port_raw)
        except ValueError:
            pass
    if os.getenv("HOST"):
        api["host"] = os.environ["HOST"]
    if os.getenv("LOG_LEVEL"):
        api["log_level"] = os.environ["LOG_LEVEL"].lower()
    if os.getenv("CORS_ALLOW_ORIGINS") is not None:
        api["cors_origins"] = os.environ["CORS_ALLOW_ORIGINS"]
    merged["api"] = api
    return merged


def load_settings(path: Optional[Path] = None) -> Settings:
    """Load settings from YAML (when present) and apply env overrides."""

    source = path or (Path(os.environ[CONFIG_ENV]) if os.getenv(CONFIG_ENV) else None)
    data: Dict[str, Any] = {}
    if source is not None and Path(source).exists():
        data = _read_yaml(Path(source))
    return Settings(**_env_overrides(data))


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()
