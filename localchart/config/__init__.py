"""Configuration helpers exposed at :mod:`localchart.config`."""

from __future__ import annotations

from .settings import APISettings, Settings, get_settings, load_settings

__all__ = ["APISettings", "Settings", "get_settings", "load_settings"]
