"""Exception hierarchy for localchart collaborators.

The render core itself does not raise for bad data; these errors cover the
layers around it (persistence, raster conversion).
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional

__all__ = [
    "ChartGenerationError",
    "ConversionError",
    "ConverterUnavailableError",
    "LocalChartError",
]


class LocalChartError(Exception):
    """Base class for all localchart errors."""


class ChartGenerationError(LocalChartError):
    """Rendering or persisting a chart failed."""

    def __init__(self, message: str, *, chart_type: str, error_path: Optional[Path] = None) -> None:
        super().__init__(message)
        self.chart_type = chart_type
        self.error_path = error_path


class ConversionError(LocalChartError):
    """An SVG file could not be converted to a raster image."""


class ConverterUnavailableError(ConversionError):
    """No converter succeeded; a manual-conversion HTML page was written."""

    def __init__(self, message: str, *, fallback_path: Path) -> None:
        super().__init__(message)
        self.fallback_path = fallback_path
