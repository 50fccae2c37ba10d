"""Scale and canvas geometry helpers shared by every layout engine."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable

__all__ = [
    "CanvasArea",
    "canvas_area",
    "format_number",
    "linear_scale",
    "safe_max",
]

# (left, top, horizontal margin total, vertical margin total)
_MARGINS = {
    "standard": (80.0, 60.0, 140.0, 140.0),
    "funnel": (100.0, 80.0, 200.0, 160.0),
}


@dataclass(frozen=True)
class CanvasArea:
    """Pixel rectangle reserved for the chart body."""

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2


def canvas_area(width: float, height: float, preset: str = "standard") -> CanvasArea:
    """Return the canvas area left after the fixed margins of ``preset``."""

    try:
        left, top, horizontal, vertical = _MARGINS[preset]
    except KeyError as exc:
        raise ValueError(f"Unknown margin preset '{preset}'") from exc
    return CanvasArea(left, top, width - horizontal, height - vertical)


def linear_scale(
    value: float,
    domain_min: float,
    domain_max: float,
    range_min: float,
    range_max: float,
) -> float:
    """Map ``value`` from the domain onto the pixel range.

    A collapsed domain (``domain_max == domain_min``) uses a span of 1 so the
    result stays finite.
    """

    span = (domain_max - domain_min) or 1.0
    return range_min + (value - domain_min) / span * (range_max - range_min)


def safe_max(values: Iterable[float]) -> float:
    """Largest value, or 1 when the set is empty or its maximum is not positive."""

    largest = max(values, default=0.0)
    return largest if largest > 0 else 1.0


def format_number(value: float) -> str:
    """Render ``value`` for a text label (``45.0`` -> ``45``)."""

    if isinstance(value, float):
        if not math.isfinite(value):
            return str(value)
        if value.is_integer():
            return str(int(value))
    return str(value)
