"""Pie chart layout.

Slices are swept clockwise from 12 o'clock in input order.  The total is the
sum of every value and a non-positive total yields a placeholder.  Only
slices with a positive value are drawn, so with mixed signs the drawn sweeps
can exceed a full turn.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Sequence

from ...viz import ChartTheme, Fragment
from ..options import ChartOptions
from ..points import LabeledValue
from ..scale import format_number
from ._common import placeholder, theme_or_default

__all__ = ["PieSlice", "compute_pie_slices", "render_pie"]

START_ANGLE = -math.pi / 2
LABEL_RADIUS_RATIO = 0.7
LABEL_MIN_SWEEP = 0.2


@dataclass(frozen=True)
class PieSlice:
    label: str
    value: float
    start: float
    sweep: float
    ratio: float
    color: str

    @property
    def end(self) -> float:
        return self.start + self.sweep

    @property
    def large_arc(self) -> int:
        return 1 if self.sweep > math.pi else 0

    @property
    def percentage(self) -> str:
        return f"{self.ratio * 100:.1f}%"


def compute_pie_slices(
    points: Sequence[LabeledValue],
    theme: ChartTheme | None = None,
) -> List[PieSlice]:
    palette = theme_or_default(theme)
    total = sum(point.value for point in points)
    if total <= 0:
        return []
    slices: List[PieSlice] = []
    angle = START_ANGLE
    for index, point in enumerate(points):
        if point.value <= 0:
            continue
        ratio = point.value / total
        sweep = ratio * 2 * math.pi
        if not math.isfinite(angle + sweep):
            # total cancelled to almost nothing; no drawable geometry
            return []
        slices.append(
            PieSlice(
                label=point.label,
                value=point.value,
                start=angle,
                sweep=sweep,
                ratio=ratio,
                color=palette.pick(index, "pie"),
            )
        )
        angle += sweep
    return slices


def render_pie(
    points: Sequence[LabeledValue],
    options: ChartOptions,
    theme: ChartTheme | None = None,
) -> Fragment:
    if not points:
        return placeholder(options)
    slices = compute_pie_slices(points, theme)
    if not slices:
        return placeholder(options, "No valid data for pie chart")

    cx = options.width / 2
    cy = options.height / 2 + 20
    radius = min(options.width, options.height) / 4

    wedges = Fragment()
    legend = Fragment()
    for position, piece in enumerate(slices):
        x1, y1 = _on_circle(cx, cy, radius, piece.start)
        x2, y2 = _on_circle(cx, cy, radius, piece.end)
        d = (
            f"M {format_number(cx)} {format_number(cy)} "
            f"L {format_number(x1)} {format_number(y1)} "
            f"A {format_number(radius)} {format_number(radius)} 0 {piece.large_arc} 1 "
            f"{format_number(x2)} {format_number(y2)} Z"
        )
        if len(slices) == 1:
            # an arc whose endpoints coincide draws nothing
            wedges.circle(cx, cy, radius, fill=piece.color, stroke="#fff", stroke_width=2)
        else:
            wedges.path(d, fill=piece.color, stroke="#fff", stroke_width=2)

        if piece.sweep > LABEL_MIN_SWEEP:
            lx, ly = _on_circle(cx, cy, radius * LABEL_RADIUS_RATIO, piece.start + piece.sweep / 2)
            wedges.text(
                lx,
                ly,
                piece.percentage,
                text_anchor="middle",
                fill="white",
                font_weight="bold",
                class_="value-label",
            )

        legend_y = cy - radius + position * 20
        legend.rect(cx + radius + 30, legend_y - 8, 12, 12, fill=piece.color)
        legend.text(
            cx + radius + 48,
            legend_y + 3,
            f"{piece.label}: {format_number(piece.value)}",
            class_="legend-text",
        )
    return wedges.extend(legend)


def _on_circle(cx: float, cy: float, radius: float, angle: float) -> tuple[float, float]:
    return cx + radius * math.cos(angle), cy + radius * math.sin(angle)
