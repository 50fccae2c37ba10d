"""Line chart layout."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Sequence

from ...viz import ChartTheme, Fragment
from ..options import ChartOptions
from ..points import LabeledValue
from ..scale import CanvasArea, canvas_area, format_number, linear_scale
from ._common import draw_axes, draw_axis_titles, placeholder, theme_or_default

__all__ = ["PlottedPoint", "project_points", "render_line", "svg_polyline"]

MAX_AXIS_LABELS = 8


@dataclass(frozen=True)
class PlottedPoint:
    label: str
    value: float
    x: float
    y: float


def project_points(points: Sequence[LabeledValue], area: CanvasArea) -> List[PlottedPoint]:
    """Spread points evenly along x and scale y against their own range."""

    if not points:
        return []
    values = [point.value for point in points]
    low, high = min(values), max(values)
    steps = max(len(points) - 1, 1)
    return [
        PlottedPoint(
            label=point.label,
            value=point.value,
            x=area.x + index / steps * area.width,
            y=linear_scale(point.value, low, high, area.bottom, area.y),
        )
        for index, point in enumerate(points)
    ]


def svg_polyline(plotted: Sequence[PlottedPoint]) -> str:
    commands = []
    for index, point in enumerate(plotted):
        verb = "M" if index == 0 else "L"
        commands.append(f"{verb} {format_number(point.x)} {format_number(point.y)}")
    return " ".join(commands)


def label_stride(count: int) -> int:
    return max(1, math.ceil(count / MAX_AXIS_LABELS))


def render_line(
    points: Sequence[LabeledValue],
    options: ChartOptions,
    theme: ChartTheme | None = None,
) -> Fragment:
    if not points:
        return placeholder(options)
    color = theme_or_default(theme).color("primary")
    area = canvas_area(options.width, options.height)
    plotted = project_points(points, area)

    fragment = Fragment()
    fragment.path(svg_polyline(plotted), stroke=color, class_="chart-line")
    for point in plotted:
        fragment.circle(point.x, point.y, 4, fill="#fff", stroke=color, class_="chart-point")

    stride = label_stride(len(plotted))
    for index, point in enumerate(plotted):
        if index % stride == 0:
            fragment.text(point.x, area.bottom + 20, point.label, text_anchor="middle", class_="axis-label")
        fragment.text(
            point.x,
            point.y - 10,
            format_number(point.value),
            text_anchor="middle",
            font_size=10,
            class_="axis-label",
        )

    draw_axes(fragment, area)
    draw_axis_titles(fragment, area, options)
    return fragment
