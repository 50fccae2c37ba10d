"""Radar chart layout.

Values are read on a fixed 0-100 scale.  Nothing is clamped: a value above
100 reaches past the outer grid circle and a negative value folds through
the centre.
"""
from __future__ import annotations

import math
from typing import Dict, List, Sequence, Tuple

from ...viz import ChartTheme, Fragment
from ..options import ChartOptions
from ..points import RadarValue
from ..scale import format_number
from ._common import legend_swatch, placeholder, theme_or_default

__all__ = ["radar_angle", "radar_vertices", "render_radar"]

GRID_RINGS = 5
FULL_SCALE = 100.0


def radar_angle(index: int, count: int) -> float:
    """Spoke angle for dimension ``index``; the first spoke points up."""

    return index / count * 2 * math.pi - math.pi / 2


def radar_vertices(
    values: Sequence[float],
    cx: float,
    cy: float,
    radius: float,
) -> List[Tuple[float, float]]:
    count = len(values)
    vertices = []
    for index, value in enumerate(values):
        angle = radar_angle(index, count)
        reach = radius * value / FULL_SCALE
        vertices.append((cx + reach * math.cos(angle), cy + reach * math.sin(angle)))
    return vertices


def render_radar(
    points: Sequence[RadarValue],
    options: ChartOptions,
    theme: ChartTheme | None = None,
) -> Fragment:
    palette = theme_or_default(theme)
    dimensions: Dict[str, None] = {}
    groups: Dict[str, Dict[str, float]] = {}
    for point in points:
        dimensions.setdefault(point.name, None)
        groups.setdefault(point.group, {})[point.name] = point.value
    if not dimensions:
        return placeholder(options, "No valid radar data")

    cx = options.width / 2
    cy = options.height / 2
    radius = min(options.width, options.height) / 3
    grid = palette.color("grid")
    names = list(dimensions)

    fragment = Fragment()
    for ring in range(1, GRID_RINGS + 1):
        fragment.circle(cx, cy, radius * ring / GRID_RINGS, fill="none", stroke=grid, stroke_width=1)

    for index, name in enumerate(names):
        angle = radar_angle(index, len(names))
        fragment.line(
            cx,
            cy,
            cx + radius * math.cos(angle),
            cy + radius * math.sin(angle),
            stroke=grid,
            stroke_width=1,
        )
        fragment.text(
            cx + (radius + 20) * math.cos(angle),
            cy + (radius + 20) * math.sin(angle),
            name,
            text_anchor="middle",
            class_="axis-label",
        )

    for group_index, (group, values) in enumerate(groups.items()):
        color = palette.pick(group_index, "radar")
        vertices = radar_vertices([values.get(name, 0.0) for name in names], cx, cy, radius)
        d = " ".join(
            f"{'M' if index == 0 else 'L'} {format_number(x)} {format_number(y)}"
            for index, (x, y) in enumerate(vertices)
        )
        fragment.path(f"{d} Z", fill=color, fill_opacity=0.3, stroke=color, stroke_width=2)
        legend_swatch(fragment, 20, 100 + group_index * 20 - 8, color, group)
    return fragment
