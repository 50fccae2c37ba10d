"""Area chart layout: a filled region under the line plus its outline."""
from __future__ import annotations

from typing import Sequence

from ...viz import ChartTheme, Fragment
from ..options import ChartOptions
from ..points import LabeledValue
from ..scale import canvas_area, format_number
from ._common import draw_axes, draw_axis_titles, placeholder, theme_or_default
from .line import project_points, svg_polyline

__all__ = ["render_area"]


def render_area(
    points: Sequence[LabeledValue],
    options: ChartOptions,
    theme: ChartTheme | None = None,
) -> Fragment:
    if not points:
        return placeholder(options)
    color = theme_or_default(theme).color("primary")
    area = canvas_area(options.width, options.height)
    plotted = project_points(points, area)

    baseline = format_number(area.bottom)
    segments = [f"M {format_number(area.x)} {baseline}"]
    segments.extend(f"L {format_number(p.x)} {format_number(p.y)}" for p in plotted)
    segments.append(f"L {format_number(area.right)} {baseline} Z")

    fragment = Fragment()
    fragment.path(" ".join(segments), fill=color, class_="chart-area")
    fragment.path(svg_polyline(plotted), stroke=color, class_="chart-line")
    draw_axes(fragment, area)
    draw_axis_titles(fragment, area, options)
    return fragment
