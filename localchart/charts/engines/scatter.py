"""Scatter chart layout.

Points with numeric ``x`` and ``y`` are scaled against a fixed ``[0, 100]``
domain on both axes.  Points without coordinates are spread along x by
index and given a pseudo-random height, so output for such input is not
reproducible unless a seeded ``rng`` is supplied.
"""
from __future__ import annotations

import random
from typing import Sequence

from ...viz import ChartTheme, Fragment
from ..options import ChartOptions
from ..points import XYPoint
from ..scale import canvas_area, linear_scale
from ._common import draw_axes, draw_axis_titles, placeholder, theme_or_default

__all__ = ["render_scatter"]

DOMAIN = (0.0, 100.0)


def render_scatter(
    points: Sequence[XYPoint],
    options: ChartOptions,
    theme: ChartTheme | None = None,
    *,
    rng: random.Random | None = None,
) -> Fragment:
    if not points:
        return placeholder(options)
    color = theme_or_default(theme).color("primary")
    area = canvas_area(options.width, options.height)
    source = rng or random

    fragment = Fragment()
    for index, point in enumerate(points):
        if point.has_coordinates:
            x = linear_scale(point.x, *DOMAIN, area.x, area.right)
            y = linear_scale(point.y, *DOMAIN, area.bottom, area.y)
        else:
            x = area.x + index / len(points) * area.width
            y = area.bottom - source.random() * area.height
        fragment.circle(x, y, 5, fill=color, class_="chart-point")

    draw_axes(fragment, area)
    draw_axis_titles(fragment, area, options)
    return fragment
