"""Dual-axes layout: columns on the left axis, a line on the right axis.

The two series are scaled independently.  The left axis domain is
``[0, max(bars)]`` and the right axis domain is ``[0, max(line)]``, so the
magnitude of one series never changes the other axis.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from ...viz import ChartTheme, Fragment
from ..options import ChartOptions
from ..points import DualAxesData
from ..scale import CanvasArea, canvas_area, format_number, linear_scale, safe_max
from ._common import draw_vertical_title, placeholder, theme_or_default

__all__ = [
    "DualAxesLayout",
    "compute_dual_axes_layout",
    "dual_axis_ticks",
    "render_dual_axes",
]

TICK_COUNT = 5
BAR_FILL_RATIO = 0.6


def dual_axis_ticks(max_value: float) -> Tuple[float, ...]:
    """Tick values ``0, max/5, ..., max`` for one axis."""

    return tuple(max_value * step / TICK_COUNT for step in range(TICK_COUNT + 1))


def left_tick_label(value: float) -> str:
    return f"{value:.0f}"


def right_tick_label(value: float) -> str:
    return f"{value:.2f}"


@dataclass(frozen=True)
class DualAxesLayout:
    area: CanvasArea
    categories: Tuple[str, ...]
    category_width: float
    bar_max: float
    line_max: float
    # (x, y, width, height) per drawn bar
    bars: Tuple[Tuple[float, float, float, float], ...]
    line: Tuple[Tuple[float, float], ...]

    @property
    def left_ticks(self) -> Tuple[float, ...]:
        return dual_axis_ticks(self.bar_max)

    @property
    def right_ticks(self) -> Tuple[float, ...]:
        return dual_axis_ticks(self.line_max)


def compute_dual_axes_layout(data: DualAxesData, options: ChartOptions) -> DualAxesLayout:
    """Place bars and line points against the shared category list.

    Both series are indexed positionally against ``data.categories``; a
    series shorter than the category list simply stops early and entries past
    the end of the category list are ignored.
    """

    area = canvas_area(options.width, options.height)
    count = len(data.categories)
    bars_in_range = data.bars[:count]
    line_in_range = data.line[:count]
    bar_max = safe_max(bars_in_range)
    line_max = safe_max(line_in_range)
    category_width = area.width / count if count else 0.0
    bar_width = category_width * BAR_FILL_RATIO

    bars: List[Tuple[float, float, float, float]] = []
    for index, value in enumerate(bars_in_range):
        height = max(value, 0.0) / bar_max * area.height
        x = area.x + index * category_width + (category_width - bar_width) / 2
        bars.append((x, area.bottom - height, bar_width, height))

    line: List[Tuple[float, float]] = []
    for index, value in enumerate(line_in_range):
        x = area.x + (index + 0.5) * category_width
        line.append((x, linear_scale(value, 0.0, line_max, area.bottom, area.y)))

    return DualAxesLayout(
        area=area,
        categories=tuple(data.categories),
        category_width=category_width,
        bar_max=bar_max,
        line_max=line_max,
        bars=tuple(bars),
        line=tuple(line),
    )


def render_dual_axes(
    data: DualAxesData,
    options: ChartOptions,
    theme: ChartTheme | None = None,
) -> Fragment:
    if data.is_empty:
        return placeholder(options, "No valid dual-axes data")
    palette = theme_or_default(theme)
    bar_color = palette.color("primary")
    line_color = palette.color("secondary")
    layout = compute_dual_axes_layout(data, options)
    area = layout.area

    fragment = Fragment()
    legend_y = area.y - 30
    fragment.rect(area.x, legend_y, 12, 12, fill=bar_color)
    fragment.text(area.x + 18, legend_y + 9, data.bar_title or "Column", class_="legend-text")
    fragment.line(area.x + 120, legend_y + 6, area.x + 140, legend_y + 6, stroke=line_color, stroke_width=2)
    fragment.circle(area.x + 130, legend_y + 6, 3, fill=line_color)
    fragment.text(area.x + 148, legend_y + 9, data.line_title or "Line", class_="legend-text")

    for x, y, width, height in layout.bars:
        fragment.rect(x, y, width, height, fill=bar_color, class_="chart-bar")

    if layout.line:
        d = " ".join(
            f"{'M' if index == 0 else 'L'} {format_number(x)} {format_number(y)}"
            for index, (x, y) in enumerate(layout.line)
        )
        fragment.path(d, stroke=line_color, class_="chart-line")
        for x, y in layout.line:
            fragment.circle(x, y, 4, fill="#fff", stroke=line_color, class_="chart-point")

    fragment.line(area.x, area.y, area.x, area.bottom, class_="axis")
    fragment.line(area.right, area.y, area.right, area.bottom, class_="axis")
    fragment.line(area.x, area.bottom, area.right, area.bottom, class_="axis")

    for left, right in zip(layout.left_ticks, layout.right_ticks):
        left_y = linear_scale(left, 0.0, layout.bar_max, area.bottom, area.y)
        right_y = linear_scale(right, 0.0, layout.line_max, area.bottom, area.y)
        fragment.text(area.x - 8, left_y + 4, left_tick_label(left), text_anchor="end", class_="axis-label")
        fragment.text(area.right + 8, right_y + 4, right_tick_label(right), text_anchor="start", class_="axis-label")

    for index, category in enumerate(layout.categories):
        fragment.text(
            area.x + (index + 0.5) * layout.category_width,
            area.bottom + 20,
            category,
            text_anchor="middle",
            class_="axis-label",
        )

    if options.axis_x_title:
        fragment.text(area.center_x, area.bottom + 50, options.axis_x_title, text_anchor="middle", class_="axis-title")
    left_title = data.bar_title or options.axis_y_title
    if left_title:
        draw_vertical_title(fragment, 30, area.y + area.height / 2, left_title)
    if data.line_title:
        draw_vertical_title(fragment, options.width - 15, area.y + area.height / 2, data.line_title)
    return fragment
