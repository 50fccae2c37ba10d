"""Column and grouped-bar layout."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

from ...viz import ChartTheme, Fragment
from ..options import ChartOptions
from ..points import CategoryGroupValue
from ..scale import CanvasArea, canvas_area, format_number, safe_max
from ._common import draw_axes, draw_axis_titles, legend_swatch, placeholder, theme_or_default

__all__ = ["ColumnBar", "ColumnLayout", "compute_column_layout", "render_column"]

GROUP_SPACING = 1.2
LABEL_MIN_HEIGHT = 20.0
LEGEND_STRIDE = 120.0


@dataclass(frozen=True)
class ColumnBar:
    category: str
    group: str
    value: float
    x: float
    y: float
    width: float
    height: float
    color: str


@dataclass(frozen=True)
class ColumnLayout:
    area: CanvasArea
    categories: Tuple[str, ...]
    groups: Tuple[str, ...]
    category_width: float
    bars: Tuple[ColumnBar, ...]


def compute_column_layout(
    points: Sequence[CategoryGroupValue],
    options: ChartOptions,
    theme: ChartTheme | None = None,
) -> ColumnLayout:
    """Place one bar per (category, group) cell present in ``points``.

    Categories and groups keep first-seen order; a later duplicate cell
    overwrites the earlier value without moving it.
    """

    palette = theme_or_default(theme)
    area = canvas_area(options.width, options.height)
    cells: Dict[str, Dict[str, float]] = {}
    groups: Dict[str, None] = {}
    for point in points:
        cells.setdefault(point.category, {})[point.group] = point.value
        groups.setdefault(point.group, None)

    categories = tuple(cells)
    group_order = tuple(groups)
    if not categories:
        return ColumnLayout(area, (), (), 0.0, ())

    max_value = safe_max(value for row in cells.values() for value in row.values())
    category_width = area.width / len(categories)
    bar_width = category_width / (len(group_order) * GROUP_SPACING)
    offset = (category_width - len(group_order) * bar_width) / 2

    bars: List[ColumnBar] = []
    for cat_index, category in enumerate(categories):
        category_x = area.x + cat_index * category_width
        row = cells[category]
        for group_index, group in enumerate(group_order):
            if group not in row:
                continue
            value = row[group]
            # negative values collapse to the baseline; SVG rejects negative heights
            height = max(value, 0.0) / max_value * area.height
            bars.append(
                ColumnBar(
                    category=category,
                    group=group,
                    value=value,
                    x=category_x + group_index * bar_width + offset,
                    y=area.bottom - height,
                    width=bar_width,
                    height=height,
                    color=palette.pick(group_index),
                )
            )
    return ColumnLayout(area, categories, group_order, category_width, tuple(bars))


def render_column(
    points: Sequence[CategoryGroupValue],
    options: ChartOptions,
    theme: ChartTheme | None = None,
) -> Fragment:
    layout = compute_column_layout(points, options, theme)
    if not layout.categories:
        return placeholder(options, "No valid column data")
    palette = theme_or_default(theme)
    area = layout.area

    legend = Fragment()
    if len(layout.groups) > 1:
        legend_y = area.y - 30
        for index, group in enumerate(layout.groups):
            legend_swatch(legend, area.x + index * LEGEND_STRIDE, legend_y, palette.pick(index), group)

    body = Fragment()
    by_category: Dict[str, List[ColumnBar]] = {}
    for bar in layout.bars:
        by_category.setdefault(bar.category, []).append(bar)

    for cat_index, category in enumerate(layout.categories):
        for bar in by_category.get(category, ()):
            body.rect(bar.x, bar.y, bar.width, bar.height, fill=bar.color, class_="chart-bar")
            if bar.height > LABEL_MIN_HEIGHT:
                body.text(
                    bar.x + bar.width / 2,
                    bar.y - 5,
                    format_number(bar.value),
                    text_anchor="middle",
                    class_="axis-label",
                )
        category_x = area.x + cat_index * layout.category_width
        body.text(
            category_x + layout.category_width / 2,
            area.bottom + 20,
            category,
            text_anchor="middle",
            class_="axis-label",
        )

    draw_axes(body, area)
    draw_axis_titles(body, area, options)
    return legend.extend(body)
