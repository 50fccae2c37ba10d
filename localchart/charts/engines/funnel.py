"""Funnel chart layout.

Every stage but the last is a trapezoid narrowing from its own width to the
width of the next stage; the last stage is a plain rectangle.  Conversion
rates relative to the previous stage are printed to the right.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

from ...viz import ChartTheme, Fragment
from ..options import ChartOptions
from ..points import LabeledValue
from ..scale import CanvasArea, canvas_area, format_number, safe_max
from ._common import placeholder, theme_or_default

__all__ = ["FunnelStage", "compute_funnel_stages", "conversion_rate", "render_funnel"]

STAGE_GAP = 10.0
TAPER = 0.8


@dataclass(frozen=True)
class FunnelStage:
    label: str
    value: float
    x: float
    y: float
    width: float
    height: float
    next_x: float
    next_width: float
    conversion: Optional[float]
    color: str


def conversion_rate(value: float, previous: float) -> Optional[float]:
    """Percentage of the previous stage, rounded to one decimal."""

    if previous == 0:
        return None
    return round(value / previous * 100, 1)


def _stage_width(area: CanvasArea, value: float, max_value: float) -> float:
    return area.width * max(value, 0.0) / max_value


def compute_funnel_stages(
    points: Sequence[LabeledValue],
    options: ChartOptions,
    theme: ChartTheme | None = None,
) -> List[FunnelStage]:
    if not points:
        return []
    palette = theme_or_default(theme)
    area = canvas_area(options.width, options.height, preset="funnel")
    max_value = safe_max(point.value for point in points)
    stage_height = area.height / len(points)

    stages: List[FunnelStage] = []
    for index, point in enumerate(points):
        width = _stage_width(area, point.value, max_value)
        if index + 1 < len(points):
            next_width = _stage_width(area, points[index + 1].value, max_value)
        else:
            next_width = width * TAPER
        conversion = None
        if index > 0:
            conversion = conversion_rate(point.value, points[index - 1].value)
        stages.append(
            FunnelStage(
                label=point.label,
                value=point.value,
                x=area.x + (area.width - width) / 2,
                y=area.y + index * stage_height,
                width=width,
                height=stage_height,
                next_x=area.x + (area.width - next_width) / 2,
                next_width=next_width,
                conversion=conversion,
                color=palette.pick(index, "funnel"),
            )
        )
    return stages


def render_funnel(
    points: Sequence[LabeledValue],
    options: ChartOptions,
    theme: ChartTheme | None = None,
) -> Fragment:
    stages = compute_funnel_stages(points, options, theme)
    if not stages:
        return placeholder(options)
    area = canvas_area(options.width, options.height, preset="funnel")

    fragment = Fragment()
    for index, stage in enumerate(stages):
        drawn_height = max(stage.height - STAGE_GAP, 0.0)
        if index == len(stages) - 1:
            fragment.rect(
                stage.x, stage.y, stage.width, drawn_height,
                fill=stage.color, stroke="#fff", stroke_width=2,
            )
        else:
            bottom = stage.y + drawn_height
            corners = (
                (stage.x, stage.y),
                (stage.x + stage.width, stage.y),
                (stage.next_x + stage.next_width, bottom),
                (stage.next_x, bottom),
            )
            fragment.polygon(
                " ".join(f"{format_number(x)},{format_number(y)}" for x, y in corners),
                fill=stage.color,
                stroke="#fff",
                stroke_width=2,
            )

        label_y = stage.y + stage.height / 2
        fragment.text(
            area.center_x, label_y - 5, stage.label,
            text_anchor="middle", fill="white", font_weight="bold", class_="value-label",
        )
        fragment.text(
            area.center_x, label_y + 10, _grouped(stage.value),
            text_anchor="middle", fill="white", class_="value-label",
        )
        if stage.conversion is not None:
            fragment.text(area.right + 10, label_y, f"{stage.conversion:.1f}%", class_="axis-label")
    return fragment


def _grouped(value: float) -> str:
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,}"
