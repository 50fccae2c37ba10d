"""Histogram layout."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Sequence

from ...viz import ChartTheme, Fragment
from ..options import MAX_BINS, ChartOptions
from ..scale import canvas_area, format_number, safe_max
from ._common import draw_axes, draw_axis_titles, placeholder, theme_or_default

__all__ = ["HistogramBin", "bin_index", "compute_histogram_bins", "render_histogram"]

MAX_BIN_LABELS = 6
LABEL_MIN_HEIGHT = 15.0


@dataclass(frozen=True)
class HistogramBin:
    start: float
    end: float
    count: int


def bin_index(value: float, low: float, width: float, bins: int) -> int:
    """Bucket for ``value``, clamped so the maximum lands in the last bin."""

    if width <= 0:
        return 0
    index = math.floor((value - low) / width)
    return min(max(index, 0), bins - 1)


def compute_histogram_bins(values: Sequence[float], bins: int) -> List[HistogramBin]:
    if not values:
        return []
    bins = min(max(1, int(bins)), MAX_BINS)
    low, high = min(values), max(values)
    width = (high - low) / bins
    counts = [0] * bins
    for value in values:
        counts[bin_index(value, low, width, bins)] += 1
    return [
        HistogramBin(start=low + index * width, end=low + (index + 1) * width, count=count)
        for index, count in enumerate(counts)
    ]


def render_histogram(
    values: Sequence[float],
    options: ChartOptions,
    theme: ChartTheme | None = None,
) -> Fragment:
    buckets = compute_histogram_bins(values, options.bins)
    if not buckets:
        return placeholder(options, "No valid numeric data for histogram")
    color = theme_or_default(theme).color("primary")
    area = canvas_area(options.width, options.height)
    peak = safe_max(bucket.count for bucket in buckets)
    bar_width = area.width / len(buckets)
    stride = max(1, math.ceil(len(buckets) / MAX_BIN_LABELS))

    fragment = Fragment()
    for index, bucket in enumerate(buckets):
        x = area.x + index * bar_width
        height = bucket.count / peak * area.height
        y = area.bottom - height
        fragment.rect(x, y, bar_width, height, fill=color, class_="chart-bar")
        if height > LABEL_MIN_HEIGHT:
            fragment.text(x + bar_width / 2, y - 5, str(bucket.count), text_anchor="middle", class_="axis-label")
        if index % stride == 0:
            fragment.text(
                x,
                area.bottom + 20,
                format_number(round(bucket.start, 2)),
                text_anchor="middle",
                class_="axis-label",
            )

    draw_axes(fragment, area)
    draw_axis_titles(fragment, area, options)
    return fragment
