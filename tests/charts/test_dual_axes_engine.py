from __future__ import annotations

import pytest

from localchart.charts.engines.dual_axes import (
    compute_dual_axes_layout,
    dual_axis_ticks,
    left_tick_label,
    render_dual_axes,
    right_tick_label,
)
from localchart.charts.options import ChartOptions
from localchart.charts.points import DualAxesData

OPTIONS = ChartOptions()


def _data(bars, line, **kwargs) -> DualAxesData:
    categories = tuple(f"C{i}" for i in range(max(len(bars), len(line))))
    return DualAxesData(categories, tuple(bars), tuple(line), **kwargs)


def test_ticks_cover_zero_to_max() -> None:
    assert dual_axis_ticks(50.0) == (0.0, 10.0, 20.0, 30.0, 40.0, 50.0)
    assert left_tick_label(12.6) == "13"
    assert right_tick_label(0.1) == "0.10"


def test_axes_are_scaled_independently() -> None:
    small = compute_dual_axes_layout(_data([10, 20, 30], [0.1, 0.2, 0.3]), OPTIONS)
    large = compute_dual_axes_layout(_data([10, 20, 30], [1000, 2000, 3000]), OPTIONS)
    assert small.left_ticks == large.left_ticks
    assert small.bars == large.bars
    assert small.right_ticks != large.right_ticks
    assert small.line_max == pytest.approx(0.3)


def test_tallest_bar_and_peak_point_reach_top() -> None:
    layout = compute_dual_axes_layout(_data([10, 40], [5, 2]), OPTIONS)
    tallest = max(layout.bars, key=lambda bar: bar[3])
    assert tallest[1] == layout.area.y
    assert layout.line[0][1] == layout.area.y


def test_series_longer_than_categories_are_truncated() -> None:
    data = DualAxesData(("A", "B"), (1.0, 2.0, 99.0), (1.0, 2.0, 3.0, 4.0))
    layout = compute_dual_axes_layout(data, OPTIONS)
    assert len(layout.bars) == 2
    assert len(layout.line) == 2
    assert layout.bar_max == 2.0


def test_render_draws_legend_and_both_tick_columns() -> None:
    markup = render_dual_axes(
        _data([10, 20], [0.5, 1.0], bar_title="Sales", line_title="Rate"),
        OPTIONS,
    ).to_string()
    assert ">Sales<" in markup and ">Rate<" in markup
    assert ">20<" in markup
    assert ">1.00<" in markup
    assert markup.count('class="axis"') == 3
    assert 'rotate(-90 785 290)' in markup


def test_legend_defaults_when_titles_missing() -> None:
    markup = render_dual_axes(_data([1], [1]), OPTIONS).to_string()
    assert ">Column<" in markup
    assert ">Line<" in markup


def test_empty_data_placeholder() -> None:
    markup = render_dual_axes(DualAxesData((), (), ()), OPTIONS).to_string()
    assert "No valid dual-axes data" in markup


def test_right_axis_ignores_bar_series() -> None:
    small = compute_dual_axes_layout(_data([1, 2, 3], [0.1, 0.2, 0.3]), OPTIONS)
    large = compute_dual_axes_layout(_data([1000, 5000, 9000], [0.1, 0.2, 0.3]), OPTIONS)
    assert small.right_ticks == large.right_ticks
    assert small.line == large.line
    assert small.left_ticks != large.left_ticks
