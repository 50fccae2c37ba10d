from __future__ import annotations

import math

import pytest

from localchart.charts.engines.pie import compute_pie_slices, render_pie
from localchart.charts.options import ChartOptions
from localchart.charts.points import LabeledValue

OPTIONS = ChartOptions()

SHARE = [LabeledValue("Mobile", 3.0), LabeledValue("Desktop", 2.0), LabeledValue("Tablet", 1.0)]


def test_percentages_and_full_sweep() -> None:
    slices = compute_pie_slices(SHARE)
    assert [s.percentage for s in slices] == ["50.0%", "33.3%", "16.7%"]
    assert sum(s.sweep for s in slices) == pytest.approx(2 * math.pi)
    assert slices[0].start == pytest.approx(-math.pi / 2)
    assert slices[1].start == pytest.approx(slices[0].end)


def test_non_positive_values_are_skipped() -> None:
    slices = compute_pie_slices([LabeledValue("A", 4.0), LabeledValue("B", 0.0), LabeledValue("C", 4.0)])
    assert [s.label for s in slices] == ["A", "C"]
    assert sum(s.sweep for s in slices) == pytest.approx(2 * math.pi)


def test_negative_values_count_toward_total() -> None:
    slices = compute_pie_slices([LabeledValue("A", 4.0), LabeledValue("B", -1.0)])
    assert [s.label for s in slices] == ["A"]
    assert slices[0].ratio == pytest.approx(4 / 3)


def test_non_positive_total_uses_placeholder() -> None:
    assert compute_pie_slices([LabeledValue("A", 5.0), LabeledValue("B", -10.0)]) == []
    markup = render_pie([LabeledValue("A", 5.0), LabeledValue("B", -10.0)], OPTIONS).to_string()
    assert "No valid data for pie chart" in markup
    assert "<circle" not in markup


def test_large_arc_flag() -> None:
    big, small = compute_pie_slices([LabeledValue("Big", 3.0), LabeledValue("Small", 1.0)])
    assert big.large_arc == 1
    assert small.large_arc == 0


def test_render_labels_and_legend() -> None:
    markup = render_pie(SHARE, OPTIONS).to_string()
    assert markup.count("<path") == 3
    for label in ("50.0%", "33.3%", "16.7%"):
        assert f">{label}<" in markup
    assert ">Mobile: 3<" in markup
    assert 'fill="white"' in markup


def test_single_slice_draws_full_circle() -> None:
    fragment = render_pie([LabeledValue("All", 7.0)], OPTIONS)
    tags = [node.tag for node in fragment]
    assert "path" not in tags
    assert tags[0] == "circle"


def test_tiny_slice_has_no_percentage_label() -> None:
    markup = render_pie([LabeledValue("Most", 99.0), LabeledValue("Sliver", 1.0)], OPTIONS).to_string()
    assert ">99.0%<" in markup
    assert ">1.0%<" not in markup


def test_all_zero_values_use_pie_placeholder() -> None:
    markup = render_pie([LabeledValue("A", 0.0)], OPTIONS).to_string()
    assert "No valid data for pie chart" in markup
