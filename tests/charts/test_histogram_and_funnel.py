from __future__ import annotations

from localchart.charts.engines.funnel import compute_funnel_stages, conversion_rate, render_funnel
from localchart.charts.engines.histogram import bin_index, compute_histogram_bins, render_histogram
from localchart.charts.options import MAX_BINS, ChartOptions
from localchart.charts.points import LabeledValue

OPTIONS = ChartOptions()


def test_bin_index_clamps_maximum_into_last_bin() -> None:
    assert bin_index(10.0, 1.0, 3.0, 3) == 2
    assert bin_index(1.0, 1.0, 3.0, 3) == 0
    assert bin_index(5.0, 5.0, 0.0, 4) == 0


def test_histogram_counts_every_value() -> None:
    values = [float(v) for v in range(1, 11)]
    buckets = compute_histogram_bins(values, 3)
    assert len(buckets) == 3
    assert sum(b.count for b in buckets) == len(values)
    assert buckets[-1].count == 4
    assert buckets[0].start == 1.0
    assert buckets[-1].end == 10.0


def test_histogram_identical_values_share_first_bin() -> None:
    buckets = compute_histogram_bins([5.0, 5.0, 5.0], 4)
    assert [b.count for b in buckets] == [3, 0, 0, 0]


def test_histogram_bin_labels_are_thinned() -> None:
    options = ChartOptions.from_payload({"bins": 12})
    fragment = render_histogram([float(v) for v in range(120)], options)
    rects = [node for node in fragment if node.tag == "rect"]
    assert len(rects) == 12
    markup = fragment.to_string()
    # every other bin start is labelled
    assert ">0<" in markup
    assert ">9.92<" not in markup
    assert ">19.83<" in markup


def test_histogram_bin_count_is_capped() -> None:
    buckets = compute_histogram_bins([1.0, 2.0, 3.0], 10**12)
    assert len(buckets) == MAX_BINS
    assert sum(b.count for b in buckets) == 3


def test_histogram_placeholder() -> None:
    assert "No valid numeric data for histogram" in render_histogram([], OPTIONS).to_string()


def test_conversion_rate() -> None:
    assert conversion_rate(50.0, 100.0) == 50.0
    assert conversion_rate(1.0, 3.0) == 33.3
    assert conversion_rate(5.0, 0.0) is None


FUNNEL = [LabeledValue("Visit", 1000.0), LabeledValue("Cart", 500.0), LabeledValue("Buy", 250.0)]


def test_funnel_widths_follow_values() -> None:
    stages = compute_funnel_stages(FUNNEL, OPTIONS)
    assert [s.width for s in stages] == [600.0, 300.0, 150.0]
    assert [s.conversion for s in stages] == [None, 50.0, 50.0]
    assert stages[0].next_width == stages[1].width
    assert stages[-1].next_width == stages[-1].width * 0.8
    assert all(s.x + s.width / 2 == 400.0 for s in stages)


def test_funnel_shapes_and_labels() -> None:
    fragment = render_funnel(FUNNEL, OPTIONS)
    tags = [node.tag for node in fragment if node.tag in ("polygon", "rect")]
    assert tags == ["polygon", "polygon", "rect"]
    markup = fragment.to_string()
    assert ">1,000<" in markup
    assert markup.count(">50.0%<") == 2


def test_funnel_skips_conversion_after_zero_stage() -> None:
    stages = compute_funnel_stages([LabeledValue("A", 0.0), LabeledValue("B", 5.0)], OPTIONS)
    assert stages[1].conversion is None


def test_funnel_placeholder() -> None:
    assert "No data available" in render_funnel([], OPTIONS).to_string()
