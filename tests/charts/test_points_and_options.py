from __future__ import annotations

from localchart.charts.options import MAX_BINS, ChartOptions, ChartRequest
from localchart.charts.points import (
    CategoryGroupValue,
    LabeledValue,
    RadarValue,
    XYPoint,
    coerce_categories,
    coerce_column,
    coerce_dual_axes,
    coerce_histogram,
    coerce_radar,
    coerce_timeline,
    coerce_xy,
    to_number,
)

OPTIONS = ChartOptions()


def test_to_number() -> None:
    assert to_number(3) == 3.0
    assert to_number("4.5") == 4.5
    assert to_number(" 7 ") == 7.0
    assert to_number(True) == 1.0
    assert to_number("abc") is None
    assert to_number("") is None
    assert to_number(None) is None
    assert to_number(float("nan")) is None
    assert to_number({"value": 1}) is None


def test_column_keeps_category_and_numeric_value_only() -> None:
    data = [
        {"category": "Q1", "value": 10, "group": "Rev"},
        {"category": "Q2", "value": "20"},
        {"category": "", "value": 5},
        {"category": "Q3", "value": "n/a"},
        {"value": 3},
        42,
    ]
    assert coerce_column(data, OPTIONS) == [
        CategoryGroupValue("Q1", "Rev", 10.0),
        CategoryGroupValue("Q2", "Series 1", 20.0),
    ]


def test_timeline_prefers_time_then_category() -> None:
    data = [
        {"time": "Jan", "category": "ignored", "value": 1},
        {"category": "Feb", "value": 2},
        {"time": "Mar"},
        "5",
        None,
    ]
    assert coerce_timeline(data, OPTIONS) == [
        LabeledValue("Jan", 1.0),
        LabeledValue("Feb", 2.0),
        LabeledValue("Unknown", 0.0),
        LabeledValue("Unknown", 5.0),
        LabeledValue("Unknown", 0.0),
    ]


def test_categories_ignore_time_field() -> None:
    data = [{"category": "Mobile", "value": 45}, {"time": "Jan", "value": 3}]
    assert coerce_categories(data, OPTIONS) == [
        LabeledValue("Mobile", 45.0),
        LabeledValue("Unknown", 0.0),
    ]


def test_xy_points_without_coordinates_are_flagged() -> None:
    points = coerce_xy([{"x": 10, "y": "20"}, {"x": 5}, 3], OPTIONS)
    assert points == [XYPoint(10.0, 20.0), XYPoint(None, None), XYPoint(None, None)]
    assert points[0].has_coordinates
    assert not points[1].has_coordinates


def test_radar_requires_name_group_and_value() -> None:
    data = [
        {"name": "Speed", "group": "Car A", "value": 85},
        {"name": "Speed", "value": 70},
        {"name": "Comfort", "group": "Car A", "value": "x"},
    ]
    assert coerce_radar(data, OPTIONS) == [RadarValue("Speed", "Car A", 85.0)]


def test_histogram_values() -> None:
    assert coerce_histogram([1, "2", {"value": 3}, {"value": "x"}, "y", None], OPTIONS) == [1.0, 2.0, 3.0]


def test_non_list_data_coerces_to_nothing() -> None:
    assert coerce_column({"category": "Q1", "value": 1}, OPTIONS) == []
    assert coerce_histogram("1,2,3", OPTIONS) == []


def test_dual_axes_from_series_option() -> None:
    options = ChartOptions.from_payload(
        {
            "categories": ["2021", "2022", "2023"],
            "series": [
                {"type": "column", "data": [10, 20, 30], "axisYTitle": "Sales"},
                {"type": "line", "data": [0.1, "0.2", None], "axisYTitle": "Rate"},
                {"type": "pie", "data": [1]},
            ],
        }
    )
    data = coerce_dual_axes([], options)
    assert data.categories == ("2021", "2022", "2023")
    assert data.bars == (10.0, 20.0, 30.0)
    assert data.line == (0.1, 0.2, 0.0)
    assert data.bar_title == "Sales"
    assert data.line_title == "Rate"


def test_dual_axes_from_legacy_rows() -> None:
    rows = [
        {"category": "A", "bar": 5, "line": 1.5},
        {"time": "B", "value": 7, "value2": 2.5},
    ]
    data = coerce_dual_axes(rows, OPTIONS)
    assert data.categories == ("A", "B")
    assert data.bars == (5.0, 7.0)
    assert data.line == (1.5, 2.5)
    assert not data.is_empty


def test_options_defaults_and_aliases() -> None:
    options = ChartOptions.from_payload({"axisXTitle": "Quarter", "axisYTitle": "Revenue", "color": "red"})
    assert options.width == 800
    assert options.height == 600
    assert options.bins == 10
    assert options.axis_x_title == "Quarter"
    assert options.axis_y_title == "Revenue"


def test_options_coerce_bad_numbers_to_defaults() -> None:
    options = ChartOptions.from_payload({"width": "wide", "height": "480", "bins": 0})
    assert options.width == 800
    assert options.height == 480
    assert options.bins == 10


def test_non_positive_sizes_fall_back_to_defaults() -> None:
    options = ChartOptions.from_payload({"width": 0, "height": -50})
    assert options.width == 800
    assert options.height == 600
    assert ChartOptions.from_payload({"width": 0.5}).width == 800


def test_bins_are_capped() -> None:
    assert ChartOptions.from_payload({"bins": 10**12}).bins == MAX_BINS
    assert ChartOptions.from_payload({"bins": "25"}).bins == 25


def test_options_from_non_mapping_payload() -> None:
    assert ChartOptions.from_payload(None) == ChartOptions()
    assert ChartOptions.from_payload(["nope"]) == ChartOptions()


def test_request_accepts_raw_options() -> None:
    request = ChartRequest(type="pie", data=[1, 2], options={"title": "Share"})
    assert request.options.title == "Share"
    assert ChartRequest(type="line").data == []
