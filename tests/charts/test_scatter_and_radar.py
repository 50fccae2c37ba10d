from __future__ import annotations

import math
import random

import pytest

from localchart.charts.engines.radar import radar_angle, radar_vertices, render_radar
from localchart.charts.engines.scatter import render_scatter
from localchart.charts.options import ChartOptions
from localchart.charts.points import RadarValue, XYPoint

OPTIONS = ChartOptions()


def test_scatter_scales_against_fixed_domain() -> None:
    fragment = render_scatter([XYPoint(50.0, 50.0)], OPTIONS)
    circle = next(node for node in fragment if node.tag == "circle")
    assert circle.attributes["cx"] == "410"
    assert circle.attributes["cy"] == "290"


def test_scatter_values_outside_domain_are_not_clamped() -> None:
    fragment = render_scatter([XYPoint(200.0, 0.0)], OPTIONS)
    circle = next(node for node in fragment if node.tag == "circle")
    assert float(circle.attributes["cx"]) > 740


def test_scatter_fallback_is_reproducible_with_seeded_rng() -> None:
    points = [XYPoint(None, None), XYPoint(None, None)]
    first = render_scatter(points, OPTIONS, rng=random.Random(7)).to_string()
    second = render_scatter(points, OPTIONS, rng=random.Random(7)).to_string()
    assert first == second

    circles = [node for node in render_scatter(points, OPTIONS, rng=random.Random(7)) if node.tag == "circle"]
    assert [c.attributes["cx"] for c in circles] == ["80", "410"]
    for circle in circles:
        assert 60 <= float(circle.attributes["cy"]) <= 520


def test_scatter_empty_placeholder() -> None:
    assert "No data available" in render_scatter([], OPTIONS).to_string()


def test_radar_first_spoke_points_up() -> None:
    assert radar_angle(0, 4) == pytest.approx(-math.pi / 2)
    assert radar_angle(1, 4) == pytest.approx(0.0)


def test_radar_vertices_scale_on_hundred() -> None:
    vertices = radar_vertices([100.0, 50.0, 0.0, 150.0], 400.0, 300.0, 200.0)
    assert vertices[0] == pytest.approx((400.0, 100.0))
    assert vertices[1] == pytest.approx((500.0, 300.0))
    assert vertices[2] == pytest.approx((400.0, 300.0))
    # values above 100 reach past the outer ring
    assert vertices[3] == pytest.approx((100.0, 300.0))


def test_radar_grid_spokes_and_legend() -> None:
    points = [
        RadarValue("Speed", "Car A", 85.0),
        RadarValue("Comfort", "Car A", 70.0),
        RadarValue("Safety", "Car A", 90.0),
        RadarValue("Speed", "Car B", 60.0),
    ]
    fragment = render_radar(points, OPTIONS)
    tags = [node.tag for node in fragment]
    assert tags[:5] == ["circle"] * 5
    assert tags.count("line") == 3
    assert tags.count("path") == 2
    markup = fragment.to_string()
    assert ">Car A<" in markup and ">Car B<" in markup
    assert markup.index(">Speed<") < markup.index(">Comfort<") < markup.index(">Safety<")


def test_radar_missing_dimension_reads_as_zero() -> None:
    points = [RadarValue("Speed", "Car A", 100.0), RadarValue("Comfort", "Car B", 100.0)]
    paths = [node for node in render_radar(points, OPTIONS) if node.tag == "path"]
    # Car A has no Comfort value so its second vertex sits on the centre
    assert paths[0].attributes["d"].endswith("L 400 300 Z")


def test_radar_placeholder() -> None:
    assert "No valid radar data" in render_radar([], OPTIONS).to_string()
