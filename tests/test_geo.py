import math

import pytest

from pycampusparking.geo import nearest, point_distance, polyline_distance, segment_distance

CAMPUS = (42.8176, -75.5353)


def test_point_distance_identity() -> None:
    assert point_distance(CAMPUS, CAMPUS) == 0


def test_point_distance_one_degree_of_longitude_at_equator() -> None:
    assert point_distance((0.0, 0.0), (0.0, 1.0)) == pytest.approx(111.195, rel=1e-3)


def test_point_distance_is_symmetric() -> None:
    other = (42.8300, -75.5500)
    assert point_distance(CAMPUS, other) == pytest.approx(point_distance(other, CAMPUS))


def test_segment_distance_perpendicular() -> None:
    distance = segment_distance((0.001, 0.005), (0.0, 0.0), (0.0, 0.01))
    assert distance == pytest.approx(111.195, rel=1e-3)


def test_segment_distance_clamps_to_endpoint() -> None:
    distance = segment_distance((0.0, 0.02), (0.0, 0.0), (0.0, 0.01))
    assert distance == pytest.approx(1111.95, rel=1e-3)


def test_segment_distance_degenerate_segment() -> None:
    other = (42.8200, -75.5400)
    assert segment_distance(other, CAMPUS, CAMPUS) == pytest.approx(
        point_distance(other, CAMPUS) * 1000
    )


def test_polyline_distance_identity() -> None:
    assert polyline_distance(CAMPUS, [CAMPUS, CAMPUS]) == 0


def test_polyline_distance_takes_minimum_segment() -> None:
    line = [(0.0, 0.0), (0.0, 0.01), (0.01, 0.01)]
    assert polyline_distance((0.005, 0.011), line) == pytest.approx(111.195, rel=1e-2)


def test_polyline_distance_needs_two_points() -> None:
    assert polyline_distance(CAMPUS, []) == math.inf
    assert polyline_distance(CAMPUS, [CAMPUS]) == math.inf


def test_nearest_orders_by_distance() -> None:
    places = {"far": (42.90, -75.60), "near": (42.818, -75.535), "mid": (42.83, -75.55)}
    ranked = nearest(CAMPUS, places, key=places.__getitem__)
    assert [name for name, _ in ranked] == ["near", "mid", "far"]
