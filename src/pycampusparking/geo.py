"""Geospatial distance helpers."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Sequence
from typing import TypeVar

from .const import EARTH_RADIUS_KM, EARTH_RADIUS_M
from .util import Coordinate

T = TypeVar("T")


def point_distance(p1: Coordinate, p2: Coordinate) -> float:
    """Great-circle distance in kilometres (haversine, spherical Earth)."""
    lat1, lng1 = p1
    lat2, lng2 = p2
    d_lat = math.radians(lat2 - lat1)
    d_lng = math.radians(lng2 - lng1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lng / 2) ** 2
    )
    a = min(1.0, a)
    return EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def _planar_distance(p1: Coordinate, p2: Coordinate) -> float:
    # Equirectangular approximation, good to a few metres at campus scale.
    d_lat = math.radians(p2[0] - p1[0])
    d_lng = math.radians(p2[1] - p1[1]) * math.cos(math.radians((p1[0] + p2[0]) / 2))
    return EARTH_RADIUS_M * math.sqrt(d_lat * d_lat + d_lng * d_lng)


def segment_distance(point: Coordinate, a: Coordinate, b: Coordinate) -> float:
    """Minimum distance in metres from ``point`` to the segment ``[a, b]``."""
    dx = b[0] - a[0]
    dy = b[1] - a[1]
    if dx == 0 and dy == 0:
        return point_distance(point, a) * 1000
    t = ((point[0] - a[0]) * dx + (point[1] - a[1]) * dy) / (dx * dx + dy * dy)
    t = max(0.0, min(1.0, t))
    projection = (a[0] + t * dx, a[1] + t * dy)
    return _planar_distance(point, projection)


def polyline_distance(point: Coordinate, polyline: Sequence[Coordinate]) -> float:
    """Minimum distance in metres from ``point`` to a polyline.

    Polylines with fewer than two points have no segments and yield ``inf``.
    """
    best = math.inf
    for a, b in zip(polyline, polyline[1:]):
        distance = segment_distance(point, a, b)
        if distance < best:
            best = distance
    return best


def nearest(
    point: Coordinate,
    items: Iterable[T],
    key: Callable[[T], Coordinate],
) -> list[tuple[T, float]]:
    """Return items paired with their distance in km, closest first."""
    ranked = [(item, point_distance(point, key(item))) for item in items]
    ranked.sort(key=lambda pair: pair[1])
    return ranked
