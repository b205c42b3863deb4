"""Validation and derived views for live transit snapshots.

The transit service returns loosely-typed JSON. Everything in this module
converts those payloads into typed records at the boundary so malformed
entries never reach the distance or schedule code.
"""

from __future__ import annotations

import logging
import re
from collections import Counter
from collections.abc import Callable, Iterable, Mapping, Set
from typing import Any

from .const import (
    OUT_OF_SERVICE_ROUTE_ID,
    ROUTE_COLOR_OVERRIDES,
    SNAPSHOT_KEYS,
    STOP_MATCH_THRESHOLD_M,
)
from .exceptions import ValidationError
from .geo import polyline_distance
from .models import Route, Shape, Stop, Vehicle
from .util import Coordinate, coerce_float

_LOGGER = logging.getLogger(__name__)

_INT_PATTERN = re.compile(r"-?[0-9]+", re.ASCII)


def parse_shape_points(points: str, *, strict: bool = False) -> tuple[Coordinate, ...]:
    """Decode a ``lat,lng;lat,lng;`` shape string.

    Malformed pairs are skipped, or raise ``ValidationError`` when ``strict``.
    """
    if not isinstance(points, str):
        raise ValidationError("Shape points must be a string.")
    decoded: list[Coordinate] = []
    for index, segment in enumerate(points.split(";")):
        if not segment.strip():
            continue
        parts = segment.split(",")
        try:
            if len(parts) != 2:
                raise ValidationError(f"Shape point {segment!r} is not a lat,lng pair.")
            lat = coerce_float(parts[0], "Shape point latitude")
            lng = coerce_float(parts[1], "Shape point longitude")
        except ValidationError:
            if strict:
                raise
            _LOGGER.warning("Skipping malformed shape point %d: %r", index, segment)
            continue
        decoded.append((lat, lng))
    return tuple(decoded)


def unwrap_payload(data: Any, key: str) -> list[Any]:
    """Return the record list from a bare list or a keyed wrapper object."""
    if data is None:
        return []
    if isinstance(data, list):
        return data
    if isinstance(data, Mapping):
        value = data.get(key)
        if value is None:
            return []
        if isinstance(value, list):
            return value
    raise ValidationError(f"Snapshot payload for {key!r} is not a list.")


def _require_int(data: Mapping[str, Any], key: str) -> int:
    value = data.get(key)
    if value is None or isinstance(value, bool):
        raise ValidationError(f"Snapshot record missing {key}.")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and _INT_PATTERN.fullmatch(value.strip()):
        return int(value.strip())
    raise ValidationError(f"Snapshot record {key} is not an integer.")


def _optional_int(data: Mapping[str, Any], key: str) -> int | None:
    if data.get(key) is None:
        return None
    return _require_int(data, key)


def _optional_float(data: Mapping[str, Any], key: str, default: float | None) -> float | None:
    if data.get(key) is None:
        return default
    return coerce_float(data.get(key), key)


def _text(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    return str(value).strip()


def _require_mapping(data: Any, kind: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValidationError(f"Snapshot {kind} record must be an object.")
    return data


def map_vehicle(data: Any) -> Vehicle:
    record = _require_mapping(data, "vehicle")
    return Vehicle(
        id=_require_int(record, "vehicleID"),
        name=_text(record, "vehicleName"),
        route_id=_require_int(record, "routeID"),
        lat=coerce_float(record.get("lat"), "lat"),
        lng=coerce_float(record.get("lng"), "lng"),
        speed=_optional_float(record, "speed", 0.0) or 0.0,
        course=_optional_float(record, "course", 0.0) or 0.0,
        occupancy=_optional_float(record, "APCPercentage", None),
        position_updated=_optional_int(record, "positionUpdated"),
    )


def map_route(data: Any) -> Route:
    record = _require_mapping(data, "route")
    color = _text(record, "color").lstrip("#").lower()
    return Route(
        id=_require_int(record, "routeID"),
        short_name=_text(record, "shortName"),
        long_name=_text(record, "longName"),
        color=color,
        shape_id=_optional_int(record, "shapeID"),
    )


def map_stop(data: Any) -> Stop:
    record = _require_mapping(data, "stop")
    return Stop(
        id=_require_int(record, "stopID"),
        name=_text(record, "longName"),
        lat=coerce_float(record.get("lat"), "lat"),
        lng=coerce_float(record.get("lng"), "lng"),
    )


def map_shape(data: Any) -> Shape:
    record = _require_mapping(data, "shape")
    points = record.get("points")
    if points is None:
        raise ValidationError("Snapshot record missing points.")
    return Shape(id=_require_int(record, "shapeID"), points=parse_shape_points(points))


def _map_list(data: Any, kind: str, mapper: Callable[[Any], Any]) -> list:
    mapped = []
    for item in unwrap_payload(data, SNAPSHOT_KEYS[kind]):
        try:
            mapped.append(mapper(item))
        except ValidationError as exc:
            _LOGGER.debug("Dropping malformed %s record: %s", kind, exc)
    return mapped


def map_vehicle_list(data: Any) -> list[Vehicle]:
    """Map vehicles, dropping malformed and out-of-service entries."""
    vehicles: list[Vehicle] = _map_list(data, "vehicles", map_vehicle)
    return [vehicle for vehicle in vehicles if vehicle.route_id != OUT_OF_SERVICE_ROUTE_ID]


def map_route_list(data: Any) -> list[Route]:
    return _map_list(data, "routes", map_route)


def map_stop_list(data: Any) -> list[Stop]:
    return _map_list(data, "stops", map_stop)


def map_shape_list(data: Any) -> list[Shape]:
    return _map_list(data, "shapes", map_shape)


def live_route_ids(vehicles: Iterable[Vehicle]) -> frozenset[int]:
    return frozenset(vehicle.route_id for vehicle in vehicles)


def vehicle_counts(vehicles: Iterable[Vehicle]) -> dict[int, int]:
    return dict(Counter(vehicle.route_id for vehicle in vehicles))


def split_by_live(routes: Iterable[Route], live_ids: Set[int]) -> tuple[list[Route], list[Route]]:
    active: list[Route] = []
    inactive: list[Route] = []
    for route in routes:
        (active if route.id in live_ids else inactive).append(route)
    return active, inactive


def reconcile_visibility(
    visible: Set[int],
    previous_live: Set[int] | None,
    current_live: Set[int],
) -> frozenset[int]:
    """Return the visible route ids after a new vehicle snapshot.

    Routes that gain vehicles are shown and routes that lose them are hidden.
    Without a baseline, or with an empty snapshot, visibility is unchanged.
    """
    if previous_live is None or not current_live:
        return frozenset(visible)
    gained = set(current_live) - set(previous_live)
    lost = set(previous_live) - set(current_live)
    if gained or lost:
        _LOGGER.debug("Route visibility change: gained=%s lost=%s", sorted(gained), sorted(lost))
    return frozenset((set(visible) | gained) - lost)


def route_display_color(route: Route) -> str:
    return ROUTE_COLOR_OVERRIDES.get(route.id, route.color)


def match_stop_routes(
    stops: Iterable[Stop],
    routes: Iterable[Route],
    shapes: Iterable[Shape],
    threshold_m: float = STOP_MATCH_THRESHOLD_M,
) -> dict[int, tuple[int, ...]]:
    """Map stop ids to the ids of routes whose shape passes within ``threshold_m``."""
    polylines = {shape.id: shape.points for shape in shapes}
    route_lines = [
        (route.id, polylines[route.shape_id])
        for route in routes
        if route.shape_id is not None and len(polylines.get(route.shape_id, ())) >= 2
    ]
    matches: dict[int, tuple[int, ...]] = {}
    for stop in stops:
        served = tuple(
            route_id
            for route_id, line in route_lines
            if polyline_distance(stop.point, line) <= threshold_m
        )
        if served:
            matches[stop.id] = served
    return matches
