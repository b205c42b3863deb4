"""Reference table loading and validation."""

from __future__ import annotations

import json
from collections.abc import Mapping
from importlib import resources
from importlib.resources.abc import Traversable
from typing import Any

from ..exceptions import DataError, ValidationError
from ..models import LotCategory, ParkingLot, RouteSchedule, ScheduleStop, SubSchedule
from ..util import coerce_coordinate

SCHEDULES_FILENAME = "schedules.json"
SCHEMA_FILENAME = "schedules.schema.json"
_SCHEDULE_CACHE: tuple[RouteSchedule, ...] | None = None


def _data_root() -> Traversable:
    return resources.files("pycampusparking.data")


def load_schedule_schema() -> dict:
    schema_path = _data_root() / SCHEMA_FILENAME
    return json.loads(schema_path.read_text(encoding="utf-8"))


def read_schedule_file() -> Any:
    path = _data_root() / SCHEDULES_FILENAME
    if not path.is_file():
        raise DataError("Bundled schedule table was not found.")
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise DataError("Bundled schedule table is not valid JSON.") from exc


def _build_stop(data: Any) -> ScheduleStop:
    if not isinstance(data, Mapping):
        raise ValidationError("Schedule stop must be an object.")
    name = data.get("name")
    if not isinstance(name, str) or not name:
        raise ValidationError("Schedule stop name must be a non-empty string.")
    return ScheduleStop(name=name, offset_minutes=data.get("offset", 0))


def _build_sub_schedule(data: Any) -> SubSchedule:
    if not isinstance(data, Mapping):
        raise ValidationError("Sub-schedule must be an object.")
    missing = [key for key in ("label", "days_of_week", "stops", "departures") if key not in data]
    if missing:
        raise ValidationError(f"Sub-schedule missing keys: {', '.join(missing)}.")
    label = data["label"]
    if not isinstance(label, str) or not label:
        raise ValidationError("Sub-schedule label must be a non-empty string.")
    for key in ("days_of_week", "stops", "departures"):
        if not isinstance(data[key], list):
            raise ValidationError(f"Sub-schedule {label!r} {key} must be a list.")
    if not all(isinstance(day, int) and not isinstance(day, bool) for day in data["days_of_week"]):
        raise ValidationError(f"Sub-schedule {label!r} days_of_week must hold integers.")
    return SubSchedule(
        label=label,
        days=str(data.get("days") or ""),
        days_of_week=frozenset(data["days_of_week"]),
        stops=tuple(_build_stop(stop) for stop in data["stops"]),
        departures=tuple(data["departures"]),
    )


def build_route_schedule(data: Any) -> RouteSchedule:
    """Validate one route entry of a schedule table and build the typed record."""
    if not isinstance(data, Mapping):
        raise ValidationError("Route schedule must be an object.")
    name = data.get("name")
    color = data.get("color")
    schedules = data.get("schedules")
    route_id = data.get("route_id")
    if not isinstance(name, str) or not name:
        raise ValidationError("Route schedule name must be a non-empty string.")
    if not isinstance(color, str) or not color:
        raise ValidationError(f"Route schedule {name!r} color must be a non-empty string.")
    if not isinstance(schedules, list):
        raise ValidationError(f"Route schedule {name!r} schedules must be a list.")
    if route_id is not None and (isinstance(route_id, bool) or not isinstance(route_id, int)):
        raise ValidationError(f"Route schedule {name!r} route_id must be an integer.")
    return RouteSchedule(
        name=name,
        color=color.lstrip("#").lower(),
        sub_schedules=tuple(_build_sub_schedule(item) for item in schedules),
        route_id=route_id,
        source_url=data.get("source_url"),
    )


def build_route_schedules(data: Any) -> list[RouteSchedule]:
    if not isinstance(data, Mapping) or not isinstance(data.get("routes"), list):
        raise ValidationError("Schedule table must be an object with a routes list.")
    return [build_route_schedule(item) for item in data["routes"]]


def load_route_schedules() -> list[RouteSchedule]:
    global _SCHEDULE_CACHE
    if _SCHEDULE_CACHE is not None:
        return list(_SCHEDULE_CACHE)
    try:
        routes = build_route_schedules(read_schedule_file())
    except ValidationError as exc:
        raise DataError(f"Bundled schedule table is invalid: {exc}") from exc
    _SCHEDULE_CACHE = tuple(routes)
    return list(_SCHEDULE_CACHE)


def clear_schedule_cache() -> None:
    """Clear cached route schedules (used in tests)."""
    global _SCHEDULE_CACHE
    _SCHEDULE_CACHE = None


def get_route_schedule(name: str) -> RouteSchedule:
    for route in load_route_schedules():
        if route.name == name:
            return route
    raise DataError(f"Route schedule {name!r} not found.")


def build_parking_lot(data: Any) -> ParkingLot:
    """Validate one entry of a caller-supplied lot table."""
    if not isinstance(data, Mapping):
        raise ValidationError("Parking lot must be an object.")
    lot_id = data.get("id")
    if lot_id is None or not str(lot_id).strip():
        raise ValidationError("Parking lot id is required.")
    try:
        category = LotCategory(data.get("category"))
    except ValueError as exc:
        raise ValidationError(f"Parking lot {lot_id!r} has an unknown category.") from exc
    exempt = data.get("overnight_exempt", False)
    if not isinstance(exempt, bool):
        raise ValidationError(f"Parking lot {lot_id!r} overnight_exempt must be a boolean.")
    location = coerce_coordinate((data.get("lat"), data.get("lng")), "Parking lot location")
    boundary = data.get("polygon") or []
    if not isinstance(boundary, list):
        raise ValidationError(f"Parking lot {lot_id!r} polygon must be a list.")
    return ParkingLot(
        id=str(lot_id).strip(),
        name=str(data.get("name") or lot_id),
        category=category,
        overnight_exempt=exempt,
        location=location,
        boundary=tuple(coerce_coordinate(point, "Parking lot polygon") for point in boundary),
    )
