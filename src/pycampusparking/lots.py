"""Lot list filtering, ordering and proximity."""

from __future__ import annotations

import math
from collections.abc import Collection, Iterable, Mapping

from .geo import point_distance
from .models import LotCategory, LotStatus, ParkingLot, StatusColor, UserLocation

STATUS_ORDER = (StatusColor.GREEN, StatusColor.YELLOW, StatusColor.ORANGE, StatusColor.RED)
OVERNIGHT_EXEMPT_FILTER = "overnight_exempt"
NEAR_ME_COLORS = frozenset({StatusColor.GREEN, StatusColor.YELLOW})


def lot_distances(lots: Iterable[ParkingLot], location: UserLocation) -> dict[str, float]:
    """Distance in km from the user to each lot, empty unless the location is resolved."""
    if not location.available or location.point is None:
        return {}
    return {lot.id: point_distance(location.point, lot.location) for lot in lots}


def _matches_category(lot: ParkingLot, categories: Collection[str]) -> bool:
    if lot.category is LotCategory.STUDENT and LotCategory.STUDENT.value in categories:
        return True
    if lot.category is LotCategory.EMPLOYEE and LotCategory.EMPLOYEE.value in categories:
        return True
    return lot.overnight_exempt and OVERNIGHT_EXEMPT_FILTER in categories


def filter_lots(
    lots: Iterable[ParkingLot],
    statuses: Mapping[str, LotStatus],
    *,
    search: str = "",
    colors: Collection[StatusColor] = (),
    categories: Collection[str] = (),
    near_me: bool = False,
) -> list[ParkingLot]:
    """Apply the list filters; lots without a status are left out."""
    needle = search.strip().lower()
    category_keys = {str(getattr(value, "value", value)) for value in categories}
    result: list[ParkingLot] = []
    for lot in lots:
        status = statuses.get(lot.id)
        if status is None:
            continue
        if needle and needle not in lot.name.lower():
            continue
        if colors and status.color not in colors:
            continue
        if category_keys and not _matches_category(lot, category_keys):
            continue
        if near_me and status.color not in NEAR_ME_COLORS:
            continue
        result.append(lot)
    return result


def sort_by_status(lots: Iterable[ParkingLot], statuses: Mapping[str, LotStatus]) -> list[ParkingLot]:
    return sorted(lots, key=lambda lot: STATUS_ORDER.index(statuses[lot.id].color))


def sort_by_distance(lots: Iterable[ParkingLot], distances: Mapping[str, float]) -> list[ParkingLot]:
    return sorted(lots, key=lambda lot: distances.get(lot.id, math.inf))
