"""pyCampusParking package."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from .client import Client
from .exceptions import ConfigError, DataError, PyCampusParkingError, ValidationError
from .models import (
    DEFAULT_BOUNDARIES,
    LocationState,
    LotCategory,
    LotStatus,
    NextTransition,
    ParkingLot,
    Period,
    PeriodBoundaries,
    RouteSchedule,
    RouteSummary,
    ScheduleStop,
    StatusColor,
    StatusLabel,
    SubSchedule,
    TimeDescriptor,
    UserLocation,
)

try:
    __version__ = version("pycampusparking")
except PackageNotFoundError:  # pragma: no cover - not installed
    __version__ = "0.0.0"

__all__ = [
    "DEFAULT_BOUNDARIES",
    "Client",
    "ConfigError",
    "DataError",
    "LocationState",
    "LotCategory",
    "LotStatus",
    "NextTransition",
    "ParkingLot",
    "Period",
    "PeriodBoundaries",
    "PyCampusParkingError",
    "RouteSchedule",
    "RouteSummary",
    "ScheduleStop",
    "StatusColor",
    "StatusLabel",
    "SubSchedule",
    "TimeDescriptor",
    "UserLocation",
    "ValidationError",
    "__version__",
]
