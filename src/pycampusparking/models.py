"""Public data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .const import BUSINESS_START, MINUTES_PER_DAY, OPEN_START, OVERNIGHT_START, TRANSITION_WINDOW
from .exceptions import ConfigError, ValidationError
from .util import Coordinate, parse_time_of_day, require_day_of_week, require_minutes


class Period(str, Enum):
    OVERNIGHT = "overnight"
    BUSINESS = "business"
    OPEN = "open"


class LotCategory(str, Enum):
    STUDENT = "student"
    EMPLOYEE = "employee"
    RESTRICTED = "restricted"


class StatusColor(str, Enum):
    GREEN = "green"
    YELLOW = "yellow"
    ORANGE = "orange"
    RED = "red"


class StatusLabel(str, Enum):
    AVAILABLE = "Available"
    AVAILABLE_SOON = "Available soon"
    UNAVAILABLE_SOON = "Unavailable soon"
    NOT_AVAILABLE = "Not available"


class LocationState(str, Enum):
    UNAVAILABLE = "unavailable"
    PENDING = "pending"
    RESOLVED = "resolved"
    DENIED = "denied"


@dataclass(frozen=True, slots=True)
class TimeDescriptor:
    minutes_since_midnight: int
    day_of_week: int
    display: str = ""

    def __post_init__(self) -> None:
        require_minutes(self.minutes_since_midnight)
        require_day_of_week(self.day_of_week)

    @property
    def weekend(self) -> bool:
        return self.day_of_week in (0, 6)


@dataclass(frozen=True, slots=True)
class PeriodBoundaries:
    overnight_start: int = OVERNIGHT_START
    business_start: int = BUSINESS_START
    open_start: int = OPEN_START
    transition_window: int = TRANSITION_WINDOW

    def __post_init__(self) -> None:
        values = (self.overnight_start, self.business_start, self.open_start)
        if any(isinstance(value, bool) or not isinstance(value, int) for value in values):
            raise ConfigError("Period boundaries must be integers.")
        if not 0 <= self.overnight_start < self.business_start < self.open_start < MINUTES_PER_DAY:
            raise ConfigError(
                "Period boundaries must satisfy "
                "0 <= overnight_start < business_start < open_start < 1440."
            )
        if (
            isinstance(self.transition_window, bool)
            or not isinstance(self.transition_window, int)
            or self.transition_window < 0
        ):
            raise ConfigError("transition_window must be a non-negative integer.")


DEFAULT_BOUNDARIES = PeriodBoundaries()


@dataclass(frozen=True, slots=True)
class ParkingLot:
    id: str
    name: str
    category: LotCategory
    overnight_exempt: bool
    location: Coordinate
    boundary: tuple[Coordinate, ...] = ()


@dataclass(frozen=True, slots=True)
class LotStatus:
    color: StatusColor
    label: StatusLabel
    reason: str


@dataclass(frozen=True, slots=True)
class NextTransition:
    label: str
    minutes_until: int


@dataclass(frozen=True, slots=True)
class ScheduleStop:
    name: str
    offset_minutes: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.offset_minutes, bool) or not isinstance(self.offset_minutes, int):
            raise ValidationError(f"Stop {self.name!r} offset must be an integer.")
        if self.offset_minutes < 0:
            raise ValidationError(f"Stop {self.name!r} offset cannot be negative.")


@dataclass(frozen=True, slots=True)
class SubSchedule:
    label: str
    days_of_week: frozenset[int]
    stops: tuple[ScheduleStop, ...]
    departures: tuple[str, ...]
    days: str = ""
    departure_minutes: tuple[int, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        for day in self.days_of_week:
            require_day_of_week(day)
        previous = 0
        for stop in self.stops:
            if stop.offset_minutes < previous:
                raise ValidationError(
                    f"Sub-schedule {self.label!r} stop offsets must be non-decreasing."
                )
            previous = stop.offset_minutes
        try:
            minutes = tuple(parse_time_of_day(value) for value in self.departures)
        except ValidationError as exc:
            raise ValidationError(
                f"Sub-schedule {self.label!r} has an invalid departure: {exc}"
            ) from exc
        object.__setattr__(self, "departure_minutes", minutes)

    @property
    def tail_offset(self) -> int:
        if not self.stops:
            return 0
        return self.stops[-1].offset_minutes

    @property
    def wraps_midnight(self) -> bool:
        return bool(self.departure_minutes) and self.departure_minutes[-1] < self.departure_minutes[0]


@dataclass(frozen=True, slots=True)
class RouteSchedule:
    name: str
    color: str
    sub_schedules: tuple[SubSchedule, ...]
    route_id: int | None = None
    source_url: str | None = None


@dataclass(frozen=True, slots=True)
class DepartureState:
    departure: str
    minute: int
    past: bool
    upcoming: bool
    next: bool


@dataclass(frozen=True, slots=True)
class RouteSummary:
    name: str
    color: str
    running: bool
    next_departure: str | None
    minutes_until: int | None
    active_labels: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class Vehicle:
    id: int
    name: str
    route_id: int
    lat: float
    lng: float
    speed: float = 0.0
    course: float = 0.0
    occupancy: float | None = None
    position_updated: int | None = None

    @property
    def point(self) -> Coordinate:
        return self.lat, self.lng


@dataclass(frozen=True, slots=True)
class Route:
    id: int
    short_name: str
    long_name: str
    color: str
    shape_id: int | None = None


@dataclass(frozen=True, slots=True)
class Stop:
    id: int
    name: str
    lat: float
    lng: float

    @property
    def point(self) -> Coordinate:
        return self.lat, self.lng


@dataclass(frozen=True, slots=True)
class Shape:
    id: int
    points: tuple[Coordinate, ...]


@dataclass(frozen=True, slots=True)
class UserLocation:
    state: LocationState
    point: Coordinate | None = None

    def __post_init__(self) -> None:
        if self.state is LocationState.RESOLVED and self.point is None:
            raise ValidationError("A resolved location requires a point.")
        if self.state is not LocationState.RESOLVED and self.point is not None:
            raise ValidationError("Only a resolved location carries a point.")

    @classmethod
    def resolved(cls, lat: float, lng: float) -> UserLocation:
        return cls(LocationState.RESOLVED, (lat, lng))

    @property
    def available(self) -> bool:
        return self.state is LocationState.RESOLVED


UNAVAILABLE_LOCATION = UserLocation(LocationState.UNAVAILABLE)
