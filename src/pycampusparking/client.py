"""Client facade over the time-aware campus rules."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from datetime import datetime, tzinfo

from . import clock
from .const import DEFAULT_TIMEZONE
from .data.loader import load_route_schedules
from .exceptions import ConfigError
from .lots import filter_lots, lot_distances, sort_by_distance, sort_by_status
from .models import (
    DEFAULT_BOUNDARIES,
    LotStatus,
    NextTransition,
    ParkingLot,
    PeriodBoundaries,
    RouteSchedule,
    RouteSummary,
    StatusColor,
    TimeDescriptor,
    UserLocation,
)
from .periods import next_transition, period_label
from .schedule import summarize_route
from .status import evaluate_lots

_LOGGER = logging.getLogger(__name__)


class Client:
    """Facade binding boundaries, timezone and schedules for repeated evaluation."""

    def __init__(
        self,
        *,
        boundaries: PeriodBoundaries | None = None,
        timezone: str | tzinfo = DEFAULT_TIMEZONE,
        schedules: Sequence[RouteSchedule] | None = None,
    ) -> None:
        if boundaries is not None and not isinstance(boundaries, PeriodBoundaries):
            raise ConfigError("boundaries must be a PeriodBoundaries value.")
        self._boundaries = boundaries or DEFAULT_BOUNDARIES
        self._tz = clock.get_timezone(timezone)
        self._schedules = tuple(schedules) if schedules is not None else None

    @property
    def boundaries(self) -> PeriodBoundaries:
        return self._boundaries

    @property
    def schedules(self) -> list[RouteSchedule]:
        if self._schedules is None:
            return load_route_schedules()
        return list(self._schedules)

    def describe(self, instant: datetime | None = None) -> TimeDescriptor:
        if instant is None:
            return clock.now(self._tz)
        return clock.resolve(instant, self._tz)

    def lot_statuses(
        self,
        lots: Iterable[ParkingLot],
        instant: datetime | None = None,
    ) -> dict[str, LotStatus]:
        descriptor = self.describe(instant)
        statuses = evaluate_lots(lots, descriptor, self._boundaries)
        _LOGGER.debug("Evaluated %d lots at %s", len(statuses), descriptor.display)
        return statuses

    def next_transition(self, instant: datetime | None = None) -> NextTransition:
        return next_transition(self.describe(instant), self._boundaries)

    def period_label(self, instant: datetime | None = None) -> str:
        descriptor = self.describe(instant)
        return period_label(descriptor.minutes_since_midnight, descriptor.weekend, self._boundaries)

    def route_summaries(self, instant: datetime | None = None) -> list[RouteSummary]:
        descriptor = self.describe(instant)
        return [summarize_route(route, descriptor) for route in self.schedules]

    def list_lots(
        self,
        lots: Sequence[ParkingLot],
        instant: datetime | None = None,
        *,
        location: UserLocation | None = None,
        search: str = "",
        colors: Iterable[StatusColor] = (),
        categories: Iterable[str] = (),
        near_me: bool = False,
    ) -> list[tuple[ParkingLot, LotStatus, float | None]]:
        """Filter and order lots the way the lot list shows them.

        Near-me ordering needs a resolved location; otherwise lots are ordered
        by status color.
        """
        statuses = self.lot_statuses(lots, instant)
        distances = lot_distances(lots, location) if location is not None else {}
        selected = filter_lots(
            lots,
            statuses,
            search=search,
            colors=frozenset(colors),
            categories=frozenset(categories),
            near_me=near_me,
        )
        if near_me and distances:
            ordered = sort_by_distance(selected, distances)
        else:
            ordered = sort_by_status(selected, statuses)
        return [(lot, statuses[lot.id], distances.get(lot.id)) for lot in ordered]
