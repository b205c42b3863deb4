"""Shuttle timetable resolution."""

from __future__ import annotations

from .const import DEPARTURE_GRACE_MINUTES
from .models import DepartureState, RouteSchedule, RouteSummary, SubSchedule, TimeDescriptor
from .util import format_time_of_day, parse_time_of_day

__all__ = [
    "departure_states",
    "format_time_of_day",
    "is_active",
    "next_departure",
    "parse_time_of_day",
    "route_next_departure",
    "route_running",
    "summarize_route",
]


def _applies_today(schedule: SubSchedule, descriptor: TimeDescriptor) -> bool:
    return descriptor.day_of_week in schedule.days_of_week


def next_departure(schedule: SubSchedule, descriptor: TimeDescriptor) -> str | None:
    """Return the first departure strictly after the current minute.

    Overnight wraparound is not considered here; ``is_active`` covers it.
    """
    current = descriptor.minutes_since_midnight
    for departure, minute in zip(schedule.departures, schedule.departure_minutes, strict=True):
        if minute > current:
            return departure
    return None


def is_active(schedule: SubSchedule, descriptor: TimeDescriptor) -> bool:
    """Check whether a sub-schedule is operating at the descriptor's time.

    A schedule operates on its listed days between the first departure and
    the last departure's arrival at the final stop. Daytime schedules open a
    few minutes early; schedules whose last departure falls after midnight
    run from the first departure through to the early-morning tail.
    """
    if not _applies_today(schedule, descriptor):
        return False
    if not schedule.departure_minutes:
        return False
    first = schedule.departure_minutes[0]
    last = schedule.departure_minutes[-1]
    tail = schedule.tail_offset
    current = descriptor.minutes_since_midnight
    if last < first:
        return current >= first or current <= last + tail
    return first - DEPARTURE_GRACE_MINUTES <= current <= last + tail


def route_running(route: RouteSchedule, descriptor: TimeDescriptor) -> bool:
    return any(is_active(schedule, descriptor) for schedule in route.sub_schedules)


def route_next_departure(route: RouteSchedule, descriptor: TimeDescriptor) -> str | None:
    """Earliest next departure across the route's sub-schedules that run today."""
    best: str | None = None
    best_minute: int | None = None
    for schedule in route.sub_schedules:
        if not _applies_today(schedule, descriptor):
            continue
        departure = next_departure(schedule, descriptor)
        if departure is None:
            continue
        minute = parse_time_of_day(departure)
        if best_minute is None or minute < best_minute:
            best = departure
            best_minute = minute
    return best


def departure_states(schedule: SubSchedule, descriptor: TimeDescriptor) -> list[DepartureState]:
    current = descriptor.minutes_since_midnight
    today = _applies_today(schedule, descriptor)
    tail = schedule.tail_offset
    states: list[DepartureState] = []
    previous: int | None = None
    for departure, minute in zip(schedule.departures, schedule.departure_minutes, strict=True):
        past = today and minute + tail < current
        upcoming = today and not past and minute > current
        states.append(
            DepartureState(
                departure=departure,
                minute=minute,
                past=past,
                upcoming=upcoming,
                next=upcoming and (previous is None or previous <= current),
            )
        )
        previous = minute
    return states


def summarize_route(route: RouteSchedule, descriptor: TimeDescriptor) -> RouteSummary:
    departure = route_next_departure(route, descriptor)
    minutes_until = None
    if departure is not None:
        minutes_until = parse_time_of_day(departure) - descriptor.minutes_since_midnight
    return RouteSummary(
        name=route.name,
        color=route.color,
        running=route_running(route, descriptor),
        next_departure=departure,
        minutes_until=minutes_until,
        active_labels=tuple(
            schedule.label
            for schedule in route.sub_schedules
            if is_active(schedule, descriptor)
        ),
    )
