"""Parking period classification and upcoming transitions."""

from __future__ import annotations

from .models import DEFAULT_BOUNDARIES, NextTransition, Period, PeriodBoundaries, TimeDescriptor
from .util import format_time_of_day, minutes_until, require_minutes

OVERNIGHT_LABEL = "Overnight restriction"
BUSINESS_LABEL = "Business hours start"
WEEKEND_BUSINESS_LABEL = "All lots open"
OPEN_LABEL = "Open hours start"


def classify(minutes: int, boundaries: PeriodBoundaries = DEFAULT_BOUNDARIES) -> Period:
    """Return the period containing ``minutes``.

    Open hours wrap across midnight and cover everything outside the
    overnight and business windows.
    """
    require_minutes(minutes)
    if boundaries.overnight_start <= minutes < boundaries.business_start:
        return Period.OVERNIGHT
    if boundaries.business_start <= minutes < boundaries.open_start:
        return Period.BUSINESS
    return Period.OPEN


def next_transition(
    descriptor: TimeDescriptor,
    boundaries: PeriodBoundaries = DEFAULT_BOUNDARIES,
) -> NextTransition:
    """Return the nearest upcoming period boundary and the minutes until it.

    Weekends have no open hours start, so weekend daytime counts down to the
    overnight restriction.
    """
    current = descriptor.minutes_since_midnight
    if descriptor.weekend:
        candidates = [
            (boundaries.overnight_start, OVERNIGHT_LABEL),
            (boundaries.business_start, WEEKEND_BUSINESS_LABEL),
        ]
    else:
        candidates = [
            (boundaries.overnight_start, OVERNIGHT_LABEL),
            (boundaries.business_start, BUSINESS_LABEL),
            (boundaries.open_start, OPEN_LABEL),
        ]
    return min(
        (
            NextTransition(label=label, minutes_until=minutes_until(current, boundary))
            for boundary, label in candidates
        ),
        key=lambda transition: transition.minutes_until,
    )


def period_label(
    minutes: int,
    weekend: bool,
    boundaries: PeriodBoundaries = DEFAULT_BOUNDARIES,
) -> str:
    period = classify(minutes, boundaries)
    overnight = format_time_of_day(boundaries.overnight_start)
    business = format_time_of_day(boundaries.business_start)
    open_start = format_time_of_day(boundaries.open_start)
    if period is Period.OVERNIGHT:
        return f"Overnight ({overnight}-{business})"
    if weekend:
        return "Weekend, all lots open"
    if period is Period.BUSINESS:
        return f"Business hours ({business}-{open_start})"
    return f"Open hours ({open_start}-{overnight})"
