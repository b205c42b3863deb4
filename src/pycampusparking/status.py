"""Lot status decisions."""

from __future__ import annotations

from collections.abc import Iterable

from .exceptions import ValidationError
from .models import (
    DEFAULT_BOUNDARIES,
    LotCategory,
    LotStatus,
    ParkingLot,
    Period,
    PeriodBoundaries,
    StatusColor,
    StatusLabel,
    TimeDescriptor,
)
from .periods import classify
from .util import format_time_of_day, minutes_until


def _available(reason: str) -> LotStatus:
    return LotStatus(color=StatusColor.GREEN, label=StatusLabel.AVAILABLE, reason=reason)


def _available_soon(reason: str) -> LotStatus:
    return LotStatus(color=StatusColor.YELLOW, label=StatusLabel.AVAILABLE_SOON, reason=reason)


def _unavailable_soon(reason: str) -> LotStatus:
    return LotStatus(color=StatusColor.ORANGE, label=StatusLabel.UNAVAILABLE_SOON, reason=reason)


def _not_available(reason: str) -> LotStatus:
    return LotStatus(color=StatusColor.RED, label=StatusLabel.NOT_AVAILABLE, reason=reason)


def decide_status(
    category: LotCategory,
    overnight_exempt: bool,
    minutes: int,
    weekend: bool,
    boundaries: PeriodBoundaries = DEFAULT_BOUNDARIES,
) -> LotStatus:
    """Decide whether parking is allowed in a lot at ``minutes``.

    Restricted lots are never available. Outside that, the overnight window
    closes every non-exempt lot, business hours close employee lots on
    weekdays, and the last ``transition_window`` minutes before a boundary
    are reported as "soon" (yellow or orange) instead of a steady state.
    """
    try:
        category = LotCategory(category)
    except ValueError as exc:
        raise ValidationError(f"Unknown lot category {category!r}.") from exc
    period = classify(minutes, boundaries)
    window = boundaries.transition_window
    overnight_at = format_time_of_day(boundaries.overnight_start)
    business_at = format_time_of_day(boundaries.business_start)
    open_at = format_time_of_day(boundaries.open_start)

    if category is LotCategory.RESTRICTED:
        return _not_available("Restricted, accessible parking only")

    if period is Period.OVERNIGHT:
        until_business = minutes_until(minutes, boundaries.business_start)
        if overnight_exempt:
            if (
                category is LotCategory.EMPLOYEE
                and not weekend
                and until_business <= window
            ):
                return _unavailable_soon(
                    f"Employee lot, closes at {business_at} ({until_business} min)"
                )
            return _available("Overnight exempt, parking allowed 24/7")
        if until_business <= window:
            if category is LotCategory.STUDENT or weekend:
                return _available_soon(f"Available at {business_at} ({until_business} min)")
            return _not_available(f"Employee lot, not available until {open_at}")
        return _not_available(f"Overnight restriction ({overnight_at}-{business_at}), no parking")

    if weekend:
        until_overnight = minutes_until(minutes, boundaries.overnight_start)
        if (
            until_overnight <= window
            and not overnight_exempt
            and minutes >= boundaries.business_start
        ):
            return _unavailable_soon(
                f"Overnight restriction at {overnight_at} ({until_overnight} min)"
            )
        return _available("Weekend, all lots open")

    if period is Period.BUSINESS:
        if category is LotCategory.STUDENT:
            return _available("Student lot, available during business hours")
        until_open = minutes_until(minutes, boundaries.open_start)
        if until_open <= window:
            return _available_soon(f"Open hours start at {open_at} ({until_open} min)")
        return _not_available(f"Employee lot, available after {open_at}")

    if category is LotCategory.STUDENT:
        return _available("Student lot, always available")
    until_overnight = minutes_until(minutes, boundaries.overnight_start)
    if not overnight_exempt and until_overnight <= window:
        return _unavailable_soon(f"Overnight restriction at {overnight_at} ({until_overnight} min)")
    return _available("Open hours, all lots available")


def lot_status(
    lot: ParkingLot,
    descriptor: TimeDescriptor,
    boundaries: PeriodBoundaries = DEFAULT_BOUNDARIES,
) -> LotStatus:
    return decide_status(
        lot.category,
        lot.overnight_exempt,
        descriptor.minutes_since_midnight,
        descriptor.weekend,
        boundaries,
    )


def evaluate_lots(
    lots: Iterable[ParkingLot],
    descriptor: TimeDescriptor,
    boundaries: PeriodBoundaries = DEFAULT_BOUNDARIES,
) -> dict[str, LotStatus]:
    """Evaluate every lot for one tick, keyed by lot id."""
    return {lot.id: lot_status(lot, descriptor, boundaries) for lot in lots}
