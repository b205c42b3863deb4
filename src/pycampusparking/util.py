"""Shared utilities for validation and normalization."""

from __future__ import annotations

import math
import re
from typing import Any

from .const import MINUTES_PER_DAY
from .exceptions import ValidationError

_TIME_OF_DAY_RE = re.compile(r"^\s*(\d{1,2}):(\d{2})\s*([AaPp][Mm])\s*$")

Coordinate = tuple[float, float]


def require_minutes(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError("Minute of day must be an integer.")
    if not 0 <= value < MINUTES_PER_DAY:
        raise ValidationError(f"Minute of day {value} is outside [0, {MINUTES_PER_DAY}).")
    return value


def require_day_of_week(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError("Day of week must be an integer.")
    if not 0 <= value <= 6:
        raise ValidationError(f"Day of week {value} is outside [0, 6].")
    return value


def is_weekend(day_of_week: int) -> bool:
    return require_day_of_week(day_of_week) in (0, 6)


def minutes_until(current: int, target: int) -> int:
    """Cyclic distance in minutes from ``current`` forward to ``target``.

    A target equal to the current minute is a full day away.
    """
    if target > current:
        return target - current
    return target + MINUTES_PER_DAY - current


def parse_time_of_day(value: str) -> int:
    """Parse a 12-hour ``H:MM AM`` string into a minute of day."""
    if not isinstance(value, str):
        raise ValidationError("Time of day must be a string.")
    match = _TIME_OF_DAY_RE.match(value)
    if match is None:
        raise ValidationError(f"Time of day {value!r} is not in H:MM AM/PM format.")
    hour = int(match.group(1))
    minute = int(match.group(2))
    meridiem = match.group(3).upper()
    if not 1 <= hour <= 12:
        raise ValidationError(f"Time of day {value!r} has an invalid hour.")
    if minute > 59:
        raise ValidationError(f"Time of day {value!r} has an invalid minute.")
    if meridiem == "PM" and hour != 12:
        hour += 12
    elif meridiem == "AM" and hour == 12:
        hour = 0
    return hour * 60 + minute


def format_time_of_day(minutes: int) -> str:
    hour, minute = divmod(require_minutes(minutes), 60)
    meridiem = "PM" if hour >= 12 else "AM"
    return f"{hour % 12 or 12}:{minute:02d} {meridiem}"


def format_countdown(minutes: int) -> str:
    if minutes < 0:
        raise ValidationError("Countdown cannot be negative.")
    hours, rest = divmod(minutes, 60)
    if hours == 0:
        return f"{rest}m"
    return f"{hours}h {rest}m"


def coerce_coordinate(value: Any, field: str = "coordinate") -> Coordinate:
    if not isinstance(value, (tuple, list)) or len(value) != 2:
        raise ValidationError(f"{field} must be a (lat, lng) pair.")
    lat = coerce_float(value[0], f"{field} latitude")
    lng = coerce_float(value[1], f"{field} longitude")
    return lat, lng


def coerce_float(value: Any, field: str) -> float:
    if value is None or isinstance(value, bool):
        raise ValidationError(f"{field} is required.")
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        stripped = value.strip()
        if not stripped:
            raise ValidationError(f"{field} is required.")
        try:
            number = float(stripped)
        except ValueError as exc:
            raise ValidationError(f"{field} is not a number.") from exc
    else:
        raise ValidationError(f"{field} is not a number.")
    if not math.isfinite(number):
        raise ValidationError(f"{field} must be finite.")
    return number
