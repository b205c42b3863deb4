"""Resolve wall-clock instants into campus time descriptors."""

from __future__ import annotations

import logging
from datetime import UTC, datetime, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .const import DEFAULT_TIMEZONE
from .exceptions import ConfigError, ValidationError
from .models import TimeDescriptor
from .util import format_time_of_day

_LOGGER = logging.getLogger(__name__)


def get_timezone(key: str | tzinfo = DEFAULT_TIMEZONE) -> tzinfo:
    if isinstance(key, tzinfo):
        return key
    if not isinstance(key, str) or not key:
        raise ConfigError("Timezone must be a non-empty IANA key.")
    try:
        return ZoneInfo(key)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ConfigError(f"Timezone {key!r} is not available.") from exc


def resolve(instant: datetime, tz: str | tzinfo = DEFAULT_TIMEZONE) -> TimeDescriptor:
    """Convert an aware instant into a descriptor in the campus timezone.

    Weekdays are numbered from Sunday (0) to Saturday (6). Daylight saving
    transitions are left to ``zoneinfo``.
    """
    if not isinstance(instant, datetime):
        raise ValidationError("Instant must be a datetime.")
    if instant.tzinfo is None or instant.utcoffset() is None:
        raise ValidationError("Instant must include timezone information.")
    local = instant.astimezone(get_timezone(tz))
    minutes = local.hour * 60 + local.minute
    # isoweekday: Monday=1 .. Sunday=7
    day_of_week = local.isoweekday() % 7
    descriptor = TimeDescriptor(
        minutes_since_midnight=minutes,
        day_of_week=day_of_week,
        display=format_time_of_day(minutes),
    )
    _LOGGER.debug("Resolved %s to %s", instant.isoformat(), descriptor)
    return descriptor


def now(tz: str | tzinfo = DEFAULT_TIMEZONE) -> TimeDescriptor:
    return resolve(datetime.now(UTC), tz)
