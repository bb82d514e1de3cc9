"""
Pacific wall-clock resolution.

Converts civil date/time strings (no timezone designator) into absolute UTC
instants using two fixed offsets and the US daylight saving rule in effect
since 2007:

    DST starts: 2nd Sunday in March, 02:00 local
    DST ends:   1st Sunday in November, 02:00 local

Known limitation: the rule is evaluated on naive local components, so the
skipped hour on spring-forward day (02:00-03:00) is not rejected and the
repeated hour on fall-back day (01:00-02:00) always resolves as daylight time.
Avoid scheduling events inside those windows.
"""

import re
from datetime import date, datetime, time, timedelta, timezone
from functools import lru_cache
from typing import Protocol

from core.config import (
    DAYLIGHT_OFFSET,
    DST_END_MONTH,
    DST_END_SUNDAY,
    DST_START_MONTH,
    DST_START_SUNDAY,
    DST_TRANSITION_HOUR,
    STANDARD_OFFSET,
)
from core.errors import InvalidDateFormat

# YYYY-MM-DD, optionally followed by T or space and HH:mm[:ss]
CIVIL_PATTERN = re.compile(
    r"^(\d{4})-(\d{2})-(\d{2})(?:[T ](\d{2}):(\d{2})(?::(\d{2}))?)?$"
)

COMPACT_UTC_FORMAT = "%Y%m%dT%H%M%SZ"


# =============================================================================
# DST RULE
# =============================================================================


def nth_sunday(year: int, month: int, n: int) -> date:
    """Return the n-th Sunday (1-based) of the given month."""
    first = date(year, month, 1)
    # weekday(): Monday=0 ... Sunday=6
    days_to_sunday = (6 - first.weekday()) % 7
    return first + timedelta(days=days_to_sunday + 7 * (n - 1))


@lru_cache(maxsize=64)
def spring_forward(year: int) -> datetime:
    """Naive local instant when daylight saving starts in the given year."""
    day = nth_sunday(year, DST_START_MONTH, DST_START_SUNDAY)
    return datetime.combine(day, time(DST_TRANSITION_HOUR))


@lru_cache(maxsize=64)
def fall_back(year: int) -> datetime:
    """Naive local instant when daylight saving ends in the given year."""
    day = nth_sunday(year, DST_END_MONTH, DST_END_SUNDAY)
    return datetime.combine(day, time(DST_TRANSITION_HOUR))


def is_daylight_saving(candidate: datetime | date) -> bool:
    """
    Check whether naive local components fall inside the DST window.

    A bare date is evaluated at local midnight. Any tzinfo on a datetime is
    ignored; only the wall-clock components matter.
    """
    if isinstance(candidate, datetime):
        naive = candidate.replace(tzinfo=None)
    else:
        naive = datetime.combine(candidate, time())
    return spring_forward(naive.year) <= naive < fall_back(naive.year)


# =============================================================================
# OFFSET STRATEGY
# =============================================================================


class OffsetRule(Protocol):
    """Anything that can pick a UTC offset for naive local components."""

    def utc_offset(self, naive: datetime) -> timedelta: ...


class PacificOffsetRule:
    """US Pacific time: PST (-08:00) / PDT (-07:00)."""

    standard = STANDARD_OFFSET
    daylight = DAYLIGHT_OFFSET

    def is_daylight_saving(self, naive: datetime) -> bool:
        return is_daylight_saving(naive)

    def utc_offset(self, naive: datetime) -> timedelta:
        return self.daylight if self.is_daylight_saving(naive) else self.standard

    def tzinfo(self, naive: datetime) -> timezone:
        if self.is_daylight_saving(naive):
            return timezone(self.daylight, "PDT")
        return timezone(self.standard, "PST")

    def __repr__(self) -> str:
        return "PacificOffsetRule()"


PACIFIC = PacificOffsetRule()


# =============================================================================
# WALL-CLOCK RESOLUTION
# =============================================================================


def parse_civil(value: str) -> datetime:
    """
    Parse a civil date/time string into a naive datetime.

    Accepts YYYY-MM-DD or YYYY-MM-DD[T| ]HH:mm[:ss]. Seconds default to 00.

    Raises:
        InvalidDateFormat: if the string doesn't match or names an impossible date
    """
    if not isinstance(value, str):
        raise InvalidDateFormat(repr(value), "expected a string")

    match = CIVIL_PATTERN.match(value.strip())
    if not match:
        raise InvalidDateFormat(value, "expected YYYY-MM-DD or YYYY-MM-DDTHH:mm[:ss]")

    year, month, day, hour, minute, second = match.groups()
    try:
        return datetime(
            int(year),
            int(month),
            int(day),
            int(hour or 0),
            int(minute or 0),
            int(second or 0),
        )
    except ValueError as e:
        raise InvalidDateFormat(value, str(e)) from e


def resolve_instant(value: str, rule: OffsetRule = PACIFIC) -> datetime:
    """
    Resolve a civil date/time string to an aware UTC datetime.

    The offset is selected from the naive components, attached as a fixed
    offset, and the result converted to UTC.
    """
    naive = parse_civil(value)
    offset = rule.utc_offset(naive)
    local = naive.replace(tzinfo=timezone(offset))
    return local.astimezone(timezone.utc)


def to_wall_clock(instant: datetime, rule: PacificOffsetRule = PACIFIC) -> datetime:
    """
    Project an absolute instant back to naive local components.

    Inverse of resolve_instant for every wall-clock time outside the
    skipped spring-forward hour.
    """
    utc = instant.astimezone(timezone.utc).replace(tzinfo=None)
    standard = utc + rule.standard
    if not rule.is_daylight_saving(standard):
        return standard
    return utc + rule.daylight


def format_compact_utc(instant: datetime) -> str:
    """Format an aware datetime as YYYYMMDDTHHMMSSZ."""
    if instant.tzinfo is None:
        raise ValueError("Cannot format a naive datetime as UTC")
    return instant.astimezone(timezone.utc).strftime(COMPACT_UTC_FORMAT)
