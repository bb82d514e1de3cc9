"""
Event normalization: raw widget attributes to a ResolvedEvent.
"""

from collections.abc import Mapping

from core.config import ALL_DAY_END_TIME, ALL_DAY_START_TIME
from core.errors import InvalidEventRange
from core.timezone import PACIFIC, OffsetRule, resolve_instant
from core.validation import clean_attribute, extract_widget_attributes, require_attributes
from models.events import ResolvedEvent


def is_all_day(raw_start: str) -> bool:
    """A bare calendar date (YYYY-MM-DD) with no time component."""
    raw_start = raw_start.strip()
    return len(raw_start) == 10 and "T" not in raw_start and " " not in raw_start


def normalize_event(
    title: str | None,
    raw_start: str | None,
    raw_end: str | None = None,
    location: str | None = "",
    description: str | None = "",
    rule: OffsetRule = PACIFIC,
) -> ResolvedEvent:
    """
    Resolve raw widget input into an event with explicit UTC bounds.

    All-day input (bare dates) becomes 00:00 on the start date through 23:59
    on the end date, Pacific time. The end date is inclusive. Timed input is
    resolved as-is. A missing end defaults to the start.

    Raises:
        MissingRequiredAttribute: title or start is missing (widget not ready)
        InvalidDateFormat: either bound cannot be parsed
        InvalidEventRange: the end resolves before the start
    """
    title, raw_start = require_attributes(title, raw_start)
    raw_end = clean_attribute(raw_end) or raw_start

    if is_all_day(raw_start):
        start_str = raw_start + ALL_DAY_START_TIME
        end_str = raw_end + ALL_DAY_END_TIME
    else:
        start_str = raw_start
        end_str = raw_end

    start = resolve_instant(start_str, rule)
    end = resolve_instant(end_str, rule)
    if end < start:
        raise InvalidEventRange(raw_start, raw_end)

    return ResolvedEvent(
        title=title,
        start=start,
        end=end,
        location=location or "",
        description=description or "",
    )


def event_from_attributes(attrs: Mapping[str, str], rule: OffsetRule = PACIFIC) -> ResolvedEvent:
    """Normalize an event from bare-named widget attributes ('title', 'start', ...)."""
    fields = extract_widget_attributes(attrs)
    return normalize_event(
        fields.get("title"),
        fields.get("start"),
        fields.get("end"),
        fields.get("location", ""),
        fields.get("description", ""),
        rule=rule,
    )
