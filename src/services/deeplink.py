"""
Google Calendar "add event" deep links.
"""

from urllib.parse import urlencode

from core.config import GOOGLE_CALENDAR_URL
from core.timezone import format_compact_utc
from models.events import ResolvedEvent


def format_dates(event: ResolvedEvent) -> str:
    """The 'dates' parameter: <UTCSTART>/<UTCEND> in compact form."""
    return f"{format_compact_utc(event.start)}/{format_compact_utc(event.end)}"


def encode_deep_link(event: ResolvedEvent) -> str:
    """Build the event-creation URL. Every value is percent-encoded."""
    params = [
        ("action", "TEMPLATE"),
        ("text", event.title),
        ("dates", format_dates(event)),
        ("details", event.description),
        ("location", event.location),
    ]
    return f"{GOOGLE_CALENDAR_URL}?{urlencode(params)}"
