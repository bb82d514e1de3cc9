"""
Calendar interchange (.ics) export for a single resolved event.
"""

import random
import re
from datetime import datetime, timezone

from core.config import ICS_EXTENSION, ICS_PRODID, ICS_UID_DOMAIN
from core.timezone import format_compact_utc
from models.events import ResolvedEvent

CRLF = "\r\n"

_rng = random.Random()


def escape_newlines(text: str) -> str:
    """Replace line breaks with the literal two-character '\\n' escape."""
    return re.sub(r"\r\n|\r|\n", r"\\n", text)


def make_uid(now: str, rng: random.Random | None = None) -> str:
    """Event UID: timestamp, random suffix (0-9999), fixed domain."""
    rng = rng or _rng
    return f"{now}-{rng.randrange(10000)}@{ICS_UID_DOMAIN}"


def encode_interchange_file(
    event: ResolvedEvent,
    now: datetime | None = None,
    rng: random.Random | None = None,
) -> str:
    """
    Build a single-event VCALENDAR document (CRLF separated).

    Only the description is escaped, and only for line breaks. Other
    fields are written verbatim.
    """
    stamp = format_compact_utc(now or datetime.now(timezone.utc))

    fields = [
        "BEGIN:VCALENDAR",
        "VERSION:2.0",
        f"PRODID:{ICS_PRODID}",
        "BEGIN:VEVENT",
        f"UID:{make_uid(stamp, rng)}",
        f"DTSTAMP:{stamp}",
        f"DTSTART:{format_compact_utc(event.start)}",
        f"DTEND:{format_compact_utc(event.end)}",
        f"SUMMARY:{event.title}",
        f"DESCRIPTION:{escape_newlines(event.description)}",
        f"LOCATION:{event.location}",
        "STATUS:CONFIRMED",
        "END:VEVENT",
        "END:VCALENDAR",
    ]
    return CRLF.join(fields)


def ics_filename(title: str) -> str:
    """Download filename: every non-alphanumeric character becomes '_'."""
    stem = re.sub(r"[^A-Za-z0-9]", "_", title)
    return f"{stem or 'event'}{ICS_EXTENSION}"
