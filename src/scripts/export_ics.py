#!/usr/bin/env python3
"""
Export a single event as an .ics file.

Dates are Pacific wall-clock times. A bare date (YYYY-MM-DD) makes an
all-day event running 00:00 on --start through 23:59 on --end.

Usage:
    uv run python src/scripts/export_ics.py --title "Trip" --start 2026-02-12 --end 2026-02-16

Example:
    uv run python src/scripts/export_ics.py --title "Trail Run" --start "2026-03-09 06:30" --end "2026-03-09 12:00" --location "Tilden Park"
"""

import argparse
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.config import OUTPUT_DIR
from core.errors import CalendarError
from services.calendar import normalize_event
from services.deeplink import encode_deep_link
from services.ics import encode_interchange_file, ics_filename


def export_event(args: argparse.Namespace) -> Path:
    """Resolve the event from CLI arguments and write the .ics file."""
    event = normalize_event(args.title, args.start, args.end, args.location, args.description)

    output_path = args.output or OUTPUT_DIR / "calendar" / ics_filename(event.title)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    # newline="" keeps the CRLF separators intact
    with open(output_path, "w", encoding="utf-8", newline="") as f:
        f.write(encode_interchange_file(event))

    print(f"Start: {event.start.isoformat()}")
    print(f"End:   {event.end.isoformat()}")
    print(f"Google Calendar: {encode_deep_link(event)}")
    return output_path


def main():
    parser = argparse.ArgumentParser(
        description="Export a Pacific-time event as an .ics calendar file"
    )
    parser.add_argument("--title", required=True, help="Event title")
    parser.add_argument(
        "--start", required=True, help="Start date (YYYY-MM-DD) or date-time (YYYY-MM-DDTHH:mm[:ss])"
    )
    parser.add_argument("--end", default=None, help="End date or date-time (defaults to start)")
    parser.add_argument("--location", default="", help="Event location")
    parser.add_argument("--description", default="", help="Event description")
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Output file path (default: output/calendar/<title>.ics)",
    )

    args = parser.parse_args()

    try:
        output_path = export_event(args)
        print(f"\nCalendar file written: {output_path}")
    except CalendarError as e:
        print(f"\nError: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
