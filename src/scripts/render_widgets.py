#!/usr/bin/env python3
"""
Render "Add to Calendar" buttons into a static HTML page.

Every element with class 'calendar-widget' gets a Google Calendar link and
an .ics download link. Widgets with bad dates are reported and skipped.

Usage:
    uv run python src/scripts/render_widgets.py site/trips.html -o site/trips.rendered.html
"""

import argparse
import logging
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.config import ICS_ENDPOINT
from services.widgets import render_calendar_widgets


def main():
    parser = argparse.ArgumentParser(
        description="Render calendar widget buttons into an HTML file"
    )
    parser.add_argument("input_file", type=Path, help="HTML file to render")
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Output HTML file (default: overwrite input)",
    )
    parser.add_argument(
        "--ics-endpoint",
        default=ICS_ENDPOINT,
        help=f"URL the .ics buttons link to (default: {ICS_ENDPOINT})",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show skipped widgets")

    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    if not args.input_file.exists():
        print(f"\nError: File not found: {args.input_file}")
        sys.exit(1)

    html = args.input_file.read_text(encoding="utf-8")
    rendered = render_calendar_widgets(html, args.ics_endpoint)

    output_path = args.output or args.input_file
    output_path.write_text(rendered, encoding="utf-8")
    print(f"\nRendered page written: {output_path}")


if __name__ == "__main__":
    main()
