"""
Server-side rendering of "Add to Calendar" buttons.

Finds every element with the 'calendar-widget' class, e.g.

    <div class="calendar-widget"
         data-title="Event Name"
         data-start="2026-02-12T06:30:00"
         data-end="2026-02-16T12:00:00"
         data-location="Location Name"
         data-description="Description">
    </div>

and appends a Google Calendar link plus an .ics download link. Times are
always interpreted as Pacific (PST/PDT).
"""

import logging
from urllib.parse import urlencode

from bs4 import BeautifulSoup, Tag

from core.config import BUTTONS_CLASS, ICS_ENDPOINT, WIDGET_CLASS
from core.errors import InvalidDateFormat, MissingRequiredAttribute
from core.validation import extract_widget_attributes
from models.events import ResolvedEvent
from services.calendar import event_from_attributes
from services.deeplink import encode_deep_link
from services.ics import ics_filename

logger = logging.getLogger(__name__)

GOOGLE_ICON_PATH = (
    "M19 4h-1V2h-2v2H8V2H6v2H5c-1.11 0-1.99.9-1.99 2L3 20c0 1.1.89 2 2 2h14c1.1 "
    "0 2-.9 2-2V6c0-1.1-.9-2-2-2zm0 16H5V10h14v10zm0-12H5V6h14v2zm-7 5h5v5h-5v-5z"
)
ICS_ICON_PATH = (
    "M17 12h-5v5h5v-5zM16 1v2H8V1H6v2H5c-1.11 0-1.99.9-1.99 2L3 19c0 1.1.89 2 2 "
    "2h14c1.1 0 2-.9 2-2V5c0-1.1-.9-2-2-2h-1V1h-2zm3 18H5V8h14v11z"
)


def _append_label(soup: BeautifulSoup, button: Tag, icon_path: str, fill: str, label: str):
    """Icon plus the two-line 'Add to / <label>' text."""
    svg = soup.new_tag("svg", attrs={"width": "24", "height": "24", "viewBox": "0 0 24 24", "fill": fill})
    svg.append(soup.new_tag("path", attrs={"d": icon_path}))
    button.append(svg)

    outer = soup.new_tag("span")
    small = soup.new_tag("span", attrs={"class": ["btn-label-small"]})
    small.string = "Add to"
    large = soup.new_tag("span", attrs={"class": ["btn-label-large"]})
    large.string = label
    outer.append(small)
    outer.append(large)
    button.append(outer)


def create_google_button(soup: BeautifulSoup, event: ResolvedEvent) -> Tag:
    btn = soup.new_tag(
        "a",
        attrs={
            "href": encode_deep_link(event),
            "target": "_blank",
            "rel": ["noopener", "noreferrer"],
            "class": ["btn", "btn-google"],
        },
    )
    _append_label(soup, btn, GOOGLE_ICON_PATH, "white", "Google Calendar")
    return btn


def create_ics_button(
    soup: BeautifulSoup, event: ResolvedEvent, attrs: dict[str, str], ics_endpoint: str
) -> Tag:
    # The file itself is built on click by the download endpoint
    href = f"{ics_endpoint}?{urlencode(attrs)}"
    btn = soup.new_tag(
        "a",
        attrs={
            "href": href,
            "download": ics_filename(event.title),
            "class": ["btn", "btn-ics"],
        },
    )
    _append_label(soup, btn, ICS_ICON_PATH, "currentColor", "Calendar (.ics)")
    return btn


def render_widget(widget: Tag, soup: BeautifulSoup, ics_endpoint: str = ICS_ENDPOINT) -> bool:
    """
    Append calendar buttons to a single widget.

    Returns True if buttons were added, False if the widget was already
    rendered. Normalization errors propagate to the caller.
    """
    if widget.select_one(f".{BUTTONS_CLASS}") is not None:
        return False

    attrs = extract_widget_attributes(widget.attrs, prefix="data-")
    event = event_from_attributes(attrs)

    container = soup.new_tag("div", attrs={"class": [BUTTONS_CLASS]})
    container.append(create_google_button(soup, event))
    container.append(create_ics_button(soup, event, attrs, ics_endpoint))
    widget.append(container)
    return True


def render_soup(soup: BeautifulSoup, ics_endpoint: str = ICS_ENDPOINT) -> int:
    """
    Render every calendar widget in a parsed document.

    Each widget is processed independently; a bad widget is logged and left
    without buttons, the rest still render.

    Returns:
        Number of widgets that received buttons
    """
    rendered = 0
    for widget in soup.select(f".{WIDGET_CLASS}"):
        try:
            if render_widget(widget, soup, ics_endpoint):
                rendered += 1
        except MissingRequiredAttribute as e:
            # Not ready yet (e.g. filled in later by another script)
            logger.debug("Skipping calendar widget: %s", e)
        except InvalidDateFormat as e:
            logger.error("Error parsing dates for calendar widget: %s", e)
    return rendered


def render_calendar_widgets(html: str, ics_endpoint: str = ICS_ENDPOINT) -> str:
    """Render all calendar widgets in an HTML document and return the new HTML."""
    soup = BeautifulSoup(html, "html.parser")
    count = render_soup(soup, ics_endpoint)
    logger.info("Rendered %d calendar widget(s)", count)
    return str(soup)
