"""
Tests for server-side calendar widget rendering.
"""

import logging
from urllib.parse import parse_qs, urlsplit

from bs4 import BeautifulSoup

from fixtures.generate_widgets import (
    BROKEN_WIDGETS,
    build_widget_page,
    generate_widget_attributes,
)
from services.widgets import render_calendar_widgets, render_soup, render_widget


def parse(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def test_renders_both_buttons(all_day_attributes):
    html = render_calendar_widgets(build_widget_page([all_day_attributes]))
    widget = parse(html).select_one(".calendar-widget")

    buttons = widget.select(".calendar-buttons")
    assert len(buttons) == 1

    google = buttons[0].select_one("a.btn-google")
    assert google["href"].startswith("https://calendar.google.com/calendar/render?action=TEMPLATE")
    assert "dates=20260212T080000Z%2F20260217T075900Z" in google["href"]
    assert google["target"] == "_blank"
    assert google["rel"] == ["noopener", "noreferrer"]

    ics = buttons[0].select_one("a.btn-ics")
    assert ics["download"] == "Trip.ics"
    assert ics.select_one(".btn-label-large").get_text() == "Calendar (.ics)"


def test_ics_link_carries_raw_attributes(sample_attributes):
    html = render_calendar_widgets(build_widget_page([sample_attributes]))
    href = parse(html).select_one("a.btn-ics")["href"]

    parts = urlsplit(href)
    assert parts.path == "/v1/calendar/event.ics"
    query = {name: values[0] for name, values in parse_qs(parts.query).items()}
    assert query == sample_attributes


def test_custom_ics_endpoint(sample_attributes):
    html = render_calendar_widgets(
        build_widget_page([sample_attributes]), ics_endpoint="https://example.org/ics"
    )
    href = parse(html).select_one("a.btn-ics")["href"]
    assert href.startswith("https://example.org/ics?")


def test_rendering_twice_does_not_duplicate(sample_attributes):
    once = render_calendar_widgets(build_widget_page([sample_attributes]))
    twice = render_calendar_widgets(once)
    assert len(parse(twice).select(".calendar-buttons")) == 1


def test_render_widget_returns_false_when_already_rendered(sample_attributes):
    soup = parse(build_widget_page([sample_attributes]))
    widget = soup.select_one(".calendar-widget")
    assert render_widget(widget, soup) is True
    assert render_widget(widget, soup) is False


def test_bad_widgets_do_not_block_others(all_day_attributes, caplog):
    page = build_widget_page(BROKEN_WIDGETS + [all_day_attributes])

    with caplog.at_level(logging.DEBUG, logger="services.widgets"):
        soup = parse(page)
        assert render_soup(soup) == 1

    widgets = soup.select(".calendar-widget")
    assert [bool(w.select(".calendar-buttons")) for w in widgets] == [False, False, False, True]

    errors = [r for r in caplog.records if r.levelno == logging.ERROR]
    assert len(errors) == 2  # the two bad dates; the missing title is not an error


def test_generated_page(fake):
    widgets = generate_widget_attributes(fake, count=6)
    soup = parse(build_widget_page(widgets + BROKEN_WIDGETS))

    assert render_soup(soup) == len(widgets)
    assert len(soup.select("a.btn-google")) == len(widgets)
    assert len(soup.select("a.btn-ics")) == len(widgets)


def test_page_without_widgets_unchanged():
    html = "<html><body><p>No events</p></body></html>"
    assert render_calendar_widgets(html) == html
