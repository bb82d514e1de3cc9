"""
Tests for the .ics interchange file encoder.
"""

import random
import re

import pytest

from services.calendar import event_from_attributes, normalize_event
from services.ics import encode_interchange_file, escape_newlines, ics_filename


def test_full_document(all_day_attributes, fixed_now, seeded_rng):
    event = event_from_attributes(all_day_attributes)
    content = encode_interchange_file(event, now=fixed_now, rng=seeded_rng)

    expected_rand = random.Random(42).randrange(10000)
    assert content.split("\r\n") == [
        "BEGIN:VCALENDAR",
        "VERSION:2.0",
        "PRODID:-//Overland East Bay//Website//EN",
        "BEGIN:VEVENT",
        f"UID:20260115T183000Z-{expected_rand}@www.overland-eastbay.com",
        "DTSTAMP:20260115T183000Z",
        "DTSTART:20260212T080000Z",
        "DTEND:20260217T075900Z",
        "SUMMARY:Trip",
        "DESCRIPTION:Four nights of camping",
        "LOCATION:Death Valley",
        "STATUS:CONFIRMED",
        "END:VEVENT",
        "END:VCALENDAR",
    ]


def test_crlf_separators_only(sample_attributes, fixed_now):
    content = encode_interchange_file(event_from_attributes(sample_attributes), now=fixed_now)
    assert "\n" not in content.replace("\r\n", "")
    assert "\r" not in content.replace("\r\n", "")
    assert not content.endswith("\r\n")


def test_description_newlines_escaped(sample_attributes, fixed_now):
    content = encode_interchange_file(event_from_attributes(sample_attributes), now=fixed_now)
    lines = content.split("\r\n")
    assert "DESCRIPTION:Meet at the trailhead.\\nBring water." in lines


@pytest.mark.parametrize(
    "text, expected",
    [
        ("one\ntwo", "one\\ntwo"),
        ("one\r\ntwo", "one\\ntwo"),
        ("one\rtwo", "one\\ntwo"),
        ("a\n\nb", "a\\n\\nb"),
        ("no breaks", "no breaks"),
    ],
)
def test_escape_newlines(text, expected):
    assert escape_newlines(text) == expected


def test_faker_descriptions_stay_on_one_line(fake, fixed_now):
    for _ in range(10):
        description = "\n\n".join(fake.paragraphs(nb=3))
        event = normalize_event(fake.sentence(), "2026-05-01T09:00", description=description)
        lines = encode_interchange_file(event, now=fixed_now).split("\r\n")
        assert len(lines) == 14
        assert lines[9].startswith("DESCRIPTION:")


def test_other_fields_written_verbatim(fixed_now):
    event = normalize_event("Rocks, Ruts; Ridges", "2026-05-01T09:00", location="Mojave, CA")
    lines = encode_interchange_file(event, now=fixed_now).split("\r\n")
    assert "SUMMARY:Rocks, Ruts; Ridges" in lines
    assert "LOCATION:Mojave, CA" in lines


def test_uid_and_stamp_default_to_now(sample_attributes):
    lines = encode_interchange_file(event_from_attributes(sample_attributes)).split("\r\n")
    uid = re.fullmatch(r"UID:(\d{8}T\d{6}Z)-(\d{1,4})@www\.overland-eastbay\.com", lines[4])
    stamp = re.fullmatch(r"DTSTAMP:(\d{8}T\d{6}Z)", lines[5])
    assert uid and stamp
    assert uid.group(1) == stamp.group(1)
    assert 0 <= int(uid.group(2)) < 10000


def test_timed_event_times(sample_attributes, fixed_now):
    lines = encode_interchange_file(event_from_attributes(sample_attributes), now=fixed_now).split("\r\n")
    assert "DTSTART:20260704T133000Z" in lines
    assert "DTEND:20260704T190000Z" in lines


@pytest.mark.parametrize(
    "title, expected",
    [
        ("Trip", "Trip.ics"),
        ("Tahoe Trail Run", "Tahoe_Trail_Run.ics"),
        ("Rubicon: Day 1/3!", "Rubicon__Day_1_3_.ics"),
        ("Café Meetup", "Caf__Meetup.ics"),
        ("", "event.ics"),
    ],
)
def test_ics_filename(title, expected):
    assert ics_filename(title) == expected


def test_ics_filename_replaces_every_character():
    name = ics_filename("a b c d e")
    assert name == "a_b_c_d_e.ics"
