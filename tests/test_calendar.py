#!/usr/bin/env python
import logging
from datetime import datetime
from datetime import timezone

import pytest

from icalwriter import Calendar
from icalwriter import Event
from icalwriter import FreeBusy
from icalwriter.lib.error import InvalidArgument
from icalwriter.lib.encoding import unfold_lines

utc = timezone.utc


def fixed_freebusy(uid="fb-1"):
    return FreeBusy(uid=uid, dtstamp=datetime(2024, 1, 1, tzinfo=utc))


class TestCalendar:
    def test_empty_prodid(self):
        with pytest.raises(InvalidArgument):
            Calendar("")
        with pytest.raises(InvalidArgument):
            Calendar(None)

    def test_invalid_argument_is_value_error(self):
        with pytest.raises(ValueError):
            Calendar("")

    def test_minimal(self):
        text = Calendar("-//test//EN").render()
        lines = unfold_lines(text)
        assert lines[0] == "BEGIN:VCALENDAR"
        assert "VERSION:2.0" in lines
        assert "PRODID:-//test//EN" in lines
        assert lines[-1] == "END:VCALENDAR"
        assert text.endswith("END:VCALENDAR\r\n")

    def test_default_output(self):
        assert Calendar("-//test//EN").render() == (
            "BEGIN:VCALENDAR\r\n"
            "VERSION:2.0\r\n"
            "PRODID:-//test//EN\r\n"
            "METHOD:PUBLISH\r\n"
            "END:VCALENDAR\r\n"
        )

    def test_property_order(self):
        cal = Calendar(
            "-//test//EN",
            method="REQUEST",
            name="Team, room 3",
            errormsg="partial data",
        )
        cal.set_success()
        assert unfold_lines(cal.render()) == [
            "BEGIN:VCALENDAR",
            "VERSION:2.0",
            "PRODID:-//test//EN",
            "METHOD:REQUEST",
            "X-ERRORMSG:partial data",
            "X-SUCCESS:TRUE",
            "X-WR-CALNAME:Team\\, room 3",
            "END:VCALENDAR",
        ]

    def test_failure_and_no_method(self):
        cal = Calendar("-//test//EN", method=None)
        cal.set_failure()
        lines = unfold_lines(cal.render())
        assert "X-SUCCESS:FALSE" in lines
        assert not [x for x in lines if x.startswith("METHOD")]

    def test_timezone(self):
        cal = Calendar("-//test//EN", timezone="Europe/Berlin")
        cal.add_event(Event(uid="ev-1", dtstamp=datetime(2024, 1, 1, tzinfo=utc)))
        lines = unfold_lines(cal.render())
        assert lines.index("X-WR-TIMEZONE:Europe/Berlin") < lines.index(
            "BEGIN:VTIMEZONE"
        )
        assert lines.index("END:VTIMEZONE") < lines.index("BEGIN:VEVENT")
        assert "TZID:Europe/Berlin" in lines

    def test_render_is_repeatable(self):
        cal = Calendar("-//test//EN", timezone="Europe/Berlin")
        first = cal.render()
        assert cal.render() == first
        assert cal.children == []
        assert first.count("BEGIN:VTIMEZONE") == 1


class TestFreeBusyForwarding:
    def test_forward_to_last_section(self):
        cal = Calendar("-//test//EN")
        k1 = fixed_freebusy("one")
        k2 = fixed_freebusy("two")
        cal.add_free_busy_section(k1, "k1")
        cal.add_free_busy_time(
            "BUSY", datetime(2024, 1, 2, 10, tzinfo=utc), datetime(2024, 1, 2, 11, tzinfo=utc)
        )
        assert len(k1.intervals()) == 1

        cal.add_free_busy_section(k2, "k2")
        cal.add_free_busy_time(
            "FREE", datetime(2024, 1, 3, 10, tzinfo=utc), datetime(2024, 1, 3, 11, tzinfo=utc)
        )
        cal.add_free_busy_time(
            "BUSY",
            datetime(2024, 1, 4, 10, tzinfo=utc),
            datetime(2024, 1, 4, 11, tzinfo=utc),
            "k1",
        )
        assert [i.kind for i in k1.intervals()] == ["BUSY", "BUSY"]
        assert [i.kind for i in k2.intervals()] == ["FREE"]

    def test_unknown_key_is_noop(self, caplog):
        cal = Calendar("-//test//EN")
        k1 = fixed_freebusy()
        cal.add_free_busy_section(k1, "k1")
        with caplog.at_level(logging.WARNING, logger="icalwriter"):
            cal.add_free_busy_time(
                "BUSY",
                datetime(2024, 1, 2, 10, tzinfo=utc),
                datetime(2024, 1, 2, 11, tzinfo=utc),
                "missing",
            )
        assert k1.intervals() == []
        assert "missing" in caplog.text

    def test_no_section_is_noop(self):
        cal = Calendar("-//test//EN")
        cal.add_free_busy_time(
            "BUSY", datetime(2024, 1, 2, 10, tzinfo=utc), datetime(2024, 1, 2, 11, tzinfo=utc)
        )
        assert cal.children == []

    def test_key_of_non_freebusy_is_noop(self):
        cal = Calendar("-//test//EN")
        cal.add_component(Event(uid="ev"), "ev")
        cal.add_free_busy_time(
            "BUSY",
            datetime(2024, 1, 2, 10, tzinfo=utc),
            datetime(2024, 1, 2, 11, tzinfo=utc),
            "ev",
        )

    def test_rendered_sections(self):
        cal = Calendar("-//test//EN", method=None)
        cal.add_free_busy_section(fixed_freebusy("empty"), "empty")
        cal.add_free_busy_section(fixed_freebusy("full"), "full")
        cal.add_free_busy_time(
            "BUSY", datetime(2024, 1, 2, 10, tzinfo=utc), datetime(2024, 1, 2, 11, tzinfo=utc)
        )
        assert unfold_lines(cal.render()) == [
            "BEGIN:VCALENDAR",
            "VERSION:2.0",
            "PRODID:-//test//EN",
            "BEGIN:VFREEBUSY",
            "END:VFREEBUSY",
            "BEGIN:VFREEBUSY",
            "UID:full",
            "DTSTAMP:20240101T000000Z",
            "DTSTART:20240102T100000Z",
            "DTEND:20240102T110000Z",
            "FREEBUSY;FSBTYPE=BUSY:20240102T100000Z/20240102T110000Z",
            "END:VFREEBUSY",
            "END:VCALENDAR",
        ]


class TestFromConfig:
    def test_from_config(self):
        config = {
            "default": {"prodid": "-//Example//Cal//EN", "method": "PUBLISH"},
            "work": {"inherits": "default", "name": "Work", "timezone": "Europe/Oslo"},
        }
        cal = Calendar.from_config(config, "work")
        assert cal.prodid == "-//Example//Cal//EN"
        assert cal.method == "PUBLISH"
        assert cal.name == "Work"
        assert cal.timezone == "Europe/Oslo"

    def test_from_config_without_prodid(self):
        with pytest.raises(InvalidArgument):
            Calendar.from_config({"default": {"name": "x"}})
