#!/usr/bin/env python
# -*- encoding: utf-8 -*-
"""
Pushes the generated iCalendar text through the icalendar and vobject
parsers, to make sure other implementations read back what we wrote.
"""
from datetime import datetime
from datetime import timezone
from unittest import TestCase

import icalendar
import vobject

from icalwriter import Calendar
from icalwriter import Event
from icalwriter import FreeBusy

utc = timezone.utc

LONG_TEXT = "Blåbærsyltetøy, rømmegrøt; og «multekrem»\n" * 6


class TestInterop(TestCase):
    def build_calendar(self):
        cal = Calendar("-//Example Corp.//icalwriter tests//EN", name="Tests")
        event = Event(uid="ev@example.com", dtstamp=datetime(2024, 1, 1, tzinfo=utc))
        event.dtstart = datetime(2024, 3, 1, 9, tzinfo=utc)
        event.dtend = datetime(2024, 3, 1, 10, tzinfo=utc)
        event.summary = "Lunch, with dessert; maybe"
        event.description = LONG_TEXT
        event.categories = ["FOOD", "SOCIAL"]
        cal.add_event(event)
        fb = FreeBusy(uid="fb@example.com", dtstamp=datetime(2024, 1, 1, tzinfo=utc))
        cal.add_free_busy_section(fb, "room")
        cal.add_free_busy_time(
            "BUSY",
            datetime(2024, 3, 1, 9, tzinfo=utc),
            datetime(2024, 3, 1, 10, tzinfo=utc),
        )
        return cal

    def test_icalendar(self):
        cal = icalendar.Calendar.from_ical(self.build_calendar().to_ical())
        self.assertEqual(str(cal["PRODID"]), "-//Example Corp.//icalwriter tests//EN")
        event = cal.walk("VEVENT")[0]
        self.assertEqual(str(event["SUMMARY"]), "Lunch, with dessert; maybe")
        self.assertEqual(str(event["DESCRIPTION"]), LONG_TEXT)
        self.assertEqual(event.decoded("DTSTART"), datetime(2024, 3, 1, 9, tzinfo=utc))
        freebusy = cal.walk("VFREEBUSY")[0]
        self.assertEqual(str(freebusy["UID"]), "fb@example.com")

    def test_vobject(self):
        vobj = vobject.readOne(self.build_calendar().render())
        self.assertEqual(vobj.vevent.summary.value, "Lunch, with dessert; maybe")
        self.assertEqual(vobj.vevent.description.value, LONG_TEXT)
        self.assertEqual(vobj.vevent.uid.value, "ev@example.com")
        self.assertEqual(vobj.x_wr_calname.value, "Tests")
