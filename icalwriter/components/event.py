#!/usr/bin/env python
from datetime import date
from datetime import datetime
from typing import ClassVar
from typing import List
from typing import Optional
from typing import Union

from icalwriter.component import Component
from icalwriter.lib.dates import build_date_time_property
from icalwriter.lib.uid import Clock
from icalwriter.lib.uid import generate_uid
from icalwriter.lib.uid import UidGenerator
from icalwriter.lib.uid import utcnow
from icalwriter.property import Property
from icalwriter.property import PropertyBag


class Event(Component):
    """
    VEVENT block.

    DTSTART and DTEND honor no_time (all-day events, written as
    VALUE=DATE) and use_timezone (local time with a TZID parameter).
    DTSTAMP, CREATED and LAST-MODIFIED are always written in UTC.
    """

    component_type: ClassVar[str] = "VEVENT"

    def __init__(
        self,
        uid: Optional[str] = None,
        dtstamp: Optional[datetime] = None,
        uid_generator: UidGenerator = generate_uid,
        clock: Clock = utcnow,
    ) -> None:
        super().__init__()
        self.uid = uid or uid_generator()
        self.dtstamp = dtstamp or clock()
        self.dtstart: Union[date, datetime, None] = None
        self.dtend: Union[date, datetime, None] = None
        self.no_time = False
        self.use_timezone = False
        self.summary: Optional[str] = None
        self.description: Optional[str] = None
        self.location: Optional[str] = None
        self.url: Optional[str] = None
        self.status: Optional[str] = None
        self.organizer: Optional[str] = None
        self.attendees: List[str] = []
        self.categories: List[str] = []
        self.sequence: Optional[int] = None
        self.created: Optional[datetime] = None
        self.modified: Optional[datetime] = None

    def add_attendee(self, attendee: str) -> None:
        self.attendees.append(attendee)

    def _set_date(self, bag: PropertyBag, name: str, ts, local: bool = False) -> None:
        if ts is None:
            return
        if local:
            prop = build_date_time_property(name, ts, self.no_time, self.use_timezone)
        else:
            prop = build_date_time_property(name, ts)
        bag.set(prop.name, prop.value, prop.parameters)

    def build_property_bag(self) -> PropertyBag:
        bag = PropertyBag()
        bag.set("UID", self.uid)
        self._set_date(bag, "DTSTAMP", self.dtstamp)
        self._set_date(bag, "DTSTART", self.dtstart, local=True)
        self._set_date(bag, "DTEND", self.dtend, local=True)
        if self.sequence is not None:
            bag.set("SEQUENCE", self.sequence)
        self._set_date(bag, "CREATED", self.created)
        self._set_date(bag, "LAST-MODIFIED", self.modified)

        self._fill_bag(
            bag,
            (
                (self.summary, "SUMMARY", self.summary),
                (self.description, "DESCRIPTION", self.description),
                (self.location, "LOCATION", self.location),
                (self.url, "URL", self.url),
                (self.status, "STATUS", self.status),
                (self.categories, "CATEGORIES", list(self.categories)),
                (self.organizer, "ORGANIZER", self.organizer),
            ),
        )
        for attendee in self.attendees:
            bag.add(Property("ATTENDEE", attendee))
        return bag
