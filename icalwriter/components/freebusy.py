#!/usr/bin/env python
from datetime import datetime
from typing import ClassVar
from typing import Dict
from typing import List
from typing import NamedTuple
from typing import Optional

from icalwriter.component import Component
from icalwriter.lib.dates import build_date_time_property
from icalwriter.lib.dates import format_date
from icalwriter.lib.error import assert_
from icalwriter.lib.uid import Clock
from icalwriter.lib.uid import generate_uid
from icalwriter.lib.uid import UidGenerator
from icalwriter.lib.uid import utcnow
from icalwriter.property import Property
from icalwriter.property import PropertyBag


class FreeBusyInterval(NamedTuple):
    kind: str
    start: datetime
    end: datetime

    @property
    def key(self) -> str:
        """The PERIOD value, "<start>/<end>" in UTC"""
        return f"{format_date(self.start)}/{format_date(self.end)}"


class FreeBusy(Component):
    """
    VFREEBUSY block listing busy/free periods.

    A FreeBusy without any interval renders as an empty block, meaning
    there is nothing to report for it.  Intervals are kept keyed by
    their PERIOD value, so adding the same period twice keeps only the
    last one, and they are written sorted by that value.

    The interval type goes into the FSBTYPE parameter, which is what
    the consumers of this output expect.  RFC 5545 calls it FBTYPE;
    subclasses may override FBTYPE_PARAMETER.
    """

    component_type: ClassVar[str] = "VFREEBUSY"
    FBTYPE_PARAMETER: ClassVar[str] = "FSBTYPE"

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
        self.dtstart: Optional[datetime] = None
        self.dtend: Optional[datetime] = None
        self.organizer: Optional[str] = None
        self.attendee: Optional[str] = None
        self.url: Optional[str] = None
        ## If set to true the timezone will be added to the date properties
        self.use_timezone = False
        self._free_busy_times: Dict[str, FreeBusyInterval] = {}

    def add_free_busy_time(self, kind: str, start: datetime, end: datetime) -> None:
        """
        Adds a period of the given type (BUSY, FREE, BUSY-TENTATIVE,
        ...).  DTSTART moves back to the earliest start seen.  DTEND is
        only ever moved to an earlier end, never a later one.
        """
        if self.dtstart is None or start < self.dtstart:
            self.dtstart = start
        ## TODO: confirm with the consumers whether DTEND should widen
        ## to the latest end like DTSTART does
        if self.dtend is None or end < self.dtend:
            self.dtend = end
        interval = FreeBusyInterval(kind, start, end)
        self._free_busy_times[interval.key] = interval

    def intervals(self) -> List[FreeBusyInterval]:
        """The stored intervals in rendering order"""
        return [self._free_busy_times[key] for key in sorted(self._free_busy_times)]

    def _date_property(self, name: str, ts: datetime) -> Property:
        return build_date_time_property(name, ts, use_timezone=self.use_timezone)

    def build_property_bag(self) -> PropertyBag:
        bag = PropertyBag()
        if not self._free_busy_times:
            return bag

        assert_(self.dtstart is not None and self.dtend is not None)
        bag.set("UID", self.uid)
        if self.attendee:
            bag.set("ATTENDEE", self.attendee)
        bag.add(self._date_property("DTSTAMP", self.dtstamp))
        bag.add(self._date_property("DTSTART", self.dtstart))
        bag.add(self._date_property("DTEND", self.dtend))

        for interval in self.intervals():
            bag.add(
                Property(
                    "FREEBUSY",
                    interval.key,
                    {self.FBTYPE_PARAMETER: interval.kind},
                )
            )

        if self.organizer:
            bag.add(Property("ORGANIZER", self.organizer))
        if self.url:
            bag.add(Property("URL", self.url))
        return bag
