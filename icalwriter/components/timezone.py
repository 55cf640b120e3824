#!/usr/bin/env python
from datetime import datetime
from typing import ClassVar
from typing import Optional

from icalwriter.component import Component
from icalwriter.lib.dates import format_date
from icalwriter.lib.error import InvalidArgument
from icalwriter.property import Property
from icalwriter.property import PropertyBag


class Timezone(Component):
    """VTIMEZONE block carrying a timezone identifier and, optionally,
    STANDARD/DAYLIGHT rules"""

    component_type: ClassVar[str] = "VTIMEZONE"

    def __init__(self, tzid: str) -> None:
        super().__init__()
        if not tzid:
            raise InvalidArgument("TZID cannot be empty")
        self.tzid = tzid

    def build_property_bag(self) -> PropertyBag:
        bag = PropertyBag()
        bag.set("TZID", self.tzid)
        bag.set("X-LIC-LOCATION", self.tzid)
        return bag

    def add_rule(self, rule: "TimezoneRule") -> "Timezone":
        return self.add_component(rule)


class TimezoneRule(Component):
    """
    A STANDARD or DAYLIGHT sub-component of a VTIMEZONE.

    dtstart is written as local time, as RFC 5545 requires for these
    blocks.  Offsets are given as strings like "+0100".  The rrule is a
    RECUR value ("FREQ=YEARLY;BYMONTH=10;BYDAY=-1SU") and is written
    without TEXT escaping.
    """

    TYPE_STANDARD = "STANDARD"
    TYPE_DAYLIGHT = "DAYLIGHT"

    def __init__(
        self,
        rule_type: str = TYPE_STANDARD,
        dtstart: Optional[datetime] = None,
        tzoffsetfrom: Optional[str] = None,
        tzoffsetto: Optional[str] = None,
        rrule: Optional[str] = None,
        tzname: Optional[str] = None,
    ) -> None:
        super().__init__()
        rule_type = (rule_type or "").upper()
        if rule_type not in (self.TYPE_STANDARD, self.TYPE_DAYLIGHT):
            raise InvalidArgument(
                f"timezone rule type must be STANDARD or DAYLIGHT, not {rule_type!r}"
            )
        self.rule_type = rule_type
        self.dtstart = dtstart
        self.tzoffsetfrom = tzoffsetfrom
        self.tzoffsetto = tzoffsetto
        self.rrule = rrule
        self.tzname = tzname

    def get_type(self) -> str:
        return self.rule_type

    def build_property_bag(self) -> PropertyBag:
        bag = PropertyBag()
        self._fill_bag(
            bag,
            (
                (
                    self.dtstart,
                    "DTSTART",
                    self.dtstart and format_date(self.dtstart, use_timezone=True),
                ),
                (self.tzoffsetfrom, "TZOFFSETFROM", self.tzoffsetfrom),
                (self.tzoffsetto, "TZOFFSETTO", self.tzoffsetto),
            ),
        )
        if self.rrule:
            bag.add(Property("RRULE", self.rrule, escape=False))
        if self.tzname:
            bag.add(Property("TZNAME", self.tzname))
        return bag
