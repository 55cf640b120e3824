#!/usr/bin/env python
import logging
from datetime import datetime
from typing import Any
from typing import ClassVar
from typing import Dict
from typing import List
from typing import Optional

from icalwriter.component import Component
from icalwriter.components.event import Event
from icalwriter.components.freebusy import FreeBusy
from icalwriter.components.timezone import Timezone
from icalwriter.lib.error import InvalidArgument
from icalwriter.property import PropertyBag

log = logging.getLogger("icalwriter")


class Calendar(Component):
    """
    The VCALENDAR top level component.

    prodid is mandatory (RFC 5545 section 3.7.3): it identifies the
    product that created the calendar, typically something like
    ``-//My Company//My Product//EN``.

    Setting a timezone adds X-WR-TIMEZONE and a VTIMEZONE block, which
    is rendered ahead of the other children.  The VTIMEZONE is created
    at render time and never stored among the children.
    """

    component_type: ClassVar[str] = "VCALENDAR"

    def __init__(
        self,
        prodid: str,
        method: Optional[str] = "PUBLISH",
        name: Optional[str] = None,
        timezone: Optional[str] = None,
        errormsg: Optional[str] = None,
        success: Optional[bool] = None,
    ) -> None:
        super().__init__()
        if not prodid:
            raise InvalidArgument("PRODID cannot be empty")
        self.prodid = prodid
        self.method = method
        self.name = name
        self.timezone = timezone
        self.errormsg = errormsg
        self.success = success
        self._last_free_busy_section_key: Optional[str] = None

    @classmethod
    def from_config(
        cls, config: Dict[str, Any], section: str = "default"
    ) -> "Calendar":
        """
        Creates a calendar from the defaults found in a config section
        (see icalwriter.config)
        """
        from icalwriter.config import config_section

        conf = config_section(config, section)
        kwargs = {
            key: conf[key] for key in ("method", "name", "timezone") if key in conf
        }
        return cls(conf.get("prodid"), **kwargs)

    def set_success(self, success: bool = True) -> None:
        self.success = success

    def set_failure(self) -> None:
        self.success = False

    def build_property_bag(self) -> PropertyBag:
        return self._fill_bag(
            PropertyBag(),
            (
                (True, "VERSION", "2.0"),
                (True, "PRODID", self.prodid),
                (self.method, "METHOD", self.method),
                (self.errormsg, "X-ERRORMSG", self.errormsg),
                (self.success is not None, "X-SUCCESS", self.success),
                (self.name, "X-WR-CALNAME", self.name),
                (self.timezone, "X-WR-TIMEZONE", self.timezone),
            ),
        )

    def rendered_children(self) -> List[Component]:
        if self.timezone:
            return [Timezone(self.timezone)] + self.children
        return self.children

    def add_event(self, event: Event) -> "Calendar":
        """Adds an Event to the Calendar (wrapper for add_component)"""
        return self.add_component(event)

    def add_free_busy_section(self, section: FreeBusy, key: str) -> "Calendar":
        """
        Adds a FreeBusy section to the Calendar and remembers its key,
        so that add_free_busy_time() may be called without a key
        """
        self.add_component(section, key)
        self._last_free_busy_section_key = key
        return self

    def add_free_busy_time(
        self,
        kind: str,
        start: datetime,
        end: datetime,
        section_key: Optional[str] = None,
    ) -> None:
        """
        Forwards a free/busy period to the section stored under
        section_key, or to the most recently added section if no key
        is given.  If there is no such section, the period is dropped
        with a warning; this is deliberate best-effort behaviour.
        """
        if section_key is None:
            section_key = self._last_free_busy_section_key
        section = self.get_component_by_key(section_key)
        if not isinstance(section, FreeBusy):
            log.warning(
                f"no free/busy section with key {section_key!r}, dropping {kind} period {start} - {end}"
            )
            return
        section.add_free_busy_time(kind, start, end)
