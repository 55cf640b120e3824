#!/usr/bin/env python
import logging

__version__ = "0.9.0"

from .component import Component
from .components.calendar import Calendar
from .components.event import Event
from .components.freebusy import FreeBusy
from .components.freebusy import FreeBusyInterval
from .components.timezone import Timezone
from .components.timezone import TimezoneRule
from .property import Property
from .property import PropertyBag
from .renderer import Renderer
from .renderer import render

## Silence notification of no default logging handler
log = logging.getLogger("icalwriter")


class NullHandler(logging.Handler):
    def emit(self, record) -> None:
        pass


log.addHandler(NullHandler())

__all__ = [
    "__version__",
    "Calendar",
    "Component",
    "Event",
    "FreeBusy",
    "FreeBusyInterval",
    "Property",
    "PropertyBag",
    "Renderer",
    "Timezone",
    "TimezoneRule",
    "render",
]
