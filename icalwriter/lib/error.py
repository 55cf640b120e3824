#!/usr/bin/env python
import logging
import os
from typing import Optional

from icalwriter import __version__

## one of DEBUG_PDB, DEBUG, DEVELOPMENT, PRODUCTION
debugmode = os.environ.get("ICALWRITER_DEBUGMODE")
if not debugmode:
    if "dev" in __version__ or __version__ == "(unknown)":
        debugmode = "DEVELOPMENT"
    else:
        debugmode = "PRODUCTION"

log = logging.getLogger("icalwriter")
if debugmode.startswith("DEBUG"):
    log.setLevel(logging.DEBUG)
else:
    log.setLevel(logging.WARNING)


def assert_(condition: object) -> None:
    try:
        assert condition
    except AssertionError:
        if debugmode == "PRODUCTION":
            log.error(
                "Deviation from expectations found.  %s" % ERR_FRAGMENT, exc_info=True
            )
        elif debugmode == "DEBUG_PDB":
            log.error("Deviation from expectations found.  Dropping into debugger")
            import pdb

            pdb.set_trace()
        else:
            raise


ERR_FRAGMENT: str = "Please consider raising an issue on the icalwriter issue tracker, include this error and the traceback (if any) and the calendar data that triggered it"


class ICalError(Exception):
    reason: str = "no reason"

    def __init__(self, reason: Optional[str] = None) -> None:
        if reason:
            self.reason = reason
        super().__init__(self.reason)

    def __str__(self) -> str:
        return "%s: %s" % (self.__class__.__name__, self.reason)


class InvalidArgument(ICalError, ValueError):
    """
    A mandatory identifying value was missing or malformed when an
    object was constructed (for instance an empty PRODID).
    """

    pass


class EncodingError(ICalError, ValueError):
    """
    A property or parameter value cannot be written as iCalendar text
    without breaking the escaping rules.  The property_name attribute
    tells which property was being encoded, when known.
    """

    property_name: Optional[str] = None

    def __init__(
        self, reason: Optional[str] = None, property_name: Optional[str] = None
    ) -> None:
        if property_name:
            self.property_name = property_name
        super().__init__(reason)

    def __str__(self) -> str:
        return "%s in property '%s', reason %s" % (
            self.__class__.__name__,
            self.property_name,
            self.reason,
        )
