#!/usr/bin/env python
from datetime import date
from datetime import datetime
from datetime import timezone
from typing import Dict
from typing import Union

from icalwriter.lib.error import EncodingError
from icalwriter.property import Property

utc_tz = timezone.utc

DATE_FORMAT = "%Y%m%d"
LOCAL_DATETIME_FORMAT = "%Y%m%dT%H%M%S"
UTC_DATETIME_FORMAT = "%Y%m%dT%H%M%SZ"


def _to_utc_date_string(ts: Union[date, datetime]) -> str:
    """coerce datetimes to UTC (assume localtime if nothing is given)"""
    if isinstance(ts, datetime):
        ## ts.astimezone() assumes a naive timestamp is localtime
        ts = ts.astimezone(utc_tz)
    return ts.strftime(UTC_DATETIME_FORMAT)


def tzid_of(ts: datetime) -> str:
    """
    Returns the timezone name carried by a timestamp.  zoneinfo
    zones have a key, pytz zones have a zone, anything else falls
    back on tzname().
    """
    tz = ts.tzinfo
    if tz is None:
        raise EncodingError(f"timestamp {ts} has no timezone, cannot produce a TZID")
    for attr in ("key", "zone"):
        name = getattr(tz, attr, None)
        if name:
            return name
    name = tz.tzname(ts)
    if not name:
        raise EncodingError(f"timezone of {ts} has no name")
    return name


def format_date(
    ts: Union[date, datetime], no_time: bool = False, use_timezone: bool = False
) -> str:
    if no_time:
        return ts.strftime(DATE_FORMAT)
    if not isinstance(ts, datetime):
        ts = datetime(ts.year, ts.month, ts.day, tzinfo=utc_tz)
    if use_timezone:
        return ts.strftime(LOCAL_DATETIME_FORMAT)
    return _to_utc_date_string(ts)


def build_date_time_property(
    name: str,
    ts: Union[date, datetime],
    no_time: bool = False,
    use_timezone: bool = False,
) -> Property:
    """
    Creates a date or date-time property.

    * no_time: the value is a plain date and VALUE=DATE is added
    * use_timezone: the local wall time is written and a TZID
      parameter names its timezone
    * otherwise the timestamp is converted to UTC and written with the
      trailing Z

    no_time wins if both flags are given.
    """
    params: Dict[str, str] = {}
    if no_time:
        params["VALUE"] = "DATE"
    elif use_timezone:
        if not isinstance(ts, datetime):
            raise EncodingError(f"date {ts} has no timezone", property_name=name)
        try:
            params["TZID"] = tzid_of(ts)
        except EncodingError as e:
            e.property_name = name
            raise
    return Property(name, format_date(ts, no_time, use_timezone and not no_time), params)
