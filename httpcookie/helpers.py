"""Various helper functions"""

import datetime
import re
import string
from typing import Optional, Tuple

__all__ = ("ascii_lower", "format_http_date", "parse_http_date")


_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)

# Weekday and month names for HTTP date/time formatting;
# always English!
_WEEKDAYNAME = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_WEEKDAYNAME_FULL = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)
_MONTHNAME = (
    "",  # Dummy so we can use 1-based month numbers
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)

_WEEKDAYS = frozenset(name.lower() for name in _WEEKDAYNAME)
_WEEKDAYS_FULL = frozenset(name.lower() for name in _WEEKDAYNAME_FULL)
_MONTHS = {name.lower(): num for num, name in enumerate(_MONTHNAME) if name}

_TIME = r"(?P<hour>\d{1,2}):(?P<minute>\d{1,2}):(?P<second>\d{1,2})"
# The zone is any word and is read as UTC
_ZONE = r"(?P<zone>\S+)"

# Try the three date formats of RFC 2616 section 3.3.1 first, then the
# hyphenated four digit year variant seen in the wild.
HTTP_DATE_RES: Tuple[Tuple["re.Pattern[str]", frozenset], ...] = (
    (  # RFC 1123: Sun, 06 Nov 1994 08:49:37 GMT
        re.compile(
            r"(?P<weekday>[a-z]+),\s+(?P<day>\d{1,2})\s+(?P<month>[a-z]+)\s+"
            r"(?P<year>\d{4})\s+" + _TIME + r"\s+" + _ZONE,
            re.I | re.ASCII,
        ),
        _WEEKDAYS,
    ),
    (  # RFC 850: Sunday, 06-Nov-94 08:49:37 GMT
        re.compile(
            r"(?P<weekday>[a-z]+),\s+(?P<day>\d{1,2})-(?P<month>[a-z]+)-"
            r"(?P<year>\d{2})\s+" + _TIME + r"\s+" + _ZONE,
            re.I | re.ASCII,
        ),
        _WEEKDAYS_FULL,
    ),
    (  # Sun, 06-Nov-1994 08:49:37 GMT
        re.compile(
            r"(?P<weekday>[a-z]+),\s+(?P<day>\d{1,2})-(?P<month>[a-z]+)-"
            r"(?P<year>\d{4})\s+" + _TIME + r"\s+" + _ZONE,
            re.I | re.ASCII,
        ),
        _WEEKDAYS,
    ),
    (  # ANSI C asctime(): Sun Nov  6 08:49:37 1994
        re.compile(
            r"(?P<weekday>[a-z]+)\s+(?P<month>[a-z]+)\s+(?P<day>\d{1,2})\s+"
            + _TIME
            + r"\s+(?P<year>\d{4})",
            re.I | re.ASCII,
        ),
        _WEEKDAYS,
    ),
)


def ascii_lower(text: str) -> str:
    """Lower-case ASCII letters only, leaving any other character alone."""
    return text.translate(_ASCII_LOWER)


def parse_http_date(date_str: str) -> Optional[datetime.datetime]:
    """Parse an HTTP date trying every known format in order.

    The trailing zone name or offset is not interpreted, the date is
    always read as UTC. Two digit years follow RFC 6265: 70-99 map to
    19xx and 00-69 to 20xx.

    Returns an aware UTC datetime, or None when no format matches.
    """
    for date_re, weekdays in HTTP_DATE_RES:
        match = date_re.fullmatch(date_str)
        if match is None:
            continue
        if ascii_lower(match.group("weekday")) not in weekdays:
            continue
        month = _MONTHS.get(ascii_lower(match.group("month")))
        if month is None:
            continue
        year = int(match.group("year"))
        if len(match.group("year")) == 2:
            year += 1900 if year >= 70 else 2000
        try:
            return datetime.datetime(
                year,
                month,
                int(match.group("day")),
                int(match.group("hour")),
                int(match.group("minute")),
                int(match.group("second")),
                tzinfo=datetime.timezone.utc,
            )
        except ValueError:
            continue
    return None


def format_http_date(dt: datetime.datetime) -> str:
    """Format a datetime as an RFC 1123 date, e.g. Sun, 06 Nov 1994 08:49:37 GMT.

    Naive datetimes are taken to be UTC.
    """
    if dt.tzinfo is not None:
        dt = dt.astimezone(datetime.timezone.utc)
    return "%s, %02d %3s %04d %02d:%02d:%02d GMT" % (
        _WEEKDAYNAME[dt.weekday()],
        dt.day,
        _MONTHNAME[dt.month],
        dt.year,
        dt.hour,
        dt.minute,
        dt.second,
    )
