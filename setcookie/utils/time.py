import time
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Optional

from dateutil.parser import parse as dateutil_parser

UTC = timezone.utc

_DAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = (
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


def unix_now() -> int:
    """
    Returns the current Unix timestamp, in whole seconds.
    """
    return int(time.time())


def timestamp_to_cookie_format(value: int) -> str:
    """
    Formats a Unix timestamp as the date used by the Expires attribute, for
    example: "Thu, 01-Jan-1970 00:00:01 GMT".
    """
    # day and month names are not taken from strftime, they must not follow
    # the process locale
    moment = datetime.fromtimestamp(value, UTC)
    return (
        f"{_DAYS[moment.weekday()]}, {moment.day:02d}-{_MONTHS[moment.month - 1]}-"
        f"{moment.year:04d} {moment.strftime('%H:%M:%S')} GMT"
    )


def _parse_datetime(value: str) -> Optional[datetime]:
    try:
        return parsedate_to_datetime(value)
    except (TypeError, ValueError, IndexError):
        pass
    try:
        return dateutil_parser(value)
    except (ValueError, OverflowError):
        return None


def timestamp_from_cookie_format(value: str) -> Optional[int]:
    """
    Parses a date as found in the Expires attribute of a cookie, returning a
    Unix timestamp, or None if the value cannot be understood.

    The formats of RFC 1123, RFC 850 and asctime are handled by the standard
    library; any other reasonable date is handed to dateutil. Dates without
    time zone information are considered UTC.
    """
    value = value.strip()
    if not value:
        return None
    parsed = _parse_datetime(value)
    if parsed is None:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return int(parsed.timestamp())
