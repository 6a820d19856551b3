"""
Date helpers shared across the domain and backup layers.
"""

from datetime import date, datetime, timezone
from typing import Optional


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def today_iso(now: Optional[datetime] = None) -> str:
    """
    Current calendar date as YYYY-MM-DD, taken in UTC.
    """
    return (now or utc_now()).astimezone(timezone.utc).date().isoformat()


def timestamp_iso(now: Optional[datetime] = None) -> str:
    """ISO-8601 UTC timestamp with millisecond precision and a trailing Z."""
    moment = (now or utc_now()).astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def normalize_date(value) -> str:
    """
    Coerce a date, datetime or string into the YYYY-MM-DD form used for
    equality checks. Strings are only trimmed and cut at the time part.
    """
    if value is None:
        return ""
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    text = str(value).strip()
    return text.split("T", 1)[0]
