"""Conversion of GMT calendar fields to seconds since the Unix epoch.

`epoch_seconds` is the portable `timegm`: pure integer arithmetic with no
lookup loops, no platform time routines and no shared state. `timegm` and
`to_timestamp` adapt the standard library's date representations to it.
"""

import time
from collections.abc import Sequence
from datetime import datetime, timedelta

from gmepoch.days import MONTH_OFFSETS, days_since_origin, is_leap_year
from gmepoch.fields import BrokenDownDateTime, require_aware
from gmepoch.util import DAY, EPOCH_YEAR, HOUR, MINUTE

_EPOCH_DAYS = days_since_origin(EPOCH_YEAR)


def epoch_seconds(date: BrokenDownDateTime) -> int:
    """Return the seconds between 1970-01-01T00:00:00Z and `date`.

    The result is negative for dates before the epoch. Fields are not
    validated: out-of-range values give a deterministic but meaningless
    number rather than an error, and a month outside 0-11 is reduced
    modulo 12 for the offset lookup.

    Example:
        >>> epoch_seconds(BrokenDownDateTime(year=1970, month=0, day_of_month=1))
        0
        >>> epoch_seconds(
        ...     BrokenDownDateTime(
        ...         year=1969, month=11, day_of_month=31, hour=23, minute=59, second=59
        ...     )
        ... )
        -1
    """
    days = days_since_origin(date.year) - _EPOCH_DAYS
    days += 28 * date.month + MONTH_OFFSETS[date.month % 12]
    # The 28-day baseline leaves out February 29th
    if date.month > 1 and is_leap_year(date.year):
        days += 1
    days += date.day_of_month - 1
    return days * DAY + date.hour * HOUR + date.minute * MINUTE + date.second


def timegm(value: time.struct_time | Sequence[int]) -> int:
    """Integer-field counterpart of `calendar.timegm`.

    Args:
        value: A `time.struct_time` or any sequence whose first six items are
            (year, month 1-12, day, hour, minute, second)

    Returns:
        Integer seconds since the Unix epoch

    Raises:
        TypeError: If `value` does not carry six integer fields

    Example:
        >>> timegm(time.gmtime(1_700_000_000))
        1700000000
        >>> timegm((2000, 3, 1, 0, 0, 0))
        951868800
    """
    fields = tuple(value[:6]) if isinstance(value, Sequence) else ()
    if len(fields) < 6 or not all(isinstance(field, int) for field in fields):
        raise TypeError(
            f"timegm expects a struct_time or a sequence of six integers.\n"
            f"Got {type(value).__name__!r}: {value!r}\n"
            f"Examples:\n"
            f"  timegm(time.gmtime())\n"
            f"  timegm((2025, 1, 15, 14, 30, 0))  # month is 1-based"
        )
    year, month, day, hour, minute, second = fields
    return epoch_seconds(
        BrokenDownDateTime(
            year=year,
            month=month - 1,
            day_of_month=day,
            hour=hour,
            minute=minute,
            second=second,
        )
    )


def to_timestamp(value: datetime) -> int:
    """Convert a timezone-aware datetime to integer Unix seconds.

    Microseconds are dropped, so the result is the floor of
    `value.timestamp()`. Unlike `datetime.timestamp()`, no float is
    involved and the result is exact for any year datetime can represent,
    including instants whose UTC date falls outside years 1-9999.

    Raises:
        TypeError: If `value` is not a datetime or is naive
    """
    require_aware(value)
    # astimezone() overflows near datetime.min/max, so offset in seconds
    local = epoch_seconds(BrokenDownDateTime.from_wall_clock(value))
    return local - value.utcoffset() // timedelta(seconds=1)
