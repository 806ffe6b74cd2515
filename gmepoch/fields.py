import time
from dataclasses import dataclass
from datetime import datetime

from dateutil import tz
from typing_extensions import Self


@dataclass(frozen=True, kw_only=True)
class BrokenDownDateTime:
    """A GMT calendar date and time of day, split into fields.

    `month` is 0-based (0 = January) and `year` is the full year. Fields are
    stored exactly as given; nothing is range checked or normalized.
    """

    year: int
    month: int
    day_of_month: int
    hour: int = 0
    minute: int = 0
    second: int = 0

    def __str__(self) -> str:
        """ISO-8601 style rendering with the 1-based month."""
        return (
            f"{self.year:04d}-{self.month + 1:02d}-{self.day_of_month:02d}"
            f"T{self.hour:02d}:{self.minute:02d}:{self.second:02d}Z"
        )

    @classmethod
    def from_struct_time(cls, value: time.struct_time) -> Self:
        """Build from the result of `time.gmtime()`.

        `struct_time` uses a 1-based month; it is shifted to 0-based here.
        """
        return cls(
            year=value.tm_year,
            month=value.tm_mon - 1,
            day_of_month=value.tm_mday,
            hour=value.tm_hour,
            minute=value.tm_min,
            second=value.tm_sec,
        )

    @classmethod
    def from_datetime(cls, value: datetime) -> Self:
        """Build from a timezone-aware datetime, normalized to UTC.

        Microseconds are dropped.

        Raises:
            TypeError: If `value` is not a datetime or is naive
            OverflowError: If the UTC instant falls outside years 1-9999
        """
        require_aware(value)
        return cls.from_wall_clock(value.astimezone(tz.UTC))

    @classmethod
    def from_wall_clock(cls, value: datetime) -> Self:
        """Build from the clock fields of `value` as written, ignoring tzinfo."""
        return cls(
            year=value.year,
            month=value.month - 1,
            day_of_month=value.day,
            hour=value.hour,
            minute=value.minute,
            second=value.second,
        )


def require_aware(value: datetime) -> None:
    """Raise TypeError unless `value` is a timezone-aware datetime."""
    if not isinstance(value, datetime):
        raise TypeError(
            f"Expected a datetime, got {type(value).__name__!r}: {value!r}"
        )
    if value.utcoffset() is None:
        raise TypeError(
            f"Datetime must be timezone-aware.\n"
            f"Got naive datetime: {value!r}\n"
            f"Hint: Add timezone info:\n"
            f"  from zoneinfo import ZoneInfo\n"
            f"  dt = datetime(..., tzinfo=ZoneInfo('UTC'))  "
            f"# or 'US/Pacific', etc.\n"
            f"  # Or use timezone.utc for UTC:\n"
            f"  dt = datetime(..., tzinfo=timezone.utc)"
        )
