"""Year and month day counts under the proleptic Gregorian calendar.

Every value here is a closed-form expression or a constant table, so the
functions are safe to call from any thread and never allocate.
"""

# Extra days beyond a uniform 28-day month, accumulated by the months
# strictly before each 0-based month index. The leap day is not included.
MONTH_OFFSETS: tuple[int, ...] = (0, 3, 3, 6, 8, 11, 13, 16, 19, 21, 24, 26)

# The same table packed five bits per month, January in the low bits.
MONTH_OFFSET_WORD: int = sum(
    offset << (5 * month) for month, offset in enumerate(MONTH_OFFSETS)
)


def is_leap_year(year: int) -> bool:
    """True if `year` has a February 29th."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_since_origin(year: int) -> int:
    """Count the days from the fictitious 0000-01-01 to `year`-01-01.

    Year 0 is treated as a leap year, as are all years the Gregorian rule
    selects when extended indefinitely in both directions. Only differences
    between two results are meaningful.

    The +399 bias keeps the floor divisions on the same side of zero for
    small years; the trailing constants cancel it, so days_since_origin(0)
    is 0.

    Example:
        >>> days_since_origin(1971) - days_since_origin(1970)
        365
        >>> days_since_origin(1973) - days_since_origin(1972)
        366
    """
    return (
        year * 365
        + (year + 399) // 4
        - (year + 399) // 100
        + (year + 399) // 400
        - 399 // 4
        + 399 // 100
    )


def month_offset(month: int) -> int:
    """Read the extra-day offset for a 0-based month from the packed word."""
    return (MONTH_OFFSET_WORD >> (5 * (month % 12))) & 0x1F
