"""Calendar utilities for rstrftime.

This module provides internal functions for proleptic Gregorian calendar
calculations: leap years, month lengths, ordinal day numbers, weekdays,
and Unix epoch offsets.

Ordinal 1 = 0001-01-01 (a Monday).

This module is not part of the public API.
"""

from __future__ import annotations

from rstrftime._internal.constants import (
    DAYS_IN_MONTH,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from rstrftime.errors import ValidationError


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The year to check (can be zero or negative).

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2024)  # Divisible by 4 but not 100
        True
        >>> is_leap_year(2023)  # Not divisible by 4
        False
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.

    Raises:
        ValidationError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValidationError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def days_in_year(year: int) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return 366 if is_leap_year(year) else 365


# Days before each month (cumulative), for non-leap years
# Index 0 is unused, months are 1-indexed
_DAYS_BEFORE_MONTH = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


def day_of_year(year: int, month: int, day: int) -> int:
    """Return the 1-based day of the year.

    Examples:
        >>> day_of_year(2006, 1, 1)
        1
        >>> day_of_year(2024, 12, 31)
        366
    """
    result = _DAYS_BEFORE_MONTH[month] + day
    if month > 2 and is_leap_year(year):
        result += 1
    return result


def ymd_to_ordinal(year: int, month: int, day: int) -> int:
    """Convert year, month, day to ordinal (days since year 1).

    The ordinal for 0001-01-01 is 1.
    The ordinal for 0000-12-31 (last day of year 0 / 1 BCE) is 0.

    Args:
        year: The year (astronomical, can be 0 or negative).
        month: The month (1-12).
        day: The day (1-31).

    Returns:
        The ordinal day number.
    """
    # Python's // floors toward negative infinity, so this also holds
    # for years before 1
    y = year - 1
    days_before_year = y * 365 + y // 4 - y // 100 + y // 400

    return days_before_year + day_of_year(year, month, day)


def ordinal_to_weekday(ordinal: int) -> int:
    """Return the weekday of an ordinal day (0=Sunday, 6=Saturday)."""
    return ordinal % 7


def weekday(year: int, month: int, day: int) -> int:
    """Return the weekday of a date (0=Sunday, 6=Saturday).

    Examples:
        >>> weekday(2006, 1, 1)
        0
        >>> weekday(2006, 1, 2)
        1
    """
    return ordinal_to_weekday(ymd_to_ordinal(year, month, day))


_UNIX_EPOCH_ORDINAL = ymd_to_ordinal(1970, 1, 1)


def epoch_seconds(
    year: int,
    month: int,
    day: int,
    hour: int,
    minute: int,
    second: int,
    utc_offset: int,
) -> int:
    """Return seconds since 1970-01-01T00:00:00Z for a local wall-clock time.

    Args:
        year, month, day, hour, minute, second: Local wall-clock fields.
        utc_offset: Offset of the local time from UTC, in seconds.

    Returns:
        Seconds since the Unix epoch (negative before 1970).
    """
    days = ymd_to_ordinal(year, month, day) - _UNIX_EPOCH_ORDINAL
    local = (
        days * SECONDS_PER_DAY
        + hour * SECONDS_PER_HOUR
        + minute * SECONDS_PER_MINUTE
        + second
    )
    return local - utc_offset


def validate_date(year: int, month: int, day: int) -> None:
    """Validate that year, month, day form a valid date.

    Raises:
        ValidationError: If the date is invalid.
    """
    if month < 1 or month > 12:
        raise ValidationError(f"month must be 1-12, got {month}")

    max_day = days_in_month(year, month)
    if day < 1 or day > max_day:
        raise ValidationError(
            f"day must be 1-{max_day} for {year}-{month:02d}, got {day}"
        )


__all__ = [
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "day_of_year",
    "ymd_to_ordinal",
    "ordinal_to_weekday",
    "weekday",
    "epoch_seconds",
    "validate_date",
]
