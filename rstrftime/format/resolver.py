"""Derived time components.

resolve() reads a TimeSource once and computes every value a directive
may need, including the fields a typical time type does not expose:
day of year, Sunday- and Monday-based week numbers, and the ISO 8601
week and week-year.

The ISO week-year differs from the calendar year near year boundaries:

    >>> from rstrftime.source import Instant
    >>> c = resolve(Instant.of(2006, 1, 1))  # a Sunday
    >>> (c.year, c.iso_year, c.iso_week)
    (2006, 2005, 52)
"""

from __future__ import annotations

from dataclasses import dataclass

from rstrftime._internal.calendar import (
    day_of_year,
    epoch_seconds,
    is_leap_year,
    weekday,
)
from rstrftime._internal.constants import NANOSECOND_DIGITS
from rstrftime.source import TimeSource


@dataclass(frozen=True)
class TimeComponents:
    """Every field a directive can render, derived from one TimeSource."""

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    nanosecond: int
    weekday: int
    iso_weekday: int
    day_of_year: int
    iso_year: int
    iso_week: int
    sunday_week: int
    monday_week: int
    utc_offset: int
    zone_name: str
    epoch_seconds: int

    @property
    def hour12(self) -> int:
        return twelve_hour(self.hour)

    @property
    def meridian(self) -> str:
        return meridian(self.hour)


def resolve(source: TimeSource) -> TimeComponents:
    """Compute TimeComponents for a TimeSource.

    Args:
        source: The instant to resolve.

    Returns:
        A new TimeComponents. Nothing is cached between calls.
    """
    year = source.year
    doy = day_of_year(year, source.month, source.day)
    wday = source.weekday
    iso_year, iso_week = iso_week_date(year, doy, wday)

    return TimeComponents(
        year=year,
        month=source.month,
        day=source.day,
        hour=source.hour,
        minute=source.minute,
        second=source.second,
        nanosecond=source.nanosecond,
        weekday=wday,
        iso_weekday=iso_weekday(wday),
        day_of_year=doy,
        iso_year=iso_year,
        iso_week=iso_week,
        sunday_week=sunday_week(doy, wday),
        monday_week=monday_week(doy, wday),
        utc_offset=source.utc_offset,
        zone_name=source.zone_name or "",
        epoch_seconds=epoch_seconds(
            year,
            source.month,
            source.day,
            source.hour,
            source.minute,
            source.second,
            source.utc_offset,
        ),
    )


def iso_weekday(wday: int) -> int:
    """Convert a Sunday=0 weekday to ISO numbering (Monday=1, Sunday=7)."""
    return wday or 7


def sunday_week(doy: int, wday: int) -> int:
    """Week of the year with weeks starting on Sunday.

    Days before the first Sunday of the year are in week 0.

    Args:
        doy: 1-based day of year.
        wday: Weekday, 0=Sunday.
    """
    return (doy - 1 + 7 - wday) // 7


def monday_week(doy: int, wday: int) -> int:
    """Week of the year with weeks starting on Monday.

    Days before the first Monday of the year are in week 0.
    """
    return (doy - 1 + 7 - (wday + 6) % 7) // 7


def iso_weeks_in_year(year: int) -> int:
    """Return 53 if the ISO week-year has 53 weeks, else 52.

    A year has 53 ISO weeks when it starts on a Thursday, or when it is a
    leap year starting on a Wednesday.

    Examples:
        >>> iso_weeks_in_year(2004)
        53
        >>> iso_weeks_in_year(2005)
        52
    """
    jan1 = weekday(year, 1, 1)
    if jan1 == 4 or (jan1 == 3 and is_leap_year(year)):
        return 53
    return 52


def iso_week_date(year: int, doy: int, wday: int) -> tuple[int, int]:
    """Return the ISO 8601 (week-year, week number) for a date.

    Week 1 is the week containing the year's first Thursday. Early January
    can fall in the last week of the previous ISO year and late December
    in week 1 of the next.

    Args:
        year: Calendar year.
        doy: 1-based day of year.
        wday: Weekday, 0=Sunday.

    Returns:
        Tuple of (iso_year, iso_week).

    Examples:
        >>> iso_week_date(2008, 364, 1)  # Monday 2008-12-29
        (2009, 1)
    """
    week = (doy - iso_weekday(wday) + 10) // 7
    if week < 1:
        return (year - 1, iso_weeks_in_year(year - 1))
    if week > iso_weeks_in_year(year):
        return (year + 1, 1)
    return (year, week)


def twelve_hour(hour: int) -> int:
    """Convert a 0-23 hour to the 12-hour clock (1-12)."""
    return hour % 12 or 12


def meridian(hour: int) -> str:
    """Return "AM" before noon, "PM" otherwise."""
    return "AM" if hour < 12 else "PM"


def fraction_digits(nanosecond: int, width: int | None = None) -> str:
    """Render fractional seconds as a digit string.

    The nanoseconds are zero-padded to nine digits, then truncated to
    ``width`` digits or extended with trailing zeros.

    Args:
        nanosecond: Nanoseconds within the second.
        width: Number of digits, default 9.

    Examples:
        >>> fraction_digits(123456789, 3)
        '123'
        >>> fraction_digits(123456789, 12)
        '123456789000'
    """
    if width is None:
        width = NANOSECOND_DIGITS
    digits = f"{nanosecond:0{NANOSECOND_DIGITS}d}"
    if width <= NANOSECOND_DIGITS:
        return digits[:width]
    return digits + "0" * (width - NANOSECOND_DIGITS)


__all__ = [
    "TimeComponents",
    "resolve",
    "iso_weekday",
    "sunday_week",
    "monday_week",
    "iso_weeks_in_year",
    "iso_week_date",
    "twelve_hour",
    "meridian",
    "fraction_digits",
]
