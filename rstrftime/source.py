"""Time sources consumed by the renderer.

The renderer never reads process-wide timezone state. Everything it knows
about an instant comes from a TimeSource: the local wall-clock fields, the
weekday, and the zone name and UTC offset in effect at that instant.

Any object with the right attributes satisfies the protocol. Two concrete
options are provided:
    Instant: A frozen value type built from calendar fields.
    from_datetime: Adapter for the standard library's datetime.datetime.

Examples:
    >>> from rstrftime.source import Instant
    >>> t = Instant.of(2006, 1, 2, 15, 4, 5, utc_offset=-18000, zone_name="EST")
    >>> t.weekday
    1
"""

from __future__ import annotations

import datetime as _dt
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from rstrftime._internal.calendar import validate_date, weekday
from rstrftime._internal.constants import (
    NANOS_PER_MICROSECOND,
    NANOS_PER_SECOND,
    SECONDS_PER_DAY,
)
from rstrftime.errors import ValidationError


@runtime_checkable
class TimeSource(Protocol):
    """Read-only view of an instant in its attached timezone.

    Attributes:
        year: Calendar year (proleptic Gregorian, may be zero or negative).
        month: Month 1-12.
        day: Day of month 1-31.
        hour: Hour 0-23.
        minute: Minute 0-59.
        second: Second 0-60.
        nanosecond: Nanosecond within the second, 0-999999999.
        weekday: Day of week, 0=Sunday .. 6=Saturday.
        zone_name: Zone abbreviation such as "EST" (may be empty).
        utc_offset: Offset from UTC in seconds, east positive.
    """

    @property
    def year(self) -> int: ...

    @property
    def month(self) -> int: ...

    @property
    def day(self) -> int: ...

    @property
    def hour(self) -> int: ...

    @property
    def minute(self) -> int: ...

    @property
    def second(self) -> int: ...

    @property
    def nanosecond(self) -> int: ...

    @property
    def weekday(self) -> int: ...

    @property
    def zone_name(self) -> str: ...

    @property
    def utc_offset(self) -> int: ...


@dataclass(frozen=True)
class Instant:
    """An instant expressed as local wall-clock fields plus its zone.

    Prefer Instant.of(), which validates the fields and derives the
    weekday. The plain constructor trusts its arguments.
    """

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    nanosecond: int
    weekday: int
    zone_name: str = ""
    utc_offset: int = 0

    @classmethod
    def of(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        nanosecond: int = 0,
        *,
        utc_offset: int = 0,
        zone_name: str = "",
    ) -> Instant:
        """Create an Instant from calendar fields.

        Args:
            year: The year.
            month: The month (1-12).
            day: The day of month.
            hour: The hour (0-23).
            minute: The minute (0-59).
            second: The second (0-60, 60 for a leap second).
            nanosecond: Nanoseconds within the second.
            utc_offset: Offset from UTC in seconds, east positive.
            zone_name: Zone abbreviation.

        Returns:
            A new Instant with its weekday filled in.

        Raises:
            ValidationError: If any field is out of range.

        Examples:
            >>> Instant.of(2006, 1, 1).weekday  # Sunday
            0
        """
        validate_date(year, month, day)
        if hour < 0 or hour > 23:
            raise ValidationError(f"hour must be 0-23, got {hour}")
        if minute < 0 or minute > 59:
            raise ValidationError(f"minute must be 0-59, got {minute}")
        if second < 0 or second > 60:
            raise ValidationError(f"second must be 0-60, got {second}")
        if nanosecond < 0 or nanosecond >= NANOS_PER_SECOND:
            raise ValidationError(
                f"nanosecond must be 0-{NANOS_PER_SECOND - 1}, got {nanosecond}"
            )
        if abs(utc_offset) >= SECONDS_PER_DAY:
            raise ValidationError(
                f"utc_offset must be within +/-{SECONDS_PER_DAY - 1} seconds, "
                f"got {utc_offset}"
            )

        return cls(
            year=year,
            month=month,
            day=day,
            hour=hour,
            minute=minute,
            second=second,
            nanosecond=nanosecond,
            weekday=weekday(year, month, day),
            zone_name=zone_name,
            utc_offset=utc_offset,
        )


def from_datetime(value: _dt.datetime, nanosecond: int | None = None) -> Instant:
    """Adapt a standard library datetime to a TimeSource.

    Naive datetimes render with a zero offset and an empty zone name.

    Args:
        value: The datetime to adapt.
        nanosecond: Optional full-precision nanoseconds, overriding
            the datetime's microseconds.

    Returns:
        An Instant carrying the datetime's fields.

    Raises:
        TypeError: If value is not a datetime.

    Examples:
        >>> from datetime import datetime, timedelta, timezone
        >>> est = timezone(timedelta(hours=-5), "EST")
        >>> t = from_datetime(datetime(2006, 1, 2, 15, 4, 5, tzinfo=est))
        >>> (t.zone_name, t.utc_offset)
        ('EST', -18000)
    """
    if not isinstance(value, _dt.datetime):
        raise TypeError(f"expected datetime, got {type(value).__name__}")

    offset = value.utcoffset()
    utc_offset = int(offset.total_seconds()) if offset is not None else 0
    zone_name = value.tzname() or ""

    if nanosecond is None:
        nanosecond = value.microsecond * NANOS_PER_MICROSECOND
    elif nanosecond < 0 or nanosecond >= NANOS_PER_SECOND:
        raise ValidationError(
            f"nanosecond must be 0-{NANOS_PER_SECOND - 1}, got {nanosecond}"
        )

    return Instant(
        year=value.year,
        month=value.month,
        day=value.day,
        hour=value.hour,
        minute=value.minute,
        second=value.second,
        nanosecond=nanosecond,
        weekday=value.isoweekday() % 7,
        zone_name=zone_name,
        utc_offset=utc_offset,
    )


__all__ = ["TimeSource", "Instant", "from_datetime"]
