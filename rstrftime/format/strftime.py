"""strftime-style formatting.

This module provides the public entry point: render a timestamp with a
Ruby-compatible strftime format string.

Supported Directives:
    %Y - Year, at least 4 digits (2006)
    %C - Century (20)
    %y - Year without century (06)
    %m - Month (01-12)
    %d - Day of month (01-31)
    %e - Day of month, blank-padded ( 1-31)
    %j - Day of year (001-366)
    %H - Hour, 24-hour (00-23)
    %k - Hour, 24-hour, blank-padded ( 0-23)
    %I - Hour, 12-hour (01-12)
    %l - Hour, 12-hour, blank-padded ( 1-12)
    %M - Minute (00-59)
    %S - Second (00-60)
    %N - Fractional seconds, width is the digit count (default 9)
    %L - Milliseconds, width is the digit count (default 3)
    %a, %A - Weekday name (Mon, Monday)
    %b, %h, %B - Month name (Jan, Jan, January)
    %p, %P - Meridian (AM, am)
    %u - ISO weekday (1-7, Monday is 1)
    %w - Weekday (0-6, Sunday is 0)
    %U - Week of year, weeks start Sunday (00-53)
    %W - Week of year, weeks start Monday (00-53)
    %V - ISO 8601 week (01-53)
    %G - ISO 8601 week-year
    %g - ISO 8601 week-year without century
    %z - UTC offset (-0500); %:z (-05:00); %::z (-05:00:00)
    %Z - Zone abbreviation (EST)
    %s - Seconds since the Unix epoch
    %Q - Microseconds since the Unix epoch
    %n, %t - Newline, tab
    %c, %D, %F, %r, %R, %T, %x, %X, %v, %+ - Combinations of the above
    %% - Literal %

Flags (between % and the conversion):
    -  don't pad
    _  pad with spaces
    0  pad with zeros
    ^  uppercase the result

Any other character after % is copied to the output along with the %.

Examples:
    >>> from rstrftime.source import Instant
    >>> t = Instant.of(2006, 1, 2, 15, 4, 5, 123456789,
    ...                utc_offset=-18000, zone_name="EST")
    >>> strftime("%a, %b %d, %Y %z", t)
    'Mon, Jan 02, 2006 -0500'
    >>> strftime("%3N %:z %Z", t)
    '123 -05:00 EST'
"""

from __future__ import annotations

import datetime as _dt
import logging
from typing import Union

from rstrftime.errors import MalformedDirectiveError
from rstrftime.format.parser import parse
from rstrftime.format.renderer import render_tokens
from rstrftime.format.resolver import resolve
from rstrftime.source import TimeSource, from_datetime

logger = logging.getLogger(__name__)

# Type alias for values strftime accepts
TimeValue = Union[TimeSource, _dt.datetime]


def strftime(fmt: str, value: TimeValue) -> str:
    """Format a timestamp using a strftime-style format string.

    Args:
        fmt: Format string with %-directives.
        value: A TimeSource, or a datetime.datetime which is adapted
            with from_datetime().

    Returns:
        Formatted string.

    Raises:
        MalformedDirectiveError: If fmt ends with an incomplete directive.
        TypeError: If fmt is not a string or value is not a time.

    Examples:
        >>> from datetime import datetime, timedelta, timezone
        >>> edt = timezone(timedelta(hours=-4), "EDT")
        >>> strftime("%Z %z %:z %::z", datetime(2017, 7, 10, 18, 45, tzinfo=edt))
        'EDT -0400 -04:00 -04:00:00'
    """
    if not isinstance(fmt, str):
        raise TypeError(f"format must be a string, got {type(fmt).__name__}")

    if isinstance(value, _dt.datetime):
        value = from_datetime(value)
    elif not isinstance(value, TimeSource):
        raise TypeError(
            f"expected a TimeSource or datetime, got {type(value).__name__}"
        )

    try:
        tokens = parse(fmt)
    except MalformedDirectiveError as e:
        logger.debug("cannot render format %r: %s", fmt, e)
        raise

    return render_tokens(tokens, resolve(value))


render = strftime


__all__ = ["strftime", "render", "TimeValue"]
