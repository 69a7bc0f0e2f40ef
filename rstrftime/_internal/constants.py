"""Internal constants for rstrftime.

These constants define the name tables, limits, and directive vocabulary
used throughout the library. This module is not part of the public API.
"""

from __future__ import annotations

# Time unit conversions
NANOS_PER_MICROSECOND: int = 1_000
NANOS_PER_SECOND: int = 1_000_000_000
MICROS_PER_SECOND: int = 1_000_000

SECONDS_PER_MINUTE: int = 60
SECONDS_PER_HOUR: int = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY: int = 24 * SECONDS_PER_HOUR  # 86_400

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# Weekday names, indexed 0=Sunday .. 6=Saturday
WEEKDAY_NAMES: tuple[str, ...] = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)
WEEKDAY_ABBREVIATIONS: tuple[str, ...] = tuple(name[:3] for name in WEEKDAY_NAMES)

# Month names, 1-indexed
MONTH_NAMES: tuple[str, ...] = (
    "",
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)
MONTH_ABBREVIATIONS: tuple[str, ...] = tuple(name[:3] for name in MONTH_NAMES)

# Fractional second digits
NANOSECOND_DIGITS: int = 9
MILLISECOND_DIGITS: int = 3

# Directive syntax
DIRECTIVE_CHAR: str = "%"
COLON_CHAR: str = ":"
MAX_COLONS: int = 3

# Directives that expand to other directives
COMPOSITE_FORMATS: dict[str, str] = {
    "c": "%a %b %e %H:%M:%S %Y",
    "D": "%m/%d/%y",
    "F": "%Y-%m-%d",
    "r": "%I:%M:%S %p",
    "R": "%H:%M",
    "T": "%H:%M:%S",
    "x": "%m/%d/%y",
    "X": "%H:%M:%S",
    "v": "%e-%b-%Y",
    "+": "%a %b %e %H:%M:%S %Z %Y",
}

# Every conversion character the renderer understands, besides "%"
CONVERSION_CHARS: frozenset[str] = frozenset(
    "YCymdejHkIlMSNLaAbhBpPuwUWVGgzZsQnt"
) | frozenset(COMPOSITE_FORMATS)


__all__ = [
    "NANOS_PER_MICROSECOND",
    "NANOS_PER_SECOND",
    "MICROS_PER_SECOND",
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_DAY",
    "DAYS_IN_MONTH",
    "WEEKDAY_NAMES",
    "WEEKDAY_ABBREVIATIONS",
    "MONTH_NAMES",
    "MONTH_ABBREVIATIONS",
    "NANOSECOND_DIGITS",
    "MILLISECOND_DIGITS",
    "DIRECTIVE_CHAR",
    "COLON_CHAR",
    "MAX_COLONS",
    "COMPOSITE_FORMATS",
    "CONVERSION_CHARS",
]
