"""rstrftime: Ruby-compatible strftime for Python.

rstrftime renders timestamps with the strftime directive set used by
Ruby's Time#strftime, including padding flags, field widths, nanosecond
fractions, ISO 8601 weeks, and colon variants of the UTC offset.

Entry Points:
    strftime: Format a timestamp with a format string
    render: Alias of strftime

Time Sources:
    TimeSource: Protocol for anything strftime can format
    Instant: Frozen timestamp value with zone name and offset
    from_datetime: Adapt a datetime.datetime

Exceptions:
    StrftimeError: Base exception
    MalformedDirectiveError: Format string ends inside a directive
    UnsupportedDirectiveError: Directive cannot be rendered
    ValidationError: Invalid timestamp fields

Example:
    >>> from datetime import datetime, timedelta, timezone
    >>> from rstrftime import strftime
    >>> est = timezone(timedelta(hours=-5), "EST")
    >>> strftime("%+", datetime(2006, 1, 2, 15, 4, 5, tzinfo=est))
    'Mon Jan  2 15:04:05 EST 2006'
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Exceptions
from rstrftime.errors import (
    MalformedDirectiveError,
    StrftimeError,
    UnsupportedDirectiveError,
    ValidationError,
)

# Time sources
from rstrftime.source import Instant, TimeSource, from_datetime

# Format functions
from rstrftime.format import render, strftime

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    # Entry points
    "strftime",
    "render",
    # Time sources
    "TimeSource",
    "Instant",
    "from_datetime",
    # Exceptions
    "StrftimeError",
    "MalformedDirectiveError",
    "UnsupportedDirectiveError",
    "ValidationError",
]
