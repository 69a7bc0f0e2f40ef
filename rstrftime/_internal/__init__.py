"""Internal utilities for rstrftime.

This module contains private implementation details:
    - Constants, name tables, and the directive vocabulary
    - Proleptic Gregorian calendar arithmetic

Note: This module is not part of the public API.
"""

from __future__ import annotations

from rstrftime._internal.calendar import (
    day_of_year,
    days_in_month,
    epoch_seconds,
    is_leap_year,
    validate_date,
    weekday,
    ymd_to_ordinal,
)

__all__: list[str] = [
    "day_of_year",
    "days_in_month",
    "epoch_seconds",
    "is_leap_year",
    "validate_date",
    "weekday",
    "ymd_to_ordinal",
]
