"""UTC offset and zone name rendering.

Offsets render as ``+HHMM`` with no colons, ``+HH:MM`` with one, and
``+HH:MM:SS`` with two or three. Offsets are whole seconds; there is no
fractional-offset form, so three colons add nothing over two.
"""

from __future__ import annotations

from rstrftime._internal.constants import (
    MAX_COLONS,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)


def format_offset(offset_seconds: int, colons: int = 0) -> str:
    """Format a UTC offset.

    Args:
        offset_seconds: Offset from UTC in seconds, east positive.
        colons: Number of colons requested (0-3).

    Returns:
        The signed offset string.

    Raises:
        ValueError: If colons is outside 0-3.

    Examples:
        >>> format_offset(-18000)
        '-0500'
        >>> format_offset(19800, 1)
        '+05:30'
        >>> format_offset(-18000, 2)
        '-05:00:00'
    """
    if colons < 0 or colons > MAX_COLONS:
        raise ValueError(f"colons must be 0-{MAX_COLONS}, got {colons}")

    sign = "+" if offset_seconds >= 0 else "-"
    total = abs(offset_seconds)
    hours, rest = divmod(total, SECONDS_PER_HOUR)
    minutes, seconds = divmod(rest, SECONDS_PER_MINUTE)

    if colons == 0:
        return f"{sign}{hours:02d}{minutes:02d}"
    if colons == 1:
        return f"{sign}{hours:02d}:{minutes:02d}"
    return f"{sign}{hours:02d}:{minutes:02d}:{seconds:02d}"


def abbrev(zone_name: str | None) -> str:
    """Return the zone abbreviation, or "" when the zone has none."""
    return zone_name or ""


__all__ = ["format_offset", "abbrev"]
