"""rstrftime exception hierarchy.

All rstrftime-specific exceptions inherit from StrftimeError.
"""

from __future__ import annotations


class StrftimeError(Exception):
    """Base exception for all rstrftime errors."""

    pass


class ValidationError(StrftimeError, ValueError):
    """Invalid input values.

    Raised when a timestamp field is out of range.

    Examples:
        - Month value outside 1-12
        - Day value outside valid range for month
        - Nanosecond value outside 0-999999999
    """

    pass


class MalformedDirectiveError(StrftimeError, ValueError):
    """Format string contains an incomplete directive.

    Raised when a ``%`` (optionally followed by flags, colons, or a width)
    ends the format string with no conversion character.

    Attributes:
        format: The format string being parsed.
        position: Index of the ``%`` that starts the incomplete directive.
    """

    def __init__(self, format: str, position: int) -> None:
        self.format = format
        self.position = position
        super().__init__(
            f"incomplete directive at position {position} in format {format!r}: "
            f"{format[position:]!r} has no conversion character"
        )


class UnsupportedDirectiveError(StrftimeError):
    """A known conversion cannot be rendered with the given modifiers.

    No current conversion raises this; it is reserved for conversions
    whose flags or width cannot be honored.
    """

    pass


__all__ = [
    "StrftimeError",
    "ValidationError",
    "MalformedDirectiveError",
    "UnsupportedDirectiveError",
]
