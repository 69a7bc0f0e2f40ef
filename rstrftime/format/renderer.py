"""Directive rendering.

Each conversion character maps to a Conversion: a function producing the
raw text and the default field width and fill character. Padding is then
decided in this order, each step overriding the previous one:

    1. The conversion's default width and fill.
    2. ``0`` sets the fill to zeros.
    3. ``_`` sets the fill to spaces.
    4. ``-`` removes padding entirely.
    5. An explicit width replaces the default width.
    6. ``^`` uppercases the result.

A width smaller than the raw text never truncates it. Zero fill goes
after a leading sign, space fill before it.

Examples:
    >>> from rstrftime.format.parser import parse
    >>> from rstrftime.format.resolver import resolve
    >>> from rstrftime.source import Instant
    >>> c = resolve(Instant.of(2017, 7, 10, 18, 45))
    >>> render_tokens(parse("%B %^B %m %_m %-m %6Y"), c)
    'July JULY 07  7 7 002017'
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Union

from rstrftime._internal.constants import (
    COMPOSITE_FORMATS,
    MICROS_PER_SECOND,
    MILLISECOND_DIGITS,
    MONTH_ABBREVIATIONS,
    MONTH_NAMES,
    NANOS_PER_MICROSECOND,
    WEEKDAY_ABBREVIATIONS,
    WEEKDAY_NAMES,
)
from rstrftime.errors import UnsupportedDirectiveError
from rstrftime.format.parser import (
    Directive,
    DirectiveSpec,
    Flag,
    Literal,
    Token,
    parse,
)
from rstrftime.format.resolver import TimeComponents, fraction_digits
from rstrftime.format.zone import abbrev, format_offset

ValueFunc = Callable[[TimeComponents, DirectiveSpec], str]
WidthFunc = Callable[[TimeComponents], int]


@dataclass(frozen=True)
class Conversion:
    """How to render one conversion character.

    Attributes:
        value: Produces the unpadded text.
        width: Default field width, or a function of the components.
        fill: Default fill character.
        padded: False when the conversion uses the width itself
            (fraction digits) or takes no padding at all.
    """

    value: ValueFunc
    width: Union[int, WidthFunc] = 0
    fill: str = " "
    padded: bool = True


def _year_width(year: int) -> int:
    # four digits after the sign
    return 4 if year >= 0 else 5


def _number(get: Callable[[TimeComponents], int]) -> ValueFunc:
    return lambda c, spec: str(get(c))


def _fraction(default_digits: int | None) -> ValueFunc:
    def value(c: TimeComponents, spec: DirectiveSpec) -> str:
        width = spec.width if spec.width is not None else default_digits
        return fraction_digits(c.nanosecond, width)

    return value


def _composite(expansion: str) -> ValueFunc:
    def value(c: TimeComponents, spec: DirectiveSpec) -> str:
        return render_tokens(parse(expansion), c)

    return value


def _epoch_micros(c: TimeComponents) -> int:
    return c.epoch_seconds * MICROS_PER_SECOND + c.nanosecond // NANOS_PER_MICROSECOND


CONVERSIONS: dict[str, Conversion] = {
    # Date
    "Y": Conversion(_number(lambda c: c.year), lambda c: _year_width(c.year), "0"),
    "C": Conversion(_number(lambda c: c.year // 100), 2, "0"),
    "y": Conversion(_number(lambda c: c.year % 100), 2, "0"),
    "m": Conversion(_number(lambda c: c.month), 2, "0"),
    "d": Conversion(_number(lambda c: c.day), 2, "0"),
    "e": Conversion(_number(lambda c: c.day), 2, " "),
    "j": Conversion(_number(lambda c: c.day_of_year), 3, "0"),
    # Time of day
    "H": Conversion(_number(lambda c: c.hour), 2, "0"),
    "k": Conversion(_number(lambda c: c.hour), 2, " "),
    "I": Conversion(_number(lambda c: c.hour12), 2, "0"),
    "l": Conversion(_number(lambda c: c.hour12), 2, " "),
    "M": Conversion(_number(lambda c: c.minute), 2, "0"),
    "S": Conversion(_number(lambda c: c.second), 2, "0"),
    "N": Conversion(_fraction(None), padded=False),
    "L": Conversion(_fraction(MILLISECOND_DIGITS), padded=False),
    "p": Conversion(lambda c, spec: c.meridian),
    "P": Conversion(lambda c, spec: c.meridian.lower()),
    # Names
    "a": Conversion(lambda c, spec: WEEKDAY_ABBREVIATIONS[c.weekday]),
    "A": Conversion(lambda c, spec: WEEKDAY_NAMES[c.weekday]),
    "b": Conversion(lambda c, spec: MONTH_ABBREVIATIONS[c.month]),
    "h": Conversion(lambda c, spec: MONTH_ABBREVIATIONS[c.month]),
    "B": Conversion(lambda c, spec: MONTH_NAMES[c.month]),
    # Weekdays and weeks
    "u": Conversion(_number(lambda c: c.iso_weekday), 1, "0"),
    "w": Conversion(_number(lambda c: c.weekday), 1, "0"),
    "U": Conversion(_number(lambda c: c.sunday_week), 2, "0"),
    "W": Conversion(_number(lambda c: c.monday_week), 2, "0"),
    "V": Conversion(_number(lambda c: c.iso_week), 2, "0"),
    "G": Conversion(
        _number(lambda c: c.iso_year), lambda c: _year_width(c.iso_year), "0"
    ),
    "g": Conversion(_number(lambda c: c.iso_year % 100), 2, "0"),
    # Zone
    "z": Conversion(lambda c, spec: format_offset(c.utc_offset, spec.colons), 0, "0"),
    "Z": Conversion(lambda c, spec: abbrev(c.zone_name)),
    # Epoch
    "s": Conversion(_number(lambda c: c.epoch_seconds), 0, "0"),
    "Q": Conversion(_number(_epoch_micros), 0, "0"),
    # Whitespace
    "n": Conversion(lambda c, spec: "\n", padded=False),
    "t": Conversion(lambda c, spec: "\t", padded=False),
}
CONVERSIONS.update(
    {conv: Conversion(_composite(fmt)) for conv, fmt in COMPOSITE_FORMATS.items()}
)


def pad(value: str, width: int, fill: str) -> str:
    """Pad value on the left to width.

    Zero fill is inserted after a leading sign. A width at or below the
    value's length leaves it unchanged.

    Examples:
        >>> pad("-500", 6, "0")
        '-00500'
        >>> pad("7", 2, " ")
        ' 7'
        >>> pad("15", 1, "0")
        '15'
    """
    if len(value) >= width:
        return value
    if fill == "0" and value[:1] in ("+", "-"):
        return value[0] + value[1:].rjust(width - 1, fill)
    return value.rjust(width, fill)


def render_directive(spec: DirectiveSpec, components: TimeComponents) -> str:
    """Render a single directive.

    Raises:
        UnsupportedDirectiveError: If no conversion is registered for
            spec.conversion.
    """
    conversion = CONVERSIONS.get(spec.conversion)
    if conversion is None:
        raise UnsupportedDirectiveError(
            f"no conversion registered for %{spec.conversion}"
        )

    text = conversion.value(components, spec)

    if conversion.padded:
        fill = conversion.fill
        pad_flag = spec.pad_flag
        if pad_flag is Flag.ZERO_PAD:
            fill = "0"
        elif pad_flag is Flag.SPACE_PAD:
            fill = " "

        if pad_flag is Flag.NO_PAD:
            width = 0
        elif spec.width is not None:
            width = spec.width
        elif callable(conversion.width):
            width = conversion.width(components)
        else:
            width = conversion.width

        text = pad(text, width, fill)

    if spec.upcase:
        text = text.upper()
    return text


def render_tokens(tokens: list[Token], components: TimeComponents) -> str:
    """Render parsed tokens against resolved components.

    Args:
        tokens: Output of parse().
        components: Output of resolve().

    Returns:
        The rendered text.
    """
    out: list[str] = []
    for token in tokens:
        if isinstance(token, Literal):
            out.append(token.text)
        elif isinstance(token, Directive):
            out.append(render_directive(token.spec, components))
        else:
            raise TypeError(f"expected Literal or Directive, got {type(token).__name__}")
    return "".join(out)


__all__ = ["Conversion", "CONVERSIONS", "pad", "render_directive", "render_tokens"]
