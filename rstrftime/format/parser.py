"""Format string tokenizer.

A format string is scanned once, left to right, into a list of tokens:
runs of literal text and directive specifications. A directive is::

    %[flags][colons][width]conversion

where flags are any of ``-`` (no padding), ``_`` (pad with spaces),
``0`` (pad with zeros) and ``^`` (uppercase), colons only matter for
``z``, and width is a decimal field length.

Conversions outside the known vocabulary are not errors. The ``%`` and
the conversion character pass through as literal text and any flags or
width seen before them are dropped.

Examples:
    >>> parse("%Y-%m")
    [Directive(spec=DirectiveSpec(flags=frozenset(), colons=0, width=None, conversion='Y')), Literal(text='-'), Directive(spec=DirectiveSpec(flags=frozenset(), colons=0, width=None, conversion='m'))]

    >>> parse("100%%")
    [Literal(text='100%')]
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Union

from rstrftime._internal.constants import (
    COLON_CHAR,
    CONVERSION_CHARS,
    DIRECTIVE_CHAR,
    MAX_COLONS,
)
from rstrftime.errors import MalformedDirectiveError

logger = logging.getLogger(__name__)


class Flag(enum.Enum):
    """Modifier characters that may precede a conversion."""

    NO_PAD = "-"
    SPACE_PAD = "_"
    ZERO_PAD = "0"
    UPCASE = "^"


_PAD_FLAGS = frozenset({Flag.NO_PAD, Flag.SPACE_PAD, Flag.ZERO_PAD})


@dataclass(frozen=True)
class DirectiveSpec:
    """A parsed directive.

    Attributes:
        flags: At most one padding flag, plus Flag.UPCASE if present.
        colons: Number of colons before the conversion (0-3).
        width: Explicit field width, or None when not given.
        conversion: The conversion character.
    """

    flags: frozenset[Flag]
    colons: int
    width: int | None
    conversion: str

    @property
    def pad_flag(self) -> Flag | None:
        """Return the padding flag in effect, if any."""
        for flag in self.flags:
            if flag in _PAD_FLAGS:
                return flag
        return None

    @property
    def upcase(self) -> bool:
        return Flag.UPCASE in self.flags


@dataclass(frozen=True)
class Literal:
    """Text copied to the output unchanged."""

    text: str


@dataclass(frozen=True)
class Directive:
    """A directive to be expanded by the renderer."""

    spec: DirectiveSpec


Token = Union[Literal, Directive]

_FLAGS_BY_CHAR = {flag.value: flag for flag in Flag}


def parse(fmt: str) -> list[Token]:
    """Split a format string into literal and directive tokens.

    Args:
        fmt: The format string.

    Returns:
        Tokens in rendering order. Adjacent literal text is merged.

    Raises:
        MalformedDirectiveError: If the string ends inside a directive.

    Examples:
        >>> parse("%&")
        [Literal(text='%&')]

        >>> parse("%-_3e")[0].spec.pad_flag
        <Flag.SPACE_PAD: '_'>
    """
    tokens: list[Token] = []
    text: list[str] = []
    n = len(fmt)
    i = 0

    def flush() -> None:
        if text:
            tokens.append(Literal("".join(text)))
            text.clear()

    while i < n:
        ch = fmt[i]
        if ch != DIRECTIVE_CHAR:
            text.append(ch)
            i += 1
            continue

        start = i
        i += 1

        pad: Flag | None = None
        upcase = False
        while i < n and fmt[i] in _FLAGS_BY_CHAR:
            flag = _FLAGS_BY_CHAR[fmt[i]]
            if flag is Flag.UPCASE:
                upcase = True
            else:
                pad = flag  # later padding flags win
            i += 1

        colons = 0
        while i < n and fmt[i] == COLON_CHAR:
            colons += 1
            i += 1

        width: int | None = None
        digits_start = i
        while i < n and fmt[i].isdigit() and fmt[i].isascii():
            i += 1
        if i > digits_start:
            width = int(fmt[digits_start:i])

        if i >= n:
            raise MalformedDirectiveError(fmt, start)

        conversion = fmt[i]
        i += 1

        if conversion == DIRECTIVE_CHAR:
            text.append(DIRECTIVE_CHAR)
            continue

        if conversion not in CONVERSION_CHARS:
            logger.debug(
                "passing through unrecognized directive %r at position %d",
                fmt[start:i],
                start,
            )
            text.append(DIRECTIVE_CHAR + conversion)
            continue

        if conversion == "z" and colons > MAX_COLONS:
            logger.debug(
                "passing through zone directive with %d colons at position %d",
                colons,
                start,
            )
            text.append(fmt[start:i])
            continue

        flags = {Flag.UPCASE} if upcase else set()
        if pad is not None:
            flags.add(pad)

        flush()
        tokens.append(
            Directive(
                DirectiveSpec(
                    flags=frozenset(flags),
                    colons=colons,
                    width=width,
                    conversion=conversion,
                )
            )
        )

    flush()
    return tokens


__all__ = ["Flag", "DirectiveSpec", "Literal", "Directive", "Token", "parse"]
