"""Tests for format string tokenizing."""

from __future__ import annotations

import pytest

from rstrftime.errors import MalformedDirectiveError, StrftimeError
from rstrftime.format.parser import (
    Directive,
    DirectiveSpec,
    Flag,
    Literal,
    parse,
)


def _spec(conversion: str, flags=(), colons: int = 0, width=None) -> DirectiveSpec:
    return DirectiveSpec(
        flags=frozenset(flags), colons=colons, width=width, conversion=conversion
    )


class TestParseLiterals:
    """Tests for literal text handling."""

    def test_empty_format(self) -> None:
        """Empty format yields no tokens."""
        assert parse("") == []

    def test_plain_text(self) -> None:
        """Text without % is one literal."""
        assert parse("hello, world") == [Literal("hello, world")]

    def test_non_ascii_text(self) -> None:
        """Non-ASCII characters are literal text."""
        assert parse("⌘%m⌘") == [Literal("⌘"), Directive(_spec("m")), Literal("⌘")]

    def test_percent_escape(self) -> None:
        """%% becomes a literal % merged with surrounding text."""
        assert parse("100%% sure") == [Literal("100% sure")]

    def test_percent_escape_ignores_flags(self) -> None:
        """Flags and width on %% are dropped."""
        assert parse("%-5%") == [Literal("%")]


class TestParseDirectives:
    """Tests for directive specs."""

    def test_bare_directive(self) -> None:
        """A bare directive has no flags, colons or width."""
        assert parse("%Y") == [Directive(_spec("Y"))]

    def test_prefix_and_suffix(self) -> None:
        """Literal text around a directive is preserved in order."""
        assert parse("pre%mpost") == [
            Literal("pre"),
            Directive(_spec("m")),
            Literal("post"),
        ]

    @pytest.mark.parametrize(
        "fmt,flag",
        [
            ("%-m", Flag.NO_PAD),
            ("%_m", Flag.SPACE_PAD),
            ("%0m", Flag.ZERO_PAD),
            ("%^m", Flag.UPCASE),
        ],
    )
    def test_single_flag(self, fmt: str, flag: Flag) -> None:
        """Each flag character maps to its Flag."""
        assert parse(fmt) == [Directive(_spec("m", flags=[flag]))]

    def test_later_pad_flag_wins(self) -> None:
        """Only the last padding flag is kept."""
        (token,) = parse("%-_0e")
        assert token.spec.pad_flag is Flag.ZERO_PAD
        assert token.spec.flags == frozenset({Flag.ZERO_PAD})

    def test_upcase_combines_with_pad_flag(self) -> None:
        """Upcase is kept alongside a padding flag."""
        (token,) = parse("%^_10B")
        assert token.spec.flags == frozenset({Flag.UPCASE, Flag.SPACE_PAD})
        assert token.spec.upcase is True
        assert token.spec.width == 10

    def test_width(self) -> None:
        """Digits after the flags are the width."""
        assert parse("%12N") == [Directive(_spec("N", width=12))]

    def test_zero_flag_then_width(self) -> None:
        """A leading 0 is a flag, the remaining digits are the width."""
        assert parse("%010d") == [Directive(_spec("d", flags=[Flag.ZERO_PAD], width=10))]

    def test_no_width_is_none(self) -> None:
        """Missing width is None, not zero."""
        (token,) = parse("%N")
        assert token.spec.width is None

    @pytest.mark.parametrize("colons", [1, 2, 3])
    def test_colons_counted(self, colons: int) -> None:
        """Colons before z are counted."""
        assert parse("%" + ":" * colons + "z") == [Directive(_spec("z", colons=colons))]

    def test_too_many_colons_pass_through(self) -> None:
        """More than three colons make the zone directive literal text."""
        assert parse("%::::z") == [Literal("%::::z")]


class TestParseUnknownConversions:
    """Tests for conversions outside the vocabulary."""

    @pytest.mark.parametrize("fmt", ["%&", "%⌘", "%J", "%q"])
    def test_passes_through(self, fmt: str) -> None:
        """Unknown conversions are copied with their %."""
        assert parse(fmt) == [Literal(fmt)]

    def test_flags_and_width_discarded(self) -> None:
        """Flags and width before an unknown conversion are dropped."""
        assert parse("a%-_12&b") == [Literal("a%&b")]


class TestParseErrors:
    """Tests for malformed directives."""

    @pytest.mark.parametrize("fmt", ["%", "abc%", "%-", "%^0", "%:", "%12"])
    def test_trailing_directive_raises(self, fmt: str) -> None:
        """A format ending inside a directive is malformed."""
        with pytest.raises(MalformedDirectiveError):
            parse(fmt)

    def test_error_carries_position(self) -> None:
        """The error records the format and where the directive started."""
        with pytest.raises(MalformedDirectiveError) as excinfo:
            parse("%Y-%-")
        assert excinfo.value.position == 3
        assert excinfo.value.format == "%Y-%-"
        assert "position 3" in str(excinfo.value)

    def test_error_hierarchy(self) -> None:
        """MalformedDirectiveError is a StrftimeError and a ValueError."""
        assert issubclass(MalformedDirectiveError, StrftimeError)
        assert issubclass(MalformedDirectiveError, ValueError)
