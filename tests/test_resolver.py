"""Tests for TimeComponents resolution."""

from __future__ import annotations

import datetime

import pytest

from rstrftime.format.resolver import (
    fraction_digits,
    iso_week_date,
    iso_weeks_in_year,
    meridian,
    resolve,
    twelve_hour,
)
from rstrftime.source import Instant


class TestResolve:
    """Tests for resolve()."""

    def test_copies_source_fields(self, reference_time: Instant) -> None:
        """Wall-clock and zone fields come straight from the source."""
        c = resolve(reference_time)
        assert (c.year, c.month, c.day) == (2006, 1, 2)
        assert (c.hour, c.minute, c.second) == (15, 4, 5)
        assert c.nanosecond == 123_456_789
        assert c.zone_name == "EST"
        assert c.utc_offset == -18000

    def test_derived_fields(self, reference_time: Instant) -> None:
        """Weekday numbers, weeks and day of year are derived."""
        c = resolve(reference_time)
        assert c.weekday == 1
        assert c.iso_weekday == 1
        assert c.day_of_year == 2
        assert (c.iso_year, c.iso_week) == (2006, 1)
        assert c.sunday_week == 1
        assert c.monday_week == 1
        assert c.epoch_seconds == 1136232245

    def test_sunday_before_first_monday(self) -> None:
        """2006-01-01 is in week 52 of ISO year 2005."""
        c = resolve(Instant.of(2006, 1, 1))
        assert c.iso_weekday == 7
        assert (c.iso_year, c.iso_week) == (2005, 52)
        assert c.sunday_week == 1
        assert c.monday_week == 0

    def test_results_are_fresh(self, reference_time: Instant) -> None:
        """Each call builds an equal but distinct value."""
        first = resolve(reference_time)
        second = resolve(reference_time)
        assert first == second
        assert first is not second

    def test_components_are_frozen(self, reference_time: Instant) -> None:
        """TimeComponents cannot be mutated."""
        c = resolve(reference_time)
        with pytest.raises(AttributeError):
            c.year = 2007  # type: ignore[misc]

    def test_missing_zone_name(self) -> None:
        """A None zone name resolves to the empty string."""

        class Source:
            year, month, day = 2006, 1, 2
            hour, minute, second, nanosecond = 0, 0, 0, 0
            weekday = 1
            zone_name = None
            utc_offset = 0

        assert resolve(Source()).zone_name == ""


class TestISOWeeks:
    """Tests for ISO 8601 week numbering."""

    @pytest.mark.parametrize(
        "ymd",
        [
            (2004, 12, 31),
            (2005, 1, 1),
            (2005, 1, 3),
            (2008, 12, 29),
            (2009, 12, 31),
            (2010, 1, 3),
            (2010, 1, 4),
            (2020, 12, 31),
            (2021, 1, 3),
            (2024, 12, 30),
            (2026, 10, 18),
        ],
    )
    def test_matches_stdlib(self, ymd: tuple[int, int, int]) -> None:
        """ISO week-year and week agree with date.isocalendar()."""
        c = resolve(Instant.of(*ymd))
        iso = datetime.date(*ymd).isocalendar()
        assert (c.iso_year, c.iso_week, c.iso_weekday) == (iso[0], iso[1], iso[2])

    def test_late_december_thursday_stays_in_year(self) -> None:
        """Thursday 2026-12-31 belongs to week 53 of its own year."""
        assert iso_week_date(2026, 365, 4) == (2026, 53)

    def test_late_december_monday_is_next_year(self) -> None:
        """Monday 2008-12-29 starts week 1 of 2009."""
        assert iso_week_date(2008, 364, 1) == (2009, 1)

    @pytest.mark.parametrize(
        "year,weeks", [(2004, 53), (2005, 52), (2009, 53), (2015, 53), (2020, 53), (2021, 52)]
    )
    def test_weeks_in_year(self, year: int, weeks: int) -> None:
        """Years starting on Thursday, or leap years on Wednesday, have 53 weeks."""
        assert iso_weeks_in_year(year) == weeks


class TestClockHelpers:
    """Tests for 12-hour clock helpers."""

    @pytest.mark.parametrize(
        "hour,expected", [(0, 12), (1, 1), (11, 11), (12, 12), (13, 1), (23, 11)]
    )
    def test_twelve_hour(self, hour: int, expected: int) -> None:
        """Midnight and noon are 12, afternoon hours wrap."""
        assert twelve_hour(hour) == expected

    def test_meridian(self) -> None:
        """AM before noon, PM from noon."""
        assert meridian(0) == "AM"
        assert meridian(11) == "AM"
        assert meridian(12) == "PM"
        assert meridian(23) == "PM"


class TestFractionDigits:
    """Tests for fractional second digits."""

    def test_default_is_nine_digits(self) -> None:
        """No width gives nanosecond precision."""
        assert fraction_digits(123_456_789) == "123456789"

    def test_leading_zeros_kept(self) -> None:
        """Small values keep their leading zeros."""
        assert fraction_digits(5_000, 6) == "000005"

    def test_truncates(self) -> None:
        """Narrow widths truncate, never round."""
        assert fraction_digits(999_999_999, 3) == "999"
        assert fraction_digits(123_456_789, 1) == "1"

    def test_extends_with_zeros(self) -> None:
        """Widths past nine digits append zeros."""
        assert fraction_digits(123_456_789, 12) == "123456789000"

    def test_zero_width(self) -> None:
        """An explicit zero width yields no digits."""
        assert fraction_digits(123_456_789, 0) == ""
