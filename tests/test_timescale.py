"""
Test suite for time scale conversions.

Tests cover:
- Julian Day numbers for reference dates (including negative years)
- January/February month shift
- Julian centuries, UNIX time and datetime conversion
- Date validation in strict and relaxed mode
"""

import pytest
from datetime import datetime, timezone, timedelta
from orrery import (julian_day, julian_centuries, centuries_from_date,
                    unix_to_centuries, datetime_to_centuries,
                    is_leap_year, days_in_month, validate_date,
                    InvalidDate, temp_config)
from orrery.timescale import J2000_UNIX


class TestJulianDay:
    """Gregorian date to Julian Day number at noon."""

    @pytest.mark.parametrize("date, jd", [
        ((2000, 1, 1), 2451545),
        ((1987, 1, 27), 2446823),
        ((1858, 11, 17), 2400001),
        ((1582, 10, 15), 2299161),
        ((2024, 2, 29), 2460370),
        ((1000, 1, 1), 2086303),
        ((-2999, 1, 1), 625698),
    ])
    def test_reference_dates(self, date, jd):
        assert julian_day(*date) == jd

    def test_epoch_outside_supported_range(self):
        """Day zero (4714 BC November 24) needs validation switched off."""
        with pytest.raises(InvalidDate):
            julian_day(-4713, 11, 24)
        assert julian_day(-4713, 11, 24, validate=False) == 0

    def test_january_february_shift(self):
        """Leap day is counted when crossing from February to March."""
        assert julian_day(2000, 3, 1) - julian_day(2000, 2, 28) == 2
        assert julian_day(1900, 3, 1) - julian_day(1900, 2, 28) == 1
        assert julian_day(2001, 1, 1) - julian_day(2000, 12, 31) == 1

    def test_year_length(self):
        assert julian_day(2001, 1, 1) - julian_day(2000, 1, 1) == 366
        assert julian_day(2002, 1, 1) - julian_day(2001, 1, 1) == 365

    def test_range_limits(self):
        """Both ends of the supported range convert without error."""
        assert julian_day(-2999, 1, 1) < julian_day(3000, 12, 31)

    def test_invalid_date_raises(self):
        with pytest.raises(InvalidDate):
            julian_day(2001, 2, 29)

    def test_validation_can_be_skipped(self):
        # March 1st arithmetic for a nonexistent Feb 29th
        assert julian_day(2001, 2, 29, validate=False) == julian_day(2001, 3, 1)


class TestJulianCenturies:
    """Julian Day to centuries since J2000.0."""

    def test_epoch_is_zero(self):
        assert julian_centuries(2451545) == 0.0

    def test_one_century(self):
        assert julian_centuries(2451545 + 36525) == pytest.approx(1.0)

    def test_before_epoch_is_negative(self):
        assert centuries_from_date(1900, 1, 1) < 0

    def test_from_date(self):
        assert centuries_from_date(2000, 1, 1) == 0.0
        assert centuries_from_date(2100, 1, 1) == pytest.approx(1.0, abs=1e-4)


class TestUnixTime:
    """UNIX time and datetime conversion."""

    def test_j2000_unix(self):
        assert unix_to_centuries(J2000_UNIX) == 0.0

    def test_one_day(self):
        assert unix_to_centuries(J2000_UNIX + 86400) == pytest.approx(1/36525)

    def test_datetime_matches_unix(self):
        dt = datetime(2020, 6, 1, 0, 0, 0, tzinfo=timezone.utc)
        assert datetime_to_centuries(dt) == pytest.approx(
            unix_to_centuries(dt.timestamp()), abs=1e-15)

    def test_naive_datetime_is_utc(self):
        naive = datetime(2010, 5, 5, 12, 0, 0)
        aware = naive.replace(tzinfo=timezone.utc)
        assert datetime_to_centuries(naive) == datetime_to_centuries(aware)

    def test_timezone_offset_respected(self):
        utc = datetime(2010, 5, 5, 12, 0, 0, tzinfo=timezone.utc)
        plus_two = datetime(2010, 5, 5, 14, 0, 0, tzinfo=timezone(timedelta(hours=2)))
        assert datetime_to_centuries(utc) == pytest.approx(datetime_to_centuries(plus_two))

    def test_close_to_calendar_noon(self):
        """UNIX epoch constant is J2000.0 within a few minutes of UTC noon."""
        noon = datetime(2000, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
        assert abs(datetime_to_centuries(noon)) * 36525 * 1440 < 2


class TestCalendarHelpers:
    """Leap years and month lengths."""

    @pytest.mark.parametrize("year, leap", [
        (2000, True), (1900, False), (2024, True), (2023, False),
        (0, True), (-4, True), (-100, False), (-400, True),
    ])
    def test_is_leap_year(self, year, leap):
        assert is_leap_year(year) is leap

    def test_days_in_month(self):
        assert days_in_month(2024, 2) == 29
        assert days_in_month(2023, 2) == 28
        assert days_in_month(2023, 4) == 30
        assert days_in_month(2023, 12) == 31

    def test_days_in_bad_month(self):
        with pytest.raises(InvalidDate):
            days_in_month(2023, 13)


class TestValidateDate:
    """Date validation behavior."""

    def test_valid(self):
        assert validate_date(2024, 2, 29) is True

    @pytest.mark.parametrize("date", [
        (2023, 2, 29),
        (2023, 0, 1),
        (2023, 13, 1),
        (2023, 4, 31),
        (2023, 1, 0),
        (-3000, 1, 1),
        (3001, 1, 1),
        (2023.5, 1, 1),
        (2023, "1", 1),
    ])
    def test_invalid_raises(self, date):
        with pytest.raises(InvalidDate):
            validate_date(*date)

    def test_invalid_date_is_value_error(self):
        with pytest.raises(ValueError):
            validate_date(2023, 2, 30)

    def test_relaxed_validation_warns(self):
        with temp_config(STRICT_VALIDATION=False):
            with pytest.warns(UserWarning, match="Day must be in 1-28"):
                assert validate_date(2023, 2, 29) is False
