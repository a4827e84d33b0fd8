'''Orrery time scale conversions
Gregorian calendar dates, UNIX time and datetimes to Julian centuries since J2000.0
UTC and TT are treated as equal throughout'''

import numbers
from datetime import datetime, timezone
from .config import config
from .utils import validation_error, InvalidDate

# Julian Day of J2000.0 (2000 January 1, 12:00)
JD_J2000 = 2451545
DAYS_PER_CENTURY = 36525
SECONDS_PER_DAY = 86400
# J2000.0 as a UNIX timestamp [s]
J2000_UNIX = 946727935.816

# month lengths, February is resolved by days_in_month
_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    """Gregorian leap year rule (proleptic for years before 1582)."""
    if year % 100 == 0:
        return year % 400 == 0
    return year % 4 == 0


def days_in_month(year: int, month: int) -> int:
    """Number of days in the given month, leap-year aware."""
    if not 1 <= month <= 12:
        raise InvalidDate(f"Month must be in 1-12, got {month}")
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]


def validate_date(year, month, day) -> bool:
    """
    Check a Gregorian date against the supported calendar.

    Parameters
    ----------
    year : int
        Year in [config.MIN_YEAR, config.MAX_YEAR] (astronomical numbering,
        year 0 is 1 BC)
    month : int
        Month, 1-12
    day : int
        Day of month, 1 to the length of that month

    Returns
    -------
    bool
        True if the date is valid. False only when validation is relaxed
        (config.STRICT_VALIDATION = False) and a warning was issued.

    Raises
    ------
    InvalidDate
        If the date is not valid and config.STRICT_VALIDATION is True
    """
    for name, value in (("year", year), ("month", month), ("day", day)):
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            validation_error(f"{name} must be an integer, got {value!r}", InvalidDate)
            return False
    if not config.MIN_YEAR <= year <= config.MAX_YEAR:
        validation_error(
            f"Year {year} outside supported range "
            f"[{config.MIN_YEAR}, {config.MAX_YEAR}]", InvalidDate)
        return False
    if not 1 <= month <= 12:
        validation_error(f"Month must be in 1-12, got {month}", InvalidDate)
        return False
    n_days = days_in_month(year, month)
    if not 1 <= day <= n_days:
        validation_error(
            f"Day must be in 1-{n_days} for {year:04d}-{month:02d}, got {day}",
            InvalidDate)
        return False
    return True


def julian_day(year: int, month: int, day: int, validate: bool = True) -> int:
    """
    Julian Day number at noon of a Gregorian calendar date.

    January and February count as months 13 and 14 of the previous year.
    Floor division keeps the formula valid for negative years.

    Parameters
    ----------
    year, month, day : int
        Gregorian date
    validate : bool, optional
        Check the date with validate_date first (default True). Callers
        that already validated may skip it; the result for an invalid
        date is meaningless.

    Returns
    -------
    int
        Julian Day number

    Examples
    --------
    >>> julian_day(2000, 1, 1)
    2451545
    """
    if validate:
        validate_date(year, month, day)
    a = (14 - month) // 12
    y = year + 4800 - a
    m = month + 12*a - 3
    return (day + (153*m + 2)//5 + 365*y + y//4 - y//100 + y//400 - 32045)


def julian_centuries(jd: float) -> float:
    """Julian centuries elapsed since J2000.0 (negative before the epoch)"""
    return (jd - JD_J2000) / DAYS_PER_CENTURY


def centuries_from_date(year: int, month: int, day: int) -> float:
    """Shortcut for julian_centuries(julian_day(year, month, day))"""
    return julian_centuries(julian_day(year, month, day))


def unix_to_centuries(unix_time: float) -> float:
    """
    Julian centuries since J2000.0 for a UNIX timestamp.

    Parameters
    ----------
    unix_time : float
        Seconds since 1970-01-01T00:00:00 UTC (as returned by time.time())
    """
    return (unix_time - J2000_UNIX) / SECONDS_PER_DAY / DAYS_PER_CENTURY


def datetime_to_centuries(dt: datetime) -> float:
    """Julian centuries since J2000.0 for a datetime (naive values are taken as UTC)"""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return unix_to_centuries(dt.timestamp())
