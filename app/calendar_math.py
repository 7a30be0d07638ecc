# Calendar arithmetic used by the recurrence generator

import calendar
import datetime
from typing import Tuple


def date_parts(date_str: str) -> Tuple[int, int, int]:
    """Split a 'YYYY-MM-DD' string into (year, month, day) integers"""
    y, m, d = (int(v) for v in date_str.split("-"))
    return y, m, d


def is_leap_year(year: int) -> bool:
    """Gregorian leap year test"""
    return calendar.isleap(year)


def days_in_month(year: int, month: int) -> int:
    """Number of days in the given month (28 to 31)"""
    return calendar.monthrange(year, month)[1]


def date_key(year: int, month: int, day: int) -> int:
    """
    Comparable integer key for a calendar date.

    The key is built positionally (YYYYMMDD) so it is also defined for
    nominal dates that do not exist, e.g. (2025, 4, 31). Such keys still sort
    after the last real day of their month and before the next month.

    Args:
        year: Four digit year
        month: Month 1-12
        day: Day of month, not checked against the month

    Returns:
        int: Key that orders like the dates it represents
    """
    return year * 10000 + month * 100 + day


def format_iso(year: int, month: int, day: int) -> str:
    """Zero padded 'YYYY-MM-DD', no validation"""
    return f"{year}-{month:02d}-{day:02d}"


def add_days(date_str: str, days: int) -> str:
    """Shift a valid 'YYYY-MM-DD' date by a number of days"""
    shifted = datetime.date(*date_parts(date_str)) + datetime.timedelta(days=days)
    return shifted.isoformat()


def key_to_iso(key: int) -> str:
    """'YYYY-MM-DD' for a date_key, the inverse of date_key for real dates"""
    return format_iso(key // 10000, key // 100 % 100, key % 100)


def days_between(start: str, end: str) -> int:
    """Whole days from start to end, negative when end is earlier"""
    return (datetime.date(*date_parts(end)) - datetime.date(*date_parts(start))).days
