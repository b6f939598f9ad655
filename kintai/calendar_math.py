"""Civil calendar arithmetic.

All dates are plain proleptic Gregorian dates in a single fixed civil
calendar (Japan has no daylight saving time), so ``datetime.date`` is
enough and no timezone handling is involved.
"""

import math
import re
from calendar import monthrange
from datetime import date, timedelta
from enum import Enum

from kintai.errors import InvalidDateError

_DATE_KEY_PATTERN = re.compile(r"^\s*(\d{4})-(\d{1,2})-(\d{1,2})\s*$")

# Sunday=0 .. Saturday=6
SUNDAY = 0
MONDAY = 1
SATURDAY = 6


class Equinox(str, Enum):
    """Kind of equinox."""

    VERNAL = "vernal"
    AUTUMNAL = "autumnal"


# (constant term, pre-1980 constant term, fallback outside 1900-2099)
_EQUINOX_TERMS = {
    Equinox.VERNAL: (20.8431, 20.8357, 20),
    Equinox.AUTUMNAL: (23.2488, 23.2588, 23),
}


def validate_date(year: int, month: int, day: int) -> date:
    """Return the date for (year, month, day) or raise InvalidDateError."""
    if not 1 <= month <= 12:
        msg = f"Month out of range: {year}-{month}-{day}"
        raise InvalidDateError(msg)
    try:
        return date(year, month, day)
    except ValueError as e:
        msg = f"Not a valid date: {year}-{month}-{day}"
        raise InvalidDateError(msg) from e


def weekday_of(year: int, month: int, day: int) -> int:
    """Weekday of a date with Sunday=0 and Saturday=6."""
    # date.weekday() is Monday=0
    return (validate_date(year, month, day).weekday() + 1) % 7


def nth_weekday_of_month(year: int, month: int, weekday: int, n: int) -> int:
    """
    Day of month of the n-th ``weekday`` (Sunday=0) in the month.

    The result may exceed the month length for large ``n``; callers only use
    n <= 4 for "happy Monday" rules.
    """
    first = weekday_of(year, month, 1)
    return 1 + (7 + weekday - first) % 7 + (n - 1) * 7


def days_in_month(year: int, month: int) -> int:
    """Number of days in the month."""
    if not 1 <= month <= 12:
        msg = f"Month out of range: {year}-{month}"
        raise InvalidDateError(msg)
    _, days = monthrange(year, month)
    return days


def add_days(year: int, month: int, day: int, delta: int) -> tuple[int, int, int]:
    """Move a date by ``delta`` days (may be negative)."""
    moved = validate_date(year, month, day) + timedelta(days=delta)
    return moved.year, moved.month, moved.day


def equinox_day(kind: Equinox, year: int) -> int:
    """
    Approximate day of March (vernal) or September (autumnal) of the equinox.

    Uses the usual polynomial approximation, valid for 1900-2099. Outside that
    range a fixed fallback is returned. This is an approximation and not an
    astronomical computation.
    """
    term, early_term, fallback = _EQUINOX_TERMS[kind]
    if year < 1900 or year > 2099:
        return fallback
    if year <= 1979:
        # int() truncates toward zero, which the pre-1980 formula relies on
        return math.floor(early_term + 0.242194 * (year - 1980) - int((year - 1983) / 4))
    return math.floor(term + 0.242194 * (year - 1980) - (year - 1980) // 4)


def date_key(year: int, month: int, day: int) -> str:
    """Canonical 'YYYY-MM-DD' key for a date."""
    validate_date(year, month, day)
    return f"{year:04d}-{month:02d}-{day:02d}"


def parse_date_key(key: str) -> tuple[int, int, int]:
    """Parse a date key (zero padding optional) into (year, month, day)."""
    match = _DATE_KEY_PATTERN.match(key)
    if not match:
        msg = f"Not a YYYY-MM-DD date: {key!r}"
        raise InvalidDateError(msg)
    year, month, day = (int(part) for part in match.groups())
    validate_date(year, month, day)
    return year, month, day


def normalize_date_key(key: str) -> str:
    """Normalize user input like '2025-9-1' to '2025-09-01'."""
    return date_key(*parse_date_key(key))
