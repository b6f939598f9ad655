"""Japanese public holiday calendar.

Holidays are resolved in three steps, first match wins:

1. primary holidays, defined directly by law (fixed dates, "happy Monday"
   rules, equinoxes and one-off imperial events);
2. substitute holidays (振替休日), the first non-holiday after a run of
   holidays that started on a Sunday;
3. citizen's holidays (国民の休日), a single day sandwiched between two
   primary holidays.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date
from functools import lru_cache

from kintai.calendar_math import (
    MONDAY,
    SUNDAY,
    Equinox,
    add_days,
    days_in_month,
    equinox_day,
    nth_weekday_of_month,
    validate_date,
    weekday_of,
)

SUBSTITUTE_HOLIDAY = "振替休日"
CITIZENS_HOLIDAY = "国民の休日"

SUBSTITUTE_HOLIDAY_SINCE = date(1973, 4, 12)
CITIZENS_HOLIDAY_SINCE = date(1985, 12, 27)

# A holiday run never exceeds a week
MAX_SUBSTITUTE_LOOKBACK = 7


@dataclass(frozen=True)
class HolidayRule:
    """A primary holiday: a name, a month and how to find the day in a given year."""

    name: str
    month: int
    day_of: Callable[[int], int]
    first_year: int | None = None
    last_year: int | None = None
    excluded_years: frozenset[int] = field(default_factory=frozenset)

    def applies_to(self, year: int) -> bool:
        """Check whether the rule is in force for the year."""
        if self.first_year is not None and year < self.first_year:
            return False
        if self.last_year is not None and year > self.last_year:
            return False
        return year not in self.excluded_years

    def matches(self, year: int, month: int, day: int) -> bool:
        """Check whether the rule puts a holiday on this date."""
        return month == self.month and self.applies_to(year) and self.day_of(year) == day


def fixed(name: str, month: int, day: int, **kwargs) -> HolidayRule:
    """Holiday on the same month/day every year."""
    return HolidayRule(name, month, lambda _year: day, **kwargs)


def nth_monday(name: str, month: int, n: int, **kwargs) -> HolidayRule:
    """Holiday on the n-th Monday of the month ("happy Monday")."""
    return HolidayRule(
        name, month, lambda year: nth_weekday_of_month(year, month, MONDAY, n), **kwargs
    )


def equinox(name: str, kind: Equinox) -> HolidayRule:
    """Holiday on the approximated equinox day."""
    month = 3 if kind == Equinox.VERNAL else 9
    return HolidayRule(name, month, lambda year: equinox_day(kind, year))


def one_off(name: str, year: int, month: int, day: int) -> HolidayRule:
    """Holiday that happens only once (relocations and imperial events)."""
    return fixed(name, month, day, first_year=year, last_year=year)


# Evaluated in order; if two rules ever matched the same date the first one wins.
PRIMARY_HOLIDAY_RULES: tuple[HolidayRule, ...] = (
    fixed("元日", 1, 1),
    fixed("成人の日", 1, 15, last_year=1999),
    nth_monday("成人の日", 1, 2, first_year=2000),
    fixed("建国記念の日", 2, 11, first_year=1967),
    fixed("天皇誕生日", 2, 23, first_year=2020),
    one_off("昭和天皇の大喪の礼", 1989, 2, 24),
    equinox("春分の日", Equinox.VERNAL),
    one_off("皇太子明仁親王の結婚の儀", 1959, 4, 10),
    fixed("天皇誕生日", 4, 29, first_year=1927, last_year=1988),
    fixed("みどりの日", 4, 29, first_year=1989, last_year=2006),
    fixed("昭和の日", 4, 29, first_year=2007),
    one_off("天皇の即位の日", 2019, 5, 1),
    fixed("憲法記念日", 5, 3),
    fixed("みどりの日", 5, 4, first_year=2007),
    fixed("こどもの日", 5, 5),
    one_off("皇太子徳仁親王の結婚の儀", 1993, 6, 9),
    fixed("海の日", 7, 20, first_year=1996, last_year=2002),
    nth_monday("海の日", 7, 3, first_year=2003, excluded_years=frozenset({2020, 2021})),
    one_off("海の日", 2020, 7, 23),
    one_off("海の日", 2021, 7, 22),
    one_off("スポーツの日", 2020, 7, 24),
    one_off("スポーツの日", 2021, 7, 23),
    fixed("山の日", 8, 11, first_year=2016, excluded_years=frozenset({2020, 2021})),
    one_off("山の日", 2020, 8, 10),
    one_off("山の日", 2021, 8, 8),
    fixed("敬老の日", 9, 15, first_year=1966, last_year=2002),
    nth_monday("敬老の日", 9, 3, first_year=2003),
    equinox("秋分の日", Equinox.AUTUMNAL),
    fixed("体育の日", 10, 10, first_year=1966, last_year=1999),
    nth_monday("体育の日", 10, 2, first_year=2000, last_year=2019),
    nth_monday("スポーツの日", 10, 2, first_year=2022),
    one_off("即位礼正殿の儀", 1990, 11, 12),
    one_off("即位礼正殿の儀", 2019, 10, 22),
    fixed("文化の日", 11, 3),
    fixed("勤労感謝の日", 11, 23),
    fixed("天皇誕生日", 12, 23, first_year=1989, last_year=2018),
)


@lru_cache(maxsize=4096)
def primary_holiday_name(year: int, month: int, day: int) -> str:
    """Name of the primary holiday on this date, or an empty string."""
    validate_date(year, month, day)
    for rule in PRIMARY_HOLIDAY_RULES:
        if rule.matches(year, month, day):
            return rule.name
    return ""


def citizens_holiday_name(year: int, month: int, day: int) -> str:
    """Citizen's holiday: a non-Sunday squeezed between two primary holidays."""
    if validate_date(year, month, day) < CITIZENS_HOLIDAY_SINCE:
        return ""
    if primary_holiday_name(year, month, day) or weekday_of(year, month, day) == SUNDAY:
        return ""
    if primary_holiday_name(*add_days(year, month, day, -1)) and primary_holiday_name(
        *add_days(year, month, day, 1)
    ):
        return CITIZENS_HOLIDAY
    return ""


def substitute_holiday_name(year: int, month: int, day: int) -> str:
    """
    Substitute holiday: the first non-holiday after a Sunday holiday.

    Walks back over the unbroken run of holidays (primary or citizen's) that
    precedes the date and checks whether it started on a Sunday primary
    holiday. The walk never looks further back than a week.
    """
    if validate_date(year, month, day) < SUBSTITUTE_HOLIDAY_SINCE:
        return ""
    if primary_holiday_name(year, month, day) or weekday_of(year, month, day) == SUNDAY:
        return ""

    for back in range(1, MAX_SUBSTITUTE_LOOKBACK + 1):
        prev = add_days(year, month, day, -back)
        primary = primary_holiday_name(*prev)
        if primary and weekday_of(*prev) == SUNDAY:
            return SUBSTITUTE_HOLIDAY
        if not primary and not citizens_holiday_name(*prev):
            break
    return ""


def holiday_name(year: int, month: int, day: int) -> str:
    """Name of the public holiday on this date, or an empty string."""
    return (
        primary_holiday_name(year, month, day)
        or substitute_holiday_name(year, month, day)
        or citizens_holiday_name(year, month, day)
    )


def is_holiday(year: int, month: int, day: int) -> bool:
    """Check if a date is a Japanese public holiday."""
    return bool(holiday_name(year, month, day))


def holidays_in_month(year: int, month: int) -> list[tuple[int, str]]:
    """All public holidays of a month as (day, name) pairs."""
    holidays = []
    for day in range(1, days_in_month(year, month) + 1):
        name = holiday_name(year, month, day)
        if name:
            holidays.append((day, name))
    return holidays
