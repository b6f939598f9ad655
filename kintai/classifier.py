"""Per-day calendar classification."""

from collections.abc import Container

from kintai.calendar_math import SATURDAY, SUNDAY, date_key, weekday_of
from kintai.holidays import holiday_name
from kintai.models import DayMeta

WEEKDAY_LABELS = ("日", "月", "火", "水", "木", "金", "土")

COMPANY_HOLIDAY_BADGE = "会社休日"
WEEKDAY_BADGE = "平日"


def classify_day(
    year: int, month: int, day: int, company_holidays: Container[str] = frozenset()
) -> DayMeta:
    """
    Describe a day: weekday, public holiday, company holiday and badge text.

    The badge shows the most specific thing about the day, in this order:
    company holiday, public holiday name, Sunday, Saturday, plain weekday.
    """
    weekday = weekday_of(year, month, day)
    key = date_key(year, month, day)
    name = holiday_name(year, month, day)
    is_company_holiday = key in company_holidays

    if is_company_holiday:
        badge_text = COMPANY_HOLIDAY_BADGE
    elif name:
        badge_text = name
    elif weekday in (SUNDAY, SATURDAY):
        badge_text = WEEKDAY_LABELS[weekday]
    else:
        badge_text = WEEKDAY_BADGE

    return DayMeta(
        date_key=key,
        weekday=weekday,
        weekday_label=WEEKDAY_LABELS[weekday],
        is_holiday=bool(name),
        holiday_name=name,
        is_company_holiday=is_company_holiday,
        is_weekend=weekday in (SUNDAY, SATURDAY),
        badge_text=badge_text,
    )
