"""Attendance judgment labels (late, early leave, overtime, ...)."""

from kintai.config import DEFAULT_SETTINGS, Settings
from kintai.models import DayMeta, DayRecord, WorkKind

LATE = "遅刻"
EARLY_ARRIVAL = "早出"
EARLY_LEAVE = "早退"
OVERTIME = "残業"
ON_TIME = "定時"

SEPARATOR = "・"

WARNING_TAGS = (LATE, EARLY_LEAVE, OVERTIME)


def compute_judgment(
    record: DayRecord, meta: DayMeta, settings: Settings = DEFAULT_SETTINGS
) -> str:
    """
    Compare clock times with the standard shift.

    Returns an empty label for holiday work, paid leave, records not yet
    judged and records without any clock time.
    """
    if record.kind in (WorkKind.HOLIDAY_WORK, WorkKind.PAID) or not record.judged:
        return ""
    if record.start is None and record.end is None:
        return ""

    tags = []
    if record.start is not None:
        if record.start > settings.standard_start:
            tags.append(LATE)
        elif record.start < settings.standard_start:
            tags.append(EARLY_ARRIVAL)
    if record.end is not None:
        if record.end < settings.standard_end:
            tags.append(EARLY_LEAVE)
        elif record.end > settings.standard_end:
            tags.append(OVERTIME)

    if not tags and record.has_clock_times:
        return ON_TIME
    return SEPARATOR.join(tags)


def is_warning(label: str) -> bool:
    """Labels mentioning lateness, early leave or overtime are shown as warnings."""
    return any(tag in label for tag in WARNING_TAGS)
