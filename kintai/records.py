"""Day record lifecycle: reading stored records and applying edits.

Every function returns a new ``DayRecord``; nothing is mutated in place.
"""

from collections.abc import Mapping
from dataclasses import replace

from kintai.config import DEFAULT_SETTINGS, Settings
from kintai.duration import Duration
from kintai.errors import TimesNotAllowedError
from kintai.models import DayMeta, DayRecord, WorkKind


def sanitize(raw: Mapping[str, object] | None) -> DayRecord:
    """
    Build a record from stored data, forgiving anything odd.

    Unknown kinds become NORMAL, malformed times are dropped and paid leave
    never carries clock times.
    """
    if not raw:
        return DayRecord()

    kind = WorkKind.coerce(raw.get("kind"))
    start = Duration.try_parse(raw.get("start"))
    end = Duration.try_parse(raw.get("end"))
    note = raw.get("note")
    judged = bool(raw.get("judged"))

    if kind == WorkKind.PAID:
        start = end = None
        judged = False
    elif kind == WorkKind.HOLIDAY_WORK:
        judged = False

    return DayRecord(
        kind=kind,
        start=start,
        end=end,
        note=note if isinstance(note, str) else "",
        judged=judged,
    )


def can_input_times(record: DayRecord, meta: DayMeta) -> bool:
    """Clock times go on holiday work, or on normal work on an ordinary weekday."""
    if record.kind == WorkKind.HOLIDAY_WORK:
        return True
    return record.kind == WorkKind.NORMAL and not meta.is_day_off


def can_punch(record: DayRecord, meta: DayMeta) -> bool:
    """The standard-time buttons are only offered for normal work on an ordinary weekday."""
    return record.kind == WorkKind.NORMAL and not meta.is_day_off


def _with_times(record: DayRecord, start: Duration | None, end: Duration | None) -> DayRecord:
    judged = record.kind == WorkKind.NORMAL and (start is not None or end is not None)
    return replace(record, start=start, end=end, judged=judged)


def _check_times_allowed(record: DayRecord, meta: DayMeta, time: Duration | None) -> None:
    if time is not None and not can_input_times(record, meta):
        msg = f"{meta.date_key} is a day off ({meta.badge_text}); switch to holidayWork first"
        raise TimesNotAllowedError(msg)


def set_start(record: DayRecord, start: Duration | None, meta: DayMeta) -> DayRecord:
    """Set or clear the clock-in time."""
    if record.kind == WorkKind.PAID:
        return record
    _check_times_allowed(record, meta, start)
    return _with_times(record, start, record.end)


def set_end(record: DayRecord, end: Duration | None, meta: DayMeta) -> DayRecord:
    """Set or clear the clock-out time."""
    if record.kind == WorkKind.PAID:
        return record
    _check_times_allowed(record, meta, end)
    return _with_times(record, record.start, end)


def punch_in(
    record: DayRecord, meta: DayMeta, settings: Settings = DEFAULT_SETTINGS
) -> DayRecord:
    """Clock in at the standard start time."""
    if not can_punch(record, meta):
        msg = f"No standard clock-in for {record.kind.value} on {meta.date_key}"
        raise TimesNotAllowedError(msg)
    return set_start(record, settings.standard_start, meta)


def punch_out(
    record: DayRecord, meta: DayMeta, settings: Settings = DEFAULT_SETTINGS
) -> DayRecord:
    """Clock out at the standard end time."""
    if not can_punch(record, meta):
        msg = f"No standard clock-out for {record.kind.value} on {meta.date_key}"
        raise TimesNotAllowedError(msg)
    return set_end(record, settings.standard_end, meta)


def set_kind(record: DayRecord, kind: WorkKind, meta: DayMeta) -> DayRecord:
    """
    Change the work kind and tidy up the fields that no longer apply.

    Paid leave drops both clock times. Holiday work keeps the times but is
    never judged. Going back to normal on a day off drops the times, on an
    ordinary weekday they are kept.
    """
    if kind == WorkKind.PAID:
        return replace(record, kind=kind, start=None, end=None, judged=False)
    if kind == WorkKind.HOLIDAY_WORK:
        return replace(record, kind=kind, judged=False)
    if meta.is_day_off:
        return replace(record, kind=kind, start=None, end=None, judged=False)
    return replace(record, kind=kind)


def set_note(record: DayRecord, note: str) -> DayRecord:
    """Replace the free-text note."""
    return replace(record, note=note)


def clear_times(record: DayRecord) -> DayRecord:
    """Drop both clock times, which also resets the judgment."""
    if record.kind == WorkKind.PAID:
        return record
    return _with_times(record, None, None)
