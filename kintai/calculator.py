"""Payroll calculation for days and months."""

from collections.abc import Callable, Container
from decimal import ROUND_HALF_UP, Decimal

from kintai.calendar_math import date_key, days_in_month
from kintai.classifier import classify_day
from kintai.config import DEFAULT_SETTINGS, Settings
from kintai.models import DayMeta, DayRecord, MonthlySummary, PayrollResult, WorkKind

RecordLookup = Callable[[str], DayRecord]


def worked_minutes(record: DayRecord, settings: Settings = DEFAULT_SETTINGS) -> int:
    """Clock-out minus clock-in minus the unpaid break, never negative."""
    if record.start is None or record.end is None:
        return 0
    return max(0, (record.end - record.start).minutes - settings.break_minutes)


def compute_payroll(
    record: DayRecord, meta: DayMeta, settings: Settings = DEFAULT_SETTINGS
) -> PayrollResult:
    """
    Compute worked minutes and pay for a day.

    - Paid leave: a fixed standard day of regular pay, clock times ignored.
    - Holiday work: everything worked is paid at the overtime rate.
    - Normal: up to the standard day is regular, the rest is overtime.

    Pay is not rounded here; rounding happens once per month.
    """
    hourly = settings.wage_yen
    overtime_hourly = settings.wage_yen * settings.overtime_multiplier

    if record.kind == WorkKind.PAID:
        standard = settings.standard_work_minutes
        return PayrollResult(
            work_min=standard,
            regular_min=standard,
            overtime_min=0,
            regular_pay=standard * hourly / 60,
            overtime_pay=0.0,
        )

    work_min = worked_minutes(record, settings)

    if record.kind == WorkKind.HOLIDAY_WORK:
        return PayrollResult(
            work_min=work_min,
            regular_min=0,
            overtime_min=work_min,
            regular_pay=0.0,
            overtime_pay=work_min * overtime_hourly / 60,
        )

    regular_min = min(work_min, settings.standard_work_minutes)
    overtime_min = max(0, work_min - settings.standard_work_minutes)
    return PayrollResult(
        work_min=work_min,
        regular_min=regular_min,
        overtime_min=overtime_min,
        regular_pay=regular_min * hourly / 60,
        overtime_pay=overtime_min * overtime_hourly / 60,
    )


def round_yen(amount: float) -> int:
    """Round to whole yen, halves up."""
    return int(Decimal(repr(amount)).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def summarize_month(
    year: int,
    month: int,
    record_lookup: RecordLookup,
    company_holidays: Container[str] = frozenset(),
    settings: Settings = DEFAULT_SETTINGS,
) -> MonthlySummary:
    """
    Aggregate a whole month.

    Rules:
    - Planned working days are ordinary weekdays (not weekend, public holiday
      or company holiday). Paid leave on such a day still counts as planned.
    - Actual working days are paid leave days plus days with both clock times.
    - Daily pay is summed unrounded; regular and overtime pay are each rounded
      once at the end and the total is their sum, so it always matches the
      two figures shown next to it.
    """
    planned_working_days = 0
    actual_working_days = 0
    total_work_min = 0
    regular_min = 0
    overtime_min = 0
    regular_pay = 0.0
    overtime_pay = 0.0

    for day in range(1, days_in_month(year, month) + 1):
        meta = classify_day(year, month, day, company_holidays)
        record = record_lookup(date_key(year, month, day))

        if not meta.is_day_off:
            planned_working_days += 1
        if record.kind == WorkKind.PAID or record.has_clock_times:
            actual_working_days += 1

        payroll = compute_payroll(record, meta, settings)
        total_work_min += payroll.work_min
        regular_min += payroll.regular_min
        overtime_min += payroll.overtime_min
        regular_pay += payroll.regular_pay
        overtime_pay += payroll.overtime_pay

    rounded_regular = round_yen(regular_pay)
    rounded_overtime = round_yen(overtime_pay)
    return MonthlySummary(
        year=year,
        month=month,
        planned_working_days=planned_working_days,
        actual_working_days=actual_working_days,
        total_work_min=total_work_min,
        regular_min=regular_min,
        overtime_min=overtime_min,
        regular_pay=rounded_regular,
        overtime_pay=rounded_overtime,
        total_pay=rounded_regular + rounded_overtime,
    )
