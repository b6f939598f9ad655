"""Rich tables for a month of attendance."""

from collections.abc import Container

from rich.table import Table
from rich.text import Text

from kintai.calculator import RecordLookup, compute_payroll
from kintai.calendar_math import SATURDAY, SUNDAY, date_key, days_in_month
from kintai.classifier import classify_day
from kintai.config import DEFAULT_SETTINGS, Settings
from kintai.duration import Duration
from kintai.judgment import compute_judgment, is_warning
from kintai.models import DayMeta, DayRecord, MonthlySummary, WorkKind

KIND_LABELS = {
    WorkKind.NORMAL: "",
    WorkKind.PAID: "有給",
    WorkKind.HOLIDAY_WORK: "休日出勤",
}


def build_month_table(
    year: int,
    month: int,
    record_lookup: RecordLookup,
    company_holidays: Container[str] = frozenset(),
    settings: Settings = DEFAULT_SETTINGS,
) -> Table:
    """Table with one row per day of the month."""
    table = Table(title=f"{year}年{month}月", expand=True)
    table.add_column("日付", width=9)
    table.add_column("区分", width=12)
    table.add_column("出勤", width=6)
    table.add_column("退勤", width=6)
    table.add_column("判定", width=10)
    table.add_column("実働", width=6)
    table.add_column("備考")

    for day in range(1, days_in_month(year, month) + 1):
        meta = classify_day(year, month, day, company_holidays)
        record = record_lookup(date_key(year, month, day))
        payroll = compute_payroll(record, meta, settings)
        judgment = compute_judgment(record, meta, settings)

        style = _row_style(meta)
        badge = meta.badge_text
        if KIND_LABELS[record.kind]:
            badge = f"{badge} {KIND_LABELS[record.kind]}"

        table.add_row(
            Text(f"{month}/{day} {meta.weekday_label}", style=style),
            Text(badge, style=style),
            _format_time(record, record.start),
            _format_time(record, record.end),
            Text(judgment, style="bold red" if is_warning(judgment) else "bold blue"),
            Duration(payroll.work_min).to_hours() if payroll.work_min > 0 else "",
            record.note,
        )

    return table


def build_summary_table(summary: MonthlySummary) -> Table:
    """Two-column table with the month totals."""
    table = Table(title="月次集計", show_header=False)
    table.add_column("項目", style="bold")
    table.add_column("値", justify="right")

    table.add_row(
        "実働日数 / 予定稼働日数",
        f"{summary.actual_working_days}/{summary.planned_working_days}",
    )
    table.add_row("総勤務時間", summary.total_work_hours)
    table.add_row("定時勤務時間", Duration(summary.regular_min).to_hours())
    table.add_row("残業時間", Duration(summary.overtime_min).to_hours())
    table.add_row("定時給料", format_yen(summary.regular_pay))
    table.add_row("残業代", format_yen(summary.overtime_pay))
    table.add_row("総支給額", format_yen(summary.total_pay))
    return table


def format_yen(amount: int) -> str:
    """Format an amount like '12,000円'."""
    return f"{amount:,}円"


def _row_style(meta: DayMeta) -> str:
    if meta.is_holiday or meta.is_company_holiday or meta.weekday == SUNDAY:
        return "red"
    if meta.weekday == SATURDAY:
        return "blue"
    return ""


def _format_time(record: DayRecord, value: Duration | None) -> str:
    if record.kind == WorkKind.PAID:
        return "(有給)"
    return str(value) if value is not None else ""
