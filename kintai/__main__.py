"""Main entry point for kintai."""

import argparse
import logging
import sys
from datetime import datetime
from functools import partial
from pathlib import Path
from zoneinfo import ZoneInfo

from rich.console import Console

from kintai import records
from kintai.calculator import summarize_month
from kintai.calendar_math import normalize_date_key, parse_date_key
from kintai.classifier import classify_day
from kintai.config import DEFAULT_CONFIG_PATH, Settings
from kintai.database import DEFAULT_DB_PATH, RecordDatabase
from kintai.duration import Duration
from kintai.errors import ConfigError, InvalidDateError, KintaiError
from kintai.judgment import compute_judgment
from kintai.models import DayRecord, WorkKind
from kintai.report import build_month_table, build_summary_table

JST = ZoneInfo("Asia/Tokyo")  # Japan Standard Time timezone

logger = logging.getLogger(__name__)
console = Console()


def configure(path: Path = DEFAULT_CONFIG_PATH) -> None:
    """Interactive configuration setup."""
    try:
        defaults = Settings.resolve(path)
    except ConfigError as e:
        logger.warning("Ignoring unreadable settings: %s", e)
        defaults = Settings()
    # Using sys.stdout.write for interactive prompts is allowed
    sys.stdout.write("kintai Configuration\n")
    sys.stdout.write("=" * 40 + "\n")
    wage = input(f"Hourly wage (yen) [{defaults.wage_yen}]: ") or str(defaults.wage_yen)
    break_minutes = input(f"Break minutes [{defaults.break_minutes}]: ") or str(
        defaults.break_minutes
    )
    start = input(f"Standard start [{defaults.standard_start}]: ") or str(defaults.standard_start)
    end = input(f"Standard end [{defaults.standard_end}]: ") or str(defaults.standard_end)

    try:
        settings = Settings(
            wage_yen=int(wage),
            break_minutes=int(break_minutes),
            standard_start=Duration.parse(start),
            standard_end=Duration.parse(end),
        )
    except ValueError as e:
        raise KintaiError(str(e)) from e
    settings.save(path)
    sys.stdout.write("\n✓ Configuration saved successfully!\n")
    sys.stdout.write(f"Config file: {path}\n")


def _today_key() -> str:
    return datetime.now(JST).date().isoformat()


def _parse_month(value: str | None) -> tuple[int, int]:
    """Parse 'YYYY-MM' (or nothing, meaning the current month)."""
    if not value:
        today = datetime.now(JST).date()
        return today.year, today.month
    year, month, _ = parse_date_key(f"{value}-01")
    return year, month


def _parse_time(value: str | None) -> Duration | None:
    return Duration.parse(value) if value else None


def show_month(db: RecordDatabase, settings: Settings, month_arg: str | None) -> None:
    """Print the month table and summary."""
    year, month = _parse_month(month_arg)
    company_holidays = db.company_holidays()
    stored = db.get_records_for_month(year, month)

    def lookup(key: str) -> DayRecord:
        return stored.get(key, DayRecord())

    console.print(build_month_table(year, month, lookup, company_holidays, settings))
    summary = summarize_month(year, month, lookup, company_holidays, settings)
    console.print(build_summary_table(summary))


def edit_day(db: RecordDatabase, settings: Settings, args: argparse.Namespace) -> None:
    """Apply a record edit for one day and print the result."""
    key = normalize_date_key(args.date or _today_key())
    meta = classify_day(*parse_date_key(key), db.company_holidays())

    if args.command in ("in", "out"):
        time = _parse_time(args.time)
        if args.command == "in":
            edit = partial(records.set_start, start=time, meta=meta)
            if time is None:
                edit = partial(records.punch_in, meta=meta, settings=settings)
        else:
            edit = partial(records.set_end, end=time, meta=meta)
            if time is None:
                edit = partial(records.punch_out, meta=meta, settings=settings)
    elif args.command == "clear":
        edit = records.clear_times
    elif args.command == "kind":
        edit = partial(records.set_kind, kind=WorkKind(args.kind), meta=meta)
    else:
        edit = partial(records.set_note, note=args.text)

    record = db.update_record(key, edit)

    judgment = compute_judgment(record, meta, settings)
    start = record.start if record.start is not None else "--:--"
    end = record.end if record.end is not None else "--:--"
    console.print(
        f"{key} {meta.badge_text} ({record.kind.value}) {start}-{end} {judgment}", markup=False
    )


def manage_holidays(db: RecordDatabase, args: argparse.Namespace) -> None:
    """Add, remove or list company holidays."""
    if args.action == "add":
        if not args.date:
            msg = "A date is required"
            raise InvalidDateError(msg)
        db.add_company_holiday(args.date)
    elif args.action == "remove":
        if not args.date:
            msg = "A date is required"
            raise InvalidDateError(msg)
        db.remove_company_holiday(args.date)

    holidays = sorted(db.company_holidays())
    if not holidays:
        console.print("会社休日は未登録です。")
    for key in holidays:
        console.print(key)


def reset(db: RecordDatabase) -> None:
    """Delete all data after confirmation."""
    answer = input("全データを削除します。よろしいですか？ [y/N]: ")
    if answer.strip().lower() != "y":
        return
    db.clear_all()
    console.print("削除しました。")


def build_parser() -> argparse.ArgumentParser:
    """Command line parser."""
    parser = argparse.ArgumentParser(prog="kintai", description="Attendance and payroll")
    parser.add_argument("--db", type=Path, default=DEFAULT_DB_PATH, help="database file")
    parser.add_argument("--config", type=Path, default=DEFAULT_CONFIG_PATH, help="config file")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = parser.add_subparsers(dest="command")

    month = sub.add_parser("month", help="show a month (default)")
    month.add_argument("month", nargs="?", help="YYYY-MM")

    for name, help_text in (("in", "clock in"), ("out", "clock out")):
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument("time", nargs="?", help="HH:MM (default: standard time)")
        cmd.add_argument("-d", "--date", help="YYYY-MM-DD (default: today)")

    clear = sub.add_parser("clear", help="clear clock times")
    clear.add_argument("-d", "--date", help="YYYY-MM-DD (default: today)")

    kind = sub.add_parser("kind", help="set the work kind")
    kind.add_argument("kind", choices=[k.value for k in WorkKind])
    kind.add_argument("-d", "--date", help="YYYY-MM-DD (default: today)")

    note = sub.add_parser("note", help="set the note")
    note.add_argument("text")
    note.add_argument("-d", "--date", help="YYYY-MM-DD (default: today)")

    holiday = sub.add_parser("holiday", help="manage company holidays")
    holiday.add_argument("action", choices=["add", "remove", "list"])
    holiday.add_argument("date", nargs="?")

    sub.add_parser("config", help="configure wage and shift")
    sub.add_parser("reset", help="delete all data")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == "config":
            configure(args.config)
            return

        settings = Settings.resolve(args.config)
        db = RecordDatabase(args.db)
        logger.debug("Using database %s and settings %s", args.db, settings)

        if args.command in (None, "month"):
            show_month(db, settings, getattr(args, "month", None))
        elif args.command in ("in", "out", "clear", "kind", "note"):
            edit_day(db, settings, args)
        elif args.command == "holiday":
            manage_holidays(db, args)
        elif args.command == "reset":
            reset(db)
    except KintaiError as e:
        logger.debug("Command failed", exc_info=True)
        console.print(f"[bold red]Error:[/bold red] {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
